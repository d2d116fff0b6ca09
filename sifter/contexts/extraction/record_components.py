"""
Record Component Data Structures

Defines data classes for the parts of an extracted résumé record: contact
details and the entries of the experience, project and education sections.
Extractors produce these; ResumeRecord assembles them.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class ContactBundle:
    """
    Contact details from the header's delimited contact line.

    Each field is populated at most once, or left as None when no token
    carried its signature. Location is never derived from the contact line.
    """

    email: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    linkedin: Optional[str] = None
    github: Optional[str] = None
    location: Optional[str] = None


@dataclass
class ExperienceEntry:
    """
    One work-experience entry.

    Attributes:
        company: Text before the duration on the entry's first line
        role: Text before the last comma of the second line
        duration: Date range starting at the first month name ("" if none)
        location: Text after the last comma of the second line ("" if none)
        bullets: Achievement lines, continuation lines folded in
    """

    company: str = ""
    role: str = ""
    duration: str = ""
    location: str = ""
    bullets: list[str] = field(default_factory=list)


@dataclass
class ProjectEntry:
    """
    One project entry.

    Attributes:
        name: Project name (placeholder "Project" when the block had none)
        description: Freeform lines joined with single spaces
        tech: Technology tokens, deduplicated, first-seen order
        link: URL from the block's last link line
        bullets: Bullet lines, continuation lines folded in
    """

    name: str
    description: str = ""
    tech: list[str] = field(default_factory=list)
    link: Optional[str] = None
    bullets: list[str] = field(default_factory=list)


@dataclass
class EducationEntry:
    """
    One education entry (school line + degree line).
    """

    school: str = ""
    degree: str = ""
    duration: str = ""
    location: str = ""
