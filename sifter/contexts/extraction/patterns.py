"""
Reusable patterns and lookup tables for résumé text extraction.

This module provides the section labels, date tokens, contact signatures and
technology vocabulary used across the extraction context.

Pattern classes follow the project convention:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Helper functions that use these patterns

Lookup tables (months, technology keywords) are plain tuples of regex
fragments. They are bundled into an ExtractionVocabulary that extractors
receive as an argument, so callers can extend them without touching the
matching code.
"""

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

# =============================================================================
# BULLET GLYPH
# =============================================================================

# Bullet marker produced by the document-to-text conversion stage
BULLET_GLYPH = "•"


# =============================================================================
# SECTION LABEL PATTERNS
# =============================================================================


@dataclass(frozen=True)
class SectionLabelPatterns:
    """
    Regex fragments for recognized résumé section headers.

    Each fragment is anchored to a whole trimmed line by the segmenter,
    so body text that merely mentions "summary" never opens a section.
    """

    SUMMARY: str = r"(?:summary|objective)"
    EDUCATION: str = r"education"
    # "Experience" / "Professional Experience"
    EXPERIENCE: str = r"(?:professional\s+)?experience"
    # "Skills" / "Technical Skills"
    SKILLS: str = r"(?:technical\s+)?skills"
    PROJECTS: str = r"projects"
    CERTIFICATIONS: str = r"certifications"


# Section key -> label fragment, in the fixed lookup order
SECTION_LABELS = (
    ("summary", SectionLabelPatterns.SUMMARY),
    ("education", SectionLabelPatterns.EDUCATION),
    ("experience", SectionLabelPatterns.EXPERIENCE),
    ("skills", SectionLabelPatterns.SKILLS),
    ("projects", SectionLabelPatterns.PROJECTS),
    ("certifications", SectionLabelPatterns.CERTIFICATIONS),
)


# =============================================================================
# DATE PATTERNS
# =============================================================================

MONTH_NAMES = (
    r"Jan(?:uary)?",
    r"Feb(?:ruary)?",
    r"Mar(?:ch)?",
    r"Apr(?:il)?",
    r"May",
    r"Jun(?:e)?",
    r"Jul(?:y)?",
    r"Aug(?:ust)?",
    r"Sep(?:t(?:ember)?)?",
    r"Oct(?:ober)?",
    r"Nov(?:ember)?",
    r"Dec(?:ember)?",
)


@dataclass(frozen=True)
class DatePatterns:
    """
    Regex patterns for date-like tokens in experience and education lines.
    """

    # A plausible calendar year or the open-ended "Present" marker
    YEAR_OR_PRESENT: re.Pattern = re.compile(r"\b(?:19|20)\d{2}\b|\bPresent\b")

    # Any letter (entry start lines must carry some text besides dates)
    HAS_LETTER: re.Pattern = re.compile(r"[A-Za-z]")


# =============================================================================
# CONTACT PATTERNS
# =============================================================================


@dataclass(frozen=True)
class ContactPatterns:
    """
    Content signatures for classifying tokens of the contact line.
    """

    CONTACT_DELIMITER: str = "|"

    EMAIL_MARKER: str = "@"

    # Digit run allowing common separators: "+1 (555) 123-4567", "555.123.4567"
    PHONE_RUN: re.Pattern = re.compile(r"\+?\(?\d[\d\s().-]*\d")
    MIN_PHONE_DIGITS: int = 8

    LINKEDIN: re.Pattern = re.compile(r"linkedin\.com", re.IGNORECASE)
    GITHUB: re.Pattern = re.compile(r"github\.com", re.IGNORECASE)

    # Domain-like: at least one dot followed by a letter-only TLD
    DOMAIN: re.Pattern = re.compile(r"(?:[A-Za-z0-9-]+\.)+[A-Za-z]{2,}")


# =============================================================================
# PROJECT PATTERNS
# =============================================================================


@dataclass(frozen=True)
class ProjectPatterns:
    """
    Patterns for the project section state machine.
    """

    # Closes the section: everything after is a list of minor projects
    OTHERS_MARKER: re.Pattern = re.compile(r"^others$", re.IGNORECASE)

    # "Name | Tech, Tech"
    HEADER_DELIMITER: str = "|"

    URL: re.Pattern = re.compile(r"https?://\S+", re.IGNORECASE)

    TERMINAL_PUNCTUATION: re.Pattern = re.compile(r"[.!?]$")
    MAX_TECH_LINE_WORDS: int = 8

    TECH_SEPARATORS: re.Pattern = re.compile(r"[,/|]")

    # Name given to an entry opened by content before any "Name | Tech" line
    PLACEHOLDER_NAME: str = "Project"


# =============================================================================
# SKILL PATTERNS
# =============================================================================


@dataclass(frozen=True)
class SkillPatterns:
    """
    Patterns for "Category: a, b, c" skill lines.
    """

    CATEGORY_LINE: re.Pattern = re.compile(r"^([A-Za-z ]+):\s*(.*)$")
    SEPARATORS: re.Pattern = re.compile(r"[,/]")


# Runs of two or more spaces are column gaps left over from the PDF layout
COLUMN_GAP = re.compile(r"\s{2,}")


# =============================================================================
# EDUCATION PATTERNS
# =============================================================================

# Trailing comma fragments up to this length ("CA", "NY") pull in the word
# before the comma to form "City, ST"
SHORT_LOCATION_FRAGMENT = 3


# =============================================================================
# TECHNOLOGY VOCABULARY
# =============================================================================

TECH_KEYWORDS = (
    r"React",
    r"Next",
    r"Node",
    r"Type\s*Script",
    r"Tailwind",
    r"Python",
    r"AWS",
    r"GCP",
    r"Docker",
    r"Kubernetes",
    r"Postgres",
    r"MongoDB",
    r"Java",
    r"Spring\s*Boot",
    r"JavaScript",
    r"C\+\+",
    r"C#",
    r"SFML",
    r"Terraform",
    r"Prometheus",
    r"Grafana",
    r"Jenkins",
    r"CI",
    r"CD",
    r"Microservices",
)


@lru_cache(maxsize=None)
def compile_word_alternation(fragments: tuple, suffix: str = "") -> re.Pattern:
    """
    Compile a case-insensitive alternation of regex fragments.

    Word edges are enforced with letter lookarounds rather than \\b so that
    fragments ending in symbols (C++, C#) and months glued to a year
    ("Jan2020") still match.

    Args:
        fragments: Regex fragments to join with "|"
        suffix: Extra pattern appended inside the match (e.g. a year)

    Returns:
        Compiled pattern
    """
    alternation = "|".join(fragments)
    return re.compile(rf"(?<![A-Za-z])(?:{alternation})(?![A-Za-z]){suffix}", re.IGNORECASE)


@dataclass(frozen=True)
class ExtractionVocabulary:
    """
    Lookup tables injected into the extractors.

    Attributes:
        tech_keywords: Regex fragments naming technologies (tech-only lines)
        months: Regex fragments naming months (duration splitting)
        bullet_glyph: Marker character for list items
    """

    tech_keywords: tuple = TECH_KEYWORDS
    months: tuple = MONTH_NAMES
    bullet_glyph: str = BULLET_GLYPH

    @property
    def tech_pattern(self) -> re.Pattern:
        return compile_word_alternation(self.tech_keywords)

    @property
    def month_pattern(self) -> re.Pattern:
        return compile_word_alternation(self.months)

    @property
    def month_year_pattern(self) -> re.Pattern:
        """Month token directly followed by a 4-digit year: "Aug. 2018", "May 2022"."""
        return compile_word_alternation(self.months, suffix=r"\.?\s*\d{4}\b")


DEFAULT_VOCABULARY = ExtractionVocabulary()


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================


@lru_cache(maxsize=None)
def _anchored_label(fragment: str) -> re.Pattern:
    return re.compile(rf"^{fragment}:?$", re.IGNORECASE)


def match_section_label(line: str) -> Optional[str]:
    """
    Match a trimmed line against the section labels.

    Args:
        line: A single line of text

    Returns:
        Section key (e.g. "experience"), or None if the line is not a header
    """
    stripped = line.strip()
    for key, fragment in SECTION_LABELS:
        if _anchored_label(fragment).match(stripped):
            return key
    return None


def is_section_label(text: str) -> bool:
    """Check if text is exactly one of the recognized section labels."""
    return match_section_label(text) is not None
