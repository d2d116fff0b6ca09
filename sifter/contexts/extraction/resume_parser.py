"""
Résumé text parsing for the Extraction context.

Runs the extraction pipeline over one flattened text blob:
normalize -> segment -> header + per-section extractors.

This module has no knowledge of ResumeRecord - it returns raw parsed data
that ResumeRecord.from_text() uses to construct instances.

A section missing from the document yields None for its field, while a
section that is present but yields nothing gives an empty value, so
consumers can tell "not on the document" apart from "empty".
"""

from dataclasses import dataclass, field
from typing import Optional, Union

from sifter.contexts.extraction.education import extract_education
from sifter.contexts.extraction.experience import extract_experience
from sifter.contexts.extraction.header_parser import HeaderInfo, extract_header
from sifter.contexts.extraction.lists import extract_list
from sifter.contexts.extraction.logger import _log_debug
from sifter.contexts.extraction.normalizer import content_lines, normalize_lines
from sifter.contexts.extraction.patterns import DEFAULT_VOCABULARY, ExtractionVocabulary
from sifter.contexts.extraction.projects import extract_projects
from sifter.contexts.extraction.record_components import (
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
)
from sifter.contexts.extraction.segmenter import SectionRegions, segment_sections
from sifter.contexts.extraction.skills import extract_skills


@dataclass
class ParsedResumeData:
    """
    Raw parsed résumé data.

    This is the intermediate form between raw text and ResumeRecord.
    """

    raw_text: str
    regions: SectionRegions
    header: HeaderInfo = field(default_factory=HeaderInfo)
    summary: Optional[str] = None
    skills: Optional[Union[dict[str, list[str]], list[str]]] = None
    experience: Optional[list[ExperienceEntry]] = None
    projects: Optional[list[ProjectEntry]] = None
    education: Optional[list[EducationEntry]] = None
    certifications: Optional[list[str]] = None
    warnings: list[str] = field(default_factory=list)


def extract_summary(section_text: str) -> Optional[str]:
    """Join the summary region's lines with single spaces (None if empty)."""
    lines = content_lines(section_text)
    return " ".join(lines) if lines else None


def parse_resume_text(
    text: str, vocabulary: Optional[ExtractionVocabulary] = None
) -> ParsedResumeData:
    """
    Parse flattened résumé text into structured data.

    This is the main parsing function. It never raises on unexpected
    structure; unmatched heuristics leave fields empty or absent.

    Args:
        text: Raw text blob (may be empty)
        vocabulary: Lookup tables (defaults to the built-in vocabulary)

    Returns:
        ParsedResumeData with all extracted information
    """
    vocabulary = vocabulary or DEFAULT_VOCABULARY
    text = text or ""

    normalized = normalize_lines(text)
    regions = segment_sections(normalized.positional_text)

    parsed = ParsedResumeData(
        raw_text=text,
        regions=regions,
        header=extract_header(regions.header),
        warnings=list(regions.warnings),
    )

    if regions.has("summary"):
        parsed.summary = extract_summary(regions.get("summary"))

    if regions.has("skills"):
        parsed.skills = extract_skills(regions.get("skills"))

    if regions.has("experience"):
        parsed.experience = extract_experience(regions.get("experience"), vocabulary)
        if not parsed.experience and regions.get("experience"):
            parsed.warnings.append("Experience section has no line with a year or 'Present'")

    if regions.has("projects"):
        parsed.projects = extract_projects(regions.get("projects"), vocabulary)

    if regions.has("education"):
        parsed.education = extract_education(regions.get("education"), vocabulary)
        if not parsed.education and regions.get("education"):
            parsed.warnings.append("Education section has fewer than two lines")

    if regions.has("certifications"):
        parsed.certifications = extract_list(regions.get("certifications"), vocabulary)

    _log_debug(f"Parsed sections: {list(regions.sections)}")

    return parsed
