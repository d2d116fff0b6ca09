"""
Education extraction for the Extraction context.

Reads a single entry from the first two lines of the section:

    Stanford University, Stanford, CA
    B.S. in Computer Science Sep. 2016 - Jun. 2020
"""

from sifter.contexts.extraction.logger import _log_debug
from sifter.contexts.extraction.normalizer import content_lines
from sifter.contexts.extraction.patterns import (
    DEFAULT_VOCABULARY,
    SHORT_LOCATION_FRAGMENT,
    ExtractionVocabulary,
)
from sifter.contexts.extraction.record_components import EducationEntry


def split_school_location(line: str) -> tuple[str, str]:
    """
    Split a school line into (school, location) at its last comma.

    When the text after the last comma is a short fragment such as a state
    code and an earlier comma exists, the city between the two commas is
    kept with it: "Columbia University, New York, NY" -> "New York, NY".

    Args:
        line: First line of the education section

    Returns:
        (school, location); location is "" when the line has no comma
    """
    head, comma, tail = line.rpartition(",")
    if not comma:
        return line.strip(), ""

    head, tail = head.strip(), tail.strip()

    if len(tail) <= SHORT_LOCATION_FRAGMENT and "," in head:
        school, _, city = head.rpartition(",")
        return school.strip(), f"{city.strip()}, {tail}"

    return head, tail


def split_degree_duration(
    line: str, vocabulary: ExtractionVocabulary = DEFAULT_VOCABULARY
) -> tuple[str, str]:
    """
    Split a degree line at the first month + year token.

    Returns:
        (degree, duration); duration is "" when no month + year is present
    """
    match = vocabulary.month_year_pattern.search(line)
    if not match:
        return line.strip(), ""
    return line[: match.start()].strip(), line[match.start() :].strip()


def extract_education(
    section_text: str, vocabulary: ExtractionVocabulary = DEFAULT_VOCABULARY
) -> list[EducationEntry]:
    """
    Extract the education entry from the education region.

    Only the first two non-blank lines are consulted.

    Args:
        section_text: Education region text
        vocabulary: Lookup tables providing month names

    Returns:
        List with one EducationEntry, or empty if fewer than two lines
    """
    lines = content_lines(section_text)
    if len(lines) < 2:
        _log_debug(f"Education section has {len(lines)} line(s); need 2")
        return []

    school, location = split_school_location(lines[0])
    degree, duration = split_degree_duration(lines[1], vocabulary)

    return [EducationEntry(school=school, degree=degree, duration=duration, location=location)]
