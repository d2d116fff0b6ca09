"""
Section segmentation for the Extraction context.

Cuts normalized résumé text into a header region plus one region per
recognized section label.

Matching discipline: a label only opens a section when it is the entire
trimmed line (case-insensitive, optional trailing colon). A looser
"label anywhere" match would also catch headers glued to content, but it
truncates sections at incidental mentions inside bullets ("...wrote the
project summary..."), which is the worse failure for downstream extractors.
Each label is honored once; later repeats are treated as body text.
"""

from dataclasses import dataclass, field

from sifter.contexts.extraction.logger import _log_debug
from sifter.contexts.extraction.patterns import match_section_label


@dataclass(frozen=True)
class SectionSpan:
    """
    Line span of one recognized section.

    Attributes:
        key: Section key (e.g. "experience")
        header_line: Index of the header line itself
        start: First content line index (header_line + 1)
        end: One past the last content line index
    """

    key: str
    header_line: int
    start: int
    end: int


@dataclass
class SectionRegions:
    """
    Result of segmenting a document.

    Attributes:
        header: Text before the first recognized section label
        sections: Section key -> region text (stripped)
        spans: Line spans of recognized sections, in document order
        warnings: Non-fatal observations about the segmentation
    """

    header: str = ""
    sections: dict[str, str] = field(default_factory=dict)
    spans: list[SectionSpan] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def get(self, key: str) -> str:
        """Region text for a section, or "" if the section is absent."""
        return self.sections.get(key, "")

    def has(self, key: str) -> bool:
        return key in self.sections


def find_section_headers(lines: list[str]) -> list[tuple[str, int]]:
    """
    Locate the first occurrence of each section label.

    Args:
        lines: Trimmed lines (blank lines included, so indices are absolute)

    Returns:
        List of (section key, line index), sorted by line index
    """
    seen = set()
    headers = []

    for index, line in enumerate(lines):
        if not line:
            continue
        key = match_section_label(line)
        if key is None:
            continue
        if key in seen:
            _log_debug(f"Ignoring repeated '{key}' label at line {index}")
            continue
        seen.add(key)
        headers.append((key, index))

    return sorted(headers, key=lambda header: header[1])


def segment_sections(text: str) -> SectionRegions:
    """
    Segment positional text into header and section regions.

    Args:
        text: Trimmed lines joined with newlines, blanks kept

    Returns:
        SectionRegions with header text, section texts and spans
    """
    lines = text.split("\n") if text else []
    headers = find_section_headers(lines)
    regions = SectionRegions()

    if not headers:
        regions.header = "\n".join(lines).strip()
        if regions.header:
            regions.warnings.append("No section labels found; whole text treated as header")
        return regions

    regions.header = "\n".join(lines[: headers[0][1]]).strip()

    for position, (key, header_line) in enumerate(headers):
        end = headers[position + 1][1] if position + 1 < len(headers) else len(lines)
        span = SectionSpan(key=key, header_line=header_line, start=header_line + 1, end=end)
        regions.spans.append(span)
        regions.sections[key] = "\n".join(lines[span.start : span.end]).strip()
        _log_debug(f"Section '{key}': lines {span.start}-{span.end}")

    if not regions.header:
        regions.warnings.append("Header region is empty; name and contact unavailable")

    return regions
