"""
Project extraction for the Extraction context.

Project blocks are looser than experience entries. A typical block:

    Portfolio Site | React, TypeScript     <- name | tech
    https://jane.dev                       <- link
    Personal site with a blog engine       <- description
    • Server-rendered pages with           <- bullet...
    incremental regeneration               <- ...wrapped continuation

The entry under construction is an explicit Optional[ProjectEntry]; every
change to it goes through a transition function that returns a new entry,
so no branch mutates a half-built entry in place.
"""

import re
from dataclasses import replace
from typing import Optional

from sifter.contexts.extraction.logger import _log_debug
from sifter.contexts.extraction.normalizer import content_lines, tokenize_bullets
from sifter.contexts.extraction.patterns import (
    COLUMN_GAP,
    DEFAULT_VOCABULARY,
    ExtractionVocabulary,
    ProjectPatterns,
)
from sifter.contexts.extraction.record_components import ProjectEntry

# =============================================================================
# TOKEN HELPERS
# =============================================================================


def split_tech_list(raw: str) -> list[str]:
    """
    Split a technology list into clean tokens.

    Splits on commas, slashes and pipes, then on column gaps; strips
    parentheses. Empty tokens are dropped.
    """
    tokens = []
    for part in ProjectPatterns.TECH_SEPARATORS.split(raw):
        for piece in COLUMN_GAP.split(part.strip()):
            piece = piece.replace("(", "").replace(")", "").strip()
            if piece:
                tokens.append(piece)
    return tokens


def looks_like_tech_line(line: str, vocabulary: ExtractionVocabulary = DEFAULT_VOCABULARY) -> bool:
    """
    Check if a line is a bare technology list.

    Requires a vocabulary keyword, no sentence-ending punctuation and at most
    MAX_TECH_LINE_WORDS words.
    """
    return (
        bool(vocabulary.tech_pattern.search(line))
        and not ProjectPatterns.TERMINAL_PUNCTUATION.search(line)
        and len(line.split()) <= ProjectPatterns.MAX_TECH_LINE_WORDS
    )


# =============================================================================
# TRANSITIONS
# =============================================================================


def open_entry(current: Optional[ProjectEntry]) -> ProjectEntry:
    """Return the current entry, or a placeholder-named entry if none is open."""
    if current is not None:
        return current
    return ProjectEntry(name=ProjectPatterns.PLACEHOLDER_NAME)


def with_tech(entry: ProjectEntry, raw: str) -> ProjectEntry:
    merged = list(dict.fromkeys([*entry.tech, *split_tech_list(raw)]))
    return replace(entry, tech=merged)


def with_link(entry: ProjectEntry, url: str) -> ProjectEntry:
    return replace(entry, link=url)


def with_bullet(entry: ProjectEntry, text: str) -> ProjectEntry:
    return replace(entry, bullets=[*entry.bullets, text])


def with_continuation(entry: ProjectEntry, text: str) -> ProjectEntry:
    """Append text to the last bullet with a single space."""
    *head, last = entry.bullets
    return replace(entry, bullets=[*head, f"{last} {text}".strip()])


def with_description(entry: ProjectEntry, text: str) -> ProjectEntry:
    description = " ".join(part for part in (entry.description, text) if part)
    return replace(entry, description=description)


def start_entry(line: str) -> ProjectEntry:
    """Open a new entry from a "Name | tech" header line."""
    name, _, tech = line.partition(ProjectPatterns.HEADER_DELIMITER)
    entry = ProjectEntry(name=name.strip() or ProjectPatterns.PLACEHOLDER_NAME)
    if tech.strip():
        entry = with_tech(entry, tech)
    return entry


# =============================================================================
# DEDUPLICATION
# =============================================================================


def normalize_project_name(name: str) -> str:
    """Lowercase, collapse non-alphanumeric runs to single spaces, trim."""
    return re.sub(r"[^a-z0-9]+", " ", (name or "").lower()).strip()


def richness_score(entry: ProjectEntry) -> int:
    """Character count of bullets, tech and description combined."""
    return len(" ".join(entry.bullets)) + len(" ".join(entry.tech)) + len(entry.description)


def deduplicate_projects(entries: list[ProjectEntry]) -> list[ProjectEntry]:
    """
    Keep one entry per normalized name, preferring the richest.

    Ties keep the first-seen entry. Output order is the order in which each
    normalized name was first seen.

    Args:
        entries: Project entries in document order

    Returns:
        Deduplicated list of entries
    """
    by_name: dict[str, ProjectEntry] = {}

    for entry in entries:
        key = normalize_project_name(entry.name)
        existing = by_name.get(key)
        if existing is None:
            by_name[key] = entry
        elif richness_score(entry) > richness_score(existing):
            _log_debug(f"Replacing duplicate project '{key}' with richer entry")
            by_name[key] = entry

    return list(by_name.values())


# =============================================================================
# EXTRACTION
# =============================================================================


def extract_projects(
    section_text: str, vocabulary: ExtractionVocabulary = DEFAULT_VOCABULARY
) -> list[ProjectEntry]:
    """
    Extract project entries from the projects region.

    Tokens (bullet glyph already stripped) are classified in priority order:
    1. "OTHERS" ends the section
    2. "Name | tech" opens a new entry, even on a bullet line
    3. A URL sets the entry's link, even on a bullet line
    4. A bullet token adds a bullet
    5. After bullets have started, lines continue the last bullet
    6. Short keyword-bearing lines add technology tokens
    7. Anything else extends the description

    Args:
        section_text: Projects region text
        vocabulary: Lookup tables (technology keywords, bullet glyph)

    Returns:
        Deduplicated list of ProjectEntry
    """
    tokens = tokenize_bullets(content_lines(section_text), vocabulary.bullet_glyph)
    emitted: list[ProjectEntry] = []
    current: Optional[ProjectEntry] = None
    bullets_started = False

    for token in tokens:
        line = token.text

        if ProjectPatterns.OTHERS_MARKER.match(line):
            _log_debug("Reached OTHERS marker; ignoring remaining project lines")
            break

        if ProjectPatterns.HEADER_DELIMITER in line:
            if current is not None:
                emitted.append(current)
            current = start_entry(line)
            bullets_started = False
            continue

        url = ProjectPatterns.URL.search(line)
        if url:
            current = with_link(open_entry(current), url.group(0))
            continue

        if token.is_bullet_start:
            current = with_bullet(open_entry(current), line)
            bullets_started = True
            continue

        if bullets_started and current is not None and current.bullets:
            current = with_continuation(current, line)
            continue

        if looks_like_tech_line(line, vocabulary):
            current = with_tech(open_entry(current), line)
            continue

        current = with_description(open_entry(current), line)

    if current is not None:
        emitted.append(current)

    return deduplicate_projects(emitted)
