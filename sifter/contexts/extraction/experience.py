"""
Work-experience extraction for the Extraction context.

Expected entry shape (after PDF flattening):

    Acme Corp  Jan 2020 - Present        <- company + duration
    Senior Engineer, Remote              <- role, location
    •                                    <- standalone glyph...
    Built the ingestion pipeline         <- ...bullet text on the next line
    • Cut p99 latency by 40% across      <- prefixed bullet
    three services                       <- continuation of previous bullet

An entry starts at any plain line that carries a year (or "Present") and
some letters; bullets run until the next such line.
"""

from typing import Optional

from sifter.contexts.extraction.logger import _log_debug
from sifter.contexts.extraction.normalizer import BulletToken, content_lines, tokenize_bullets
from sifter.contexts.extraction.patterns import (
    DEFAULT_VOCABULARY,
    DatePatterns,
    ExtractionVocabulary,
)
from sifter.contexts.extraction.record_components import ExperienceEntry


def is_entry_start(token: BulletToken) -> bool:
    """Check if a token opens a new entry (plain line with a date and letters)."""
    if token.is_bullet_start:
        return False
    return bool(
        DatePatterns.YEAR_OR_PRESENT.search(token.text) and DatePatterns.HAS_LETTER.search(token.text)
    )


def is_entry_boundary(token: BulletToken) -> bool:
    """Check if a token ends the current entry's bullets."""
    return not token.is_bullet_start and bool(DatePatterns.YEAR_OR_PRESENT.search(token.text))


def split_company_duration(
    line: str, vocabulary: ExtractionVocabulary = DEFAULT_VOCABULARY
) -> tuple[str, str]:
    """
    Split an entry's first line at the first month name.

    Args:
        line: Company/duration line
        vocabulary: Lookup tables providing month names

    Returns:
        (company, duration); duration is "" when no month name is present
    """
    match = vocabulary.month_pattern.search(line)
    if not match:
        return line.strip(), ""
    return line[: match.start()].strip(), line[match.start() :].strip()


def split_at_last_comma(line: str) -> tuple[str, str]:
    """
    Split a line at its last comma.

    Returns:
        (before, after); after is "" when the line has no comma
    """
    head, comma, tail = line.rpartition(",")
    if not comma:
        return line.strip(), ""
    return head.strip(), tail.strip()


def collect_bullets(tokens: list[BulletToken], start: int) -> tuple[list[str], int]:
    """
    Collect bullets from tokens[start:] until the next entry boundary.

    Plain lines continue the previous bullet; a plain line before any
    bullet becomes a bullet of its own.

    Args:
        tokens: Section tokens
        start: Index of the first token after the entry header

    Returns:
        (bullets, index of the first token not consumed)
    """
    bullets: list[str] = []
    i = start

    while i < len(tokens) and not is_entry_boundary(tokens[i]):
        token = tokens[i]
        if token.is_bullet_start or not bullets:
            bullets.append(token.text)
        else:
            bullets[-1] = f"{bullets[-1]} {token.text}".strip()
        i += 1

    return bullets, i


def extract_experience(
    section_text: str, vocabulary: ExtractionVocabulary = DEFAULT_VOCABULARY
) -> list[ExperienceEntry]:
    """
    Extract work-experience entries from the experience region.

    Args:
        section_text: Experience region text
        vocabulary: Lookup tables (month names, bullet glyph)

    Returns:
        List of ExperienceEntry in document order (empty if no entry start found)
    """
    tokens = tokenize_bullets(content_lines(section_text), vocabulary.bullet_glyph)
    entries = []
    i = 0

    while i < len(tokens):
        if not is_entry_start(tokens[i]):
            i += 1
            continue

        company, duration = split_company_duration(tokens[i].text, vocabulary)
        i += 1

        role, location = "", ""
        role_token: Optional[BulletToken] = tokens[i] if i < len(tokens) else None
        if role_token is not None and not role_token.is_bullet_start:
            role, location = split_at_last_comma(role_token.text)
            i += 1

        bullets, i = collect_bullets(tokens, i)

        _log_debug(f"Experience entry: '{company}' ({duration or 'no duration'}), {len(bullets)} bullet(s)")
        entries.append(
            ExperienceEntry(
                company=company,
                role=role,
                duration=duration,
                location=location,
                bullets=bullets,
            )
        )

    return entries
