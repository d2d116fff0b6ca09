"""
Skills extraction for the Extraction context.

Parses "Category: a, b / c" lines into a category -> skills mapping.
"""

from sifter.contexts.extraction.logger import _log_debug
from sifter.contexts.extraction.normalizer import content_lines
from sifter.contexts.extraction.patterns import COLUMN_GAP, SkillPatterns


def dedupe(items: list[str]) -> list[str]:
    """Remove duplicates, keeping first-seen order."""
    return list(dict.fromkeys(items))


def split_skill_list(raw: str) -> list[str]:
    """
    Split the right-hand side of a skill line into tokens.

    Splits on commas and slashes, then on column gaps (2+ spaces).

    Args:
        raw: Text after the category colon

    Returns:
        Trimmed, non-empty, deduplicated tokens
    """
    tokens = []
    for part in SkillPatterns.SEPARATORS.split(raw):
        for piece in COLUMN_GAP.split(part.strip()):
            piece = piece.strip()
            if piece:
                tokens.append(piece)
    return dedupe(tokens)


def extract_skills(section_text: str) -> dict[str, list[str]]:
    """
    Extract categorized skills from the skills region.

    Lines without a "Category:" prefix are skipped.

    Args:
        section_text: Skills region text

    Returns:
        Dict mapping category name to its skills
    """
    skills = {}

    for line in content_lines(section_text):
        match = SkillPatterns.CATEGORY_LINE.match(line)
        if not match:
            _log_debug(f"Skipping uncategorized skills line: '{line}'")
            continue
        category = match.group(1).strip()
        if not category:
            continue
        skills[category] = split_skill_list(match.group(2).strip())

    return skills
