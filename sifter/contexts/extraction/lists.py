"""
Simple list extraction (certifications and other flat sections).
"""

import re

from sifter.contexts.extraction.patterns import (
    DEFAULT_VOCABULARY,
    ExtractionVocabulary,
    is_section_label,
)


def extract_list(
    section_text: str, vocabulary: ExtractionVocabulary = DEFAULT_VOCABULARY
) -> list[str]:
    """
    Split a section into list items.

    Splits on newlines, bullet glyphs and hyphens. Fragments that are
    themselves section labels are dropped, which guards against a header
    leaking in when segmentation overshoots.

    Args:
        section_text: Section region text
        vocabulary: Lookup tables providing the bullet glyph

    Returns:
        Trimmed, non-empty items in document order
    """
    separators = re.compile(rf"\n|{re.escape(vocabulary.bullet_glyph)}|-")
    items = []

    for fragment in separators.split(section_text or ""):
        fragment = fragment.strip()
        if fragment and not is_section_label(fragment):
            items.append(fragment)

    return items
