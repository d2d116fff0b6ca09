"""
Line normalizer for the Extraction context.

Turns the flattened document text into trimmed lines before any section or
field heuristics run. Two views are produced: content lines (blank lines
dropped) for the field extractors, and positional text (blank lines kept)
for the segmenter, which works with absolute line indices.

Also provides the bullet tokenizer that folds the two surface forms of a
bullet ("•" alone on a line, or "• text") into a single token type.
"""

from dataclasses import dataclass, field

from sifter.contexts.extraction.patterns import BULLET_GLYPH

# Invisible characters left behind by PDF text extraction
UNICODE_REPLACEMENTS = {
    "\u00a0": " ",  # non-breaking space
    "\u202f": " ",  # narrow no-break space
    "\u200b": "",  # zero-width space
    "\u200c": "",  # zero-width non-joiner
    "\u200d": "",  # zero-width joiner
    "\u2060": "",  # word joiner
    "\ufeff": "",  # BOM
}


@dataclass
class NormalizedText:
    """
    Normalized views of a document's text.

    Attributes:
        content_lines: Non-blank trimmed lines in original order
        positional_text: All trimmed lines (blanks included) joined with newlines
    """

    content_lines: list[str] = field(default_factory=list)
    positional_text: str = ""


@dataclass(frozen=True)
class BulletToken:
    """
    A line after bullet normalization.

    Attributes:
        is_bullet_start: True if a new bullet starts at this token
        text: Line text with any bullet glyph removed
    """

    is_bullet_start: bool
    text: str


def normalize_unicode(text: str) -> str:
    """
    Replace invisible characters that break line trimming and matching.

    Args:
        text: Raw text from the conversion stage

    Returns:
        Text with problematic characters replaced and line breaks unified
    """
    for char, replacement in UNICODE_REPLACEMENTS.items():
        text = text.replace(char, replacement)

    return text.replace("\r\n", "\n").replace("\r", "\n")


def content_lines(text: str) -> list[str]:
    """Split text into trimmed, non-blank lines."""
    return [line.strip() for line in (text or "").split("\n") if line.strip()]


def normalize_lines(text: str) -> NormalizedText:
    """
    Normalize raw document text into line sequences.

    This is the main entry point for line normalization.

    Args:
        text: Raw text blob (may be empty)

    Returns:
        NormalizedText with content lines and positional text
    """
    if not text or not text.strip():
        return NormalizedText()

    trimmed = [line.strip() for line in normalize_unicode(text).split("\n")]

    return NormalizedText(
        content_lines=[line for line in trimmed if line],
        positional_text="\n".join(trimmed),
    )


def tokenize_bullets(lines: list[str], glyph: str = BULLET_GLYPH) -> list[BulletToken]:
    """
    Normalize both bullet surface forms into BulletTokens.

    Handles:
    - Standalone glyph line followed by a text line -> one bullet token
    - Glyph + space prefix ("• Built X") -> one bullet token
    - A trailing standalone glyph with nothing after it -> dropped
    - Anything else -> plain token

    Args:
        lines: Non-blank trimmed lines
        glyph: Bullet marker character

    Returns:
        List of BulletTokens in document order
    """
    tokens = []
    prefix = f"{glyph} "
    i = 0

    while i < len(lines):
        line = lines[i]

        if line == glyph:
            if i + 1 < len(lines):
                tokens.append(BulletToken(True, lines[i + 1]))
            i += 2
        elif line.startswith(prefix):
            tokens.append(BulletToken(True, line[len(prefix) :].strip()))
            i += 1
        else:
            tokens.append(BulletToken(False, line))
            i += 1

    return tokens
