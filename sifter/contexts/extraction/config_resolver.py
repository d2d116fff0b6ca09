"""
Vocabulary configuration for extraction.

Extends the built-in lookup tables (technology keywords, month names) from a
YAML file, so new frameworks can be recognized without code changes.

Example vocabulary.yaml:

    tech_keywords:
      - Rust
      - FastAPI
      - Power\\s*BI
    months:
      - Sept\\.

Entries are regex fragments, appended after the built-in ones.
"""

import os
import re
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

from sifter.contexts.extraction.logger import _log_debug
from sifter.contexts.extraction.patterns import (
    DEFAULT_VOCABULARY,
    ExtractionVocabulary,
    compile_word_alternation,
)

load_dotenv()
VOCABULARY_PATH = os.getenv("SIFTER_VOCABULARY_PATH")

VOCABULARY_KEYS = {"tech_keywords", "months"}


def validate_fragments(key: str, fragments: tuple) -> None:
    """
    Compile each fragment, then the combined alternation the extractors use.

    Raises:
        ValueError: If any fragment is not a valid regular expression
    """
    for fragment in fragments:
        try:
            re.compile(fragment)
        except re.error as e:
            raise ValueError(f"Invalid regex in '{key}': {fragment!r} ({e})") from e

    try:
        compile_word_alternation(fragments)
    except re.error as e:
        raise ValueError(f"Invalid regex in '{key}': combined pattern fails ({e})") from e


def load_extraction_vocabulary(config_path: Optional[Path] = None) -> ExtractionVocabulary:
    """
    Load vocabulary extensions and merge them into the built-in tables.

    Args:
        config_path: Optional path to a vocabulary YAML (defaults to
            SIFTER_VOCABULARY_PATH; built-ins only if neither is set)

    Returns:
        ExtractionVocabulary with extensions appended

    Raises:
        ValueError: If the YAML has unknown keys, non-list values or invalid regexes
        FileNotFoundError: If the configured file does not exist
    """
    if config_path is None and VOCABULARY_PATH:
        config_path = Path(VOCABULARY_PATH)

    if config_path is None:
        return DEFAULT_VOCABULARY

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Vocabulary config not found: {config_path}")

    extensions = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True) or {}

    if not isinstance(extensions, dict):
        raise ValueError(f"Vocabulary config must be a mapping: {config_path}")

    unknown = set(extensions) - VOCABULARY_KEYS
    if unknown:
        raise ValueError(
            f"Unknown vocabulary keys: {sorted(unknown)}. Valid keys are: {sorted(VOCABULARY_KEYS)}"
        )

    merged = {}
    for key, values in extensions.items():
        if not isinstance(values, list):
            raise ValueError(f"Vocabulary key '{key}' must be a list, got {type(values).__name__}")
        builtin = getattr(DEFAULT_VOCABULARY, key)
        merged[key] = tuple(dict.fromkeys([*builtin, *(str(v) for v in values)]))
        validate_fragments(key, merged[key])

    _log_debug(f"Loaded vocabulary extensions from {config_path}: {sorted(merged)}")

    return ExtractionVocabulary(**merged)
