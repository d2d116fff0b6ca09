"""
Résumé record data structure for the Extraction context.

Provides ResumeRecord, the structured result handed to persistence and
rendering consumers.
"""

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Optional, Union

from sifter.contexts.extraction.logger import _log_warning
from sifter.contexts.extraction.patterns import ExtractionVocabulary
from sifter.contexts.extraction.record_components import (
    ContactBundle,
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
)
from sifter.contexts.extraction.resume_parser import parse_resume_text
from sifter.contexts.intake.document_loader import load_document_text


def _drop_absent(value: Any) -> Any:
    """Recursively remove None-valued keys; keep "" and [] as they are."""
    if isinstance(value, dict):
        return {key: _drop_absent(item) for key, item in value.items() if item is not None}
    if isinstance(value, list):
        return [_drop_absent(item) for item in value]
    return value


@dataclass
class ResumeRecord:
    """
    Structured résumé record.

    Every field is optional: None means the document did not provide it.

    Factory methods:
        from_text(text) - Parse a flattened text blob
        from_file(path) - Load a PDF or text file and parse it
    """

    name: Optional[str] = None
    headline: Optional[str] = None
    contact: Optional[ContactBundle] = None
    summary: Optional[str] = None
    skills: Optional[Union[dict[str, list[str]], list[str]]] = None
    experience: Optional[list[ExperienceEntry]] = None
    projects: Optional[list[ProjectEntry]] = None
    education: Optional[list[EducationEntry]] = None
    certifications: Optional[list[str]] = None

    # =========================================================================
    # FACTORY METHODS
    # =========================================================================

    @classmethod
    def from_text(
        cls, text: str, vocabulary: Optional[ExtractionVocabulary] = None
    ) -> "ResumeRecord":
        """
        Parse résumé text and create a ResumeRecord.

        Args:
            text: Flattened document text (may be empty)
            vocabulary: Optional lookup tables overriding the built-ins

        Returns:
            ResumeRecord with whatever the heuristics recovered
        """
        parsed = parse_resume_text(text, vocabulary=vocabulary)

        # Surface parser warnings
        for warning in parsed.warnings:
            _log_warning(warning)

        return cls(
            name=parsed.header.name,
            contact=parsed.header.contact,
            summary=parsed.summary,
            skills=parsed.skills,
            experience=parsed.experience,
            projects=parsed.projects,
            education=parsed.education,
            certifications=parsed.certifications,
        )

    @classmethod
    def from_file(
        cls, file_path: Path, vocabulary: Optional[ExtractionVocabulary] = None
    ) -> "ResumeRecord":
        """
        Load a document (PDF or text) and create a ResumeRecord.

        Raises:
            FileNotFoundError: If the file does not exist
            DocumentLoadError: If the document cannot be read
        """
        return cls.from_text(load_document_text(Path(file_path)), vocabulary=vocabulary)

    # =========================================================================
    # SERIALIZATION
    # =========================================================================

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to a plain nested mapping.

        Absent (None) fields are omitted; empty strings and lists are kept.
        """
        return _drop_absent(asdict(self))

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
