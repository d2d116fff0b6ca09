"""Custom exceptions for the intake context."""

from pathlib import Path
from typing import Optional


class DocumentLoadError(Exception):
    """
    Exception raised when a source document cannot be converted to text.

    Attributes:
        message: Error description
        document_path: Path of the document that failed to load
        original_error: The underlying exception, if any
    """

    def __init__(
        self,
        message: str,
        document_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.document_path = document_path
        self.original_error = original_error

        # Build enhanced error message
        parts = [message]

        if document_path:
            parts.append(f"\nDocument: {document_path}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))
