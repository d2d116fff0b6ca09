"""
Document loading for the Intake context.

Converts a source document into the single text blob consumed by the
extraction context. PDFs are flattened with pdfplumber; plain-text and
markdown files are read as-is.
"""

from pathlib import Path

from sifter.contexts.intake.exceptions import DocumentLoadError
from sifter.contexts.intake.logger import _log_debug, _log_info
from sifter.utils.pdf_processing import extract_pdf_text, page_count

PDF_SUFFIXES = {".pdf"}
TEXT_SUFFIXES = {".txt", ".text", ".md"}


def load_document_text(file_path: Path) -> str:
    """
    Load a document and return its flattened text.

    Args:
        file_path: Path to a .pdf, .txt or .md file

    Returns:
        Text blob (possibly empty)

    Raises:
        FileNotFoundError: If the file does not exist
        DocumentLoadError: If the suffix is unsupported or conversion fails
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"Document not found: {file_path}")

    suffix = file_path.suffix.lower()

    if suffix in TEXT_SUFFIXES:
        try:
            text = file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise DocumentLoadError("Text document is not valid UTF-8", file_path, e) from e
        _log_debug(f"Read {len(text)} chars from {file_path.name}")
        return text

    if suffix in PDF_SUFFIXES:
        try:
            text = extract_pdf_text(file_path)
        except Exception as e:
            raise DocumentLoadError("Failed to extract text from PDF", file_path, e) from e
        _log_info(f"Extracted {len(text)} chars from {file_path.name} ({page_count(file_path)} page(s))")
        return text

    supported = sorted(PDF_SUFFIXES | TEXT_SUFFIXES)
    raise DocumentLoadError(f"Unsupported document type '{suffix}'. Supported: {supported}", file_path)
