"""
PDF processing utilities for text extraction.

Helper functions:
    page_count: Quick page count without full extraction.
    extract_pdf_text: Flatten every page to plain text.
    strip_cid_artifacts: Remove "(cid:N)" placeholders for unmapped glyphs.
"""

import logging
import re
import warnings
from pathlib import Path
from typing import Optional, Union

import pdfplumber
from PyPDF2 import PdfReader

# Silence noisy PDF logging (CropBox warnings etc.)
logging.getLogger("pdfplumber").setLevel(logging.ERROR)
logging.getLogger("pdfminer").setLevel(logging.ERROR)
warnings.filterwarnings("ignore", category=UserWarning, module="pdfminer")

# pdfminer emits "(cid:123)" for glyphs without a unicode mapping
CID_ARTIFACT = re.compile(r"\(cid:\d+\)")


def page_count(pdf_path: Path) -> Optional[int]:
    """Get page count from PDF, or None if unreadable."""
    try:
        reader = PdfReader(str(pdf_path))
        return len(reader.pages)
    except Exception:
        return None


def strip_cid_artifacts(text: str) -> str:
    return CID_ARTIFACT.sub("", text)


def extract_pdf_text(pdf_path: Union[str, Path]) -> str:
    """
    Extract plain text from every page of a PDF.

    Pages are joined with newlines; layout (columns, fonts) is not preserved.

    Args:
        pdf_path: Path to PDF file

    Returns:
        Flattened text with glyph artifacts removed
    """
    with pdfplumber.open(pdf_path) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]

    return strip_cid_artifacts("\n".join(pages))
