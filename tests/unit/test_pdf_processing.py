"""
Tests for PDF text helpers.
"""

from sifter.utils.pdf_processing import page_count, strip_cid_artifacts


def test_strip_cid_artifacts():
    assert strip_cid_artifacts("Jane(cid:127) Doe (cid:3)") == "Jane Doe "


def test_strip_cid_artifacts_leaves_plain_text():
    assert strip_cid_artifacts("Languages: C++ (advanced)") == "Languages: C++ (advanced)"


def test_page_count_unreadable_file(tmp_path):
    """Unreadable PDFs report no page count instead of raising."""
    document = tmp_path / "broken.pdf"
    document.write_bytes(b"not a pdf")
    assert page_count(document) is None
