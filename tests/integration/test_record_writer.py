"""
Integration tests for record output.
Tests: ResumeRecord -> JSON + raw text (+ published document copy) on disk.
"""

import json

import pytest
from loguru import logger

from sifter.contexts.extraction.record_data_structure import ResumeRecord
from sifter.contexts.publishing.record_writer import write_record_outputs

RAW_TEXT = "Jane Doe\njane@x.com\nSKILLS\nLanguages: Python, Go\n"


@pytest.fixture
def source_document(tmp_path):
    document = tmp_path / "inbox" / "jane_doe.txt"
    document.parent.mkdir()
    document.write_text(RAW_TEXT, encoding="utf-8")
    return document


@pytest.mark.integration
def test_writes_json_and_raw_text(tmp_path, source_document):
    record = ResumeRecord.from_text(RAW_TEXT)
    output_dir = tmp_path / "records"

    outputs = write_record_outputs(record, RAW_TEXT, source_document, output_dir)

    assert outputs.json_path == output_dir / "jane_doe.json"
    assert outputs.raw_text_path == output_dir / "jane_doe_raw.txt"
    assert outputs.document_copy_path is None

    assert json.loads(outputs.json_path.read_text(encoding="utf-8")) == record.to_dict()
    assert outputs.raw_text_path.read_text(encoding="utf-8") == RAW_TEXT


@pytest.mark.integration
def test_copies_document_to_public_dir(tmp_path, source_document):
    record = ResumeRecord.from_text(RAW_TEXT)
    public_dir = tmp_path / "public"

    outputs = write_record_outputs(
        record, RAW_TEXT, source_document, tmp_path / "records", public_dir=public_dir
    )

    assert outputs.document_copy_path == public_dir / "jane_doe.txt"
    assert outputs.document_copy_path.read_text(encoding="utf-8") == RAW_TEXT


@pytest.mark.integration
def test_source_already_in_public_dir(tmp_path, source_document):
    """Publishing into the document's own directory leaves it untouched."""
    record = ResumeRecord.from_text(RAW_TEXT)

    outputs = write_record_outputs(
        record, RAW_TEXT, source_document, tmp_path / "records", public_dir=source_document.parent
    )

    assert outputs.document_copy_path == source_document
    assert source_document.read_text(encoding="utf-8") == RAW_TEXT


@pytest.mark.integration
def test_json_keeps_non_ascii(tmp_path, source_document):
    record = ResumeRecord(name="José Núñez")

    outputs = write_record_outputs(record, "", source_document, tmp_path / "records")

    assert "José Núñez" in outputs.json_path.read_text(encoding="utf-8")


@pytest.mark.integration
def test_output_logged_with_publish_prefix(tmp_path, source_document):
    messages = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    try:
        write_record_outputs(
            ResumeRecord.from_text(RAW_TEXT),
            RAW_TEXT,
            source_document,
            tmp_path / "records",
            public_dir=source_document.parent,
        )
    finally:
        logger.remove(handler_id)

    publish_lines = [m for m in messages if m.startswith("[publish]")]
    assert any("Wrote record JSON" in m for m in publish_lines)
    assert any("not copying" in m for m in publish_lines)
