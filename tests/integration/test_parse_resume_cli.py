"""
Integration tests for the parse_resume CLI.
Tests: document on disk -> CLI -> record JSON, raw text and log file.
"""

import importlib.util
import json
import re
import sys
from pathlib import Path

import pytest
from loguru import logger
from typer.testing import CliRunner

SCRIPT_PATH = Path(__file__).parents[2] / "scripts" / "parse_resume.py"
FIXTURES_PATH = Path(__file__).parent / "fixtures"


def _load_cli():
    spec = importlib.util.spec_from_file_location("parse_resume", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


parse_resume = _load_cli()
runner = CliRunner()


@pytest.fixture(autouse=True)
def reset_logger():
    """The CLI points loguru at the runner's captured stdout; restore afterwards."""
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.mark.integration
def test_parse_text_document(tmp_path):
    output_dir = tmp_path / "records"
    log_dir = tmp_path / "logs"

    result = runner.invoke(
        parse_resume.app,
        [
            str(FIXTURES_PATH / "jane_doe.txt"),
            "--output-dir",
            str(output_dir),
            "--log-dir",
            str(log_dir),
        ],
    )

    assert result.exit_code == 0, result.output
    assert "✓ Wrote" in result.output

    data = json.loads((output_dir / "jane_doe.json").read_text(encoding="utf-8"))
    assert data["name"] == "Jane Doe"
    assert data["skills"]["Cloud"] == ["AWS", "GCP"]
    assert "headline" not in data

    assert (output_dir / "jane_doe_raw.txt").exists()
    assert (log_dir / "extract.log").exists()


@pytest.mark.integration
def test_print_and_publish(tmp_path):
    public_dir = tmp_path / "public"

    result = runner.invoke(
        parse_resume.app,
        [
            str(FIXTURES_PATH / "jane_doe.txt"),
            "-o",
            str(tmp_path / "records"),
            "--public-dir",
            str(public_dir),
            "--log-dir",
            str(tmp_path / "logs"),
            "--print",
        ],
    )

    assert result.exit_code == 0, result.output
    assert '"name": "Jane Doe"' in result.output
    assert (public_dir / "jane_doe.txt").exists()


@pytest.mark.integration
def test_vocabulary_file_applied(tmp_path):
    vocabulary = tmp_path / "vocabulary.yaml"
    vocabulary.write_text("tech_keywords:\n  - Elixir\n")
    document = tmp_path / "resume.txt"
    document.write_text("Jane Doe\nPROJECTS\nChat Server |\nElixir, Phoenix\n", encoding="utf-8")

    result = runner.invoke(
        parse_resume.app,
        [
            str(document),
            "-o",
            str(tmp_path / "records"),
            "--vocabulary",
            str(vocabulary),
            "--log-dir",
            str(tmp_path / "logs"),
        ],
    )

    assert result.exit_code == 0, result.output
    data = json.loads((tmp_path / "records" / "resume.json").read_text(encoding="utf-8"))
    assert data["projects"][0]["tech"] == ["Elixir", "Phoenix"]


@pytest.mark.integration
def test_invalid_vocabulary_exits_with_error(tmp_path):
    vocabulary = tmp_path / "vocabulary.yaml"
    vocabulary.write_text("frameworks:\n  - Elixir\n")

    result = runner.invoke(
        parse_resume.app,
        [
            str(FIXTURES_PATH / "jane_doe.txt"),
            "-o",
            str(tmp_path / "records"),
            "--vocabulary",
            str(vocabulary),
            "--log-dir",
            str(tmp_path / "logs"),
        ],
    )

    assert result.exit_code == 1
    assert not (tmp_path / "records").exists()


@pytest.mark.integration
def test_unsupported_document_exits_with_error(tmp_path):
    document = tmp_path / "resume.docx"
    document.write_bytes(b"PK\x03\x04")

    result = runner.invoke(
        parse_resume.app,
        [str(document), "-o", str(tmp_path / "records"), "--log-dir", str(tmp_path / "logs")],
    )

    assert result.exit_code == 1
    assert not (tmp_path / "records").exists()


@pytest.mark.integration
def test_missing_input_rejected(tmp_path):
    result = runner.invoke(parse_resume.app, [str(tmp_path / "missing.txt")])
    assert result.exit_code != 0


@pytest.mark.integration
def test_malformed_vocabulary_regex_exits_with_error(tmp_path):
    vocabulary = tmp_path / "vocabulary.yaml"
    vocabulary.write_text("tech_keywords:\n  - 'Rust('\n")

    result = runner.invoke(
        parse_resume.app,
        [
            str(FIXTURES_PATH / "jane_doe.txt"),
            "-o",
            str(tmp_path / "records"),
            "--vocabulary",
            str(vocabulary),
            "--log-dir",
            str(tmp_path / "logs"),
        ],
    )

    assert result.exit_code == 1
    assert not isinstance(result.exception, re.error)
    assert not (tmp_path / "records").exists()
