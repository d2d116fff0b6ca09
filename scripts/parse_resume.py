#!/usr/bin/env python3
"""
Résumé Parsing CLI

Extracts a structured record from a résumé document (PDF or plain text) and
writes it as JSON next to the raw extracted text. Optionally copies the
original document into a public directory for download links.

Usage:
    python scripts/parse_resume.py resume.pdf
    python scripts/parse_resume.py resume.pdf --output-dir data/ --public-dir public/
    python scripts/parse_resume.py resume.txt --print
    python scripts/parse_resume.py resume.pdf --vocabulary configs/vocabulary.yaml
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from sifter.contexts.extraction.config_resolver import load_extraction_vocabulary
from sifter.contexts.extraction.logger import log_extraction_summary, setup_extraction_logger
from sifter.contexts.extraction.record_data_structure import ResumeRecord
from sifter.contexts.intake.document_loader import load_document_text
from sifter.contexts.intake.exceptions import DocumentLoadError
from sifter.contexts.publishing.record_writer import write_record_outputs
from sifter.utils.timestamp import now_stamp

load_dotenv()
LOGS_PATH = Path(os.getenv("SIFTER_LOGS_PATH", "outs/logs"))
OUTPUT_PATH = Path(os.getenv("SIFTER_OUTPUT_PATH", "outs/records"))

app = typer.Typer(
    help="Extract a structured record from a résumé document",
    add_completion=False,
)


@app.command()
def main(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="Résumé document (.pdf, .txt or .md)",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    output_dir: Annotated[
        Path,
        typer.Option(
            "--output-dir",
            "-o",
            help="Directory for <name>.json and <name>_raw.txt",
            file_okay=False,
        ),
    ] = OUTPUT_PATH,
    public_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--public-dir",
            help="Copy the original document into this directory",
            file_okay=False,
        ),
    ] = None,
    vocabulary_file: Annotated[
        Optional[Path],
        typer.Option(
            "--vocabulary",
            help="YAML file extending the technology/month vocabularies",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    log_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--log-dir",
            help="Log directory (defaults to $SIFTER_LOGS_PATH/parse_<timestamp>)",
            file_okay=False,
        ),
    ] = None,
    print_json: Annotated[
        bool,
        typer.Option(
            "--print",
            "-p",
            help="Print the record JSON to stdout",
        ),
    ] = False,
):
    """
    Parse a résumé document into a structured JSON record.

    Examples:

        # Parse a PDF into outs/records/
        python parse_resume.py resume.pdf

        # Parse and publish the PDF alongside the site data
        python parse_resume.py resume.pdf -o src/data --public-dir public
    """
    log_dir = log_dir or LOGS_PATH / f"parse_{now_stamp()}"
    log_file = setup_extraction_logger(log_dir, source=input_file.name)

    try:
        vocabulary = load_extraction_vocabulary(vocabulary_file)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    try:
        raw_text = load_document_text(input_file)
    except DocumentLoadError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    record = ResumeRecord.from_text(raw_text, vocabulary=vocabulary)
    log_extraction_summary(record)

    outputs = write_record_outputs(
        record,
        raw_text,
        source_path=input_file,
        output_dir=output_dir,
        public_dir=public_dir,
    )

    if print_json:
        typer.echo(record.to_json())

    typer.echo(f"✓ Wrote {outputs.json_path}")
    typer.echo(f"  Log file: {log_file}")


if __name__ == "__main__":
    app()
