"""
Record output for the Publishing context.

Writes the three artifacts of one extraction run:
- <stem>.json       the structured record
- <stem>_raw.txt    the unmodified text blob, for debugging heuristics
- <public_dir>/<name>  a copy of the original document (optional)
"""

import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from sifter.contexts.extraction.record_data_structure import ResumeRecord
from sifter.contexts.publishing.logger import _log_debug, _log_info


@dataclass
class RecordOutputs:
    """Paths written by write_record_outputs()."""

    json_path: Path
    raw_text_path: Path
    document_copy_path: Optional[Path] = None


def write_record_outputs(
    record: ResumeRecord,
    raw_text: str,
    source_path: Path,
    output_dir: Path,
    public_dir: Optional[Path] = None,
) -> RecordOutputs:
    """
    Write record JSON, raw text and (optionally) a copy of the source document.

    Args:
        record: Extracted résumé record
        raw_text: Text blob the record was extracted from
        source_path: Original document
        output_dir: Directory for the JSON and raw text files
        public_dir: Directory to copy the original document into (skipped if None)

    Returns:
        RecordOutputs with the written paths
    """
    source_path = Path(source_path)
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    stem = source_path.stem
    outputs = RecordOutputs(
        json_path=output_dir / f"{stem}.json",
        raw_text_path=output_dir / f"{stem}_raw.txt",
    )

    outputs.json_path.write_text(record.to_json() + "\n", encoding="utf-8")
    _log_info(f"Wrote record JSON to {outputs.json_path}")

    outputs.raw_text_path.write_text(raw_text, encoding="utf-8")
    _log_info(f"Wrote raw text to {outputs.raw_text_path}")

    if public_dir is not None:
        public_dir = Path(public_dir)
        public_dir.mkdir(parents=True, exist_ok=True)
        outputs.document_copy_path = public_dir / source_path.name
        if outputs.document_copy_path.resolve() == source_path.resolve():
            _log_debug(f"Source document already in {public_dir}; not copying")
        else:
            shutil.copyfile(source_path, outputs.document_copy_path)
            _log_info(f"Copied source document to {outputs.document_copy_path}")

    return outputs
