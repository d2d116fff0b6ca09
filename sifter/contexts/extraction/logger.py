"""
Extraction context logger.

Provides logging interface for the extraction context with automatic [extract] prefix.
All extraction modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from sifter.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[extract]"


def setup_extraction_logger(log_dir: Path, source: str = "") -> Path:
    """
    Setup logger for the extraction context.

    Args:
        log_dir: Directory for this extraction session
        source: Input document name for provenance

    Returns:
        Path to log file
    """
    return _setup_logger(context_name="extract", log_dir=log_dir, source=source or None)


# Wrapper functions with automatic [extract] prefix


def _log_info(message: str) -> None:
    """Log info message with [extract] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [extract] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [extract] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [extract] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_extraction_summary(record) -> None:
    """
    Log what was recovered for each record field.

    Args:
        record: ResumeRecord produced by the assembler
    """
    _log_info(f"Name: {record.name or '(absent)'}")

    for field_name in ("experience", "projects", "education", "certifications"):
        value = getattr(record, field_name)
        if value is None:
            _log_debug(f"  {field_name}: section absent")
        else:
            _log_info(f"  {field_name}: {len(value)} item(s)")

    if record.skills is None:
        _log_debug("  skills: section absent")
    else:
        _log_info(f"  skills: {len(record.skills)} group(s)")

    _log_success(f"Extracted record for {record.name or 'unnamed candidate'}")
