"""
Session logging for SIFTER runs.

Every run writes a DEBUG-level log file (one per context) into its own
directory and echoes INFO and above to the console. The first lines of the
file record where the run came from, so a record JSON can be traced back to
the command and input that produced it.

Context-specific wrappers live in contexts/{context}/logger.py.
"""

import os
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from loguru import logger

import sifter

load_dotenv()
CONSOLE_LEVEL = os.getenv("SIFTER_CONSOLE_LOG_LEVEL", "INFO")

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "<dim>{time:HH:mm:ss}</dim> | <level>{level: <7}</level> | <level>{message}</level>"

# Warnings are the main output of a heuristic parser; make them stand out
LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def setup_logger(
    context_name: str,
    log_dir: Path,
    source: Optional[str] = None,
    console_level: str = CONSOLE_LEVEL,
) -> Path:
    """
    Route loguru output to a session log file and the console.

    Existing handlers are removed, so calling this twice in one process
    starts a fresh session.

    Args:
        context_name: Context identifier, used as the log file name ("extract")
        log_dir: Directory for this session (created if missing)
        source: Input document name recorded in the provenance header
        console_level: Minimum console level (file always gets DEBUG)

    Returns:
        Path to log file

    Example:
        log_file = setup_logger("extract", Path("outs/logs/parse_20251114_123456"), source="resume.pdf")
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()

    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    log_provenance(source)

    return log_file


def log_provenance(source: Optional[str] = None) -> None:
    """
    Write the run header: SIFTER version, command line, working directory,
    interpreter and (when known) the input document.
    """
    rows = [
        ("SIFTER", sifter.__version__),
        ("Command", " ".join(sys.argv)),
        ("Working directory", str(Path.cwd())),
        ("Python", sys.version.split()[0]),
    ]
    if source:
        rows.append(("Source", source))

    logger.info("-" * 60)
    for label, value in rows:
        logger.info(f"{label}: {value}")
    logger.info("-" * 60)
