"""Timestamp formatting utilities."""

from datetime import datetime


def now_stamp() -> str:
    """
    Current local time as a filesystem-safe stamp.

    Used for per-run log directories, e.g. outs/logs/parse_20251114_123456.
    """
    return datetime.now().strftime("%Y%m%d_%H%M%S")
