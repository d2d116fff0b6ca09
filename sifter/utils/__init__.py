"""
Shared utilities for SIFTER.

Common functionality used across contexts:
- Logging setup
- PDF processing
- Timestamps
"""

from sifter.utils.timestamp import now_stamp

__all__ = ["now_stamp"]
