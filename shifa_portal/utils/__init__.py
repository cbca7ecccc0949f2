"""
Utility modules for the Shifa Portal.
"""

from .date import DateParser, TimeParser, now_iso
from .ids import new_id
from .logging import get_logger
from .validation import ValidationUtils

__all__ = [
    "DateParser",
    "TimeParser",
    "now_iso",
    "new_id",
    "get_logger",
    "ValidationUtils",
]
