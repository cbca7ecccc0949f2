"""
Date and time helpers.
"""

import re
from datetime import datetime
from typing import Optional
import pytz

from ..config import get_settings

_TIME_RE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def now_iso(timezone: Optional[str] = None) -> str:
    """Get the current datetime in ISO format for the clinic timezone."""
    tz = pytz.timezone(timezone or get_settings().timezone)
    return datetime.now(tz).isoformat()


class DateParser:
    """Calendar date utilities."""

    def __init__(self, timezone: Optional[str] = None):
        self.tz = pytz.timezone(timezone or get_settings().timezone)

    def today(self) -> str:
        """Get today's date in YYYY-MM-DD format for the clinic timezone."""
        return datetime.now(self.tz).strftime("%Y-%m-%d")

    def now(self) -> datetime:
        """Get the current naive local datetime in the clinic timezone."""
        return datetime.now(self.tz).replace(tzinfo=None)

    @staticmethod
    def is_valid_iso_date(date_str: str) -> bool:
        """
        Check if a string is a valid ISO calendar date.

        Args:
            date_str: Date string to validate

        Returns:
            True if the string is a real YYYY-MM-DD date
        """
        if not isinstance(date_str, str):
            return False
        try:
            datetime.strptime(date_str, "%Y-%m-%d")
            return True
        except ValueError:
            return False

    @staticmethod
    def weekday_name(date_str: str) -> Optional[str]:
        """Get the English weekday name (``Monday``) of an ISO date."""
        try:
            return datetime.strptime(date_str, "%Y-%m-%d").strftime("%A")
        except (TypeError, ValueError):
            return None


class TimeParser:
    """Time slot utilities."""

    @staticmethod
    def is_valid_time_format(time_str: str) -> bool:
        """Check if a string is a 24-hour HH:MM slot."""
        return isinstance(time_str, str) and bool(_TIME_RE.match(time_str))
