"""
Patient-related enums.
"""

from enum import Enum


class Gender(str, Enum):
    """Patient gender as captured at registration."""

    MALE = "male"
    FEMALE = "female"

    @classmethod
    def from_string(cls, value: str) -> "Gender":
        """Convert a loose form value to Gender; raises ValueError if unknown."""
        normalized = (value or "").strip().lower()
        if normalized in ("m", "male", "man"):
            return cls.MALE
        if normalized in ("f", "female", "woman"):
            return cls.FEMALE
        raise ValueError(f"Unknown gender: {value!r}")
