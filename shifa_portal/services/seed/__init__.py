"""
Demo data bootstrap module.
"""

from .data import SEED_DOCTORS, SAMPLE_PATIENT
from .loader import SeedLoader

__all__ = ["SEED_DOCTORS", "SAMPLE_PATIENT", "SeedLoader"]
