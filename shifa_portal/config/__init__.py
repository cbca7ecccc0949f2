"""
Configuration management for the Shifa Portal.
"""

from .settings import Settings, get_settings
from .storage import StorageConfig
from .clinic import ClinicConfig

__all__ = [
    "Settings",
    "get_settings",
    "StorageConfig",
    "ClinicConfig",
]
