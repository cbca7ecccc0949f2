"""
Persistent storage module.
"""

from .store import KeyValueStore, StoreResult
from .repository import Repository, ensure_written

__all__ = ["KeyValueStore", "StoreResult", "Repository", "ensure_written"]
