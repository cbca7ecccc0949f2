"""
Storage-related exceptions.
"""


class StorageError(Exception):
    """Base exception for storage errors."""
    pass


class StorageWriteError(StorageError):
    """Exception raised when a write was dropped by the store."""
    pass
