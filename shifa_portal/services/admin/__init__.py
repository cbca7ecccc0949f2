"""
Admin service module.
"""

from .service import AdminService

__all__ = ["AdminService"]
