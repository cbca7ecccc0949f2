"""
Identifier generation.
"""

import uuid


def new_id(prefix: str) -> str:
    """Return a unique id such as ``apt-3f9c...``."""
    return f"{prefix}-{uuid.uuid4().hex}"
