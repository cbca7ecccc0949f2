"""
Logging setup shared by every module.
"""

import logging
import sys

from ..config import get_settings

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_configured = False


def _configure_root() -> None:
    global _configured
    if _configured:
        return

    root = logging.getLogger("shifa")
    root.setLevel(get_settings().log_level.upper())

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_FORMAT))
    if not root.handlers:
        root.addHandler(handler)

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``shifa`` namespace, e.g. ``shifa.store``."""
    _configure_root()
    if not name.startswith("shifa"):
        name = f"shifa.{name}"
    return logging.getLogger(name)
