"""
Shifa Portal: clinic portal core with persistent repositories and a rule-based assistant.
"""

__version__ = "1.0.0"
