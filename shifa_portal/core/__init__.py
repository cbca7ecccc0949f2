"""
Core models, enums and exceptions for the Shifa Portal.
"""
