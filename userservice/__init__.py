"""User profile management: validation, email uniqueness and SQL persistence."""

__version__ = "0.1.0"
