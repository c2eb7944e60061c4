"""Input validation adapters."""

from .email import LibraryEmailValidator

__all__ = ["LibraryEmailValidator"]
