"""Readable, length-limited text for operating-system error numbers."""

__version__ = "0.1.0"
__all__ = ["strerror"]