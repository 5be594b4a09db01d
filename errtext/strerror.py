"""Human-readable text for operating-system error numbers."""

from __future__ import annotations

import os

__all__ = ["FALLBACK_MESSAGE", "strerror"]

FALLBACK_MESSAGE = "Failed to get error"


def strerror(errnum: int, buffer_length: int = 1024) -> str:
    """Return the system message for ``errnum``, limited to ``buffer_length - 1`` characters.

    The limit mirrors a fixed-size, NUL-terminated buffer of ``buffer_length``
    bytes. If the platform cannot describe the error number, the fallback
    message is returned instead (subject to the same limit).
    """
    if buffer_length < 1:
        raise ValueError("buffer_length must be at least 1")
    try:
        message = os.strerror(errnum)
    except (ValueError, OverflowError):
        message = FALLBACK_MESSAGE
    return message[: buffer_length - 1]