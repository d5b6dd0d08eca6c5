"""Error types raised on malformed input (all are ValueErrors)."""
from __future__ import annotations


class ModeError(ValueError):
    """Base class for errors raised by the padding, grouping and mode layers."""


class PaddingError(ModeError):
    """Raised when padding is malformed or missing on decode."""


class InvalidLengthError(ModeError):
    """Raised when a buffer is not aligned to the block size or is too short."""


class KeyLengthError(ModeError):
    """Raised when a key does not match the cipher's key size."""


class UnknownModeError(ModeError):
    """Raised when a mode name is not registered."""
