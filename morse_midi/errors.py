from __future__ import annotations


class InputError(ValueError):
    """Raised when there is no text to convert."""


class TempoRangeError(ValueError):
    """Raised when a BPM value cannot be stored in the 24-bit tempo field."""
