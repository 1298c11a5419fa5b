"""
Domain error types.

All errors inherit from VdtError so callers can catch the family at once.
Fraction parsing never raises (it degrades to ExactFraction.INVALID), so the
only fatal condition of the core is NormalizationError.
"""
from __future__ import annotations

from typing import Optional


class VdtError(Exception):
    """Base exception for all vdtransfer failures."""
    pass


class NormalizationError(VdtError):
    """Raised when probe data has no usable video stream."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot normalize {path}: {reason}")


class ProbeError(VdtError):
    """Adapter-level error for probe failures."""

    def __init__(self, message: str, stderr: Optional[str] = None, returncode: Optional[int] = None):
        self.message = message
        self.stderr = stderr
        self.returncode = returncode
        super().__init__(message)
