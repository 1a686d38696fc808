"""
Error Types
===========
Every failure raised by the library is a caller-input problem, so all of them
derive from ``ValueError`` through :class:`FireResistanceError`.
"""


class FireResistanceError(ValueError):
    """Base class for all input errors raised by the library."""


class UnknownCategoryError(FireResistanceError):
    """Raised for an aggregate type, material or condition that is not loaded."""


class OutOfRangeError(FireResistanceError):
    """Raised when a depth or time lies outside the digitized data range."""


class DomainError(FireResistanceError):
    """Raised when a bounded parameter (e.g. a threshold) is outside its interval."""


class InvalidUnitError(FireResistanceError):
    """Raised for an unrecognised temperature unit selector."""


class UnsupportedDurationError(FireResistanceError):
    """Raised for a fire-resistance duration that is not in the rating tables."""


class CurveDataError(FireResistanceError):
    """Raised when tabulated curve data is malformed (unsorted, duplicated, empty)."""
