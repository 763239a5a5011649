"""
Error kinds for the theory core.

Every fallible operation either returns a complete value or raises exactly
one of these. They all derive from ValueError, so callers that only care
about "bad input" can catch that; callers that care about the reason can
switch on the class or on ``error.kind``.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Machine-readable error categories."""

    INVALID_NAME = "invalid_name"
    OUT_OF_RANGE = "out_of_range"
    INVALID_FREQUENCY = "invalid_frequency"
    INVALID_INTERVAL = "invalid_interval"
    NOT_FOUND = "not_found"
    INVALID_ARGUMENT = "invalid_argument"
    ALLOCATION_FAILURE = "allocation_failure"


class TheoryError(ValueError):
    """Base class for all theory core errors."""

    kind: ErrorKind = ErrorKind.INVALID_ARGUMENT

    def to_dict(self) -> dict[str, str]:
        """Serialize for tool responses."""
        return {"status": "error", "kind": self.kind.value, "message": str(self)}


class InvalidNameError(TheoryError):
    """Note or interval name is not recognized."""

    kind = ErrorKind.INVALID_NAME


class OutOfRangeError(TheoryError):
    """MIDI note number or octave outside the representable band."""

    kind = ErrorKind.OUT_OF_RANGE


class InvalidIntervalError(OutOfRangeError):
    """Semitone distance the interval table cannot resolve."""

    kind = ErrorKind.INVALID_INTERVAL


class InvalidFrequencyError(TheoryError):
    """Frequency is not a positive finite number."""

    kind = ErrorKind.INVALID_FREQUENCY


class NotFoundError(TheoryError, LookupError):
    """Formula or tuning name absent from its store."""

    kind = ErrorKind.NOT_FOUND


class InvalidArgumentError(TheoryError):
    """Missing, conflicting or malformed arguments."""

    kind = ErrorKind.INVALID_ARGUMENT


class AllocationFailureError(TheoryError):
    """Storage for a result collection could not be obtained."""

    kind = ErrorKind.ALLOCATION_FAILURE
