"""Sampling error types: dual struct+exception for Result and raise-based code."""

from __future__ import annotations

import msgspec

__all__ = [
    'InvalidSize',
    'InvalidSizeError',
    'InvalidWeights',
    'InvalidWeightsError',
    'LengthMismatch',
    'LengthMismatchError',
    'SamplingError',
]


class SamplingError(ValueError):
    """Base class for violated sampling preconditions, for callers that catch them together."""


# --- Size Errors ---


class InvalidSize(msgspec.Struct, frozen=True, gc=False):
    """A size argument is out of range - struct variant for Result[T, InvalidSize]."""

    name: str
    value: int
    reason: str | None = None

    def to_exception(self) -> InvalidSizeError:
        """Convert to exception for raise-based code."""
        return InvalidSizeError(self.name, self.value, self.reason)


class InvalidSizeError(SamplingError):
    """A size argument is out of range - exception variant."""

    def __init__(self, name: str, value: int, reason: str | None = None) -> None:
        self.name = name
        self.value = value
        self.reason = reason
        msg = f'Invalid size {name}={value}'
        if reason:
            msg = f'{msg}: {reason}'
        super().__init__(msg)

    def to_struct(self) -> InvalidSize:
        """Convert to struct for Result-based code."""
        return InvalidSize(self.name, self.value, self.reason)


# --- Weight Errors ---


class InvalidWeights(msgspec.Struct, frozen=True, gc=False):
    """Weight vector is unusable - struct variant for Result[T, InvalidWeights].

    ``index`` points at the offending entry, or is None when the vector as a
    whole is at fault (e.g. every weight is zero).
    """

    reason: str
    index: int | None = None

    def to_exception(self) -> InvalidWeightsError:
        """Convert to exception for raise-based code."""
        return InvalidWeightsError(self.reason, self.index)


class InvalidWeightsError(SamplingError):
    """Weight vector is unusable - exception variant."""

    def __init__(self, reason: str, index: int | None = None) -> None:
        self.reason = reason
        self.index = index
        msg = f'Invalid weights: {reason}'
        if index is not None:
            msg = f'{msg} (at index {index})'
        super().__init__(msg)

    def to_struct(self) -> InvalidWeights:
        """Convert to struct for Result-based code."""
        return InvalidWeights(self.reason, self.index)


# --- Length Errors ---


class LengthMismatch(msgspec.Struct, frozen=True, gc=False):
    """Parallel sequence has the wrong length - struct variant."""

    expected: int
    actual: int

    def to_exception(self) -> LengthMismatchError:
        """Convert to exception for raise-based code."""
        return LengthMismatchError(self.expected, self.actual)


class LengthMismatchError(SamplingError):
    """Parallel sequence has the wrong length - exception variant."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f'Length mismatch: expected {expected}, got {actual}')

    def to_struct(self) -> LengthMismatch:
        """Convert to struct for Result-based code."""
        return LengthMismatch(self.expected, self.actual)
