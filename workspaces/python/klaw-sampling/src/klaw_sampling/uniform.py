"""Uniform choice of an integer or an item."""

from __future__ import annotations

from collections.abc import Sequence

from klaw_sampling.errors import InvalidSizeError, LengthMismatchError
from klaw_sampling.source import UniformSource

__all__ = ['sample', 'sample_int']


def sample_int(n: int, source: UniformSource) -> int:
    """Draw an integer uniformly from [0, n).

    Raises:
        InvalidSizeError: If ``n < 1``.
    """
    if n < 1:
        raise InvalidSizeError('n', n, 'must be positive')
    return source.uniform_int(n)


def sample[T](n: int, items: Sequence[T], source: UniformSource) -> T:
    """Draw one of the first ``n`` items uniformly.

    Raises:
        InvalidSizeError: If ``n < 1``.
        LengthMismatchError: If fewer than ``n`` items are given.
    """
    if len(items) < n:
        raise LengthMismatchError(n, len(items))
    return items[sample_int(n, source)]
