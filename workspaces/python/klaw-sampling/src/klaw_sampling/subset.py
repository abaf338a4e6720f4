"""Sequential selection of a random k-subset (Knuth's Algorithm S).

Candidates ``0..n-1`` are scanned once. With ``k'`` slots left and ``n - i``
candidates remaining, candidate ``i`` is taken with probability
``k' / (n - i)``, which makes every k-subset equally likely and yields the
chosen indices already sorted.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from klaw_sampling.errors import InvalidSizeError, LengthMismatchError
from klaw_sampling.result import checked
from klaw_sampling.source import UniformSource

__all__ = ['sample_subset', 'sample_subset_of', 'try_sample_subset']


def _check_sizes(k: int, n: int) -> None:
    if n < 0:
        raise InvalidSizeError('n', n, 'must be non-negative')
    if k < 0:
        raise InvalidSizeError('k', k, 'subset size must be non-negative')
    if k > n:
        raise InvalidSizeError('k', k, f'subset size is larger than n={n}')


def _select(k: int, n: int, source: UniformSource) -> Iterator[int]:
    remaining = k
    i = 0
    while remaining > 0:
        u = source.real01()
        if (n - i) * u < remaining:
            yield i
            remaining -= 1
        i += 1


def sample_subset(k: int, n: int, source: UniformSource) -> Iterator[int]:
    """Sample ``k`` distinct integers from [0, n) in increasing order.

    Sizes are checked immediately; the indices themselves are produced lazily.
    Each step consumes exactly one ``source.real01()`` draw, no draw happens
    once ``k`` indices have been produced, and dropping the iterator early
    leaves the source untouched beyond what was consumed. The iterator is
    single-pass.

    Raises:
        InvalidSizeError: If ``k < 0``, ``n < 0`` or ``k > n``.

    Example:
        ```python
        list(sample_subset(3, 10, RandomSource(seed=0)))  # e.g. [1, 4, 8]
        ```
    """
    _check_sizes(k, n)
    return _select(k, n, source)


def sample_subset_of[T](k: int, n: int, items: Sequence[T], source: UniformSource) -> list[T]:
    """Sample ``k`` of the first ``n`` items, keeping their relative order.

    Raises:
        InvalidSizeError: If ``k < 0``, ``n < 0`` or ``k > n``.
        LengthMismatchError: If fewer than ``n`` items are given.
    """
    _check_sizes(k, n)
    if len(items) < n:
        raise LengthMismatchError(n, len(items))
    return [items[i] for i in _select(k, n, source)]


try_sample_subset = checked(sample_subset)
"""``sample_subset`` returning ``Ok(iterator)`` or ``Err(InvalidSize)``."""
