"""Fisher-Yates shuffling, split into swap generation and swap application."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSequence, Sequence

from klaw_sampling.errors import InvalidSizeError, LengthMismatchError
from klaw_sampling.source import UniformSource

__all__ = ['apply_shuffle', 'shuffle', 'shuffle_indices']


def _swaps(n: int, source: UniformSource) -> Iterator[tuple[int, int]]:
    for i in range(n, 1, -1):
        yield i - 1, source.uniform_int(i)


def shuffle_indices(n: int, source: UniformSource) -> Iterator[tuple[int, int]]:
    """Generate the swaps of a uniformly random permutation of ``0..n-1``.

    Yields ``n - 1`` pairs ``(i - 1, j)`` for ``i = n, ..., 2`` with ``j``
    drawn by ``source.uniform_int(i)``, one draw per pair, lazily. Applying
    them in order (see ``apply_shuffle``) produces each of the ``n!``
    permutations with equal probability.

    Raises:
        InvalidSizeError: If ``n < 0``.
    """
    if n < 0:
        raise InvalidSizeError('n', n, 'must be non-negative')
    return _swaps(n, source)


def apply_shuffle[S: MutableSequence](seq: S, swaps: Iterable[tuple[int, int]]) -> S:
    """Apply swaps to ``seq`` in place, in order, and return ``seq``.

    Pairs with equal positions are skipped.
    """
    for a, b in swaps:
        if a != b:
            seq[a], seq[b] = seq[b], seq[a]
    return seq


def shuffle[T](n: int, items: Sequence[T], source: UniformSource) -> list[T]:
    """Return the first ``n`` items in uniformly random order.

    ``items`` is not modified.

    Raises:
        InvalidSizeError: If ``n < 0``.
        LengthMismatchError: If fewer than ``n`` items are given.
    """
    swaps = shuffle_indices(n, source)
    if len(items) < n:
        raise LengthMismatchError(n, len(items))
    return apply_shuffle(list(items[:n]), swaps)
