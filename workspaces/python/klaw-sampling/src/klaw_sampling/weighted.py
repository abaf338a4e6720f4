"""Weighted sampling on top of an alias table."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import islice

from klaw_sampling.alias import AliasTable, build_table
from klaw_sampling.errors import InvalidSizeError, LengthMismatchError
from klaw_sampling.source import UniformSource

__all__ = [
    'WeightedSampler',
    'sample_int_with_weights',
    'sample_weighted',
    'sample_weighted_index',
    'sample_with_weights',
]


def sample_weighted_index(table: AliasTable, source: UniformSource) -> int:
    """Draw one index from the table's distribution.

    Consumes ``source.uniform_int(n)`` followed by ``source.real01()``.
    """
    i = source.uniform_int(len(table))
    u = source.real01()
    return table.index_of(i, u)


def sample_weighted[T](items: Sequence[T], table: AliasTable, source: UniformSource) -> T:
    """Draw one item, where ``items[i]`` has the weight of table index ``i``.

    Raises:
        LengthMismatchError: If ``len(items) != len(table)``.
    """
    if len(items) != len(table):
        raise LengthMismatchError(len(table), len(items))
    return items[sample_weighted_index(table, source)]


def _take(weights: Iterable[float], n: int) -> list[float]:
    if n < 1:
        raise InvalidSizeError('n', n, 'must be positive')
    ws = list(islice(weights, n))
    if len(ws) < n:
        raise LengthMismatchError(n, len(ws))
    return ws


def sample_int_with_weights(weights: Iterable[float], n: int, source: UniformSource) -> int:
    """Draw an integer in [0, n) with probability proportional to ``weights[i]``.

    Only the first ``n`` weights are used. Builds a fresh table on every call;
    keep a ``WeightedSampler`` around for repeated draws.
    """
    return sample_weighted_index(build_table(_take(weights, n)), source)


def sample_with_weights[T](
    weights: Iterable[float],
    n: int,
    items: Sequence[T],
    source: UniformSource,
) -> T:
    """Draw one of the first ``n`` items, ``items[i]`` weighted by ``weights[i]``."""
    if len(items) < n:
        raise LengthMismatchError(n, len(items))
    return items[sample_int_with_weights(weights, n, source)]


class WeightedSampler[T]:
    """Reusable weighted sampler owning one alias table.

    The table is built once in the constructor and is read-only afterwards,
    so one sampler may serve concurrent callers as long as each brings its
    own source.

    Args:
        weights: Non-negative weights, at least one positive.
        items: Optional items parallel to ``weights``; required by ``sample()``.

    Example:
        ```python
        die = WeightedSampler([1, 1, 1, 1, 1, 5], items='123456')
        die.sample(RandomSource(seed=1))  # '6' half of the time
        ```
    """

    __slots__ = ('_items', '_table')

    def __init__(self, weights: Iterable[float], items: Sequence[T] | None = None) -> None:
        self._table = build_table(weights)
        if items is not None and len(items) != len(self._table):
            raise LengthMismatchError(len(self._table), len(items))
        self._items = items

    @property
    def table(self) -> AliasTable:
        return self._table

    def __len__(self) -> int:
        return len(self._table)

    def sample_index(self, source: UniformSource) -> int:
        return sample_weighted_index(self._table, source)

    def sample(self, source: UniformSource) -> T:
        """Draw one item.

        Raises:
            TypeError: If the sampler was built without items.
        """
        if self._items is None:
            msg = 'WeightedSampler has no items; use sample_index()'
            raise TypeError(msg)
        return self._items[self.sample_index(source)]

    def sample_many(self, count: int, source: UniformSource) -> list[int]:
        """Draw ``count`` independent indices."""
        if count < 0:
            raise InvalidSizeError('count', count, 'must be non-negative')
        return [sample_weighted_index(self._table, source) for _ in range(count)]

    def prob_of(self, i: int) -> float:
        return self._table.prob_of(i)

    def __repr__(self) -> str:
        return f'WeightedSampler(size={len(self._table)})'
