"""Walker's alias method: O(1) weighted index lookup after O(n) construction.

The table is built with Vose's two-worklist variant. Every row ``i`` holds a
cutoff and an alias; a lookup for row ``i`` with a uniform ``u`` returns ``i``
when ``u < cutoff`` and the alias otherwise. Each row therefore carries
exactly ``1/n`` of the probability mass, split between at most two indices.

    >>> table = build_table([3.0, 1.0])
    >>> table.prob_of(0), table.prob_of(1)
    (0.75, 0.25)
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

import msgspec

from klaw_sampling.errors import InvalidSizeError, InvalidWeightsError
from klaw_sampling.result import checked

__all__ = ['AliasTable', 'build_table', 'try_build_table']

logger = logging.getLogger(__name__)


class AliasTable(msgspec.Struct, frozen=True, gc=False):
    """Immutable alias table over indices ``0..n-1``.

    Component ``i`` is the pair ``(cutoffs[i], aliases[i])`` with the cutoff in
    [0, 1] and the alias in [0, n). Tables never change after construction and
    can be read from any number of threads without locking.

    Attributes:
        cutoffs: Probability of keeping the home row, per row.
        aliases: Index returned when the home row is rejected, per row.
    """

    cutoffs: tuple[float, ...]
    aliases: tuple[int, ...]

    @classmethod
    def from_weights(cls, weights: Iterable[float]) -> AliasTable:
        """Build a table from non-negative weights. See ``build_table``."""
        return build_table(weights)

    @property
    def size(self) -> int:
        return len(self.cutoffs)

    def __len__(self) -> int:
        return len(self.cutoffs)

    def component(self, i: int) -> tuple[float, int]:
        """Return the ``(cutoff, alias)`` pair of row ``i``."""
        return self.cutoffs[i], self.aliases[i]

    def index_of(self, i: int, u: float) -> int:
        """Resolve row ``i`` with a uniform draw ``u`` in [0, 1).

        ``i`` and ``u`` must be drawn independently; ``i`` uniform on [0, n).
        """
        if u < self.cutoffs[i]:
            return i
        return self.aliases[i]

    def index_uniform(self, u: float) -> int:
        """Resolve a single uniform draw ``u`` in [0, 1).

        The integer part of ``n * u`` picks the row and the fractional part is
        reused as the cutoff draw.
        """
        n = len(self.cutoffs)
        x = n * u
        i = min(int(x), n - 1)
        return self.index_of(i, x - i)

    def prob_of(self, i: int) -> float:
        """Return the probability that a lookup selects index ``i``.

        Sums the kept mass of row ``i`` and the rejected mass of every row
        aliasing to ``i``. O(n); use ``probabilities()`` for all indices.
        """
        mass = self.cutoffs[i]
        for cutoff, alias in zip(self.cutoffs, self.aliases, strict=True):
            if alias == i:
                mass += 1.0 - cutoff
        return mass / len(self.cutoffs)

    def probabilities(self) -> list[float]:
        """Return the selection probability of every index, in O(n)."""
        n = len(self.cutoffs)
        mass = list(self.cutoffs)
        for cutoff, alias in zip(self.cutoffs, self.aliases, strict=True):
            mass[alias] += 1.0 - cutoff
        return [m / n for m in mass]


def _validate(weights: Iterable[float]) -> tuple[list[float], float]:
    """Return the weights as floats together with their positive, finite total."""
    ws: list[float] = []
    for i, raw in enumerate(weights):
        try:
            w = float(raw)
        except (OverflowError, TypeError, ValueError):
            # e.g. an int beyond float range, or something that is not a number
            raise InvalidWeightsError('weight must be finite', i) from None
        if not math.isfinite(w):
            raise InvalidWeightsError('weight must be finite', i)
        if w < 0.0:
            raise InvalidWeightsError('weight must be non-negative', i)
        ws.append(w)
    if not ws:
        raise InvalidSizeError('n', 0, 'alias table needs at least one weight')

    try:
        total = math.fsum(ws)
    except OverflowError:
        # Finite weights whose sum overflows; rescale by the largest one.
        peak = max(ws)
        ws = [w / peak for w in ws]
        total = math.fsum(ws)
    if total <= 0.0:
        raise InvalidWeightsError('total weight must be positive')
    return ws, total


def build_table(weights: Iterable[float]) -> AliasTable:
    """Build an alias table for the distribution proportional to ``weights``.

    Runs in O(n) time with O(n) scratch space. Zero weights are allowed as long
    as at least one weight is positive; an index with zero weight is never
    returned by a lookup.

    Args:
        weights: Non-negative finite weights, at least one of them positive.

    Returns:
        An AliasTable with one row per weight.

    Raises:
        InvalidSizeError: If ``weights`` is empty.
        InvalidWeightsError: If a weight is negative, NaN or infinite, or all
            weights are zero.

    Example:
        ```python
        table = build_table([1.0, 1.0, 1.0, 1.0])
        table.probabilities()  # [0.25, 0.25, 0.25, 0.25]
        ```
    """
    ws, total = _validate(weights)
    n = len(ws)

    scaled = [n * (w / total) for w in ws]
    cutoffs = [1.0] * n
    aliases = list(range(n))

    small: list[int] = []
    large: list[int] = []
    for i, s in enumerate(scaled):
        if s < 1.0:
            small.append(i)
        else:
            large.append(i)

    transfers = 0
    while small and large:
        lo = small.pop()
        hi = large.pop()
        cutoffs[lo] = scaled[lo]
        aliases[lo] = hi
        scaled[hi] -= 1.0 - scaled[lo]
        if scaled[hi] < 1.0:
            small.append(hi)
        else:
            large.append(hi)
        transfers += 1

    # Rows left in either list hold mass 1 up to rounding and keep their initial (1.0, i).
    logger.debug(
        'alias table built',
        extra={'size': n, 'transfers': transfers, 'leftover': len(small) + len(large)},
    )
    return AliasTable(tuple(cutoffs), tuple(aliases))


try_build_table = checked(build_table)
"""``build_table`` returning ``Ok(table)`` or ``Err(InvalidSize | InvalidWeights)``."""
