"""Uniform random sources: the UniformSource protocol and a random.Random adapter.

Every sampler in this package takes its source as an explicit argument.
Any object with ``real01()`` and ``uniform_int(n)`` satisfies the protocol,
which makes deterministic fakes trivial in tests.
"""

from __future__ import annotations

import random
from abc import abstractmethod
from typing import Any, Protocol, runtime_checkable

from klaw_sampling.errors import InvalidSizeError

__all__ = ['RandomSource', 'UniformSource', 'default_source']


@runtime_checkable
class UniformSource(Protocol):
    """Protocol for a stream of uniform draws.

    Implementations must be total: each call returns a value and has no
    effect other than advancing the stream.
    """

    @abstractmethod
    def real01(self) -> float:
        """Return a float uniform on [0, 1).

        Must never return exactly 1.0; may return 0.0.
        """
        ...

    @abstractmethod
    def uniform_int(self, n: int) -> int:
        """Return an integer uniform on [0, n) for n > 0."""
        ...


class RandomSource:
    """UniformSource backed by a ``random.Random`` generator.

    Args:
        seed: Seed for a new generator. Ignored when ``rng`` is given.
        rng: Existing generator to draw from (shared, not copied).

    Example:
        ```python
        source = RandomSource(seed=42)
        source.real01()        # 0.6394267984578837
        source.uniform_int(6)  # in [0, 6)
        ```
    """

    __slots__ = ('_rng', '_seed')

    def __init__(self, seed: int | None = None, *, rng: random.Random | None = None) -> None:
        self._seed = seed
        self._rng = rng if rng is not None else random.Random(seed)  # noqa: S311

    @property
    def seed(self) -> int | None:
        return self._seed

    def reseed(self, seed: int | None) -> None:
        """Reseed the generator (None -> fresh non-deterministic state)."""
        self._seed = seed
        self._rng.seed(seed)

    def real01(self) -> float:
        return self._rng.random()

    def uniform_int(self, n: int) -> int:
        if n < 1:
            raise InvalidSizeError('n', n, 'uniform_int needs a positive range')
        return self._rng.randrange(n)

    def getstate(self) -> Any:
        """Return the generator state, for replaying a stream."""
        return self._rng.getstate()

    def setstate(self, state: Any) -> None:
        self._rng.setstate(state)

    def __repr__(self) -> str:
        return f'RandomSource(seed={self._seed!r})'


def default_source() -> RandomSource:
    """Build a RandomSource seeded from the active configuration.

    Falls back to an unseeded source when ``init()`` has not been called.
    Each call returns an independent source; nothing is shared globally.
    """
    from klaw_sampling._config import _config

    seed = _config.seed if _config is not None else None
    return RandomSource(seed)
