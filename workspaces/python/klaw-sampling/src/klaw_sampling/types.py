"""Constrained type aliases for validating sampling configuration.

msgspec checks these constraints when values are decoded or converted,
so a bad seed or log level is rejected before any source is built:

    >>> import msgspec
    >>> from klaw_sampling.types import Seed
    >>> msgspec.convert(42, Seed)
    42
    >>> msgspec.convert(-1, Seed)
    Traceback (most recent call last):
    ...
    msgspec.ValidationError: Expected `int` >= 0
"""

from __future__ import annotations

from typing import Annotated

import msgspec

__all__ = [
    'LogLevel',
    'Seed',
]

Seed = Annotated[int, msgspec.Meta(ge=0)]
"""Seed for the default RandomSource.

Valid: 0, 42, 2**64
Invalid: -1
"""

LogLevel = Annotated[
    str,
    msgspec.Meta(pattern=r'^(?i:debug|info|warning|error|critical)$'),
]
"""Standard logging level name, case-insensitive.

Valid: "DEBUG", "info", "Warning"
Invalid: "", "verbose", "10"
"""
