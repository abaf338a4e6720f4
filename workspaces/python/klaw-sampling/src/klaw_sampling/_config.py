"""Sampling configuration: SamplingConfig, init() and get_config()."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

import msgspec

from klaw_sampling._logging import configure_logging, get_logger
from klaw_sampling.types import LogLevel, Seed

__all__ = [
    'SEED_ENV_VAR',
    'SamplingConfig',
    'get_config',
    'init',
]

SEED_ENV_VAR = 'KLAW_SAMPLING_SEED'


@dataclass(frozen=True)
class SamplingConfig:
    """Configuration for klaw-sampling.

    Attributes:
        seed: Seed for sources built by ``default_source()``. None = fresh entropy.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
    """

    seed: int | None = None
    log_level: str | None = None


# Global configuration (set by init())
_config: SamplingConfig | None = None


def _detect_seed() -> int | None:
    """Read the default seed from the environment.

    Unparseable or negative values are ignored with a warning.
    """
    raw = os.environ.get(SEED_ENV_VAR, '').strip()
    if not raw:
        return None
    try:
        return msgspec.convert(raw, Seed, strict=False)
    except msgspec.ValidationError:
        logging.warning("Invalid %s value '%s', ignoring", SEED_ENV_VAR, raw)
        return None


def init(
    seed: int | None = None,
    log_level: str | None = None,
) -> SamplingConfig:
    """Initialize klaw-sampling with the given configuration.

    Args:
        seed: Seed for ``default_source()``. Read from KLAW_SAMPLING_SEED if None.
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.

    Returns:
        The SamplingConfig that was set.

    Raises:
        msgspec.ValidationError: If seed is negative or log_level is not a
            standard level name.

    Example:
        ```python
        from klaw_sampling import default_source, init

        init(seed=7, log_level="DEBUG")
        source = default_source()  # reproducible stream
        ```
    """
    global _config  # noqa: PLW0603

    resolved_seed = _detect_seed() if seed is None else msgspec.convert(seed, Seed)
    resolved_level = None if log_level is None else msgspec.convert(log_level, LogLevel).upper()

    _config = SamplingConfig(seed=resolved_seed, log_level=resolved_level)

    if resolved_level is not None:
        configure_logging(resolved_level)
        get_logger(__name__).debug('sampling configured', seed=resolved_seed)

    return _config


def get_config() -> SamplingConfig:
    """Get the current sampling configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'klaw-sampling not initialized. Call klaw_sampling.init() first.'
        raise RuntimeError(msg)
    return _config
