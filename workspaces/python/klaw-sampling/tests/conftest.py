"""Pytest configuration and shared fixtures for klaw-sampling tests."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Generator

    from klaw_sampling import RandomSource


@pytest.fixture
def source() -> RandomSource:
    """Seeded source so statistical tests are reproducible."""
    from klaw_sampling import RandomSource

    return RandomSource(seed=20240607)


@pytest.fixture
def reset_config() -> Generator[None]:
    """Clear the global sampling configuration before and after a test."""
    from klaw_sampling import _config

    _config._config = None
    yield
    _config._config = None


@pytest.fixture(autouse=True)
def restore_root_logger() -> Generator[None]:
    """Undo configure_logging() so later tests are not flooded with debug output."""
    import structlog

    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
