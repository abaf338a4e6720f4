"""Structured logging for klaw-sampling.

Table construction and configuration report through stdlib loggers under the
``klaw_sampling`` namespace. ``configure_logging`` routes those records, and
anything else on the root logger, through structlog's ProcessorFormatter so
they share one JSON (or console) stream. ``capture_events`` collects the
package's own events as dicts, e.g. to count table builds in tests.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

__all__ = ['capture_events', 'configure_logging', 'get_logger']

PACKAGE_LOGGER = 'klaw_sampling'

_sinks: list[Callable[[dict[str, Any]], None]] = []


def _is_package_event(event_dict: dict[str, Any]) -> bool:
    name = event_dict.get('logger') or ''
    return name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + '.')


def _forward_to_sinks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Hand a copy of every klaw_sampling event to the active capture sinks."""
    if _sinks and _is_package_event(event_dict):
        for sink in tuple(_sinks):
            sink(dict(event_dict))
    return event_dict


def _shared_processors() -> list[Any]:
    # ExtraAdder lifts ``extra={...}`` from stdlib records, e.g. the table size.
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.ExtraAdder(),
        _forward_to_sinks,
    ]


def configure_logging(level: str = 'INFO', *, json_output: bool = True) -> None:
    """Install a structlog-formatted stderr handler on the root logger.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
            Table builds are only reported at DEBUG.
        json_output: If True, emit JSON lines. If False, use console output.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_shared_processors(),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_shared_processors(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str | None = None) -> Any:
    """Return a structlog logger, defaulting to the package namespace."""
    return structlog.get_logger(name or PACKAGE_LOGGER)


@contextmanager
def capture_events() -> Iterator[list[dict[str, Any]]]:
    """Collect klaw_sampling log events emitted inside the block.

    Events from other loggers are not collected. Only records that pass the
    configured level reach the capture, so call ``configure_logging('DEBUG')``
    first to see table builds.

    Example:
        ```python
        configure_logging('DEBUG')
        with capture_events() as events:
            build_table([3.0, 1.0])
        events[0]['size']  # 2
        ```
    """
    events: list[dict[str, Any]] = []
    sink = events.append
    _sinks.append(sink)
    try:
        yield events
    finally:
        _sinks.remove(sink)
