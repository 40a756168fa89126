"""
railop logging - structured logging for the operation engine.

Standardized structlog configuration used by every railop module. The
engine itself only emits debug-level events (``operation_started``,
``step_short_circuited``, ``operation_finished``...), so nothing is printed
unless an application opts into DEBUG.

Architecture:
    ::

        configure_logging(level="INFO", json_format=None)
            │
            ▼
        structlog processor chain:
          1. TimeStamper(fmt="iso")
          2. merge_contextvars        (operation=..., bound per call)
          3. add_log_level
          4. StackInfoRenderer / set_exc_info
          5. JSONRenderer (or ConsoleRenderer for dev)

        logger = get_logger(__name__)
        logger.debug("operation_started", operation="Transfer")

Features:
    - Structured JSON output for log aggregation
    - Context propagation (``operation`` bound for the duration of a call)
    - Colored console output for development
    - Defaults taken from ``RailopSettings`` when called without arguments

Tags:
    logging, structlog, observability, railop

Doc-Types:
    - API Reference
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor


def configure_logging(
    level: str | None = None,
    json_format: bool | None = None,
    add_timestamp: bool = True,
) -> None:
    """Configure structured logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to settings.
        json_format: True for JSON, False for console. Defaults to settings.
        add_timestamp: Include ISO timestamp in logs

    Example:
        # Production (JSON for log aggregation)
        configure_logging(level="INFO", json_format=True)

        # Development
        configure_logging(level="DEBUG")
    """
    if level is None or json_format is None:
        from railop.core.settings import get_settings

        settings = get_settings()
        level = level or settings.log_level
        json_format = settings.log_json if json_format is None else json_format

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
    ]

    if add_timestamp:
        shared_processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    if json_format:
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> Any:
    """Get a structured logger.

    Args:
        name: Logger name (usually __name__), bound as ``logger_name``

    Returns:
        structlog BoundLogger proxy
    """
    if name is None:
        return structlog.get_logger()
    return structlog.get_logger(name, logger_name=name)


def bind_context(**kwargs: Any) -> None:
    """Bind context to include in all subsequent logs.

    Example:
        bind_context(operation="Transfer")
        logger.debug("step_short_circuited")  # Includes operation
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def unbind_context(*keys: str) -> None:
    """Remove specific keys from logging context."""
    structlog.contextvars.unbind_contextvars(*keys)


def clear_context() -> None:
    """Clear all bound context."""
    structlog.contextvars.clear_contextvars()


class LogContext:
    """Context manager for scoped logging context.

    Keys that were already bound are restored on exit, so nested operation
    calls do not clobber the outer call's context.

    Example:
        with LogContext(operation="Transfer"):
            logger.debug("operation_started")
        # Context restored here
    """

    def __init__(self, **kwargs: Any):
        self._context = kwargs
        self._previous: dict[str, Any] = {}

    def __enter__(self) -> "LogContext":
        current = structlog.contextvars.get_contextvars()
        self._previous = {k: current[k] for k in self._context if k in current}
        bind_context(**self._context)
        return self

    def __exit__(self, *args) -> None:
        unbind_context(*self._context.keys())
        if self._previous:
            bind_context(**self._previous)


__all__ = [
    "configure_logging",
    "get_logger",
    "bind_context",
    "unbind_context",
    "clear_context",
    "LogContext",
]
