"""structlog configuration shared by envreader consumers."""

from __future__ import annotations

import logging
import sys

import structlog


def setup_logging(service_name: str, level: str = "INFO", json_output: bool = False) -> None:
    """Configure structlog for a service.

    Args:
        service_name: Bound to every event as ``service``.
        level: Standard logging level name. Unknown names fall back to INFO.
        json_output: Render events as JSON lines instead of console output.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    renderer = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
    structlog.contextvars.bind_contextvars(service=service_name)


def get_logger(name: str | None = None) -> structlog.typing.FilteringBoundLogger:
    return structlog.get_logger(name)
