"""Structured logging configuration built on structlog.

Log records are rendered by structlog and emitted through the standard library
``logging`` handlers, so they always land on standard error (and optionally a
log file) and never mix with the program output on standard output.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

from scratchpad.utils.settings import get_settings

if TYPE_CHECKING:
    from structlog.typing import Processor

    from scratchpad.utils.settings import LoggingSettings


def _build_renderer(log_format: str) -> Processor:
    """Return the final structlog processor for the requested format."""
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    if log_format == "plain":
        return structlog.processors.KeyValueRenderer(
            key_order=["timestamp", "level", "logger", "event"],
        )
    return structlog.dev.ConsoleRenderer(colors=False)


def _build_handlers(settings: LoggingSettings) -> list[logging.Handler]:
    """Create the stdlib handlers that receive rendered log lines."""
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if settings.file_logging_enabled and settings.log_file_path:
        handlers.append(
            logging.FileHandler(settings.log_file_path, encoding="utf-8"),
        )
    return handlers


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """Configure structlog and the stdlib root logger from settings.

    Args:
        settings: Logging settings to apply. Defaults to the global settings.

    """
    settings = settings or get_settings()

    logging.basicConfig(
        format="%(message)s",
        level=settings.log_level,
        handlers=_build_handlers(settings),
        force=True,
    )

    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if settings.log_format != "console":
        processors.append(structlog.processors.format_exc_info)
    processors.append(_build_renderer(settings.log_format))

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger bound with the given name and values."""
    return structlog.get_logger(name, **initial_values)
