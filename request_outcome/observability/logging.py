"""structlog setup for outcome, transport and auth events.

Every logger binds a ``component`` (``outcome``, ``transport`` or ``auth``)
and emits snake_case events such as ``server_error`` or
``request_failed``. Request headers and URLs are redacted before they are
logged, so rendering needs no further filtering.
"""

import logging
import sys
from typing import TYPE_CHECKING, TextIO

import structlog


if TYPE_CHECKING:
    from request_outcome.settings.app import AppSettings


def configure_logging(
    level: int = logging.INFO,
    output: TextIO = sys.stderr,
    json_format: bool = True,
) -> None:
    """Route request outcome events to a stream.

    Args:
        level: Minimum level; ``DEBUG`` also shows per-request transport events.
        output: Stream the rendered events are written to.
        json_format: One JSON object per line when True, console lines otherwise.
    """
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer(sort_keys=True)
        if json_format
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    processors.append(renderer)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=output),
        cache_logger_on_first_use=True,
    )

    # httpx and httpcore log through the standard library
    logging.basicConfig(format="%(message)s", stream=output, level=level)


def configure_logging_from_settings(
    settings: "AppSettings",
    output: TextIO = sys.stderr,
) -> None:
    """Configure logging from ``LOG_LEVEL`` and ``LOG_JSON``.

    Args:
        settings: Loaded application settings.
        output: Stream the rendered events are written to.
    """
    configure_logging(
        level=settings.log_level_number,
        output=output,
        json_format=settings.log_json,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger, optionally named."""
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return logger
