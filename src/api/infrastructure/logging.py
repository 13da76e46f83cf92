"""Structlog configuration for the application.

Console output with colors on a terminal, JSON lines everywhere else.
Every event carries the service name and deployment environment so logs
from several deployments can share one sink.
"""

import logging
import os
import sys

import structlog


def _use_colors() -> bool:
    # FORCE_COLOR=1 enables colors even in non-TTY environments (like Docker)
    force_color = os.environ.get("FORCE_COLOR", "").lower() in ("1", "true", "yes")
    return force_color or sys.stdout.isatty()


def configure_logging(
    level: str = "info",
    service: str | None = None,
    environment: str | None = None,
) -> None:
    """Configure structlog processors and the minimum log level.

    Args:
        level: Minimum level name (debug, info, warning, error)
        service: Service name bound to every event
        environment: Deployment environment bound to every event
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if _use_colors():
        processors: list[structlog.types.Processor] = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ]

    min_level = logging.getLevelNamesMapping().get(level.upper(), logging.INFO)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    structlog.contextvars.clear_contextvars()
    bound = {k: v for k, v in (("service", service), ("environment", environment)) if v}
    if bound:
        structlog.contextvars.bind_contextvars(**bound)
