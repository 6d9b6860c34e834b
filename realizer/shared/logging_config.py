# realizer/shared/logging_config.py
import logging
import sys

import structlog

from realizer.shared.config import LogFormat, settings


def configure_logging():
    """
    Route structlog output through one renderer chosen by LOG_FORMAT:
    JSON lines for machines, colourised console text for people.
    """
    renderer = (
        structlog.processors.JSONRenderer()
        if settings.LOG_FORMAT == LogFormat.JSON
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # The lexicon adapter logs through the standard library.
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=settings.LOG_LEVEL.upper(),
    )
