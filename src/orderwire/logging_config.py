"""
Structured logging setup.
"""

import logging
import sys
from typing import Optional

import structlog

from orderwire.config import config


def configure_logging(
    level: Optional[str] = None,
    json_output: Optional[bool] = None,
) -> None:
    """
    Configure structlog for the process.

    Args:
        level: Minimum level name, defaults to config.logging.level
        json_output: JSON renderer when True, console renderer otherwise
    """
    level = level or config.logging.level
    if json_output is None:
        json_output = config.logging.json_output

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


__all__ = ["configure_logging"]
