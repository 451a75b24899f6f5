"""Logging setup for gitsandbox.

Library modules log through ``structlog.get_logger(__name__)``. The command
line front end calls :func:`configure_logging` once so that events go to
stderr, below the terminal output, filtered by level.
"""

import logging
import sys
from os import getenv
from typing import Optional, TextIO

import structlog

DEFAULT_LEVEL = 'warning'

LOG_LEVELS = {
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warning': logging.WARNING,
    'error': logging.ERROR,
    'critical': logging.CRITICAL,
}


def resolve_log_level(level: Optional[str] = None) -> int:
    """
    Work out the effective log level.

    Precedence (highest first):
    1. GITSANDBOX_DEBUG environment variable (any value enables DEBUG)
    2. The `level` argument
    3. GITSANDBOX_LOG_LEVEL environment variable
    4. warning

    Args:
        level: Level name (debug, info, warning, error)

    Returns:
        The logging level as an integer
    """
    if getenv('GITSANDBOX_DEBUG'):
        return logging.DEBUG

    name = level or getenv('GITSANDBOX_LOG_LEVEL') or DEFAULT_LEVEL
    return LOG_LEVELS.get(name.lower(), logging.WARNING)


def configure_logging(level: Optional[str] = None, stream: Optional[TextIO] = None) -> int:
    """
    Configure structlog for the command line front end.

    Args:
        level: Level name, see :func:`resolve_log_level`
        stream: Output stream (stderr by default)

    Returns:
        The effective level as an integer
    """
    effective_level = resolve_log_level(level)

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt='iso'),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(effective_level),
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stderr),
        context_class=dict,
        cache_logger_on_first_use=False,
    )
    return effective_level
