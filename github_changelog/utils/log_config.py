"""Configures structlog for command line use."""

import logging
import sys

import structlog


def configure_logging(verbose: bool = False) -> None:
    """Send structured log output to standard error.

    Verbose mode lowers the threshold to DEBUG, which also surfaces every git
    command the tool runs.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
