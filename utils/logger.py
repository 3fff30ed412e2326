"""Logging setup for the CLI and the report server."""

import logging
import sys
from typing import Optional, TextIO

# Connection-pool chatter from requests; only useful when debugging
NOISY_LOGGERS = ("urllib3",)


def setup_logger(
    log_level: str = "INFO",
    name: str = "pr_showcase",
    stream: Optional[TextIO] = None
) -> logging.Logger:
    """
    Configure root logging and return the application logger.

    Pipeline modules log through ``logging.getLogger(__name__)`` and inherit
    the root configuration set here. Calling this again replaces the
    previous configuration, which is how the CLI moves logs to stderr once
    it knows the report is going to stdout.

    Args:
        log_level: Logging level name, case insensitive (unknown names mean INFO)
        name: Logger name (default: pr_showcase)
        stream: Where log lines go (default: sys.stdout at call time)

    Returns:
        logging.Logger: Configured logger instance
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        stream=stream or sys.stdout,
        force=True,
    )

    noisy_level = logging.DEBUG if numeric_level <= logging.DEBUG else logging.WARNING
    for noisy in NOISY_LOGGERS:
        logging.getLogger(noisy).setLevel(noisy_level)

    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)

    return logger
