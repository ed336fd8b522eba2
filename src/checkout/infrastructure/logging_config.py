"""Centralized logging configuration.

Every module logs through ``logging.getLogger(__name__)``; this module
wires those loggers to a single format and destination.  Logs go to
stderr so the CLI's stdout carries nothing but its JSON results.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(levelname)s - [PID:%(process)d] - %(name)s - %(message)s"


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure the root logger.

    Args:
        level: Name of the minimum level to emit (e.g. "INFO", "DEBUG").
        log_file: Optional path of a file that receives a copy of the logs.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level.upper(),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )

    # Reduce verbosity from the HTTP client stack
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
