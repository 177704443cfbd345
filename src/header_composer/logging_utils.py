"""
Shared logger for the header composer.

Every module logs through ``logger`` so the CLI output has one format,
and the compositor does not import the CLI to get at it.
"""

from __future__ import annotations

import logging
from typing import TextIO

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def setup_logger(
        name: str = "header_composer",
        level: int = logging.INFO,
        stream: TextIO | None = None,
) -> logging.Logger:
    """
    Return the named logger with a single stream handler attached.

    Repeated calls reuse the existing handler, so importing modules in
    any order never duplicates output. ``stream`` defaults to stderr.
    """
    logger_instance = logging.getLogger(name)
    logger_instance.setLevel(level)
    if not logger_instance.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger_instance.addHandler(handler)
        logger_instance.propagate = False
    return logger_instance


logger = setup_logger()
