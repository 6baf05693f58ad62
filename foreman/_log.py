"""Logging for Foreman.

All loggers hang off the ``foreman`` logger, which writes to stderr and
does not propagate. Records render as ``[paths] message``.
"""

from __future__ import annotations

import logging
import sys
import threading

_ROOT = "foreman"

_lock = threading.Lock()
_handler: logging.Handler | None = None


class _TagFormatter(logging.Formatter):
    """Prefix each line with the logger name relative to ``foreman``."""

    def format(self, record: logging.LogRecord) -> str:
        tag = record.name.removeprefix(f"{_ROOT}.")
        return f"[{tag}] {super().format(record)}"


def setup_logging(verbose: bool = False) -> None:
    """Attach the stderr handler once; *verbose* switches the level to DEBUG.

    Repeat calls never add a handler, but a verbose call still lowers the
    level after an earlier quiet one (``get_logger`` runs setup at import).
    """
    global _handler
    with _lock:
        logger = logging.getLogger(_ROOT)
        if _handler is None:
            _handler = logging.StreamHandler(sys.stderr)
            _handler.setFormatter(_TagFormatter())
            logger.addHandler(_handler)
            logger.propagate = False
            logger.setLevel(logging.WARNING)
        if verbose:
            logger.setLevel(logging.DEBUG)


def get_logger(name: str) -> logging.Logger:
    setup_logging()
    return logging.getLogger(f"{_ROOT}.{name}")
