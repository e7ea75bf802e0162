"""Route the ``wadkit`` logger into the active reporter.

Library code logs through ``get_logger()``; the CLI calls
``configure_logging`` once so records reach the selected reporter instead of
the root logger.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from .reporting import get_reporter

LOGGER_NAME = "wadkit"

__all__ = ["LOGGER_NAME", "get_logger", "configure_logging", "section", "step"]


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


class _ReporterHandler(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        rep = get_reporter()
        msg = self.format(record)
        if record.levelno >= logging.ERROR:
            rep.error(msg)
        elif record.levelno >= logging.WARNING:
            rep.warning(msg)
        elif record.levelno >= logging.INFO:
            rep.status(msg)
        else:
            rep.verbose(msg, level=1)


def configure_logging(verbosity: int = 0) -> logging.Logger:
    """Set the level from ``-v`` and attach the reporter handler once."""
    logger = get_logger()
    logger.setLevel(logging.DEBUG if verbosity >= 1 else logging.INFO)
    if not any(isinstance(h, _ReporterHandler) for h in logger.handlers):
        handler = _ReporterHandler()
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    logger.propagate = False
    return logger


def step(message: str) -> None:
    get_logger().info("  -> %s", message)


@contextmanager
def section(title: str) -> Iterator[logging.Logger]:
    get_reporter().section(title)
    yield get_logger()
