"""Logging for the completion engine and its command line."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

_LOGGER_NAME = "signalcomplete"
_CONSOLE_FORMAT = "[signalcomplete] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return `signalcomplete.<name>`, or the package logger itself."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Send engine diagnostics to stderr, and optionally to `log_file`.

    Suggestions are printed on stdout, so the console handler writes to stderr
    and stays at WARNING unless `verbose` is set. The file sink always records
    DEBUG so lookups and cache hits can be traced after the fact.
    """
    console_level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger(_LOGGER_NAME)
    logger.propagate = False
    _remove_handlers(logger)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(console)

    logger_level = console_level
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        sink = logging.FileHandler(log_file, encoding="utf-8")
        sink.setLevel(logging.DEBUG)
        sink.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(sink)
        logger_level = logging.DEBUG

    logger.setLevel(logger_level)
    return logger


def _remove_handlers(logger: logging.Logger) -> None:
    # main() may run several times in one process (tests, editor hosts).
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


__all__ = ["configure_logging", "get_logger"]
