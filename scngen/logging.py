"""Logging utilities for scngen commands.

SCN text goes to stdout, so every console record is written to stderr and
``quiet`` drops progress chatter for piped renders. The optional file sink
always records DEBUG detail regardless of the console level.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

_LOGGER_NAME = "scngen"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the scngen hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def console_level(*, verbose: bool = False, quiet: bool = False) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    command: str | None = None,
    log_file: Path | None = None,
) -> logging.Logger:
    """Route scngen records to stderr, tagged with ``command``, plus an optional file.

    The log file's parent directories are created. ``OSError`` from opening the
    file propagates to the caller.
    """
    level = console_level(verbose=verbose, quiet=quiet)
    logger = logging.getLogger(_LOGGER_NAME)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    prefix = f"[scngen {command}]" if command else "[scngen]"
    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setLevel(level)
    stream_handler.setFormatter(logging.Formatter(f"{prefix} %(levelname)s %(message)s"))
    logger.addHandler(stream_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(file_handler)
        level = logging.DEBUG

    logger.setLevel(level)
    return logger


__all__ = ["configure_logging", "console_level", "get_logger"]
