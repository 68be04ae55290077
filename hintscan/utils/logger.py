from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


def setup_logging(
    log_file: str = "",
    log_level: str = "INFO",
    stderr_level: str = "WARNING",
) -> logging.Logger:
    """Configure the ``hintscan`` logger once per process.

    stdout carries scan results, so diagnostics only ever go to stderr and,
    when *log_file* is set, to that file at *log_level*.
    """
    logger = logging.getLogger("hintscan")
    if logger.handlers:
        return logger
    logger.setLevel(min(_level(log_level), _level(stderr_level)))

    fmt = logging.Formatter(LOG_FORMAT)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(_level(stderr_level))
    stderr_handler.setFormatter(fmt)
    logger.addHandler(stderr_handler)

    if log_file:
        expanded = os.path.expanduser(log_file)
        Path(expanded).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(expanded)
        file_handler.setLevel(_level(log_level))
        file_handler.setFormatter(fmt)
        logger.addHandler(file_handler)

    return logger
