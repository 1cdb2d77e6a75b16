"""Logging setup; stdout carries the status line, so logs go to stderr."""

from __future__ import annotations

import logging
from pathlib import Path
import sys

from spotscroll.config import LoggingConfig

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_FILE_NAME = "spotscroll.log"


def configure_logging(config: LoggingConfig) -> None:
    """Attach stderr (and optionally file) handlers to the root logger."""
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {config.level}")

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.log_dir:
        log_dir = Path(config.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_dir / LOG_FILE_NAME, encoding="utf-8"))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)


__all__ = ["configure_logging"]
