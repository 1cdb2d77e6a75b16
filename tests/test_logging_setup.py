from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from spotscroll.config import LoggingConfig
from spotscroll.logging_setup import LOG_FILE_NAME, configure_logging


def test_configure_logging_stderr_only() -> None:
    with patch("logging.basicConfig") as mock_basic:
        configure_logging(LoggingConfig(level="info"))

    kwargs = mock_basic.call_args.kwargs
    assert kwargs["level"] == logging.INFO
    assert len(kwargs["handlers"]) == 1
    assert isinstance(kwargs["handlers"][0], logging.StreamHandler)


def test_configure_logging_with_log_dir(tmp_path) -> None:
    log_dir = tmp_path / "logs"
    with patch("logging.basicConfig") as mock_basic:
        configure_logging(LoggingConfig(level="DEBUG", log_dir=str(log_dir)))

    handlers = mock_basic.call_args.kwargs["handlers"]
    file_handlers = [h for h in handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1
    assert file_handlers[0].baseFilename == str(log_dir / LOG_FILE_NAME)
    for handler in handlers:
        handler.close()


def test_configure_logging_unknown_level() -> None:
    with pytest.raises(ValueError):
        configure_logging(LoggingConfig(level="LOUD"))
