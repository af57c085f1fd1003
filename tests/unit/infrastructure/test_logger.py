"""Tests for logging setup."""

import logging

import pytest

from pattern_catalog.config.schemas import LogDestination, LoggingConfig
from pattern_catalog.infrastructure.logging import get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    level = root.level
    handlers = root.handlers[:]
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_defaults_log_to_stderr_at_warning():
    setup_logging()

    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], logging.StreamHandler)


def test_file_destination(tmp_path):
    log_file = tmp_path / "logs" / "catalog.log"
    config = LoggingConfig(level="INFO", destination=LogDestination.FILE, file_path=str(log_file))

    setup_logging(config)
    get_logger("test").info("Demo executed", demo="proxy")
    for handler in logging.getLogger().handlers:
        handler.flush()

    content = log_file.read_text()
    assert "Demo executed" in content
    assert "demo=proxy" in content


def test_both_destinations(tmp_path):
    config = LoggingConfig(destination=LogDestination.BOTH, file_path=str(tmp_path / "catalog.log"))

    setup_logging(config)

    assert len(logging.getLogger().handlers) == 2


def test_invalid_level_rejected():
    with pytest.raises(ValueError):
        LoggingConfig(level="CHATTY")
