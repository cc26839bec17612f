import logging
from logging.handlers import RotatingFileHandler

import pytest

from ftxapi.logging_config import LOG_FILE_NAME, LOGGER_NAME, setup_logging


@pytest.fixture
def clean_logger():
    logger = logging.getLogger(LOGGER_NAME)
    saved = (logger.handlers[:], logger.level)
    logger.handlers.clear()
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])


def test_file_and_console_handlers(clean_logger, tmp_path):
    logger = setup_logging(log_dir=tmp_path)
    assert logger is clean_logger

    file_handlers = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
    assert len(file_handlers) == 1
    assert file_handlers[0].level == logging.DEBUG
    assert len(logger.handlers) == 2

    logger.debug("hello from the test")
    file_handlers[0].flush()
    assert "hello from the test" in (tmp_path / LOG_FILE_NAME).read_text(encoding="utf-8")


def test_repeated_calls_do_not_duplicate_handlers(clean_logger, tmp_path):
    setup_logging(log_dir=tmp_path)
    setup_logging(log_dir=tmp_path)
    assert len(clean_logger.handlers) == 2


def test_console_level(clean_logger, tmp_path):
    logger = setup_logging(log_level=logging.INFO, log_dir=tmp_path, console_level=logging.WARNING)
    console = [h for h in logger.handlers if not isinstance(h, RotatingFileHandler)]
    assert console[0].level == logging.WARNING
    assert logger.level == logging.INFO
