import logging
from logging.handlers import RotatingFileHandler

import pytest

from backend.logs import LOGGER_NAME, setup_logging


@pytest.fixture
def clean_logger():
    logger = logging.getLogger(LOGGER_NAME)
    saved = (logger.handlers[:], logger.level)
    logger.handlers = []
    yield logger
    for h in logger.handlers:
        h.close()
    logger.handlers, level = saved
    logger.setLevel(level)


def test_console_and_file_handlers(clean_logger, tmp_path, monkeypatch):
    log_file = tmp_path / "calc.log"
    monkeypatch.setenv("CALC_LOG_FILE", str(log_file))
    monkeypatch.delenv("CALC_LOG_LEVEL", raising=False)

    logger = setup_logging()

    assert logger is clean_logger
    assert logger.level == logging.INFO
    file_handlers = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
    assert len(logger.handlers) == 2
    assert len(file_handlers) == 1
    assert file_handlers[0].maxBytes == 512_000
    assert file_handlers[0].backupCount == 2

    logger.info("hello")
    file_handlers[0].flush()
    assert "[INFO] hello" in log_file.read_text(encoding="utf-8")


def test_setup_is_idempotent(clean_logger, tmp_path, monkeypatch):
    monkeypatch.setenv("CALC_LOG_FILE", str(tmp_path / "calc.log"))
    setup_logging()
    setup_logging()
    assert len(clean_logger.handlers) == 2


def test_level_from_environment(clean_logger, monkeypatch):
    monkeypatch.setenv("CALC_LOG_FILE", "")
    monkeypatch.setenv("CALC_LOG_LEVEL", "debug")
    logger = setup_logging()
    assert logger.level == logging.DEBUG
    assert [type(h) for h in logger.handlers] == [logging.StreamHandler]


def test_unknown_level_falls_back_to_info(clean_logger, monkeypatch):
    monkeypatch.setenv("CALC_LOG_FILE", "")
    monkeypatch.setenv("CALC_LOG_LEVEL", "chatty")
    assert setup_logging().level == logging.INFO
