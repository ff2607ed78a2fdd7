import logging

import pytest

from airdensity.logging_config import setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("airdensity")
    yield logger
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def test_console_handler(package_logger):
    logger = setup_logging(logging.WARNING)
    assert logger is package_logger
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1
    assert logging.getLogger("matplotlib").level >= logging.WARNING


def test_repeated_setup_does_not_duplicate_handlers(package_logger):
    setup_logging()
    setup_logging()
    assert len(package_logger.handlers) == 1


def test_file_handler(package_logger, tmp_path):
    log_file = tmp_path / "airdensity.log"
    setup_logging(logging.DEBUG, log_file=str(log_file))
    assert len(package_logger.handlers) == 2

    logging.getLogger("airdensity.factory").info("model created")
    for handler in package_logger.handlers:
        handler.flush()
    assert "airdensity.factory - INFO - model created" in log_file.read_text(encoding="utf-8")
