"""
Logging Configuration
Sets up the package logger for applications embedding the library.
"""
import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "airdensity"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger for the 'airdensity' namespace.

    The density formulas never log; records come from the factory and the
    measurement context only. Matplotlib is held at WARNING or above so that
    plotting a model at DEBUG level does not flood the output.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Avoid duplicate records when called more than once
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logging.getLogger("matplotlib").setLevel(max(level, logging.WARNING))

    logger.debug("Logging initialized (level=%s, file=%s).", logging.getLevelName(level), log_file)
    return logger
