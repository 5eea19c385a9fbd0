import logging
import os
from logging.handlers import RotatingFileHandler

LOGGER_NAME = "calculator"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def setup_logging() -> logging.Logger:
    """
    Attach console and file output to the logger the engine and GUI write to.

    Engine transitions are logged at DEBUG, results and clears at INFO and
    divide-by-zero or overflow at WARNING, so CALC_LOG_LEVEL=DEBUG traces every
    button press. CALC_LOG_FILE names the rotating log file (calculator.log
    when unset); an empty value keeps output on the console only.
    Calling this again returns the logger unchanged.
    """
    level_name = os.getenv("CALC_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if logger.handlers:
        return logger  # already configured

    fmt = logging.Formatter(LOG_FORMAT)

    sh = logging.StreamHandler()
    sh.setLevel(level)
    sh.setFormatter(fmt)
    logger.addHandler(sh)

    log_path = os.getenv("CALC_LOG_FILE", "calculator.log")
    if log_path:
        fh = RotatingFileHandler(log_path, maxBytes=512_000, backupCount=2, encoding="utf-8")
        fh.setLevel(level)
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    return logger
