"""Logging for the API: one stdout handler on the ``fintechora`` logger."""

import logging
import sys

ROOT_LOGGER = "fintechora"
HANDLER_NAME = "fintechora-stdout"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Attach the stdout handler once and set the level.

    Safe to call from every create_app(); repeated calls only update the level.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not any(h.get_name() == HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.set_name(HANDLER_NAME)
        logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    # module loggers live under fintechora.* and inherit the handler above
    return logging.getLogger(name)
