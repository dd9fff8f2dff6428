from __future__ import annotations

import logging

from fintechora.core.logging import HANDLER_NAME, get_logger, setup_logging


def stdout_handlers(logger: logging.Logger) -> list:
    return [h for h in logger.handlers if h.get_name() == HANDLER_NAME]


def test_setup_logging_adds_one_handler_however_often_it_runs():
    setup_logging("INFO")
    logger = setup_logging("debug")

    assert len(stdout_handlers(logger)) == 1
    assert logger.level == logging.DEBUG


def test_module_loggers_sit_under_the_package_logger():
    logger = setup_logging("INFO")

    assert get_logger("fintechora.storage.database").parent is logger


def test_unknown_level_falls_back_to_info():
    assert setup_logging("chatty").level == logging.INFO
