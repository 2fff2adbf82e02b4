import logging

from localization_manager.utils.logger import CONSOLE_HANDLER, setup_logger


def _console_handlers(logger):
    return [h for h in logger.handlers if h.get_name() == CONSOLE_HANDLER]


def test_repeated_setup_keeps_one_console_handler():
    setup_logger("localization_manager.test_logger")
    logger = setup_logger("localization_manager.test_logger", verbose=True)
    handlers = _console_handlers(logger)
    assert len(handlers) == 1
    assert handlers[0].level == logging.DEBUG


def test_default_level_is_info():
    logger = setup_logger("localization_manager.test_logger_info")
    assert _console_handlers(logger)[0].level == logging.INFO
    assert logger.level == logging.DEBUG
