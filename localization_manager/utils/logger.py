import logging
import sys

CONSOLE_HANDLER = "console"


def setup_logger(name="localization_manager", verbose=False):
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)

    for handler in [h for h in logger.handlers if h.get_name() == CONSOLE_HANDLER]:
        logger.removeHandler(handler)

    ch = logging.StreamHandler(sys.stdout)
    ch.set_name(CONSOLE_HANDLER)
    ch.setLevel(logging.DEBUG if verbose else logging.INFO)
    ch.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
    logger.addHandler(ch)

    return logger
