import logging
import os
import sys
from typing import Optional

LOGGER_NAME = 'liquid_sort_core'
LOG_FORMAT = '%(asctime)s %(levelname)-5s %(name)s: %(message)s'

_handler: Optional[logging.Handler] = None


def level_from_env(environ=None) -> int:
    """DEBUG when LIQUID_SORT_DEBUG is truthy, otherwise INFO."""
    env = os.environ if environ is None else environ
    flag = str(env.get('LIQUID_SORT_DEBUG', '')).strip().lower()
    return logging.DEBUG if flag in ('1', 'true', 'yes', 'on') else logging.INFO


def setup_logging(level: Optional[int] = None) -> logging.Logger:
    """
    Points the package logger at the current stdout. The handler from an
    earlier call is replaced, so there is only ever one.
    """
    global _handler
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level_from_env() if level is None else level)
    if _handler is not None:
        logger.removeHandler(_handler)
    _handler = logging.StreamHandler(sys.stdout)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S'))
    logger.addHandler(_handler)
    return logger
