"""
Logging configuration.

Modules log through logging.getLogger(__name__), which places
them under the "account_system" logger configured here.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str = "INFO", logger_name: str = "account_system") -> logging.Logger:
    """
    Attach a single stream handler to the application logger.

    Calling it again replaces the handler rather than adding
    a second one, so log lines are never duplicated.
    """
    logger = logging.getLogger(logger_name)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper()))
    logger.propagate = False

    return logger
