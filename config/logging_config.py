"""Logging setup for the ledger."""
import logging

from config.settings import Settings

LOG_FORMAT = '%(asctime)s:%(levelname)s:%(name)s: %(message)s'

_handler = None


def setup_logging(settings: Settings) -> logging.Logger:
    """Attach a file or console handler to the root logger.

    Calling it again replaces the handler installed by the previous call.
    """
    global _handler

    logger = logging.getLogger()
    logger.setLevel(settings.log_level_value)

    if _handler is not None:
        logger.removeHandler(_handler)
        _handler.close()

    if settings.log_file:
        handler = logging.FileHandler(filename=settings.log_file, encoding='utf-8', mode='w')
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    _handler = handler
    return logger
