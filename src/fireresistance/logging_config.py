"""
Logging Configuration
Attaches console / file output to the 'fireresistance' logger namespace.

Library modules only create module loggers (``logging.getLogger(__name__)``);
nothing is printed until an application calls :func:`setup_logging`.
"""
import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = "fireresistance"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'

# Marks handlers installed here so repeated calls replace only their own
_OWNED = "_fireresistance_owned"


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Configures the logger for the 'fireresistance' namespace.

    Calling it again swaps the handlers a previous call installed (e.g. to change
    the level or start a new log file); handlers attached by the application
    are left alone.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
        stream: Console stream, stdout when omitted.

    Returns:
        The configured namespace logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in [h for h in logger.handlers if getattr(h, _OWNED, False)]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = [
        logging.StreamHandler(sys.stdout if stream is None else stream)
    ]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        setattr(handler, _OWNED, True)
        logger.addHandler(handler)

    logger.debug(
        f"Logging initialized at {logging.getLevelName(level)}"
        + (f", writing to {log_file}" if log_file else "")
    )
    return logger
