"""
Logging setup for the raycaster command line.

Log records never go to stdout, which may be carrying a PPM image.
"""
import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """Attach stderr (and optionally file) handlers to the 'raycaster' logger.

    Calling this again replaces the handlers of the previous call.

    Args:
        level: Logging level for the package logger and its handlers
        log_file: If given, records are also written to this file (overwritten)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger("raycaster")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging to stderr%s", f" and {log_file}" if log_file else "")
    return logger
