"""
Logger setup for the article service.

Informational records go to stdout and errors to stderr, both timestamped.
"""
import logging
import sys

LOGGER_NAME = "article_service"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class _BelowErrorFilter(logging.Filter):
    """Pass only records below ERROR."""

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.ERROR


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure the service logger.

    Handlers are only added the first time, so calling this again just
    updates the level.

    Args:
        level: Logging level name (e.g. "INFO", "DEBUG")

    Returns:
        The configured service logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())

    if not logger.handlers:
        formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

        info_handler = logging.StreamHandler(sys.stdout)
        info_handler.setLevel(logging.DEBUG)
        info_handler.addFilter(_BelowErrorFilter())
        info_handler.setFormatter(formatter)

        error_handler = logging.StreamHandler(sys.stderr)
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(formatter)

        logger.addHandler(info_handler)
        logger.addHandler(error_handler)

    return logger
