"""
Logging helpers for the SVG builder.
Supports console and rotating file output.
"""

import os
import sys
import logging
from typing import Any, List, Mapping, Optional, TextIO
from logging.handlers import RotatingFileHandler

# Constants
PACKAGE_LOGGER = 'svg_builder'
DEFAULT_LOG_LEVEL = logging.INFO
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10MB
BACKUP_COUNT = 5
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Library code must stay silent unless the application configures logging
logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def setup_logging(
    app_name: str = PACKAGE_LOGGER,
    log_dir: Optional[str] = None,
    log_level: int = DEFAULT_LOG_LEVEL,
    stream: Optional[TextIO] = None,
    log_to_console: bool = True,
    log_to_file: bool = False
) -> logging.Logger:
    """
    Configure logging for an application using the SVG builder.

    Args:
        app_name: Logger name to configure
        log_dir: Directory to store log files (defaults to ./logs)
        log_level: Log level
        stream: Console stream (defaults to stdout)
        log_to_console: Log to the console stream
        log_to_file: Log to a rotating file named after app_name

    Returns:
        Configured logger
    """
    logger = logging.getLogger(app_name)
    logger.setLevel(log_level)

    # Remove handlers installed by a previous call
    for handler in logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()

    handlers: List[logging.Handler] = []

    if log_to_console:
        handlers.append(logging.StreamHandler(stream or sys.stdout))

    if log_to_file:
        if log_dir is None:
            log_dir = os.path.join(os.getcwd(), 'logs')
        os.makedirs(log_dir, exist_ok=True)

        handlers.append(RotatingFileHandler(
            os.path.join(log_dir, f"{app_name}.log"),
            maxBytes=MAX_LOG_SIZE,
            backupCount=BACKUP_COUNT,
            encoding='utf-8'
        ))

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the given name.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


class LogCapture(logging.Handler):
    """
    Handler that collects records from a logger while used as a
    context manager. The logger's level is lowered for the duration.
    """

    def __init__(self, logger_name: str = PACKAGE_LOGGER, level: int = logging.DEBUG):
        super().__init__(level)
        self.logger_name = logger_name
        self.records: List[logging.LogRecord] = []
        self._saved_level = logging.NOTSET

    @property
    def messages(self) -> List[str]:
        """Get the rendered messages of the captured records."""
        return [record.getMessage() for record in self.records]

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)

    def __enter__(self) -> 'LogCapture':
        logger = logging.getLogger(self.logger_name)
        self._saved_level = logger.level
        logger.setLevel(self.level)
        logger.addHandler(self)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        logger = logging.getLogger(self.logger_name)
        logger.removeHandler(self)
        logger.setLevel(self._saved_level)


def log_exception(
    logger: logging.Logger,
    exc: BaseException,
    context: Optional[Mapping[str, Any]] = None,
    level: int = logging.ERROR
) -> None:
    """
    Log an exception with its traceback and optional key=value context.

    Args:
        logger: Logger to use
        exc: Exception to log
        context: Values describing what was being done
        level: Log level
    """
    details = f" ({', '.join(f'{k}={v}' for k, v in context.items())})" if context else ""
    logger.log(level, f"{type(exc).__name__}: {exc}{details}", exc_info=exc)
