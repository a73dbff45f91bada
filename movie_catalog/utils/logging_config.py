"""
Logging configuration for the movie catalog service.

The API server logs to stdout and, when LOG_FILE is set, to a rotating file
under ``logs/``. Uvicorn's own loggers are routed through the same handlers
so catalog load warnings and access logs share one format.
"""

import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Loggers that keep their own handlers unless redirected to the root logger
SERVER_LOGGERS = ('uvicorn', 'uvicorn.error', 'uvicorn.access')
QUIET_LOGGERS = ('urllib3', 'httpx', 'watchdog')


def setup_logging(
    log_file: Optional[str] = None,
    level: str = "INFO",
    log_dir: str = "logs",
    max_bytes: int = 5 * 1024 * 1024,  # 5MB
    backup_count: int = 3
) -> None:
    """
    Install console (and optional rotating file) handlers on the root logger.

    Existing root handlers are replaced, so calling this twice does not
    duplicate output.

    Args:
        log_file: File name inside ``log_dir``; None logs to stdout only
        level: Logging level name ('DEBUG', 'INFO', 'WARNING', 'ERROR')
        log_dir: Directory created for ``log_file`` (default: 'logs')
        max_bytes: Size at which the log file rotates
        backup_count: Number of rotated files to keep
    """
    log_level = getattr(logging, level.upper())
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler(sys.stdout)]
    log_path = None
    if log_file:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        log_path = Path(log_dir) / log_file
        handlers.append(RotatingFileHandler(log_path, maxBytes=max_bytes, backupCount=backup_count))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(log_level)
    for handler in handlers:
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    if log_path is not None:
        root_logger.info(f"Logging to file: {log_path}")


def configure_api_logging(level: str = "INFO", log_file: Optional[str] = None, debug: bool = False):
    """
    Configure logging for the API server.

    Args:
        level: Logging level used unless ``debug`` is set
        log_file: Optional log file name inside 'logs/'
        debug: Force debug logging (default: False)
    """
    setup_logging(
        log_file=log_file,
        level="DEBUG" if debug else level,
        log_dir="logs"
    )
