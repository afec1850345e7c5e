"""
Logging configuration for the movie catalog API.

Console logging is always on; a rotating api.log is added when a log
directory is configured. Level and directory come from LOG_LEVEL and
LOG_DIR (see app.api.config).
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from app.api.config import get_log_dir, get_log_level

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
API_LOG_FILE = "api.log"

# Loggers that are chatty at INFO regardless of the app level
QUIET_LOGGERS = ('sqlalchemy.engine', 'uvicorn.access')


def setup_logging(
    level: str = "INFO",
    log_dir: Optional[str] = None,
    log_file: str = API_LOG_FILE,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5
) -> Optional[Path]:
    """
    Configure the root logger.

    Args:
        level: Logging level name ('DEBUG', 'INFO', ...)
        log_dir: Directory for the rotating log file; console only if empty
        log_file: File name inside log_dir
        max_bytes: Size at which the file rotates
        backup_count: Number of rotated files to keep

    Returns:
        Path of the log file, or None when logging to console only
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_path = None
    if log_dir:
        log_path = Path(log_dir) / log_file
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=max_bytes,
            backupCount=backup_count
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # SQL statement logging is controlled by the engine's echo flag
    if numeric_level > logging.DEBUG:
        for name in QUIET_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    return log_path


def get_logger(name: str) -> logging.Logger:
    """Get a module logger (typically called with __name__)."""
    return logging.getLogger(name)


def configure_api_logging() -> Optional[Path]:
    """Configure logging for the API server from the environment."""
    log_path = setup_logging(level=get_log_level(), log_dir=get_log_dir())
    logging.getLogger(__name__).info(
        "Logging at %s to %s", get_log_level(), log_path or "console"
    )
    return log_path
