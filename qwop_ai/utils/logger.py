"""
Logging setup
Every module logs through logging.getLogger(__name__); configuring the
package logger once routes them all to the console and a session log file
"""
import logging
import os
import sys
import time
from typing import Optional

from qwop_ai.config import config
from qwop_ai.utils.file_utils import ensure_dir

PACKAGE_LOGGER = "qwop_ai"

BASIC_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DETAILED_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'

def _resolve_level(log_level, detailed: bool) -> int:
    if log_level is not None:
        return log_level
    if detailed:
        return logging.DEBUG
    level = logging.getLevelName(config.LOG_LEVEL.upper())
    # getLevelName returns a string for unknown names
    return level if isinstance(level, int) else logging.INFO

def session_log_file(name: str = PACKAGE_LOGGER) -> str:
    """Timestamped log file path under config.LOG_PATH"""
    ensure_dir(config.LOG_PATH)
    return os.path.join(config.LOG_PATH, f'{name.split(".")[-1]}_{int(time.time())}.log')

def setup_logger(
    name: str = PACKAGE_LOGGER,
    log_level: Optional[int] = None,
    log_file: Optional[str] = None,
    detailed: Optional[bool] = None
) -> logging.Logger:
    """
    Attach console and file handlers to a logger, once

    Args:
        name: Logger to configure; the package logger covers every module
        log_level: Logging level (defaults to config.LOG_LEVEL, or DEBUG when detailed)
        log_file: Log file path (defaults to a timestamped file in config.LOG_PATH)
        detailed: Include function and line in each record (defaults to config.DETAILED_LOGGING)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    if detailed is None:
        detailed = config.DETAILED_LOGGING
    level = _resolve_level(log_level, detailed)
    formatter = logging.Formatter(DETAILED_FORMAT if detailed else BASIC_FORMAT)
    logger.setLevel(level)

    handlers = [logging.StreamHandler(sys.stdout)]
    try:
        handlers.append(logging.FileHandler(log_file or session_log_file(name)))
    except OSError as e:
        # Console logging still works without the file
        sys.stderr.write(f"Failed to create log file: {e}\n")

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger

def get_logger(name: str) -> logging.Logger:
    """
    Logger for a module; names outside the package are nested under it
    so they share its handlers
    """
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
