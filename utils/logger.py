"""
Logging utilities.

Library modules call ``setup_logger(__name__-style name)`` once at import.
How loud they are depends on who is running them:

- STANDALONE: a module run on its own, full INFO logging
- ORCHESTRATED: a run_*.py script drives the modules; only the script's own
  logger stays at INFO, library loggers drop to WARNING so progress output
  is not buried
- SILENT: batch jobs, only CRITICAL

The mode comes from ``LOG_MODE`` (environment or .env) unless a script calls
``set_logging_mode`` before importing the library modules.
"""

import logging
import os
from enum import Enum
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class LoggingContext(Enum):
    """Logging context modes for different execution scenarios."""
    STANDALONE = "standalone"
    ORCHESTRATED = "orchestrated"
    SILENT = "silent"


def _mode_from_env() -> LoggingContext:
    try:
        return LoggingContext(os.getenv('LOG_MODE', 'standalone').strip().lower())
    except ValueError:
        return LoggingContext.STANDALONE


_CURRENT_MODE = _mode_from_env()

# Script loggers that keep INFO under ORCHESTRATED mode
CONSOLE_LOGGERS = {
    'run_macro_report',
    'run_sector_comparison',
    'run_partnership_audit',
    'run_data_audit',
}


def set_logging_mode(mode: LoggingContext):
    """Set the global logging mode; affects loggers set up afterwards."""
    global _CURRENT_MODE
    _CURRENT_MODE = mode


def get_logging_mode() -> LoggingContext:
    return _CURRENT_MODE


def effective_level(name: str, level: int) -> int:
    """Level a logger named ``name`` gets under the current mode."""
    if _CURRENT_MODE == LoggingContext.SILENT:
        return logging.CRITICAL
    if _CURRENT_MODE == LoggingContext.ORCHESTRATED and name not in CONSOLE_LOGGERS:
        return max(level, logging.WARNING)
    return level


def setup_logger(
    name: str,
    level: int = logging.INFO,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Create (or reconfigure) a named logger with a console handler.

    Args:
        name: Logger name
        level: Requested level; the logging mode may raise it
        log_file: Optional file path for an additional file handler

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    resolved_level = effective_level(name, level)
    logger.setLevel(resolved_level)

    # Re-running setup must not stack handlers
    logger.handlers.clear()
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(resolved_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
