"""
Logging configuration for the Skill Recommender service.

This module provides centralized logging configuration using Python's logging
module. It sets up file and console handlers with automatic log rotation.

Usage:
    >>> from skill_recommender.config import Config
    >>> from skill_recommender.logging_config import setup_logging
    >>> config = Config.from_env()
    >>> setup_logging(config.log)
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from skill_recommender.config import LogConfig


def setup_logging(
    log_config: Optional[LogConfig] = None,
    log_level_override: Optional[str] = None,
) -> None:
    """
    Configure logging for the entire application.

    This function should be called once at application startup. It
    configures the root logger with:
    - File handler with rotation
    - Console handler (optional)
    - Consistent formatting

    Args:
        log_config: LogConfig instance. If None, loads from environment.
        log_level_override: Optional log level override (e.g., 'DEBUG').
    """
    if log_config is None:
        log_config = LogConfig.from_env()

    level_name = (log_level_override or log_config.level).upper()
    level = getattr(logging, level_name, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove any existing handlers to avoid duplicates
    root_logger.handlers.clear()

    formatter = logging.Formatter(
        fmt=log_config.format_string,
        datefmt=log_config.date_format,
    )

    log_path = log_config.log_dir / log_config.log_file
    file_handler = RotatingFileHandler(
        filename=str(log_path),
        maxBytes=log_config.max_bytes,
        backupCount=log_config.backup_count,
        encoding='utf-8',
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    if log_config.console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    logging.info(f"Logging configured: level={level_name}, file={log_path}")
    logging.info(f"Log rotation: maxBytes={log_config.max_bytes}, backupCount={log_config.backup_count}")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with the specified name.

    Args:
        name: Logger name, typically __name__ of the calling module.

    Returns:
        A logger instance.
    """
    return logging.getLogger(name)
