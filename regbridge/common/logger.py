"""Logging infrastructure for regbridge.

Every module logs under a child of the ``regbridge`` logger, so a single
call to :func:`setup_logger` on the root name covers the whole workflow.
"""

import logging
import logging.handlers
import os
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .config import RegistrationConfig

ROOT_LOGGER_NAME = "regbridge"


def setup_logger(
    name: str = ROOT_LOGGER_NAME,
    log_dir: str = "/var/log/regbridge",
    level: str = "INFO",
    log_format: Optional[str] = None,
    date_format: Optional[str] = None,
    file_logging: bool = True,
    console_logging: bool = True,
    max_bytes: int = 10485760,  # 10MB
    backup_count: int = 5,
) -> logging.Logger:
    """Set up a logger with file and console handlers.

    Args:
        name: Logger name, ``regbridge`` configures all component loggers
        log_dir: Directory for log files
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Custom log format string
        date_format: Custom date format string (ISO 8601 by default)
        file_logging: Enable file logging
        console_logging: Enable console logging
        max_bytes: Maximum log file size before rotation
        backup_count: Number of backup log files to keep

    Returns:
        Configured logger instance

    Raises:
        ValueError: If the level name is not a logging level
    """
    logger = logging.getLogger(name)

    level_upper = level.upper()
    if level_upper not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        raise ValueError(
            f"Invalid log level: {level}. "
            f"Must be one of: DEBUG, INFO, WARNING, ERROR, CRITICAL"
        )
    logger.setLevel(getattr(logging, level_upper))

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    if log_format is None:
        log_format = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
    if date_format is None:
        date_format = "%Y-%m-%dT%H:%M:%S"

    formatter = logging.Formatter(log_format, datefmt=date_format)

    if file_logging:
        os.makedirs(log_dir, exist_ok=True)
        log_file = os.path.join(log_dir, f"{name}.log")
        file_handler = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=max_bytes, backupCount=backup_count
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if console_logging:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger


def setup_logger_from_config(config: "RegistrationConfig") -> logging.Logger:
    """Configure the root regbridge logger from a loaded configuration.

    Args:
        config: RegistrationConfig instance

    Returns:
        Configured root logger
    """
    return setup_logger(
        ROOT_LOGGER_NAME,
        log_dir=config.logging.log_dir,
        level=config.logging.level,
        file_logging=config.logging.file_logging,
        console_logging=config.logging.console_logging,
    )


def get_logger(name: str) -> logging.Logger:
    """Get a component logger below the regbridge root logger.

    Args:
        name: Component name, e.g. ``services``

    Returns:
        Logger instance named ``regbridge.<name>``
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
