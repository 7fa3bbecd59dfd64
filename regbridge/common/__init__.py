"""Common utilities for regbridge."""

from .logger import setup_logger, setup_logger_from_config, get_logger
from .config import RegistrationConfig, load_config, load_typed_config

__all__ = [
    "RegistrationConfig",
    "get_logger",
    "load_config",
    "load_typed_config",
    "setup_logger",
    "setup_logger_from_config",
]
