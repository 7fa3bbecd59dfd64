"""Configuration management for regbridge.

Handles loading of the YAML configuration file that locates the package
manager configuration tree, the credentials store and the log output.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml


DEFAULT_CONFIG_PATH = "/etc/regbridge/config.yaml"
DEFAULT_ZYPP_DIR = "/etc/zypp"
DEFAULT_CREDENTIALS_DIR = "/etc/zypp/credentials.d"


@dataclass
class LoggingConfig:
    """Configuration for log output."""

    level: str = "INFO"
    log_dir: str = "/var/log/regbridge"
    file_logging: bool = True
    console_logging: bool = True


@dataclass
class RegistrationConfig:
    """Top-level configuration for regbridge."""

    zypp_dir: str = DEFAULT_ZYPP_DIR
    credentials_dir: str = DEFAULT_CREDENTIALS_DIR
    destdir: str = "/"
    mount_command: str = "mount"
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def parse_logging_config(logging_dict: Dict[str, Any]) -> LoggingConfig:
    """Parse the ``logging`` section.

    Args:
        logging_dict: Logging configuration dictionary

    Returns:
        LoggingConfig instance
    """
    return LoggingConfig(
        level=logging_dict.get("level", "INFO"),
        log_dir=logging_dict.get("log_dir", "/var/log/regbridge"),
        file_logging=logging_dict.get("file_logging", True),
        console_logging=logging_dict.get("console_logging", True),
    )


def parse_config(config_dict: Dict[str, Any]) -> RegistrationConfig:
    """Parse the full configuration dictionary.

    Args:
        config_dict: Full configuration dictionary

    Returns:
        RegistrationConfig instance
    """
    logging_config = LoggingConfig()
    if "logging" in config_dict:
        logging_config = parse_logging_config(config_dict["logging"] or {})

    return RegistrationConfig(
        zypp_dir=config_dict.get("zypp_dir", DEFAULT_ZYPP_DIR),
        credentials_dir=config_dict.get("credentials_dir", DEFAULT_CREDENTIALS_DIR),
        destdir=config_dict.get("destdir", "/"),
        mount_command=config_dict.get("mount_command", "mount"),
        logging=logging_config,
    )


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    """Load configuration from YAML file.

    Args:
        config_path: Path to configuration file

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
        TypeError: If the document root is not a mapping
        yaml.YAMLError: If config file is invalid YAML
    """
    config_file = Path(config_path)

    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with config_file.open("r") as f:
        config = yaml.safe_load(f)

    if config is None:
        config = {}

    if not isinstance(config, dict):
        raise TypeError(
            f"Configuration root must be a mapping, got {type(config).__name__}"
        )

    return _expand_env_vars(config)


def _expand_env_vars(obj: Any) -> Any:
    """Recursively expand environment variables in configuration values."""
    if isinstance(obj, dict):
        return {key: _expand_env_vars(value) for key, value in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(item) for item in obj]
    elif isinstance(obj, str):
        return os.path.expandvars(obj)
    else:
        return obj


def load_typed_config(config_path: str = DEFAULT_CONFIG_PATH) -> RegistrationConfig:
    """Load and parse configuration into typed dataclass.

    Args:
        config_path: Path to configuration file

    Returns:
        RegistrationConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is invalid YAML
    """
    return parse_config(load_config(config_path))
