"""Configuration loader with YAML parsing and environment variable substitution."""

import os
import re
from pathlib import Path

import yaml

from ..utils.errors import ConfigError
from .schema import UtilsConfig


def substitute_env_vars(text: str) -> str:
    """
    Replace ${VAR_NAME} patterns with environment variable values.

    Args:
        text: Text containing ${VAR_NAME} patterns

    Returns:
        Text with environment variables substituted

    Raises:
        ValueError: If a referenced environment variable is not found
    """

    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1)
        value = os.environ.get(var_name)
        if value is None:
            raise ValueError(f"Environment variable {var_name} not found")
        return value

    return re.sub(r"\$\{([^}]+)\}", replacer, text)


def load_config(path: Path) -> UtilsConfig:
    """
    Load configuration from YAML file with environment variable substitution.

    Args:
        path: Path to YAML configuration file

    Returns:
        Validated UtilsConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If environment variables are missing or config is invalid
        ValidationError: If config doesn't match schema
    """
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with path.open(encoding="utf-8") as f:
        raw_yaml = f.read()

    yaml_with_env = substitute_env_vars(raw_yaml)

    # An empty file means "all defaults"
    config_dict = yaml.safe_load(yaml_with_env) or {}

    config = UtilsConfig.model_validate(config_dict)

    validate_config(config)

    return config


def validate_config(config: UtilsConfig) -> None:
    """
    Perform additional cross-field validation.

    Args:
        config: Configuration to validate

    Raises:
        ConfigError: If lock files are repeated or file logging points at a directory
    """
    lock_files = config.toolchain.lock_files
    if len(set(lock_files)) != len(lock_files):
        raise ConfigError(f"Duplicate lock files configured: {lock_files}")

    file_logging = config.logging.file
    if file_logging.enabled and file_logging.path.is_dir():
        raise ConfigError(f"Log file path is a directory: {file_logging.path}")
