"""Configuration loading and validation."""

from .loader import load_config
from .schema import (
    FileLoggingConfig,
    LoggingConfig,
    ToolchainConfig,
    UtilsConfig,
)

__all__ = [
    # Loader
    "load_config",
    # Root config
    "UtilsConfig",
    # Sections
    "ToolchainConfig",
    "LoggingConfig",
    "FileLoggingConfig",
]
