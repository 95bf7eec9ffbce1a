"""Utility functions and helpers.

This module provides the I/O collaborators around the stack trace parser:
- errors: Exception hierarchy
- files: Upward file discovery, lock file detection
- safe_subprocess: Safe subprocess execution
- toolchain: Node.js and esbuild version probes
- logging: Structured logging
"""

from nodejs_lambda_utils.utils.errors import (
    CommandError,
    CommandNotFoundError,
    CommandTimeoutError,
    ConfigError,
    DependencyVersionError,
    NodejsUtilsError,
)
from nodejs_lambda_utils.utils.files import LockFile, find_lock_file, find_up
from nodejs_lambda_utils.utils.logging import (
    LogFormat,
    LogLevel,
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    unbind_context,
)
from nodejs_lambda_utils.utils.safe_subprocess import CommandResult, run_command
from nodejs_lambda_utils.utils.toolchain import get_esbuild_version, node_major_version

__all__ = [
    # Errors
    "CommandError",
    "CommandNotFoundError",
    "CommandTimeoutError",
    "ConfigError",
    "DependencyVersionError",
    "NodejsUtilsError",
    # Files
    "LockFile",
    "find_lock_file",
    "find_up",
    # Logging
    "LogFormat",
    "LogLevel",
    "bind_context",
    "clear_context",
    "configure_logging",
    "get_logger",
    "unbind_context",
    # Subprocess
    "CommandResult",
    "run_command",
    # Toolchain
    "get_esbuild_version",
    "node_major_version",
]
