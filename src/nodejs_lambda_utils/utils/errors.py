"""Exception hierarchy for nodejs-lambda-utils.

Stack trace parsing never raises; these cover the I/O collaborators
(subprocess execution, manifest reading) and configuration validation.
"""

from __future__ import annotations


class NodejsUtilsError(Exception):
    """Base exception for all nodejs-lambda-utils errors."""


class CommandError(NodejsUtilsError):
    """A spawned command failed.

    Attributes:
        return_code: Exit status, or None if the process never finished.
        stdout: Captured standard output.
        stderr: Captured standard error.
    """

    def __init__(
        self,
        message: str,
        return_code: int | None = None,
        stdout: str = "",
        stderr: str = "",
    ) -> None:
        super().__init__(message)
        self.return_code = return_code
        self.stdout = stdout
        self.stderr = stderr


class CommandNotFoundError(CommandError):
    """The command could not be spawned (missing binary, permissions)."""


class CommandTimeoutError(CommandError):
    """The command did not finish within its timeout."""


class DependencyVersionError(NodejsUtilsError):
    """A module's version could not be determined."""

    def __init__(self, module: str) -> None:
        super().__init__(
            f"Cannot extract version for module '{module}'. "
            "Check that it's referenced in your package.json or installed."
        )
        self.module = module


class ConfigError(NodejsUtilsError, ValueError):
    """Configuration failed cross-field validation."""
