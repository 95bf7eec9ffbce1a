"""Safe subprocess wrapper for toolchain commands.

This module provides a wrapper around subprocess execution that:
- Never uses shell=True
- Enforces timeouts on all operations
- Surfaces failures as exceptions carrying the command's output
"""

from __future__ import annotations

import json
import subprocess
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import structlog

from nodejs_lambda_utils.utils.errors import (
    CommandError,
    CommandNotFoundError,
    CommandTimeoutError,
)
from nodejs_lambda_utils.utils.logging import LogEventNames

log = structlog.get_logger()

# Default timeout for commands (seconds)
DEFAULT_TIMEOUT = 30


@dataclass
class CommandResult:
    """Result of a command execution."""

    stdout: str
    stderr: str
    return_code: int
    command: list[str]

    @property
    def success(self) -> bool:
        """Return True if the command succeeded."""
        return self.return_code == 0

    def json(self) -> Any:
        """Parse stdout as JSON.

        Raises:
            ValueError: If stdout is not valid JSON.
        """
        return json.loads(self.stdout)


def format_failure(result: CommandResult) -> str:
    """Build the error message for a failed command.

    Includes both output streams when the command printed anything, so the
    caller sees why it failed without re-running it.
    """
    if result.stdout or result.stderr:
        return (
            f"[Status {result.return_code}] stdout: {result.stdout.strip()}"
            f"\n\n\nstderr: {result.stderr.strip()}"
        )
    return f"{result.command[0]} exited with status {result.return_code}"


def run_command(
    cmd: str,
    args: Sequence[str] = (),
    cwd: Path | str | None = None,
    env: Mapping[str, str] | None = None,
    timeout: int | None = None,
    check: bool = True,
) -> CommandResult:
    """Run a command safely.

    Args:
        cmd: Executable name or path.
        args: Command arguments.
        cwd: Working directory for the command.
        env: Environment for the command (inherits the current one if None).
        timeout: Timeout in seconds (uses DEFAULT_TIMEOUT if None).
        check: If True, raise on a non-zero exit status.

    Returns:
        CommandResult with stdout, stderr, and return code.

    Raises:
        CommandNotFoundError: If the command cannot be spawned.
        CommandTimeoutError: If the command times out.
        CommandError: If check=True and the command fails.
    """
    command = [cmd, *args]
    effective_timeout = timeout or DEFAULT_TIMEOUT

    log.debug(LogEventNames.COMMAND_EXECUTING, command=command, timeout=effective_timeout)

    try:
        proc = subprocess.run(
            command,
            capture_output=True,
            text=True,
            cwd=cwd,
            env=dict(env) if env is not None else None,
            timeout=effective_timeout,
            shell=False,
        )
    except subprocess.TimeoutExpired as e:
        log.error(LogEventNames.COMMAND_TIMEOUT, command=command, timeout=effective_timeout)
        raise CommandTimeoutError(
            f"Command timed out after {effective_timeout}s: {command}"
        ) from e
    except OSError as e:
        log.error(LogEventNames.COMMAND_NOT_FOUND, command=command, error=str(e))
        raise CommandNotFoundError(f"Could not run {cmd}: {e}") from e

    result = CommandResult(
        stdout=proc.stdout or "",
        stderr=proc.stderr or "",
        return_code=proc.returncode,
        command=command,
    )

    if check and not result.success:
        log.warning(
            LogEventNames.COMMAND_FAILED,
            command=command,
            return_code=result.return_code,
        )
        raise CommandError(
            format_failure(result),
            return_code=result.return_code,
            stdout=result.stdout,
            stderr=result.stderr,
        )

    return result
