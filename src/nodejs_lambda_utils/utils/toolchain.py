"""Version probes for the Node.js toolchain."""

from __future__ import annotations

import platform

import structlog

from nodejs_lambda_utils.utils.errors import CommandError
from nodejs_lambda_utils.utils.logging import LogEventNames
from nodejs_lambda_utils.utils.safe_subprocess import run_command

log = structlog.get_logger()

# Timeout for version probes (seconds)
PROBE_TIMEOUT = 10


def parse_major_version(version: str) -> int:
    """
    Extract the major component of a version string.

    Accepts an optional leading "v" as printed by ``node --version``.

    Raises:
        ValueError: If the major component is not an integer
    """
    return int(version.strip().lstrip("vV").split(".")[0])


def node_major_version(node_path: str | None = None, timeout: int = PROBE_TIMEOUT) -> int:
    """
    Return the major version of the Node.js installation.

    Args:
        node_path: Path to the node binary (uses PATH if None)
        timeout: Probe timeout in seconds

    Returns:
        Major version, e.g. 18 for "v18.12.1"

    Raises:
        CommandError: If node cannot be run or exits non-zero
        ValueError: If node prints an unexpected version string
    """
    result = run_command(node_path or "node", ["--version"], timeout=timeout)
    major = parse_major_version(result.stdout)
    log.debug(LogEventNames.NODE_VERSION_DETECTED, version=result.stdout.strip(), major=major)
    return major


def get_esbuild_version(npx_path: str | None = None, timeout: int = PROBE_TIMEOUT) -> str | None:
    """
    Return the installed esbuild version.

    ``--no-install`` ensures only an existing install (local or global) is
    reported; npx never downloads esbuild here.

    Args:
        npx_path: Path to the npx binary (platform default if None)
        timeout: Probe timeout in seconds

    Returns:
        Version string, or None if esbuild is not available
    """
    npx = npx_path or ("npx.cmd" if platform.system() == "Windows" else "npx")

    try:
        result = run_command(npx, ["--no-install", "esbuild", "--version"], timeout=timeout)
    except CommandError as e:
        log.debug(LogEventNames.ESBUILD_NOT_INSTALLED, error=str(e))
        return None

    version = result.stdout.strip()
    log.debug(LogEventNames.ESBUILD_VERSION_DETECTED, version=version)
    return version
