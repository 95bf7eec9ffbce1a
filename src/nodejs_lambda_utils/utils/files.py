"""File discovery helpers."""

from __future__ import annotations

import os
from collections.abc import Iterable
from enum import StrEnum
from pathlib import Path

import structlog

from nodejs_lambda_utils.utils.logging import LogEventNames

log = structlog.get_logger()


class LockFile(StrEnum):
    """Package manager lock files."""

    NPM = "package-lock.json"
    YARN = "yarn.lock"


# Yarn wins when both are present
DEFAULT_LOCK_FILES: tuple[LockFile, ...] = (LockFile.YARN, LockFile.NPM)


def find_up(name: str, directory: Path | str | None = None) -> Path | None:
    """
    Find a file by walking up parent directories.

    Args:
        name: File name to look for
        directory: Directory to start in (defaults to the current directory)

    Returns:
        Path to the first match, joined onto the directory where it was
        found, or None once the filesystem root has been checked
    """
    start = Path(directory) if directory is not None else Path.cwd()

    # The start directory is checked as given; parents come from its lexical
    # absolute form, so symlinks are not followed
    for candidate_dir in (start, *Path(os.path.abspath(start)).parents):
        candidate = candidate_dir / name
        if candidate.exists():
            log.debug(LogEventNames.FILE_FOUND, name=name, path=str(candidate))
            return candidate

    log.debug(LogEventNames.FILE_NOT_FOUND, name=name, directory=str(start))
    return None


def find_lock_file(
    directory: Path | str | None = None,
    lock_files: Iterable[LockFile | str] = DEFAULT_LOCK_FILES,
) -> Path | None:
    """
    Find the closest lock file for a project.

    Args:
        directory: Directory to start in (defaults to the current directory)
        lock_files: Lock files to look for, in order of preference

    Returns:
        Path to the first lock file found, or None
    """
    for lock_file in lock_files:
        path = find_up(LockFile(lock_file).value, directory)
        if path is not None:
            log.info(LogEventNames.LOCK_FILE_DETECTED, lock_file=str(lock_file), path=str(path))
            return path
    return None
