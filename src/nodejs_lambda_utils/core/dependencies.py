"""Dependency version extraction from package.json manifests.

Versions are looked up in the project's package.json first (dependencies,
devDependencies, peerDependencies). Transitive dependencies aren't listed
there, so the fallback reads the installed module's own package.json,
found the way Node resolves modules: ``node_modules/<name>`` in the
manifest's directory, then in each parent directory.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import structlog

from nodejs_lambda_utils.utils.errors import DependencyVersionError
from nodejs_lambda_utils.utils.logging import LogEventNames

log = structlog.get_logger()

# Later sections override earlier ones
DEPENDENCY_SECTIONS = ("dependencies", "devDependencies", "peerDependencies")

# Parsed manifests keyed by resolved path, read once per process
_manifest_cache: dict[Path, dict[str, Any]] = {}


def load_manifest(path: Path | str) -> dict[str, Any]:
    """
    Load a package.json, using the in-process cache.

    Args:
        path: Path to package.json

    Returns:
        Parsed manifest

    Raises:
        FileNotFoundError: If the manifest doesn't exist
        ValueError: If the manifest is not a JSON object
    """
    resolved = Path(path).resolve()
    if resolved not in _manifest_cache:
        with resolved.open(encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Manifest is not a JSON object: {resolved}")
        _manifest_cache[resolved] = data
    return _manifest_cache[resolved]


def clear_manifest_cache() -> None:
    """Forget all cached manifests."""
    _manifest_cache.clear()


def declared_dependencies(manifest: dict[str, Any]) -> dict[str, str]:
    """Merge every dependency section of a manifest into one mapping."""
    merged: dict[str, str] = {}
    for section in DEPENDENCY_SECTIONS:
        merged.update(manifest.get(section) or {})
    return merged


def installed_version(module: str, start_dir: Path) -> str | None:
    """
    Find the version of an installed module.

    Args:
        module: Module name, scoped names included (e.g. "@aws-sdk/client-s3")
        start_dir: Directory to start resolving from

    Returns:
        The module's version, or None if it isn't installed or has no version
    """
    for directory in (start_dir, *start_dir.parents):
        candidate = directory / "node_modules" / module / "package.json"
        if not candidate.is_file():
            continue
        try:
            version = load_manifest(candidate).get("version")
        except ValueError:
            # Broken install; the closest copy is the one the runtime would load
            return None
        return str(version) if version is not None else None
    return None


def extract_dependencies(pkg_path: Path | str, modules: Iterable[str]) -> dict[str, str]:
    """
    Extract versions for a list of modules.

    First look up the version in the package.json, then fall back to the
    installed module's package.json.

    Args:
        pkg_path: Path to the project's package.json
        modules: Module names to resolve

    Returns:
        Mapping of module name to version (or version range as declared)

    Raises:
        FileNotFoundError: If pkg_path doesn't exist
        DependencyVersionError: If a module is neither declared nor installed
    """
    pkg_path = Path(pkg_path)
    declared = declared_dependencies(load_manifest(pkg_path))
    start_dir = pkg_path.resolve().parent

    dependencies: dict[str, str] = {}
    for module in modules:
        version = declared.get(module)
        if version is None:
            version = installed_version(module, start_dir)
        if version is None:
            log.warning(LogEventNames.DEPENDENCY_UNRESOLVED, module=module, manifest=str(pkg_path))
            raise DependencyVersionError(module)

        log.debug(LogEventNames.DEPENDENCY_RESOLVED, module=module, version=version)
        dependencies[module] = version

    return dependencies
