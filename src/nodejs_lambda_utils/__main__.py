"""Command line entry point for nodejs-lambda-utils.

This module exposes the utilities on the command line:
- parse-stack: Parse a runtime stack trace into JSON frames
- find-up: Find a file in a directory or its parents
- lock-file: Detect the project's package manager lock file
- deps: Resolve module versions from a package.json
- versions: Probe the installed node and esbuild versions

Results go to stdout; logs go to stderr.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

import structlog
import yaml

from nodejs_lambda_utils._version import __version__
from nodejs_lambda_utils.config.schema import UtilsConfig
from nodejs_lambda_utils.utils.errors import NodejsUtilsError
from nodejs_lambda_utils.utils.logging import LogEventNames

log = structlog.get_logger()


def setup_logging(
    debug: bool = False,
    log_format: str = "console",
    file_path: Path | None = None,
    file_enabled: bool = False,
) -> None:
    """Configure structured logging.

    Args:
        debug: Enable debug logging if True
        log_format: Output format ("json" or "console")
        file_path: Path to log file (if file logging enabled)
        file_enabled: Whether to enable file logging
    """
    from nodejs_lambda_utils.utils.logging import LogFormat, LogLevel, configure_logging

    level = LogLevel.DEBUG if debug else LogLevel.INFO

    configure_logging(
        level=level,
        log_format=LogFormat(log_format.lower()),
        file_path=file_path,
        file_enabled=file_enabled,
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Arguments to parse (defaults to sys.argv[1:])

    Returns:
        Parsed argument namespace
    """
    parser = argparse.ArgumentParser(
        prog="nodejs-lambda-utils",
        description="Stack trace parsing and toolchain helpers for Node.js Lambda bundling",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="Path to YAML configuration file (default: built-in defaults)",
    )

    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--format",
        choices=["json", "console"],
        default="console",
        help="Log output format (default: console)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_stack = subparsers.add_parser("parse-stack", help="Parse a stack trace into JSON")
    parse_stack.add_argument(
        "file",
        nargs="?",
        type=Path,
        help="File containing the stack trace (default: stdin)",
    )

    find_up = subparsers.add_parser("find-up", help="Find a file in a directory or its parents")
    find_up.add_argument("name", help="File name to look for")
    find_up.add_argument("--dir", type=Path, default=None, help="Starting directory")

    lock_file = subparsers.add_parser("lock-file", help="Detect the package manager lock file")
    lock_file.add_argument("--dir", type=Path, default=None, help="Starting directory")

    deps = subparsers.add_parser("deps", help="Resolve module versions from a package.json")
    deps.add_argument("package_json", type=Path, help="Path to package.json")
    deps.add_argument("modules", nargs="+", help="Module names")

    subparsers.add_parser("versions", help="Show node and esbuild versions")

    return parser.parse_args(argv)


def _emit(value: Any) -> None:
    """Write a result to stdout as JSON."""
    sys.stdout.write(json.dumps(value, indent=2) + "\n")


def dispatch(args: argparse.Namespace, config: UtilsConfig) -> int:
    """Dispatch a parsed subcommand.

    Args:
        args: Parsed arguments
        config: Effective configuration

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    if args.command == "parse-stack":
        from nodejs_lambda_utils.core.stack_trace_parser import StackTraceParser

        text = args.file.read_text(encoding="utf-8") if args.file else sys.stdin.read()
        frames = StackTraceParser().parse(text)
        _emit([frame.to_dict() for frame in frames])
        return 0

    if args.command == "find-up":
        from nodejs_lambda_utils.utils.files import find_up

        path = find_up(args.name, args.dir)
        if path is None:
            return 1
        sys.stdout.write(f"{path}\n")
        return 0

    if args.command == "lock-file":
        from nodejs_lambda_utils.utils.files import find_lock_file

        path = find_lock_file(args.dir, config.toolchain.lock_files)
        if path is None:
            return 1
        sys.stdout.write(f"{path}\n")
        return 0

    if args.command == "deps":
        from nodejs_lambda_utils.core.dependencies import extract_dependencies

        _emit(extract_dependencies(args.package_json, args.modules))
        return 0

    if args.command == "versions":
        from nodejs_lambda_utils.utils.toolchain import get_esbuild_version, node_major_version

        toolchain = config.toolchain
        _emit(
            {
                "node": node_major_version(toolchain.node_path, timeout=toolchain.probe_timeout),
                "esbuild": get_esbuild_version(toolchain.npx_path, timeout=toolchain.probe_timeout),
            }
        )
        return 0

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    setup_logging(
        debug=args.debug,
        log_format=args.format,
    )

    try:
        if args.config is not None:
            from nodejs_lambda_utils.config.loader import load_config

            config = load_config(args.config)
            log.debug(LogEventNames.CONFIGURATION_LOADED, path=str(args.config))

            from nodejs_lambda_utils.utils.logging import configure_logging

            configure_logging(
                level="DEBUG" if args.debug else config.logging.level,
                log_format=config.logging.format,
                file_path=config.logging.file.path if config.logging.file.enabled else None,
                file_enabled=config.logging.file.enabled,
            )
        else:
            config = UtilsConfig()

        return dispatch(args, config)

    except OSError as e:
        log.error(LogEventNames.CLI_ERROR, error=str(e), error_type=type(e).__name__)
        return 1
    except (NodejsUtilsError, UnicodeDecodeError, yaml.YAMLError) as e:
        log.error(LogEventNames.CLI_ERROR, error=str(e), error_type=type(e).__name__)
        return 1
    except ValueError as e:
        log.error(LogEventNames.CONFIGURATION_INVALID, error=str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
