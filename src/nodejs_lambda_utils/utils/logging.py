"""Structured logging configuration.

This module provides logging configuration for nodejs-lambda-utils:
- Configurable log levels and output formats (JSON/console)
- Context injection for correlation
- File and console output support
"""

from __future__ import annotations

import logging
import sys
from collections.abc import MutableMapping
from enum import StrEnum
from pathlib import Path
from typing import Any, cast

import structlog
from structlog.typing import WrappedLogger

SERVICE_NAME = "nodejs-lambda-utils"


class LogFormat(StrEnum):
    """Log output format options."""

    JSON = "json"
    CONSOLE = "console"


class LogLevel(StrEnum):
    """Log level options."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def add_context_processor(
    logger: logging.Logger,
    method_name: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Add contextual information to all log entries.

    Adds standard fields for correlation and debugging:
    - service: Always "nodejs-lambda-utils"
    - version: Current package version (if available)

    Args:
        logger: Logger instance (unused)
        method_name: Log method name (unused)
        event_dict: Event dictionary to process

    Returns:
        Event dictionary with added context
    """
    event_dict["service"] = SERVICE_NAME

    try:
        from nodejs_lambda_utils._version import __version__

        event_dict["version"] = __version__
    except ImportError:
        pass

    return event_dict


def configure_logging(
    level: LogLevel | str = LogLevel.INFO,
    log_format: LogFormat | str = LogFormat.JSON,
    file_path: Path | str | None = None,
    file_enabled: bool = False,
) -> None:
    """Configure structured logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Output format (json or console)
        file_path: Path to log file (if file logging enabled)
        file_enabled: Whether to enable file logging

    Example:
        # For development (colored console output)
        configure_logging(level="DEBUG", log_format="console")

        # For CI (JSON for log aggregation)
        configure_logging(level="INFO", log_format="json")
    """
    if isinstance(level, str):
        level = LogLevel(level.upper())
    if isinstance(log_format, str):
        log_format = LogFormat(log_format.lower())

    numeric_level = getattr(logging, level.value)

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        add_context_processor,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if log_format == LogFormat.JSON:
        shared_processors.append(structlog.processors.JSONRenderer())
    else:
        shared_processors.append(
            structlog.dev.ConsoleRenderer(
                colors=True, exception_formatter=structlog.dev.plain_traceback
            )
        )

    structlog.configure(
        processors=shared_processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handlers: list[logging.Handler] = []

    # Console output goes to stderr so stdout stays clean for CLI results
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    handlers.append(console_handler)

    if file_enabled and file_path:
        try:
            file_path = Path(file_path)
            file_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(file_path)
            file_handler.setLevel(numeric_level)
            handlers.append(file_handler)
        except OSError as e:
            # Continue with console only
            console_logger = logging.getLogger("nodejs_lambda_utils.logging")
            console_logger.warning(f"Could not create log file {file_path}: {e}")

    logging.basicConfig(
        format="%(message)s",
        level=numeric_level,
        handlers=handlers,
        force=True,
    )


def get_logger(name: str | None = None) -> WrappedLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (defaults to caller's module)

    Returns:
        Configured structlog logger
    """
    return cast(WrappedLogger, structlog.get_logger(name))


def bind_context(**kwargs: Any) -> None:
    """Bind contextual variables for all subsequent log calls.

    Args:
        **kwargs: Key-value pairs to bind

    Example:
        bind_context(project_root="/work/app")
        log.info("lock_file_detected")  # Includes project_root
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def unbind_context(*keys: str) -> None:
    """Remove contextual variables.

    Args:
        *keys: Keys to unbind
    """
    structlog.contextvars.unbind_contextvars(*keys)


def clear_context() -> None:
    """Clear all bound contextual variables."""
    structlog.contextvars.clear_contextvars()


class LogEventNames:
    """Standard log event names for consistency."""

    # Stack traces
    STACK_TRACE_PARSED = "stack_trace_parsed"
    STACK_FRAME_SKIPPED = "stack_frame_skipped"

    # Subprocess execution
    COMMAND_EXECUTING = "command_executing"
    COMMAND_FAILED = "command_failed"
    COMMAND_TIMEOUT = "command_timeout"
    COMMAND_NOT_FOUND = "command_not_found"

    # File discovery
    FILE_FOUND = "file_found"
    FILE_NOT_FOUND = "file_not_found"
    LOCK_FILE_DETECTED = "lock_file_detected"

    # Dependencies
    DEPENDENCY_RESOLVED = "dependency_resolved"
    DEPENDENCY_UNRESOLVED = "dependency_unresolved"

    # Toolchain probes
    NODE_VERSION_DETECTED = "node_version_detected"
    ESBUILD_VERSION_DETECTED = "esbuild_version_detected"
    ESBUILD_NOT_INSTALLED = "esbuild_not_installed"

    # CLI
    CLI_ERROR = "cli_error"
    CONFIGURATION_LOADED = "configuration_loaded"
    CONFIGURATION_INVALID = "configuration_invalid"
