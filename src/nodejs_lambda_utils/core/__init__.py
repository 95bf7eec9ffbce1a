"""Core components.

This module exports:
- StackTraceParser: Parses runtime "at ..." stack traces into frames
- extract_dependencies: Resolves module versions from package.json manifests
"""

from nodejs_lambda_utils.core.dependencies import extract_dependencies
from nodejs_lambda_utils.core.stack_trace_parser import (
    StackTraceParser,
    find_defining_file,
    parse_stack_trace,
)

__all__ = [
    "StackTraceParser",
    "extract_dependencies",
    "find_defining_file",
    "parse_stack_trace",
]
