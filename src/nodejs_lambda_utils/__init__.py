"""Utilities for bundling Node.js Lambda functions.

The centerpiece is the stack trace parser, which turns the "at ..." stack
printed by the Node.js runtime into StackFrame records.
"""

from nodejs_lambda_utils.core.stack_trace_parser import (
    StackTraceParser,
    find_defining_file,
    parse_stack_trace,
)
from nodejs_lambda_utils.models.stack_trace import StackFrame

__all__ = [
    "StackFrame",
    "StackTraceParser",
    "find_defining_file",
    "parse_stack_trace",
]
