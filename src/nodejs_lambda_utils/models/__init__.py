"""Data models and transfer objects."""

from .stack_trace import StackFrame

__all__ = [
    "StackFrame",
]
