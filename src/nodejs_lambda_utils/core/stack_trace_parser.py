"""Parser for runtime ("at ...") stack traces.

This module implements the StackTraceParser class that turns the textual
stack attached to a runtime error into StackFrame records. It supports:
- Named frames: ``at foo (bar.js:12:34)``
- Location-only frames: ``at bar.js:5``
- Aliased frames: ``at Foo.bar [as baz] (x.js:1:2)``
- Colon-bearing locations (``node:internal/...``, ``file:///...``, drive letters)
- Frames with or without a column number

Lines that are not frames (the error message, blank lines, separators) are
skipped. Parsing never raises.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any

import structlog

from nodejs_lambda_utils.models.stack_trace import StackFrame
from nodejs_lambda_utils.utils.logging import LogEventNames

log = structlog.get_logger()


class StackTraceParser:
    """Parser for runtime stack traces.

    Responsibilities:
    - Detect if text contains stack frames
    - Extract file, method name, line and column from each frame line
    - Preserve frame order (innermost first, as printed)

    Example:
        parser = StackTraceParser()
        for frame in parser.parse(error_stack):
            print(f"{frame.method_name} at {frame.location}")
    """

    # One frame per line. Groups: method name, file, line, column.
    # Digits are ASCII only; \d would also accept other Unicode decimals.
    FRAME_PATTERN = re.compile(
        r"^\s*at (?:((?:\[object object\])?[^\\/]+(?: \[as \S+\])?) )?"
        r"\(?(.*?):([0-9]+)(?::([0-9]+))?\)?\s*$",
        re.IGNORECASE,
    )

    def contains_stack_trace(self, text: str | None) -> bool:
        """Check if text contains at least one stack frame line.

        Args:
            text: Text to check

        Returns:
            True if a frame line is found, False otherwise
        """
        if not text:
            return False
        return any(self.FRAME_PATTERN.match(line) for line in text.split("\n"))

    def parse(self, stack_text: str | None) -> list[StackFrame]:
        """Parse a stack trace into frames.

        Args:
            stack_text: Captured stack text, or None when no trace exists

        Returns:
            Frames in the order they appear in the text. Empty when nothing
            matched or no text was given.
        """
        if not stack_text:
            return []

        frames = []
        for match in map(self.FRAME_PATTERN.match, stack_text.split("\n")):
            if not match:
                continue
            frame = self._build_frame(match)
            if frame is not None:
                frames.append(frame)

        log.debug(LogEventNames.STACK_TRACE_PARSED, frame_count=len(frames))
        return frames

    def _build_frame(self, match: re.Match[str]) -> StackFrame | None:
        """Project a frame-line match onto a StackFrame.

        Returns None when a line or column number is too long for ``int()``
        (see ``sys.get_int_max_str_digits``); such a line is not a frame.
        """
        method_name, file, line_number, column = match.groups()
        try:
            return StackFrame(
                file=file,
                method_name=method_name,
                line_number=int(line_number),
                column=int(column) if column is not None else None,
            )
        except ValueError:
            log.debug(LogEventNames.STACK_FRAME_SKIPPED, reason="number too long")
            return None


_default_parser = StackTraceParser()


def parse_stack_trace(error: Any = None) -> list[StackFrame]:
    """Parse the stack trace carried by an error-like value.

    Accepts the stack text itself, an object with a ``stack`` attribute,
    a mapping with a ``"stack"`` key (e.g. a serialized error payload), or
    None. Anything without a captured trace yields an empty list.

    Args:
        error: Error-like value or stack text

    Returns:
        Parsed frames
    """
    if error is None or isinstance(error, str):
        return _default_parser.parse(error)

    if isinstance(error, Mapping):
        stack = error.get("stack")
    else:
        stack = getattr(error, "stack", None)

    if not isinstance(stack, str):
        return []
    return _default_parser.parse(stack)


def find_defining_file(frames: Iterable[StackFrame], method_name: str) -> str | None:
    """Find the file that called ``method_name``.

    Looks for the first frame running ``method_name`` and returns the file of
    the frame right after it, i.e. the caller.

    Args:
        frames: Parsed frames, innermost first
        method_name: Exact method name to look for (e.g. "new NodejsFunction")

    Returns:
        The caller's file, or None if the method isn't on the stack or has
        no caller frame
    """
    frames = list(frames)
    for index, frame in enumerate(frames):
        if frame.method_name == method_name:
            if index + 1 < len(frames):
                return frames[index + 1].file
            return None
    return None
