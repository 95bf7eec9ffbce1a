"""Tests for stack trace data models."""

from dataclasses import FrozenInstanceError

import pytest

from nodejs_lambda_utils.models.stack_trace import StackFrame


class TestStackFrame:
    """Test StackFrame dataclass."""

    def test_create_basic_frame(self) -> None:
        """Test creating a basic stack frame."""
        frame = StackFrame(
            file="/var/task/index.js",
            method_name="Runtime.handler",
            line_number=12,
            column=31,
        )

        assert frame.file == "/var/task/index.js"
        assert frame.method_name == "Runtime.handler"
        assert frame.line_number == 12
        assert frame.column == 31

    def test_column_defaults_to_none(self) -> None:
        """Test creating a frame without a column."""
        frame = StackFrame("bar.js", None, 5)

        assert frame.column is None
        assert frame.has_column is False

    def test_has_column(self) -> None:
        """Test has_column with a column of zero."""
        assert StackFrame("bar.js", None, 5, 0).has_column is True

    def test_frozen(self) -> None:
        """Test that frames are immutable."""
        frame = StackFrame("bar.js", "foo", 1, 2)

        with pytest.raises(FrozenInstanceError):
            frame.line_number = 3  # type: ignore[misc]

    def test_is_node_internal(self) -> None:
        """Test is_node_internal identifies runtime frames."""
        frames = [
            StackFrame("node:internal/modules/cjs/loader", "Module._compile", 1256, 14),
            StackFrame("node:events", "EventEmitter.emit", 517, 28),
            StackFrame("internal/process/task_queues.js", "processTicksAndRejections", 97, 5),
        ]

        for frame in frames:
            assert frame.is_node_internal, f"Expected {frame.file} to be internal"

    def test_is_node_internal_false_for_project_code(self) -> None:
        """Test is_node_internal returns False for project code."""
        assert not StackFrame("/var/task/index.js", None, 1).is_node_internal

    def test_is_node_modules(self) -> None:
        """Test is_node_modules identifies installed packages."""
        frames = [
            StackFrame("/app/node_modules/aws-cdk-lib/core/lib/app.js", None, 1),
            StackFrame(r"C:\app\node_modules\esbuild\lib\main.js", None, 1),
        ]

        for frame in frames:
            assert frame.is_node_modules, f"Expected {frame.file} to be node_modules"

    def test_is_node_modules_false_for_project_code(self) -> None:
        """Test is_node_modules returns False for project code."""
        assert not StackFrame("/app/lib/node_modules_helper.js", None, 1).is_node_modules

    def test_location(self) -> None:
        """Test location with and without a column."""
        assert StackFrame("bar.js", "foo", 12, 34).location == "bar.js:12:34"
        assert StackFrame("bar.js", None, 5).location == "bar.js:5"

    def test_to_dict(self) -> None:
        """Test serialization keeps field names and absent values."""
        frame = StackFrame("bar.js", None, 5)

        assert frame.to_dict() == {
            "file": "bar.js",
            "method_name": None,
            "line_number": 5,
            "column": None,
        }

    def test_equality(self) -> None:
        """Test value equality between frames."""
        assert StackFrame("bar.js", "foo", 1, 2) == StackFrame("bar.js", "foo", 1, 2)
        assert StackFrame("bar.js", "foo", 1, 2) != StackFrame("bar.js", "foo", 1, None)
