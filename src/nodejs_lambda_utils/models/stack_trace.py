"""Data models for parsed stack traces."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class StackFrame:
    """A single call site in a runtime stack trace."""

    file: str  # Locator exactly as captured (path, URL or tag)
    method_name: str | None
    line_number: int
    column: int | None = None  # None when the trace line omitted a column

    @property
    def has_column(self) -> bool:
        """Check if the trace line reported a column."""
        return self.column is not None

    @property
    def is_node_internal(self) -> bool:
        """Check if this frame is from the runtime's own modules."""
        return self.file.startswith("node:") or self.file.startswith("internal/")

    @property
    def is_node_modules(self) -> bool:
        """Check if this frame is from an installed package."""
        return "node_modules/" in self.file or "node_modules\\" in self.file

    @property
    def location(self) -> str:
        """
        Location in ``file:line[:column]`` form.

        Mirrors the suffix the runtime prints, so it can be pasted into an
        editor's "go to" prompt.
        """
        if self.column is None:
            return f"{self.file}:{self.line_number}"
        return f"{self.file}:{self.line_number}:{self.column}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain mapping, keeping absent fields as None."""
        return asdict(self)
