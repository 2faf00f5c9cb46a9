"""Error kinds raised by the scaffolding core.

Every failure of the materialization pipeline is a ``ScaffoldError``.  The
subclass names the failure kind, ``step`` names the pipeline step that
produced it and ``path`` (when relevant) the filesystem location involved.
Boundary code converts them to text with :meth:`ScaffoldError.user_message`.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path


class ScaffoldError(Exception):
    """Base class for every scaffolding failure."""

    step: str = "scaffold"

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        self.path = str(path) if path is not None else None
        super().__init__(message)

    def user_message(self) -> str:
        """Return a human-readable description suitable for the UI."""
        return str(self)


class InvalidParentError(ScaffoldError):
    """The parent directory for a new project is missing or not a directory."""

    step = "validate-parent"

    def __init__(self, path: str | Path, reason: str = "does not exist") -> None:
        self.reason = reason
        super().__init__(f"Parent directory {reason}: {path}", path=path)


class InvalidNameError(ScaffoldError):
    """The requested project folder name cannot be used as a single path segment."""

    step = "validate-name"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Invalid project folder name {name!r}: it must be a single, "
            "non-empty path segment"
        )


class InvalidCategoryError(ScaffoldError):
    """The requested template category is not one of the recognised values."""

    step = "validate-category"

    def __init__(self, category: object, allowed: Iterable[str]) -> None:
        self.category = category
        self.allowed = list(allowed)
        super().__init__(
            f"Unknown template category {category!r}. "
            f"Expected one of: {', '.join(self.allowed)}"
        )


class AlreadyExistsError(ScaffoldError):
    """The target project directory already exists."""

    step = "validate-target"

    def __init__(self, path: str | Path) -> None:
        super().__init__(f"Target already exists: {path}", path=path)


class TemplateNotFoundError(ScaffoldError):
    """No candidate search location held the requested template.

    ``checked_paths`` is the complete, ordered candidate list exactly as it
    was probed.
    """

    step = "locate-template"

    def __init__(self, category: str, checked_paths: Sequence[str]) -> None:
        self.category = category
        self.checked_paths = list(checked_paths)
        super().__init__(
            f"Template for category '{category}' not found "
            f"({len(self.checked_paths)} locations checked)"
        )

    def user_message(self) -> str:
        lines = [f"Template for category '{self.category}' not found. Checked paths:"]
        lines.extend(f"  - {p}" for p in self.checked_paths)
        return "\n".join(lines)


class ScaffoldIOError(ScaffoldError):
    """A filesystem operation failed.

    Attributes:
        operation: Short name of what was attempted (``create``, ``copy``,
            ``list``, ``mkdir``, ...).
        cause: The underlying ``OSError``.
    """

    step = "io"

    def __init__(
        self,
        operation: str,
        path: str | Path,
        cause: BaseException | None = None,
    ) -> None:
        self.operation = operation
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"I/O error during {operation} at {path}{detail}", path=path)
