"""Game Grove configuration.

Centralised, typed configuration for the workspace browser and the project
scaffolder.  Settings use a Pydantic v2 model so they are validated at
construction time and can be serialised to/from JSON or read from
environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from gamegrove.models import SortOrder
from gamegrove.scaffolder.locator import (
    DEFAULT_EXECUTABLE_ANCESTORS,
    DEFAULT_PROJECT_MARKERS,
    DEFAULT_TEMPLATE_DIR_NAME,
    SearchContext,
)


def _home_src() -> Path:
    return Path.home() / "src"


class Config(BaseModel):
    """Global Game Grove configuration.

    Instances are typically created once by the CLI entry point (``from_env``
    or ``load``) and passed to the commands that need them.
    """

    workspace_root: Path = Field(
        default_factory=_home_src, description="Directory whose folders are listed"
    )
    sort_order: SortOrder = Field(default=SortOrder.NAME)
    editor_command: str = Field(default="code", min_length=1)
    entry_file: str = Field(
        default="index.html", min_length=1, description="File opened in the browser"
    )
    template_dir_name: str = Field(default=DEFAULT_TEMPLATE_DIR_NAME, min_length=1)
    project_markers: list[str] = Field(
        default_factory=lambda: list(DEFAULT_PROJECT_MARKERS)
    )
    executable_ancestors: int = Field(
        default=DEFAULT_EXECUTABLE_ANCESTORS,
        ge=0,
        le=8,
        description="Parents of the executable directory probed for templates",
    )

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def default_root(self) -> Path:
        """Home-relative default workspace (``~/src``)."""
        return _home_src()

    @property
    def listing_roots(self) -> list[Path]:
        """Roots shown by the browser: configured workspace, then the default."""
        return [self.workspace_root.expanduser(), self.default_root]

    def search_context(self) -> SearchContext:
        """Capture the runtime search context with the configured knobs."""
        return SearchContext.from_runtime(
            project_markers=tuple(self.project_markers),
            executable_ancestors=self.executable_ancestors,
            template_dir_name=self.template_dir_name,
        )

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file.  Parent directories are created.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            GAMEGROVE_WORKSPACE_ROOT, GAMEGROVE_SORT_ORDER, GAMEGROVE_EDITOR,
            GAMEGROVE_ENTRY_FILE, GAMEGROVE_EXECUTABLE_ANCESTORS.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("GAMEGROVE_WORKSPACE_ROOT"):
            kwargs["workspace_root"] = Path(
                os.environ["GAMEGROVE_WORKSPACE_ROOT"]
            ).expanduser()
        if os.environ.get("GAMEGROVE_SORT_ORDER"):
            kwargs["sort_order"] = SortOrder(os.environ["GAMEGROVE_SORT_ORDER"])
        if os.environ.get("GAMEGROVE_EDITOR"):
            kwargs["editor_command"] = os.environ["GAMEGROVE_EDITOR"]
        if os.environ.get("GAMEGROVE_ENTRY_FILE"):
            kwargs["entry_file"] = os.environ["GAMEGROVE_ENTRY_FILE"]
        if os.environ.get("GAMEGROVE_EXECUTABLE_ANCESTORS"):
            kwargs["executable_ancestors"] = int(
                os.environ["GAMEGROVE_EXECUTABLE_ANCESTORS"]
            )
        return cls(**kwargs)
