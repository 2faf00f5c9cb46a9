"""Pydantic v2 models shared by the workspace lister and the scaffolder."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from gamegrove.errors import InvalidCategoryError


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class TemplateCategory(str, Enum):
    """Closed set of template categories a project can be created from."""
    TWO_D = "2d"
    THREE_D = "3d"

    @property
    def directory_name(self) -> str:
        """Directory holding this category's template, e.g. ``2d-game-boilerplate``."""
        return f"{self.value}-game-boilerplate"

    @classmethod
    def parse(cls, value: str | TemplateCategory) -> TemplateCategory:
        """Return the matching category or raise ``InvalidCategoryError``.

        Matching is exact: ``"2D"`` or ``" 2d"`` are rejected rather than
        silently normalised.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidCategoryError(value, [c.value for c in cls]) from None


class SortOrder(str, Enum):
    """Ordering policy for folder listings."""
    NAME = "name"          # case-insensitive, ascending
    MODIFIED = "modified"  # newest first


# ---------------------------------------------------------------------------
# Listing payload
# ---------------------------------------------------------------------------

class FolderEntry(BaseModel):
    """One immediate subdirectory of a listed root.

    Serialised with ``model_dump(by_alias=True)`` the field names are the
    stable ``name`` / ``path`` / ``lastModified`` payload keys.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str = Field(..., description="Leaf directory name")
    path: str = Field(..., description="Absolute path of the directory")
    last_modified: int = Field(
        default=0,
        ge=0,
        alias="lastModified",
        description="Modification time in whole seconds since the epoch, 0 if unknown",
    )
