"""Project materialization: create a folder and fill it from a template.

``ProjectMaterializer.materialize`` runs a strictly forward pipeline:

1. validate the template category (before any filesystem access)
2. validate the parent directory
3. validate the folder name and that the target does not exist yet
4. create the target directory
5. locate the template
6. copy the template into the target
7. return the new absolute path

Any failure stops the pipeline and raises the matching ``ScaffoldError``.
Nothing is retried and nothing is cleaned up: an empty or partially
populated target is left for the caller to inspect.

The existence check (3) and the create (4) are not atomic.  Callers driving
concurrent requests against the same parent must serialise them.
"""

from __future__ import annotations

import asyncio
import os
from pathlib import Path

from rich.markup import escape

from gamegrove.errors import (
    AlreadyExistsError,
    InvalidNameError,
    InvalidParentError,
    ScaffoldIOError,
)
from gamegrove.fs import FileSystem, LocalFileSystem
from gamegrove.models import TemplateCategory
from gamegrove.scaffolder.copier import copy_tree
from gamegrove.scaffolder.locator import SearchContext, SearchRoot, TemplateLocator
from gamegrove.utils import console


def validate_folder_name(name: str) -> str:
    """Return *name* if it is a usable single path segment.

    Raises:
        InvalidNameError: Empty, ``.``/``..``, or containing a path separator
            or a NUL byte.
    """
    separators = {"/", "\\", os.sep, "\x00"}
    if os.altsep:
        separators.add(os.altsep)
    if not name or name.strip() != name or name in (".", "..") or any(
        sep in name for sep in separators
    ):
        raise InvalidNameError(name)
    return name


class ProjectMaterializer:
    """Creates new game projects from template skeletons.

    Args:
        locator: Resolves template categories to directories.
        fs: Filesystem capability; defaults to the local disk.
        quiet: Suppress console progress messages.
    """

    def __init__(
        self,
        locator: TemplateLocator,
        fs: FileSystem | None = None,
        quiet: bool = False,
    ) -> None:
        self.locator = locator
        self.fs = fs or locator.fs
        self.quiet = quiet

    @classmethod
    def from_context(
        cls,
        context: SearchContext,
        fs: FileSystem | None = None,
        quiet: bool = False,
    ) -> ProjectMaterializer:
        fs = fs or LocalFileSystem()
        return cls(TemplateLocator.from_context(context, fs), fs=fs, quiet=quiet)

    @classmethod
    def from_roots(
        cls,
        search_roots: list[SearchRoot],
        fs: FileSystem | None = None,
        quiet: bool = False,
    ) -> ProjectMaterializer:
        fs = fs or LocalFileSystem()
        return cls(TemplateLocator(search_roots, fs), fs=fs, quiet=quiet)

    # -- Public API --------------------------------------------------------

    def materialize(
        self,
        parent: str | Path,
        folder_name: str,
        category: str | TemplateCategory,
    ) -> Path:
        """Create ``parent/folder_name`` and populate it from the category's template.

        Args:
            parent: Existing directory that will contain the new project.
            folder_name: Name of the new project folder (single path segment).
            category: Template category, e.g. ``"2d"``.

        Returns:
            Absolute path of the new project directory.

        Raises:
            InvalidParentError: *parent* is missing or not a directory.
            InvalidCategoryError: *category* is not recognised.
            InvalidNameError: *folder_name* is not a single path segment.
            AlreadyExistsError: ``parent/folder_name`` already exists.
            ScaffoldIOError: Creating the directory or copying failed.
            TemplateNotFoundError: No search location holds the template.
        """
        # Category first: an unknown category must fail before any
        # filesystem access.
        cat = TemplateCategory.parse(category)

        parent_str = os.path.abspath(os.path.expanduser(os.fspath(parent)))

        # Parent
        if not self.fs.exists(parent_str):
            raise InvalidParentError(parent_str)
        if not self.fs.is_dir(parent_str):
            raise InvalidParentError(parent_str, reason="is not a directory")

        # Target
        validate_folder_name(folder_name)
        target = os.path.join(parent_str, folder_name)
        if self.fs.exists(target) or self.fs.is_symlink(target):
            raise AlreadyExistsError(target)

        # Create
        try:
            self.fs.make_dir(target)
        except OSError as exc:
            raise ScaffoldIOError("create", target, exc) from exc

        # Locate (the empty target stays if this fails)
        template = self.locator.locate(cat)
        self._log(f"[cyan]Using {cat.value} template[/cyan] {escape(str(template))}")

        # Copy (a partial target stays if this fails)
        written = copy_tree(template, target, fs=self.fs)

        self._log(
            f"[green]Created project[/green] [bold]{escape(folder_name)}[/bold] "
            f"({len(written)} files) at {escape(target)}"
        )
        return Path(target)

    async def materialize_async(
        self,
        parent: str | Path,
        folder_name: str,
        category: str | TemplateCategory,
    ) -> Path:
        """Run :meth:`materialize` on a worker thread.

        For event-driven callers that must not block their loop.  No timeout
        is imposed here.
        """
        return await asyncio.to_thread(self.materialize, parent, folder_name, category)

    # -- Internal ----------------------------------------------------------

    def _log(self, message: str) -> None:
        if not self.quiet:
            console.print(message, highlight=False)


def materialize(
    parent: str | Path,
    folder_name: str,
    category: str | TemplateCategory,
    context: SearchContext,
    fs: FileSystem | None = None,
) -> Path:
    """Create a project using the search roots derived from *context*."""
    # Category is checked before the search roots are built so an invalid
    # request never probes the filesystem.
    TemplateCategory.parse(category)
    materializer = ProjectMaterializer.from_context(context, fs=fs)
    return materializer.materialize(parent, folder_name, category)
