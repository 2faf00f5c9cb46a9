"""Template discovery across deployment layouts.

A template lives at ``<root>/templates/<category>-game-boilerplate``.  Which
``<root>`` applies depends on how the program is running: from a packaged
build the template ships inside the bundle's resource directory, from a
source checkout it sits next to the working directory or the project root,
and some installs place it beside (or a few levels above) the executable.

Rather than reading process state while searching, the deployment context is
captured once in a ``SearchContext`` and expanded into an explicit, ordered
list of ``SearchRoot`` candidates.  ``TemplateLocator`` probes that list and
returns the first existing directory.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from gamegrove.errors import TemplateNotFoundError
from gamegrove.fs import FileSystem, LocalFileSystem
from gamegrove.models import TemplateCategory

DEFAULT_TEMPLATE_DIR_NAME = "templates"
DEFAULT_PROJECT_MARKERS: tuple[str, ...] = ("pyproject.toml", "package.json")
DEFAULT_EXECUTABLE_ANCESTORS = 3

# Relative prefix of the alternate resource layout some bundlers produce,
# where resources keep their path relative to the source tree.
ALTERNATE_BUNDLE_PREFIX = os.path.join("..", "src")


# ---------------------------------------------------------------------------
# Deployment context
# ---------------------------------------------------------------------------


def is_frozen() -> bool:
    """Return True when running from a packaged (PyInstaller-style) build."""
    return bool(getattr(sys, "frozen", False)) and hasattr(sys, "_MEIPASS")


@dataclass(frozen=True)
class SearchContext:
    """Everything the search needs to know about how the program is deployed.

    Attributes:
        cwd: Current working directory.
        bundle_dir: Resource directory of a packaged build, ``None`` when
            running from source.
        executable: Path of the running executable, if known.
        project_markers: File names that identify a project root.
        executable_ancestors: How many parents of the executable's directory
            to probe after the directory itself.
        template_dir_name: Name of the directory holding the templates.
    """

    cwd: Path
    bundle_dir: Path | None = None
    executable: Path | None = None
    project_markers: tuple[str, ...] = DEFAULT_PROJECT_MARKERS
    executable_ancestors: int = DEFAULT_EXECUTABLE_ANCESTORS
    template_dir_name: str = DEFAULT_TEMPLATE_DIR_NAME

    @classmethod
    def from_runtime(
        cls,
        *,
        project_markers: tuple[str, ...] | list[str] = DEFAULT_PROJECT_MARKERS,
        executable_ancestors: int = DEFAULT_EXECUTABLE_ANCESTORS,
        template_dir_name: str = DEFAULT_TEMPLATE_DIR_NAME,
    ) -> SearchContext:
        """Capture the context of the current process."""
        bundle_dir = Path(sys._MEIPASS) if is_frozen() else None  # type: ignore[attr-defined]
        executable = Path(sys.executable) if sys.executable else None
        return cls(
            cwd=Path.cwd(),
            bundle_dir=bundle_dir,
            executable=executable,
            project_markers=tuple(project_markers),
            executable_ancestors=executable_ancestors,
            template_dir_name=template_dir_name,
        )


@dataclass(frozen=True)
class SearchRoot:
    """One candidate base directory, labelled with where it came from."""

    base: str
    origin: str
    trailing_separator: bool = False

    def candidate(self, template_dir_name: str, category: TemplateCategory) -> str:
        """Absolute path of the category's template under this root."""
        path = os.path.join(self.base, template_dir_name, category.directory_name)
        if self.trailing_separator:
            path += os.sep
        return path


# ---------------------------------------------------------------------------
# Root discovery
# ---------------------------------------------------------------------------


def find_project_root(
    start: str | Path,
    markers: tuple[str, ...] | list[str],
    fs: FileSystem | None = None,
) -> str:
    """Walk upward from *start* to the first directory holding a marker file.

    Falls back to *start* itself when no ancestor carries a marker.
    """
    fs = fs or LocalFileSystem()
    start_str = os.path.abspath(os.fspath(start))
    current = start_str
    while True:
        if any(fs.exists(os.path.join(current, marker)) for marker in markers):
            return current
        parent = os.path.dirname(current)
        if parent == current:
            return start_str
        current = parent


def _ancestors(path: str, depth: int) -> list[str]:
    """Up to *depth* parents of *path*, nearest first, stopping at the filesystem root."""
    result: list[str] = []
    current = path
    for _ in range(depth):
        parent = os.path.dirname(current)
        if parent == current:
            break
        result.append(parent)
        current = parent
    return result


def build_search_roots(
    context: SearchContext, fs: FileSystem | None = None
) -> list[SearchRoot]:
    """Expand *context* into the ordered candidate list.

    Order:
        1. Bundle resource dir (packaged builds only): plain, with a trailing
           separator, then the ``../src`` alternate layout.
        2. Working directory.
        3. Project root discovered from the working directory.
        4. Executable directory, then up to ``executable_ancestors`` parents.

    Duplicates are kept so the checked-path list reports exactly what was
    probed.
    """
    fs = fs or LocalFileSystem()
    roots: list[SearchRoot] = []

    if context.bundle_dir is not None:
        bundle = os.path.abspath(os.fspath(context.bundle_dir))
        roots.append(SearchRoot(bundle, "bundle"))
        roots.append(SearchRoot(bundle, "bundle", trailing_separator=True))
        roots.append(
            SearchRoot(
                os.path.normpath(os.path.join(bundle, ALTERNATE_BUNDLE_PREFIX)),
                "bundle-alternate",
            )
        )

    cwd = os.path.abspath(os.fspath(context.cwd))
    roots.append(SearchRoot(cwd, "cwd"))
    roots.append(
        SearchRoot(find_project_root(cwd, context.project_markers, fs), "project-root")
    )

    if context.executable is not None:
        exe_dir = os.path.dirname(os.path.abspath(os.fspath(context.executable)))
        roots.append(SearchRoot(exe_dir, "executable"))
        for ancestor in _ancestors(exe_dir, context.executable_ancestors):
            roots.append(SearchRoot(ancestor, "executable-ancestor"))

    return roots


# ---------------------------------------------------------------------------
# Locator
# ---------------------------------------------------------------------------


class TemplateLocator:
    """Resolves a template category to a directory using a fixed candidate order.

    The first candidate that is a directory and can be listed wins, which lets a
    packaged build's bundled template shadow a developer's local copy.
    """

    def __init__(
        self,
        search_roots: list[SearchRoot],
        fs: FileSystem | None = None,
        template_dir_name: str = DEFAULT_TEMPLATE_DIR_NAME,
    ) -> None:
        self.search_roots = list(search_roots)
        self.fs = fs or LocalFileSystem()
        self.template_dir_name = template_dir_name

    @classmethod
    def from_context(
        cls, context: SearchContext, fs: FileSystem | None = None
    ) -> TemplateLocator:
        fs = fs or LocalFileSystem()
        return cls(
            build_search_roots(context, fs),
            fs=fs,
            template_dir_name=context.template_dir_name,
        )

    def candidates(self, category: str | TemplateCategory) -> list[str]:
        """Ordered absolute candidate paths for *category*."""
        cat = TemplateCategory.parse(category)
        return [root.candidate(self.template_dir_name, cat) for root in self.search_roots]

    def locate(self, category: str | TemplateCategory) -> Path:
        """Return the first existing, listable template directory for *category*.

        A directory that cannot be listed is skipped so an unreadable bundled
        copy does not shadow a readable local one.

        Raises:
            InvalidCategoryError: *category* is not recognised (nothing probed).
            TemplateNotFoundError: No candidate exists; carries every checked path.
        """
        cat = TemplateCategory.parse(category)
        checked: list[str] = []
        for candidate in self.candidates(cat):
            checked.append(candidate)
            if self._is_readable_dir(candidate):
                return Path(candidate)
        raise TemplateNotFoundError(cat.value, checked)

    def _is_readable_dir(self, path: str) -> bool:
        if not self.fs.is_dir(path):
            return False
        try:
            self.fs.list_children(path)
        except OSError:
            return False
        return True

    def available(self) -> dict[TemplateCategory, Path | None]:
        """Map every category to its resolved template, or ``None``."""
        found: dict[TemplateCategory, Path | None] = {}
        for cat in TemplateCategory:
            try:
                found[cat] = self.locate(cat)
            except TemplateNotFoundError:
                found[cat] = None
        return found


def locate_template(
    category: str | TemplateCategory,
    context: SearchContext,
    fs: FileSystem | None = None,
) -> Path:
    """Convenience wrapper: build the roots for *context* and locate *category*."""
    # Validate before touching the filesystem for project-root discovery.
    cat = TemplateCategory.parse(category)
    return TemplateLocator.from_context(context, fs).locate(cat)
