"""Workspace folder enumeration.

Lists the immediate subdirectories of a workspace root as ``FolderEntry``
records, ordered by name or by modification time.
"""

from __future__ import annotations

import os
from pathlib import Path

from gamegrove.errors import ScaffoldIOError
from gamegrove.fs import FileSystem, LocalFileSystem
from gamegrove.models import FolderEntry, SortOrder


def _name_key(entry: FolderEntry) -> tuple[str, str]:
    return (entry.name.casefold(), entry.name)


def sort_entries(entries: list[FolderEntry], order: SortOrder) -> list[FolderEntry]:
    """Return *entries* sorted by the requested policy.

    Names break timestamp ties, so identical directory state always yields
    the same sequence.
    """
    if order == SortOrder.MODIFIED:
        return sorted(entries, key=lambda e: (-e.last_modified, *_name_key(e)))
    return sorted(entries, key=_name_key)


def list_folders(
    root: str | Path,
    order: SortOrder | str = SortOrder.NAME,
    fs: FileSystem | None = None,
) -> list[FolderEntry]:
    """List the direct child directories of *root*.

    Args:
        root: Directory to enumerate.
        order: ``SortOrder.NAME`` (case-insensitive ascending) or
            ``SortOrder.MODIFIED`` (newest first).
        fs: Filesystem capability; defaults to the local disk.

    Returns:
        Fresh ``FolderEntry`` records.  An empty list when *root* does not
        exist, since a workspace root may not have been created yet.

    Raises:
        ScaffoldIOError: *root* exists but cannot be listed.
    """
    fs = fs or LocalFileSystem()
    order = SortOrder(order)
    root_str = os.path.abspath(os.path.expanduser(os.fspath(root)))

    if not fs.exists(root_str):
        return []

    try:
        names = fs.list_children(root_str)
    except OSError as exc:
        raise ScaffoldIOError("list", root_str, exc) from exc

    entries: list[FolderEntry] = []
    for name in names:
        child = os.path.join(root_str, name)
        if not fs.is_dir(child):
            continue
        entries.append(
            FolderEntry(name=name, path=child, last_modified=_mtime_seconds(fs, child))
        )

    return sort_entries(entries, order)


def list_workspaces(
    roots: list[str | Path],
    order: SortOrder | str = SortOrder.NAME,
    fs: FileSystem | None = None,
) -> dict[str, list[FolderEntry]]:
    """List several roots, skipping ones that resolve to an already-listed directory.

    Returns ``{absolute root: entries}`` in the order the roots were given.
    """
    results: dict[str, list[FolderEntry]] = {}
    for root in roots:
        key = os.path.abspath(os.path.expanduser(os.fspath(root)))
        if key in results:
            continue
        results[key] = list_folders(key, order=order, fs=fs)
    return results


def _mtime_seconds(fs: FileSystem, path: str) -> int:
    """Modification time in whole seconds, ``0`` if it cannot be read."""
    try:
        return max(int(fs.modified_time(path)), 0)
    except OSError:
        return 0
