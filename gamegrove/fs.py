"""Minimal filesystem capability used by the scaffolder and workspace lister.

Every filesystem touch made by the locator, copier, materializer and lister
goes through a ``FileSystem`` object.  ``LocalFileSystem`` talks to the real
disk; ``MemoryFileSystem`` is an in-memory double so the search and copy
logic can be unit tested without creating real trees.

Both implementations raise plain ``OSError`` subclasses
(``FileNotFoundError``, ``FileExistsError``, ``NotADirectoryError``,
``PermissionError``) so callers handle them the same way.
"""

from __future__ import annotations

import errno
import os
import posixpath
from pathlib import Path, PurePosixPath
from typing import Protocol, runtime_checkable


@runtime_checkable
class FileSystem(Protocol):
    """Operations the scaffolding core needs from a filesystem."""

    def exists(self, path: str | Path) -> bool: ...

    def is_dir(self, path: str | Path) -> bool: ...

    def is_file(self, path: str | Path) -> bool: ...

    def is_symlink(self, path: str | Path) -> bool: ...

    def list_children(self, path: str | Path) -> list[str]: ...

    def read_bytes(self, path: str | Path) -> bytes: ...

    def write_bytes(self, path: str | Path, data: bytes) -> None: ...

    def make_dir(self, path: str | Path) -> None: ...

    def modified_time(self, path: str | Path) -> float: ...


# ---------------------------------------------------------------------------
# Real filesystem
# ---------------------------------------------------------------------------


class LocalFileSystem:
    """``FileSystem`` backed by ``os`` and ``pathlib``."""

    def exists(self, path: str | Path) -> bool:
        return os.path.exists(path)

    def is_dir(self, path: str | Path) -> bool:
        return os.path.isdir(path)

    def is_file(self, path: str | Path) -> bool:
        return os.path.isfile(path)

    def is_symlink(self, path: str | Path) -> bool:
        return os.path.islink(path)

    def list_children(self, path: str | Path) -> list[str]:
        return os.listdir(path)

    def read_bytes(self, path: str | Path) -> bytes:
        return Path(path).read_bytes()

    def write_bytes(self, path: str | Path, data: bytes) -> None:
        Path(path).write_bytes(data)

    def make_dir(self, path: str | Path) -> None:
        # Single level and not exist_ok: a concurrent creator must surface
        # as FileExistsError.
        os.mkdir(path)

    def modified_time(self, path: str | Path) -> float:
        return os.stat(path).st_mtime


# ---------------------------------------------------------------------------
# In-memory double
# ---------------------------------------------------------------------------


def _key(path: str | Path) -> str:
    """Normalise a path to the POSIX string used as a dictionary key."""
    raw = str(path).replace("\\", "/")
    return posixpath.normpath("/" + raw.lstrip("/"))


class MemoryFileSystem:
    """In-memory ``FileSystem`` for tests.

    Paths are absolute POSIX-style strings.  The root ``/`` always exists.
    Directories, files and symlinks are tracked in separate maps; a symlink
    is never reported as a file or a directory by ``is_file``/``is_dir``,
    which is enough to exercise the copier's skip policy.

    Usage::

        fs = MemoryFileSystem()
        fs.add_file("/app/templates/2d-game-boilerplate/index.html", b"<html>")
        fs.add_dir("/ws")
    """

    def __init__(self) -> None:
        self._dirs: set[str] = {"/"}
        self._files: dict[str, bytes] = {}
        self._symlinks: dict[str, str] = {}
        self._mtimes: dict[str, float] = {}
        self._unreadable: set[str] = set()
        self._unwritable: set[str] = set()

    # -- Seeding helpers ---------------------------------------------------

    def add_dir(self, path: str | Path, mtime: float | None = None) -> None:
        """Create *path* and any missing parents."""
        key = _key(path)
        parts = PurePosixPath(key).parts
        for i in range(1, len(parts) + 1):
            self._dirs.add(str(PurePosixPath(*parts[:i])))
        if mtime is not None:
            self._mtimes[key] = mtime

    def add_file(
        self, path: str | Path, data: bytes = b"", mtime: float | None = None
    ) -> None:
        """Create a file (and its parent directories) holding *data*."""
        key = _key(path)
        self.add_dir(PurePosixPath(key).parent)
        self._files[key] = data
        if mtime is not None:
            self._mtimes[key] = mtime

    def add_symlink(self, path: str | Path, target: str) -> None:
        """Create a symlink entry pointing at *target* (never followed)."""
        key = _key(path)
        self.add_dir(PurePosixPath(key).parent)
        self._symlinks[key] = target

    def deny_read(self, path: str | Path) -> None:
        """Make listing/reading *path* raise ``PermissionError``."""
        self._unreadable.add(_key(path))

    def deny_write(self, path: str | Path) -> None:
        """Make creating entries inside *path* raise ``PermissionError``."""
        self._unwritable.add(_key(path))

    def files(self) -> dict[str, bytes]:
        """Snapshot of every file path and its contents."""
        return dict(self._files)

    def dirs(self) -> set[str]:
        """Snapshot of every directory path."""
        return set(self._dirs)

    # -- FileSystem protocol -----------------------------------------------

    def exists(self, path: str | Path) -> bool:
        key = _key(path)
        return key in self._dirs or key in self._files or key in self._symlinks

    def is_dir(self, path: str | Path) -> bool:
        return _key(path) in self._dirs

    def is_file(self, path: str | Path) -> bool:
        return _key(path) in self._files

    def is_symlink(self, path: str | Path) -> bool:
        return _key(path) in self._symlinks

    def list_children(self, path: str | Path) -> list[str]:
        key = _key(path)
        self._check_readable(key)
        if key not in self._dirs:
            if self.exists(key):
                raise NotADirectoryError(errno.ENOTDIR, "Not a directory", key)
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", key)

        children: set[str] = set()
        for entry in (*self._dirs, *self._files, *self._symlinks):
            if entry == key:
                continue
            parent = str(PurePosixPath(entry).parent)
            if parent == key:
                children.add(PurePosixPath(entry).name)
        return sorted(children)

    def read_bytes(self, path: str | Path) -> bytes:
        key = _key(path)
        self._check_readable(key)
        if key in self._dirs:
            raise IsADirectoryError(errno.EISDIR, "Is a directory", key)
        if key not in self._files:
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", key)
        return self._files[key]

    def write_bytes(self, path: str | Path, data: bytes) -> None:
        key = _key(path)
        parent = str(PurePosixPath(key).parent)
        if parent not in self._dirs:
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", key)
        if parent in self._unwritable:
            raise PermissionError(errno.EACCES, "Permission denied", key)
        if key in self._dirs:
            raise IsADirectoryError(errno.EISDIR, "Is a directory", key)
        self._files[key] = data

    def make_dir(self, path: str | Path) -> None:
        key = _key(path)
        parent = str(PurePosixPath(key).parent)
        if self.exists(key):
            raise FileExistsError(errno.EEXIST, "File exists", key)
        if parent not in self._dirs:
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", key)
        if parent in self._unwritable:
            raise PermissionError(errno.EACCES, "Permission denied", key)
        self._dirs.add(key)

    def modified_time(self, path: str | Path) -> float:
        key = _key(path)
        if not self.exists(key):
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", key)
        return self._mtimes.get(key, 0.0)

    # -- Internal ----------------------------------------------------------

    def _check_readable(self, key: str) -> None:
        if key in self._unreadable:
            raise PermissionError(errno.EACCES, "Permission denied", key)
