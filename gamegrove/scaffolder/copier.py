"""Recursive template tree copy.

Copies every regular file and directory under a template into an existing
destination directory.  Symlinks and special files are skipped with a
console warning.  The first filesystem error aborts the copy; whatever was
already written stays in place.
"""

from __future__ import annotations

import os
from pathlib import Path

from gamegrove.errors import ScaffoldIOError
from gamegrove.fs import FileSystem, LocalFileSystem
from gamegrove.utils import print_warning


def copy_tree(
    source: str | Path,
    destination: str | Path,
    fs: FileSystem | None = None,
) -> list[Path]:
    """Copy the contents of *source* into *destination*.

    The directory structure is preserved: ``<source>/assets/sprite.png`` is
    written to ``<destination>/assets/sprite.png``.  Empty subdirectories are
    created too.  Existing files at a target path are overwritten.

    Args:
        source: Existing template directory.
        destination: Existing directory to populate.
        fs: Filesystem capability; defaults to the local disk.

    Returns:
        Destination paths of the files written, in copy order.

    Raises:
        ScaffoldIOError: A precondition does not hold (including
            *destination* lying inside *source*), or any read, write or
            mkdir fails.  The destination is not rolled back.
    """
    fs = fs or LocalFileSystem()
    src = os.path.abspath(os.fspath(source))
    dst = os.path.abspath(os.fspath(destination))

    if not fs.is_dir(src):
        raise ScaffoldIOError("copy", src, NotADirectoryError("source is not a directory"))
    if not fs.is_dir(dst):
        raise ScaffoldIOError(
            "copy", dst, NotADirectoryError("destination is not a directory")
        )
    if _is_within(dst, src):
        # The destination would be listed as part of its own source.
        raise ScaffoldIOError(
            "copy", dst, ValueError(f"destination is inside the source tree {src}")
        )

    written: list[Path] = []
    _copy_dir(fs, src, dst, written)
    return written


def _is_within(path: str, root: str) -> bool:
    try:
        return os.path.commonpath([path, root]) == root
    except ValueError:
        return False


def _copy_dir(fs: FileSystem, src: str, dst: str, written: list[Path]) -> None:
    try:
        names = sorted(fs.list_children(src))
    except OSError as exc:
        raise ScaffoldIOError("list", src, exc) from exc

    for name in names:
        src_path = os.path.join(src, name)
        dst_path = os.path.join(dst, name)

        if fs.is_symlink(src_path):
            print_warning(f"Skipping symlink in template: {src_path}")
            continue

        if fs.is_dir(src_path):
            try:
                fs.make_dir(dst_path)
            except FileExistsError:
                if not fs.is_dir(dst_path):
                    raise ScaffoldIOError(
                        "mkdir", dst_path, FileExistsError("a file is in the way")
                    )
            except OSError as exc:
                raise ScaffoldIOError("mkdir", dst_path, exc) from exc
            _copy_dir(fs, src_path, dst_path, written)
        elif fs.is_file(src_path):
            _copy_file(fs, src_path, dst_path)
            written.append(Path(dst_path))
        else:
            print_warning(f"Skipping special file in template: {src_path}")


def _copy_file(fs: FileSystem, src_path: str, dst_path: str) -> None:
    try:
        data = fs.read_bytes(src_path)
    except OSError as exc:
        raise ScaffoldIOError("read", src_path, exc) from exc
    try:
        fs.write_bytes(dst_path, data)
    except OSError as exc:
        raise ScaffoldIOError("write", dst_path, exc) from exc
