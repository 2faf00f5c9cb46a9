"""Unit tests for workspace listing (gamegrove.workspace.lister).

Tests cover:
- Missing root returns an empty list
- Only directories are listed (files and symlink entries excluded)
- Name ordering (case-insensitive) and modified ordering (newest first)
- Deterministic tie-breaking
- lastModified truncation and fallback to 0
- Unlistable roots raise ScaffoldIOError
- list_workspaces de-duplication
- Real directories, including symlinked ones, via LocalFileSystem
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from gamegrove.errors import ScaffoldIOError
from gamegrove.fs import MemoryFileSystem
from gamegrove.models import FolderEntry, SortOrder
from gamegrove.workspace import list_folders, list_workspaces, sort_entries


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def workspace_fs(memory_fs: MemoryFileSystem) -> MemoryFileSystem:
    """``/ws`` with three project folders, a file and a symlink."""
    memory_fs.add_dir("/ws/beta", mtime=1_700_000_300.9)
    memory_fs.add_dir("/ws/Alpha", mtime=1_700_000_100.0)
    memory_fs.add_dir("/ws/gamma", mtime=1_700_000_200.0)
    memory_fs.add_file("/ws/notes.txt", b"hello", mtime=1_800_000_000.0)
    memory_fs.add_symlink("/ws/shortcut", "/elsewhere")
    return memory_fs


# ---------------------------------------------------------------------------
# list_folders
# ---------------------------------------------------------------------------


class TestListFolders:
    @pytest.mark.unit
    def test_missing_root_is_empty(self, memory_fs):
        assert list_folders("/does/not/exist", fs=memory_fs) == []

    @pytest.mark.unit
    def test_only_directories(self, memory_fs):
        memory_fs.add_file("/r/a.txt")
        memory_fs.add_dir("/r/b")
        memory_fs.add_dir("/r/c")
        names = {e.name for e in list_folders("/r", fs=memory_fs)}
        assert names == {"b", "c"}

    @pytest.mark.unit
    def test_entry_fields(self, workspace_fs):
        entries = list_folders("/ws", fs=workspace_fs)
        beta = next(e for e in entries if e.name == "beta")
        assert beta.path == "/ws/beta"
        assert beta.last_modified == 1_700_000_300

    @pytest.mark.unit
    def test_name_order_case_insensitive(self, workspace_fs):
        entries = list_folders("/ws", order=SortOrder.NAME, fs=workspace_fs)
        assert [e.name for e in entries] == ["Alpha", "beta", "gamma"]

    @pytest.mark.unit
    def test_modified_order_newest_first(self, workspace_fs):
        entries = list_folders("/ws", order="modified", fs=workspace_fs)
        assert [e.name for e in entries] == ["beta", "gamma", "Alpha"]

    @pytest.mark.unit
    def test_unknown_mtime_is_zero(self, memory_fs):
        memory_fs.add_dir("/r/fresh")
        assert list_folders("/r", fs=memory_fs)[0].last_modified == 0

    @pytest.mark.unit
    def test_mtime_error_is_zero(self, memory_fs, monkeypatch):
        memory_fs.add_dir("/r/x", mtime=5.0)

        def boom(path):
            raise PermissionError(13, "Permission denied", str(path))

        monkeypatch.setattr(memory_fs, "modified_time", boom)
        assert list_folders("/r", fs=memory_fs)[0].last_modified == 0

    @pytest.mark.unit
    def test_root_is_a_file(self, memory_fs):
        memory_fs.add_file("/r.txt")
        with pytest.raises(ScaffoldIOError) as exc_info:
            list_folders("/r.txt", fs=memory_fs)
        assert exc_info.value.operation == "list"
        assert exc_info.value.path == "/r.txt"

    @pytest.mark.unit
    def test_unreadable_root(self, memory_fs):
        memory_fs.add_dir("/locked/a")
        memory_fs.deny_read("/locked")
        with pytest.raises(ScaffoldIOError) as exc_info:
            list_folders("/locked", fs=memory_fs)
        assert isinstance(exc_info.value.cause, PermissionError)

    @pytest.mark.unit
    def test_repeatable(self, workspace_fs):
        first = list_folders("/ws", order=SortOrder.MODIFIED, fs=workspace_fs)
        second = list_folders("/ws", order=SortOrder.MODIFIED, fs=workspace_fs)
        assert first == second


# ---------------------------------------------------------------------------
# sort_entries
# ---------------------------------------------------------------------------


class TestSortEntries:
    @pytest.mark.unit
    def test_modified_ties_broken_by_name(self):
        entries = [
            FolderEntry(name="b", path="/b", last_modified=10),
            FolderEntry(name="a", path="/a", last_modified=10),
            FolderEntry(name="c", path="/c", last_modified=20),
        ]
        assert [e.name for e in sort_entries(entries, SortOrder.MODIFIED)] == ["c", "a", "b"]

    @pytest.mark.unit
    def test_name_case_ties_broken_by_raw_name(self):
        entries = [
            FolderEntry(name="game", path="/game"),
            FolderEntry(name="Game", path="/Game"),
        ]
        assert [e.name for e in sort_entries(entries, SortOrder.NAME)] == ["Game", "game"]


# ---------------------------------------------------------------------------
# list_workspaces
# ---------------------------------------------------------------------------


class TestListWorkspaces:
    @pytest.mark.unit
    def test_roots_in_order_and_deduplicated(self, memory_fs):
        memory_fs.add_dir("/games/one")
        memory_fs.add_dir("/src/two")
        result = list_workspaces(["/games", "/src", "/games/../games"], fs=memory_fs)
        assert list(result) == ["/games", "/src"]
        assert [e.name for e in result["/games"]] == ["one"]
        assert [e.name for e in result["/src"]] == ["two"]

    @pytest.mark.unit
    def test_missing_roots_are_empty(self, memory_fs):
        assert list_workspaces(["/nothing"], fs=memory_fs) == {"/nothing": []}


# ---------------------------------------------------------------------------
# Real filesystem
# ---------------------------------------------------------------------------


class TestListFoldersOnDisk:
    @pytest.mark.unit
    def test_real_tree(self, tmp_path: Path):
        (tmp_path / "a.txt").write_text("x", encoding="utf-8")
        (tmp_path / "b").mkdir()
        (tmp_path / "c").mkdir()
        os.utime(tmp_path / "b", (1_600_000_000, 1_600_000_000))

        entries = list_folders(tmp_path)
        assert [e.name for e in entries] == ["b", "c"]
        assert entries[0].path == str(tmp_path / "b")
        assert entries[0].last_modified == 1_600_000_000

    @pytest.mark.unit
    def test_symlinked_directory_is_listed(self, tmp_path: Path):
        (tmp_path / "real").mkdir()
        (tmp_path / "target.txt").write_text("x", encoding="utf-8")
        (tmp_path / "link-dir").symlink_to(tmp_path / "real")
        (tmp_path / "link-file").symlink_to(tmp_path / "target.txt")

        names = [e.name for e in list_folders(tmp_path)]
        assert names == ["link-dir", "real"]

    @pytest.mark.unit
    def test_tilde_is_expanded(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        (tmp_path / "src" / "proj").mkdir(parents=True)
        entries = list_folders("~/src")
        assert [e.path for e in entries] == [str(tmp_path / "src" / "proj")]
