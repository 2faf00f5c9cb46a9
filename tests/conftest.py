"""Shared pytest fixtures for the Game Grove test suite.

Provides reusable fixtures for:
- In-memory filesystems seeded with a template tree and a workspace
- Search roots pointing at the seeded template
- Real on-disk template trees under ``tmp_path``
- A captured Rich console for asserting on printed output
"""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from rich.console import Console

from gamegrove.fs import MemoryFileSystem
from gamegrove.scaffolder.locator import SearchRoot


# ---------------------------------------------------------------------------
# Template content
# ---------------------------------------------------------------------------

TEMPLATE_FILES: dict[str, bytes] = {
    "index.html": b"<!DOCTYPE html><html><body><canvas></canvas></body></html>\n",
    "main.js": b"console.log('game loop');\n",
    "assets/sprite.png": b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR",
}


@pytest.fixture
def template_files() -> dict[str, bytes]:
    """Relative path -> bytes of the template used throughout the tests."""
    return dict(TEMPLATE_FILES)


# ---------------------------------------------------------------------------
# In-memory filesystem
# ---------------------------------------------------------------------------

@pytest.fixture
def memory_fs() -> MemoryFileSystem:
    """An empty in-memory filesystem."""
    return MemoryFileSystem()


@pytest.fixture
def seeded_fs(memory_fs: MemoryFileSystem, template_files: dict[str, bytes]) -> MemoryFileSystem:
    """In-memory filesystem with a 2d template under ``/app`` and an empty ``/ws``.

    Layout::

        /app/templates/2d-game-boilerplate/index.html
        /app/templates/2d-game-boilerplate/main.js
        /app/templates/2d-game-boilerplate/assets/sprite.png
        /ws/
    """
    base = "/app/templates/2d-game-boilerplate"
    for rel, data in template_files.items():
        memory_fs.add_file(f"{base}/{rel}", data)
    memory_fs.add_dir("/ws")
    return memory_fs


@pytest.fixture
def app_roots() -> list[SearchRoot]:
    """A single search root at ``/app`` (where ``seeded_fs`` keeps its template)."""
    return [SearchRoot("/app", "cwd")]


# ---------------------------------------------------------------------------
# Real filesystem
# ---------------------------------------------------------------------------

def write_tree(root: Path, files: dict[str, bytes]) -> Path:
    """Write ``{relative path: bytes}`` under *root*, creating parents."""
    for rel, data in files.items():
        target = root / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
    return root


@pytest.fixture
def disk_template(tmp_path: Path, template_files: dict[str, bytes]) -> Path:
    """A real ``<tmp>/app/templates/2d-game-boilerplate`` tree.

    Returns the ``<tmp>/app`` base directory.
    """
    base = tmp_path / "app"
    write_tree(base / "templates" / "2d-game-boilerplate", template_files)
    return base


# ---------------------------------------------------------------------------
# Console capture
# ---------------------------------------------------------------------------

@pytest.fixture
def captured_console(monkeypatch: pytest.MonkeyPatch) -> Console:
    """Swap the shared Rich console for one writing to an in-memory buffer.

    Read the output with ``captured_console.file.getvalue()``.
    """
    console = Console(file=io.StringIO(), width=400, color_system=None, force_terminal=False)
    monkeypatch.setattr("gamegrove.utils.console", console)
    monkeypatch.setattr("gamegrove.scaffolder.materializer.console", console)
    monkeypatch.setattr("gamegrove.cli.console", console)
    return console
