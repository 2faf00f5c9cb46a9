"""External process launching for "open in editor" and "open in browser".

The scaffolding core only hands these helpers absolute paths.  How a path is
opened is platform glue, so it goes through an injectable ``Launcher`` whose
single ``launch(command, args)`` call returns a ``LaunchResult`` instead of
raising.  Tests substitute a recording launcher.
"""

from __future__ import annotations

import os
import subprocess
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from gamegrove.config import Config
from gamegrove.errors import ScaffoldIOError


@dataclass
class LaunchResult:
    """Outcome of starting an external program."""

    command: str
    args: list[str] = field(default_factory=list)
    success: bool = True
    pid: int | None = None
    error: str = ""


class Launcher(Protocol):
    def launch(self, command: str, args: list[str]) -> LaunchResult: ...


class SubprocessLauncher:
    """Starts programs detached from the current process and does not wait."""

    def launch(self, command: str, args: list[str]) -> LaunchResult:
        try:
            process = subprocess.Popen(
                [command, *args],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=(os.name != "nt"),
            )
        except OSError as exc:
            return LaunchResult(
                command=command, args=list(args), success=False, error=str(exc)
            )
        return LaunchResult(command=command, args=list(args), pid=process.pid)


def platform_open_command(target: str, platform: str | None = None) -> tuple[str, list[str]]:
    """Return the ``(command, args)`` that opens *target* with the OS default handler."""
    platform = platform or sys.platform
    if platform == "darwin":
        return "open", [target]
    if platform.startswith("win"):
        # The empty string is the window title argument expected by ``start``.
        return "cmd", ["/c", "start", "", target]
    return "xdg-open", [target]


def open_in_editor(
    path: str | Path,
    config: Config,
    launcher: Launcher | None = None,
) -> LaunchResult:
    """Open a project folder in the configured editor."""
    launcher = launcher or SubprocessLauncher()
    target = os.path.abspath(os.fspath(path))
    return launcher.launch(config.editor_command, [target])


def open_in_browser(
    path: str | Path,
    config: Config,
    launcher: Launcher | None = None,
    platform: str | None = None,
) -> LaunchResult:
    """Open a project's entry HTML file in the default browser.

    Raises:
        ScaffoldIOError: The entry file does not exist in *path*.
    """
    launcher = launcher or SubprocessLauncher()
    entry = os.path.join(os.path.abspath(os.fspath(path)), config.entry_file)
    if not os.path.isfile(entry):
        raise ScaffoldIOError(
            "open", entry, FileNotFoundError(f"{config.entry_file} not found")
        )
    command, args = platform_open_command(entry, platform)
    return launcher.launch(command, args)
