"""Unit tests for console helpers (gamegrove.utils).

Tests cover:
- format_timestamp (unknown, known)
- print_success / print_error / print_warning (markup escaping)
- print_summary_table
- print_folder_table (rows, empty listing)
"""

from __future__ import annotations

import pytest

from gamegrove.models import FolderEntry
from gamegrove.utils import (
    format_timestamp,
    print_error,
    print_folder_table,
    print_success,
    print_summary_table,
    print_warning,
)


# ---------------------------------------------------------------------------
# format_timestamp
# ---------------------------------------------------------------------------


class TestFormatTimestamp:
    @pytest.mark.unit
    def test_unknown(self):
        assert format_timestamp(0) == "-"

    @pytest.mark.unit
    def test_known_is_utc(self):
        assert format_timestamp(1_700_000_000) == "2023-11-14 22:13"


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


class TestPrintHelpers:
    @pytest.mark.unit
    def test_print_success(self, captured_console):
        print_success("Project ready")
        assert "Project ready" in captured_console.file.getvalue()

    @pytest.mark.unit
    def test_print_error_escapes_markup(self, captured_console):
        print_error("bad [bold]path[/bold]")
        assert "bad [bold]path[/bold]" in captured_console.file.getvalue()

    @pytest.mark.unit
    def test_print_warning(self, captured_console):
        print_warning("Skipping symlink in template: /t/link")
        assert "Skipping symlink in template: /t/link" in captured_console.file.getvalue()

    @pytest.mark.unit
    def test_print_summary_table(self, captured_console):
        print_summary_table({"2d": "/app/templates/2d-game-boilerplate"}, title="Templates")
        output = captured_console.file.getvalue()
        assert "Templates" in output
        assert "/app/templates/2d-game-boilerplate" in output


class TestPrintFolderTable:
    @pytest.mark.unit
    def test_rows(self, captured_console):
        entries = [
            FolderEntry(name="alpha", path="/ws/alpha", last_modified=1_700_000_000),
            FolderEntry(name="beta", path="/ws/beta"),
        ]
        print_folder_table(entries, title="/ws")
        output = captured_console.file.getvalue()
        assert "alpha" in output
        assert "2023-11-14 22:13" in output
        assert "/ws/beta" in output

    @pytest.mark.unit
    def test_empty(self, captured_console):
        print_folder_table([], title="/ws")
        assert "/ws: no folders found" in captured_console.file.getvalue()
