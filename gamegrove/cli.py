"""Game Grove command-line interface.

Usage::

    python -m gamegrove list
    python -m gamegrove list --root ~/games --order modified
    python -m gamegrove new ~/src my-game --category 2d
    python -m gamegrove locate 3d
    python -m gamegrove templates
    python -m gamegrove open ~/src/my-game --browser
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError

from gamegrove.config import Config
from gamegrove.errors import ScaffoldError, ScaffoldIOError
from gamegrove.launcher import open_in_browser, open_in_editor
from gamegrove.models import SortOrder, TemplateCategory
from gamegrove.scaffolder import ProjectMaterializer, TemplateLocator
from gamegrove.utils import (
    console,
    print_error,
    print_folder_table,
    print_success,
    print_summary_table,
)
from gamegrove.workspace import list_workspaces


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def _cmd_list(args: argparse.Namespace, config: Config) -> None:
    order = SortOrder(args.order) if args.order else config.sort_order
    roots = [Path(args.root)] if args.root else config.listing_roots
    listings = list_workspaces(roots, order=order)

    if args.json:
        console.print_json(
            data={
                root: [e.model_dump(by_alias=True) for e in entries]
                for root, entries in listings.items()
            }
        )
        return

    for root, entries in listings.items():
        print_folder_table(entries, title=root)


def _cmd_new(args: argparse.Namespace, config: Config) -> None:
    materializer = ProjectMaterializer.from_context(config.search_context())
    project = materializer.materialize(args.parent, args.name, args.category)
    print_success(f"Project ready: {project}")


def _cmd_locate(args: argparse.Namespace, config: Config) -> None:
    category = TemplateCategory.parse(args.category)
    locator = TemplateLocator.from_context(config.search_context())
    console.print(str(locator.locate(category)), highlight=False, markup=False)


def _cmd_templates(args: argparse.Namespace, config: Config) -> None:
    locator = TemplateLocator.from_context(config.search_context())
    found = locator.available()
    print_summary_table(
        {cat.value: str(path) if path else "(not found)" for cat, path in found.items()},
        title="Templates",
    )


def _cmd_open(args: argparse.Namespace, config: Config) -> None:
    path = Path(args.path).expanduser()
    if args.browser:
        result = open_in_browser(path, config)
    else:
        result = open_in_editor(path, config)
    if not result.success:
        raise ScaffoldIOError(
            "open", path, OSError(f"could not start {result.command}: {result.error}")
        )
    print_success(f"Opened {path} with {result.command}")


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gamegrove",
        description="Game Grove -- browse a workspace and create game projects from templates",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  gamegrove list --order modified\n"
            "  gamegrove new ~/src my-game --category 2d\n"
            "  gamegrove open ~/src/my-game --browser\n"
        ),
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON configuration file (default: read GAMEGROVE_* environment variables)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_list = sub.add_parser("list", help="List project folders")
    p_list.add_argument("--root", default=None, help="List this directory only")
    p_list.add_argument(
        "--order",
        choices=[o.value for o in SortOrder],
        default=None,
        help="Sort by name or newest-modified first (default: from config)",
    )
    p_list.add_argument("--json", action="store_true", help="Emit JSON payload")
    p_list.set_defaults(handler=_cmd_list)

    p_new = sub.add_parser("new", help="Create a project from a template")
    p_new.add_argument("parent", help="Existing directory to create the project in")
    p_new.add_argument("name", help="New project folder name")
    p_new.add_argument(
        "--category",
        "-c",
        required=True,
        help=f"Template category ({', '.join(c.value for c in TemplateCategory)})",
    )
    p_new.set_defaults(handler=_cmd_new)

    p_locate = sub.add_parser("locate", help="Show where a template category resolves")
    p_locate.add_argument("category")
    p_locate.set_defaults(handler=_cmd_locate)

    p_templates = sub.add_parser("templates", help="List template categories")
    p_templates.set_defaults(handler=_cmd_templates)

    p_open = sub.add_parser("open", help="Open a project in the editor or browser")
    p_open.add_argument("path")
    p_open.add_argument(
        "--browser", action="store_true", help="Open the entry HTML file in a browser"
    )
    p_open.set_defaults(handler=_cmd_open)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``gamegrove`` / ``python -m gamegrove``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = Config.load(Path(args.config)) if args.config else Config.from_env()
    except (OSError, ValidationError, ValueError) as exc:
        print_error(f"Error: invalid configuration: {exc}")
        sys.exit(1)

    try:
        args.handler(args, config)
    except ScaffoldError as exc:
        print_error(exc.user_message())
        sys.exit(1)


if __name__ == "__main__":
    main()
