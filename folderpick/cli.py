"""Command-line front door for folderpick.

Parses CLI options, resolves the root folder, and scans its subdirectories.
Then runs the interactive picker and prints the chosen path.
"""

from __future__ import annotations

import argparse
import logging
import sys

from .config import load_root_name, load_theme_name
from .errors import FolderPickError
from .folders import list_folders, resolve_root
from .logger import get_logger, setup_logging
from .runtime import run_picker
from .ui_theme import available_theme_names

logger = get_logger(__name__)


def _folder_name(value: str) -> str:
    """argparse type for a single folder name under the home directory."""
    name = value.strip()
    if not name or "/" in name or name in {".", ".."}:
        raise argparse.ArgumentTypeError(f"invalid folder name: {value!r}")
    return name


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="folderpick",
        description="Pick a folder under your home directory and print its path.",
    )
    parser.add_argument(
        "--root-name",
        type=_folder_name,
        default=None,
        help="Folder under $HOME to list (default: config value or Desktop).",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--list", action="store_true", help="Print folder names and exit without the picker.")
    parser.add_argument("--log-file", metavar="PATH", default=None, help="Append debug logs to PATH.")
    parser.add_argument("--debug", action="store_true", help="Log at DEBUG level.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse arguments, run the picker, and print the chosen path.

    Prints nothing when the user quits. Any failure exits non-zero with a
    single message on stderr and nothing on stdout.
    """
    args = build_parser().parse_args(argv)

    try:
        setup_logging(args.log_file, logging.DEBUG if args.debug else logging.INFO)
    except OSError as exc:
        raise SystemExit(f"Cannot open log file: {exc}") from exc

    root_name = args.root_name or load_root_name()
    theme_name = args.theme or load_theme_name()

    try:
        root = resolve_root(root_name)
        folders = list_folders(root)
    except FolderPickError as exc:
        logger.error("Startup failed: %s", exc)
        raise SystemExit(f"Application error: {exc}") from exc

    if args.list:
        sys.stdout.write("".join(f"{name}\n" for name in folders))
        return

    try:
        result = run_picker(root, folders, theme_name, args.no_color)
    except (FolderPickError, OSError) as exc:
        logger.exception("Picker failed")
        raise SystemExit(f"Application error: {exc}") from exc

    if result is not None:
        sys.stdout.write(f"{result}\n")


if __name__ == "__main__":
    main()
