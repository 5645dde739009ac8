"""Command-line front door for lazyfm.

Parses CLI options, resolves the starting directory and configures logging.
Then dispatches into the interactive browser runtime.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .runtime import run_browser
from .runtime.config import load_last_directory, save_theme_name
from .ui_theme import available_theme_names

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(log_file: str | None) -> None:
    """Send package logs to ``log_file``; the TUI owns the terminal otherwise."""
    if not log_file:
        return
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger = logging.getLogger("lazyfm")
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and launch lazyfm on a directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    parser = argparse.ArgumentParser(description="Browse and manage files in a keyboard-driven terminal UI.")
    parser.add_argument("path", nargs="?", default=None, help="Directory to open. Defaults to current directory.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}); remembered for later runs.",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--show-hidden", action="store_true", help="Show dotfiles for this session.")
    parser.add_argument(
        "--print-last-dir",
        action="store_true",
        help="Print the directory lazyfm was in when it last quit, then exit.",
    )
    parser.add_argument("--log-file", metavar="PATH", default=None, help="Append debug logs to PATH.")
    args = parser.parse_args()

    if args.print_last_dir:
        last_dir = load_last_directory()
        if last_dir is None:
            raise SystemExit(1)
        sys.stdout.write(f"{last_dir}\n")
        return

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path or default_path)
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    if not path.is_dir():
        raise SystemExit(f"Not a directory: {path}")

    configure_logging(args.log_file)
    if args.theme:
        save_theme_name(args.theme)
    run_browser(
        str(path.resolve()),
        show_hidden=True if args.show_hidden else None,
        theme_name=args.theme,
        no_color=args.no_color,
    )


if __name__ == "__main__":
    main()
