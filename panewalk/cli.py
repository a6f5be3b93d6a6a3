"""Command-line front door for panewalk.

Parses CLI options, validates the starting directory and configures
logging, then dispatches into the interactive browser runtime.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
import termios
from pathlib import Path

from .errors import PanewalkError
from .logging_setup import configure_logging
from .runtime import run_browser
from .runtime.app import AppOptions
from .session import default_last_dir_path
from .ui_theme import available_theme_names

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="panewalk",
        description="Browse directories in three panes and print the directory you quit in.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to start in. Defaults to current directory.")
    parser.add_argument(
        "--choosedir",
        nargs="?",
        type=Path,
        const=default_last_dir_path(),
        default=None,
        metavar="FILE",
        help="Write the final directory to FILE instead of stdout "
        f"(default FILE: {default_last_dir_path()}).",
    )
    parser.add_argument(
        "--logical",
        action="store_true",
        help="Track the directory logically instead of changing the process working directory.",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colors; keep only the selection highlight.")
    parser.add_argument("--no-metadata", action="store_true", help="Hide the file-type row under the path.")
    parser.add_argument("--log-file", type=Path, default=None, help="Append diagnostic log records to this file.")
    parser.add_argument("--log-level", default="info", help="Log level for --log-file (default: info).")
    return parser


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and run one browsing session.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used. Failures end the process with a one-line message after
    the terminal has been restored.
    """
    args = build_parser().parse_args()

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path or default_path)
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    if not path.is_dir():
        raise SystemExit(f"Not a directory: {path}")
    if not os.isatty(sys.stdin.fileno()):
        raise SystemExit("panewalk: stdin is not a terminal")

    options = AppOptions(
        start_directory=path.resolve(),
        choosedir=args.choosedir.absolute() if args.choosedir is not None else None,
        logical=args.logical,
        no_color=args.no_color,
        theme=args.theme,
        show_metadata=not args.no_metadata,
    )
    try:
        configure_logging(args.log_file, args.log_level)
        run_browser(options)
    except (PanewalkError, OSError, termios.error) as exc:
        logger.exception("session failed")
        raise SystemExit(f"panewalk: {exc}") from exc


if __name__ == "__main__":
    main()
