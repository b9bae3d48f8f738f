"""Command-line front door for millerview.

Parses CLI options, loads and decodes the document before the terminal is
touched, then dispatches into the interactive runtime. Input errors are
reported on the ordinary console with exit status 2; failures during the
session are reported after the terminal has been restored, with status 1.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import load_style_name, load_theme_name
from .document import load_document
from .errors import DocumentError, MillerviewError
from .logs import configure_logging
from .runtime import run_viewer
from .ui_theme import available_theme_names

logger = logging.getLogger(__name__)

PROG = "millerview"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Browse a JSON document in a three-column terminal view (j/k/l/h to move, q to quit).",
    )
    parser.add_argument("path", help="Path to the JSON document.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--nopager",
        action="store_true",
        help="Print the document instead of browsing it interactively.",
    )
    parser.add_argument("--style", default=None, help="Pygments style name for --nopager output.")
    parser.add_argument("--log-file", type=Path, default=None, help="Write diagnostic logs to this file.")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Log level used with --log-file.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse arguments, load the document, and run the browser."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_file, args.log_level)

    path = Path(args.path)
    try:
        document = load_document(path)
    except DocumentError as exc:
        logger.error("cannot load document: %s", exc)
        sys.stderr.write(f"{PROG}: error: {exc}\n")
        raise SystemExit(2) from exc

    theme_name = args.theme if args.theme is not None else load_theme_name()
    style = args.style if args.style is not None else load_style_name()
    try:
        run_viewer(
            document,
            path,
            theme_name=theme_name,
            no_color=args.no_color,
            nopager=args.nopager,
            style=style,
        )
    except (MillerviewError, OSError, EOFError) as exc:
        logger.exception("session failed")
        sys.stderr.write(f"{PROG}: error: {exc}\n")
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
