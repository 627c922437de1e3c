"""Command-line front door for vimbo.

Parses CLI options, enables opt-in logging, then dispatches into the
interactive runtime (or plain listing when not attached to a terminal).
"""

from __future__ import annotations

import argparse
import logging
import termios

from . import __version__
from .runtime import run_app
from .runtime.logs import configure_logging
from .ui_theme import available_theme_names

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vimbo",
        description="Terminal Vim cheatsheet and helper.",
    )
    parser.add_argument(
        "-q",
        "--query",
        default=None,
        help="Optional initial search query (e.g. 'copy', 'paste', 'delete').",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--style", default=None, help="Pygments style name for the command column.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print matching entries as tab-separated lines and exit.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch vimbo.

    Terminal setup or write failures end the process with a one-line message
    and non-zero status; the terminal has already been restored by then.
    """
    args = build_parser().parse_args(argv)
    configure_logging()

    try:
        run_app(
            args.query,
            theme=args.theme,
            style=args.style,
            no_color=args.no_color,
            list_only=args.list,
        )
    except (termios.error, OSError) as exc:
        logger.exception("vimbo terminated by terminal error")
        raise SystemExit(f"vimbo: terminal error: {exc}") from exc


if __name__ == "__main__":
    main()
