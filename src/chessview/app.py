"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from chessview.ui.i18n import LANGUAGES
from chessview.ui.settings import AppSettings
from chessview.ui.styles.theme import THEME_NAMES

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chessview", description="Interactive chessboard viewer"
    )
    parser.add_argument("--language", choices=LANGUAGES, default="English")
    parser.add_argument(
        "--theme", choices=THEME_NAMES, default="Classic", help="Board colours"
    )
    parser.add_argument(
        "--no-flipping",
        action="store_true",
        help="Always show White at the bottom",
    )
    parser.add_argument(
        "--no-coordinates", action="store_true", help="Hide rank/file labels"
    )
    parser.add_argument(
        "--ask-promotion",
        action="store_true",
        help="Ask for a promotion piece instead of ignoring promotion moves",
    )
    parser.add_argument("--log-level", choices=_LOG_LEVELS, default="WARNING")
    return parser


def settings_from_args(args: argparse.Namespace) -> AppSettings:
    """Translate parsed command-line flags into :class:`AppSettings`."""
    return AppSettings(
        language=args.language,
        board_theme=args.theme,
        show_coordinates=not args.no_coordinates,
        board_flipping=not args.no_flipping,
        ask_promotion=args.ask_promotion,
    )


def main(argv: list[str] | None = None) -> None:
    """Launch the Chessview application."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    from chessview.ui.bootstrap import run_application

    sys.exit(run_application(settings=settings_from_args(args)))


if __name__ == "__main__":
    main()
