"""Application entry point."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from unionchess.ui.settings import AppSettings


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="unionchess", description=__doc__)
    parser.add_argument(
        "position",
        nargs="?",
        type=Path,
        help="file with a position in board notation to open",
    )
    parser.add_argument("--theme", default="Classic", help="board colour scheme")
    parser.add_argument("--no-coordinates", action="store_true")
    parser.add_argument("--log-level", default="WARNING")
    return parser


def settings_from_args(argv: list[str]) -> AppSettings:
    """Build :class:`AppSettings` from command-line arguments."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    settings = AppSettings(
        log_level=args.log_level,
        board_theme=args.theme,
        show_coordinates=not args.no_coordinates,
    )
    if args.position is not None:
        try:
            settings.start_position = args.position.read_text(encoding="utf-8")
        except OSError as exc:
            parser.error(f"cannot read {args.position}: {exc.strerror or exc}")
    return settings


def main() -> None:
    """Launch the editor."""
    from unionchess.ui.bootstrap import run_application

    settings = settings_from_args(sys.argv[1:])
    sys.exit(run_application(sys.argv[:1], settings))


if __name__ == "__main__":
    main()
