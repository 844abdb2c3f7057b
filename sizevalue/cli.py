#!/usr/bin/env python3

from __future__ import annotations

import argparse
from pathlib import Path

from .commands.factory import CommandFactory

UNIT_SUFFIXES = ["b", "k", "m", "g", "t", "p"]


class CliApplication:
    def __init__(self, project_root: Path) -> None:
        self._factory = CommandFactory(project_root)

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog="sizevalue",
            description="Parse, format and convert 1024-based sizes",
        )
        subparsers = parser.add_subparsers(dest="action", required=True)

        parse_parser = subparsers.add_parser(
            "parse",
            help="Parse a size such as 512k or 2.5g.",
        )
        parse_parser.add_argument("text", nargs="?", default=None)
        parse_parser.add_argument(
            "--default",
            default=None,
            help="Size to use when no text is given",
        )

        format_parser = subparsers.add_parser(
            "format",
            help="Format a size in its largest fitting unit.",
        )
        format_parser.add_argument("size", type=int)
        format_parser.add_argument("--unit", choices=UNIT_SUFFIXES, default="b")

        convert_parser = subparsers.add_parser(
            "convert",
            help="Convert a size to another unit.",
        )
        convert_parser.add_argument("text")
        convert_parser.add_argument("--to", choices=UNIT_SUFFIXES, required=True)
        convert_parser.add_argument(
            "--frac",
            action="store_true",
            help="Print the fractional value instead of truncating",
        )
        convert_parser.add_argument(
            "--places",
            type=int,
            default=1,
            help="Digits after the decimal point with --frac (default: 1)",
        )

        config_parser = subparsers.add_parser(
            "config",
            help="Show the sizes configured in an env file.",
        )
        config_parser.add_argument(
            "env_file",
            nargs="?",
            default=None,
            help="Optional path to env file (default: ./config/sizes.env)",
        )
        return parser

    def run(self, argv: list[str] | None = None) -> int:
        args = self.build_parser().parse_args(argv)
        command = self._factory.create(args)
        return command.run()


def main() -> int:
    project_root = Path.cwd()
    app = CliApplication(project_root)
    return app.run()


if __name__ == "__main__":
    raise SystemExit(main())
