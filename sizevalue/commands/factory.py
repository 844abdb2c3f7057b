from __future__ import annotations

import argparse
from pathlib import Path

from ..core.config_loader import ConfigLoader
from ..core.size_unit import unit_for_suffix
from .base import Command
from .config_report_command import ConfigReportCommand
from .convert_command import ConvertCommand
from .format_command import FormatCommand
from .parse_command import ParseCommand


class CommandFactory:
    def __init__(
        self,
        project_root: Path,
        *,
        config_loader: ConfigLoader | None = None,
    ) -> None:
        self._config_loader = config_loader or ConfigLoader(project_root)

    def create(self, args: argparse.Namespace) -> Command:
        action = args.action

        if action == ParseCommand.action:
            return ParseCommand(args.text, args.default)
        if action == FormatCommand.action:
            return FormatCommand(args.size, unit_for_suffix(args.unit))
        if action == ConvertCommand.action:
            return ConvertCommand(
                args.text,
                unit_for_suffix(args.to),
                fractional=args.frac,
                places=args.places,
            )
        if action == ConfigReportCommand.action:
            return ConfigReportCommand(self._config_loader.load(args.env_file))
        raise SystemExit(f"Unsupported action: {action}")
