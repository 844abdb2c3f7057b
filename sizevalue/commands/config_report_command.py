from __future__ import annotations

from ..core.size_config import SizeConfig
from .base import Command


class ConfigReportCommand(Command):
    action = "config"

    def __init__(self, config: SizeConfig) -> None:
        self._config = config

    def run(self) -> int:
        lines: list[str] = [f"Sizes from {self._config.env_file}"]
        if self._config.sizes:
            lines.extend(
                f"{key}={value.singles} ({value})"
                for key, value in sorted(self._config.sizes.items())
            )
        else:
            lines.append("(none)")

        print("\n".join(lines))
        return 0
