from __future__ import annotations

import os
from pathlib import Path
from typing import cast

from .size_config import SizeConfig
from .size_value import SizeValue


class ConfigLoader:
    def __init__(self, project_root: Path) -> None:
        self._project_root = project_root

    @property
    def default_env_file(self) -> Path:
        return self._project_root / "config" / "sizes.env"

    @property
    def example_env_file(self) -> Path:
        return self._project_root / "config" / "sizes.env.example"

    def load(self, env_path: str | None = None) -> SizeConfig:
        env_file = Path(env_path).expanduser() if env_path else self.default_env_file
        if not env_file.is_file():
            message = f"Missing env file: {env_file}"
            if self.example_env_file.is_file():
                message += f"\nCreate it from: {self.example_env_file}"
            raise SystemExit(message)

        env_values = self._parse_env_file(env_file)
        sizes = {
            key: self._parse_size(key, value)
            for key, value in env_values.items()
        }
        return SizeConfig(env_file=env_file, sizes=sizes)

    def _parse_env_file(self, env_file: Path) -> dict[str, str]:
        values: dict[str, str] = {}
        for raw_line in env_file.read_text(encoding="utf-8").splitlines():
            line = raw_line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" not in line:
                continue
            key, value = line.split("=", 1)
            cleaned = value.strip().strip('"').strip("'")
            values[key.strip()] = os.path.expandvars(cleaned)
        return values

    def _parse_size(self, key: str, value: str) -> SizeValue:
        try:
            parsed = SizeValue.parse(value)
        except ValueError as exc:
            raise SystemExit(f"Invalid size value for {key}: {value}") from exc
        return cast(SizeValue, parsed)
