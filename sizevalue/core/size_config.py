from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .size_value import SizeValue


@dataclass
class SizeConfig:
    env_file: Path
    sizes: dict[str, SizeValue] = field(default_factory=dict)

    def get(self, key: str, default: SizeValue | None = None) -> SizeValue | None:
        return self.sizes.get(key, default)
