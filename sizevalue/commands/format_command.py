from __future__ import annotations

from ..core.size_unit import SizeUnit
from ..core.size_value import SizeValue
from .base import Command


class FormatCommand(Command):
    action = "format"

    def __init__(self, size: int, unit: SizeUnit = SizeUnit.SINGLE) -> None:
        self._size = size
        self._unit = unit

    def run(self) -> int:
        try:
            value = SizeValue(self._size, self._unit)
        except ValueError as exc:
            raise SystemExit(str(exc)) from exc

        print(value)
        return 0
