from __future__ import annotations

from typing import cast

from ..core.size_unit import SizeUnit, multiplier_for
from ..core.size_value import SizeValue, format_fixed
from .base import Command


class ConvertCommand(Command):
    action = "convert"

    def __init__(
        self,
        text: str,
        unit: SizeUnit,
        *,
        fractional: bool = False,
        places: int = 1,
    ) -> None:
        self._text = text
        self._unit = unit
        self._fractional = fractional
        self._places = places

    def run(self) -> int:
        value = cast(SizeValue, self._parse_or_exit(self._text))
        if self._fractional:
            print(format_fixed(value.singles, multiplier_for(self._unit), self._places))
        else:
            print(value.to(self._unit))
        return 0
