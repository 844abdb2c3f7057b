from __future__ import annotations

import math
import re

from .errors import SizeParseError
from .size_unit import C1, C2, C3, C4, C5


class SizeParser:
    _integer_pattern = re.compile(r"[+-]?[0-9]+")
    _decimal_pattern = re.compile(
        r"\s*[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?\s*"
    )
    _long_min = -(2**63)
    _long_max = 2**63 - 1
    _scales = {
        "k": C1,
        "m": C2,
        "g": C3,
        "t": C4,
        "p": C5,
    }

    @classmethod
    def parse_bytes(cls, value: str) -> int:
        try:
            # Only a lowercase "b" marks plain bytes.
            if value.endswith("b"):
                return cls._parse_integer(value[:-1])
            scale = cls._scales.get(value[-1:].lower())
            if scale is not None:
                return cls._scale(cls._parse_decimal(value[:-1]), scale)
            return cls._parse_integer(value)
        except ValueError as exc:
            raise SizeParseError(value) from exc

    @classmethod
    def _parse_integer(cls, digits: str) -> int:
        if not cls._integer_pattern.fullmatch(digits):
            raise ValueError(f"invalid integer literal: {digits!r}")
        number = int(digits)
        if not cls._long_min <= number <= cls._long_max:
            raise ValueError(f"integer out of range: {digits!r}")
        return number

    @classmethod
    def _parse_decimal(cls, digits: str) -> float:
        if not cls._decimal_pattern.fullmatch(digits):
            raise ValueError(f"invalid decimal literal: {digits!r}")
        return float(digits)

    @staticmethod
    def _scale(number: float, scale: int) -> int:
        scaled = number * scale
        if not math.isfinite(scaled):
            raise ValueError(f"size out of range: {number!r}")
        return int(scaled)
