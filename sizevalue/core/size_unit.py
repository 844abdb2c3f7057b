from __future__ import annotations

from enum import Enum


C1 = 1024
C2 = C1 * C1
C3 = C2 * C1
C4 = C3 * C1
C5 = C4 * C1


class SizeUnit(Enum):
    SINGLE = ""
    KILO = "k"
    MEGA = "m"
    GIGA = "g"
    TERA = "t"
    PETA = "p"


_MULTIPLIERS = {
    SizeUnit.SINGLE: 1,
    SizeUnit.KILO: C1,
    SizeUnit.MEGA: C2,
    SizeUnit.GIGA: C3,
    SizeUnit.TERA: C4,
    SizeUnit.PETA: C5,
}


def multiplier_for(unit: SizeUnit) -> int:
    return _MULTIPLIERS[unit]


def convert(size: int, source: SizeUnit, target: SizeUnit) -> int:
    return (size * multiplier_for(source)) // multiplier_for(target)


def unit_for_suffix(suffix: str) -> SizeUnit:
    # Same rule as SizeParser: only a lowercase "b" means bytes.
    if suffix == "b":
        return SizeUnit.SINGLE
    try:
        return SizeUnit(suffix.lower())
    except ValueError:
        raise ValueError(f"Unknown size suffix: {suffix}") from None
