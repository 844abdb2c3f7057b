from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext

from .size_parser import SizeParser
from .size_unit import C1, C2, C3, C4, C5, SizeUnit, convert, multiplier_for


@dataclass(frozen=True)
class SizeValue:
    # eq and hash cover the stored (size, unit) pair, not the byte count.
    size: int
    unit: SizeUnit = SizeUnit.SINGLE

    def __post_init__(self) -> None:
        if isinstance(self.size, bool) or not isinstance(self.size, int):
            raise TypeError(f"size in SizeValue must be an int, not {type(self.size).__name__}")
        if self.size < 0:
            raise ValueError("size in SizeValue may not be negative")

    @property
    def singles(self) -> int:
        return convert(self.size, self.unit, SizeUnit.SINGLE)

    @property
    def kilo(self) -> int:
        return convert(self.size, self.unit, SizeUnit.KILO)

    @property
    def mega(self) -> int:
        return convert(self.size, self.unit, SizeUnit.MEGA)

    @property
    def giga(self) -> int:
        return convert(self.size, self.unit, SizeUnit.GIGA)

    @property
    def tera(self) -> int:
        return convert(self.size, self.unit, SizeUnit.TERA)

    @property
    def peta(self) -> int:
        return convert(self.size, self.unit, SizeUnit.PETA)

    @property
    def kilo_frac(self) -> float:
        return self.singles / C1

    @property
    def mega_frac(self) -> float:
        return self.singles / C2

    @property
    def giga_frac(self) -> float:
        return self.singles / C3

    @property
    def tera_frac(self) -> float:
        return self.singles / C4

    @property
    def peta_frac(self) -> float:
        return self.singles / C5

    def to(self, unit: SizeUnit) -> int:
        return convert(self.size, self.unit, unit)

    def to_frac(self, unit: SizeUnit) -> float:
        return self.singles / multiplier_for(unit)

    def __str__(self) -> str:
        singles = self.singles
        divisor, suffix = 1, ""
        if singles >= C5:
            divisor, suffix = C5, "p"
        elif singles >= C4:
            divisor, suffix = C4, "t"
        elif singles >= C3:
            divisor, suffix = C3, "g"
        elif singles >= C2:
            divisor, suffix = C2, "m"
        elif singles >= C1:
            divisor, suffix = C1, "k"
        return f"{format_fixed(singles, divisor)}{suffix}"

    @classmethod
    def parse(cls, text: str | None, default: SizeValue | None = None) -> SizeValue | None:
        if text is None:
            return default
        return cls(SizeParser.parse_bytes(text), SizeUnit.SINGLE)


def parse_size_value(text: str | None, default: SizeValue | None = None) -> SizeValue | None:
    return SizeValue.parse(text, default)


def format_fixed(singles: int, divisor: int, places: int = 1) -> str:
    with localcontext() as ctx:
        ctx.prec = singles.bit_length() // 3 + places + 64
        try:
            # Half-up on the shortest float repr, so 1.25 renders as "1.3".
            value = Decimal(repr(singles / divisor))
        except OverflowError:
            value = Decimal(singles) / Decimal(divisor)
        rounded = value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
    return f"{rounded:f}"
