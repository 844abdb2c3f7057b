from __future__ import annotations

import pytest

from sizevalue.core.size_unit import (
    C1,
    C2,
    C3,
    C4,
    C5,
    SizeUnit,
    convert,
    multiplier_for,
    unit_for_suffix,
)


def test_constants_are_powers_of_1024() -> None:
    assert [C1, C2, C3, C4, C5] == [1024**n for n in range(1, 6)]


@pytest.mark.parametrize(
    ("unit", "expected"),
    [
        (SizeUnit.SINGLE, 1),
        (SizeUnit.KILO, C1),
        (SizeUnit.MEGA, C2),
        (SizeUnit.GIGA, C3),
        (SizeUnit.TERA, C4),
        (SizeUnit.PETA, C5),
    ],
)
def test_multiplier_for(unit: SizeUnit, expected: int) -> None:
    assert multiplier_for(unit) == expected


def test_units_keep_declaration_order() -> None:
    multipliers = [multiplier_for(unit) for unit in SizeUnit]

    assert multipliers == sorted(multipliers)


@pytest.mark.parametrize(
    ("size", "source", "target", "expected"),
    [
        (1, SizeUnit.PETA, SizeUnit.SINGLE, C5),
        (3, SizeUnit.GIGA, SizeUnit.MEGA, 3 * 1024),
        (3, SizeUnit.KILO, SizeUnit.MEGA, 0),
        (2047, SizeUnit.SINGLE, SizeUnit.KILO, 1),
        (5, SizeUnit.TERA, SizeUnit.TERA, 5),
        (0, SizeUnit.KILO, SizeUnit.SINGLE, 0),
    ],
)
def test_convert_truncates(
    size: int,
    source: SizeUnit,
    target: SizeUnit,
    expected: int,
) -> None:
    assert convert(size, source, target) == expected


@pytest.mark.parametrize(
    ("suffix", "expected"),
    [
        ("", SizeUnit.SINGLE),
        ("b", SizeUnit.SINGLE),
        ("k", SizeUnit.KILO),
        ("M", SizeUnit.MEGA),
        ("g", SizeUnit.GIGA),
        ("T", SizeUnit.TERA),
        ("p", SizeUnit.PETA),
    ],
)
def test_unit_for_suffix(suffix: str, expected: SizeUnit) -> None:
    assert unit_for_suffix(suffix) is expected


@pytest.mark.parametrize("suffix", ["x", "B", "kb"])
def test_unit_for_suffix_rejects_unknown(suffix: str) -> None:
    with pytest.raises(ValueError, match=f"Unknown size suffix: {suffix}"):
        unit_for_suffix(suffix)
