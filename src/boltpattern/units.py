"""Unit metadata and display conversion.

The analysis is unit-agnostic: inputs are numbers in one consistent unit
system, recorded by a `Units` instance that travels with the results.
Conversion happens only at the presentation boundary.
"""

from __future__ import annotations

from dataclasses import dataclass

from .common.errors import InvalidArgumentError

# Factors to the base units (mm, N)
LENGTH_FACTORS: dict[str, float] = {
    "mm": 1.0,
    "cm": 10.0,
    "m": 1000.0,
    "inch": 25.4,
    "in": 25.4,
    "ft": 304.8,
}

FORCE_FACTORS: dict[str, float] = {
    "N": 1.0,
    "kN": 1000.0,
    "lbf": 4.4482216152605,
    "kip": 4448.2216152605,
}


def _factor(table: dict[str, float], unit: str, kind: str) -> float:
    try:
        return table[unit]
    except KeyError:
        choices = ", ".join(table)
        raise InvalidArgumentError(f"Unknown {kind} unit {unit!r} (expected one of: {choices})") from None


def convert_length(value: float, from_unit: str, to_unit: str) -> float:
    return value * _factor(LENGTH_FACTORS, from_unit, "length") / _factor(LENGTH_FACTORS, to_unit, "length")


def convert_force(value: float, from_unit: str, to_unit: str) -> float:
    return value * _factor(FORCE_FACTORS, from_unit, "force") / _factor(FORCE_FACTORS, to_unit, "force")


def convert_area(value: float, from_unit: str, to_unit: str) -> float:
    """Convert an area given the *length* units it is expressed in (mm -> mm², ...)."""
    ratio = _factor(LENGTH_FACTORS, from_unit, "length") / _factor(LENGTH_FACTORS, to_unit, "length")
    return value * ratio**2


def convert_moment(value: float, from_units: "Units", to_units: "Units") -> float:
    value = convert_force(value, from_units.force, to_units.force)
    return convert_length(value, from_units.length, to_units.length)


@dataclass(frozen=True)
class Units:
    """Length and force units of a consistent unit system (moments are force·length)."""

    length: str = "mm"
    force: str = "N"

    def __post_init__(self) -> None:
        _factor(LENGTH_FACTORS, self.length, "length")
        _factor(FORCE_FACTORS, self.force, "force")

    @property
    def moment(self) -> str:
        return f"{self.force}·{self.length}"

    @property
    def area(self) -> str:
        return f"{self.length}²"


@dataclass(frozen=True)
class Quantity:
    """A magnitude paired with its unit."""

    magnitude: float
    unit: str

    def to(self, unit: str) -> "Quantity":
        if self.unit in LENGTH_FACTORS:
            return Quantity(convert_length(self.magnitude, self.unit, unit), unit)
        if self.unit in FORCE_FACTORS:
            return Quantity(convert_force(self.magnitude, self.unit, unit), unit)
        raise InvalidArgumentError(f"Cannot convert quantity in {self.unit!r}")

    def __float__(self) -> float:
        return float(self.magnitude)

    def __str__(self) -> str:
        return f"{self.magnitude:.1f} {self.unit}"


DEFAULT_UNITS = Units()

__all__ = [
    "DEFAULT_UNITS",
    "FORCE_FACTORS",
    "LENGTH_FACTORS",
    "Quantity",
    "Units",
    "convert_area",
    "convert_force",
    "convert_length",
    "convert_moment",
]
