"""Area and distance unit conversions."""

from __future__ import annotations

import math
import operator
from collections.abc import Callable, Iterable
from decimal import Decimal
from enum import Enum

_Step = tuple[Callable[[float, float], float], float]

_MUL = operator.mul
_DIV = operator.truediv


class AreaUnit(Enum):
    """Units of area; the value is the unit's display label."""

    ACRES = "Acres"
    SQ_INCHES = "SqInches"
    SQ_KILOMETRES = "SqKilometres"
    SQUARE_METRES = "SquareMetres"
    SQUARE_MILES = "SquareMiles"
    SQUARE_FEET = "SquareFeet"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> AreaUnit:
        """Look up a unit by its command-line name or one of its aliases."""
        try:
            return _AREA_NAMES[text]
        except KeyError:
            choices = ", ".join(sorted(_AREA_NAMES))
            raise ValueError(f"Invalid area unit {text!r}; expected one of: {choices}") from None


class DistanceUnit(Enum):
    """Units of distance; the value is the unit's display label."""

    FEET = "Feet"
    INCHES = "Inches"
    KILOMETRES = "Kilometres"
    METRES = "Metres"
    MILES = "Miles"
    YARDS = "Yards"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> DistanceUnit:
        """Look up a unit by its command-line name or one of its aliases."""
        try:
            return _DISTANCE_NAMES[text]
        except KeyError:
            choices = ", ".join(sorted(_DISTANCE_NAMES))
            raise ValueError(
                f"Invalid distance unit {text!r}; expected one of: {choices}"
            ) from None


_AREA_NAMES: dict[str, AreaUnit] = {
    "acres": AreaUnit.ACRES,
    "a": AreaUnit.ACRES,
    "inches": AreaUnit.SQ_INCHES,
    "i": AreaUnit.SQ_INCHES,
    "in": AreaUnit.SQ_INCHES,
    "km": AreaUnit.SQ_KILOMETRES,
    "sqkm": AreaUnit.SQ_KILOMETRES,
    "metres": AreaUnit.SQUARE_METRES,
    "sqm": AreaUnit.SQUARE_METRES,
    "m": AreaUnit.SQUARE_METRES,
    "miles": AreaUnit.SQUARE_MILES,
    "sqmi": AreaUnit.SQUARE_MILES,
    "mi": AreaUnit.SQUARE_MILES,
    "sqft": AreaUnit.SQUARE_FEET,
    "squarefeet": AreaUnit.SQUARE_FEET,
    "s": AreaUnit.SQUARE_FEET,
}

_DISTANCE_NAMES: dict[str, DistanceUnit] = {
    "feet": DistanceUnit.FEET,
    "ft": DistanceUnit.FEET,
    "f": DistanceUnit.FEET,
    "inches": DistanceUnit.INCHES,
    "i": DistanceUnit.INCHES,
    "in": DistanceUnit.INCHES,
    "kilometres": DistanceUnit.KILOMETRES,
    "km": DistanceUnit.KILOMETRES,
    "metres": DistanceUnit.METRES,
    "m": DistanceUnit.METRES,
    "miles": DistanceUnit.MILES,
    "mi": DistanceUnit.MILES,
    "yards": DistanceUnit.YARDS,
    "y": DistanceUnit.YARDS,
}

_A = AreaUnit
_AREA_TABLE: dict[AreaUnit, dict[AreaUnit, _Step]] = {
    _A.ACRES: {
        _A.SQ_INCHES: (_MUL, 6272640.0),
        _A.SQ_KILOMETRES: (_MUL, 0.004047),
        _A.SQUARE_METRES: (_MUL, 4046.856422),
        _A.SQUARE_MILES: (_DIV, 640.0),
        _A.SQUARE_FEET: (_MUL, 43560.0),
    },
    _A.SQ_INCHES: {
        _A.ACRES: (_DIV, 6272640.0),
        _A.SQ_KILOMETRES: (_MUL, 0.00000000064516),
        _A.SQUARE_METRES: (_MUL, 0.000645),
        _A.SQUARE_MILES: (_MUL, 0.0000000002491),
        _A.SQUARE_FEET: (_DIV, 144.0),
    },
    _A.SQ_KILOMETRES: {
        _A.ACRES: (_MUL, 247.105381),
        _A.SQ_INCHES: (_MUL, 1550003100.0062),
        _A.SQUARE_METRES: (_MUL, 1000000.0),
        _A.SQUARE_MILES: (_MUL, 0.386102),
        _A.SQUARE_FEET: (_MUL, 10763910.41671),
    },
    _A.SQUARE_METRES: {
        _A.ACRES: (_MUL, 0.0002471053814915898),
        _A.SQ_INCHES: (_MUL, 1550.0031000062),
        _A.SQ_KILOMETRES: (_DIV, 1000000.0),
        _A.SQUARE_MILES: (_DIV, 2589988.11),
        _A.SQUARE_FEET: (_MUL, 10.76391),
    },
    _A.SQUARE_MILES: {
        _A.ACRES: (_MUL, 640.0),
        _A.SQ_INCHES: (_MUL, 4014489600.0),
        _A.SQ_KILOMETRES: (_MUL, 2.589988),
        _A.SQUARE_METRES: (_MUL, 2589988.11),
        _A.SQUARE_FEET: (_MUL, 27878400.0),
    },
    _A.SQUARE_FEET: {
        _A.ACRES: (_MUL, 0.0009290304),
        _A.SQ_INCHES: (_MUL, 144.0),
        _A.SQ_KILOMETRES: (_MUL, 0.000000092903),
        _A.SQUARE_METRES: (_MUL, 0.09290304),
        _A.SQUARE_MILES: (_DIV, 27878400.0),
    },
}

_D = DistanceUnit
_DISTANCE_TABLE: dict[DistanceUnit, dict[DistanceUnit, _Step]] = {
    _D.YARDS: {
        _D.INCHES: (_MUL, 36.0),
        _D.KILOMETRES: (_MUL, 0.0009144),
        _D.METRES: (_MUL, 0.9144),
        _D.MILES: (_MUL, 0.0005681818),
        _D.FEET: (_MUL, 3.0),
    },
    _D.INCHES: {
        _D.YARDS: (_DIV, 36.0),
        _D.KILOMETRES: (_MUL, 0.0000254),
        _D.METRES: (_MUL, 0.0254),
        _D.MILES: (_MUL, 0.00001578283),
        _D.FEET: (_DIV, 12.0),
    },
    _D.KILOMETRES: {
        _D.YARDS: (_DIV, 0.0009144),
        _D.INCHES: (_MUL, 39370.1),
        _D.METRES: (_MUL, 1000.0),
        _D.MILES: (_DIV, 1.609344),
        _D.FEET: (_MUL, 3280.84),
    },
    _D.METRES: {
        _D.YARDS: (_DIV, 0.9144),
        _D.INCHES: (_MUL, 39.37007874),
        _D.KILOMETRES: (_DIV, 1000.0),
        _D.MILES: (_DIV, 1609.344),
        _D.FEET: (_MUL, 3.280839895),
    },
    _D.MILES: {
        _D.YARDS: (_MUL, 1760.0),
        _D.INCHES: (_MUL, 63360.0),
        _D.KILOMETRES: (_MUL, 1.609344),
        _D.METRES: (_MUL, 1609.344),
        _D.FEET: (_MUL, 5280.0),
    },
    _D.FEET: {
        _D.YARDS: (_DIV, 3.0),
        _D.INCHES: (_MUL, 12.0),
        _D.KILOMETRES: (_DIV, 3280.84),
        _D.METRES: (_MUL, 0.3048),
        _D.MILES: (_DIV, 5280.0),
    },
}


def _apply(table: dict, from_unit: Enum, to_unit: Enum, value: float) -> float:
    if from_unit is to_unit:
        return value
    op, factor = table[from_unit][to_unit]
    return op(value, factor)


def convert_area(from_unit: AreaUnit, to_unit: AreaUnit, value: float) -> float:
    """Convert an area value between two units."""
    return _apply(_AREA_TABLE, from_unit, to_unit, value)


def convert_distance(from_unit: DistanceUnit, to_unit: DistanceUnit, value: float) -> float:
    """Convert a distance value between two units."""
    return _apply(_DISTANCE_TABLE, from_unit, to_unit, value)


def _format_number(value: float) -> str:
    """Render a float in plain positional notation, without a trailing '.0'."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_conversion(
    from_unit: AreaUnit | DistanceUnit,
    to_unit: AreaUnit | DistanceUnit,
    from_value: float,
    to_value: float,
) -> str:
    """Describe one conversion as '<value> <unit> = <value> <unit>'."""
    return f"{_format_number(from_value)} {from_unit} = {_format_number(to_value)} {to_unit}"


def perform_conversion(
    from_unit: AreaUnit | DistanceUnit,
    value: float,
    to_units: Iterable[AreaUnit | DistanceUnit],
) -> list[str]:
    """Convert a value into every target unit, returning one line per target."""
    if isinstance(from_unit, AreaUnit):
        converter, kind = convert_area, AreaUnit
    elif isinstance(from_unit, DistanceUnit):
        converter, kind = convert_distance, DistanceUnit
    else:
        raise TypeError(f"Unsupported unit: {from_unit!r}")

    lines = []
    for unit in to_units:
        if not isinstance(unit, kind):
            raise TypeError(f"Cannot convert {from_unit} to {unit!r}")
        lines.append(format_conversion(from_unit, unit, value, converter(from_unit, unit, value)))
    return lines