import sys

import pytest

from lifestuff.units import (
    AreaUnit,
    DistanceUnit,
    convert_area,
    convert_distance,
    format_conversion,
    perform_conversion,
)

EPS = sys.float_info.epsilon


def test_area_conversion_acres_to_square_metres():
    result = convert_area(AreaUnit.ACRES, AreaUnit.SQUARE_METRES, 1.0)
    assert abs(result - 4046.856422) < EPS


def test_area_conversion_square_metres_to_acres():
    result = convert_area(AreaUnit.SQUARE_METRES, AreaUnit.ACRES, 4046.856422)
    assert abs(result - 1.0) < EPS


def test_area_conversion_square_kilometres_to_square_metres():
    result = convert_area(AreaUnit.SQ_KILOMETRES, AreaUnit.SQUARE_METRES, 1.0)
    assert abs(result - 1000000.0) < EPS


def test_area_conversion_square_metres_to_square_kilometres():
    result = convert_area(AreaUnit.SQUARE_METRES, AreaUnit.SQ_KILOMETRES, 1000000.0)
    assert abs(result - 1.0) < EPS


def test_area_conversion_square_feet_to_square_inches():
    result = convert_area(AreaUnit.SQUARE_FEET, AreaUnit.SQ_INCHES, 1.0)
    assert abs(result - 144.0) < EPS


def test_area_conversion_square_inches_to_square_feet():
    result = convert_area(AreaUnit.SQ_INCHES, AreaUnit.SQUARE_FEET, 144.0)
    assert abs(result - 1.0) < EPS


@pytest.mark.parametrize("unit", list(AreaUnit))
def test_area_identity(unit):
    assert convert_area(unit, unit, 12.5) == 12.5


@pytest.mark.parametrize("unit", list(DistanceUnit))
def test_distance_identity(unit):
    assert convert_distance(unit, unit, 7.25) == 7.25


@pytest.mark.parametrize(
    "from_unit,to_unit,value,expected",
    [
        (DistanceUnit.MILES, DistanceUnit.YARDS, 1.0, 1760.0),
        (DistanceUnit.MILES, DistanceUnit.FEET, 1.0, 5280.0),
        (DistanceUnit.FEET, DistanceUnit.INCHES, 2.0, 24.0),
        (DistanceUnit.INCHES, DistanceUnit.FEET, 24.0, 2.0),
        (DistanceUnit.KILOMETRES, DistanceUnit.METRES, 3.0, 3000.0),
        (DistanceUnit.YARDS, DistanceUnit.FEET, 2.0, 6.0),
    ],
)
def test_distance_conversions(from_unit, to_unit, value, expected):
    assert convert_distance(from_unit, to_unit, value) == pytest.approx(expected)


@pytest.mark.parametrize(
    "text,unit",
    [
        ("a", AreaUnit.ACRES),
        ("acres", AreaUnit.ACRES),
        ("in", AreaUnit.SQ_INCHES),
        ("sqkm", AreaUnit.SQ_KILOMETRES),
        ("m", AreaUnit.SQUARE_METRES),
        ("mi", AreaUnit.SQUARE_MILES),
        ("sqft", AreaUnit.SQUARE_FEET),
        ("s", AreaUnit.SQUARE_FEET),
    ],
)
def test_area_parse(text, unit):
    assert AreaUnit.parse(text) is unit


@pytest.mark.parametrize(
    "text,unit",
    [
        ("ft", DistanceUnit.FEET),
        ("f", DistanceUnit.FEET),
        ("in", DistanceUnit.INCHES),
        ("km", DistanceUnit.KILOMETRES),
        ("m", DistanceUnit.METRES),
        ("mi", DistanceUnit.MILES),
        ("y", DistanceUnit.YARDS),
        ("yards", DistanceUnit.YARDS),
    ],
)
def test_distance_parse(text, unit):
    assert DistanceUnit.parse(text) is unit


def test_parse_unknown_unit_raises():
    with pytest.raises(ValueError):
        AreaUnit.parse("hectares")
    with pytest.raises(ValueError):
        DistanceUnit.parse("furlongs")


def test_format_conversion_drops_trailing_zero():
    line = format_conversion(AreaUnit.ACRES, AreaUnit.SQUARE_METRES, 1.0, 4046.856422)
    assert line == "1 Acres = 4046.856422 SquareMetres"


def test_format_conversion_small_value_positional():
    line = format_conversion(AreaUnit.SQ_INCHES, AreaUnit.SQ_KILOMETRES, 1.0, 6.4516e-10)
    assert line == "1 SqInches = 0.00000000064516 SqKilometres"


def test_perform_conversion_lines_in_order():
    lines = perform_conversion(
        DistanceUnit.MILES, 2.0, [DistanceUnit.YARDS, DistanceUnit.FEET]
    )
    assert lines == ["2 Miles = 3520 Yards", "2 Miles = 10560 Feet"]


def test_perform_conversion_area():
    lines = perform_conversion(AreaUnit.SQUARE_FEET, 1.5, [AreaUnit.SQ_INCHES])
    assert lines == ["1.5 SquareFeet = 216 SqInches"]


def test_perform_conversion_mixed_units_raises():
    with pytest.raises(TypeError):
        perform_conversion(AreaUnit.ACRES, 1.0, [DistanceUnit.FEET])