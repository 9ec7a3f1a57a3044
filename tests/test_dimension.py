import pytest

from math_units.geometry import Point2D
from math_units.units import (
    Cubed,
    Dimension,
    Joules,
    Meters,
    MetersPerSecond,
    Newtons,
    Product,
    Rate,
    Seconds,
    Squared,
    Unitless,
    dimension_of,
)


def test_dimension_from_string_simple():
    d = Dimension.from_string("m")
    assert d.exponents == {"m": 1}
    assert str(d) == "m"


def test_dimension_from_string_power():
    d = Dimension.from_string("s^-2")
    assert d.exponents == {"s": -2}
    assert str(d) == "s^-2"


def test_dimension_from_string_multiplication():
    d = Dimension.from_string("kg.m^2.s^-2")
    assert d.exponents == {"kg": 1, "m": 2, "s": -2}
    assert str(d) == "kg.m^2.s^-2"


def test_dimensionless():
    d = Dimension.from_string("1")
    assert d.is_dimensionless
    assert str(d) == "1"


def test_dimension_equality():
    d1 = Dimension.from_string("kg.m^2.s^-2")
    d2 = Dimension.from_string("m^2.kg.s^-2")
    d3 = Dimension.from_string("kg.m^2")
    assert d1 == d2
    assert hash(d1) == hash(d2)
    assert d1 != d3


def test_dimension_arithmetic():
    m = Dimension.from_string("m")
    s = Dimension.from_string("s")
    assert m / s == Dimension.from_string("m.s^-1")
    assert (m / s) ** 2 == Dimension.from_string("m^2.s^-2")
    assert (m / s) * s == m
    assert (m / m).exponents == {}


@pytest.mark.parametrize("text", ["m//s", "", "m^x", "2m"])
def test_dimension_invalid_string(text):
    with pytest.raises(ValueError):
        Dimension.from_string(text)


def test_dimension_repr():
    assert repr(Dimension.from_string("m")) == "Dimension({'m': 1})"


@pytest.mark.parametrize(
    "tag, expected",
    [
        (Meters, "m"),
        (Unitless, "1"),
        (MetersPerSecond, "m.s^-1"),
        (Squared[Meters], "m^2"),
        (Cubed[Meters], "m^3"),
        (Newtons, "kg.m.s^-2"),
        (Joules, "kg.m^2.s^-2"),
        (Rate[Product[Meters, Seconds], Seconds], "m"),
    ],
)
def test_dimension_of(tag, expected):
    assert str(dimension_of(tag)) == expected


def test_dimension_of_rejects_other_types():
    with pytest.raises(ValueError):
        dimension_of(int)
    with pytest.raises(ValueError):
        dimension_of(Point2D)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Quantity[Meters]", "m"),
        ("Quantity[Rate[Meters, Seconds]]", "m.s^-1"),
        ("math_units.quantity.Quantity[math_units.units.core.Kilograms]", "kg"),
        ("Interval[Product[Meters, Meters]]", "m^2"),
        ("Point2D[Meters, WorldCoordinates]", "m"),
        ("Frame2D[Meters, Global, Local[Thing]]", "m"),
        ("Quantity[Unitless]", "1"),
    ],
)
def test_dimension_from_type_expression(text, expected):
    assert str(Dimension.from_type_expression(text)) == expected


@pytest.mark.parametrize(
    "text",
    ["float", "Quantity[Any]", "Quantity[Meters", "Rate[Meters]", "list[Meters]", ""],
)
def test_dimension_from_type_expression_invalid(text):
    with pytest.raises(ValueError):
        Dimension.from_type_expression(text)
