import math
import random

import pytest

from math_units import interval, quantity
from math_units.catalog import angle, length
from math_units.interval import Interval


def meters(low, high):
    return Interval(length.meters(low), length.meters(high))


def unitless(low, high):
    return Interval(quantity.unitless(low), quantity.unitless(high))


def test_endpoints_are_sorted():
    first = meters(3, 1)
    assert first.min_value == length.meters(1)
    assert first.max_value == length.meters(3)
    assert first == meters(1, 3)
    assert hash(first) == hash(meters(1, 3))
    assert interval.from_endpoints((length.meters(3), length.meters(1))) == first


def test_repr():
    assert repr(meters(2.0, 1.0)) == "Interval(1.0, 2.0)"


def test_singleton():
    single = interval.singleton(length.meters(2))
    assert interval.is_singleton(single)
    assert interval.width(single) == length.meters(0)
    assert not interval.is_singleton(meters(1, 2))


def test_accessors():
    span = meters(1, 5)
    assert interval.midpoint(span) == length.meters(3)
    assert interval.width(span) == length.meters(4)
    assert interval.endpoints(span) == (length.meters(1), length.meters(5))
    assert interval.unit() == unitless(0, 1)


def test_union_is_the_hull():
    assert interval.union(meters(1, 2), meters(4, 5)) == meters(1, 5)
    assert interval.union(meters(1, 3), meters(2, 5)) == meters(1, 5)


def test_intersection():
    assert interval.intersection(meters(1, 3), meters(2, 5)) == meters(2, 3)
    assert interval.intersection(meters(1, 2), meters(2, 5)) == interval.singleton(
        length.meters(2)
    )
    assert interval.intersection(meters(1, 2), meters(3, 5)) is None


@pytest.mark.parametrize(
    "first, second",
    [
        ((1, 3), (2, 5)),
        ((1, 2), (2, 5)),
        ((1, 2), (3, 5)),
        ((0, 10), (4, 5)),
        ((-2, -1), (1, 2)),
    ],
)
def test_intersects_agrees_with_intersection(first, second):
    a, b = meters(*first), meters(*second)
    assert interval.intersects(a, b) == (interval.intersection(a, b) is not None)


def test_containment():
    span = meters(1, 3)
    assert interval.contains(length.meters(2), span)
    assert interval.contains(length.meters(3), span)
    assert not interval.contains(length.meters(3.5), span)
    assert length.meters(1) in span
    assert interval.is_contained_in(span, meters(1.5, 2))
    assert not interval.is_contained_in(span, meters(0, 2))


def test_shifting_and_scaling():
    span = meters(1, 3)
    assert interval.negate(span) == meters(-3, -1)
    assert interval.plus(length.meters(2), span) == meters(3, 5)
    assert interval.minus(length.meters(2), span) == meters(-1, 1)
    assert interval.difference(length.meters(10), span) == meters(7, 9)
    assert interval.multiply_by(-2, span) == meters(-6, -2)
    assert interval.divide_by(2, span) == meters(0.5, 1.5)
    assert interval.divide_by(0, span) == meters(-math.inf, math.inf)
    assert interval.half(span) == meters(0.5, 1.5)
    assert interval.twice(span) == meters(2, 6)


def test_interval_sums_and_differences():
    assert interval.plus_interval(meters(1, 2), meters(10, 20)) == meters(11, 22)
    assert interval.minus_interval(meters(1, 2), meters(10, 20)) == meters(8, 19)


def test_products():
    span = meters(-1, 2)
    assert interval.product(length.meters(3), span).endpoints() == (
        quantity.create(-3),
        quantity.create(6),
    )
    assert interval.times_interval(meters(-2, 3), span).endpoints() == (
        quantity.create(-4),
        quantity.create(6),
    )
    assert interval.times_unitless_interval(unitless(2, 3), span) == meters(-3, 6)
    assert interval.times_unitless(quantity.unitless(2), unitless(1, 2)) == unitless(2, 4)


@pytest.mark.parametrize(
    "bounds, expected",
    [
        ((2, 4), (0.25, 0.5)),
        ((-4, -2), (-0.5, -0.25)),
        ((-1, 1), (-math.inf, math.inf)),
        ((0, 2), (0.5, math.inf)),
        ((-2, 0), (-math.inf, -0.5)),
    ],
)
def test_reciprocal(bounds, expected):
    assert interval.reciprocal(unitless(*bounds)) == unitless(*expected)


def test_reciprocal_of_zero_is_nan():
    low, high = interval.reciprocal(unitless(0, 0)).endpoints()
    assert quantity.is_nan(low)
    assert quantity.is_nan(high)


def test_abs():
    assert interval.abs(meters(1, 2)) == meters(1, 2)
    assert interval.abs(meters(-3, -1)) == meters(1, 3)
    assert interval.abs(meters(-3, 2)) == meters(0, 3)


@pytest.mark.parametrize(
    "bounds, expected",
    [((1, 2), (1, 4)), ((-3, -1), (1, 9)), ((-1, 3), (0, 9)), ((-3, 1), (0, 9))],
)
def test_squared(bounds, expected):
    assert interval.squared_unitless(unitless(*bounds)) == unitless(*expected)


def test_squared_and_cubed_units():
    assert interval.squared(meters(-1, 3)).endpoints() == (
        quantity.create(0),
        quantity.create(9),
    )
    assert interval.cubed(meters(-1, 2)).endpoints() == (
        quantity.create(-1),
        quantity.create(8),
    )
    assert interval.cubed_unitless(unitless(-2, 1)) == unitless(-8, 1)


def degrees(low, high):
    return Interval(angle.degrees(low), angle.degrees(high))


@pytest.mark.parametrize(
    "bounds, expected",
    [
        ((0, 90), (0, 1)),
        ((45, 135), (math.sqrt(2) / 2, 1)),
        ((180, 360), (-1, 0)),
        ((0, 360), (-1, 1)),
        ((30, 30), (0.5, 0.5)),
    ],
)
def test_sin_bounds(bounds, expected):
    low, high = interval.sin(degrees(*bounds)).endpoints()
    assert low.unwrap() == pytest.approx(expected[0], abs=1e-12)
    assert high.unwrap() == pytest.approx(expected[1], abs=1e-12)


@pytest.mark.parametrize(
    "bounds, expected",
    [
        ((0, 90), (0, 1)),
        ((90, 270), (-1, 0)),
        ((-45, 45), (math.sqrt(2) / 2, 1)),
        ((60, 60), (0.5, 0.5)),
    ],
)
def test_cos_bounds(bounds, expected):
    low, high = interval.cos(degrees(*bounds)).endpoints()
    assert low.unwrap() == pytest.approx(expected[0], abs=1e-12)
    assert high.unwrap() == pytest.approx(expected[1], abs=1e-12)


def test_interpolation():
    span = meters(2, 6)
    assert interval.interpolate(span, 0) == length.meters(2)
    assert interval.interpolate(span, 0.5) == length.meters(4)
    assert interval.interpolate(span, 1.5) == length.meters(8)
    assert interval.interpolation_parameter(span, length.meters(5)) == 0.75
    assert interval.interpolation_parameter(span, length.meters(0)) == -0.5


def test_interpolation_parameter_of_singleton():
    single = interval.singleton(length.meters(2))
    assert interval.interpolation_parameter(single, length.meters(1)) == -math.inf
    assert interval.interpolation_parameter(single, length.meters(3)) == math.inf
    assert interval.interpolation_parameter(single, length.meters(2)) == 0.0


def test_hulls():
    values = [length.meters(x) for x in (3, -1, 2)]
    assert interval.hull(values[0], values[1:]) == meters(-1, 3)
    assert interval.hull3(*values) == meters(-1, 3)
    assert interval.hull_n(values) == meters(-1, 3)
    assert interval.hull_n([]) is None
    assert interval.hull_of(length.meters, 4, [1, 2]) == meters(1, 4)
    assert interval.hull_of_n(length.meters, []) is None


def test_aggregates():
    spans = [meters(1, 2), meters(5, 6), meters(-1, 0)]
    assert interval.aggregate(spans[0], spans[1:]) == meters(-1, 6)
    assert interval.aggregate3(*spans) == meters(-1, 6)
    assert interval.aggregate_n(spans) == meters(-1, 6)
    assert interval.aggregate_n([]) is None
    assert interval.aggregate_of(lambda x: meters(x, x + 1), 0, [3]) == meters(0, 4)
    assert interval.aggregate_of_n(lambda x: meters(x, x), []) is None


def test_trigonometry_of_unbounded_intervals():
    unbounded = interval.divide_by(0, Interval(angle.radians(0), angle.radians(1)))
    assert interval.cos(unbounded) == unitless(-1, 1)
    assert interval.sin(unbounded) == unitless(-1, 1)
    half_open = Interval(angle.radians(2), angle.radians(math.inf))
    assert interval.sin(half_open) == unitless(-1, 1)
    assert interval.cos(half_open) == unitless(-1, 1)


def test_trigonometry_of_nan_interval_is_nan():
    low, high = interval.cos(Interval(angle.radians(math.nan), angle.radians(1))).endpoints()
    assert quantity.is_nan(low)
    assert quantity.is_nan(high)


SEEDED = random.Random(4321)


def random_interval():
    return unitless(SEEDED.uniform(-10, 10), SEEDED.uniform(-10, 10))


SAMPLES = [
    (random_interval(), random_interval(), SEEDED.random(), SEEDED.random())
    for _ in range(50)
]

POINTWISE = {
    "negate": lambda i, j, x, y: (interval.negate(i), -x),
    "plus": lambda i, j, x, y: (interval.plus(y, i), x + y),
    "minus": lambda i, j, x, y: (interval.minus(y, i), x - y),
    "difference": lambda i, j, x, y: (interval.difference(y, i), y - x),
    "plus_interval": lambda i, j, x, y: (interval.plus_interval(j, i), x + y),
    "minus_interval": lambda i, j, x, y: (interval.minus_interval(j, i), x - y),
    "product": lambda i, j, x, y: (interval.product(y, i), y * x),
    "times": lambda i, j, x, y: (interval.times(y, i), x * y),
    "times_unitless": lambda i, j, x, y: (interval.times_unitless(y, i), x * y),
    "times_interval": lambda i, j, x, y: (interval.times_interval(j, i), x * y),
    "times_unitless_interval": lambda i, j, x, y: (
        interval.times_unitless_interval(j, i),
        x * y,
    ),
    "multiply_by": lambda i, j, x, y: (interval.multiply_by(y.unwrap(), i), x * y.unwrap()),
    "divide_by": lambda i, j, x, y: (interval.divide_by(y.unwrap(), i), x / y.unwrap()),
    "reciprocal": lambda i, j, x, y: (interval.reciprocal(i), quantity.reciprocal(x)),
    "abs": lambda i, j, x, y: (interval.abs(i), abs(x)),
    "squared": lambda i, j, x, y: (interval.squared(i), quantity.squared(x)),
    "squared_unitless": lambda i, j, x, y: (
        interval.squared_unitless(i),
        quantity.squared_unitless(x),
    ),
    "cubed": lambda i, j, x, y: (interval.cubed(i), quantity.cubed(x)),
    "cubed_unitless": lambda i, j, x, y: (
        interval.cubed_unitless(i),
        quantity.cubed_unitless(x),
    ),
    "sin": lambda i, j, x, y: (interval.sin(i), quantity.unitless(angle.sin(x))),
    "cos": lambda i, j, x, y: (interval.cos(i), quantity.unitless(angle.cos(x))),
}


@pytest.mark.parametrize("name", sorted(POINTWISE))
def test_operation_contains_every_pointwise_result(name):
    operation = POINTWISE[name]
    for first, second, t, s in SAMPLES:
        x = interval.interpolate(first, t)
        y = interval.interpolate(second, s)
        bounds, value = operation(first, second, x, y)
        assert value in bounds, (first, second, x, y)
