"""Closed intervals of quantities and interval arithmetic.

An ``Interval[U]`` is a range ``[min, max]`` of ``Quantity[U]`` values. The endpoints
are always sorted on construction, so ``Interval(b, a)`` and ``Interval(a, b)`` are
the same interval.

Arithmetic on intervals is conservative: for an operation ``f`` and any values ``x``
in ``I`` and ``y`` in ``J``, ``f(x, y)`` lies inside the interval computed from ``I``
and ``J``. This makes intervals suitable for bounding the result of a calculation
whose inputs are only known to lie within a range.

As in ``math_units.quantity``, the interval being operated on is the last argument
of the module level functions.

Example:
    from math_units import interval
    from math_units.catalog import length

    first = interval.Interval(length.meters(2), length.meters(1))
    interval.width(first)  # 1 meter
    interval.contains(length.meters(1.5), first)  # True
"""

import math
from collections.abc import Callable, Iterable
from typing import Any, Generic, TypeVar

from .catalog import angle
from .precision import almost_equal, interpolate_from, tolerant_hash
from .quantity import Quantity, ieee_divide, max_of, min_of
from .units.core import A, B, Cubed, Product, Radians, Squared, U, Unitless

T = TypeVar("T")


class Interval(Generic[U]):
    """A closed range of quantities of the same unit."""

    __slots__ = ("_min", "_max")

    def __init__(self, first: Quantity[U], second: Quantity[U]):
        """Create an interval from two endpoints given in either order."""
        if second.unwrap() < first.unwrap():
            first, second = second, first
        self._min = first
        self._max = second

    @property
    def min_value(self) -> Quantity[U]:
        """The lower endpoint."""
        return self._min

    @property
    def max_value(self) -> Quantity[U]:
        """The upper endpoint."""
        return self._max

    def endpoints(self) -> tuple[Quantity[U], Quantity[U]]:
        """Return ``(min_value, max_value)``."""
        return self._min, self._max

    def __contains__(self, value: Quantity[U]) -> bool:
        return self._min <= value <= self._max

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return almost_equal(self._min.unwrap(), other._min.unwrap()) and almost_equal(
            self._max.unwrap(), other._max.unwrap()
        )

    def __hash__(self) -> int:
        return tolerant_hash(self._min.unwrap(), self._max.unwrap())

    def __repr__(self) -> str:
        return f"Interval({self._min.unwrap()!r}, {self._max.unwrap()!r})"


def _interval(low: float, high: float) -> Interval[Any]:
    """Build an interval from raw endpoint values."""
    return Interval(Quantity(low), Quantity(high))


# Construction


def unit() -> Interval[Unitless]:
    """The unitless interval from zero to one."""
    return _interval(0.0, 1.0)


def from_(first: Quantity[U], second: Quantity[U]) -> Interval[U]:
    """Create an interval from two endpoints given in either order."""
    return Interval(first, second)


def from_endpoints(endpoints: tuple[Quantity[U], Quantity[U]]) -> Interval[U]:
    """Create an interval from a (first, second) tuple."""
    return Interval(*endpoints)


def singleton(value: Quantity[U]) -> Interval[U]:
    """An interval containing a single value."""
    return Interval(value, value)


# Accessors


def endpoints(interval: Interval[U]) -> tuple[Quantity[U], Quantity[U]]:
    """Return (min_value, max_value) of an interval."""
    return interval.endpoints()


def min_value(interval: Interval[U]) -> Quantity[U]:
    """The lower endpoint of an interval."""
    return interval.min_value


def max_value(interval: Interval[U]) -> Quantity[U]:
    """The upper endpoint of an interval."""
    return interval.max_value


def midpoint(interval: Interval[U]) -> Quantity[U]:
    """The value halfway between the endpoints."""
    a, b = interval.endpoints()
    return a + 0.5 * (b - a)


def width(interval: Interval[U]) -> Quantity[U]:
    """The distance between the endpoints."""
    a, b = interval.endpoints()
    return b - a


def is_singleton(interval: Interval[Any]) -> bool:
    """Whether both endpoints are equal within tolerance."""
    a, b = interval.endpoints()
    return a == b


# Set operations


def union(first: Interval[U], second: Interval[U]) -> Interval[U]:
    """The smallest interval containing both intervals.

    Intervals that do not overlap give an interval that also covers the gap
    between them.
    """
    return Interval(
        min_of(first.min_value, second.min_value),
        max_of(first.max_value, second.max_value),
    )


def intersection(first: Interval[U], second: Interval[U]) -> Interval[U] | None:
    """The overlap of two intervals, or None when they do not overlap."""
    max_a = max_of(first.min_value, second.min_value)
    min_b = min_of(first.max_value, second.max_value)
    if max_a <= min_b:
        return Interval(max_a, min_b)
    return None


# Arithmetic


def negate(interval: Interval[U]) -> Interval[U]:
    """All values -x for x in the interval."""
    a, b = interval.endpoints()
    return Interval(-b, -a)


def plus(delta: Quantity[U], interval: Interval[U]) -> Interval[U]:
    """Shift an interval up by ``delta``."""
    a, b = interval.endpoints()
    return Interval(delta + a, delta + b)


def minus(delta: Quantity[U], interval: Interval[U]) -> Interval[U]:
    """Shift an interval down by ``delta``."""
    a, b = interval.endpoints()
    return Interval(a - delta, b - delta)


def difference(value: Quantity[U], interval: Interval[U]) -> Interval[U]:
    """All values ``value - x`` for ``x`` in the interval."""
    a, b = interval.endpoints()
    return Interval(value - b, value - a)


def multiply_by(scale: float, interval: Interval[U]) -> Interval[U]:
    """All values x * scale for x in the interval."""
    a, b = interval.endpoints()
    return Interval(a * scale, b * scale)


def divide_by(divisor: float, interval: Interval[U]) -> Interval[U]:
    """Divide an interval by a float; dividing by zero gives an unbounded interval."""
    if divisor == 0.0:
        return _interval(-math.inf, math.inf)
    a, b = interval.endpoints()
    return Interval(a / divisor, b / divisor)


def half(interval: Interval[U]) -> Interval[U]:
    """Halve both endpoints."""
    return multiply_by(0.5, interval)


def twice(interval: Interval[U]) -> Interval[U]:
    """Double both endpoints."""
    return multiply_by(2.0, interval)


def product(value: Quantity[A], interval: Interval[B]) -> Interval[Product[A, B]]:
    """All products ``value * x`` for ``x`` in the interval."""
    a, b = interval.endpoints()
    return Interval(value * a, value * b)


def times(value: Quantity[B], interval: Interval[A]) -> Interval[Product[A, B]]:
    """All products ``x * value`` for ``x`` in the interval."""
    a, b = interval.endpoints()
    return Interval(a * value, b * value)


def times_unitless(
    value: Quantity[Unitless], interval: Interval[Unitless]
) -> Interval[Unitless]:
    """All products x * value for x in a unitless interval."""
    a, b = interval.endpoints()
    return _interval(a.unwrap() * value.unwrap(), b.unwrap() * value.unwrap())


def plus_interval(other: Interval[U], interval: Interval[U]) -> Interval[U]:
    """All sums ``x + y`` for ``x`` in ``interval`` and ``y`` in ``other``."""
    a2, b2 = other.endpoints()
    a1, b1 = interval.endpoints()
    return Interval(a2 + a1, b2 + b1)


def minus_interval(other: Interval[U], interval: Interval[U]) -> Interval[U]:
    """All differences ``x - y`` for ``x`` in ``interval`` and ``y`` in ``other``."""
    a2, b2 = other.endpoints()
    a1, b1 = interval.endpoints()
    return Interval(a1 - b2, b1 - a2)


def _product_bounds(first: Interval[Any], second: Interval[Any]) -> tuple[float, float]:
    """Smallest and largest products of the endpoints of two intervals."""
    a1, b1 = (value.unwrap() for value in first.endpoints())
    a2, b2 = (value.unwrap() for value in second.endpoints())
    products = (a1 * a2, a1 * b2, b1 * a2, b1 * b2)
    return min(products), max(products)


def times_interval(
    other: Interval[B], interval: Interval[A]
) -> Interval[Product[A, B]]:
    """All products ``x * y`` for ``x`` in ``interval`` and ``y`` in ``other``."""
    return _interval(*_product_bounds(interval, other))


def times_unitless_interval(
    unitless_interval: Interval[Unitless], interval: Interval[U]
) -> Interval[U]:
    """Scale an interval by every factor in a unitless interval."""
    return _interval(*_product_bounds(interval, unitless_interval))


def reciprocal(interval: Interval[Unitless]) -> Interval[Unitless]:
    """All values ``1 / x`` for ``x`` in the interval.

    Intervals containing zero give unbounded results.
    """
    a, b = (value.unwrap() for value in interval.endpoints())
    if a > 0.0 or b < 0.0:
        return _interval(1.0 / b, 1.0 / a)
    if a < 0.0 < b:
        return _interval(-math.inf, math.inf)
    if a < 0.0:
        return _interval(-math.inf, 1.0 / a)
    if b > 0.0:
        return _interval(1.0 / b, math.inf)
    return _interval(math.nan, math.nan)


def abs(interval: Interval[U]) -> Interval[U]:
    """All values ``abs(x)`` for ``x`` in the interval."""
    a, b = interval.endpoints()
    if a.unwrap() >= 0.0:
        return interval
    if b.unwrap() <= 0.0:
        return negate(interval)
    return Interval(Quantity(0.0), max_of(-a, b))


def _squared_bounds(interval: Interval[Any]) -> Interval[Any]:
    a, b = (value.unwrap() for value in interval.endpoints())
    if a >= 0.0:
        return _interval(a * a, b * b)
    if b <= 0.0:
        return _interval(b * b, a * a)
    if -a < b:
        return _interval(0.0, b * b)
    return _interval(0.0, a * a)


def squared(interval: Interval[U]) -> Interval[Squared[U]]:
    """All values x * x for x in the interval."""
    return _squared_bounds(interval)


def squared_unitless(interval: Interval[Unitless]) -> Interval[Unitless]:
    """All values x * x for x in a unitless interval."""
    return _squared_bounds(interval)


def _cubed_bounds(interval: Interval[Any]) -> Interval[Any]:
    a, b = (value.unwrap() for value in interval.endpoints())
    return _interval(a * a * a, b * b * b)


def cubed(interval: Interval[U]) -> Interval[Cubed[U]]:
    """All values x ** 3 for x in the interval."""
    return _cubed_bounds(interval)


def cubed_unitless(interval: Interval[Unitless]) -> Interval[Unitless]:
    """All values x ** 3 for x in a unitless interval."""
    return _cubed_bounds(interval)


# Trigonometry


def _cos_includes_max(low: float, high: float) -> bool:
    """Whether ``[low, high]`` contains a multiple of two pi."""
    return math.floor(low / (2.0 * math.pi)) != math.floor(high / (2.0 * math.pi))


def _cos_includes_min_max(low: float, high: float) -> tuple[bool, bool]:
    """Whether [low, high] contains a minimum and a maximum of cosine."""
    return (
        _cos_includes_max(low + math.pi, high + math.pi),
        _cos_includes_max(low, high),
    )


def _non_finite_trig_bounds(low: float, high: float) -> Interval[Unitless] | None:
    """Bounds for an interval with a non-finite endpoint, or None when both are finite."""
    if math.isnan(low) or math.isnan(high):
        return _interval(math.nan, math.nan)
    if math.isinf(low) or math.isinf(high):
        return _interval(-1.0, 1.0)
    return None


def _trig_bounds(
    function: Callable[[Quantity[Radians]], float],
    includes_min: bool,
    includes_max: bool,
    interval: Interval[Radians],
) -> Interval[Unitless]:
    a, b = interval.endpoints()
    low = -1.0 if includes_min else min(function(a), function(b))
    high = 1.0 if includes_max else max(function(a), function(b))
    return _interval(low, high)


def sin(interval: Interval[Radians]) -> Interval[Unitless]:
    """Bounds of the sine over an interval of angles."""
    a, b = (value.unwrap() for value in interval.endpoints())
    if is_singleton(interval):
        return singleton(Quantity(angle.sin(interval.min_value)))
    if (bounds := _non_finite_trig_bounds(a, b)) is not None:
        return bounds
    includes_min, includes_max = _cos_includes_min_max(a - math.pi / 2, b - math.pi / 2)
    return _trig_bounds(angle.sin, includes_min, includes_max, interval)


def cos(interval: Interval[Radians]) -> Interval[Unitless]:
    """Bounds of the cosine over an interval of angles."""
    a, b = (value.unwrap() for value in interval.endpoints())
    if is_singleton(interval):
        return singleton(Quantity(angle.cos(interval.min_value)))
    if (bounds := _non_finite_trig_bounds(a, b)) is not None:
        return bounds
    includes_min, includes_max = _cos_includes_min_max(a, b)
    return _trig_bounds(angle.cos, includes_min, includes_max, interval)


# Queries


def interpolate(interval: Interval[U], parameter: float) -> Quantity[U]:
    """Map a parameter onto the interval: 0 gives the minimum and 1 the maximum.

    Parameters outside ``[0, 1]`` extrapolate beyond the endpoints.
    """
    a, b = interval.endpoints()
    return Quantity(interpolate_from(a.unwrap(), b.unwrap(), parameter))


def interpolation_parameter(interval: Interval[U], value: Quantity[U]) -> float:
    """The parameter that ``interpolate`` maps to ``value``.

    For a singleton interval this is negative infinity below the value, positive
    infinity above it, and zero at it.
    """
    a, b = interval.endpoints()
    if a.unwrap() < b.unwrap():
        return ieee_divide(value.unwrap() - a.unwrap(), b.unwrap() - a.unwrap())
    if value < a:
        return -math.inf
    if value > b:
        return math.inf
    return 0.0


def contains(value: Quantity[U], interval: Interval[U]) -> bool:
    """Whether value lies within the interval, within tolerance."""
    return value in interval


def intersects(first: Interval[U], second: Interval[U]) -> bool:
    """Whether two intervals overlap or touch."""
    a1, b1 = first.endpoints()
    a2, b2 = second.endpoints()
    return a1 <= b2 and b1 >= a2


def is_contained_in(outer: Interval[U], inner: Interval[U]) -> bool:
    """Whether ``inner`` lies entirely within ``outer``."""
    a1, b1 = outer.endpoints()
    a2, b2 = inner.endpoints()
    return a1 <= a2 and b2 <= b1


# Hulls and aggregates


def hull(first: Quantity[U], rest: Iterable[Quantity[U]]) -> Interval[U]:
    """The smallest interval containing every given value."""
    low = high = first
    for value in rest:
        low = min_of(low, value)
        high = max_of(high, value)
    return Interval(low, high)


def hull3(a: Quantity[U], b: Quantity[U], c: Quantity[U]) -> Interval[U]:
    """The smallest interval containing three values."""
    return Interval(min_of(a, min_of(b, c)), max_of(a, max_of(b, c)))


def hull_n(values: Iterable[Quantity[U]]) -> Interval[U] | None:
    """The hull of any number of values, or None when there are none."""
    iterator = iter(values)
    if (first := next(iterator, None)) is None:
        return None
    return hull(first, iterator)


def hull_of(
    get_value: Callable[[T], Quantity[U]], first: T, rest: Iterable[T]
) -> Interval[U]:
    """The hull of the values get_value extracts from some items."""
    return hull(get_value(first), (get_value(item) for item in rest))


def hull_of_n(
    get_value: Callable[[T], Quantity[U]], items: Iterable[T]
) -> Interval[U] | None:
    """Like hull_of, or None when there are no items."""
    return hull_n(get_value(item) for item in items)


def aggregate(first: Interval[U], rest: Iterable[Interval[U]]) -> Interval[U]:
    """The smallest interval containing every given interval."""
    low, high = first.endpoints()
    for interval in rest:
        low = min_of(low, interval.min_value)
        high = max_of(high, interval.max_value)
    return Interval(low, high)


def aggregate3(
    first: Interval[U], second: Interval[U], third: Interval[U]
) -> Interval[U]:
    """The smallest interval containing three intervals."""
    return aggregate(first, (second, third))


def aggregate_n(intervals: Iterable[Interval[U]]) -> Interval[U] | None:
    """The aggregate of any number of intervals, or None when there are none."""
    iterator = iter(intervals)
    if (first := next(iterator, None)) is None:
        return None
    return aggregate(first, iterator)


def aggregate_of(
    get_interval: Callable[[T], Interval[U]], first: T, rest: Iterable[T]
) -> Interval[U]:
    """The aggregate of the intervals get_interval extracts from some items."""
    return aggregate(get_interval(first), (get_interval(item) for item in rest))


def aggregate_of_n(
    get_interval: Callable[[T], Interval[U]], items: Iterable[T]
) -> Interval[U] | None:
    """Like aggregate_of, or None when there are no items."""
    return aggregate_n(get_interval(item) for item in items)
