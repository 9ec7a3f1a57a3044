"""Unit-tagged scalar quantities.

A ``Quantity[U]`` wraps a single float stored in the canonical unit of the unit tag
``U`` (meters for lengths, seconds for durations and so on). The tag exists only for
the static type checker: adding a ``Quantity[Meters]`` to a ``Quantity[Seconds]`` is a
type error, and multiplying two quantities produces a ``Product`` unit.

Equality, ordering and hashing are tolerance based (see ``math_units.precision``).

The module level functions take the quantity being operated on as their last
argument, so ``minus(y, x)`` is ``x - y`` and ``mod_by(modulus, x)`` is ``x`` modulo
``modulus``. This order reads naturally with ``functools.partial``.

Example:
    from math_units import quantity
    from math_units.catalog import length

    quantity.clamp(length.meters(0), length.meters(1), length.meters(3))
    # Quantity(1.0)
"""

import builtins
import math
from collections.abc import Callable, Iterable
from typing import Any, Generic, TypeVar, overload

from .precision import almost_equal, compare as compare_floats
from .precision import interpolate_from as interpolate_floats
from .precision import round_float_to, tolerant_hash
from .units.core import A, B, Cubed, Product, Rate, Squared, U, Unit, Unitless

V = TypeVar("V", bound=Unit)
T = TypeVar("T")


def ieee_divide(numerator: float, denominator: float) -> float:
    """Divide two floats, returning infinity or NaN instead of raising on zero."""
    if denominator == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _fmod(value: float, modulus: float) -> float:
    """Truncated remainder that gives NaN instead of raising."""
    if modulus == 0.0 or math.isinf(value) or math.isnan(value) or math.isnan(modulus):
        return math.nan
    return math.fmod(value, modulus)


def _sqrt(value: float) -> float:
    return math.sqrt(value) if value >= 0.0 else math.nan


class Quantity(Generic[U]):
    """A float value stored in the canonical unit of the unit tag ``U``."""

    __slots__ = ("_raw",)

    def __init__(self, raw: float):
        """Wrap a raw value, which must already be in canonical units."""
        self._raw = raw

    def unwrap(self) -> float:
        """Return the raw value in canonical units."""
        return self._raw

    def is_nan(self) -> bool:
        """Whether the raw value is NaN."""
        return math.isnan(self._raw)

    def is_infinite(self) -> bool:
        """Whether the raw value is positive or negative infinity."""
        return math.isinf(self._raw)

    def ratio(self, other: "Quantity[U]") -> float:
        """Divide by a quantity of the same unit, giving a plain float."""
        return ieee_divide(self._raw, other._raw)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return almost_equal(self._raw, other._raw)

    def __hash__(self) -> int:
        return tolerant_hash(self._raw)

    def __lt__(self, other: "Quantity[U]") -> bool:
        return compare_floats(self._raw, other._raw) < 0

    def __le__(self, other: "Quantity[U]") -> bool:
        return compare_floats(self._raw, other._raw) <= 0

    def __gt__(self, other: "Quantity[U]") -> bool:
        return compare_floats(self._raw, other._raw) > 0

    def __ge__(self, other: "Quantity[U]") -> bool:
        return compare_floats(self._raw, other._raw) >= 0

    def __add__(self, other: "Quantity[U]") -> "Quantity[U]":
        return Quantity(self._raw + other._raw)

    def __sub__(self, other: "Quantity[U]") -> "Quantity[U]":
        return Quantity(self._raw - other._raw)

    def __neg__(self) -> "Quantity[U]":
        return Quantity(-self._raw)

    def __abs__(self) -> "Quantity[U]":
        return Quantity(abs(self._raw))

    @overload
    def __mul__(self, other: float) -> "Quantity[U]": ...

    @overload
    def __mul__(self, other: "Quantity[V]") -> "Quantity[Product[U, V]]": ...

    def __mul__(self, other: "float | Quantity[Any]") -> "Quantity[Any]":
        """Scale by a float, or multiply by a quantity to get a ``Product`` unit."""
        if isinstance(other, Quantity):
            return Quantity(self._raw * other._raw)
        return Quantity(self._raw * other)

    def __rmul__(self, other: float) -> "Quantity[U]":
        return Quantity(other * self._raw)

    @overload
    def __truediv__(self, other: float) -> "Quantity[U]": ...

    @overload
    def __truediv__(self, other: "Quantity[V]") -> "Quantity[Rate[U, V]]": ...

    def __truediv__(self, other: "float | Quantity[Any]") -> "Quantity[Any]":
        """Divide by a float, or by a quantity to get a ``Rate`` unit.

        Division by zero follows IEEE rules and gives an infinite or NaN quantity.
        """
        if isinstance(other, Quantity):
            return Quantity(ieee_divide(self._raw, other._raw))
        return Quantity(ieee_divide(self._raw, other))

    def __round__(self, ndigits: int | None = None) -> "Quantity[U]":
        """Round to a whole number, or to ``ndigits`` decimals. Infinity and NaN are kept."""
        if not math.isfinite(self._raw):
            return self
        if ndigits is None:
            return Quantity(float(builtins.round(self._raw)))
        return Quantity(builtins.round(self._raw, ndigits))

    def __floor__(self) -> "Quantity[U]":
        return self._integral(math.floor)

    def __ceil__(self) -> "Quantity[U]":
        return self._integral(math.ceil)

    def __trunc__(self) -> "Quantity[U]":
        return self._integral(math.trunc)

    def _integral(self, function: Callable[[float], int]) -> "Quantity[U]":
        """Apply an integer-valued rounding function, passing infinity and NaN through."""
        if not math.isfinite(self._raw):
            return self
        return Quantity(float(function(self._raw)))

    def __repr__(self) -> str:
        return f"Quantity({self._raw!r})"


# Construction


def create(raw: float) -> Quantity[U]:
    """Wrap a raw canonical-unit value. No conversion is performed."""
    return Quantity(raw)


def unwrap(quantity: Quantity[Any]) -> float:
    """Return the raw canonical-unit value of a quantity."""
    return quantity.unwrap()


def unitless(value: float) -> Quantity[Unitless]:
    """Wrap a plain float as a unitless quantity."""
    return Quantity(value)


def zero() -> Quantity[U]:
    """The zero quantity of any unit."""
    return Quantity(0.0)


def positive_infinity() -> Quantity[U]:
    """Positive infinity of any unit."""
    return Quantity(math.inf)


def infinity() -> Quantity[U]:
    """Alias for ``positive_infinity``."""
    return Quantity(math.inf)


def negative_infinity() -> Quantity[U]:
    """Negative infinity of any unit."""
    return Quantity(-math.inf)


# Comparison


def less_than(y: Quantity[U], x: Quantity[U]) -> bool:
    """Check if ``x`` is less than ``y``."""
    return x < y


def greater_than(y: Quantity[U], x: Quantity[U]) -> bool:
    """Check if ``x`` is greater than ``y``."""
    return x > y


def less_than_or_equal_to(y: Quantity[U], x: Quantity[U]) -> bool:
    """Check if ``x`` is less than or equal to ``y``."""
    return x <= y


def greater_than_or_equal_to(y: Quantity[U], x: Quantity[U]) -> bool:
    """Check if ``x`` is greater than or equal to ``y``."""
    return x >= y


def less_than_zero(x: Quantity[Any]) -> bool:
    """Check if a quantity is less than zero, within tolerance."""
    return compare_floats(x.unwrap(), 0.0) < 0


def greater_than_zero(x: Quantity[Any]) -> bool:
    """Check if a quantity is greater than zero, within tolerance."""
    return compare_floats(x.unwrap(), 0.0) > 0


def less_than_or_equal_to_zero(x: Quantity[Any]) -> bool:
    """Check if a quantity is at most zero, within tolerance."""
    return compare_floats(x.unwrap(), 0.0) <= 0


def greater_than_or_equal_to_zero(x: Quantity[Any]) -> bool:
    """Check if a quantity is at least zero, within tolerance."""
    return compare_floats(x.unwrap(), 0.0) >= 0


def compare(x: Quantity[U], y: Quantity[U]) -> int:
    """Three-way comparison: 0 if equal within tolerance, else -1 or 1."""
    return compare_floats(x.unwrap(), y.unwrap())


def equal_within(tolerance: Quantity[U], x: Quantity[U], y: Quantity[U]) -> bool:
    """Check if two quantities differ by at most ``abs(tolerance)``.

    Unlike ``==`` this compares raw values exactly against the given tolerance.
    """
    return abs(x.unwrap() - y.unwrap()) <= abs(tolerance.unwrap())


def max_of(x: Quantity[U], y: Quantity[U]) -> Quantity[U]:
    """The larger of two quantities."""
    return y if y.unwrap() > x.unwrap() else x


def min_of(x: Quantity[U], y: Quantity[U]) -> Quantity[U]:
    """The smaller of two quantities."""
    return y if y.unwrap() < x.unwrap() else x


def is_nan(quantity: Quantity[Any]) -> bool:
    """Whether the raw value of a quantity is NaN."""
    return quantity.is_nan()


def is_infinite(quantity: Quantity[Any]) -> bool:
    """Whether the raw value of a quantity is infinite."""
    return quantity.is_infinite()


# Arithmetic


def negate(quantity: Quantity[U]) -> Quantity[U]:
    """Flip the sign of a quantity."""
    return -quantity


def plus(y: Quantity[U], x: Quantity[U]) -> Quantity[U]:
    """Add ``y`` to ``x``."""
    return x + y


def minus(y: Quantity[U], x: Quantity[U]) -> Quantity[U]:
    """Subtract ``y`` from ``x``."""
    return x - y


def difference(x: Quantity[U], y: Quantity[U]) -> Quantity[U]:
    """Subtract ``y`` from ``x``; the argument order of ``x - y``."""
    return x - y


def product(x: Quantity[A], y: Quantity[B]) -> Quantity[Product[A, B]]:
    """Multiply two quantities into a ``Product`` unit."""
    return x * y


def times(y: Quantity[B], x: Quantity[A]) -> Quantity[Product[A, B]]:
    """Multiply ``x`` by ``y``."""
    return x * y


def times_unitless(y: Quantity[Unitless], x: Quantity[Unitless]) -> Quantity[Unitless]:
    """Multiply two unitless quantities."""
    return Quantity(x.unwrap() * y.unwrap())


def over(y: Quantity[A], x: Quantity[Product[A, B]]) -> Quantity[B]:
    """Divide a product by its first factor."""
    return Quantity(ieee_divide(x.unwrap(), y.unwrap()))


def over_(y: Quantity[B], x: Quantity[Product[A, B]]) -> Quantity[A]:
    """Divide a product by its second factor."""
    return Quantity(ieee_divide(x.unwrap(), y.unwrap()))


def over_unitless(y: Quantity[Unitless], x: Quantity[Unitless]) -> Quantity[Unitless]:
    """Divide x by y for unitless quantities."""
    return Quantity(ieee_divide(x.unwrap(), y.unwrap()))


def ratio(x: Quantity[U], y: Quantity[U]) -> float:
    """Divide two quantities of the same unit, giving a plain float."""
    return x.ratio(y)


def multiply_by(scale: float, quantity: Quantity[U]) -> Quantity[U]:
    """Scale a quantity by a float."""
    return quantity * scale


def divide_by(divisor: float, quantity: Quantity[U]) -> Quantity[U]:
    """Divide a quantity by a float; zero gives infinity or NaN."""
    return quantity / divisor


def twice(quantity: Quantity[U]) -> Quantity[U]:
    """Double a quantity."""
    return 2.0 * quantity


def half(quantity: Quantity[U]) -> Quantity[U]:
    """Halve a quantity."""
    return 0.5 * quantity


def reciprocal(quantity: Quantity[U]) -> Quantity[U]:
    """One over the raw value, keeping the unit tag."""
    return Quantity(ieee_divide(1.0, quantity.unwrap()))


def clamp(lower: Quantity[U], upper: Quantity[U], quantity: Quantity[U]) -> Quantity[U]:
    """Clamp a quantity between two bounds, given in either order.

    Args:
        lower: One bound.
        upper: The other bound.
        quantity: The quantity to clamp.
    """
    if upper < lower:
        lower, upper = upper, lower
    if quantity.unwrap() < lower.unwrap():
        return lower
    if quantity.unwrap() > upper.unwrap():
        return upper
    return quantity


def squared(quantity: Quantity[U]) -> Quantity[Squared[U]]:
    """Multiply a quantity by itself."""
    return Quantity(quantity.unwrap() * quantity.unwrap())


def squared_unitless(quantity: Quantity[Unitless]) -> Quantity[Unitless]:
    """Square a unitless quantity."""
    return Quantity(quantity.unwrap() * quantity.unwrap())


def sqrt(quantity: Quantity[Squared[U]]) -> Quantity[U]:
    """Square root of a squared unit. Negative values give NaN."""
    return Quantity(_sqrt(quantity.unwrap()))


def sqrt_unitless(quantity: Quantity[Unitless]) -> Quantity[Unitless]:
    """Square root of a unitless quantity. Negative values give NaN."""
    return Quantity(_sqrt(quantity.unwrap()))


def cubed(quantity: Quantity[U]) -> Quantity[Cubed[U]]:
    """Cube a quantity."""
    raw = quantity.unwrap()
    return Quantity(raw * raw * raw)


def cubed_unitless(quantity: Quantity[Unitless]) -> Quantity[Unitless]:
    """Cube a unitless quantity."""
    raw = quantity.unwrap()
    return Quantity(raw * raw * raw)


def unsafe_cbrt(quantity: Quantity[Any]) -> Quantity[Any]:
    """Sign-preserving cube root with no unit checking."""
    return Quantity(math.cbrt(quantity.unwrap()))


def cbrt(quantity: Quantity[Cubed[U]]) -> Quantity[U]:
    """Cube root of a cubed unit."""
    return Quantity(math.cbrt(quantity.unwrap()))


def cbrt_unitless(quantity: Quantity[Unitless]) -> Quantity[Unitless]:
    """Cube root of a unitless quantity."""
    return Quantity(math.cbrt(quantity.unwrap()))


@overload
def mod_by(modulus: float, quantity: float) -> float: ...


@overload
def mod_by(modulus: Quantity[U], quantity: Quantity[U]) -> Quantity[U]: ...


def mod_by(modulus: Any, quantity: Any) -> Any:
    """Remainder of truncated division, with the sign of ``quantity``.

    ``mod_by(4, -13.5)`` is ``-1.5``. A zero modulus gives NaN.
    """
    if isinstance(quantity, Quantity):
        return Quantity(_fmod(quantity.unwrap(), modulus.unwrap()))
    return _fmod(quantity, modulus)


@overload
def remainder_by(modulus: float, quantity: float) -> float: ...


@overload
def remainder_by(modulus: Quantity[U], quantity: Quantity[U]) -> Quantity[U]: ...


def remainder_by(modulus: Any, quantity: Any) -> Any:
    """Absolute value of ``mod_by``: ``remainder_by(4, -13.5)`` is ``1.5``."""
    return abs(mod_by(modulus, quantity))


def interpolate_from(
    start: Quantity[U], finish: Quantity[U], parameter: float
) -> Quantity[U]:
    """Interpolate from ``start`` (parameter 0) to ``finish`` (parameter 1).

    Parameters outside ``[0, 1]`` extrapolate.
    """
    return Quantity(interpolate_floats(start.unwrap(), finish.unwrap(), parameter))


def midpoint(x: Quantity[U], y: Quantity[U]) -> Quantity[U]:
    """The value halfway between two quantities."""
    return x + 0.5 * (y - x)


def range(start: Quantity[U], finish: Quantity[U], steps: int) -> list[Quantity[U]]:
    """Evenly spaced values from ``start`` to ``finish`` inclusive.

    Args:
        start: First value.
        finish: Last value.
        steps: Number of steps; the result has ``steps + 1`` values. Zero or
            negative steps give an empty list.
    """
    if steps <= 0:
        return []
    return [interpolate_from(start, finish, i / steps) for i in builtins.range(steps + 1)]


def in_(units: Callable[[float], Quantity[U]], quantity: Quantity[U]) -> float:
    """Convert a quantity to a float in the units of a builder function.

    Example:
        in_(length.feet, length.meters(0.3048))  # 1.0
    """
    return ratio(quantity, units(1.0))


def round_to(digits: int, quantity: Quantity[U]) -> Quantity[U]:
    """Round a quantity to the given number of decimal digits."""
    return Quantity(round_float_to(digits, quantity.unwrap()))


def truncate(quantity: Quantity[U]) -> Quantity[U]:
    """Drop the fractional part of a quantity, rounding toward zero."""
    return math.trunc(quantity)


# Collections


def sum(quantities: Iterable[Quantity[U]]) -> Quantity[U]:
    """Add up quantities; the sum of nothing is zero."""
    return Quantity(builtins.sum((quantity.unwrap() for quantity in quantities), 0.0))


def minimum(quantities: Iterable[Quantity[U]]) -> Quantity[U] | None:
    """The smallest quantity, or None when there are none."""
    return minimum_by(lambda quantity: quantity, quantities)


def maximum(quantities: Iterable[Quantity[U]]) -> Quantity[U] | None:
    """The largest quantity, or None when there are none."""
    return maximum_by(lambda quantity: quantity, quantities)


def minimum_by(key: Callable[[T], Quantity[Any]], items: Iterable[T]) -> T | None:
    """The item with the smallest key; the first one wins ties.

    Args:
        key: Function giving the quantity to compare an item by.
        items: Items to search.

    Returns:
        The item, or None when ``items`` is empty.
    """
    best: T | None = None
    best_value = math.inf
    for item in items:
        value = key(item).unwrap()
        if best is None or value < best_value:
            best, best_value = item, value
    return best


def maximum_by(key: Callable[[T], Quantity[Any]], items: Iterable[T]) -> T | None:
    """The item with the largest key; the first one wins ties."""
    best: T | None = None
    best_value = -math.inf
    for item in items:
        value = key(item).unwrap()
        if best is None or value > best_value:
            best, best_value = item, value
    return best


def sort(quantities: Iterable[Quantity[U]]) -> list[Quantity[U]]:
    """Sort quantities from smallest to largest."""
    return sorted(quantities, key=unwrap)


def sort_by(key: Callable[[T], Quantity[Any]], items: Iterable[T]) -> list[T]:
    """Sort items by a quantity key, smallest first."""
    return sorted(items, key=lambda item: key(item).unwrap())
