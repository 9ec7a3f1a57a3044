"""Process-wide digit precision and tolerance-based float comparison.

Every value type in this package compares floats through the helpers in this
module, so equality, ordering and hashing share one definition of "close enough".
Two floats are equal when they differ by less than ``epsilon()``, which is
``10 ** -digits`` for the configured digit precision (10 by default).

The precision is the only piece of mutable state in the package. Changing it
affects every subsequent comparison; use ``digit_precision`` to change it for a
block of code and have the previous value restored afterwards.
"""

import logging
import math
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Final

log = logging.getLogger(__name__)

DEFAULT_DIGIT_PRECISION: Final[int] = 10

_digit_precision: int = DEFAULT_DIGIT_PRECISION


def get_digit_precision() -> int:
    """Return the number of decimal digits used for approximate equality."""
    return _digit_precision


def set_digit_precision(digits: int) -> None:
    """Set the number of decimal digits used for approximate equality.

    Args:
        digits: Non-negative number of digits after the decimal point.

    Raises:
        ValueError: If ``digits`` is not a non-negative integer.
    """
    global _digit_precision
    if isinstance(digits, bool) or not isinstance(digits, int):
        raise ValueError(f"Digit precision must be an integer: {digits!r}")
    if digits < 0:
        raise ValueError(f"Digit precision cannot be negative: {digits}")
    if digits != _digit_precision:
        log.debug("Digit precision changed from %d to %d", _digit_precision, digits)
    _digit_precision = digits


@contextmanager
def digit_precision(digits: int) -> Iterator[None]:
    """Temporarily use a different digit precision.

    Example:
        with digit_precision(3):
            assert meters(1.0001) == meters(1.0)
    """
    previous = get_digit_precision()
    set_digit_precision(digits)
    try:
        yield
    finally:
        set_digit_precision(previous)


def epsilon() -> float:
    """Return the largest difference between two floats that is still unequal."""
    return 10.0 ** -_digit_precision


def almost_equal(a: float, b: float) -> bool:
    """Check whether two floats are equal within ``epsilon()``.

    NaN is never equal to anything, including another NaN.
    """
    return a == b or abs(a - b) < epsilon()


def compare(a: float, b: float) -> int:
    """Three-way comparison consistent with ``almost_equal``."""
    if almost_equal(a, b):
        return 0
    return -1 if a < b else 1


def round_float_to(digits: int, x: float) -> float:
    """Round a float to the given number of decimal digits."""
    return round(x, digits)


def round_float(x: float) -> float:
    """Round a float to the configured digit precision."""
    return round_float_to(_digit_precision, x)


def tolerant_hash(*values: float) -> int:
    """Hash floats by their values rounded to the configured digit precision.

    Two values that are equal within ``epsilon()`` but lie on opposite sides of a
    rounding boundary (for example 4.999e-11 and 5.001e-11 at ten digits) round to
    different values and so hash differently. Sets and dicts keyed on such values
    can hold both; round keys with ``round_float`` first when that matters.
    """
    if len(values) == 1:
        return hash(_hashable(values[0]))
    return hash(tuple(_hashable(value) for value in values))


def _hashable(x: float) -> float:
    if math.isnan(x) or math.isinf(x):
        return x
    # adding 0.0 folds -0.0 into 0.0
    return round_float(x) + 0.0


def interpolate_from(start: float, finish: float, parameter: float) -> float:
    """Interpolate between two floats.

    A parameter of 0 returns ``start`` and 1 returns ``finish``; values outside
    ``[0, 1]`` extrapolate. Each half is computed from its nearest endpoint so the
    endpoints are reproduced exactly.
    """
    if parameter <= 0.5:
        return start + parameter * (finish - start)
    return finish + (1.0 - parameter) * (start - finish)
