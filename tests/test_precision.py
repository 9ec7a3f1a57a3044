import logging
import math

import pytest

from math_units import precision
from math_units.precision import (
    DEFAULT_DIGIT_PRECISION,
    almost_equal,
    compare,
    digit_precision,
    epsilon,
    get_digit_precision,
    interpolate_from,
    set_digit_precision,
    tolerant_hash,
)


def test_default_precision():
    assert get_digit_precision() == DEFAULT_DIGIT_PRECISION == 10
    assert epsilon() == pytest.approx(1e-10)


def test_digit_precision_restores_previous_value():
    with digit_precision(3):
        assert get_digit_precision() == 3
        assert almost_equal(1.0, 1.0001)
    assert get_digit_precision() == DEFAULT_DIGIT_PRECISION
    assert not almost_equal(1.0, 1.0001)


def test_digit_precision_restores_after_error():
    with pytest.raises(RuntimeError):
        with digit_precision(2):
            raise RuntimeError("boom")
    assert get_digit_precision() == DEFAULT_DIGIT_PRECISION


@pytest.mark.parametrize("digits", [-1, 2.5, "3", True])
def test_set_digit_precision_rejects_invalid_values(digits):
    with pytest.raises(ValueError):
        set_digit_precision(digits)
    assert get_digit_precision() == DEFAULT_DIGIT_PRECISION


def test_precision_change_is_logged(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.DEBUG, logger=precision.__name__):
        with digit_precision(4):
            pass
    assert "from 10 to 4" in caplog.text
    assert "from 4 to 10" in caplog.text


def test_almost_equal():
    assert almost_equal(0.1 + 0.2, 0.3)
    assert almost_equal(math.inf, math.inf)
    assert not almost_equal(math.inf, -math.inf)
    assert not almost_equal(math.nan, math.nan)
    assert not almost_equal(1.0, 1.0 + 1e-9)


def test_compare_is_consistent_with_equality():
    assert compare(1.0, 1.0 + 1e-12) == 0
    assert compare(1.0, 2.0) == -1
    assert compare(2.0, 1.0) == 1


def test_tolerant_hash_matches_for_nearby_values():
    assert tolerant_hash(1.0) == tolerant_hash(1.0 + 1e-13)
    assert tolerant_hash(0.0) == tolerant_hash(-0.0)
    assert tolerant_hash(1.0, 2.0) == tolerant_hash(1.0 + 1e-13, 2.0 - 1e-13)


def test_tolerant_hash_splits_equal_values_across_a_rounding_boundary():
    below, above = 4.999e-11, 5.001e-11
    assert almost_equal(below, above)
    assert tolerant_hash(below) != tolerant_hash(above)
    assert tolerant_hash(precision.round_float(below)) == tolerant_hash(0.0)
    assert "rounding boundary" in tolerant_hash.__doc__


@pytest.mark.parametrize(
    "parameter, expected", [(0.0, 2.0), (0.25, 3.0), (1.0, 6.0), (1.5, 8.0), (-1.0, -2.0)]
)
def test_interpolate_from(parameter, expected):
    assert interpolate_from(2.0, 6.0, parameter) == pytest.approx(expected)


def test_interpolate_from_reproduces_endpoints_exactly():
    start, finish = 0.1, 1e10
    assert interpolate_from(start, finish, 0.0) == start
    assert interpolate_from(start, finish, 1.0) == finish
