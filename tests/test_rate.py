import math

import pytest

from math_units import rate
from math_units.catalog import duration, electrical, length, pixels, speed


def test_rate_divides_dependent_by_independent():
    walking = rate.rate(length.meters(10), duration.seconds(2))
    assert walking == speed.meters_per_second(5)


def test_per_flips_arguments():
    assert rate.per(duration.seconds(2), length.meters(10)) == rate.rate(
        length.meters(10), duration.seconds(2)
    )


def test_at_and_for_multiply_by_the_independent_amount():
    driving = speed.kilometers_per_hour(100)
    assert rate.at(driving, duration.minutes(30)) == length.kilometers(50)
    assert rate.for_(duration.minutes(30), driving) == length.kilometers(50)


def test_at_underscore_solves_for_the_independent_amount():
    driving = speed.kilometers_per_hour(100)
    assert rate.at_(driving, length.kilometers(25)) == duration.minutes(15)


def test_inverse():
    pace = rate.inverse(speed.meters_per_second(4))
    assert pace.unwrap() == pytest.approx(0.25)
    assert rate.at(pace, length.meters(100)) == duration.seconds(25)


def test_rate_product_cancels_the_shared_unit():
    resolution = rate.rate(pixels.pixels(96), length.inches(1))
    scrolling = rate.rate(length.inches(2), duration.seconds(1))
    combined = rate.rate_product(resolution, scrolling)
    assert rate.at(combined, duration.seconds(3)) == pixels.pixels(576)


def test_current_is_charge_per_duration():
    current = rate.rate(electrical.coulombs(7200), duration.hours(1))
    assert current == electrical.amperes(2)


def test_zero_independent_amount_follows_ieee():
    assert rate.rate(length.meters(1), duration.seconds(0)).unwrap() == math.inf
    assert rate.rate(length.meters(-1), duration.seconds(0)).unwrap() == -math.inf
    assert math.isnan(rate.rate(length.meters(0), duration.seconds(0)).unwrap())
    assert rate.inverse(speed.meters_per_second(0)).unwrap() == math.inf
    assert rate.at_(speed.meters_per_second(0), length.meters(3)).unwrap() == math.inf
