"""Durations, stored in seconds."""

from ..quantity import Quantity
from ..types import Duration
from . import conversions


def seconds(value: float) -> Duration:
    """Construct a duration from a number of seconds."""
    return Quantity(value)


def in_seconds(duration: Duration) -> float:
    """Convert a duration to a number of seconds."""
    return duration.unwrap()


def milliseconds(value: float) -> Duration:
    """Construct a duration from a number of milliseconds."""
    return seconds(0.001 * value)


def in_milliseconds(duration: Duration) -> float:
    """Convert a duration to a number of milliseconds."""
    return in_seconds(duration) * 1000.0


def minutes(value: float) -> Duration:
    """Construct a duration from a number of minutes."""
    return seconds(conversions.MINUTE * value)


def in_minutes(duration: Duration) -> float:
    """Convert a duration to a number of minutes."""
    return in_seconds(duration) / conversions.MINUTE


def hours(value: float) -> Duration:
    """Construct a duration from a number of hours."""
    return seconds(conversions.HOUR * value)


def in_hours(duration: Duration) -> float:
    """Convert a duration to a number of hours."""
    return in_seconds(duration) / conversions.HOUR


def days(value: float) -> Duration:
    """Construct a duration from a number of days."""
    return seconds(conversions.DAY * value)


def in_days(duration: Duration) -> float:
    """Convert a duration to a number of days."""
    return in_seconds(duration) / conversions.DAY


def weeks(value: float) -> Duration:
    """Construct a duration from a number of weeks."""
    return seconds(conversions.WEEK * value)


def in_weeks(duration: Duration) -> float:
    """Convert a duration to a number of weeks."""
    return in_seconds(duration) / conversions.WEEK


def julian_years(value: float) -> Duration:
    """Construct a duration from Julian years of exactly 365.25 days."""
    return seconds(conversions.JULIAN_YEAR * value)


def in_julian_years(duration: Duration) -> float:
    """Convert a duration to a number of julian years."""
    return in_seconds(duration) / conversions.JULIAN_YEAR


SECOND = seconds(1.0)
MILLISECOND = milliseconds(1.0)
MINUTE = minutes(1.0)
HOUR = hours(1.0)
DAY = days(1.0)
WEEK = weeks(1.0)
JULIAN_YEAR = julian_years(1.0)
