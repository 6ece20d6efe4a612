"""Recurrence utilities."""

from collections.abc import Callable
from datetime import date
from enum import Enum
from typing import Final

from dateutil.relativedelta import relativedelta

from subscription_schedule.core.exceptions import UnsupportedFrequencyError

# Reference date every residue is measured from
EPOCH: Final[date] = date(2014, 1, 1)


class Frequency(str, Enum):
    """Subscription frequency enum."""

    DAILY = "daily"
    MONTHLY = "monthly"


def coerce_frequency(frequency: Frequency | str) -> Frequency:
    """
    Convert a frequency value into a Frequency member.

    Args:
        frequency: A Frequency or its string value

    Returns:
        The matching Frequency

    Raises:
        UnsupportedFrequencyError: If the value is not daily or monthly
    """
    if isinstance(frequency, Frequency):
        return frequency
    try:
        return Frequency(frequency)
    except ValueError:
        raise UnsupportedFrequencyError(frequency) from None


def day_difference(later: date, earlier: date) -> int:
    """Signed number of days from earlier to later."""
    return (later - earlier).days


def month_difference(later: date, earlier: date) -> int:
    """Signed number of calendar months from earlier to later, ignoring the day."""
    return (later.year - earlier.year) * 12 + (later.month - earlier.month)


_STEPS: dict[Frequency, Callable[[int], relativedelta]] = {
    Frequency.DAILY: lambda n: relativedelta(days=n),
    Frequency.MONTHLY: lambda n: relativedelta(months=n),
}

_DIFFERENCES: dict[Frequency, Callable[[date, date], int]] = {
    Frequency.DAILY: day_difference,
    Frequency.MONTHLY: month_difference,
}


def add_units(value: date, frequency: Frequency, n: int) -> date:
    """
    Advance a date by n units of the given frequency.

    Monthly steps clamp the day of month for short months
    (2014-01-31 plus one month is 2014-02-28).

    Args:
        value: The date to advance
        frequency: Unit of n
        n: Number of days or months, may be negative

    Returns:
        The shifted date
    """
    try:
        step = _STEPS[frequency]
    except KeyError:
        raise UnsupportedFrequencyError(frequency) from None
    return value + step(n)


def units_between(later: date, earlier: date, frequency: Frequency) -> int:
    """Signed count of frequency units between two dates."""
    try:
        difference = _DIFFERENCES[frequency]
    except KeyError:
        raise UnsupportedFrequencyError(frequency) from None
    return difference(later, earlier)
