"""Core scheduling primitives."""
from subscription_schedule.core.exceptions import (
    FrequencyChangeError,
    InvalidArgumentError,
    SubscriptionScheduleError,
    UnsupportedFrequencyError,
)
from subscription_schedule.core.recurrence import EPOCH, Frequency

__all__ = [
    "EPOCH",
    "Frequency",
    "SubscriptionScheduleError",
    "InvalidArgumentError",
    "UnsupportedFrequencyError",
    "FrequencyChangeError",
]
