"""Residue-class scheduling for recurring subscriptions."""
import logging

from subscription_schedule.core.exceptions import (
    FrequencyChangeError,
    InvalidArgumentError,
    SubscriptionScheduleError,
    UnsupportedFrequencyError,
)
from subscription_schedule.core.recurrence import EPOCH, Frequency
from subscription_schedule.models.subscription import Subscription

__all__ = [
    "EPOCH",
    "Frequency",
    "Subscription",
    "SubscriptionScheduleError",
    "InvalidArgumentError",
    "UnsupportedFrequencyError",
    "FrequencyChangeError",
]

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
