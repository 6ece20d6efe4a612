"""Domain models."""
from subscription_schedule.core.recurrence import EPOCH, Frequency
from subscription_schedule.models.subscription import Subscription

__all__ = [
    "EPOCH",
    "Frequency",
    "Subscription",
]
