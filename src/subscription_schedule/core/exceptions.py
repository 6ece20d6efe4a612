"""Subscription schedule errors."""


class SubscriptionScheduleError(Exception):
    """Base class for all schedule errors."""


class InvalidArgumentError(SubscriptionScheduleError, ValueError):
    """Raised when an interval, date or batch size is out of range."""


class UnsupportedFrequencyError(SubscriptionScheduleError, ValueError):
    """Raised for a frequency outside daily/monthly."""

    def __init__(self, frequency: object) -> None:
        self.frequency = frequency
        super().__init__(f"Unsupported frequency: {frequency!r}")


class FrequencyChangeError(SubscriptionScheduleError, AttributeError):
    """Raised when frequency is reassigned after construction."""
