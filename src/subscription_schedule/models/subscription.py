"""Subscription model."""

import logging
from collections.abc import Mapping
from datetime import date, datetime
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from subscription_schedule.config import get_settings
from subscription_schedule.core.exceptions import (
    FrequencyChangeError,
    InvalidArgumentError,
    UnsupportedFrequencyError,
)
from subscription_schedule.core.recurrence import (
    EPOCH,
    Frequency,
    add_units,
    coerce_frequency,
    units_between,
)

if TYPE_CHECKING:
    from subscription_schedule.schemas.subscription import (
        ProcessingDatesResponse,
        SubscriptionResponse,
    )

logger = logging.getLogger(__name__)


def _validate_interval(interval: Any) -> int:
    if isinstance(interval, bool) or not isinstance(interval, int):
        raise InvalidArgumentError(f"interval must be an integer, got {interval!r}")
    if interval <= 0:
        raise InvalidArgumentError(f"interval must be positive, got {interval}")
    return interval


def _validate_date(value: Any, name: str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if not isinstance(value, date):
        raise InvalidArgumentError(f"{name} must be a date, got {value!r}")
    return value


class Subscription:
    """
    Recurring subscription scheduled by residue class.

    Every date is reduced to its offset from the epoch (in days or months,
    depending on frequency) modulo the interval. The subscription is processed
    on exactly the dates whose offset shares the residue of its start date, so
    membership and next-date queries are constant time no matter how far the
    queried date is from the start date.
    """

    def __init__(
        self,
        interval: int,
        start_date: date,
        frequency: Frequency | str | None = Frequency.DAILY,
        epoch: date = EPOCH,
    ) -> None:
        if frequency is None:
            frequency = Frequency.DAILY
        self._frequency = coerce_frequency(frequency)
        self._epoch = _validate_date(epoch, "epoch")
        self._interval = _validate_interval(interval)
        self._start_date = _validate_date(start_date, "start_date")
        self._compute_residue()

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "Subscription":
        """
        Build a subscription from a mapping of field values.

        None values are treated as absent, so a missing or None frequency
        falls back to the configured default.

        Args:
            mapping: Keys interval, start_date and optionally frequency

        Returns:
            A new subscription

        Raises:
            InvalidArgumentError: If a field is missing, malformed or unknown
            UnsupportedFrequencyError: If frequency is not daily or monthly
        """
        from subscription_schedule.schemas.subscription import SubscriptionCreate

        settings = get_settings()
        data = {key: value for key, value in mapping.items() if value is not None}
        data.setdefault("frequency", settings.default_frequency)

        try:
            payload = SubscriptionCreate.model_validate(data)
        except ValidationError as exc:
            if any(error["loc"] == ("frequency",) for error in exc.errors()):
                raise UnsupportedFrequencyError(data["frequency"]) from exc
            raise InvalidArgumentError(str(exc)) from exc

        return payload.to_subscription(epoch=settings.epoch)

    @property
    def interval(self) -> int:
        return self._interval

    @interval.setter
    def interval(self, value: int) -> None:
        self._interval = _validate_interval(value)
        self._compute_residue()

    @property
    def start_date(self) -> date:
        return self._start_date

    @start_date.setter
    def start_date(self, value: date) -> None:
        self._start_date = _validate_date(value, "start_date")
        self._compute_residue()

    @property
    def frequency(self) -> Frequency:
        return self._frequency

    @frequency.setter
    def frequency(self, value: Frequency | str) -> None:
        raise FrequencyChangeError(
            "frequency is fixed at construction; create a new Subscription instead"
        )

    @property
    def epoch(self) -> date:
        return self._epoch

    @property
    def residue(self) -> int:
        return self._residue

    def process_on(self, value: date) -> bool:
        """Check whether the subscription is processed on the given date."""
        return self._residue_for_date(_validate_date(value, "date")) == self._residue

    def next_processing_date(self, from_date: date) -> date:
        """
        Get the first processing date on or after from_date.

        Args:
            from_date: Date to search from (inclusive)

        Returns:
            from_date itself if it is a processing date, otherwise the next one
        """
        from_date = _validate_date(from_date, "from_date")
        delta = (self._residue - self._residue_for_date(from_date)) % self._interval
        return add_units(from_date, self._frequency, delta)

    def next_n_processing_dates(self, n: int, from_date: date) -> list[date]:
        """
        Get the next n processing dates on or after from_date.

        Args:
            n: Number of dates to return, zero or more
            from_date: Date to search from (inclusive)

        Returns:
            n dates in increasing order, each one interval apart

        Raises:
            InvalidArgumentError: If n is negative or exceeds the batch limit
        """
        if isinstance(n, bool) or not isinstance(n, int):
            raise InvalidArgumentError(f"n must be an integer, got {n!r}")
        if n < 0:
            raise InvalidArgumentError(f"n must not be negative, got {n}")
        max_batch_size = get_settings().max_batch_size
        if n > max_batch_size:
            raise InvalidArgumentError(f"n must not exceed {max_batch_size}, got {n}")

        first = self.next_processing_date(from_date)
        # Offsets are taken from the first date so monthly clamping never accumulates
        return [add_units(first, self._frequency, self._interval * i) for i in range(n)]

    def schedule(self, n: int, from_date: date) -> "ProcessingDatesResponse":
        """Get the next n processing dates wrapped in a response schema."""
        from subscription_schedule.schemas.subscription import ProcessingDatesResponse

        return ProcessingDatesResponse(dates=self.next_n_processing_dates(n, from_date))

    def to_schema(self) -> "SubscriptionResponse":
        """Serialize the subscription state."""
        from subscription_schedule.schemas.subscription import SubscriptionResponse

        return SubscriptionResponse.model_validate(self)

    def _residue_for_date(self, value: date) -> int:
        return units_between(value, self._epoch, self._frequency) % self._interval

    def _compute_residue(self) -> None:
        self._residue = self._residue_for_date(self._start_date)
        logger.debug(
            "Computed residue %d for %s subscription every %d starting %s",
            self._residue,
            self._frequency.value,
            self._interval,
            self._start_date.isoformat(),
            extra={
                "interval": self._interval,
                "start_date": self._start_date.isoformat(),
                "frequency": self._frequency.value,
                "residue": self._residue,
            },
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Subscription):
            return NotImplemented
        return (
            self._interval == other._interval
            and self._start_date == other._start_date
            and self._frequency == other._frequency
            and self._epoch == other._epoch
        )

    def __repr__(self) -> str:
        return (
            f"Subscription(interval={self._interval}, start_date={self._start_date.isoformat()}, "
            f"frequency={self._frequency.value}, residue={self._residue})"
        )
