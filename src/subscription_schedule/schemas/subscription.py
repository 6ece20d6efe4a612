"""Subscription Pydantic schemas."""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from subscription_schedule.core.recurrence import EPOCH, Frequency
from subscription_schedule.models.subscription import Subscription


class SubscriptionBase(BaseModel):
    """Base subscription schema."""

    interval: int = Field(
        ..., gt=0, strict=True, description="Recurrence period in frequency units"
    )
    start_date: date = Field(..., description="Date the recurrence is anchored to")
    frequency: Frequency = Field(Frequency.DAILY, description="Unit of the interval")


class SubscriptionCreate(SubscriptionBase):
    """Schema for creating a subscription."""

    model_config = ConfigDict(extra="forbid")

    @field_validator("start_date", mode="before")
    @classmethod
    def truncate_datetime(cls, v: Any) -> Any:
        """Reduce a datetime start date to its calendar date."""
        if isinstance(v, datetime):
            return v.date()
        return v

    def to_subscription(self, epoch: date = EPOCH) -> Subscription:
        """Build the subscription described by this schema."""
        return Subscription(
            interval=self.interval,
            start_date=self.start_date,
            frequency=self.frequency,
            epoch=epoch,
        )


class SubscriptionResponse(SubscriptionBase):
    """Schema for subscription response."""

    residue: int = Field(..., ge=0, description="Residue class of the processing dates")

    model_config = ConfigDict(from_attributes=True)


class ProcessingDatesResponse(BaseModel):
    """Schema for a batch of upcoming processing dates."""

    dates: list[date]
