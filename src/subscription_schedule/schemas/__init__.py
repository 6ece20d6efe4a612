"""Pydantic schemas for input validation and serialization."""
from subscription_schedule.schemas.subscription import (
    ProcessingDatesResponse,
    SubscriptionCreate,
    SubscriptionResponse,
)

__all__ = [
    "SubscriptionCreate",
    "SubscriptionResponse",
    "ProcessingDatesResponse",
]
