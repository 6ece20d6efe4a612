"""Application configuration using Pydantic settings."""

from datetime import date
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from subscription_schedule.core.recurrence import EPOCH, Frequency


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SUBSCRIPTION_SCHEDULE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    debug: bool = Field(default=False, description="Debug mode")
    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Environment"
    )

    # Scheduling
    epoch: date = Field(default=EPOCH, description="Reference date residues are measured from")
    default_frequency: Frequency = Field(
        default=Frequency.DAILY, description="Frequency used when none is given"
    )
    max_batch_size: int = Field(
        default=10_000, gt=0, description="Maximum number of dates returned by one batch query"
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
