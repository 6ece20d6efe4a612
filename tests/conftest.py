"""Test fixtures and configuration."""
import logging
from datetime import date
from typing import Generator

import pytest

from subscription_schedule.config import get_settings
from subscription_schedule.core.recurrence import EPOCH


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def beginning() -> date:
    """The epoch residues are measured from."""
    return EPOCH


@pytest.fixture
def restore_package_logger() -> Generator[logging.Logger, None, None]:
    """Restore package logger handlers, level and propagation changed by setup_logging."""
    package_logger = logging.getLogger("subscription_schedule")
    handlers = package_logger.handlers[:]
    level = package_logger.level
    propagate = package_logger.propagate
    yield package_logger
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
    for handler in handlers:
        package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = propagate
