"""Unit tests for logging configuration."""
import json
import logging
from datetime import date

from subscription_schedule.config import Settings
from subscription_schedule.core.logging import JsonFormatter, setup_logging
from subscription_schedule.models import Subscription


def make_record(**extra) -> logging.LogRecord:
    """Build a debug record from the subscription model logger."""
    record = logging.LogRecord(
        name="subscription_schedule.models.subscription",
        level=logging.DEBUG,
        pathname=__file__,
        lineno=1,
        msg="Computed residue %d",
        args=(5,),
        exc_info=None,
    )
    record.__dict__.update(extra)
    return record


def test_package_logger_has_null_handler():
    """Test that importing the package does not print log records."""
    handlers = logging.getLogger("subscription_schedule").handlers
    assert any(isinstance(handler, logging.NullHandler) for handler in handlers)


def test_setup_logging_development(restore_package_logger):
    """Test plain text logging outside production."""
    logger = setup_logging(Settings(environment="development"))

    assert logger is restore_package_logger
    assert logger.level == logging.INFO
    assert logger.propagate is False
    assert len(logger.handlers) == 1
    handler = logger.handlers[0]
    assert isinstance(handler, logging.StreamHandler)
    assert not isinstance(handler.formatter, JsonFormatter)


def test_setup_logging_production(restore_package_logger):
    """Test JSON logging in production."""
    logger = setup_logging(Settings(environment="production"))

    assert isinstance(logger.handlers[0].formatter, JsonFormatter)


def test_setup_logging_debug(restore_package_logger):
    """Test debug level."""
    logger = setup_logging(Settings(debug=True))
    assert logger.level == logging.DEBUG


def test_setup_logging_writes_residue_as_json(restore_package_logger, capsys):
    """Test that residue recomputation reaches stdout as JSON in production."""
    setup_logging(Settings(environment="production", debug=True))

    Subscription(interval=14, start_date=date(2014, 1, 6))

    lines = capsys.readouterr().out.strip().splitlines()
    log_record = json.loads(lines[-1])
    assert log_record["name"] == "subscription_schedule.models.subscription"
    assert log_record["subscription"] == {
        "interval": 14,
        "start_date": "2014-01-06",
        "frequency": "daily",
        "residue": 5,
    }


def test_json_formatter():
    """Test JSON log record format."""
    log_record = json.loads(JsonFormatter().format(make_record()))

    assert log_record["level"] == "DEBUG"
    assert log_record["name"] == "subscription_schedule.models.subscription"
    assert log_record["message"] == "Computed residue 5"
    assert "timestamp" in log_record
    assert "subscription" not in log_record
    assert "exception" not in log_record


def test_json_formatter_includes_subscription_fields():
    """Test that subscription fields passed as extra are emitted."""
    record = make_record(interval=7, residue=5, color="red")

    log_record = json.loads(JsonFormatter().format(record))

    assert log_record["subscription"] == {"interval": 7, "residue": 5}
