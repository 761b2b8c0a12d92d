"""
Module: conftest.py
Description: Shared pytest fixtures for simple_queue tests.

Provides sample queue identities, raw SQS attribute maps, and a way to
override package settings for a single test.
"""

import pytest
import structlog
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from simple_queue.config import settings as settings_module
from simple_queue.models.queue import SimpleQueue


class TestSettings(BaseSettings):
    """Test settings that don't require environment variables."""

    model_config = SettingsConfigDict(
        env_file=None,  # Disable .env file loading for tests
        case_sensitive=False,
        extra="ignore"
    )

    log_level: str = Field(default="DEBUG", description="Logging level")
    display_timezone: str = Field(default="UTC", description="Display time zone")
    strict_attribute_formatting: bool = Field(
        default=False,
        description="Raise on unformattable attribute values"
    )


@pytest.fixture
def test_settings():
    """Provide test configuration settings with .env loading disabled."""
    return TestSettings()


@pytest.fixture
def override_settings(monkeypatch, test_settings):
    """
    Apply test settings to the global settings instance.

    Returns a function accepting keyword overrides, e.g.
    override_settings(strict_attribute_formatting=True).
    """
    def _apply(**overrides):
        values = test_settings.model_dump()
        values.update(overrides)
        for key, value in values.items():
            monkeypatch.setattr(settings_module.settings, key, value)
        return settings_module.settings

    return _apply


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore structlog defaults after each test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def sample_queue():
    """Provide a queue identity in us-east-1."""
    return SimpleQueue.from_parts("us-east-1", "123456789012", "order-events")


@pytest.fixture
def sample_attributes():
    """
    Provide a typical GetQueueAttributes response body.

    Values are strings, as SQS returns them.
    """
    return {
        "VisibilityTimeout": "30",
        "MaximumMessageSize": "262144",
        "MessageRetentionPeriod": "345600",
        "DelaySeconds": "0",
        "CreatedTimestamp": "1400000000",
        "LastModifiedTimestamp": "1400003661",
        "ApproximateNumberOfMessages": "7",
        "QueueArn": "arn:aws:sqs:us-east-1:123456789012:order-events",
    }
