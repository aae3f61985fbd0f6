"""Tests for error log data models."""

from datetime import datetime, timedelta, timezone

import pytest

from error_log.models import (
    ErrorCategory,
    LogEntry,
    LoggerConfig,
    empty_counts,
    format_timestamp,
    parse_timestamp,
)


class TestTimestamps:
    """Tests for timestamp formatting and parsing."""

    def test_format_millisecond_precision(self):
        """Test the written timestamp format."""
        moment = datetime(2024, 12, 7, 10, 30, 0, 123456, tzinfo=timezone.utc)
        assert format_timestamp(moment) == "2024-12-07T10:30:00.123Z"

    def test_format_converts_to_utc(self):
        """Test that offsets are converted to UTC."""
        moment = datetime(2024, 12, 7, 12, 30, tzinfo=timezone(timedelta(hours=2)))
        assert format_timestamp(moment) == "2024-12-07T10:30:00.000Z"

    def test_parse_zulu(self):
        """Test parsing a Z-suffixed timestamp."""
        parsed = parse_timestamp("2024-12-07T10:30:00.000Z")
        assert parsed == datetime(2024, 12, 7, 10, 30, tzinfo=timezone.utc)

    def test_parse_naive_is_utc(self):
        """Test that a timestamp without offset is read as UTC."""
        parsed = parse_timestamp("2024-12-07T10:30:00")
        assert parsed.tzinfo is not None
        assert parsed == datetime(2024, 12, 7, 10, 30, tzinfo=timezone.utc)

    def test_parse_invalid(self):
        """Test that garbage yields None."""
        assert parse_timestamp("2024-13-45T99:99") is None

    def test_entry_recorded_at(self):
        """Test the parsed timestamp property."""
        entry = LogEntry(
            timestamp="2024-12-07T10:30:00.000Z",
            path="a.md",
            attempts=1,
            error="x",
            category=ErrorCategory.UNKNOWN,
        )
        assert entry.recorded_at == datetime(2024, 12, 7, 10, 30, tzinfo=timezone.utc)


class TestLoggerConfig:
    """Tests for LoggerConfig."""

    def test_defaults(self):
        """Test default limits and location."""
        config = LoggerConfig()
        assert config.max_entries == 100
        assert config.max_age_days == 30
        assert config.log_location == "CareerOS/error_log.md"

    def test_is_immutable(self):
        """Test that config cannot be changed after creation."""
        config = LoggerConfig()
        with pytest.raises(AttributeError):
            config.max_entries = 5

    @pytest.mark.parametrize(
        "kwargs",
        [{"max_entries": -1}, {"max_age_days": -1}, {"log_location": "  "}],
    )
    def test_rejects_invalid_values(self, kwargs):
        """Test validation in __post_init__."""
        with pytest.raises(ValueError):
            LoggerConfig(**kwargs)

    def test_from_env(self, monkeypatch):
        """Test building config from environment variables."""
        monkeypatch.setenv("ERROR_LOG_MAX_ENTRIES", "5")
        monkeypatch.setenv("ERROR_LOG_MAX_AGE_DAYS", "3")
        monkeypatch.setenv("ERROR_LOG_PATH", "logs/errors.md")

        config = LoggerConfig.from_env()

        assert config == LoggerConfig(max_entries=5, max_age_days=3, log_location="logs/errors.md")


def test_empty_counts_has_every_category():
    """Test that empty_counts covers all five categories at zero."""
    counts = empty_counts()
    assert set(counts) == set(ErrorCategory)
    assert all(count == 0 for count in counts.values())
