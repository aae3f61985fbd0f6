"""Data models for error log entries, configuration and summaries."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from common.constants import DEFAULT_LOG_LOCATION, DEFAULT_MAX_AGE_DAYS, DEFAULT_MAX_ENTRIES


class ErrorCategory(str, Enum):
    """Closed set of failure categories.

    Declaration order is the order used when reporting counts.
    """

    EXTRACTION = "extraction"
    VALIDATION = "validation"
    FILE_OPERATION = "file_operation"
    LLM = "llm"
    UNKNOWN = "unknown"


def empty_counts() -> dict[ErrorCategory, int]:
    """Return a fresh count table with every category at zero."""
    return {category: 0 for category in ErrorCategory}


def format_timestamp(moment: datetime) -> str:
    """Render a datetime as a UTC ISO-8601 string with millisecond precision.

    Naive datetimes are taken to be UTC already.

    Example:
        >>> format_timestamp(datetime(2024, 12, 7, 10, 30, tzinfo=timezone.utc))
        '2024-12-07T10:30:00.000Z'
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def parse_timestamp(text: str) -> datetime | None:
    """Parse an ISO-8601 timestamp into an aware UTC datetime.

    Accepts a trailing ``Z``, an explicit offset, or a naive value (read as UTC).

    Returns:
        The parsed datetime, or None if the text is not a valid timestamp
    """
    value = text.strip()
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"

    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


@dataclass
class LogEntry:
    """A single recorded failure."""

    timestamp: str
    path: str
    attempts: int
    error: str
    category: ErrorCategory
    details: str | None = None

    @property
    def recorded_at(self) -> datetime | None:
        """Timestamp as an aware UTC datetime, or None if it cannot be parsed."""
        return parse_timestamp(self.timestamp)


@dataclass(frozen=True)
class LoggerConfig:
    """Retention limits and location of the error log document.

    Attributes:
        max_entries: Maximum number of entries kept after rotation
        max_age_days: Entries older than this many days are evicted on rotation
        log_location: Vault-relative location of the log document
    """

    max_entries: int = DEFAULT_MAX_ENTRIES
    max_age_days: int = DEFAULT_MAX_AGE_DAYS
    log_location: str = DEFAULT_LOG_LOCATION

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.max_entries < 0:
            raise ValueError(f"max_entries must be non-negative, got {self.max_entries}")
        if self.max_age_days < 0:
            raise ValueError(f"max_age_days must be non-negative, got {self.max_age_days}")
        if not self.log_location or not self.log_location.strip():
            raise ValueError("log_location must not be empty")

    @classmethod
    def from_env(cls) -> "LoggerConfig":
        """Build a config from ERROR_LOG_* environment variables."""
        from common.env import env

        return cls(
            max_entries=env.error_log_max_entries(),
            max_age_days=env.error_log_max_age_days(),
            log_location=env.error_log_path(),
        )


@dataclass
class ErrorLogSummary:
    """Aggregated view of the retained entries."""

    total_count: int
    counts_by_category: dict[ErrorCategory, int] = field(default_factory=empty_counts)
    entries: list[LogEntry] = field(default_factory=list)
