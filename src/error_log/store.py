"""Persistent error log with retention.

ErrorLogStore owns a single markdown document in a DocumentStorage backend.
Each failure is recorded as a new block at the top of the document, and every
append is followed by a rotation pass that evicts entries beyond the age and
count limits.

Each operation is a read-modify-write of the whole document, so operations on
the same document are serialized with a lock shared by every store in the
process that reaches it, whichever storage object it goes through. Storage
errors are never caught here: a caller that fails to record a failure finds
out and decides what to do next.
"""

import threading
from collections.abc import Callable, Hashable
from datetime import datetime, timedelta, timezone

from common.logger import get_logger

from .categorizer import categorize
from .codec import LOG_HEADER, build_document, decode_document, encode_entry, insert_after_header
from .models import ErrorCategory, ErrorLogSummary, LogEntry, LoggerConfig, format_timestamp
from .storage import DocumentStorage, normalize_location
from .summary import summarize

logger = get_logger(__name__)

_registry_lock = threading.Lock()
_document_locks: dict[Hashable, threading.Lock] = {}


def _document_lock(storage: DocumentStorage, location: str) -> threading.Lock:
    """Return the lock guarding one document, shared by every backend that reaches it."""
    key = storage.lock_key(location)
    with _registry_lock:
        return _document_locks.setdefault(key, threading.Lock())


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ErrorLogStore:
    """Append-only, self-rotating error log document.

    Example:
        >>> store = ErrorLogStore(MemoryStorage(), LoggerConfig(max_entries=50))
        >>> entry = store.log_failure("notes/x.md", "Connection timeout", attempts=3)
        >>> store.counts_by_category()[ErrorCategory.LLM]
        1
    """

    def __init__(
        self,
        storage: DocumentStorage,
        config: LoggerConfig | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        """Initialize the store.

        Args:
            storage: Backend holding the log document
            config: Retention limits and log location (defaults if None)
            clock: Returns the current time as an aware datetime
        """
        self.storage = storage
        self.config = config or LoggerConfig()
        self.location = normalize_location(self.config.log_location)
        self._clock = clock or _utc_now
        self._lock = _document_lock(storage, self.location)

    def log_failure(
        self,
        path: str,
        error: str,
        attempts: int = 1,
        category: ErrorCategory | str | None = None,
        details: str | None = None,
    ) -> LogEntry:
        """Record a failure at the top of the log, then rotate.

        Args:
            path: Resource the failure relates to (usually a note path)
            error: Failure message
            attempts: Attempts made before giving up
            category: Failure category, derived from the message if None
            details: Optional extra context

        Returns:
            The entry that was written

        Raises:
            ValueError: If attempts is negative or category is not a known value
            StorageError: If the log document cannot be read or written
        """
        if attempts < 0:
            raise ValueError(f"attempts must be non-negative, got {attempts}")

        entry = LogEntry(
            timestamp=format_timestamp(self._clock()),
            path=path,
            attempts=attempts,
            error=error,
            category=categorize(error) if category is None else ErrorCategory(category),
            details=details,
        )
        block = encode_entry(entry)

        with self._lock:
            self.storage.ensure_parent(self.location)
            if self.storage.exists(self.location):
                document = self.storage.read(self.location)
                self.storage.write(self.location, insert_after_header(document, block))
            else:
                self.storage.create(self.location, LOG_HEADER + block)

            logger.debug(f"Logged {entry.category.value} failure for {path}")
            self._rotate()

        return entry

    def log_llm_failure(
        self, path: str, error: str, attempts: int, details: str | None = None
    ) -> LogEntry:
        """Record an LLM/API failure."""
        return self.log_failure(path, error, attempts, ErrorCategory.LLM, details)

    def log_validation_failure(self, path: str, error: str, details: str | None = None) -> LogEntry:
        """Record a schema validation failure."""
        return self.log_failure(path, error, category=ErrorCategory.VALIDATION, details=details)

    def log_file_failure(self, path: str, error: str, details: str | None = None) -> LogEntry:
        """Record a file operation failure."""
        return self.log_failure(path, error, category=ErrorCategory.FILE_OPERATION, details=details)

    def log_extraction_failure(
        self, path: str, error: str, attempts: int, details: str | None = None
    ) -> LogEntry:
        """Record an extraction failure."""
        return self.log_failure(path, error, attempts, ErrorCategory.EXTRACTION, details)

    def rotate(self) -> int:
        """Evict entries beyond the age and count limits.

        The document is rewritten only if something was evicted, so calling
        this repeatedly without new appends leaves storage untouched.

        Returns:
            Number of entries evicted
        """
        with self._lock:
            return self._rotate()

    def _rotate(self) -> int:
        if not self.storage.exists(self.location):
            return 0

        entries = decode_document(self.storage.read(self.location))
        cutoff = self._clock() - timedelta(days=self.config.max_age_days)

        # Entries with an unreadable timestamp are only subject to the count limit
        kept = [
            entry
            for entry in entries
            if entry.recorded_at is None or entry.recorded_at >= cutoff
        ]
        # Document order is newest first, so the front holds the newest entries
        kept = kept[: self.config.max_entries]

        evicted = len(entries) - len(kept)
        if evicted:
            self.storage.write(self.location, build_document(kept))
            logger.info(f"Rotated error log {self.location}: evicted {evicted} entries")

        return evicted

    def clear(self) -> None:
        """Remove every entry, keeping only the header."""
        with self._lock:
            if not self.storage.exists(self.location):
                return
            self.storage.write(self.location, LOG_HEADER)
            logger.info(f"Cleared error log {self.location}")

    def read_all(self) -> list[LogEntry]:
        """Return all retained entries, newest first."""
        with self._lock:
            if not self.storage.exists(self.location):
                return []
            return decode_document(self.storage.read(self.location))

    def counts_by_category(self) -> dict[ErrorCategory, int]:
        """Return entry counts for every category, zeros included."""
        return summarize(self.read_all()).counts_by_category

    def error_count(self) -> int:
        """Return the number of retained entries."""
        return len(self.read_all())

    def summary(self) -> ErrorLogSummary:
        """Return the aggregated view of the retained entries."""
        return summarize(self.read_all())


def create_error_log(
    storage: DocumentStorage | None = None, config: LoggerConfig | None = None
) -> ErrorLogStore:
    """Create a store, filling in storage and config from the environment.

    Args:
        storage: Backend to use, or None to build one from ERROR_LOG_STORAGE and VAULT_DIR
        config: Limits and location, or None to read ERROR_LOG_* variables
    """
    if storage is None:
        from .storage import get_storage

        storage = get_storage()

    return ErrorLogStore(storage, config or LoggerConfig.from_env())


def get_error_log() -> ErrorLogStore:
    """Create a store configured entirely from the environment.

    Reads ERROR_LOG_STORAGE and VAULT_DIR for the backend, and ERROR_LOG_PATH,
    ERROR_LOG_MAX_ENTRIES and ERROR_LOG_MAX_AGE_DAYS for the config. Every
    call builds a fresh store; stores for the same document share its lock.

    Example:
        >>> store = get_error_log()
        >>> store.log_llm_failure("notes/x.md", "Rate limit exceeded", attempts=3)
    """
    return create_error_log()
