"""Shared types and exceptions for the document storage layer."""

from enum import Enum


class StorageType(str, Enum):
    """Supported storage backends."""

    FILESYSTEM = "filesystem"
    MEMORY = "memory"


class StorageError(Exception):
    """Base exception for storage operations."""

    pass


class DocumentNotFoundError(StorageError):
    """Document does not exist."""

    pass


class DocumentExistsError(StorageError):
    """Document already exists where one was to be created."""

    pass


def normalize_location(location: str) -> str:
    """Normalize a vault-relative document location.

    Backslashes become forward slashes, repeated separators collapse and
    leading or trailing slashes are dropped.

    Example:
        >>> normalize_location("/CareerOS//logs/error_log.md/")
        'CareerOS/logs/error_log.md'
    """
    parts = [part for part in location.replace("\\", "/").split("/") if part]
    return "/".join(parts)


def parent_location(location: str) -> str:
    """Return the folder part of a location, or '' for a top-level document."""
    normalized = normalize_location(location)
    if "/" not in normalized:
        return ""
    return normalized.rsplit("/", 1)[0]
