"""In-memory storage adapter.

Useful when the host application owns persistence, and in tests. Write
counts are tracked per location so callers can tell whether a document was
rewritten.
"""

from collections import Counter

from .interface import DocumentStorage
from .types import (
    DocumentExistsError,
    DocumentNotFoundError,
    normalize_location,
    parent_location,
)


class MemoryStorage(DocumentStorage):
    """Document storage held in a dictionary."""

    def __init__(self, documents: dict[str, str] | None = None):
        """Initialize memory storage.

        Args:
            documents: Optional initial documents keyed by location
        """
        self.documents: dict[str, str] = {
            normalize_location(location): text for location, text in (documents or {}).items()
        }
        self.folders: set[str] = set()
        self.write_counts: Counter[str] = Counter()

    def lock_key(self, location: str) -> tuple[int, str]:
        # Documents live in this object, so its identity is part of the key
        return (id(self), normalize_location(location))

    def exists(self, location: str) -> bool:
        return normalize_location(location) in self.documents

    def read(self, location: str) -> str:
        key = normalize_location(location)
        if key not in self.documents:
            raise DocumentNotFoundError(f"Document not found: {location}")
        return self.documents[key]

    def write(self, location: str, text: str) -> None:
        key = normalize_location(location)
        if key not in self.documents:
            raise DocumentNotFoundError(f"Document not found: {location}")
        self.documents[key] = text
        self.write_counts[key] += 1

    def create(self, location: str, text: str) -> None:
        key = normalize_location(location)
        if key in self.documents:
            raise DocumentExistsError(f"Document already exists: {location}")
        self.documents[key] = text
        self.write_counts[key] += 1

    def ensure_parent(self, location: str) -> None:
        parent = parent_location(location)
        if parent:
            self.folders.add(parent)

    def writes(self, location: str) -> int:
        """Number of create/write calls made for a location."""
        return self.write_counts[normalize_location(location)]
