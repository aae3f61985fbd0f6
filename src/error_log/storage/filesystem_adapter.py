"""Filesystem storage adapter.

Documents are UTF-8 text files below a vault root directory.
"""

from pathlib import Path

from .interface import DocumentStorage
from .types import DocumentExistsError, DocumentNotFoundError, StorageError, normalize_location


class FileSystemStorage(DocumentStorage):
    """Document storage backed by files under a root directory."""

    def __init__(self, root: str | Path):
        """Initialize filesystem storage.

        Args:
            root: Vault root directory that locations are resolved against
        """
        self.root = Path(root)

    def resolve(self, location: str) -> Path:
        """Map a vault-relative location to a file path."""
        return self.root / normalize_location(location)

    def lock_key(self, location: str) -> str:
        # Absolute path, so storages with different roots agree on one file
        return str(self.resolve(location).resolve())

    def exists(self, location: str) -> bool:
        return self.resolve(location).is_file()

    def read(self, location: str) -> str:
        path = self.resolve(location)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise DocumentNotFoundError(f"Document not found: {location}") from e
        except OSError as e:
            raise StorageError(f"Failed to read {location}: {e}") from e

    def write(self, location: str, text: str) -> None:
        path = self.resolve(location)
        if not path.is_file():
            raise DocumentNotFoundError(f"Document not found: {location}")
        try:
            path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Failed to write {location}: {e}") from e

    def create(self, location: str, text: str) -> None:
        path = self.resolve(location)
        try:
            # Exclusive mode fails if another writer created it first
            with open(path, "x", encoding="utf-8") as f:
                f.write(text)
        except FileExistsError as e:
            raise DocumentExistsError(f"Document already exists: {location}") from e
        except OSError as e:
            raise StorageError(f"Failed to create {location}: {e}") from e

    def ensure_parent(self, location: str) -> None:
        parent = self.resolve(location).parent
        try:
            parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"Failed to create folder {parent}: {e}") from e
