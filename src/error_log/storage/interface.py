"""Abstract document storage interface.

The error log keeps one text document per log location. Backends only need
whole-document read, replace and create; there is no append primitive.
"""

from abc import ABC, abstractmethod
from collections.abc import Hashable


class DocumentStorage(ABC):
    """Abstract storage for named text documents.

    Locations are vault-relative paths such as ``CareerOS/error_log.md``.
    Every operation may raise StorageError.
    """

    @abstractmethod
    def exists(self, location: str) -> bool:
        """Check whether a document exists at a location."""
        pass

    @abstractmethod
    def read(self, location: str) -> str:
        """Read the full text of a document.

        Raises:
            DocumentNotFoundError: If no document exists at the location
            StorageError: If the document cannot be read
        """
        pass

    @abstractmethod
    def write(self, location: str, text: str) -> None:
        """Replace the full text of an existing document.

        Raises:
            DocumentNotFoundError: If no document exists at the location
            StorageError: If the document cannot be written
        """
        pass

    @abstractmethod
    def create(self, location: str, text: str) -> None:
        """Create a new document with initial text.

        Raises:
            DocumentExistsError: If a document already exists at the location
            StorageError: If the document cannot be created
        """
        pass

    @abstractmethod
    def ensure_parent(self, location: str) -> None:
        """Make sure the folder holding a location exists.

        Raises:
            StorageError: If the folder cannot be created
        """
        pass

    @abstractmethod
    def lock_key(self, location: str) -> Hashable:
        """Identify the document at a location for locking.

        Backends that reach the same underlying document must return equal
        keys, so writers going through either of them serialize.
        """
        pass
