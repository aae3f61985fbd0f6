"""Document storage backends for the error log.

Example:
    >>> from error_log.storage import StorageConfig, create_storage
    >>>
    >>> storage = create_storage(StorageConfig(storage_type="filesystem", root="vault"))
    >>> storage.ensure_parent("CareerOS/error_log.md")
    >>> storage.create("CareerOS/error_log.md", "# CareerOS Error Log\\n\\n")
"""

from .factory import StorageConfig, create_storage, get_storage
from .filesystem_adapter import FileSystemStorage
from .interface import DocumentStorage
from .memory_adapter import MemoryStorage
from .types import (
    DocumentExistsError,
    DocumentNotFoundError,
    StorageError,
    StorageType,
    normalize_location,
    parent_location,
)

__all__ = [
    # Factory
    "StorageConfig",
    "create_storage",
    "get_storage",
    # Interface and backends
    "DocumentStorage",
    "FileSystemStorage",
    "MemoryStorage",
    # Types and exceptions
    "StorageType",
    "StorageError",
    "DocumentNotFoundError",
    "DocumentExistsError",
    "normalize_location",
    "parent_location",
]
