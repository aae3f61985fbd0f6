"""Storage factory for creating document storage backends.

This module provides a configuration class and factory function for creating
storage backends by type (filesystem or memory).
"""

from dataclasses import dataclass
from pathlib import Path

from .filesystem_adapter import FileSystemStorage
from .interface import DocumentStorage
from .memory_adapter import MemoryStorage
from .types import StorageType


@dataclass
class StorageConfig:
    """Storage configuration container.

    Attributes:
        storage_type: Backend type ('filesystem' or 'memory')
        root: Vault root directory (for filesystem only)
    """

    storage_type: StorageType | str
    root: Path | None = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        if isinstance(self.storage_type, str):
            try:
                self.storage_type = StorageType(self.storage_type.lower())
            except ValueError as e:
                raise ValueError(
                    f"Unsupported storage type: {self.storage_type}. "
                    f"Must be one of: {', '.join(t.value for t in StorageType)}"
                ) from e

        if self.storage_type == StorageType.FILESYSTEM:
            if self.root is None:
                raise ValueError("root is required for filesystem storage")
            if isinstance(self.root, str):
                self.root = Path(self.root)


def create_storage(config: StorageConfig) -> DocumentStorage:
    """Create the storage backend described by a config.

    Example:
        >>> storage = create_storage(StorageConfig(storage_type="filesystem", root=Path("vault")))
    """
    if config.storage_type == StorageType.FILESYSTEM:
        return FileSystemStorage(config.root)

    elif config.storage_type == StorageType.MEMORY:
        return MemoryStorage()

    else:
        raise ValueError(f"Unsupported storage type: {config.storage_type}")


def get_storage() -> DocumentStorage:
    """Create a storage backend from ERROR_LOG_STORAGE and VAULT_DIR."""
    from common.env import env

    storage_type = env.storage_backend()
    if storage_type.lower() == StorageType.MEMORY.value:
        return create_storage(StorageConfig(storage_type=StorageType.MEMORY))

    return create_storage(StorageConfig(storage_type=storage_type, root=env.vault_dir()))
