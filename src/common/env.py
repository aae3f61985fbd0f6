"""Environment configuration interface for the error log.

This module provides a clean interface for accessing environment variables,
centralizing all environment variable access in one place.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

from .constants import DEFAULT_LOG_LOCATION, DEFAULT_MAX_AGE_DAYS, DEFAULT_MAX_ENTRIES

# Load environment variables from .env file if it exists
load_dotenv()


class Environment:
    """Interface for accessing environment configuration."""

    @staticmethod
    def vault_dir() -> Path:
        """Get the root directory of the note vault.

        Returns:
            Path to the vault root, defaults to the current directory
        """
        return Path(os.getenv("VAULT_DIR", "."))

    @staticmethod
    def storage_backend() -> str:
        """Get the storage backend type (filesystem or memory).

        Returns:
            Storage backend type, defaults to 'filesystem'
        """
        return os.getenv("ERROR_LOG_STORAGE", "filesystem")

    @staticmethod
    def error_log_path() -> str:
        """Get the vault-relative location of the error log document.

        Returns:
            Log location, defaults to 'CareerOS/error_log.md'
        """
        return os.getenv("ERROR_LOG_PATH", DEFAULT_LOG_LOCATION)

    @staticmethod
    def error_log_max_entries() -> int:
        """Get the maximum number of entries kept after rotation.

        Returns:
            Entry cap, defaults to 100
        """
        return int(os.getenv("ERROR_LOG_MAX_ENTRIES", str(DEFAULT_MAX_ENTRIES)))

    @staticmethod
    def error_log_max_age_days() -> int:
        """Get the maximum age in days of entries kept after rotation.

        Returns:
            Age cap in days, defaults to 30
        """
        return int(os.getenv("ERROR_LOG_MAX_AGE_DAYS", str(DEFAULT_MAX_AGE_DAYS)))


# Singleton instance for convenient access
env = Environment()
