"""Tests for environment configuration interface."""

from pathlib import Path

from common.env import Environment, env


class TestEnvironment:
    """Tests for Environment class."""

    def test_vault_dir_default(self, monkeypatch):
        """Test vault_dir returns the current directory by default."""
        monkeypatch.delenv("VAULT_DIR", raising=False)
        assert Environment.vault_dir() == Path(".")

    def test_vault_dir_from_env(self, monkeypatch):
        """Test vault_dir reads from environment."""
        monkeypatch.setenv("VAULT_DIR", "/tmp/vault")
        assert str(Environment.vault_dir()) == "/tmp/vault"

    def test_storage_backend_default(self, monkeypatch):
        """Test storage_backend defaults to filesystem."""
        monkeypatch.delenv("ERROR_LOG_STORAGE", raising=False)
        assert Environment.storage_backend() == "filesystem"

    def test_error_log_path_default(self, monkeypatch):
        """Test error_log_path returns default value."""
        monkeypatch.delenv("ERROR_LOG_PATH", raising=False)
        assert Environment.error_log_path() == "CareerOS/error_log.md"

    def test_error_log_path_from_env(self, monkeypatch):
        """Test error_log_path reads from environment."""
        monkeypatch.setenv("ERROR_LOG_PATH", "logs/failures.md")
        assert Environment.error_log_path() == "logs/failures.md"

    def test_max_entries_default(self, monkeypatch):
        """Test error_log_max_entries returns default value."""
        monkeypatch.delenv("ERROR_LOG_MAX_ENTRIES", raising=False)
        assert Environment.error_log_max_entries() == 100

    def test_max_entries_from_env(self, monkeypatch):
        """Test error_log_max_entries parses the environment value."""
        monkeypatch.setenv("ERROR_LOG_MAX_ENTRIES", "25")
        assert Environment.error_log_max_entries() == 25

    def test_max_age_days_default(self, monkeypatch):
        """Test error_log_max_age_days returns default value."""
        monkeypatch.delenv("ERROR_LOG_MAX_AGE_DAYS", raising=False)
        assert Environment.error_log_max_age_days() == 30

    def test_max_age_days_from_env(self, monkeypatch):
        """Test error_log_max_age_days parses the environment value."""
        monkeypatch.setenv("ERROR_LOG_MAX_AGE_DAYS", "7")
        assert Environment.error_log_max_age_days() == 7


class TestEnvSingleton:
    """Tests for env singleton instance."""

    def test_env_is_environment_instance(self):
        """Test that env is an instance of Environment."""
        assert isinstance(env, Environment)

    def test_env_singleton_methods_work(self, monkeypatch):
        """Test that env singleton methods work."""
        monkeypatch.setenv("ERROR_LOG_PATH", "x/y.md")
        assert env.error_log_path() == "x/y.md"
