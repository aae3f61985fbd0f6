"""Tests for the error log CLI commands."""

import json

from error_log.cli import cmd_clear, cmd_counts, cmd_record, cmd_rotate, cmd_show
from error_log.codec import LOG_HEADER, build_document
from error_log.models import ErrorCategory, LogEntry

LOG_PATH = "CareerOS/error_log.md"


class Args:
    """Mock arguments for testing."""

    def __init__(self, vault_dir, **kwargs):
        self.vault_dir = str(vault_dir)
        self.log_path = kwargs.get("log_path", LOG_PATH)
        self.max_entries = kwargs.get("max_entries", 100)
        self.max_age_days = kwargs.get("max_age_days", 30)
        self.format = kwargs.get("format", "console")
        self.limit = kwargs.get("limit", None)
        self.path = kwargs.get("path", "notes/x.md")
        self.error = kwargs.get("error", "Connection timeout")
        self.attempts = kwargs.get("attempts", 1)
        self.category = kwargs.get("category", None)
        self.details = kwargs.get("details", None)
        self.yes = kwargs.get("yes", True)


def test_record_then_show_json(tmp_path, capsys):
    """Test recording a failure and reading it back as JSON."""
    assert cmd_record(Args(tmp_path, attempts=3, details="ctx")) == 0
    capsys.readouterr()

    assert cmd_show(Args(tmp_path, format="json")) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["total"] == 1
    assert data["by_category"]["llm"] == 1
    assert data["entries"][0]["attempts"] == 3


def test_record_with_category(tmp_path):
    """Test that an explicit category is written."""
    cmd_record(Args(tmp_path, error="Anything", category="extraction"))

    document = (tmp_path / LOG_PATH).read_text(encoding="utf-8")
    assert "**Category**: Extraction" in document


def test_counts(tmp_path, capsys):
    """Test per-category counts output."""
    cmd_record(Args(tmp_path, error="Invalid JSON"))
    capsys.readouterr()

    assert cmd_counts(Args(tmp_path)) == 0

    out = capsys.readouterr().out
    assert "validation: 1" in out
    assert "llm: 0" in out


def test_rotate(tmp_path, capsys):
    """Test rotation with a tighter count limit."""
    log_file = tmp_path / LOG_PATH
    log_file.parent.mkdir(parents=True)
    entries = [
        LogEntry(
            timestamp=f"2099-01-0{day}T00:00:00.000Z",
            path=f"{day}.md",
            attempts=1,
            error="x",
            category=ErrorCategory.UNKNOWN,
        )
        for day in (3, 2, 1)
    ]
    log_file.write_text(build_document(entries), encoding="utf-8")

    assert cmd_rotate(Args(tmp_path, max_entries=1)) == 0

    assert "Evicted 2 entries" in capsys.readouterr().out
    assert "3.md" in log_file.read_text(encoding="utf-8")
    assert "1.md" not in log_file.read_text(encoding="utf-8")


def test_clear_with_yes(tmp_path):
    """Test clearing without a prompt."""
    cmd_record(Args(tmp_path))

    assert cmd_clear(Args(tmp_path, yes=True)) == 0
    assert (tmp_path / LOG_PATH).read_text(encoding="utf-8") == LOG_HEADER


def test_clear_cancelled(tmp_path, monkeypatch):
    """Test that answering no keeps the entries."""
    cmd_record(Args(tmp_path))
    monkeypatch.setattr("builtins.input", lambda _: "n")

    assert cmd_clear(Args(tmp_path, yes=False)) == 0
    assert "**Path**: notes/x.md" in (tmp_path / LOG_PATH).read_text(encoding="utf-8")


def test_storage_failure_returns_error_code(tmp_path, capsys):
    """Test that an unwritable vault yields exit code 1."""
    (tmp_path / "CareerOS").write_text("not a folder")

    assert cmd_record(Args(tmp_path)) == 1
    assert "Failed to write error log" in capsys.readouterr().err


def test_show_rejects_negative_limit(tmp_path, capsys):
    """Test that a negative --limit is refused instead of dropping the oldest entries."""
    cmd_record(Args(tmp_path))
    capsys.readouterr()

    assert cmd_show(Args(tmp_path, format="json", limit=-1)) == 1

    captured = capsys.readouterr()
    assert "--limit must be non-negative" in captured.err
    assert captured.out == ""


def test_show_zero_limit(tmp_path, capsys):
    """Test that --limit 0 lists no entries but keeps the totals."""
    cmd_record(Args(tmp_path))
    capsys.readouterr()

    assert cmd_show(Args(tmp_path, format="json", limit=0)) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["total"] == 1
    assert data["entries"] == []
