#!/usr/bin/env python3
"""CLI interface for inspecting and maintaining the error log."""

import argparse
from pathlib import Path

from common.env import env
from common.logger import error, progress, setup_logging, success, warning

from .models import ErrorCategory, LoggerConfig
from .reporters import ErrorLogReporter
from .storage import FileSystemStorage, StorageError
from .store import ErrorLogStore


def _build_store(args) -> ErrorLogStore:
    config = LoggerConfig(
        max_entries=args.max_entries,
        max_age_days=args.max_age_days,
        log_location=args.log_path,
    )
    return ErrorLogStore(FileSystemStorage(Path(args.vault_dir)), config)


def cmd_show(args):
    """Show the summary and entries of the error log.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    if args.limit is not None and args.limit < 0:
        error(f"--limit must be non-negative, got {args.limit}")
        return 1

    store = _build_store(args)
    reporter = ErrorLogReporter(limit=args.limit)

    try:
        summary = store.summary()
    except StorageError as e:
        error(f"Failed to read error log: {e}")
        return 1

    if args.format == "json":
        print(reporter.report_json(summary))
        return 0

    return reporter.report_console(summary)


def cmd_counts(args):
    """Print the number of entries per category.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    try:
        counts = _build_store(args).counts_by_category()
    except StorageError as e:
        error(f"Failed to read error log: {e}")
        return 1

    for category, count in counts.items():
        progress(f"{category.value}: {count}")
    return 0


def cmd_record(args):
    """Record a failure in the error log.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    store = _build_store(args)

    try:
        entry = store.log_failure(
            path=args.path,
            error=args.error,
            attempts=args.attempts,
            category=args.category,
            details=args.details,
        )
    except StorageError as e:
        error(f"Failed to write error log: {e}")
        return 1

    success(f"Recorded {entry.category.value} failure for {entry.path}")
    return 0


def cmd_rotate(args):
    """Apply the retention limits to the error log.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    try:
        evicted = _build_store(args).rotate()
    except StorageError as e:
        error(f"Failed to rotate error log: {e}")
        return 1

    if evicted:
        success(f"Evicted {evicted} entries")
    else:
        progress("Nothing to evict")
    return 0


def cmd_clear(args):
    """Remove every entry from the error log.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    store = _build_store(args)

    if not args.yes:
        choice = input(f"Clear all entries from {store.location}? [y/n] ").strip().lower()
        if choice != "y":
            warning("Clear cancelled")
            return 0

    try:
        store.clear()
    except StorageError as e:
        error(f"Failed to clear error log: {e}")
        return 1

    success(f"Cleared {store.location}")
    return 0


def main():
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Inspect and maintain the error log")
    parser.add_argument(
        "--vault-dir",
        type=str,
        default=str(env.vault_dir()),
        help="Vault root directory (default: VAULT_DIR or current directory)",
    )
    parser.add_argument(
        "--log-path",
        type=str,
        default=env.error_log_path(),
        help="Vault-relative location of the error log document",
    )
    parser.add_argument(
        "--max-entries",
        type=int,
        default=env.error_log_max_entries(),
        help="Maximum number of entries kept on rotation",
    )
    parser.add_argument(
        "--max-age-days",
        type=int,
        default=env.error_log_max_age_days(),
        help="Maximum age in days of entries kept on rotation",
    )
    parser.add_argument("--log-file", type=str, help="Also write logs to this file")

    subparsers = parser.add_subparsers(dest="command", required=True)

    # Show command
    show_parser = subparsers.add_parser("show", help="Show error log summary and entries")
    show_parser.add_argument(
        "--format",
        choices=["console", "json"],
        default="console",
        help="Output format",
    )
    show_parser.add_argument("--limit", type=int, help="Maximum number of entries to list")
    show_parser.set_defaults(func=cmd_show)

    # Counts command
    counts_parser = subparsers.add_parser("counts", help="Show entry counts per category")
    counts_parser.set_defaults(func=cmd_counts)

    # Record command
    record_parser = subparsers.add_parser("record", help="Record a failure")
    record_parser.add_argument("--path", type=str, required=True, help="Related note path")
    record_parser.add_argument("--error", type=str, required=True, help="Failure message")
    record_parser.add_argument("--attempts", type=int, default=1, help="Attempts made")
    record_parser.add_argument(
        "--category",
        choices=[c.value for c in ErrorCategory],
        help="Failure category (derived from the message if omitted)",
    )
    record_parser.add_argument("--details", type=str, help="Extra context")
    record_parser.set_defaults(func=cmd_record)

    # Rotate command
    rotate_parser = subparsers.add_parser("rotate", help="Apply retention limits")
    rotate_parser.set_defaults(func=cmd_rotate)

    # Clear command
    clear_parser = subparsers.add_parser("clear", help="Remove all entries")
    clear_parser.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="Clear without prompting",
    )
    clear_parser.set_defaults(func=cmd_clear)

    args = parser.parse_args()
    setup_logging(log_file=args.log_file)
    return args.func(args)


if __name__ == "__main__":
    exit(main())
