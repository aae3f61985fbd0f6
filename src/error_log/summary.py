"""Aggregation of decoded entries for reporting."""

from collections.abc import Sequence

from .models import ErrorCategory, ErrorLogSummary, LogEntry, empty_counts


def summarize(entries: Sequence[LogEntry]) -> ErrorLogSummary:
    """Count entries per category.

    Every category is present in the result, including those with no entries.

    Args:
        entries: Decoded entries, newest first

    Returns:
        Summary holding the total, per-category counts and the entries
    """
    counts = empty_counts()
    for entry in entries:
        counts[entry.category] += 1

    return ErrorLogSummary(
        total_count=len(entries),
        counts_by_category=counts,
        entries=list(entries),
    )


def active_categories(summary: ErrorLogSummary) -> list[ErrorCategory]:
    """Categories with at least one entry, in reporting order."""
    return [category for category in ErrorCategory if summary.counts_by_category[category] > 0]
