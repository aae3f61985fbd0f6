"""Error log reporters."""

import json

from rich.markup import escape

from common.logger import get_logger

from .categorizer import display_label_for, icon_for, label_for
from .models import ErrorLogSummary
from .summary import active_categories

logger = get_logger(__name__)


class ErrorLogReporter:
    """Format and display an error log summary."""

    def __init__(self, limit: int | None = None):
        """Initialize the reporter.

        Args:
            limit: Maximum number of entries to list (all if None)
        """
        self.limit = limit

    def _visible_entries(self, summary: ErrorLogSummary):
        if self.limit is None:
            return summary.entries
        return summary.entries[: self.limit]

    def report_console(self, summary: ErrorLogSummary) -> int:
        """Print the summary and entries to the console.

        Args:
            summary: Summary to report

        Returns:
            Exit code (always 0, an empty log is not an error)
        """
        if summary.total_count == 0:
            logger.info("[green]✓[/green] No errors recorded")
            return 0

        logger.info(f"[bold]{summary.total_count}[/bold] errors recorded")
        for category in active_categories(summary):
            count = summary.counts_by_category[category]
            logger.info(f"  {icon_for(category)} {display_label_for(category)}: [bold]{count}[/bold]")

        logger.info("\n" + "=" * 60)
        for entry in self._visible_entries(summary):
            logger.info(
                f"{icon_for(entry.category)} [bold]{display_label_for(entry.category)}[/bold]"
                f"  {escape(entry.timestamp)}"
            )
            logger.info(f"    {escape(entry.path)} (attempts: {entry.attempts})")
            logger.info(f"    {escape(entry.error)}")
            if entry.details:
                logger.info(f"    Details: {escape(entry.details)}")

        hidden = summary.total_count - len(self._visible_entries(summary))
        if hidden > 0:
            logger.info(f"... {hidden} older entries not shown")

        return 0

    def report_json(self, summary: ErrorLogSummary) -> str:
        """Format the summary as JSON.

        Args:
            summary: Summary to report

        Returns:
            JSON string with totals, per-category counts and entries
        """
        data = {
            "total": summary.total_count,
            "by_category": {
                category.value: count for category, count in summary.counts_by_category.items()
            },
            "entries": [
                {
                    "timestamp": entry.timestamp,
                    "category": entry.category.value,
                    "label": label_for(entry.category),
                    "path": entry.path,
                    "attempts": entry.attempts,
                    "error": entry.error,
                    "details": entry.details,
                }
                for entry in self._visible_entries(summary)
            ],
        }

        return json.dumps(data, indent=2, ensure_ascii=False)
