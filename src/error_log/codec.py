"""Markdown encoding and decoding of error log entries.

A log document is a title line followed by entry blocks, newest first:

    # CareerOS Error Log

    ## 2024-12-07T10:30:00.000Z

    - **Category**: LLM/API
    - **Path**: notes/project.md
    - **Attempts**: 3
    - **Error**: Connection timeout
    - **Details**: Retry exhausted

    ---

Multi-line error and details values indent their continuation lines by two
spaces, so a line of the message can never be mistaken for the next field,
the separator or a new heading. Values are stored trimmed: leading and
trailing whitespace does not survive a round trip.

Older documents used ``**Type**:`` instead of ``**Category**:`` or carried no
category line at all; both still decode.
"""

import re
from collections.abc import Iterable

from common.constants import LOG_TITLE

from .categorizer import categorize, label_for, parse_label
from .models import LogEntry

LOG_HEADER = f"# {LOG_TITLE}\n\n"
ENTRY_SEPARATOR = "\n---\n\n"

UNKNOWN_PATH = "Unknown path"
UNKNOWN_ERROR = "Unknown error"

# A block runs from its timestamp heading to the separator, the next heading or the end
_ENTRY_PATTERN = re.compile(
    r"^## (\d{4}-\d{2}-\d{2}T[\d:.]+Z?)\s*\n(.*?)(?=\n---|\n## |\Z)",
    re.MULTILINE | re.DOTALL,
)

_CATEGORY_PATTERN = re.compile(r"\*\*Category\*\*:[ \t]*(.+)")
_LEGACY_TYPE_PATTERN = re.compile(r"\*\*Type\*\*:[ \t]*(.+)")
_PATH_PATTERN = re.compile(r"\*\*Path\*\*:[ \t]*(.+)")
_ATTEMPTS_PATTERN = re.compile(r"\*\*Attempts\*\*:[ \t]*(\d+)")
# Multi-line values continue until the next list item
_ERROR_PATTERN = re.compile(r"\*\*Error\*\*:[ \t]*(.*?)(?=\n-|\n\Z|\Z)", re.DOTALL)
_DETAILS_PATTERN = re.compile(r"\*\*Details\*\*:[ \t]*(.*?)(?=\n-|\n\Z|\Z)", re.DOTALL)

CONTINUATION_INDENT = "  "


def _indent_continuation(value: str) -> str:
    return value.strip().replace("\n", "\n" + CONTINUATION_INDENT)


def _dedent_continuation(value: str) -> str:
    # Unindented continuation lines from older documents are kept as they are
    return value.strip().replace("\n" + CONTINUATION_INDENT, "\n")


def encode_entry(entry: LogEntry) -> str:
    """Encode one entry as a markdown block, separator included.

    Args:
        entry: Entry to encode

    Returns:
        Block text ending with a horizontal rule and a blank line
    """
    lines = [
        f"## {entry.timestamp}",
        "",
        f"- **Category**: {label_for(entry.category)}",
        f"- **Path**: {entry.path}",
        f"- **Attempts**: {entry.attempts}",
        f"- **Error**: {_indent_continuation(entry.error)}",
    ]
    if entry.details:
        lines.append(f"- **Details**: {_indent_continuation(entry.details)}")

    return "\n".join(lines) + "\n" + ENTRY_SEPARATOR


def _decode_block(timestamp: str, body: str) -> LogEntry:
    error_match = _ERROR_PATTERN.search(body)
    error = _dedent_continuation(error_match.group(1)) if error_match else ""
    if not error:
        error = UNKNOWN_ERROR

    category_match = _CATEGORY_PATTERN.search(body) or _LEGACY_TYPE_PATTERN.search(body)
    if category_match:
        category = parse_label(category_match.group(1))
    else:
        category = categorize(error)

    path_match = _PATH_PATTERN.search(body)
    path = path_match.group(1).strip() if path_match else ""

    attempts_match = _ATTEMPTS_PATTERN.search(body)
    details_match = _DETAILS_PATTERN.search(body)
    details = _dedent_continuation(details_match.group(1)) if details_match else None

    return LogEntry(
        timestamp=timestamp,
        path=path or UNKNOWN_PATH,
        attempts=int(attempts_match.group(1)) if attempts_match else 0,
        error=error,
        category=category,
        details=details or None,
    )


def decode_document(text: str) -> list[LogEntry]:
    """Decode a log document into entries, in document order.

    Malformed blocks fall back to field defaults instead of failing, and a
    block without a category line is categorized from its error text.

    Args:
        text: Full log document

    Returns:
        Decoded entries (empty for empty or whitespace-only input)
    """
    if not text or not text.strip():
        return []

    return [
        _decode_block(match.group(1), match.group(2))
        for match in _ENTRY_PATTERN.finditer(text)
    ]


def build_document(entries: Iterable[LogEntry]) -> str:
    """Build a complete document from a header and the given entries."""
    return LOG_HEADER + "".join(encode_entry(entry) for entry in entries)


def insert_after_header(document: str, block: str) -> str:
    """Insert an encoded block directly after the document's title line.

    Args:
        document: Existing log document
        block: Encoded entry from encode_entry()

    Returns:
        Document with the block placed before all earlier entries
    """
    if not document.strip():
        return LOG_HEADER + block

    header_end = document.find("\n\n")
    if header_end == -1:
        return document + "\n\n" + block

    split_at = header_end + 2
    return document[:split_at] + block + document[split_at:]
