"""Structured, self-rotating markdown error log."""

from .categorizer import categorize, display_label_for, label_for, parse_label
from .codec import decode_document, encode_entry
from .models import ErrorCategory, ErrorLogSummary, LogEntry, LoggerConfig
from .store import ErrorLogStore, create_error_log, get_error_log
from .summary import summarize

__all__ = [
    "ErrorCategory",
    "ErrorLogSummary",
    "LogEntry",
    "LoggerConfig",
    "ErrorLogStore",
    "create_error_log",
    "get_error_log",
    "categorize",
    "label_for",
    "display_label_for",
    "parse_label",
    "encode_entry",
    "decode_document",
    "summarize",
]
