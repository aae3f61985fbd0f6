"""Failure categorization and category labels.

Categories are assigned by ordered keyword rules: the first rule whose
keywords appear in the message wins. An LLM/API keyword therefore beats a
validation or file keyword in the same message.
"""

from .models import ErrorCategory

# Evaluated top to bottom, first match wins
CATEGORY_RULES: tuple[tuple[ErrorCategory, tuple[str, ...]], ...] = (
    (ErrorCategory.LLM, ("llm", "api", "timeout", "rate limit", "network", "connection")),
    (ErrorCategory.VALIDATION, ("schema", "validation", "invalid", "parse", "json")),
    (
        ErrorCategory.FILE_OPERATION,
        ("file", "read", "write", "permission", "enoent", "directory"),
    ),
    (ErrorCategory.EXTRACTION, ("extract", "notecard", "jdcard")),
)

# Labels written to the log document
CATEGORY_LABELS: dict[ErrorCategory, str] = {
    ErrorCategory.EXTRACTION: "Extraction",
    ErrorCategory.VALIDATION: "Schema Validation",
    ErrorCategory.FILE_OPERATION: "File Operation",
    ErrorCategory.LLM: "LLM/API",
    ErrorCategory.UNKNOWN: "Unknown",
}

# Presentation-only overrides of CATEGORY_LABELS
DISPLAY_LABEL_OVERRIDES: dict[ErrorCategory, str] = {
    ErrorCategory.VALIDATION: "Validation",
    ErrorCategory.UNKNOWN: "Other",
}

CATEGORY_ICONS: dict[ErrorCategory, str] = {
    ErrorCategory.EXTRACTION: "📝",
    ErrorCategory.VALIDATION: "⚠️",
    ErrorCategory.FILE_OPERATION: "📁",
    ErrorCategory.LLM: "🤖",
    ErrorCategory.UNKNOWN: "❓",
}

# Spellings accepted by parse_label beyond the two label tables
_LEGACY_LABELS: dict[str, ErrorCategory] = {
    "llm": ErrorCategory.LLM,
    "api": ErrorCategory.LLM,
}


def _build_label_lookup() -> dict[str, ErrorCategory]:
    lookup: dict[str, ErrorCategory] = {}
    for category in ErrorCategory:
        lookup[category.value] = category
        lookup[CATEGORY_LABELS[category].lower()] = category
    for category, label in DISPLAY_LABEL_OVERRIDES.items():
        lookup[label.lower()] = category
    lookup.update(_LEGACY_LABELS)
    return lookup


_LABEL_LOOKUP = _build_label_lookup()


def categorize(message: str) -> ErrorCategory:
    """Assign a category to a failure message.

    Args:
        message: Free-text failure message

    Returns:
        Category of the first matching rule, or UNKNOWN

    Example:
        >>> categorize("API connection failed due to invalid JSON schema")
        <ErrorCategory.LLM: 'llm'>
    """
    lowered = message.lower()
    for category, keywords in CATEGORY_RULES:
        if any(keyword in lowered for keyword in keywords):
            return category
    return ErrorCategory.UNKNOWN


def label_for(category: ErrorCategory) -> str:
    """Label written to the log document for a category."""
    return CATEGORY_LABELS[category]


def display_label_for(category: ErrorCategory) -> str:
    """Label shown to people for a category."""
    return DISPLAY_LABEL_OVERRIDES.get(category, CATEGORY_LABELS[category])


def icon_for(category: ErrorCategory) -> str:
    """Glyph shown next to a category in terminal output."""
    return CATEGORY_ICONS[category]


def parse_label(label: str) -> ErrorCategory:
    """Map a category label back to its category.

    Matching is case-insensitive and accepts persisted labels, display labels,
    raw category values and the legacy "LLM" and "API" spellings.
    Unrecognized labels map to UNKNOWN.
    """
    return _LABEL_LOOKUP.get(label.strip().lower(), ErrorCategory.UNKNOWN)
