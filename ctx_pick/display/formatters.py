"""Formatting utilities for CLI display."""


def pluralize(count: int, singular: str, plural: str | None = None) -> str:
    """Return ``singular`` or ``plural`` (default: singular + "s") for count."""
    if count == 1:
        return singular
    return plural if plural is not None else singular + "s"


def truncate_items(items: list, max_items: int) -> tuple[list, int]:
    """Limit a list for display.

    Args:
        items: Items to show
        max_items: Maximum number of items to show (-1 for all)

    Returns:
        Tuple of (items_to_show, hidden_count)
    """
    if max_items == -1 or len(items) <= max_items:
        return list(items), 0
    return list(items[:max_items]), len(items) - max_items


def format_more_matches(hidden: int) -> str:
    """Trailer line for a truncated candidate list."""
    return f"... and {hidden} more {pluralize(hidden, 'match', 'matches')}."


def format_summary(file_count: int, line_count: int) -> str:
    """Short description of a payload, like "3 files, 120 lines"."""
    return f"{file_count} {pluralize(file_count, 'file')}, {line_count} {pluralize(line_count, 'line')}"
