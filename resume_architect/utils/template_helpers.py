"""Helper functions for Jinja2 templates."""

from typing import Iterable, Optional
from jinja2 import Environment


def join_items(items: Optional[Iterable[str]], separator: str = ", ") -> str:
    """
    Join a list of strings for display, skipping blank entries.

    Example: ["React", "", "TypeScript"] -> "React, TypeScript"

    Args:
        items: Strings to join
        separator: Separator placed between items

    Returns:
        str: Joined text
    """
    if not items:
        return ""
    return separator.join(item.strip() for item in items if item and item.strip())


def date_range(start: str, end: str) -> str:
    """
    Format an opaque start/end pair as a display range.

    Args:
        start: Start date text
        end: End date text

    Returns:
        str: "start - end", or whichever side is present
    """
    parts = [part.strip() for part in (start, end) if part and part.strip()]
    return " - ".join(parts)


def register_jinja_filters(env: Environment) -> None:
    """
    Register helper functions as Jinja2 filters.

    Args:
        env: Jinja2 Environment instance
    """
    env.filters['join_items'] = join_items
    env.filters['date_range'] = date_range
