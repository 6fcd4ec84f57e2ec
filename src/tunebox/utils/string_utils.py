"""
String utility functions for fixed-width console layouts.
"""

from typing import Optional

ELLIPSIS = "…"


def truncate_text(text: Optional[str], width: int) -> str:
    """
    Shorten text to fit a column, marking the cut with an ellipsis.

    Args:
        text: Text to shorten
        width: Maximum number of characters in the result

    Returns:
        The text unchanged if it fits, otherwise its first width-1
        characters followed by an ellipsis
    """
    if not text:
        return ""
    if width <= 0:
        return ""
    if len(text) <= width:
        return text
    return text[:width - 1] + ELLIPSIS


def center_text(text: Optional[str], width: int) -> str:
    """Pad text on both sides to width, truncating it first if it is too long."""
    text = truncate_text(text, width)
    padding = (width - len(text)) // 2
    return " " * padding + text + " " * (width - padding - len(text))


def format_duration(seconds: int) -> str:
    """Format a number of seconds as m:ss (or h:mm:ss from one hour up)."""
    minutes, secs = divmod(max(seconds, 0), 60)
    hours, minutes = divmod(minutes, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def pluralize(count: int, word: str) -> str:
    """Return "<count> <word>" with an "s" unless count is one."""
    return f"{count} {word}{'' if count == 1 else 's'}"
