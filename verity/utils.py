"""Utility functions for Verity."""

from typing import Optional


def truncate_text(text: str, max_length: int = 200, suffix: str = "...") -> str:
    """Truncate text to max_length with suffix."""
    if not text:
        return ""
    text = str(text).strip()
    if len(text) <= max_length:
        return text
    return text[: max_length - len(suffix)] + suffix


def is_empty_input(text: Optional[str]) -> bool:
    """Check if input text is empty or whitespace-only."""
    return not text or not str(text).strip()
