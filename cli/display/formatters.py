"""
Display formatting utilities for CLI output.

Provides bar graphics, size and byte-field formatting helpers.
"""

from typing import Optional

from rich.markup import escape


def value_bar(
    value: int,
    max_value: int = 100,
    width: int = 10,
    filled_char: str = "█",
    empty_char: str = "░",
    show_percent: bool = True,
) -> str:
    """
    Create a text-based bar graphic with percentage.

    Args:
        value: Current value
        max_value: Maximum value
        width: Bar width in characters
        filled_char: Character for filled portion
        empty_char: Character for empty portion
        show_percent: Show percentage

    Returns:
        Formatted string like "[████████░░]  80%"
    """
    if max_value <= 0:
        max_value = 1

    # Clamp value
    clamped = max(0, min(value, max_value))

    fill_count = int((clamped / max_value) * width)
    empty_count = width - fill_count

    bar = filled_char * fill_count + empty_char * empty_count
    percent = int((clamped / max_value) * 100)

    parts = [f"[{bar}]"]
    if show_percent:
        parts.append(f"{percent:3d}%")

    return " ".join(parts)


def format_size(size: int) -> str:
    """Format a byte count, e.g. "7242 bytes (7.1 KiB)"."""
    if size < 1024:
        return f"{size} bytes"
    return f"{size} bytes ({size / 1024:.1f} KiB)"


def format_byte_field(value: Optional[int]) -> str:
    """Format a one-byte header field as "0x05 (5)", or a dash if unread."""
    if value is None:
        return "[dim]-[/dim]"
    return f"0x{value:02X} ({value})"


def format_text_field(value: Optional[str]) -> str:
    if value is None:
        return "[dim]-[/dim]"
    return escape(value)
