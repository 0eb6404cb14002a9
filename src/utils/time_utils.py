"""Duration and share formatting utilities."""

from __future__ import annotations

from src.utils.i18n import tr


def split_hours_minutes(seconds: float) -> tuple[int, int]:
    """Truncate *seconds* to whole hours and the whole minutes left over.

    Negative input clamps to zero.

    Example:
        >>> split_hours_minutes(3 * 3600 + 15 * 60 + 59)
        (3, 15)
    """
    if seconds < 0:
        seconds = 0
    whole = int(seconds)
    return whole // 3600, whole % 3600 // 60


def format_duration(seconds: float) -> str:
    """Convert seconds to a display string like '3h 05m', or '45m' under one hour."""
    hours, minutes = split_hours_minutes(seconds)
    if hours > 0:
        return f"{hours}{tr('h')} {minutes:02d}{tr('m')}"
    return f"{minutes}{tr('m')}"


def format_percent(share: float) -> str:
    """Convert a share fraction to a percentage string with one decimal ('12.5%')."""
    return f"{share * 100:.1f}%"


def hours_to_seconds(hours: float) -> int:
    """Convert hours (float) to integer seconds."""
    return int(round(hours * 3600))
