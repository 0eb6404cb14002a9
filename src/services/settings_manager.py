"""Settings manager for application preferences.

Only preferences are stored here; the share distribution itself is not persisted.
"""

from PySide6.QtCore import QSettings

from src.utils.config import (
    DEFAULT_ENABLE_PUSH,
    DEFAULT_ITEM_COUNT,
    DEFAULT_MAX_ITEMS,
    DEFAULT_MIN_SHARE,
    DEFAULT_TOTAL_DURATION,
    SEPARATOR_HIT_PX,
)


class SettingsManager:
    """Wrapper around QSettings for type-safe preference management."""

    def __init__(self):
        self._settings = QSettings()

    # ---------------------------------------------------- Distribution Settings

    def get_min_share(self) -> float:
        """Get the minimum share per item (default: 0.05)."""
        return self._settings.value("distribution/min_share", DEFAULT_MIN_SHARE, float)

    def set_min_share(self, share: float) -> None:
        """Set the minimum share per item."""
        self._settings.setValue("distribution/min_share", share)

    def get_enable_push(self) -> bool:
        """Get whether dragging pushes neighbouring separators (default: True)."""
        return self._settings.value("distribution/enable_push", DEFAULT_ENABLE_PUSH, bool)

    def set_enable_push(self, enabled: bool) -> None:
        """Set whether dragging pushes neighbouring separators."""
        self._settings.setValue("distribution/enable_push", enabled)

    def get_total_duration(self) -> int:
        """Get the total duration to distribute in seconds (default: 8 hours)."""
        return self._settings.value("distribution/total_duration", DEFAULT_TOTAL_DURATION, int)

    def set_total_duration(self, seconds: int) -> None:
        """Set the total duration to distribute in seconds."""
        self._settings.setValue("distribution/total_duration", seconds)

    # ---------------------------------------------------- Demo Settings

    def get_item_count(self) -> int:
        """Get the number of demo items (default: 3)."""
        return self._settings.value("demo/item_count", DEFAULT_ITEM_COUNT, int)

    def set_item_count(self, count: int) -> None:
        """Set the number of demo items."""
        self._settings.setValue("demo/item_count", count)

    def get_max_items(self) -> int:
        """Get the upper bound of the item count slider (default: 20)."""
        return self._settings.value("demo/max_items", DEFAULT_MAX_ITEMS, int)

    def set_max_items(self, count: int) -> None:
        """Set the upper bound of the item count slider."""
        self._settings.setValue("demo/max_items", count)

    # ---------------------------------------------------- Editing Settings

    def get_separator_hit_distance(self) -> int:
        """Get the separator grab distance in pixels (default: 18)."""
        return self._settings.value("editing/separator_hit_px", SEPARATOR_HIT_PX, int)

    def set_separator_hit_distance(self, pixels: int) -> None:
        """Set the separator grab distance in pixels."""
        self._settings.setValue("editing/separator_hit_px", pixels)

    # ---------------------------------------------------- UI Settings

    def get_ui_language(self) -> str:
        """Get the UI language code (default: en)."""
        return self._settings.value("ui/language", "en", str)

    def set_ui_language(self, lang: str) -> None:
        """Set the UI language code ('en', 'ru', etc.)."""
        self._settings.setValue("ui/language", lang)

    # ---------------------------------------------------- General Methods

    def reset_to_defaults(self) -> None:
        """Reset all settings to default values."""
        self._settings.clear()

    def sync(self) -> None:
        """Force synchronization of settings to disk."""
        self._settings.sync()
