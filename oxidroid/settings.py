"""User-adjustable dashboard settings."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_REFRESH_MS = 500
DEFAULT_BATTERY_MAH = 4000


@dataclass
class Settings:
    """Refresh rate and battery capacity, plus the settings panel's cursor."""

    refresh_ms: int = DEFAULT_REFRESH_MS
    battery_mah: int = DEFAULT_BATTERY_MAH
    selected: int = 0
    focused: bool = False

    def reset(self) -> None:
        """Restore the default values; whether the panel has focus is kept."""
        self.refresh_ms = DEFAULT_REFRESH_MS
        self.battery_mah = DEFAULT_BATTERY_MAH
        self.selected = 0