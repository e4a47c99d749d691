"""Application state: the current tab, shared data, explorer and settings."""

from __future__ import annotations

import os
from enum import IntEnum
from pathlib import Path

from oxidroid.explorer import FileExplorer
from oxidroid.settings import Settings
from oxidroid.types import SharedState

TERMUX_HOME = "/data/data/com.termux/files/home"
FALLBACK_HOME = "/tmp"


class Tab(IntEnum):
    """Dashboard pages, in sidebar order."""

    OVERVIEW = 0
    CPU = 1
    MEMORY = 2
    STORAGE = 3
    BATTERY = 4
    NETWORK = 5
    PROCESSES = 6
    SETTINGS = 7

    def label(self) -> str:
        """Human-readable name shown in the sidebar."""
        return _LABELS[self]


_LABELS = {
    Tab.OVERVIEW: "Overview",
    Tab.CPU: "CPU",
    Tab.MEMORY: "Memory",
    Tab.STORAGE: "Storage",
    Tab.BATTERY: "Battery",
    Tab.NETWORK: "Network",
    Tab.PROCESSES: "Processes",
    Tab.SETTINGS: "Settings",
}


def _default_start() -> str:
    return TERMUX_HOME if Path(TERMUX_HOME).exists() else FALLBACK_HOME


class App:
    """Everything the UI loop reads and the key handler changes."""

    def __init__(self, start: str | os.PathLike[str] | None = None) -> None:
        self.tab = Tab.OVERVIEW
        self.data = SharedState()
        self.explorer = FileExplorer(start if start is not None else _default_start())
        self.settings = Settings()
        self.running = True

    def index(self) -> int:
        """Position of the current tab."""
        return int(self.tab)

    def next(self) -> None:
        """Switch to the following tab, wrapping around."""
        self.tab = Tab((self.index() + 1) % len(Tab))

    def prev(self) -> None:
        """Switch to the preceding tab, wrapping around."""
        self.tab = Tab((self.index() - 1) % len(Tab))