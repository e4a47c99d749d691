"""A minimal directory browser with a scrolling selection."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass
class FileEntry:
    """One listed entry; ``count`` is the number of children for directories."""

    name: str
    path: Path
    is_dir: bool
    size: int = 0
    count: int = 0


def _child_count(path: Path) -> int:
    try:
        return len(os.listdir(path))
    except OSError:
        return 0


def _file_size(path: Path) -> int:
    try:
        return path.stat().st_size
    except OSError:
        return 0


def _is_dir(path: Path) -> bool:
    try:
        return path.is_dir()
    except OSError:
        return False


class FileExplorer:
    """Lists a directory, parent link first, then folders and files by name."""

    def __init__(self, start: str | os.PathLike[str]) -> None:
        self.current_path = Path(start)
        self.items: list[FileEntry] = []
        self.selected = 0
        self.offset = 0
        self.focused = False
        self.refresh()

    def refresh(self) -> None:
        """Re-read the current directory; unreadable directories list only the parent."""
        self.items = [FileEntry("..", self.current_path.parent, True)]
        try:
            with os.scandir(self.current_path) as it:
                raw = list(it)
        except OSError:
            return
        entries = []
        for dir_entry in raw:
            path = Path(dir_entry.path)
            is_dir = _is_dir(path)
            if is_dir:
                entry = FileEntry(dir_entry.name, path, True, 0, _child_count(path))
            else:
                entry = FileEntry(dir_entry.name, path, False, _file_size(path), 0)
            entries.append(entry)
        entries.sort(key=lambda e: (not e.is_dir, e.name.lower()))
        self.items.extend(entries)

    def up(self) -> None:
        """Move the selection one entry up."""
        if self.selected > 0:
            self.selected -= 1

    def down(self) -> None:
        """Move the selection one entry down."""
        if self.selected + 1 < len(self.items):
            self.selected += 1

    def enter(self) -> None:
        """Open the selected entry if it is a directory."""
        if not 0 <= self.selected < len(self.items):
            return
        entry = self.items[self.selected]
        if entry.is_dir:
            self.current_path = entry.path
            self.selected = 0
            self.offset = 0
            self.refresh()

    def visible(self, max_rows: int) -> list[FileEntry]:
        """Scroll so the selection fits in ``max_rows`` rows and return those entries."""
        if self.selected < self.offset:
            self.offset = self.selected
        elif self.selected >= self.offset + max_rows:
            self.offset = self.selected + 1 - max_rows
        end = min(self.offset + max_rows, len(self.items))
        return self.items[self.offset:end]