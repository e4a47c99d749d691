"""The storage page: disk usage, or the file explorer when it has focus."""

from __future__ import annotations

from oxidroid.explorer import FileEntry, FileExplorer
from oxidroid.types import SystemData
from oxidroid.ui.canvas import (
    DIM_TEXT,
    PLAIN,
    TEXT,
    Canvas,
    Color,
    Rect,
    Span,
    Style,
    metric,
    panel,
    paragraph,
    rule,
    split_rows,
)
from oxidroid.utils import fmt_bytes

_HOT = Style(fg=Color.MAGENTA, bold=True)
_ACCENT = Style(fg=Color.CYAN, bold=True)


def _render_usage(canvas: Canvas, rect: Rect, data: SystemData) -> None:
    inner = panel(canvas, rect, "STORAGE")
    rows = split_rows(inner, [2, 1, None])
    metric(canvas, rows[0], "DISK_USAGE", float(data.storage.percent))
    rule(canvas, rows[1])
    stats = [
        [Span("TOTAL   ", DIM_TEXT), Span(fmt_bytes(data.storage.total), TEXT)],
        [Span("USED    ", DIM_TEXT), Span(fmt_bytes(data.storage.used), TEXT)],
        [Span("FREE    ", DIM_TEXT), Span(fmt_bytes(data.storage.free), TEXT)],
        [
            Span("        ", DIM_TEXT),
            Span("[ENTER]", TEXT),
            Span(" file explorer", DIM_TEXT),
        ],
    ]
    paragraph(canvas, rows[2], stats)


def _size_note(entry: FileEntry) -> str:
    if entry.is_dir:
        return f" ({entry.count} items)" if entry.name != ".." else ""
    return f" ({fmt_bytes(entry.size)})"


def _render_explorer(canvas: Canvas, rect: Rect, explorer: FileExplorer) -> None:
    inner = panel(canvas, rect, "FILE_EXPLORER")
    crumb, listing, keys = split_rows(inner, [1, None, 1])

    paragraph(
        canvas,
        crumb,
        [[Span("⟩ ", _HOT), Span(str(explorer.current_path), _ACCENT)]],
    )

    # The highlight uses the offset from before this frame's scroll adjustment.
    offset = explorer.offset
    selected = explorer.selected
    lines = []
    for position, entry in enumerate(explorer.visible(listing.height), start=offset):
        note = _size_note(entry)
        if position == selected:
            lines.append([Span("▸ ", _HOT), Span(entry.name, _ACCENT), Span(note, TEXT)])
        else:
            lines.append([Span("  ", PLAIN), Span(entry.name, TEXT), Span(note, DIM_TEXT)])
    paragraph(canvas, listing, lines)

    paragraph(
        canvas,
        keys,
        [
            [
                Span("↑↓", TEXT),
                Span(" NAV  ", DIM_TEXT),
                Span("[ENTER]", TEXT),
                Span(" OPEN  ", DIM_TEXT),
                Span("[ESC]", TEXT),
                Span(" BACK", DIM_TEXT),
            ]
        ],
    )


def render(canvas: Canvas, rect: Rect, data: SystemData, explorer: FileExplorer) -> None:
    """Draw disk usage, or the explorer listing when the explorer is focused."""
    if explorer.focused:
        _render_explorer(canvas, rect, explorer)
    else:
        _render_usage(canvas, rect, data)