"""The process page: a table of the busiest processes."""

from __future__ import annotations

from collections.abc import Sequence

from oxidroid.types import SystemData
from oxidroid.ui.canvas import Canvas, Color, Rect, Span, Style, TEXT

HEADERS = ("PID", "NAME", "CPU%", "MEM%", "STATUS")
NAME_CHARS = 28
STATUS_CHARS = 10
_FIXED_WIDTHS = (8, None, 8, 8, 12)
_MIN_NAME_WIDTH = 20
_SPACING = 1

_TITLE = Style(fg=Color.CYAN, bold=True)
_HEADER = Style(fg=Color.MAGENTA, bold=True)
_NUMBER = Style(fg=Color.CYAN)


def _column_widths(total: int) -> list[int]:
    fixed = sum(w for w in _FIXED_WIDTHS if w is not None)
    gaps = _SPACING * (len(_FIXED_WIDTHS) - 1)
    flexible = max(total - fixed - gaps, _MIN_NAME_WIDTH)
    return [flexible if w is None else w for w in _FIXED_WIDTHS]


def _draw_row(canvas: Canvas, inner: Rect, y: int, cells: Sequence[Span]) -> None:
    right = inner.x + inner.width
    x = inner.x
    for width, cell in zip(_column_widths(inner.width), cells):
        room = min(width, right - x)
        if room <= 0:
            break
        canvas.put_spans(x, y, [cell], room)
        x += width + _SPACING


def render(canvas: Canvas, rect: Rect, data: SystemData) -> None:
    """Draw the process table into ``rect``."""
    canvas.box(rect, [Span(" [ PROCESS_LIST ] ", _TITLE)], "all", TEXT)
    inner = rect.inner()
    if inner.height <= 0:
        return
    bottom = inner.y + inner.height
    _draw_row(canvas, inner, inner.y, [Span(h, _HEADER) for h in HEADERS])

    first_row = inner.y + 2
    for y, proc in zip(range(first_row, bottom), data.processes):
        _draw_row(
            canvas,
            inner,
            y,
            [
                Span(str(proc.pid), TEXT),
                Span(proc.name[:NAME_CHARS], TEXT),
                Span(f"{proc.cpu:.1f}", _NUMBER),
                Span(f"{proc.mem:.1f}", _NUMBER),
                Span(proc.status[:STATUS_CHARS], TEXT),
            ],
        )