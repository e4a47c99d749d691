"""The memory page: RAM and swap gauges with byte totals."""

from __future__ import annotations

from oxidroid.types import SystemData
from oxidroid.ui.canvas import (
    DIM_TEXT,
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


def _clamp(percent: float) -> float:
    return min(max(percent, 0.0), 100.0)


def render(canvas: Canvas, rect: Rect, data: SystemData) -> None:
    """Draw the memory page into ``rect``."""
    mem = data.memory
    inner = panel(canvas, rect, "MEMORY")
    rows = split_rows(inner, [2, 1, 2, 1, None])

    metric(canvas, rows[0], "RAM_USAGE", _clamp(float(mem.percent)))
    metric(canvas, rows[2], "SWAP_USAGE", _clamp(float(mem.swap_percent)))
    rule(canvas, rows[3])

    stats = [
        [Span("TOTAL      ", DIM_TEXT), Span(fmt_bytes(mem.total), TEXT)],
        [Span("USED       ", DIM_TEXT), Span(fmt_bytes(mem.used), TEXT)],
        [Span("AVAILABLE  ", DIM_TEXT), Span(fmt_bytes(mem.available), TEXT)],
        [
            Span("SWAP       ", DIM_TEXT),
            Span(fmt_bytes(mem.swap_used), Style(fg=Color.CYAN)),
            Span("  /  ", DIM_TEXT),
            Span(fmt_bytes(mem.swap_total), TEXT),
        ],
    ]
    paragraph(canvas, rows[4], stats)