"""The CPU page: overall load, per-core bars and frequency facts."""

from __future__ import annotations

import math

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
from oxidroid.utils import gauge_color

MAX_CORES = 8


def _filled_cells(percent: float, bar_width: int, limit: int) -> int:
    if math.isnan(percent) or percent <= 0:
        return 0
    cells = percent / 100.0 * bar_width
    return limit if math.isinf(cells) else min(int(cells), limit)


def _core_line(index: int, percent: float, width: int) -> list[Span]:
    color = Color(gauge_color(percent))
    pct = f"{percent:>3.0f}%"
    label = f"C{index:<2}"
    bar_width = max(width - (len(label) + len(pct) + 4), 0)
    filled = _filled_cells(percent, bar_width, width)
    empty = max(bar_width - filled, 0)
    return [
        Span(label, DIM_TEXT),
        Span(" ", PLAIN),
        Span("█" * filled + "░" * empty, Style(fg=color)),
        Span(" ", PLAIN),
        Span(pct, Style(fg=color, bold=True)),
    ]


def render(canvas: Canvas, rect: Rect, data: SystemData) -> None:
    """Draw the CPU page into ``rect``."""
    inner = panel(canvas, rect, "CPU")
    cores = data.cpu.per_core[:MAX_CORES]
    n = len(cores)
    rows = split_rows(inner, [2, 1, *([1] * n), 1, None])

    metric(canvas, rows[0], "OVERALL", float(data.cpu.percent))

    for index, (row, percent) in enumerate(zip(rows[2:2 + n], cores)):
        paragraph(canvas, row, [_core_line(index, float(percent), inner.width)])

    rule(canvas, rows[2 + n])

    freqs = data.cpu.freq_mhz
    avg = f"{sum(freqs) // len(freqs)} MHz" if freqs else "N/A"
    peak = f"{max(freqs)} MHz" if freqs else "N/A"
    info = [
        [Span("MODEL   ", DIM_TEXT), Span(data.cpu.model, TEXT)],
        [
            Span("CORES   ", DIM_TEXT),
            Span(str(data.cpu.count), Style(fg=Color.CYAN, bold=True)),
            Span("   AVG  ", DIM_TEXT),
            Span(avg, TEXT),
            Span("   MAX  ", DIM_TEXT),
            Span(peak, Style(fg=Color.MAGENTA)),
        ],
    ]
    paragraph(canvas, rows[3 + n], info)