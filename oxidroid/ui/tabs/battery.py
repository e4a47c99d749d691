"""The battery page: charge gauge and reported battery state."""

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


def _charge_color(percent: float) -> Color:
    if percent < 20.0:
        return Color.MAGENTA
    if percent < 50.0:
        return Color.YELLOW
    return Color.CYAN


def _status_color(status: str) -> Color:
    lowered = status.lower()
    if "charg" in lowered:
        return Color.CYAN
    if "full" in lowered:
        return Color.GREEN
    return Color.MAGENTA


def render(canvas: Canvas, rect: Rect, data: SystemData) -> None:
    """Draw the battery page into ``rect``."""
    bat = data.battery
    inner = panel(canvas, rect, "BATTERY")
    rows = split_rows(inner, [2, 1, None])

    percent = float(bat.percentage)
    metric(canvas, rows[0], "CHARGE", percent, _charge_color(percent))
    rule(canvas, rows[1])

    lines = [
        [
            Span("STATUS      ", DIM_TEXT),
            Span(bat.status, Style(fg=_status_color(bat.status), bold=True)),
        ],
        [Span("HEALTH      ", DIM_TEXT), Span(bat.health, TEXT)],
        [
            Span("TEMPERATURE ", DIM_TEXT),
            Span(f"{bat.temperature:.1f}", Style(fg=Color.CYAN)),
            Span(" °C", DIM_TEXT),
        ],
        [Span("PLUGGED     ", DIM_TEXT), Span(bat.plugged, TEXT)],
        [
            Span("CURRENT     ", DIM_TEXT),
            Span(str(bat.current_ua), Style(fg=Color.CYAN)),
            Span(" µA", DIM_TEXT),
        ],
    ]
    paragraph(canvas, rows[2], lines)