"""The top status bar and the tab sidebar."""

from __future__ import annotations

from datetime import datetime

from oxidroid.app import Tab
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
    paragraph,
)
from oxidroid.utils import fmt_uptime

_ACCENT = Style(fg=Color.CYAN, bold=True)
_HOT = Style(fg=Color.MAGENTA, bold=True)
_SEPARATOR = "  ·  "


def render_header(
    canvas: Canvas, rect: Rect, data: SystemData, now: datetime | None = None
) -> None:
    """Draw the logo, date, clock, uptime and key hints above a cyan rule."""
    now = now if now is not None else datetime.now()
    line = [
        Span("◈ ", _HOT),
        Span("Oxidroid", _ACCENT),
        Span(_SEPARATOR, TEXT),
        Span(now.strftime("%d.%m.%Y"), DIM_TEXT),
        Span("  ", PLAIN),
        Span("[", TEXT),
        Span(now.strftime("%I:%M:%S %p"), _ACCENT),
        Span("]", TEXT),
        Span(_SEPARATOR, TEXT),
        Span("UP ", DIM_TEXT),
        Span(fmt_uptime(data.uptime_secs), _HOT),
        Span(_SEPARATOR, TEXT),
        Span("↑↓ NAV", DIM_TEXT),
        Span("  ", PLAIN),
        Span("[Q]", TEXT),
        Span(" EXIT", Style(fg=Color.RED, dim=True)),
    ]
    canvas.box(rect, borders="bottom", style=Style(fg=Color.CYAN))
    body = Rect(rect.x, rect.y, rect.width, max(rect.height - 1, 0))
    paragraph(canvas, body, [line])


def render_sidebar(canvas: Canvas, rect: Rect, current: Tab) -> None:
    """List every tab, highlighting the current one."""
    lines = []
    for tab in Tab:
        label = tab.label().upper()
        if tab is current:
            lines.append([Span("▸ ", _HOT), Span(label, _ACCENT)])
        else:
            lines.append([Span("  ", PLAIN), Span(label, DIM_TEXT)])
    canvas.box(rect, borders="right", style=TEXT)
    body = Rect(rect.x, rect.y, max(rect.width - 1, 0), rect.height)
    paragraph(canvas, body, lines)