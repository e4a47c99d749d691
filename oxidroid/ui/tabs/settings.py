"""The settings page: a small table of adjustable values."""

from __future__ import annotations

from collections.abc import Sequence

from oxidroid.settings import Settings
from oxidroid.ui.canvas import (
    Canvas,
    Color,
    PLAIN,
    Rect,
    Span,
    Style,
    panel,
    paragraph,
    split_rows,
)

_FIXED_WIDTHS = (2, 25, None)
_MIN_VALUE_WIDTH = 20
_SPACING = 1
_HEADER = Style(fg=Color.WHITE, bold=True)


def _column_widths(total: int) -> list[int]:
    fixed = sum(w for w in _FIXED_WIDTHS if w is not None)
    gaps = _SPACING * (len(_FIXED_WIDTHS) - 1)
    flexible = max(total - fixed - gaps, _MIN_VALUE_WIDTH)
    return [flexible if w is None else w for w in _FIXED_WIDTHS]


def _with_fg(base: Style, fg: Color) -> Style:
    return Style(fg=fg, bg=base.bg, bold=base.bold, dim=base.dim)


def _draw_row(canvas: Canvas, area: Rect, y: int, cells: Sequence[Span]) -> None:
    right = area.x + area.width
    x = area.x
    for width, cell in zip(_column_widths(area.width), cells):
        room = min(width, right - x)
        if room <= 0:
            break
        canvas.put_spans(x, y, [cell], room)
        x += width + _SPACING


def _row_style(selected: bool, focused: bool) -> Style:
    if selected and focused:
        return Style(fg=Color.BLACK, bg=Color.CYAN, bold=True)
    if selected:
        return Style(fg=Color.CYAN, bold=True)
    return PLAIN


def render(canvas: Canvas, rect: Rect, settings: Settings) -> None:
    """Draw the settings page into ``rect``."""
    inner = panel(canvas, rect, "SETTINGS")
    table, footer = split_rows(inner, [None, 2])
    entries = [
        ("Refresh Rate", f"{settings.refresh_ms} ms"),
        ("Battery Capacity", f"{settings.battery_mah} mAh"),
    ]

    bottom = table.y + table.height
    if table.height > 0:
        _draw_row(
            canvas,
            table,
            table.y,
            [Span("", _HEADER), Span("Setting", _HEADER), Span("Value", _HEADER)],
        )

    name_fg = Color.CYAN if settings.focused else Color.WHITE
    for index, (y, (name, value)) in enumerate(zip(range(table.y + 2, bottom), entries)):
        selected = index == settings.selected
        style = _row_style(selected, settings.focused)
        canvas.put(table.x, y, " " * table.width, style)
        _draw_row(
            canvas,
            table,
            y,
            [
                Span("▶" if selected else " ", style),
                Span(name, _with_fg(style, name_fg)),
                Span(value, style),
            ],
        )

    if settings.focused:
        instructions = [
            Span("↑↓:Navigate  ", Style(fg=Color.WHITE)),
            Span("←→:Adjust  ", Style(fg=Color.WHITE)),
            Span("r:Reset  ", Style(fg=Color.YELLOW)),
            Span("Esc:Back", Style(fg=Color.RED)),
        ]
    else:
        instructions = [Span("Enter: Edit Settings", Style(fg=Color.WHITE))]
    paragraph(canvas, footer, [instructions])