"""The overview page: headline gauges and device summary panels."""

from __future__ import annotations

from collections.abc import Sequence

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
    split_cols,
    split_rows,
)
from oxidroid.utils import fmt_speed


def _clamp(percent: float) -> float:
    return min(max(percent, 0.0), 100.0)


def _pct_style(percent: float) -> Style:
    if percent >= 85.0:
        return Style(fg=Color.MAGENTA, bold=True)
    if percent >= 60.0:
        return Style(fg=Color.YELLOW)
    return Style(fg=Color.CYAN)


def _gauge(canvas: Canvas, rect: Rect, label: str, value: float) -> None:
    clamped = _clamp(value)
    metric(canvas, rect, label, clamped, pct_style=_pct_style(clamped))


def _info_panel(canvas: Canvas, rect: Rect, title: str, line: Sequence[Span]) -> None:
    canvas.box(rect, [Span(f" {title} ", DIM_TEXT)], "all", TEXT)
    paragraph(canvas, rect.inner(), [line])


def render(canvas: Canvas, rect: Rect, data: SystemData) -> None:
    """Draw the overview page into ``rect``."""
    inner = panel(canvas, rect, "OVERVIEW")
    sections = split_rows(inner, [2, 1, 2, 1, 2, 1, 2, 1, 3, 3, None])

    _gauge(canvas, sections[0], "CPU_USAGE", float(data.cpu.percent))
    _gauge(canvas, sections[2], "MEM_USAGE", float(data.memory.percent))
    _gauge(canvas, sections[4], "DISK_USAGE", float(data.storage.percent))
    _gauge(canvas, sections[6], "PWR_LEVEL", float(data.battery.percentage))

    rule(canvas, sections[7])

    net_rect, hw_rect = split_cols(sections[8], [50, 50])
    _info_panel(
        canvas,
        net_rect,
        "NET_IO",
        [
            Span("↑ ", Style(fg=Color.MAGENTA, bold=True)),
            Span(fmt_speed(data.network.speed_up), TEXT),
            Span("   ↓ ", Style(fg=Color.CYAN, bold=True)),
            Span(fmt_speed(data.network.speed_down), TEXT),
        ],
    )
    device = data.device
    _info_panel(
        canvas,
        hw_rect,
        "HARDWARE",
        [
            Span(
                f"{device.manufacturer.upper()} {device.model.upper()}",
                Style(fg=Color.WHITE, bold=True),
            )
        ],
    )

    os_rect, arch_rect = split_cols(sections[9], [50, 50])
    _info_panel(
        canvas, os_rect, "SYSTEM", [Span(device.android, Style(fg=Color.CYAN, bold=True))]
    )
    _info_panel(canvas, arch_rect, "ARCHITECTURE", [Span(device.arch, TEXT)])