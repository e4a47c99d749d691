"""The network page: live transfer speeds, address and byte totals."""

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
    panel,
    paragraph,
    rule,
    split_cols,
    split_rows,
)
from oxidroid.utils import fmt_bytes, fmt_speed

_VALUE = Style(fg=Color.WHITE, bold=True)


def render(canvas: Canvas, rect: Rect, data: SystemData) -> None:
    """Draw the network page into ``rect``."""
    net = data.network
    inner = panel(canvas, rect, "NETWORK")
    rows = split_rows(inner, [2, 1, None])

    upload, download = split_cols(rows[0], [50, 50])
    paragraph(
        canvas,
        upload,
        [
            [Span("↑ TX", Style(fg=Color.MAGENTA, bold=True))],
            [Span(fmt_speed(net.speed_up), _VALUE)],
        ],
    )
    paragraph(
        canvas,
        download,
        [
            [Span("↓ RX", Style(fg=Color.CYAN, bold=True))],
            [Span(fmt_speed(net.speed_down), _VALUE)],
        ],
    )

    rule(canvas, rows[1])

    stats = [
        [Span("IP_V4      ", DIM_TEXT), Span(net.ip, Style(fg=Color.CYAN))],
        [Span("TOTAL_SENT ", DIM_TEXT), Span(fmt_bytes(net.bytes_sent), TEXT)],
        [Span("TOTAL_RECV ", DIM_TEXT), Span(fmt_bytes(net.bytes_recv), TEXT)],
    ]
    paragraph(canvas, rows[2], stats)