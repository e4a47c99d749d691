"""Whole-screen layout: header, sidebar and the current tab's page."""

from __future__ import annotations

from datetime import datetime

from oxidroid.app import App, Tab
from oxidroid.ui.canvas import Canvas, Rect, split_rows
from oxidroid.ui.header import render_header, render_sidebar
from oxidroid.ui.tabs import (
    battery,
    cpu,
    memory,
    network,
    overview,
    processes,
    settings,
    storage,
)

HEADER_HEIGHT = 3
SIDEBAR_WIDTH = 16

_DATA_PAGES = {
    Tab.OVERVIEW: overview.render,
    Tab.CPU: cpu.render,
    Tab.MEMORY: memory.render,
    Tab.BATTERY: battery.render,
    Tab.NETWORK: network.render,
    Tab.PROCESSES: processes.render,
}


def render(canvas: Canvas, app: App, now: datetime | None = None) -> None:
    """Draw the full dashboard for ``app`` onto ``canvas``."""
    data = app.data.snapshot()
    header, body = split_rows(Rect(0, 0, canvas.width, canvas.height), [HEADER_HEIGHT, None])
    render_header(canvas, header, data, now)

    side_width = min(SIDEBAR_WIDTH, body.width)
    sidebar = Rect(body.x, body.y, side_width, body.height)
    page = Rect(body.x + side_width, body.y, body.width - side_width, body.height)
    render_sidebar(canvas, sidebar, app.tab)

    if app.tab is Tab.STORAGE:
        storage.render(canvas, page, data, app.explorer)
    elif app.tab is Tab.SETTINGS:
        settings.render(canvas, page, app.settings)
    else:
        _DATA_PAGES[app.tab](canvas, page, data)