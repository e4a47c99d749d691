"""Key handling for the dashboard."""

from __future__ import annotations

from enum import Enum, auto

from oxidroid.app import App, Tab

REFRESH_STEP = 100
REFRESH_MIN = 100
REFRESH_MAX = 2000
BATTERY_STEP = 500
BATTERY_MIN = 1000
BATTERY_MAX = 10000
_LAST_SETTING = 1


class Key(Enum):
    """Non-character keys the dashboard reacts to; characters are passed as ``str``."""

    TAB = auto()
    BACK_TAB = auto()
    ESC = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ENTER = auto()


def _adjust_setting(app: App, direction: int) -> None:
    s = app.settings
    if s.selected == 0:
        if direction > 0:
            s.refresh_ms = min(s.refresh_ms + REFRESH_STEP, REFRESH_MAX)
        else:
            s.refresh_ms = max(s.refresh_ms - REFRESH_STEP, REFRESH_MIN)
    elif s.selected == 1:
        if direction > 0:
            s.battery_mah = min(s.battery_mah + BATTERY_STEP, BATTERY_MAX)
        else:
            s.battery_mah = max(s.battery_mah - BATTERY_STEP, BATTERY_MIN)


def _handle_settings(app: App, key: Key | str) -> None:
    s = app.settings
    if key is Key.UP:
        if s.selected > 0:
            s.selected -= 1
    elif key is Key.DOWN:
        if s.selected < _LAST_SETTING:
            s.selected += 1
    elif key is Key.RIGHT:
        _adjust_setting(app, 1)
    elif key is Key.LEFT:
        _adjust_setting(app, -1)
    elif key in ("r", "R"):
        s.reset()


def handle_key(app: App, key: Key | str) -> None:
    """Apply one key press to ``app``."""
    if key in ("q", "Q"):
        app.running = False
        return
    if key is Key.TAB:
        app.next()
        return
    if key is Key.BACK_TAB:
        app.prev()
        return

    if key is Key.ESC:
        if app.explorer.focused:
            app.explorer.focused = False
            return
        if app.settings.focused:
            app.settings.focused = False
            return

    if app.tab is Tab.STORAGE and app.explorer.focused:
        if key is Key.UP:
            app.explorer.up()
        elif key is Key.DOWN:
            app.explorer.down()
        elif key is Key.ENTER:
            app.explorer.enter()
        return

    if app.tab is Tab.SETTINGS and app.settings.focused:
        _handle_settings(app, key)
        return

    if key is Key.UP:
        app.prev()
    elif key is Key.DOWN:
        app.next()
    elif key is Key.ENTER:
        if app.tab is Tab.STORAGE:
            app.explorer.focused = True
        if app.tab is Tab.SETTINGS:
            app.settings.focused = True