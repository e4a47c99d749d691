"""Terminal entry point: runs the dashboard until the user quits."""

from __future__ import annotations

import argparse
import curses
import itertools
import os
import threading
from collections.abc import Sequence

from oxidroid.app import App
from oxidroid.collector import collect_loop
from oxidroid.input import Key, handle_key
from oxidroid.ui import screen
from oxidroid.ui.canvas import Canvas, Color, Style

POLL_MS = 50

_SPECIAL_KEYS = {
    9: Key.TAB,
    curses.KEY_BTAB: Key.BACK_TAB,
    27: Key.ESC,
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
    10: Key.ENTER,
    13: Key.ENTER,
    curses.KEY_ENTER: Key.ENTER,
}


def translate_key(code: int) -> Key | str | None:
    """Map a curses key code to what ``handle_key`` expects, or None to ignore it."""
    if code in _SPECIAL_KEYS:
        return _SPECIAL_KEYS[code]
    if 32 <= code < 127:
        return chr(code)
    return None


class _Painter:
    """Copies a Canvas onto a curses window, allocating colour pairs on demand."""

    def __init__(self, window) -> None:
        self._window = window
        self._attrs: dict[Style, int] = {}
        self._next_pair = 1
        self._colors = curses.has_colors()
        if self._colors:
            curses.start_color()
            try:
                curses.use_default_colors()
                self._default = -1
            except curses.error:
                self._default = curses.COLOR_BLACK

    def _curses_color(self, color: Color | None) -> int:
        if color is None or color is Color.RESET:
            return self._default
        if color is Color.DARK_GRAY:
            return 8 if curses.COLORS > 8 else curses.COLOR_BLACK
        return {
            Color.BLACK: curses.COLOR_BLACK,
            Color.RED: curses.COLOR_RED,
            Color.GREEN: curses.COLOR_GREEN,
            Color.YELLOW: curses.COLOR_YELLOW,
            Color.BLUE: curses.COLOR_BLUE,
            Color.MAGENTA: curses.COLOR_MAGENTA,
            Color.CYAN: curses.COLOR_CYAN,
            Color.WHITE: curses.COLOR_WHITE,
        }[color]

    def _attr(self, style: Style) -> int:
        if style in self._attrs:
            return self._attrs[style]
        attr = 0
        if style.bold:
            attr |= curses.A_BOLD
        if style.dim:
            attr |= curses.A_DIM
        if self._colors and (style.fg or style.bg) and self._next_pair < curses.COLOR_PAIRS:
            try:
                curses.init_pair(
                    self._next_pair,
                    self._curses_color(style.fg),
                    self._curses_color(style.bg),
                )
                attr |= curses.color_pair(self._next_pair)
                self._next_pair += 1
            except curses.error:
                pass
        self._attrs[style] = attr
        return attr

    def paint(self, canvas: Canvas) -> None:
        self._window.erase()
        for y, row in enumerate(canvas.grid):
            x = 0
            for style, cells in itertools.groupby(row, key=lambda cell: cell[1]):
                text = "".join(ch for ch, _ in cells)
                try:
                    self._window.addstr(y, x, text, self._attr(style))
                except curses.error:
                    pass  # writing the bottom-right cell moves the cursor off screen
                x += len(text)
        self._window.noutrefresh()
        curses.doupdate()


def _run(window) -> None:
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    window.keypad(True)
    window.timeout(POLL_MS)
    painter = _Painter(window)

    app = App()
    stop = threading.Event()
    worker = threading.Thread(target=collect_loop, args=(app.data, stop), daemon=True)
    worker.start()
    try:
        while app.running:
            height, width = window.getmaxyx()
            canvas = Canvas(width, height)
            screen.render(canvas, app)
            painter.paint(canvas)
            key = translate_key(window.getch())
            if key is not None:
                handle_key(app, key)
    finally:
        stop.set()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the dashboard in the terminal until ``q`` is pressed."""
    parser = argparse.ArgumentParser(prog="oxidroid", description="Terminal system dashboard.")
    parser.parse_args(argv)
    os.environ.setdefault("ESCDELAY", "25")
    curses.wrapper(_run)
    print("⚡Oxidroid closed!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())