"""A character-cell drawing surface and the layout helpers the dashboard draws with."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum


class Color(str, Enum):
    """Terminal colours; values match the names returned by ``gauge_color``."""

    RESET = "reset"
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"
    DARK_GRAY = "dark_gray"


@dataclass(frozen=True)
class Style:
    """Foreground, background and text attributes of a cell."""

    fg: Color | None = None
    bg: Color | None = None
    bold: bool = False
    dim: bool = False


PLAIN = Style()
TEXT = Style(fg=Color.WHITE)
DIM_TEXT = Style(fg=Color.WHITE, dim=True)


@dataclass(frozen=True)
class Span:
    """A run of text drawn in one style."""

    text: str
    style: Style = PLAIN


@dataclass(frozen=True)
class Rect:
    """A rectangular area of the canvas."""

    x: int
    y: int
    width: int
    height: int

    def inner(self) -> Rect:
        """The area left inside a border drawn on all four sides."""
        return Rect(self.x + 1, self.y + 1, max(self.width - 2, 0), max(self.height - 2, 0))


def split_rows(rect: Rect, heights: Sequence[int | None]) -> list[Rect]:
    """Stack rows of the given heights; ``None`` takes whatever height is left.

    Rows that do not fit are cut short at the bottom of ``rect``.
    """
    if any(h is not None and h < 0 for h in heights):
        raise ValueError("row heights must not be negative")
    fixed = sum(h for h in heights if h is not None)
    spare = max(rect.height - fixed, 0)
    bottom = rect.y + rect.height
    rows = []
    y = rect.y
    for height in heights:
        if height is None:
            height, spare = spare, 0
        size = max(min(height, bottom - y), 0)
        rows.append(Rect(rect.x, y, rect.width, size))
        y += size
    return rows


def split_cols(rect: Rect, percents: Sequence[float]) -> list[Rect]:
    """Place columns side by side, each taking a percentage of the width."""
    if any(p < 0 for p in percents):
        raise ValueError("column percentages must not be negative")
    right_edge = rect.x + rect.width
    cols = []
    left = rect.x
    cumulative = 0.0
    for percent in percents:
        cumulative += percent
        right = min(rect.x + int((rect.width * cumulative + 50) // 100), right_edge)
        right = max(right, left)
        cols.append(Rect(left, rect.y, right - left, rect.height))
        left = right
    return cols


_SIDES = frozenset({"top", "bottom", "left", "right"})


def _parse_sides(borders: str | Iterable[str]) -> frozenset[str]:
    if isinstance(borders, str):
        sides = _SIDES if borders == "all" else frozenset({borders})
    else:
        sides = frozenset(borders)
    unknown = sides - _SIDES
    if unknown:
        raise ValueError(f"unknown border side(s): {', '.join(sorted(unknown))}")
    return sides


class Canvas:
    """A grid of ``(character, Style)`` cells; drawing outside it is clipped."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("canvas size must not be negative")
        self.width = width
        self.height = height
        self.grid: list[list[tuple[str, Style]]] = [
            [(" ", PLAIN) for _ in range(width)] for _ in range(height)
        ]

    def put(self, x: int, y: int, text: str, style: Style = PLAIN) -> int:
        """Write ``text`` from column ``x`` of row ``y``; return the column after it."""
        if 0 <= y < self.height:
            row = self.grid[y]
            for ch in text:
                if 0 <= x < self.width:
                    row[x] = (ch, style)
                x += 1
            return x
        return x + len(text)

    def put_spans(
        self, x: int, y: int, spans: Iterable[Span], max_width: int | None = None
    ) -> int:
        """Write spans one after another, stopping after ``max_width`` columns."""
        limit = self.width if max_width is None else min(self.width, x + max(max_width, 0))
        for span in spans:
            room = limit - x
            if room <= 0:
                break
            x = self.put(x, y, span.text[:room], span.style)
        return x

    def box(
        self,
        rect: Rect,
        title: str | Sequence[Span] | None = None,
        borders: str | Iterable[str] = "all",
    ) -> None:
        """Draw a border on the chosen sides of ``rect``, with an optional title on top."""
        sides = _parse_sides(borders)
        if rect.width <= 0 or rect.height <= 0:
            return
        style = TEXT
        left, top = rect.x, rect.y
        right = rect.x + rect.width - 1
        bottom = rect.y + rect.height - 1
        if "top" in sides:
            self.put(left, top, "─" * rect.width, style)
        if "bottom" in sides:
            self.put(left, bottom, "─" * rect.width, style)
        for y in range(top, bottom + 1):
            if "left" in sides:
                self.put(left, y, "│", style)
            if "right" in sides:
                self.put(right, y, "│", style)
        for corner_sides, glyph, cx, cy in (
            (("top", "left"), "┌", left, top),
            (("top", "right"), "┐", right, top),
            (("bottom", "left"), "└", left, bottom),
            (("bottom", "right"), "┘", right, bottom),
        ):
            if all(side in sides for side in corner_sides):
                self.put(cx, cy, glyph, style)
        if title:
            spans = [Span(title, style)] if isinstance(title, str) else list(title)
            inset = 1 if "left" in sides else 0
            room = rect.width - inset - (1 if "right" in sides else 0)
            self.put_spans(left + inset, top, spans, room)

    def gauge(self, rect: Rect, ratio: float, style: Style = PLAIN) -> None:
        """Fill the leading ``ratio`` of each row of ``rect`` with block characters."""
        if not 0.0 <= ratio <= 1.0:
            raise ValueError("gauge ratio must be between 0 and 1")
        filled = int(rect.width * ratio)
        empty_style = Style(bg=style.bg)
        for y in range(rect.y, rect.y + rect.height):
            self.put(rect.x, y, "█" * filled, style)
            self.put(rect.x + filled, y, " " * (rect.width - filled), empty_style)

    def text(self) -> str:
        """The characters of the canvas, one line per row, trailing blanks removed."""
        return "\n".join("".join(ch for ch, _ in row).rstrip() for row in self.grid)


# ── shared widgets ──────────────────────────────────────────────────────────


def level_color(percent: float) -> Color:
    """Usage colour used by the gauges: magenta when high, yellow when raised."""
    if percent >= 85.0:
        return Color.MAGENTA
    if percent >= 60.0:
        return Color.YELLOW
    return Color.CYAN


def paragraph(canvas: Canvas, rect: Rect, lines: Iterable[Sequence[Span]]) -> None:
    """Draw lines of spans from the top of ``rect``, clipped to its size."""
    for offset, line in zip(range(rect.height), lines):
        canvas.put_spans(rect.x, rect.y + offset, line, rect.width)


def rule(canvas: Canvas, rect: Rect) -> None:
    """Draw a dim horizontal line across the first row of ``rect``."""
    if rect.height > 0:
        canvas.put(rect.x, rect.y, "─" * rect.width, DIM_TEXT)


def panel(canvas: Canvas, rect: Rect, name: str) -> Rect:
    """Draw a bordered panel titled ``name`` and return the area inside it."""
    title = [
        Span("─── ", TEXT),
        Span("◈ ", Style(fg=Color.MAGENTA, bold=True)),
        Span(name, Style(fg=Color.CYAN, bold=True)),
        Span(" ───", TEXT),
    ]
    canvas.box(rect, title, "all")
    return rect.inner()


def _ratio(percent: float) -> float:
    if math.isnan(percent):
        return 0.0
    return min(max(percent / 100.0, 0.0), 1.0)


def metric(
    canvas: Canvas,
    rect: Rect,
    label: str,
    percent: float,
    color: Color | None = None,
    pct_style: Style | None = None,
) -> None:
    """Draw ``LABEL ····· 12.3%`` on the first row of ``rect`` and a gauge below it."""
    color = color if color is not None else level_color(percent)
    pct = f"{percent:.1f}%"
    dots = "·" * max(rect.width - (len(label) + len(pct) + 2), 0)
    style = pct_style if pct_style is not None else Style(fg=color, bold=True)
    paragraph(canvas, rect, [[Span(label, DIM_TEXT), Span(dots, DIM_TEXT), Span(pct, style)]])
    if rect.height >= 2:
        canvas.gauge(
            Rect(rect.x, rect.y + 1, rect.width, 1),
            _ratio(percent),
            Style(fg=color, bg=Color.RESET, bold=True),
        )