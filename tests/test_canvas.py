import pytest

from oxidroid.ui.canvas import (
    Canvas,
    Color,
    Rect,
    Span,
    Style,
    level_color,
    metric,
    paragraph,
    split_cols,
    split_rows,
)


def test_inner_shrinks_by_border():
    assert Rect(0, 0, 10, 5).inner() == Rect(1, 1, 8, 3)


def test_inner_of_tiny_rect_is_empty():
    inner = Rect(3, 3, 1, 1).inner()
    assert inner.width == 0
    assert inner.height == 0


def test_split_rows_fills_remainder_and_is_contiguous():
    rect = Rect(2, 1, 10, 10)
    rows = split_rows(rect, [2, 1, None])
    assert [r.height for r in rows[:2]] == [2, 1]
    assert sum(r.height for r in rows) == rect.height
    for above, below in zip(rows, rows[1:]):
        assert below.y == above.y + above.height
    assert all(r.x == rect.x and r.width == rect.width for r in rows)


def test_split_rows_clips_overflow():
    rect = Rect(0, 0, 5, 4)
    rows = split_rows(rect, [3, 3, 3])
    assert sum(r.height for r in rows) == rect.height
    assert rows[-1].height == 0


def test_split_rows_rejects_negative():
    with pytest.raises(ValueError):
        split_rows(Rect(0, 0, 5, 5), [-1])


def test_split_cols_covers_width():
    rect = Rect(4, 0, 11, 2)
    cols = split_cols(rect, [50, 50])
    assert sum(c.width for c in cols) == rect.width
    assert cols[0].x == rect.x
    assert cols[1].x == cols[0].x + cols[0].width


def test_split_cols_rejects_negative():
    with pytest.raises(ValueError):
        split_cols(Rect(0, 0, 5, 5), [-10, 50])


def test_put_clips_and_returns_next_column():
    canvas = Canvas(5, 2)
    end = canvas.put(3, 0, "abcd")
    assert end == 3 + len("abcd")
    first = canvas.text().split("\n")[0]
    assert first.endswith("ab")
    assert len(first) == canvas.width


def test_put_records_style():
    canvas = Canvas(6, 1)
    style = Style(fg=Color.CYAN, bold=True)
    canvas.put(1, 0, "xy", style)
    assert canvas.grid[0][1] == ("x", style)
    assert canvas.grid[0][2] == ("y", style)


def test_put_spans_respects_max_width():
    canvas = Canvas(20, 1)
    canvas.put_spans(0, 0, [Span("hello"), Span("world")], 7)
    assert canvas.text() == "helloworld"[:7]


def test_box_draws_corners_and_title():
    canvas = Canvas(12, 4)
    canvas.box(Rect(0, 0, 12, 4), "TITLE")
    lines = canvas.text().split("\n")
    assert lines[0][0] == "┌"
    assert lines[3][11] == "┘"
    assert "TITLE" in lines[0]


def test_box_rejects_unknown_side():
    with pytest.raises(ValueError):
        Canvas(5, 5).box(Rect(0, 0, 5, 5), borders="diagonal")


def test_gauge_full_and_empty():
    canvas = Canvas(10, 2)
    canvas.gauge(Rect(0, 0, 10, 1), 1.0)
    canvas.gauge(Rect(0, 1, 10, 1), 0.0)
    lines = canvas.text().split("\n")
    assert lines[0].count("█") == canvas.width
    assert "█" not in lines[1]


def test_gauge_grows_with_ratio():
    counts = []
    for ratio in (0.2, 0.5, 0.9):
        canvas = Canvas(20, 1)
        canvas.gauge(Rect(0, 0, 20, 1), ratio)
        counts.append(canvas.text().count("█"))
    assert counts == sorted(counts)
    assert counts[0] < counts[-1]


@pytest.mark.parametrize("ratio", [-0.1, 1.5, float("nan")])
def test_gauge_rejects_bad_ratio(ratio):
    with pytest.raises(ValueError):
        Canvas(5, 1).gauge(Rect(0, 0, 5, 1), ratio)


def test_canvas_rejects_negative_size():
    with pytest.raises(ValueError):
        Canvas(-1, 3)


def test_text_has_one_line_per_row():
    canvas = Canvas(4, 6)
    assert len(canvas.text().split("\n")) == canvas.height


@pytest.mark.parametrize(
    "percent, color",
    [(85.0, Color.MAGENTA), (60.0, Color.YELLOW), (59.9, Color.CYAN), (100.0, Color.MAGENTA)],
)
def test_level_color_thresholds(percent, color):
    assert level_color(percent) is color


def test_metric_line_spans_width_minus_two():
    canvas = Canvas(30, 2)
    metric(canvas, Rect(0, 0, 30, 2), "LOAD", 50.0)
    lines = canvas.text().split("\n")
    assert lines[0].startswith("LOAD")
    assert len(lines[0]) == canvas.width - 2
    assert "█" in lines[1]


def test_paragraph_clips_to_rect_height():
    canvas = Canvas(10, 5)
    paragraph(canvas, Rect(0, 1, 10, 2), [[Span("a")], [Span("b")], [Span("c")]])
    lines = canvas.text().split("\n")
    assert lines[1:4] == ["a", "b", ""]