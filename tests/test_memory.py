from oxidroid.types import MemData, SystemData
from oxidroid.ui.canvas import Canvas, Color, Rect
from oxidroid.ui.tabs.memory import render
from oxidroid.utils import fmt_bytes

WIDTH, HEIGHT = 50, 16
GIB = 1024**3


def _draw(**mem):
    canvas = Canvas(WIDTH, HEIGHT)
    render(canvas, Rect(0, 0, WIDTH, HEIGHT), SystemData(memory=MemData(**mem)))
    return canvas


def _locate(canvas, needle):
    for y, line in enumerate(canvas.text().split("\n")):
        x = line.find(needle)
        if x >= 0:
            return x, y
    raise AssertionError(f"{needle!r} not drawn")


def _line(canvas, needle):
    return canvas.text().split("\n")[_locate(canvas, needle)[1]]


def test_byte_totals():
    canvas = _draw(total=8 * GIB, used=3 * GIB, available=5 * GIB, swap_total=2 * GIB, swap_used=GIB)
    assert fmt_bytes(8 * GIB) in _line(canvas, "TOTAL")
    assert fmt_bytes(3 * GIB) in _line(canvas, "USED")
    assert fmt_bytes(5 * GIB) in _line(canvas, "AVAILABLE")
    swap = _line(canvas, "SWAP ")
    assert fmt_bytes(GIB) + "  /  " + fmt_bytes(2 * GIB) in swap


def test_percent_is_clamped():
    canvas = _draw(percent=150.0)
    assert "100.0%" in _line(canvas, "RAM_USAGE")
    _, y = _locate(canvas, "RAM_USAGE")
    bar = canvas.text().split("\n")[y + 1]
    assert bar.count("█") == WIDTH - 2


def test_negative_percent_draws_empty_gauges():
    canvas = _draw(percent=-5.0, swap_percent=0.0)
    assert "0.0%" in _line(canvas, "RAM_USAGE")
    assert "█" not in canvas.text()


def test_swap_colour_at_seventy_percent():
    canvas = _draw(swap_percent=70.0)
    x, y = _locate(canvas, "70.0%")
    assert canvas.grid[y][x][1].fg is Color.YELLOW


def test_labels_in_order():
    canvas = _draw()
    assert _locate(canvas, "RAM_USAGE")[1] < _locate(canvas, "SWAP_USAGE")[1]
    assert "MEMORY" in canvas.text().split("\n")[0]