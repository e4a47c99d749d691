import pytest

from oxidroid.utils import fmt_bytes, fmt_speed, fmt_uptime, gauge_color


def test_fmt_bytes_kilobyte():
    assert fmt_bytes(1024) == "1.0KB"


def test_fmt_bytes_small_values_stay_in_bytes():
    assert fmt_bytes(0).endswith("B")
    assert fmt_bytes(1023).endswith("B")
    assert not fmt_bytes(1023).endswith("KB")


@pytest.mark.parametrize("power,unit", [(1, "KB"), (2, "MB"), (3, "GB"), (4, "TB")])
def test_fmt_bytes_units(power, unit):
    assert fmt_bytes(1024**power).endswith(unit)
    assert fmt_bytes(1024**power) == fmt_bytes(1024).replace("KB", unit)


def test_fmt_bytes_caps_at_terabytes():
    assert fmt_bytes(1024**6).endswith("TB")


def test_fmt_speed_matches_bytes():
    assert fmt_speed(2048.9) == fmt_bytes(2048) + "/s"


def test_fmt_speed_negative_and_nan_are_zero():
    assert fmt_speed(-5.0) == fmt_speed(0.0)
    assert fmt_speed(float("nan")) == fmt_speed(0.0)


def test_fmt_uptime_full():
    assert fmt_uptime(90061) == "1d 1h 1m"


def test_fmt_uptime_drops_leading_units():
    assert fmt_uptime(3600 + 60).startswith("1h")
    assert "d" not in fmt_uptime(3600 + 60)
    assert fmt_uptime(59) == fmt_uptime(0)
    assert fmt_uptime(120).endswith("m")
    assert "h" not in fmt_uptime(120)


def test_fmt_uptime_days_show_all_parts():
    text = fmt_uptime(86400)
    assert text.startswith("1d")
    assert text.count(" ") == 2


def test_gauge_color_thresholds():
    assert gauge_color(90.0) == "red"
    assert gauge_color(100.0) == gauge_color(90.0)
    assert gauge_color(70.0) == "magenta"
    assert gauge_color(89.9) == gauge_color(70.0)
    assert gauge_color(69.9) == "cyan"
    assert gauge_color(0.0) == gauge_color(69.9)