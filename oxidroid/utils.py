"""Formatting helpers for byte sizes, speeds, uptimes and gauge colours."""

from __future__ import annotations

import math

_UNITS = ("B", "KB", "MB", "GB", "TB")


def fmt_bytes(b: int) -> str:
    """Format a byte count with one decimal in the largest fitting unit."""
    value = float(b)
    unit = 0
    while value >= 1024.0 and unit < len(_UNITS) - 1:
        value /= 1024.0
        unit += 1
    return f"{value:.1f}{_UNITS[unit]}"


def fmt_speed(b: float) -> str:
    """Format a bytes-per-second rate; fractions are dropped, negatives read as zero."""
    if math.isnan(b) or b <= 0:
        whole = 0
    else:
        whole = int(b)
    return f"{fmt_bytes(whole)}/s"


def fmt_uptime(s: int) -> str:
    """Format seconds as days, hours and minutes, omitting leading zero units."""
    days = s // 86400
    hours = (s % 86400) // 3600
    minutes = (s % 3600) // 60
    if days > 0:
        return f"{days}d {hours}h {minutes}m"
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


def gauge_color(p: float) -> str:
    """Colour name for a usage percentage: red when critical, magenta when high."""
    if p >= 90.0:
        return "red"
    if p >= 70.0:
        return "magenta"
    return "cyan"