from __future__ import annotations

import math


def to_percentage(brightness: int, max_brightness: int) -> float:
    return brightness / max_brightness * 100


def to_raw(max_brightness: int, percentage: float) -> int:
    """Convert a percentage to raw brightness units, truncating.

    Divides before multiplying; swapping the order changes which raw value
    non-exact divisions land on.
    """

    return math.floor(max_brightness / 100 * percentage)


def clamp(percentage: float) -> tuple[float, bool]:
    """Bound a percentage to [0, 100]; the flag tells whether it moved."""

    if percentage < 0:
        return 0.0, True
    if percentage > 100:
        return 100.0, True
    return percentage, False


def format_percentage(percentage: float) -> str:
    return f"{percentage:.1f}"
