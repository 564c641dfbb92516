"""Threshold ladder colors and delta formatting shared by the view and the exporters."""
from __future__ import annotations

from .config import COLOR_GREEN, COLOR_ORANGE, COLOR_RED, COLOR_YELLOW
from .prefs import Thresholds


def threshold_color(value: float, low: float, high: float) -> str:
    """
    Classify ``value`` against ``(low, high)``.

    ``value < low`` is red, ``low <= value < high`` is yellow and anything
    else is green. Both comparisons are strict, so a value equal to a bound
    lands in the upper tier.
    """
    if value < low:
        return COLOR_RED
    if value < high:
        return COLOR_YELLOW
    return COLOR_GREEN


def ladder_color(value: float, thresholds: Thresholds) -> str:
    """Detail-view variant of :func:`threshold_color` with orange as the lowest tier."""
    if value < thresholds.low:
        return COLOR_ORANGE
    if value < thresholds.high:
        return COLOR_YELLOW
    return COLOR_GREEN


def format_delta(current: int, previous: int) -> str | None:
    """Return ``"+N"``/``"-N"`` or ``None`` when nothing changed."""
    if current == previous:
        return None
    sign = "+" if current > previous else "-"
    return f"{sign}{abs(current - previous)}"


def format_percent_delta(current: float, previous: float) -> str | None:
    if current == previous:
        return None
    sign = "+" if current > previous else "-"
    return f"{sign}{abs(current - previous):.2f}"


__all__ = ["threshold_color", "ladder_color", "format_delta", "format_percent_delta"]
