"""Threshold preferences load/save."""
from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from .config import PREFS_PATH


@dataclass(frozen=True)
class Thresholds:
    """A ``(low, high)`` pair for the red/yellow/green ladder."""

    low: int
    high: int


@dataclass(frozen=True)
class Preferences:
    mount: Thresholds = field(default_factory=lambda: Thresholds(3, 4))
    pet: Thresholds = field(default_factory=lambda: Thresholds(100, 200))
    knights: Thresholds = field(default_factory=lambda: Thresholds(15, 17))
    book: Thresholds = field(default_factory=lambda: Thresholds(1200, 1800))
    highlight_all: bool = False


DEFAULT_PREFERENCES = Preferences()

_THRESHOLD_KEYS = ("mount", "pet", "knights", "book")


def _coerce_pair(raw: Any, default: Thresholds) -> Thresholds:
    if isinstance(raw, dict):
        low, high = raw.get("low", default.low), raw.get("high", default.high)
    elif isinstance(raw, (list, tuple)) and len(raw) == 2:
        low, high = raw
    else:
        return default
    try:
        return Thresholds(int(low), int(high))
    except (TypeError, ValueError):
        return default


def preferences_from_dict(data: dict[str, Any]) -> Preferences:
    """Build preferences from a mapping, keeping defaults for missing or bad entries."""
    pairs = {key: _coerce_pair(data.get(key), getattr(DEFAULT_PREFERENCES, key)) for key in _THRESHOLD_KEYS}
    return Preferences(highlight_all=bool(data.get("highlight_all", False)), **pairs)


def load_preferences(path: Path | None = None) -> Preferences:
    """Load preferences from disk or return defaults."""
    target = path or PREFS_PATH
    if not target.exists():
        return DEFAULT_PREFERENCES
    try:
        with target.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
    except (OSError, ValueError):
        return DEFAULT_PREFERENCES
    if not isinstance(data, dict):
        return DEFAULT_PREFERENCES
    return preferences_from_dict(data)


def save_preferences(prefs: Preferences, path: Path | None = None) -> None:
    """Persist preferences to disk."""
    target = path or PREFS_PATH
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as fh:
        json.dump(asdict(prefs), fh, indent=2)


__all__ = [
    "Thresholds",
    "Preferences",
    "DEFAULT_PREFERENCES",
    "preferences_from_dict",
    "load_preferences",
    "save_preferences",
]
