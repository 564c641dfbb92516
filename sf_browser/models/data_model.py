"""
In-memory roster store.

Rosters ("sets") are named, ordered lists of :class:`Player` snapshots. The
store is handed explicitly to the detail view and the exporters.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, Protocol

from ..logs.logging import get_logger
from .player import Player

_LOGGER = get_logger("sf_browser.data")


class RosterSource(Protocol):
    def get_set(self, key: str) -> list[Player]: ...


class RosterStore:
    def __init__(self) -> None:
        self._sets: dict[str, list[Player]] = {}

    def keys(self) -> list[str]:
        return list(self._sets.keys())

    def add_set(self, key: str, players: Iterable[Player]) -> None:
        self._sets[key] = list(players)

    def get_set(self, key: str) -> list[Player]:
        """Return a fresh list of the roster's players; raises ``KeyError`` for unknown keys."""
        return list(self._sets[key])

    def load_file(self, path: Path) -> str:
        """
        Load a roster from a JSON file and return its key.

        The file holds either a list of player mappings, or an object with a
        ``players`` list and an optional ``name`` (defaulting to the file stem).
        """
        with path.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
        key = path.stem
        if isinstance(data, dict):
            key = str(data.get("name") or key)
            records = data.get("players") or []
        else:
            records = data
        if not isinstance(records, list):
            raise ValueError(f"{path.name}: expected a list of players")
        self.add_set(key, (Player.from_dict(record) for record in records))
        _LOGGER.info("Loaded roster %s with %d players from %s", key, len(records), path)
        return key

    def load_directory(self, directory: Path) -> list[str]:
        """Load every ``*.json`` roster in ``directory``; unreadable files are logged and skipped."""
        loaded: list[str] = []
        if not directory.is_dir():
            return loaded
        for path in sorted(directory.glob("*.json")):
            try:
                loaded.append(self.load_file(path))
            except (OSError, ValueError, TypeError) as exc:
                _LOGGER.warning("Skipping roster file %s: %s", path, exc)
        return loaded


__all__ = ["RosterSource", "RosterStore"]
