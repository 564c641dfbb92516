"""Roster selection and player selection state behind the details tab."""
from __future__ import annotations

from typing import Protocol

from ..core.prefs import DEFAULT_PREFERENCES, Preferences
from ..models.data_model import RosterSource
from ..models.player import Player
from ..models.stat_sheet import PLACEHOLDER_TEXT, StatSheet, build_stat_sheet


class DetailsView(Protocol):
    def show_placeholder(self, text: str) -> None: ...

    def show_roster(self, names: list[str]) -> None: ...

    def show_sheet(self, sheet: StatSheet) -> None: ...


class DetailsController:
    """
    Keeps the selected roster key and its players and drives a :class:`DetailsView`.
    """

    def __init__(self, source: RosterSource, view: DetailsView, prefs: Preferences = DEFAULT_PREFERENCES) -> None:
        self.source = source
        self.view = view
        self.prefs = prefs
        self.key: str | None = None
        self.players: list[Player] = []
        self.selected_index: int | None = None
        self.sheet: StatSheet | None = None

    @property
    def selected_key(self) -> str | None:
        return self.key

    @property
    def selected_player(self) -> Player | None:
        if self.selected_index is None:
            return None
        return self.players[self.selected_index]

    def select_roster(self, key: str | None) -> None:
        self.key = key
        self.players = self.source.get_set(key) if key is not None else []
        self.update()

    def clear_roster(self) -> None:
        self.key = None
        self.players = []
        self.update()

    def set_preferences(self, prefs: Preferences) -> None:
        self.prefs = prefs
        if self.selected_index is not None:
            self.on_player_chosen(self.selected_index)

    def update(self) -> None:
        self.selected_index = None
        self.sheet = None
        if self.key is None:
            self.view.show_placeholder(PLACEHOLDER_TEXT)
            return
        self.view.show_roster([p.name for p in self.players])
        if self.players:
            self.on_player_chosen(0)

    def on_player_chosen(self, index: int) -> None:
        if index < 0 or index >= len(self.players):
            return
        self.selected_index = index
        self.sheet = build_stat_sheet(self.players[index], self.prefs)
        self.view.show_sheet(self.sheet)


__all__ = ["DetailsView", "DetailsController"]
