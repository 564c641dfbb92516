from __future__ import annotations

import pytest

from sf_browser.core.prefs import Preferences, Thresholds
from sf_browser.models.data_model import RosterStore
from sf_browser.models.player import Fortress, GuildMembership, Player, PotionSlot


def _player(name: str = "Alpha", *, member: bool = False, role: int = 3, pet: int = 150, knights: int = 16, **fields) -> Player:
    membership = GuildMembership(role=role, treasure=40, instructor=35, pet=pet, knights=knights) if member else None
    defaults = dict(
        level=10,
        gear_score=100,
        guild="Night Watch" if member else None,
        xp=250,
        xp_next=1000,
        book=1080,
        achievements=20,
        mount=4,
        class_id=1,
        race_id=1,
        sex_id=1,
        strength=1000,
        dexterity=200,
        intelligence=150,
        constitution=900,
        luck=300,
        armor=5000,
        rank_player=1234,
        honor_player=5678,
        rank_fortress=99,
        honor_fortress=4321,
        fortress=Fortress(upgrades=12, wall=15, warriors=14, archers=13, mages=11),
    )
    defaults.update(fields)
    return Player(name=name, guild_membership=membership, **defaults)


@pytest.fixture
def make_player():
    return _player


@pytest.fixture
def prefs() -> Preferences:
    return Preferences(
        mount=Thresholds(3, 4),
        pet=Thresholds(100, 200),
        knights=Thresholds(15, 17),
        book=Thresholds(1200, 1800),
        highlight_all=False,
    )


@pytest.fixture
def store(make_player) -> RosterStore:
    store = RosterStore()
    store.add_set(
        "guild",
        [
            make_player("Alpha", member=True, potions=(PotionSlot(1, 20), PotionSlot(4, 30))),
            make_player("Bravo"),
            make_player("Charlie", member=True, level=12),
        ],
    )
    return store
