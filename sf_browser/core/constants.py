"""Static lookup tables indexed by the small integers stored on player records."""
from __future__ import annotations

from typing import Sequence

CLASSES: tuple[str, ...] = (
    "",
    "Warrior",
    "Mage",
    "Scout",
    "Assassin",
    "Battle Mage",
    "Berserker",
    "Demon Hunter",
    "Druid",
    "Bard",
    "Necromancer",
)

RACES: tuple[str, ...] = (
    "",
    "Human",
    "Elf",
    "Dwarf",
    "Gnome",
    "Orc",
    "Dark Elf",
    "Goblin",
    "Demon",
)

SEXES: tuple[str, ...] = ("", "Male", "Female")

POTIONS: tuple[str, ...] = (
    "",
    "Strength",
    "Dexterity",
    "Intelligence",
    "Constitution",
    "Luck",
    "Eternal Life",
)

GROUP_ROLES: tuple[str, ...] = (
    "",
    "Leader",
    "Officer",
    "Member",
    "",
    "Invited",
)

UNKNOWN_LABEL = "?"


def lookup(table: Sequence[str], index: int | None) -> str:
    """Return ``table[index]`` or ``"?"`` when the index is missing or out of range."""
    if index is None or index < 0 or index >= len(table):
        return UNKNOWN_LABEL
    return table[index]


__all__ = ["CLASSES", "RACES", "SEXES", "POTIONS", "GROUP_ROLES", "UNKNOWN_LABEL", "lookup"]
