"""Semicolon-delimited roster export."""
from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable, Sequence

from ..core.constants import CLASSES, RACES, SEXES, lookup
from ..logs.logging import EXPORT_LOGGER
from ..models.data_model import RosterSource
from ..models.player import Player

CSV_DELIMITER = ";"
CSV_HEADER: tuple[str, ...] = (
    "Name",
    "Level",
    "GearScore",
    "Class",
    "Race",
    "Sex",
    "Album",
    "Awards",
    "Potion",
    "Potion",
    "Potion",
    "Treasure",
    "Instructor",
    "Pet",
    "Knights",
    "PlayerRank",
    "PlayerHonor",
    "FortressRank",
    "FortressHonor",
    "Wall",
    "Warriors",
    "Archers",
    "Mages",
    "Upgrades",
    "Strength",
    "Dexterity",
    "Intelligence",
    "Constitution",
    "Luck",
    "Armor",
)
GUILD_COLUMNS = slice(11, 15)


def roster_values(player: Player) -> list[object]:
    """
    Typed values of one roster row, in header order.

    Guild columns hold ``None`` for players without a guild role.
    """
    p = player
    membership = p.guild_membership
    guild: list[object] = [None, None, None, None]
    if membership is not None:
        guild = [membership.treasure, membership.instructor, membership.pet, membership.knights]
    return [
        p.name,
        p.level,
        p.gear_score,
        lookup(CLASSES, p.class_id),
        lookup(RACES, p.race_id),
        lookup(SEXES, p.sex_id),
        p.book_fraction,
        p.achievements,
        *(slot.duration for slot in p.potions),
        *guild,
        p.rank_player,
        p.honor_player,
        p.rank_fortress,
        p.honor_fortress,
        p.fortress.wall,
        p.fortress.warriors,
        p.fortress.archers,
        p.fortress.mages,
        p.fortress.upgrades,
        p.strength,
        p.dexterity,
        p.intelligence,
        p.constitution,
        p.luck,
        p.armor,
    ]


def _format_cell(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, float):
        return f"{value:f}"
    return str(value)


def roster_rows(players: Iterable[Player], only_members: bool = False) -> list[list[str]]:
    """Formatted CSV rows (header excluded), skipping non-members when ``only_members`` is set."""
    rows: list[list[str]] = []
    for player in players:
        if only_members and not player.is_member:
            continue
        rows.append([_format_cell(value) for value in roster_values(player)])
    return rows


def write_roster_csv(path: Path, players: Sequence[Player], only_members: bool = False) -> int:
    """Write the roster to ``path`` and return the number of data rows."""
    rows = roster_rows(players, only_members)
    with open(path, "w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle, delimiter=CSV_DELIMITER, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        writer.writerows(rows)
    EXPORT_LOGGER.info("Wrote %d roster rows to %s", len(rows), path)
    return len(rows)


def export_roster_csv(source: RosterSource, name: str, destination: Path, only_members: bool = False) -> int:
    """Export roster ``name`` from ``source`` to ``destination``."""
    return write_roster_csv(destination, source.get_set(name), only_members)


__all__ = [
    "CSV_DELIMITER",
    "CSV_HEADER",
    "GUILD_COLUMNS",
    "roster_values",
    "roster_rows",
    "write_roster_csv",
    "export_roster_csv",
]
