"""Player snapshot records read by the detail view and the exporters."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from ..core.config import BOOK_MAX, POTION_SLOTS


@dataclass(frozen=True)
class PotionSlot:
    type_id: int = 0
    duration: int = 0

    @property
    def active(self) -> bool:
        return self.duration != 0


@dataclass(frozen=True)
class Fortress:
    upgrades: int = 0
    wall: int = 0
    warriors: int = 0
    archers: int = 0
    mages: int = 0


@dataclass(frozen=True)
class GuildMembership:
    """Guild-only extras; only present on players that hold a guild role."""

    role: int
    treasure: int = 0
    instructor: int = 0
    pet: int = 0
    knights: int = 0


def _empty_potions() -> tuple[PotionSlot, ...]:
    return tuple(PotionSlot() for _ in range(POTION_SLOTS))


@dataclass(frozen=True)
class Player:
    name: str
    level: int = 0
    guild: str | None = None
    guild_membership: GuildMembership | None = None
    xp: int = 0
    xp_next: int = 0
    book: int = 0
    achievements: int = 0
    mount: int = 0
    class_id: int = 0
    race_id: int = 0
    sex_id: int = 0
    strength: int = 0
    dexterity: int = 0
    intelligence: int = 0
    constitution: int = 0
    luck: int = 0
    armor: int = 0
    gear_score: int = 0
    potions: tuple[PotionSlot, ...] = field(default_factory=_empty_potions)
    rank_player: int = 0
    honor_player: int = 0
    rank_fortress: int = 0
    honor_fortress: int = 0
    fortress: Fortress = field(default_factory=Fortress)

    def __post_init__(self) -> None:
        slots = tuple(self.potions)[:POTION_SLOTS]
        if len(slots) < POTION_SLOTS:
            slots = slots + tuple(PotionSlot() for _ in range(POTION_SLOTS - len(slots)))
        object.__setattr__(self, "potions", slots)

    @property
    def is_member(self) -> bool:
        return self.guild_membership is not None

    @property
    def book_fraction(self) -> float:
        return self.book / BOOK_MAX

    @property
    def book_percent(self) -> float:
        return 100.0 * self.book / BOOK_MAX

    def active_potions(self) -> list[PotionSlot]:
        """Active potion slots in slot order, inactive ones dropped."""
        return [slot for slot in self.potions if slot.active]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Player":
        """Build a player from a data-source mapping (``Name``, ``Level``, ``GuildRole`` ...)."""

        def _int(key: str) -> int:
            value = data.get(key)
            if value in (None, ""):
                return 0
            return int(value)

        role = data.get("GuildRole")
        membership = None
        if role is not None and role != "":
            membership = GuildMembership(
                role=int(role),
                treasure=_int("GuildTreasure"),
                instructor=_int("GuildInstructor"),
                pet=_int("GuildPet"),
                knights=_int("FortressKnights"),
            )
        potions = tuple(
            PotionSlot(type_id=_int(f"Potion{slot}"), duration=_int(f"PotionDuration{slot}"))
            for slot in range(1, POTION_SLOTS + 1)
        )
        guild = data.get("Guild")
        return cls(
            name=str(data.get("Name") or ""),
            level=_int("Level"),
            guild=str(guild) if guild else None,
            guild_membership=membership,
            xp=_int("XP"),
            xp_next=_int("XPNext"),
            book=_int("Book"),
            achievements=_int("Achievements"),
            mount=_int("Mount"),
            class_id=_int("Class"),
            race_id=_int("Race"),
            sex_id=_int("Sex"),
            strength=_int("Strength"),
            dexterity=_int("Dexterity"),
            intelligence=_int("Intelligence"),
            constitution=_int("Constitution"),
            luck=_int("Luck"),
            armor=_int("Armor"),
            gear_score=_int("GearScore"),
            potions=potions,
            rank_player=_int("RankPlayer"),
            honor_player=_int("HonorPlayer"),
            rank_fortress=_int("RankFortress"),
            honor_fortress=_int("HonorFortress"),
            fortress=Fortress(
                upgrades=_int("FortressUpgrades"),
                wall=_int("FortressWall"),
                warriors=_int("FortressWarriors"),
                archers=_int("FortressArchers"),
                mages=_int("FortressMages"),
            ),
        )


def find_by_name(players: list[Player] | None, name: str) -> Player | None:
    """First player in ``players`` whose name equals ``name`` exactly."""
    if not players:
        return None
    for player in players:
        if player.name == name:
            return player
    return None


__all__ = ["PotionSlot", "Fortress", "GuildMembership", "Player", "find_by_name"]
