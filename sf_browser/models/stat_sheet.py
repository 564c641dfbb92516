"""
Toolkit-free layout of a player's stat sheet.

:func:`build_stat_sheet` turns a :class:`Player` into grid cells and progress
bars with explicit column/row weight tables. The Tk detail tab only paints
what this module decides, so the rendering rules can be exercised without a
display.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from ..core.config import ACHIEVEMENTS_MAX, BOOK_MAX
from ..core.constants import GROUP_ROLES, POTIONS, lookup
from ..core.prefs import Preferences
from ..core.thresholds import ladder_color
from .player import Player

# (sticky, weight) per grid column
COLUMN_LAYOUT: tuple[tuple[str, int], ...] = (
    ("", 2),
    ("w", 15),
    ("", 8),
    ("w", 15),
    ("", 8),
    ("", 4),
    ("w", 15),
    ("", 8),
    ("w", 15),
    ("", 8),
    ("", 2),
)

# (sticky, weight) per grid row; "" keeps the toolkit default.
ROW_LAYOUT: tuple[tuple[str, int], ...] = (
    ("s", 8),
    ("", 6),
    ("n", 6),
    ("s", 5),
    ("", 5),
    ("", 5),
    ("", 5),
    ("", 5),
    ("", 5),
    ("", 1),
    ("s", 5),
    ("", 5),
    ("", 5),
    ("", 5),
    ("", 1),
    ("s", 5),
    ("", 5),
    ("", 5),
    ("", 5),
    ("", 5),
)

POTION_FIRST_ROW = 6
PLACEHOLDER_TEXT = "Nothing here yet :("


@dataclass(frozen=True)
class SheetCell:
    text: str
    column: int
    row: int
    columnspan: int = 1
    size: int | None = None
    bold: bool = False
    color: str | None = None
    sticky: str | None = None
    key: str | None = None


@dataclass(frozen=True)
class SheetBar:
    fraction: float
    tooltip: str
    column: int
    row: int
    columnspan: int = 1
    color: str | None = None
    key: str | None = None


@dataclass
class StatSheet:
    title: str
    cells: list[SheetCell] = field(default_factory=list)
    bars: list[SheetBar] = field(default_factory=list)
    columns: tuple[tuple[str, int], ...] = COLUMN_LAYOUT
    rows: tuple[tuple[str, int], ...] = ROW_LAYOUT

    def add(self, text: object, column: int, row: int, **kwargs) -> SheetCell:
        cell = SheetCell(str(text), column, row, **kwargs)
        self.cells.append(cell)
        return cell

    def cell(self, key: str) -> SheetCell | None:
        for cell in self.cells:
            if cell.key == key:
                return cell
        return None

    def bar(self, key: str) -> SheetBar | None:
        for bar in self.bars:
            if bar.key == key:
                return bar
        return None

    def texts(self) -> list[str]:
        return [cell.text for cell in self.cells]

    def cells_with_prefix(self, prefix: str) -> list[SheetCell]:
        return [cell for cell in self.cells if cell.key and cell.key.startswith(prefix)]


def format_count(value: int) -> str:
    return f"{value:,}"


def _fraction(value: float, total: float) -> float:
    if total <= 0:
        return 0.0
    return max(0.0, min(1.0, value / total))


def _section(sheet: StatSheet, text: str, column: int, row: int) -> None:
    sheet.add(text, column, row, columnspan=4, size=15, bold=True)


def build_stat_sheet(player: Player, prefs: Preferences) -> StatSheet:
    """Lay out the stat sheet for ``player``."""
    p = player
    membership = p.guild_membership
    highlighted = membership is not None or prefs.highlight_all
    sheet = StatSheet(title=p.name)

    sheet.add(f"{p.name} ({p.level})", 0, 0, columnspan=11, size=25, key="title")
    sheet.add(f"★ {p.gear_score}", 8, 0, columnspan=3, size=15, sticky="w", key="gear_score")
    sheet.add(p.guild or "", 0, 1, columnspan=11, size=16, key="guild")
    sheet.bars.append(
        SheetBar(
            _fraction(p.xp, p.xp_next),
            f"{format_count(p.xp_next - p.xp)} out of {format_count(p.xp_next)} XP left to next level",
            1,
            2,
            columnspan=9,
            key="xp",
        )
    )

    _section(sheet, "Mount & Potions", 1, 3)
    sheet.add("Mount:", 1, 4)
    sheet.add("Potions:", 1, POTION_FIRST_ROW)

    _section(sheet, "Rankings", 1, 10)
    sheet.add("Player:", 1, 12)
    sheet.add("Fortress:", 1, 13)
    sheet.add("Rank", 2, 11)
    sheet.add("Honor", 3, 11)

    if membership is not None:
        _section(sheet, "Group", 1, 15)
        sheet.add("Position", 1, 16)
        sheet.add("Treasure", 1, 18)
        sheet.add("Instructor", 1, 19)
        sheet.add("Pet", 3, 18)
        sheet.add("Knights", 3, 19)

    _section(sheet, "Collectibles", 6, 3)
    sheet.add("Scrapbook", 6, 4)
    sheet.add("Achievements", 6, 5)

    _section(sheet, "Attributes", 6, 10)
    for label, column, row in (
        ("Strength", 6, 11),
        ("Dexterity", 6, 12),
        ("Intelligence", 6, 13),
        ("Constitution", 8, 11),
        ("Luck", 8, 12),
        ("Armor", 8, 13),
    ):
        sheet.add(label, column, row)

    _section(sheet, "Fortress", 6, 15)
    sheet.add("Upgrades", 6, 16)
    sheet.add("Wall", 8, 16)
    sheet.add("Warriors", 8, 17)
    sheet.add("Archers", 8, 18)
    sheet.add("Mages", 8, 19)

    mount_color = ladder_color(p.mount, prefs.mount) if highlighted else None
    sheet.add(p.mount, 2, 4, color=mount_color, key="mount")

    # Potion rows compact: inactive slots leave no gap.
    for offset, slot in enumerate(p.active_potions()):
        row = POTION_FIRST_ROW + offset
        sheet.add(lookup(POTIONS, slot.type_id), 3, row, key=f"potion.{offset}.name")
        sheet.add(f"+{slot.duration}%", 2, row, key=f"potion.{offset}.duration")

    sheet.add(p.rank_player, 2, 12, key="rank_player")
    sheet.add(p.rank_fortress, 2, 13, key="rank_fortress")
    sheet.add(p.honor_player, 3, 12, key="honor_player")
    sheet.add(p.honor_fortress, 3, 13, key="honor_fortress")

    if membership is not None:
        sheet.add(lookup(GROUP_ROLES, membership.role), 2, 16, key="guild.position")
        sheet.add(membership.treasure, 2, 18, key="guild.treasure")
        sheet.add(membership.instructor, 2, 19, key="guild.instructor")
        sheet.add(membership.pet, 4, 18, color=ladder_color(membership.pet, prefs.pet), key="guild.pet")
        sheet.add(membership.knights, 4, 19, color=ladder_color(membership.knights, prefs.knights), key="guild.knights")

    book_pct = int(100.0 * p.book / BOOK_MAX)
    sheet.bars.append(
        SheetBar(
            _fraction(p.book, BOOK_MAX),
            f"{p.book} ({book_pct}%) out of {BOOK_MAX} items collected",
            7,
            4,
            columnspan=3,
            color=ladder_color(p.book, prefs.book) if highlighted else None,
            key="book",
        )
    )
    sheet.bars.append(
        SheetBar(
            _fraction(p.achievements, ACHIEVEMENTS_MAX),
            f"{p.achievements} out of {ACHIEVEMENTS_MAX} achievements collected",
            7,
            5,
            columnspan=3,
            key="achievements",
        )
    )

    for value, column, row, key in (
        (p.strength, 7, 11, "strength"),
        (p.dexterity, 7, 12, "dexterity"),
        (p.intelligence, 7, 13, "intelligence"),
        (p.constitution, 9, 11, "constitution"),
        (p.luck, 9, 12, "luck"),
        (p.armor, 9, 13, "armor"),
        (p.fortress.upgrades, 7, 16, "fortress.upgrades"),
        (p.fortress.wall, 9, 16, "fortress.wall"),
        (p.fortress.warriors, 9, 17, "fortress.warriors"),
        (p.fortress.archers, 9, 18, "fortress.archers"),
        (p.fortress.mages, 9, 19, "fortress.mages"),
    ):
        sheet.add(value, column, row, key=key)
    return sheet


__all__ = [
    "COLUMN_LAYOUT",
    "ROW_LAYOUT",
    "PLACEHOLDER_TEXT",
    "SheetCell",
    "SheetBar",
    "StatSheet",
    "build_stat_sheet",
    "format_count",
]
