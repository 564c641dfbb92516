"""
Tiled PNG roster export.

A roster is split into blocks of at most 50 players. Each block is laid out
on a fixed grid (explicit column widths and row heights), optionally
annotated with deltas against a compare roster, and rasterized with Pillow
onto an 840x912 image.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Sequence

from PIL import Image, ImageDraw, ImageFont

from ..core.config import IMAGE_HEIGHT, IMAGE_WIDTH, POTION_HIGH, POTION_LOW, ROSTER_BLOCK_SIZE
from ..core.prefs import DEFAULT_PREFERENCES, Preferences
from ..core.thresholds import format_delta, format_percent_delta, threshold_color
from ..logs.logging import EXPORT_LOGGER
from ..models.data_model import RosterSource
from ..models.player import Player, find_by_name

COLUMN_WIDTHS: tuple[int, ...] = (176, 1, 64, 88, 72, 56, 1, 64, 1, 20, 20, 20, 1, 64, 64, 64, 64)
COLUMN_COUNT = len(COLUMN_WIDTHS)

HEADER_ROW_HEIGHT = 17
HEADER_BORDER_HEIGHT = 2
DATA_ROW_HEIGHT = 17
SEPARATOR_HEIGHT = 1
FIRST_DATA_ROW = 3

# Grid columns
COL_NAME = 0
COL_LEVEL = 2
COL_GEAR = 3
COL_ALBUM = 4
COL_MOUNT = 5
COL_AWARDS = 7
COL_POTIONS = (9, 10, 11)
COL_TREASURE = 13
COL_INSTRUCTOR = 14
COL_PET = 15
COL_KNIGHTS = 16

# Vertical 1px borders as (column, first row)
VERTICAL_BORDERS: tuple[tuple[int, int], ...] = ((1, 0), (6, 2), (8, 0), (12, 0))

# Room for the delta annotation to the right of a centered album value
ALBUM_DELTA_PADDING = "      "

BACKGROUND = "white"
BORDER_COLOR = "black"
TEXT_COLOR = "black"
FONT_SIZE = 12
DELTA_FONT_SIZE = 10
DELTA_PADDING_RIGHT = 2


@dataclass(frozen=True)
class GridCell:
    column: int
    row: int
    text: str
    columnspan: int = 1
    rowspan: int = 1
    fill: str | None = None
    bold: bool = False


@dataclass(frozen=True)
class DeltaLabel:
    column: int
    row: int
    text: str


@dataclass(frozen=True)
class Border:
    column: int
    row: int
    columnspan: int = 1
    rowspan: int = 1


@dataclass
class BlockLayout:
    row_heights: list[int] = field(default_factory=list)
    cells: list[GridCell] = field(default_factory=list)
    deltas: list[DeltaLabel] = field(default_factory=list)
    borders: list[Border] = field(default_factory=list)
    player_rows: list[int] = field(default_factory=list)

    def cell_at(self, column: int, row: int) -> GridCell | None:
        for cell in self.cells:
            if cell.column == column and cell.row == row:
                return cell
        return None

    def delta_at(self, column: int, row: int) -> DeltaLabel | None:
        for delta in self.deltas:
            if delta.column == column and delta.row == row:
                return delta
        return None

    def separator_rows(self) -> list[int]:
        return [b.row for b in self.borders if b.columnspan == COLUMN_COUNT and b.row >= FIRST_DATA_ROW]


def plan_blocks(players: Sequence[Player], only_members: bool = False) -> list[list[Player]]:
    """
    Split a roster into image blocks.

    Members-only exports always produce exactly one block holding the first
    50 guild members (possibly none).
    """
    if only_members:
        # members are filtered before the cap, so a large roster still yields up to 50 members
        members = [p for p in players if p.is_member]
        return [members[:ROSTER_BLOCK_SIZE]]
    return [list(players[start:start + ROSTER_BLOCK_SIZE]) for start in range(0, len(players), ROSTER_BLOCK_SIZE)]


def block_paths(destination: Path, count: int) -> list[Path]:
    """``<base>.png``, ``<base>_1.png`` ... for a chosen destination."""
    base = destination.with_suffix("")
    return [base.parent / f"{base.name}{f'_{idx}' if idx else ''}.png" for idx in range(count)]


def _header(layout: BlockLayout) -> None:
    for text, column, row, columnspan, rowspan in (
        ("Name", COL_NAME, 0, 1, 2),
        ("General", COL_LEVEL, 0, 6, 1),
        ("Level", COL_LEVEL, 1, 1, 1),
        ("Gear", COL_GEAR, 1, 1, 1),
        ("Album", COL_ALBUM, 1, 1, 1),
        ("Mount", COL_MOUNT, 1, 1, 1),
        ("Awards", COL_AWARDS, 1, 1, 1),
        ("Potions", COL_POTIONS[0], 0, 3, 2),
        ("Guild", COL_TREASURE, 0, 4, 1),
        ("Treasure", COL_TREASURE, 1, 1, 1),
        ("Instructor", COL_INSTRUCTOR, 1, 1, 1),
        ("Pet", COL_PET, 1, 1, 1),
        ("Knights", COL_KNIGHTS, 1, 1, 1),
    ):
        layout.cells.append(GridCell(column, row, text, columnspan, rowspan, bold=True))
    layout.row_heights.extend([HEADER_ROW_HEIGHT, HEADER_ROW_HEIGHT, HEADER_BORDER_HEIGHT])
    layout.borders.append(Border(0, 2, COLUMN_COUNT, 1))


def _player_row(layout: BlockLayout, row: int, p: Player, c: Player | None, prefs: Preferences) -> None:
    membership = p.guild_membership
    colored = membership is not None or prefs.highlight_all
    album = f"{p.book_percent:.1f}%"
    if c is not None:
        album += ALBUM_DELTA_PADDING

    cells = layout.cells
    cells.append(GridCell(COL_NAME, row, p.name))
    cells.append(GridCell(COL_LEVEL, row, str(p.level)))
    cells.append(GridCell(COL_GEAR, row, str(p.gear_score)))
    cells.append(GridCell(COL_ALBUM, row, album, fill=threshold_color(p.book, prefs.book.low, prefs.book.high) if colored else None))
    cells.append(GridCell(COL_MOUNT, row, str(p.mount), fill=threshold_color(p.mount, prefs.mount.low, prefs.mount.high) if colored else None))
    cells.append(GridCell(COL_AWARDS, row, str(p.achievements)))
    for column, slot in zip(COL_POTIONS, p.potions):
        cells.append(GridCell(column, row, "", fill=threshold_color(slot.duration, POTION_LOW, POTION_HIGH)))

    if membership is not None:
        cells.append(GridCell(COL_TREASURE, row, str(membership.treasure)))
        cells.append(GridCell(COL_INSTRUCTOR, row, str(membership.instructor)))
        cells.append(GridCell(COL_PET, row, str(membership.pet), fill=threshold_color(membership.pet, prefs.pet.low, prefs.pet.high)))
        cells.append(GridCell(COL_KNIGHTS, row, str(membership.knights), fill=threshold_color(membership.knights, prefs.knights.low, prefs.knights.high)))

    if c is None:
        return
    deltas: list[tuple[int, str | None]] = [
        (COL_LEVEL, format_delta(p.level, c.level)),
        (COL_GEAR, format_delta(p.gear_score, c.gear_score)),
        (COL_ALBUM, None if p.book == c.book else format_percent_delta(p.book_percent, c.book_percent)),
    ]
    if membership is not None and c.guild_membership is not None:
        deltas.append((COL_PET, format_delta(membership.pet, c.guild_membership.pet)))
        deltas.append((COL_KNIGHTS, format_delta(membership.knights, c.guild_membership.knights)))
    for column, text in deltas:
        if text:
            layout.deltas.append(DeltaLabel(column, row, text))


def build_block_layout(
    players: Sequence[Player],
    compare: Sequence[Player] | None = None,
    only_members: bool = False,
    prefs: Preferences = DEFAULT_PREFERENCES,
) -> BlockLayout:
    """Lay out one block of players; every second emitted row is followed by a separator."""
    layout = BlockLayout()
    _header(layout)
    compare_list = list(compare) if compare is not None else None
    row = FIRST_DATA_ROW
    emitted = 0
    for p in players:
        if only_members and not p.is_member:
            continue
        match = find_by_name(compare_list, p.name) if compare_list is not None else None
        layout.row_heights.append(DATA_ROW_HEIGHT)
        layout.player_rows.append(row)
        _player_row(layout, row, p, match, prefs)
        row += 1
        emitted += 1
        if emitted % 2 == 0:
            layout.row_heights.append(SEPARATOR_HEIGHT)
            layout.borders.append(Border(0, row, COLUMN_COUNT, 1))
            row += 1
    total_rows = len(layout.row_heights)
    for column, first_row in VERTICAL_BORDERS:
        layout.borders.append(Border(column, first_row, 1, total_rows - first_row))
    return layout


def _offsets(sizes: Sequence[int]) -> list[int]:
    offsets = [0]
    for size in sizes:
        offsets.append(offsets[-1] + size)
    return offsets


@lru_cache(maxsize=None)
def _font(size: int, bold: bool = False):
    candidates = ("DejaVuSans-Bold.ttf", "arialbd.ttf") if bold else ("DejaVuSans.ttf", "arial.ttf")
    for name in candidates:
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue
    return ImageFont.load_default()


def _text_size(draw: ImageDraw.ImageDraw, text: str, font) -> tuple[float, int, int]:
    left, top, _right, bottom = draw.textbbox((0, 0), text, font=font)
    return draw.textlength(text, font=font), top, bottom - top


def render_block(layout: BlockLayout, size: tuple[int, int] = (IMAGE_WIDTH, IMAGE_HEIGHT)) -> Image.Image:
    """Rasterize a block layout; content below the image height is clipped."""
    image = Image.new("RGB", size, BACKGROUND)
    draw = ImageDraw.Draw(image)
    xs = _offsets(COLUMN_WIDTHS)
    ys = _offsets(layout.row_heights)

    def box(column: int, row: int, columnspan: int, rowspan: int) -> tuple[int, int, int, int]:
        return xs[column], ys[row], xs[column + columnspan], ys[row + rowspan]

    for cell in layout.cells:
        x0, y0, x1, y1 = box(cell.column, cell.row, cell.columnspan, cell.rowspan)
        if cell.fill:
            draw.rectangle((x0, y0, x1 - 1, y1 - 1), fill=cell.fill)
        if not cell.text:
            continue
        font = _font(FONT_SIZE, cell.bold)
        width, top, height = _text_size(draw, cell.text, font)
        draw.text((x0 + (x1 - x0 - width) / 2, y0 + (y1 - y0 - height) / 2 - top), cell.text, fill=TEXT_COLOR, font=font)

    small = _font(DELTA_FONT_SIZE)
    for delta in layout.deltas:
        x0, y0, x1, y1 = box(delta.column, delta.row, 1, 1)
        width, top, height = _text_size(draw, delta.text, small)
        draw.text((x1 - DELTA_PADDING_RIGHT - width, y0 + (y1 - y0 - height) / 2 - top), delta.text, fill=TEXT_COLOR, font=small)

    for border in layout.borders:
        x0, y0, x1, y1 = box(border.column, border.row, border.columnspan, border.rowspan)
        draw.rectangle((x0, y0, x1 - 1, y1 - 1), fill=BORDER_COLOR)
    return image


def render_roster_images(
    players: Sequence[Player],
    compare: Sequence[Player] | None = None,
    only_members: bool = False,
    prefs: Preferences = DEFAULT_PREFERENCES,
) -> list[Image.Image]:
    return [render_block(build_block_layout(block, compare, only_members, prefs)) for block in plan_blocks(players, only_members)]


def export_roster_image(
    source: RosterSource,
    name: str,
    destination: Path,
    compare_name: str | None = None,
    only_members: bool = False,
    prefs: Preferences = DEFAULT_PREFERENCES,
) -> list[Path]:
    """Render roster ``name`` (diffed against ``compare_name``) and write the PNG files."""
    players = source.get_set(name)
    compare = source.get_set(compare_name) if compare_name is not None else None
    images = render_roster_images(players, compare, only_members, prefs)
    paths = block_paths(destination, len(images))
    for image, path in zip(images, paths):
        image.save(path, "PNG")
    EXPORT_LOGGER.info("Wrote %d roster image(s) for %s to %s", len(paths), name, destination.parent)
    return paths


__all__ = [
    "COLUMN_WIDTHS",
    "GridCell",
    "DeltaLabel",
    "Border",
    "BlockLayout",
    "plan_blocks",
    "block_paths",
    "build_block_layout",
    "render_block",
    "render_roster_images",
    "export_roster_image",
]
