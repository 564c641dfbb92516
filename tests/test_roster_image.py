from dataclasses import replace

from PIL import Image

from sf_browser.core.config import COLOR_GREEN, COLOR_RED, COLOR_YELLOW, IMAGE_HEIGHT, IMAGE_WIDTH
from sf_browser.exporting.roster_image import (
    COL_ALBUM,
    COL_GEAR,
    COL_KNIGHTS,
    COL_LEVEL,
    COL_MOUNT,
    COL_PET,
    COL_POTIONS,
    COL_TREASURE,
    COLUMN_WIDTHS,
    FIRST_DATA_ROW,
    block_paths,
    build_block_layout,
    export_roster_image,
    plan_blocks,
    render_block,
)
from sf_browser.models.data_model import RosterStore
from sf_browser.models.player import PotionSlot


def _roster(make_player, count, member_every=0):
    return [make_player(f"P{idx:03d}", member=bool(member_every) and idx % member_every == 0) for idx in range(count)]


def test_column_widths_fill_the_image():
    assert sum(COLUMN_WIDTHS) == IMAGE_WIDTH


def test_plan_blocks_splits_by_fifty(make_player):
    blocks = plan_blocks(_roster(make_player, 120))
    assert [len(b) for b in blocks] == [50, 50, 20]
    assert blocks[1][0].name == "P050"


def test_plan_blocks_members_only_is_single_block(make_player):
    blocks = plan_blocks(_roster(make_player, 120, member_every=2), only_members=True)
    assert len(blocks) == 1
    assert len(blocks[0]) == 50
    assert all(p.is_member for p in blocks[0])
    assert blocks[0][-1].name == "P098"
    assert plan_blocks([make_player("Solo")], only_members=True) == [[]]


def test_block_paths(tmp_path):
    assert block_paths(tmp_path / "roster.png", 3) == [
        tmp_path / "roster.png",
        tmp_path / "roster_1.png",
        tmp_path / "roster_2.png",
    ]
    assert block_paths(tmp_path / "roster", 1) == [tmp_path / "roster.png"]


def test_row_fields(make_player, prefs):
    player = make_player("Alpha", member=True, level=42, gear_score=731, book=1080, mount=4, achievements=33)
    layout = build_block_layout([player], prefs=prefs)
    row = FIRST_DATA_ROW
    assert layout.cell_at(0, row).text == "Alpha"
    assert layout.cell_at(COL_LEVEL, row).text == "42"
    assert layout.cell_at(COL_GEAR, row).text == "731"
    assert layout.cell_at(COL_ALBUM, row).text == "50.0%"
    assert layout.cell_at(COL_ALBUM, row).fill == COLOR_RED
    assert layout.cell_at(COL_MOUNT, row).fill == COLOR_GREEN
    assert layout.cell_at(COL_TREASURE, row).text == "40"
    assert layout.cell_at(COL_PET, row).fill == COLOR_YELLOW


def test_potion_cells_use_fixed_thresholds(make_player, prefs):
    player = make_player(potions=(PotionSlot(1, 4), PotionSlot(2, 5), PotionSlot(3, 25)))
    layout = build_block_layout([player], prefs=prefs)
    fills = [layout.cell_at(column, FIRST_DATA_ROW).fill for column in COL_POTIONS]
    assert fills == [COLOR_RED, COLOR_YELLOW, COLOR_GREEN]


def test_non_member_row_has_no_guild_cells(make_player, prefs):
    layout = build_block_layout([make_player("Bravo")], prefs=prefs)
    for column in range(COL_TREASURE, COL_KNIGHTS + 1):
        assert layout.cell_at(column, FIRST_DATA_ROW) is None
    assert layout.cell_at(COL_ALBUM, FIRST_DATA_ROW).fill is None
    assert layout.cell_at(COL_MOUNT, FIRST_DATA_ROW).fill is None


def test_highlight_all_colors_non_member_album_and_mount(make_player, prefs):
    layout = build_block_layout([make_player("Bravo", mount=1)], prefs=replace(prefs, highlight_all=True))
    assert layout.cell_at(COL_MOUNT, FIRST_DATA_ROW).fill == COLOR_RED
    assert layout.cell_at(COL_ALBUM, FIRST_DATA_ROW).fill == COLOR_RED


def test_separator_after_every_second_row(make_player, prefs):
    layout = build_block_layout(_roster(make_player, 5), prefs=prefs)
    assert layout.player_rows == [3, 4, 6, 7, 9]
    assert layout.separator_rows() == [5, 8]


def test_members_only_pairs_emitted_rows(make_player, prefs):
    players = [make_player("A", member=True), make_player("B"), make_player("C", member=True), make_player("D", member=True)]
    layout = build_block_layout(players, only_members=True, prefs=prefs)
    assert [layout.cell_at(0, row).text for row in layout.player_rows] == ["A", "C", "D"]
    assert layout.separator_rows() == [5]


def test_delta_annotations(make_player, prefs):
    current = make_player("Alpha", level=10, gear_score=100)
    previous = make_player("Alpha", level=10, gear_score=95)
    layout = build_block_layout([current], compare=[previous], prefs=prefs)
    assert layout.delta_at(COL_GEAR, FIRST_DATA_ROW).text == "+5"
    assert layout.delta_at(COL_LEVEL, FIRST_DATA_ROW) is None
    assert layout.delta_at(COL_ALBUM, FIRST_DATA_ROW) is None


def test_delta_annotations_for_members(make_player, prefs):
    current = make_player("Alpha", member=True, level=12, book=1296, pet=150, knights=16)
    previous = make_player("Alpha", member=True, level=10, book=1080, pet=140, knights=16)
    layout = build_block_layout([current], compare=[previous], prefs=prefs)
    row = FIRST_DATA_ROW
    assert layout.delta_at(COL_LEVEL, row).text == "+2"
    assert layout.delta_at(COL_ALBUM, row).text == "+10.00"
    assert layout.delta_at(COL_PET, row).text == "+10"
    assert layout.delta_at(COL_KNIGHTS, row) is None


def test_no_delta_without_match(make_player, prefs):
    layout = build_block_layout([make_player("Alpha")], compare=[make_player("alpha", gear_score=1)], prefs=prefs)
    assert layout.deltas == []
    assert layout.cell_at(COL_ALBUM, FIRST_DATA_ROW).text == "50.0%"


def test_render_block_pixels(make_player, prefs):
    layout = build_block_layout([make_player("A"), make_player("B")], prefs=prefs)
    image = render_block(layout)
    assert image.size == (IMAGE_WIDTH, IMAGE_HEIGHT)
    # first potion cell of the first row: x 523..542, y 36..52, duration 0 -> red
    assert image.getpixel((533, 44)) == (0xFB, 0x4A, 0x2D)
    # separator row after the second player
    assert image.getpixel((300, 70)) == (0, 0, 0)


def test_export_writes_one_file_per_block(tmp_path, make_player, prefs):
    store = RosterStore()
    store.add_set("big", _roster(make_player, 120, member_every=3))
    paths = export_roster_image(store, "big", tmp_path / "big.png", prefs=prefs)
    assert [p.name for p in paths] == ["big.png", "big_1.png", "big_2.png"]
    for path in paths:
        with Image.open(path) as image:
            assert image.format == "PNG"
            assert image.size == (IMAGE_WIDTH, IMAGE_HEIGHT)


def test_export_members_only_writes_single_file(tmp_path, make_player, prefs):
    store = RosterStore()
    store.add_set("big", _roster(make_player, 120, member_every=3))
    store.add_set("old", _roster(make_player, 120, member_every=3))
    paths = export_roster_image(store, "big", tmp_path / "guild.png", compare_name="old", only_members=True, prefs=prefs)
    assert paths == [tmp_path / "guild.png"]
    assert sorted(p.name for p in tmp_path.iterdir()) == ["guild.png"]
