from dataclasses import replace

from sf_browser.core.config import COLOR_GREEN, COLOR_ORANGE, COLOR_YELLOW
from sf_browser.models.player import PotionSlot
from sf_browser.models.stat_sheet import COLUMN_LAYOUT, ROW_LAYOUT, build_stat_sheet


def test_header_cells(make_player, prefs):
    sheet = build_stat_sheet(make_player("Alpha", level=42, gear_score=731, member=True), prefs)
    assert sheet.cell("title").text == "Alpha (42)"
    assert sheet.cell("gear_score").text == "★ 731"
    assert sheet.cell("guild").text == "Night Watch"


def test_layout_tables_cover_every_cell(make_player, prefs):
    sheet = build_stat_sheet(make_player(member=True), prefs)
    assert len(COLUMN_LAYOUT) == 11
    assert len(ROW_LAYOUT) == 20
    for cell in sheet.cells:
        assert cell.column + cell.columnspan <= len(COLUMN_LAYOUT)
        assert cell.row < len(ROW_LAYOUT)


def test_xp_bar(make_player, prefs):
    bar = build_stat_sheet(make_player(xp=250, xp_next=1000), prefs).bar("xp")
    assert bar.fraction == 0.25
    assert bar.tooltip == "750 out of 1,000 XP left to next level"


def test_xp_bar_without_next_level(make_player, prefs):
    assert build_stat_sheet(make_player(xp=0, xp_next=0), prefs).bar("xp").fraction == 0.0


def test_book_and_achievement_bars(make_player, prefs):
    sheet = build_stat_sheet(make_player(book=1080, achievements=35), prefs)
    book = sheet.bar("book")
    assert book.fraction == 0.5
    assert book.tooltip == "1080 (50%) out of 2160 items collected"
    achievements = sheet.bar("achievements")
    assert achievements.fraction == 0.5
    assert achievements.tooltip == "35 out of 70 achievements collected"


def test_potion_rows_compact(make_player, prefs):
    player = make_player(potions=(PotionSlot(1, 0), PotionSlot(3, 10), PotionSlot(5, 0)))
    sheet = build_stat_sheet(player, prefs)
    potion_cells = sheet.cells_with_prefix("potion.")
    assert len(potion_cells) == 2
    assert sheet.cell("potion.0.duration").text == "+10%"
    assert sheet.cell("potion.0.name").text == "Intelligence"
    assert {cell.row for cell in potion_cells} == {6}


def test_potion_rows_follow_slot_order(make_player, prefs):
    player = make_player(potions=(PotionSlot(1, 25), PotionSlot(2, 0), PotionSlot(6, 5)))
    sheet = build_stat_sheet(player, prefs)
    assert sheet.cell("potion.0.name").row == 6
    assert sheet.cell("potion.1.name").row == 7
    assert sheet.cell("potion.1.name").text == "Eternal Life"
    assert sheet.cell("potion.2.name") is None


def test_non_member_has_no_guild_fields(make_player, prefs):
    sheet = build_stat_sheet(make_player(member=False), prefs)
    assert sheet.cells_with_prefix("guild.") == []
    for label in ("Group", "Position", "Treasure", "Instructor", "Pet", "Knights"):
        assert label not in sheet.texts()


def test_member_guild_fields(make_player, prefs):
    sheet = build_stat_sheet(make_player(member=True, role=1, pet=150, knights=12), prefs)
    assert sheet.cell("guild.position").text == "Leader"
    assert sheet.cell("guild.treasure").text == "40"
    assert sheet.cell("guild.instructor").text == "35"
    assert sheet.cell("guild.pet").color == COLOR_YELLOW
    assert sheet.cell("guild.knights").color == COLOR_ORANGE


def test_mount_ladder_for_members(make_player, prefs):
    colors = [build_stat_sheet(make_player(member=True, mount=m), prefs).cell("mount").color for m in (2, 3, 4)]
    assert colors == [COLOR_ORANGE, COLOR_YELLOW, COLOR_GREEN]


def test_mount_and_book_uncolored_for_non_members(make_player, prefs):
    sheet = build_stat_sheet(make_player(mount=1, book=100), prefs)
    assert sheet.cell("mount").color is None
    assert sheet.bar("book").color is None


def test_highlight_all_colors_non_members(make_player, prefs):
    sheet = build_stat_sheet(make_player(mount=1, book=1500), replace(prefs, highlight_all=True))
    assert sheet.cell("mount").color == COLOR_ORANGE
    assert sheet.bar("book").color == COLOR_YELLOW


def test_rankings_attributes_and_fortress_always_shown(make_player, prefs):
    sheet = build_stat_sheet(make_player(), prefs)
    assert sheet.cell("rank_player").text == "1234"
    assert sheet.cell("honor_fortress").text == "4321"
    assert sheet.cell("armor").text == "5000"
    assert sheet.cell("fortress.wall").text == "15"
    assert sheet.cell("fortress.upgrades").text == "12"
