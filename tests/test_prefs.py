import json

from sf_browser.core.prefs import DEFAULT_PREFERENCES, Preferences, Thresholds, load_preferences, save_preferences


def test_missing_file_gives_defaults(tmp_path):
    assert load_preferences(tmp_path / "missing.json") == DEFAULT_PREFERENCES


def test_round_trip(tmp_path):
    path = tmp_path / "nested" / "prefs.json"
    prefs = Preferences(mount=Thresholds(1, 2), pet=Thresholds(10, 20), highlight_all=True)
    save_preferences(prefs, path)
    assert load_preferences(path) == prefs


def test_malformed_file_gives_defaults(tmp_path):
    path = tmp_path / "prefs.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_preferences(path) == DEFAULT_PREFERENCES


def test_partial_and_list_pairs(tmp_path):
    path = tmp_path / "prefs.json"
    path.write_text(json.dumps({"knights": [10, 12], "book": {"low": "500"}, "pet": "bad"}), encoding="utf-8")
    prefs = load_preferences(path)
    assert prefs.knights == Thresholds(10, 12)
    assert prefs.book == Thresholds(500, DEFAULT_PREFERENCES.book.high)
    assert prefs.pet == DEFAULT_PREFERENCES.pet
    assert prefs.highlight_all is False
