"""GUI entrypoint for the roster browser."""
from __future__ import annotations

import argparse
from pathlib import Path

from ..core.config import DATA_DIR, LOG_DIR, PREFS_PATH
from ..core.prefs import load_preferences
from ..logs.logging import enable_file_logging, get_logger
from ..models.data_model import RosterStore


def build_store(paths: list[Path]) -> RosterStore:
    """Load rosters from the given files/directories, or the default roster directory."""
    store = RosterStore()
    for path in paths or [DATA_DIR]:
        if path.is_dir():
            store.load_directory(path)
        elif path.is_file():
            store.load_file(path)
    return store


def main(argv: list[str] | None = None) -> None:
    """Launch the Tk roster browser."""
    parser = argparse.ArgumentParser(prog="sf-browser", description="Browse and export player rosters.")
    parser.add_argument("rosters", nargs="*", type=Path, help="roster JSON files or directories")
    parser.add_argument("--prefs", type=Path, default=PREFS_PATH, help="preferences file")
    args = parser.parse_args(argv)
    log_path = enable_file_logging(LOG_DIR)
    logger = get_logger("sf_browser.ui")
    logger.info("Starting roster browser, logging to %s", log_path)
    store = build_store(args.rosters)
    prefs = load_preferences(args.prefs)

    from ..ui.app import RosterBrowserApp

    app = RosterBrowserApp(store, prefs, prefs_path=args.prefs)
    app.mainloop()


if __name__ == "__main__":
    main()
