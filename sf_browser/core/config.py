"""Application-wide paths, palette and fixed roster constants."""
from __future__ import annotations

import os
from pathlib import Path

APP_NAME = "SF Browser"
APP_VERSION = "1.0.0"

BASE_DIR = Path(__file__).resolve().parent.parent
CONFIG_DIR = Path(os.environ.get("SF_BROWSER_HOME") or (Path.home() / ".sf_browser"))
LOG_DIR = CONFIG_DIR / "logs"
PREFS_PATH = CONFIG_DIR / "prefs.json"
DATA_DIR = CONFIG_DIR / "rosters"

# Window palette
PRIMARY_BG = "#0F1C2E"
PANEL_BG = "#16213E"
ACCENT_BG = "#FFE943"
BUTTON_BG = "#415A77"
BUTTON_ACTIVE_BG = "#778DA9"
BUTTON_TEXT = "#FFFFFF"
TEXT_PRIMARY = "#E0E1DD"
TEXT_SECONDARY = "#9BA4B5"
INPUT_BG = "#1B263B"

# Threshold ladder colors. Exported images use red/yellow/green, the detail
# view uses orange/yellow/green.
COLOR_RED = "#FB4A2D"
COLOR_YELLOW = "#FFE943"
COLOR_GREEN = "#70AD47"
COLOR_ORANGE = "#FF9A2D"

BOOK_MAX = 2160
ACHIEVEMENTS_MAX = 70
POTION_SLOTS = 3
POTION_LOW = 5
POTION_HIGH = 25

ROSTER_BLOCK_SIZE = 50
IMAGE_WIDTH = 840
IMAGE_HEIGHT = 912
