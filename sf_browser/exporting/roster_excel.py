"""Spreadsheet (xlsx) roster export."""
from __future__ import annotations

import re
from pathlib import Path
from typing import Sequence

import pandas as pd  # type: ignore

from ..logs.logging import EXPORT_LOGGER
from ..models.data_model import RosterSource
from ..models.player import Player
from .roster_csv import CSV_HEADER, roster_values

EXCEL_ENGINE = "openpyxl"
# Excel sheet names are limited to 31 characters and may not contain []:*?/\
_SHEET_NAME_INVALID = re.compile(r"[\[\]:*?/\\]")


def excel_columns() -> list[str]:
    """CSV header with the three potion columns numbered."""
    columns: list[str] = []
    potion = 0
    for name in CSV_HEADER:
        if name == "Potion":
            potion += 1
            name = f"Potion {potion}"
        columns.append(name)
    return columns


def sheet_name_for(roster_name: str) -> str:
    cleaned = _SHEET_NAME_INVALID.sub("_", roster_name).strip()
    return (cleaned or "Roster")[:31]


def build_roster_frame(players: Sequence[Player], only_members: bool = False) -> pd.DataFrame:
    rows = [roster_values(p) for p in players if p.is_member or not only_members]
    return pd.DataFrame(rows, columns=excel_columns(), dtype=object)


def write_roster_excel(path: Path, players: Sequence[Player], *, sheet_name: str = "Roster", only_members: bool = False) -> int:
    """Write the roster table to a single-sheet workbook and return the number of rows."""
    df = build_roster_frame(players, only_members)
    with pd.ExcelWriter(path, engine=EXCEL_ENGINE) as writer:
        df.to_excel(writer, sheet_name=sheet_name_for(sheet_name), index=False)
    EXPORT_LOGGER.info("Wrote %d roster rows to %s", len(df), path)
    return len(df)


def export_roster_excel(source: RosterSource, name: str, destination: Path, only_members: bool = False) -> int:
    return write_roster_excel(destination, source.get_set(name), sheet_name=name, only_members=only_members)


__all__ = ["excel_columns", "sheet_name_for", "build_roster_frame", "write_roster_excel", "export_roster_excel"]
