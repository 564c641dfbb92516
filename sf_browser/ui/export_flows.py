"""
Export flows triggered from the main window.

Each flow prompts for a destination, runs the exporter and keeps I/O
failures away from the caller: a cancelled prompt does nothing, an
``OSError`` is logged and reported through ``on_error``.
"""
from __future__ import annotations

from pathlib import Path
from typing import Callable

from ..core.prefs import DEFAULT_PREFERENCES, Preferences
from ..exporting.roster_csv import export_roster_csv
from ..exporting.roster_excel import export_roster_excel
from ..exporting.roster_image import export_roster_image
from ..logs.logging import EXPORT_LOGGER
from ..models.data_model import RosterSource

PathPrompt = Callable[[str], Path | None]
ErrorReporter = Callable[[str, str], None]


def _report(on_error: ErrorReporter | None, title: str, message: str) -> None:
    if on_error is not None:
        on_error(title, message)


def export_image_flow(
    source: RosterSource,
    name: str,
    prompt: PathPrompt,
    *,
    compare_name: str | None = None,
    only_members: bool = False,
    prefs: Preferences = DEFAULT_PREFERENCES,
    on_error: ErrorReporter | None = None,
) -> list[Path]:
    destination = prompt(name)
    if destination is None:
        return []
    try:
        return export_roster_image(source, name, destination, compare_name, only_members, prefs)
    except OSError as exc:
        EXPORT_LOGGER.exception("Image export of %s to %s failed", name, destination)
        _report(on_error, "Export image", f"Failed to write roster image:\n{exc}")
        return []


def export_csv_flow(
    source: RosterSource,
    name: str,
    prompt: PathPrompt,
    *,
    only_members: bool = False,
    on_error: ErrorReporter | None = None,
) -> Path | None:
    destination = prompt(name)
    if destination is None:
        return None
    try:
        export_roster_csv(source, name, destination, only_members)
    except OSError as exc:
        EXPORT_LOGGER.exception("CSV export of %s to %s failed", name, destination)
        _report(on_error, "Export CSV", f"Failed to write roster CSV:\n{exc}")
        return None
    return destination


def export_excel_flow(
    source: RosterSource,
    name: str,
    prompt: PathPrompt,
    *,
    only_members: bool = False,
    on_error: ErrorReporter | None = None,
) -> Path | None:
    destination = prompt(name)
    if destination is None:
        return None
    try:
        export_roster_excel(source, name, destination, only_members)
    except OSError as exc:
        EXPORT_LOGGER.exception("Excel export of %s to %s failed", name, destination)
        _report(on_error, "Export Excel", f"Failed to write roster workbook:\n{exc}")
        return None
    return destination


__all__ = ["export_image_flow", "export_csv_flow", "export_excel_flow"]
