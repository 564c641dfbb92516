"""Styling and palette helpers for the Tk UI."""
from __future__ import annotations

import tkinter as tk
from tkinter import ttk

from ..core.config import (
    ACCENT_BG,
    BUTTON_ACTIVE_BG,
    BUTTON_BG,
    BUTTON_TEXT,
    INPUT_BG,
    PANEL_BG,
    PRIMARY_BG,
    TEXT_PRIMARY,
)


def apply_base_theme(root: tk.Misc) -> None:
    """Apply base styles used across browser windows."""
    style = ttk.Style(root)
    style.theme_use("alt")
    style.configure("App.TFrame", background=PANEL_BG)
    style.configure("App.TLabel", background=PANEL_BG, foreground=TEXT_PRIMARY)
    style.configure("App.TCheckbutton", background=PRIMARY_BG, foreground=TEXT_PRIMARY)
    style.configure("App.TButton", background=BUTTON_BG, foreground=BUTTON_TEXT, relief=tk.FLAT)
    style.map("App.TButton", background=[("active", BUTTON_ACTIVE_BG)], foreground=[("active", BUTTON_TEXT)])
    style.configure(
        "App.TCombobox",
        fieldbackground=INPUT_BG,
        background=INPUT_BG,
        foreground=TEXT_PRIMARY,
        arrowcolor=TEXT_PRIMARY,
    )
    style.map(
        "App.TCombobox",
        fieldbackground=[("readonly", INPUT_BG)],
        foreground=[("readonly", TEXT_PRIMARY)],
    )
    style.configure("App.Horizontal.TProgressbar", background=BUTTON_ACTIVE_BG, troughcolor=INPUT_BG)
    style.configure("TNotebook", background=PRIMARY_BG, borderwidth=0)
    style.configure("TNotebook.Tab", background=PANEL_BG, foreground=ACCENT_BG, padding=(10, 6), borderwidth=0)
    style.map(
        "TNotebook.Tab",
        background=[("selected", BUTTON_BG), ("active", BUTTON_ACTIVE_BG)],
        foreground=[("selected", ACCENT_BG), ("active", ACCENT_BG)],
    )


__all__ = ["apply_base_theme"]
