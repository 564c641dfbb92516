"""Browse-players tab: roster name list on the left, stat sheet on the right."""
from __future__ import annotations

import tkinter as tk
from tkinter import ttk

from ..core.config import PANEL_BG, PRIMARY_BG, TEXT_PRIMARY, TEXT_SECONDARY
from ..core.prefs import DEFAULT_PREFERENCES, Preferences
from ..models.stat_sheet import StatSheet
from .details_controller import DetailsController
from .widgets import Tooltip, bar_style

TAB_TITLE = "Browse players"
FONT_FAMILY = "Segoe UI"
DEFAULT_FONT_SIZE = 11
# Pixels per layout weight unit for the stat sheet rows.
ROW_UNIT = 5


class DetailsTab(tk.Frame):
    def __init__(self, parent: tk.Misc, source, prefs: Preferences = DEFAULT_PREFERENCES) -> None:
        super().__init__(parent, bg=PRIMARY_BG)
        self.controller = DetailsController(source, self, prefs)
        self.placeholder = tk.Frame(self, bg=PRIMARY_BG)
        tk.Label(self.placeholder, text="", font=(FONT_FAMILY, 25), bg=PRIMARY_BG, fg=TEXT_SECONDARY).place(
            relx=0.5, rely=0.5, anchor="center"
        )
        self.content = tk.Frame(self, bg=PRIMARY_BG)
        list_container = tk.Frame(self.content, bg=PRIMARY_BG)
        list_container.pack(side=tk.LEFT, fill=tk.Y, padx=(10, 0), pady=10)
        self.player_listbox = tk.Listbox(
            list_container,
            selectmode=tk.BROWSE,
            exportselection=False,
            font=(FONT_FAMILY, DEFAULT_FONT_SIZE),
            bg=PRIMARY_BG,
            fg=TEXT_PRIMARY,
            highlightthickness=0,
            relief=tk.FLAT,
            width=28,
        )
        self.player_listbox.pack(side=tk.LEFT, fill=tk.Y)
        self.player_listbox.bind("<<ListboxSelect>>", self._on_listbox_select)
        scroll = tk.Scrollbar(list_container, orient=tk.VERTICAL, command=self.player_listbox.yview)
        scroll.pack(side=tk.RIGHT, fill=tk.Y)
        self.player_listbox.configure(yscrollcommand=scroll.set)
        self.sheet_frame = tk.Frame(self.content, bg=PANEL_BG)
        self.sheet_frame.pack(side=tk.LEFT, fill=tk.BOTH, expand=True, padx=10, pady=10)
        self.controller.update()

    # Controller passthroughs
    @property
    def selected_key(self) -> str | None:
        return self.controller.selected_key

    def select_roster(self, key: str | None) -> None:
        self.controller.select_roster(key)

    def clear_roster(self) -> None:
        self.controller.clear_roster()

    def set_preferences(self, prefs: Preferences) -> None:
        self.controller.set_preferences(prefs)

    # DetailsView
    def show_placeholder(self, text: str) -> None:
        self.content.pack_forget()
        for child in self.placeholder.winfo_children():
            child.configure(text=text)
        self.placeholder.pack(fill=tk.BOTH, expand=True)

    def show_roster(self, names: list[str]) -> None:
        self.placeholder.pack_forget()
        self.content.pack(fill=tk.BOTH, expand=True)
        self.player_listbox.delete(0, tk.END)
        for name in names:
            self.player_listbox.insert(tk.END, name)
        self._clear_sheet()
        if names:
            self.player_listbox.selection_set(0)

    def show_sheet(self, sheet: StatSheet) -> None:
        self._clear_sheet()
        grid = self.sheet_frame
        for column, (_sticky, weight) in enumerate(sheet.columns):
            grid.columnconfigure(column, weight=weight, uniform="sheet")
        for row, (_sticky, weight) in enumerate(sheet.rows):
            grid.rowconfigure(row, weight=weight, minsize=weight * ROW_UNIT)
        for cell in sheet.cells:
            font = (FONT_FAMILY, cell.size or DEFAULT_FONT_SIZE, "bold" if cell.bold else "normal")
            label = tk.Label(grid, text=cell.text, font=font, bg=PANEL_BG, fg=cell.color or TEXT_PRIMARY)
            label.grid(
                column=cell.column,
                row=cell.row,
                columnspan=cell.columnspan,
                sticky=self._sticky(sheet, cell.column, cell.row, cell.sticky),
            )
        for bar in sheet.bars:
            widget = ttk.Progressbar(grid, orient=tk.HORIZONTAL, mode="determinate", maximum=1.0, style=bar_style(self, bar.color))
            widget["value"] = bar.fraction
            widget.grid(column=bar.column, row=bar.row, columnspan=bar.columnspan, sticky="ew", padx=4)
            Tooltip(widget, bar.tooltip)

    def _clear_sheet(self) -> None:
        for child in self.sheet_frame.winfo_children():
            child.destroy()

    @staticmethod
    def _sticky(sheet: StatSheet, column: int, row: int, override: str | None) -> str:
        horizontal = override if override is not None else sheet.columns[column][0]
        vertical = sheet.rows[row][0]
        return f"{horizontal}{vertical}"

    def _on_listbox_select(self, _event=None) -> None:
        selection = self.player_listbox.curselection()
        if selection:
            self.controller.on_player_chosen(int(selection[0]))


__all__ = ["TAB_TITLE", "DetailsTab"]
