"""Main application window."""
from __future__ import annotations

import tkinter as tk
from pathlib import Path
from tkinter import filedialog, messagebox, ttk

from ..core.config import (
    APP_NAME,
    APP_VERSION,
    BUTTON_ACTIVE_BG,
    BUTTON_BG,
    BUTTON_TEXT,
    PANEL_BG,
    PRIMARY_BG,
    TEXT_PRIMARY,
)
from ..core.prefs import Preferences, Thresholds, save_preferences
from ..logs.logging import UI_LOGGER
from ..models.data_model import RosterStore
from . import export_flows
from .details_tab import TAB_TITLE, DetailsTab
from .dialogs import CSV_FILETYPES, PNG_FILETYPES, XLSX_FILETYPES, ExportOptionsDialog, ask_save_path
from .theme import apply_base_theme

_THRESHOLD_FIELDS = (("mount", "Mount"), ("pet", "Pet"), ("knights", "Knights"), ("book", "Scrapbook"))


class RosterBrowserApp(tk.Tk):
    """Roster picker, details tab, preferences tab and export buttons."""

    def __init__(self, store: RosterStore, prefs: Preferences, prefs_path: Path | None = None) -> None:
        super().__init__()
        self.store = store
        self.prefs = prefs
        self.prefs_path = prefs_path
        self.title(f"{APP_NAME} {APP_VERSION}")
        self.geometry("1180x720")
        self.minsize(960, 600)
        self.configure(bg=PRIMARY_BG)
        apply_base_theme(self)
        self.roster_var = tk.StringVar()
        self.status_var = tk.StringVar(value="")
        self.highlight_var = tk.BooleanVar(value=prefs.highlight_all)
        self.threshold_vars: dict[str, tuple[tk.StringVar, tk.StringVar]] = {}
        self._build_toolbar()
        self.notebook = ttk.Notebook(self)
        self.notebook.pack(fill=tk.BOTH, expand=True, padx=10, pady=(0, 10))
        self.details_tab = DetailsTab(self.notebook, store, prefs)
        self.notebook.add(self.details_tab, text=TAB_TITLE)
        prefs_frame = tk.Frame(self.notebook, bg=PANEL_BG)
        self._build_prefs_tab(prefs_frame)
        self.notebook.add(prefs_frame, text="Preferences")
        tk.Label(self, textvariable=self.status_var, bg=PRIMARY_BG, fg=TEXT_PRIMARY, anchor="w").pack(fill=tk.X, padx=12, pady=(0, 6))
        self._refresh_rosters()

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------
    def _button(self, parent: tk.Misc, text: str, command) -> tk.Button:
        return tk.Button(
            parent,
            text=text,
            command=command,
            bg=BUTTON_BG,
            fg=BUTTON_TEXT,
            activebackground=BUTTON_ACTIVE_BG,
            activeforeground=BUTTON_TEXT,
            relief=tk.FLAT,
            padx=12,
            pady=4,
        )

    def _build_toolbar(self) -> None:
        bar = tk.Frame(self, bg=PRIMARY_BG)
        bar.pack(fill=tk.X, padx=10, pady=10)
        tk.Label(bar, text="Roster", font=("Segoe UI", 11, "bold"), bg=PRIMARY_BG, fg=TEXT_PRIMARY).pack(side=tk.LEFT)
        self.roster_combo = ttk.Combobox(bar, textvariable=self.roster_var, state="readonly", width=30, style="App.TCombobox")
        self.roster_combo.pack(side=tk.LEFT, padx=(8, 12))
        self.roster_combo.bind("<<ComboboxSelected>>", self._on_roster_selected)
        self._button(bar, "Open roster...", self._open_roster_file).pack(side=tk.LEFT, padx=4)
        self._button(bar, "Export CSV", self._export_csv).pack(side=tk.RIGHT, padx=4)
        self._button(bar, "Export Excel", self._export_excel).pack(side=tk.RIGHT, padx=4)
        self._button(bar, "Export image", self._export_image).pack(side=tk.RIGHT, padx=4)

    def _build_prefs_tab(self, parent: tk.Frame) -> None:
        grid = tk.Frame(parent, bg=PANEL_BG)
        grid.pack(anchor="nw", padx=20, pady=20)
        tk.Label(grid, text="Low", bg=PANEL_BG, fg=TEXT_PRIMARY).grid(row=0, column=1, padx=6)
        tk.Label(grid, text="High", bg=PANEL_BG, fg=TEXT_PRIMARY).grid(row=0, column=2, padx=6)
        for row, (key, label) in enumerate(_THRESHOLD_FIELDS, start=1):
            pair: Thresholds = getattr(self.prefs, key)
            low_var = tk.StringVar(value=str(pair.low))
            high_var = tk.StringVar(value=str(pair.high))
            tk.Label(grid, text=label, bg=PANEL_BG, fg=TEXT_PRIMARY).grid(row=row, column=0, sticky="w", pady=3)
            tk.Entry(grid, textvariable=low_var, width=8).grid(row=row, column=1, padx=6)
            tk.Entry(grid, textvariable=high_var, width=8).grid(row=row, column=2, padx=6)
            self.threshold_vars[key] = (low_var, high_var)
        tk.Checkbutton(
            grid,
            text="Highlight players outside the guild",
            variable=self.highlight_var,
            bg=PANEL_BG,
            fg=TEXT_PRIMARY,
            selectcolor=PANEL_BG,
            activebackground=PANEL_BG,
        ).grid(row=len(_THRESHOLD_FIELDS) + 1, column=0, columnspan=3, sticky="w", pady=(10, 0))
        self._button(grid, "Apply", self._apply_prefs).grid(row=len(_THRESHOLD_FIELDS) + 2, column=0, sticky="w", pady=(12, 0))

    # ------------------------------------------------------------------
    # Rosters
    # ------------------------------------------------------------------
    def _refresh_rosters(self, select: str | None = None) -> None:
        keys = self.store.keys()
        self.roster_combo.configure(values=keys)
        if select is None and keys and self.details_tab.selected_key is None:
            select = keys[0]
        if select is not None:
            self.roster_var.set(select)
            self.details_tab.select_roster(select)
        self.status_var.set(f"Rosters: {len(keys)}")

    def _on_roster_selected(self, _event=None) -> None:
        key = self.roster_var.get() or None
        if key is None:
            self.details_tab.clear_roster()
        else:
            self.details_tab.select_roster(key)

    def _open_roster_file(self) -> None:
        path = filedialog.askopenfilename(parent=self, title="Open roster", filetypes=[("Roster file (*.json)", "*.json")])
        if not path:
            return
        try:
            key = self.store.load_file(Path(path))
        except (OSError, ValueError, TypeError) as exc:
            UI_LOGGER.exception("Failed to load roster %s", path)
            messagebox.showerror("Open roster", f"Failed to load roster:\n{exc}")
            return
        self._refresh_rosters(select=key)

    # ------------------------------------------------------------------
    # Preferences
    # ------------------------------------------------------------------
    def _apply_prefs(self) -> None:
        pairs: dict[str, Thresholds] = {}
        for key, (low_var, high_var) in self.threshold_vars.items():
            try:
                pairs[key] = Thresholds(int(low_var.get()), int(high_var.get()))
            except ValueError:
                messagebox.showerror("Preferences", "Thresholds must be whole numbers.")
                return
        self.prefs = Preferences(highlight_all=bool(self.highlight_var.get()), **pairs)
        self.details_tab.set_preferences(self.prefs)
        try:
            save_preferences(self.prefs, self.prefs_path)
        except OSError:
            UI_LOGGER.exception("Failed to save preferences")
            messagebox.showerror("Preferences", "Preferences could not be saved.")
            return
        self.status_var.set("Preferences saved.")

    # ------------------------------------------------------------------
    # Exports
    # ------------------------------------------------------------------
    def _current_roster(self, title: str) -> str | None:
        key = self.details_tab.selected_key
        if key is None:
            messagebox.showinfo(title, "Select a roster first.")
        return key

    def _ask_options(self, title: str, key: str, allow_compare: bool) -> ExportOptionsDialog | None:
        others = [name for name in self.store.keys() if name != key]
        dlg = ExportOptionsDialog(self, others, title=title, allow_compare=allow_compare)
        self.wait_window(dlg)
        return dlg if dlg.confirmed else None

    def _prompt(self, filetypes: list[tuple[str, str]]):
        return lambda name: ask_save_path(self, name, filetypes)

    def _export_image(self) -> None:
        key = self._current_roster("Export image")
        if key is None:
            return
        options = self._ask_options("Export image", key, allow_compare=True)
        if options is None:
            return
        paths = export_flows.export_image_flow(
            self.store,
            key,
            self._prompt(PNG_FILETYPES),
            compare_name=options.compare_name,
            only_members=options.only_members,
            prefs=self.prefs,
            on_error=messagebox.showerror,
        )
        if paths:
            self.status_var.set(f"Saved {len(paths)} image(s): {', '.join(p.name for p in paths)}")

    def _export_csv(self) -> None:
        key = self._current_roster("Export CSV")
        if key is None:
            return
        options = self._ask_options("Export CSV", key, allow_compare=False)
        if options is None:
            return
        path = export_flows.export_csv_flow(
            self.store, key, self._prompt(CSV_FILETYPES), only_members=options.only_members, on_error=messagebox.showerror
        )
        if path is not None:
            self.status_var.set(f"Saved {path.name}")

    def _export_excel(self) -> None:
        key = self._current_roster("Export Excel")
        if key is None:
            return
        options = self._ask_options("Export Excel", key, allow_compare=False)
        if options is None:
            return
        path = export_flows.export_excel_flow(
            self.store, key, self._prompt(XLSX_FILETYPES), only_members=options.only_members, on_error=messagebox.showerror
        )
        if path is not None:
            self.status_var.set(f"Saved {path.name}")


__all__ = ["RosterBrowserApp"]
