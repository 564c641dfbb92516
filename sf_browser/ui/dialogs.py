"""Save prompts and the export options dialog."""
from __future__ import annotations

import tkinter as tk
from pathlib import Path
from tkinter import filedialog, ttk

from ..core.config import PANEL_BG, TEXT_PRIMARY

NO_COMPARE = "(none)"

PNG_FILETYPES = [("PNG file (*.png)", "*.png")]
CSV_FILETYPES = [("CSV file (*.csv)", "*.csv")]
XLSX_FILETYPES = [("Excel workbook (*.xlsx)", "*.xlsx")]


def ask_save_path(parent: tk.Misc, initial_name: str, filetypes: list[tuple[str, str]], title: str = "Save as") -> Path | None:
    """Prompt for a destination file; ``None`` when the user cancels."""
    extension = filetypes[0][1].lstrip("*") if filetypes else ""
    path = filedialog.asksaveasfilename(
        parent=parent,
        title=title,
        initialfile=f"{initial_name}{extension}",
        defaultextension=extension,
        filetypes=filetypes,
    )
    if not path:
        return None
    return Path(path)


class ExportOptionsDialog(tk.Toplevel):
    """
    Modal dialog for roster exports: pick an optional compare roster and
    whether only guild members are exported.
    """

    def __init__(
        self,
        parent: tk.Misc,
        roster_names: list[str],
        *,
        title: str = "Export roster",
        allow_compare: bool = True,
    ) -> None:
        super().__init__(parent)
        self.title(title)
        self.resizable(False, False)
        self.configure(bg=PANEL_BG)
        if isinstance(parent, (tk.Tk, tk.Toplevel)):
            self.transient(parent)
        self.grab_set()
        self.confirmed = False
        self.compare_name: str | None = None
        self.only_members = False
        self.compare_var = tk.StringVar(value=NO_COMPARE)
        self.members_var = tk.BooleanVar(value=False)
        body = tk.Frame(self, bg=PANEL_BG)
        body.pack(padx=12, pady=(12, 6), fill=tk.X)
        if allow_compare:
            tk.Label(body, text="Compare with", bg=PANEL_BG, fg=TEXT_PRIMARY).grid(row=0, column=0, sticky="w", pady=4)
            combo = ttk.Combobox(
                body,
                textvariable=self.compare_var,
                values=[NO_COMPARE, *roster_names],
                state="readonly",
                width=28,
                style="App.TCombobox",
            )
            combo.grid(row=0, column=1, sticky="ew", padx=(8, 0), pady=4)
        tk.Checkbutton(
            body,
            text="Only guild members",
            variable=self.members_var,
            bg=PANEL_BG,
            fg=TEXT_PRIMARY,
            selectcolor=PANEL_BG,
            activebackground=PANEL_BG,
            anchor="w",
        ).grid(row=1, column=0, columnspan=2, sticky="w", pady=4)
        btn_frame = tk.Frame(self, bg=PANEL_BG)
        btn_frame.pack(pady=(4, 12))
        tk.Button(btn_frame, text="OK", width=10, command=self._on_ok).pack(side=tk.LEFT, padx=5)
        tk.Button(btn_frame, text="Cancel", width=10, command=self._on_cancel).pack(side=tk.LEFT, padx=5)
        self.protocol("WM_DELETE_WINDOW", self._on_cancel)

    def _on_ok(self) -> None:
        compare = self.compare_var.get()
        self.compare_name = None if compare in ("", NO_COMPARE) else compare
        self.only_members = bool(self.members_var.get())
        self.confirmed = True
        self.destroy()

    def _on_cancel(self) -> None:
        self.confirmed = False
        self.destroy()


__all__ = ["NO_COMPARE", "PNG_FILETYPES", "CSV_FILETYPES", "XLSX_FILETYPES", "ask_save_path", "ExportOptionsDialog"]
