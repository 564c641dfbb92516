"""Reusable Tk widgets and helpers."""
from __future__ import annotations

import tkinter as tk
from tkinter import ttk

from ..core.config import PANEL_BG, TEXT_PRIMARY

_BAR_STYLES: dict[str, str] = {}


class Tooltip:
    """Show ``text`` in a borderless popup while the pointer is over ``widget``."""

    def __init__(self, widget: tk.Misc, text: str, delay_ms: int = 400) -> None:
        self.widget = widget
        self.text = text
        self.delay_ms = delay_ms
        self._after_id: str | None = None
        self._popup: tk.Toplevel | None = None
        widget.bind("<Enter>", self._schedule, add="+")
        widget.bind("<Leave>", self._hide, add="+")
        widget.bind("<ButtonPress>", self._hide, add="+")

    def _schedule(self, _event=None) -> None:
        self._cancel()
        self._after_id = self.widget.after(self.delay_ms, self._show)

    def _cancel(self) -> None:
        if self._after_id is not None:
            self.widget.after_cancel(self._after_id)
            self._after_id = None

    def _show(self) -> None:
        self._after_id = None
        if self._popup is not None or not self.text:
            return
        x = self.widget.winfo_rootx() + 12
        y = self.widget.winfo_rooty() + self.widget.winfo_height() + 4
        popup = tk.Toplevel(self.widget)
        popup.wm_overrideredirect(True)
        popup.wm_geometry(f"+{x}+{y}")
        tk.Label(popup, text=self.text, bg=PANEL_BG, fg=TEXT_PRIMARY, relief=tk.SOLID, borderwidth=1, padx=6, pady=2).pack()
        self._popup = popup

    def _hide(self, _event=None) -> None:
        self._cancel()
        if self._popup is not None:
            self._popup.destroy()
            self._popup = None


def bar_style(root: tk.Misc, color: str | None) -> str:
    """Return a progress bar style name drawing the bar in ``color``."""
    if not color:
        return "App.Horizontal.TProgressbar"
    name = _BAR_STYLES.get(color)
    if name is None:
        name = f"Bar{len(_BAR_STYLES)}.Horizontal.TProgressbar"
        ttk.Style(root).configure(name, background=color)
        _BAR_STYLES[color] = name
    return name


__all__ = ["Tooltip", "bar_style"]
