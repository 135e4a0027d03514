from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional, Sequence, Tuple

from .view_utils import command, safe_call


class AboutDialog(tk.Toplevel):
    """Non-modal About window with clickable project links (UI-only)."""

    OnLink = Optional[Callable[[str], None]]
    OnVoid = Optional[Callable[[], None]]

    def __init__(
        self,
        parent: tk.Widget,
        *,
        heading: str,
        license_text: str,
        links: Sequence[Tuple[str, str]] = (),
        on_open_link: OnLink = None,
        on_close: OnVoid = None,
    ) -> None:
        super().__init__(parent)
        self.title("About")
        self.transient(parent)
        self.resizable(False, False)
        self._on_close = on_close
        self.protocol("WM_DELETE_WINDOW", self._on_close_clicked)

        body = ttk.Frame(self, padding=16)
        body.pack(fill="both", expand=True)
        ttk.Label(body, text=heading, style="Title.TLabel").pack(anchor="w")
        ttk.Label(body, text=f"License: {license_text}", style="Subtle.TLabel").pack(anchor="w", pady=(4, 8))

        for label, url in links:
            link = ttk.Label(body, text=label, foreground="#2457ff", cursor="hand2")
            link.pack(anchor="w")
            link.bind("<Button-1>", command(on_open_link, url))

        ttk.Button(body, text="Close", command=self._on_close_clicked).pack(anchor="e", pady=(12, 0))

    def _on_close_clicked(self) -> None:
        safe_call(self._on_close)
        self.destroy()
