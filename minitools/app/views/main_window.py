"""
MainWindowView
---------------
Tkinter main window for Mini Tools. This file contains **only View code**;
there is no session logic here. It exposes callback hooks that are connected
to ViewModels by the composition root.

The window provides:
  * Menu bar with "View > About"
  * Notebook with one tab per tool page (Watch, Counter, Password, Guess)
  * StatusBar at the bottom
"""
from __future__ import annotations
import tkinter as tk
from tkinter import ttk
from typing import Callable, Dict, Optional, Sequence, Tuple

from .theme import apply_modern_theme


class MainWindowView(tk.Tk):
    """Top-level application window.

    Page views are created by the composition root with one of the frames in
    :attr:`page_hosts` as parent and mounted with :meth:`mount_page`.
    """

    OnVoid = Optional[Callable[[], None]]
    OnIndex = Optional[Callable[[int], None]]

    def __init__(
        self,
        *,
        pages: Sequence[Tuple[str, str]],
        on_open_about: OnVoid = None,
        on_page_selected: OnIndex = None,
        on_close: OnVoid = None,
    ) -> None:
        super().__init__()
        apply_modern_theme(self)

        self.geometry("640x420")
        self.minsize(520, 360)

        self._on_open_about = on_open_about
        self._on_page_selected = on_page_selected
        self._on_close = on_close
        self.protocol("WM_DELETE_WINDOW", self._on_close_clicked)

        self.rowconfigure(0, weight=1)
        self.columnconfigure(0, weight=1)

        self._build_menu()
        self._build_notebook(pages)
        self._build_statusbar()

        for index in range(len(pages)):
            self.bind(f"<Control-Key-{index + 1}>", lambda e, i=index: self.select_page(i))

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------
    def _build_menu(self) -> None:
        menubar = tk.Menu(self)
        view_menu = tk.Menu(menubar, tearoff=False)
        view_menu.add_command(label="About", command=lambda: self._on_open_about and self._on_open_about())
        menubar.add_cascade(label="View", menu=view_menu)
        self.configure(menu=menubar)

    def _build_notebook(self, pages: Sequence[Tuple[str, str]]) -> None:
        self.tabs = ttk.Notebook(self)
        self.tabs.grid(row=0, column=0, sticky="nsew", padx=8, pady=(8, 4))

        self.page_hosts: Dict[str, ttk.Frame] = {}
        self._page_keys = [key for key, _ in pages]
        for key, label in pages:
            host = ttk.Frame(self.tabs, padding=16)
            self.tabs.add(host, text=label)
            self.page_hosts[key] = host

        self.tabs.bind("<<NotebookTabChanged>>", self._on_tab_changed)

    def _build_statusbar(self) -> None:
        status = ttk.Frame(self)
        status.grid(row=1, column=0, sticky="ew", padx=8, pady=(4, 8))
        status.columnconfigure(0, weight=1)
        self.status_message_var = tk.StringVar(value="Ready.")
        ttk.Label(status, textvariable=self.status_message_var, style="Subtle.TLabel").grid(
            row=0, column=0, sticky="w"
        )

    # ------------------------------------------------------------------
    # Public API (called by the composition root)
    # ------------------------------------------------------------------
    def mount_page(self, key: str, view: tk.Widget) -> None:
        """Pack a page view into its host frame."""
        if key not in self.page_hosts:
            raise KeyError(key)
        view.pack(fill="both", expand=True)

    def select_page(self, index: int) -> None:
        if 0 <= index < len(self._page_keys):
            self.tabs.select(index)

    def set_window_title(self, title: str) -> None:
        self.title(title)

    def show_toast(self, message: str) -> None:
        """Lightweight user feedback in the statusbar."""
        self.status_message_var.set(message)

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------
    def _on_tab_changed(self, _event=None) -> None:
        if self._on_page_selected:
            self._on_page_selected(self.tabs.index(self.tabs.select()))

    def _on_close_clicked(self) -> None:
        if self._on_close:
            self._on_close()
        self.destroy()
