"""
Tool page views
---------------
One ``ttk.Frame`` per notebook tab. Each page is a pure View: it takes
callbacks in its constructor and exposes a single ``render(view)`` setter fed
with :class:`minitools.viewmodels.session_vm.SessionView`.
"""
from __future__ import annotations
import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from minitools.viewmodels.session_vm import GUESS_PLACEHOLDER, PASSWORD_PLACEHOLDER, SessionView
from .theme import feedback_style
from .view_utils import command, safe_call

OnVoid = Optional[Callable[[], None]]
OnText = Optional[Callable[[str], None]]


def _page_header(parent: tk.Widget, title: str) -> None:
    header = ttk.Frame(parent)
    header.pack(fill="x", pady=(0, 12))
    ttk.Label(header, text="Welcome", style="Title.TLabel").pack(side="left")
    ttk.Label(header, text=title, style="Subtle.TLabel").pack(side="left", padx=(8, 0), anchor="s")


class _BoundEntry(ttk.Entry):
    """Entry that reports user edits but not programmatic updates."""

    def __init__(self, parent: tk.Widget, *, on_input: OnText) -> None:
        self.var = tk.StringVar(value="")
        super().__init__(parent, textvariable=self.var, width=32)
        self._on_input = on_input
        self._syncing = False
        self.var.trace_add("write", self._on_write)

    def set_text(self, text: str) -> None:
        if self.var.get() == text:
            return
        self._syncing = True
        try:
            self.var.set(text)
        finally:
            self._syncing = False

    def _on_write(self, *_args) -> None:
        if not self._syncing:
            safe_call(self._on_input, self.var.get())


class WatchPageView(ttk.Frame):
    def __init__(self, parent: tk.Widget, *, on_toggle: OnVoid = None) -> None:
        super().__init__(parent)
        _page_header(self, "Watch")
        row = ttk.Frame(self)
        row.pack(fill="x")
        self._label = ttk.Label(row, text="Watch: 0", style="Value.TLabel")
        self._label.pack(side="left")
        self._button = ttk.Button(row, text="Start", style="Primary.TButton", command=command(on_toggle))
        self._button.pack(side="right")

    def render(self, view: SessionView) -> None:
        self._label.configure(text=view.watch_label)
        self._button.configure(text=view.watch_button)


class CounterPageView(ttk.Frame):
    def __init__(self, parent: tk.Widget, *, on_increment: OnVoid = None, on_decrement: OnVoid = None) -> None:
        super().__init__(parent)
        _page_header(self, "Counter")
        row = ttk.Frame(self)
        row.pack(anchor="w")
        ttk.Button(row, text="-", width=3, command=command(on_decrement)).pack(side="left")
        self._value = ttk.Label(row, text="0", style="Value.TLabel", width=8, anchor="center")
        self._value.pack(side="left", padx=8)
        ttk.Button(row, text="+", width=3, command=command(on_increment)).pack(side="left")

    def render(self, view: SessionView) -> None:
        self._value.configure(text=view.counter_text)


class PasswordPageView(ttk.Frame):
    def __init__(
        self,
        parent: tk.Widget,
        *,
        on_input: OnText = None,
        on_clear: OnVoid = None,
        on_generate: OnVoid = None,
    ) -> None:
        super().__init__(parent)
        _page_header(self, "Password")
        ttk.Label(self, text=PASSWORD_PLACEHOLDER, style="Subtle.TLabel").pack(anchor="w")
        row = ttk.Frame(self)
        row.pack(fill="x", pady=(4, 0))
        self._entry = _BoundEntry(row, on_input=on_input)
        self._entry.pack(side="left", fill="x", expand=True)
        ttk.Button(row, text="✕", width=3, command=command(on_clear)).pack(side="left", padx=(4, 0))
        ttk.Button(
            row, text="Generate password", style="Primary.TButton", command=command(on_generate)
        ).pack(side="left", padx=(8, 0))

    def render(self, view: SessionView) -> None:
        self._entry.set_text(view.password)


class GuessPageView(ttk.Frame):
    def __init__(
        self,
        parent: tk.Widget,
        *,
        on_input: OnText = None,
        on_clear: OnVoid = None,
        on_check: OnVoid = None,
        on_new_game: OnVoid = None,
    ) -> None:
        super().__init__(parent)
        _page_header(self, "Guess")
        ttk.Label(self, text=GUESS_PLACEHOLDER, style="Subtle.TLabel").pack(anchor="w")
        row = ttk.Frame(self)
        row.pack(fill="x", pady=(4, 8))
        self._entry = _BoundEntry(row, on_input=on_input)
        self._entry.pack(side="left", fill="x", expand=True)
        self._entry.bind("<Return>", command(on_check))
        ttk.Button(row, text="✕", width=3, command=command(on_clear)).pack(side="left", padx=(4, 0))
        ttk.Button(
            row, text="Check the number", style="Primary.TButton", command=command(on_check)
        ).pack(side="left", padx=(8, 0))

        self._feedback = ttk.Label(self, text="", style="Feedback.TLabel")
        self._feedback.pack(anchor="w", pady=(4, 0))
        self._attempts = ttk.Label(self, text="")
        self._attempts.pack(anchor="w", pady=(4, 8))
        ttk.Button(self, text="Start a new game", command=command(on_new_game)).pack(anchor="w")

    def render(self, view: SessionView) -> None:
        self._entry.set_text(view.guess_input)
        self._feedback.configure(text=view.feedback, style=feedback_style(view.outcome))
        self._attempts.configure(text=view.attempts_label)


__all__ = ["CounterPageView", "GuessPageView", "PasswordPageView", "WatchPageView"]
