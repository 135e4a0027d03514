"""ttk styles for the tool pages.

Page views only reference style names; colours and fonts live here.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Dict

from minitools.domain.session import GuessOutcome

PALETTE: Dict[str, str] = {
    "window": "#f4f6fa",
    "surface": "#ffffff",
    "outline": "#d6dce8",
    "accent": "#3b5bdb",
    "accent_active": "#2f4ac0",
    "ink": "#212529",
    "muted": "#6c757d",
    "good": "#2b8a3e",
    "warn": "#e67700",
    "bad": "#c92a2a",
}

_FEEDBACK_STYLES = {
    GuessOutcome.PENDING: "Feedback.TLabel",
    GuessOutcome.CORRECT: "Correct.Feedback.TLabel",
    GuessOutcome.GO_HIGHER: "Hint.Feedback.TLabel",
    GuessOutcome.GO_LOWER: "Hint.Feedback.TLabel",
    GuessOutcome.INVALID: "Invalid.Feedback.TLabel",
}


def feedback_style(outcome: GuessOutcome) -> str:
    """Return the label style used to show feedback for ``outcome``."""
    return _FEEDBACK_STYLES.get(outcome, "Feedback.TLabel")


def apply_modern_theme(root: tk.Misc) -> None:
    """Install the application styles on the interpreter owning ``root``."""
    style = ttk.Style(root)
    if "clam" in style.theme_names():
        style.theme_use("clam")

    p = PALETTE
    root.option_add("*Font", "TkDefaultFont 10")
    root.configure(bg=p["window"])

    style.configure(".", background=p["window"], foreground=p["ink"])
    style.configure("TLabel", background=p["window"], foreground=p["ink"])
    style.configure("Subtle.TLabel", foreground=p["muted"])
    style.configure("Title.TLabel", font=("TkDefaultFont", 18, "bold"))
    style.configure("Value.TLabel", font=("TkDefaultFont", 16, "bold"))

    feedback_font = ("TkDefaultFont", 12, "bold")
    style.configure("Feedback.TLabel", font=feedback_font)
    style.configure("Correct.Feedback.TLabel", font=feedback_font, foreground=p["good"])
    style.configure("Hint.Feedback.TLabel", font=feedback_font, foreground=p["warn"])
    style.configure("Invalid.Feedback.TLabel", font=feedback_font, foreground=p["bad"])

    style.configure("TButton", padding=(10, 6), background=p["surface"], bordercolor=p["outline"])
    style.configure(
        "Primary.TButton",
        background=p["accent"],
        foreground=p["surface"],
        bordercolor=p["accent"],
    )
    style.map("Primary.TButton", background=[("active", p["accent_active"])])

    style.configure("TNotebook", background=p["window"], borderwidth=0)
    style.configure("TNotebook.Tab", padding=(16, 8))
    style.map("TNotebook.Tab", background=[("selected", p["surface"])])

    style.configure("TEntry", fieldbackground=p["surface"], bordercolor=p["outline"])
