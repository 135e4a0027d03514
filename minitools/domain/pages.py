"""Page identifiers for the tabbed navigation."""

from __future__ import annotations

from enum import Enum


class Page(str, Enum):
    WATCH = "watch"
    COUNTER = "counter"
    PASSWORD = "password"
    GUESS = "guess"

    @classmethod
    def parse(cls, value: object) -> "Page":
        """Resolve a page from its token; raises ``ValueError`` if unknown."""
        if isinstance(value, Page):
            return value
        token = str(value or "").strip().lower()
        for page in cls:
            if page.value == token:
                return page
        raise ValueError(f"Unknown page '{value}'.")


PAGE_ORDER = (Page.WATCH, Page.COUNTER, Page.PASSWORD, Page.GUESS)

__all__ = ["PAGE_ORDER", "Page"]
