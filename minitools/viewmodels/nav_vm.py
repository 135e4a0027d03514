from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from minitools.domain.pages import PAGE_ORDER, Page

APP_TITLE = "Mini Tools"


@dataclass(frozen=True)
class NavItem:
    page: Page
    label: str
    icon: str


NAV_ITEMS: Tuple[NavItem, ...] = (
    NavItem(Page.WATCH, "Watch", "timer"),
    NavItem(Page.COUNTER, "Counter", "exposure"),
    NavItem(Page.PASSWORD, "Password", "password"),
    NavItem(Page.GUESS, "Guess", "casino"),
)


class NavVM:
    """Tracks the active page and derives the window title."""

    def __init__(
        self,
        *,
        active: Page = Page.WATCH,
        on_page_changed: Optional[Callable[[Page], None]] = None,
    ) -> None:
        self._items: Dict[Page, NavItem] = {item.page: item for item in NAV_ITEMS}
        self.active = Page.parse(active)
        self.on_page_changed = on_page_changed

    @property
    def items(self) -> Tuple[NavItem, ...]:
        return NAV_ITEMS

    def label_for(self, page: Page) -> str:
        return self._items[Page.parse(page)].label

    def select(self, page: Page | str) -> None:
        target = Page.parse(page)
        if target == self.active:
            return
        self.active = target
        if self.on_page_changed:
            self.on_page_changed(target)

    def select_index(self, index: int) -> None:
        """Select by 0-based position; out-of-range indices are ignored."""
        if 0 <= index < len(PAGE_ORDER):
            self.select(PAGE_ORDER[index])

    def window_title(self) -> str:
        return f"{APP_TITLE} — {self.label_for(self.active)}"


__all__ = ["APP_TITLE", "NAV_ITEMS", "NavItem", "NavVM"]
