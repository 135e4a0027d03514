from __future__ import annotations
from typing import Dict, Optional, Protocol

from .errors import UseCaseError


# ---- Ports (Hexagonal boundaries) ----
class RandomPort(Protocol):
    """Uniform integer source used for secret numbers and passwords."""

    def next_uniform(self, low: int, high: int) -> int: ...  # low <= n < high


class UrlOpenerPort(Protocol):
    """Open a URL with the platform default handler.

    Implementations raise on failure and must not wait for the launched
    process to exit.
    """

    def open(self, url: str) -> None: ...


class StoragePort(Protocol):
    """Persistence for user preferences."""

    def save_user_settings(self, payload: Dict) -> None: ...
    def load_user_settings(self) -> Optional[Dict]: ...


__all__ = ["RandomPort", "StoragePort", "UrlOpenerPort", "UseCaseError"]
