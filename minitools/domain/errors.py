"""Domain-level error types shared across use cases and adapters."""

from __future__ import annotations


class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


class UrlOpenError(Exception):
    """Raised by URL opener adapters when the platform launcher fails."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"failed to open {url!r}: {reason}")
        self.url = url
        self.reason = reason


__all__ = ["UrlOpenError", "UseCaseError"]
