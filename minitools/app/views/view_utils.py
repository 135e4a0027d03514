from __future__ import annotations

import logging
from typing import Any, Callable, Optional

_log = logging.getLogger(__name__)

Callback = Optional[Callable[..., Any]]


def safe_call(fn: Callback, *args: Any) -> bool:
    """Invoke a view callback; exceptions are logged so Tk keeps running."""
    if fn is None:
        return False
    try:
        fn(*args)
    except Exception:
        _log.exception("View callback %s failed", getattr(fn, "__qualname__", repr(fn)))
        return False
    return True


def command(fn: Callback, *args: Any) -> Callable[..., None]:
    """Return a Tk ``command=``/``bind`` handler that calls ``fn`` safely.

    Extra positional arguments passed by Tk (e.g. the event of ``bind``) are
    ignored.
    """

    def _handler(*_tk_args: Any) -> None:
        safe_call(fn, *args)

    return _handler


__all__ = ["command", "safe_call"]
