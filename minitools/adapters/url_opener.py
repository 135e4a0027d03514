"""Platform URL launcher used by the ``OpenLink`` effect.

The launcher is detached: a child process is spawned and never waited on,
so the UI loop does not stall while the browser starts.
"""

from __future__ import annotations

import os
import shutil
import subprocess
import sys
import webbrowser

from ..domain.errors import UrlOpenError
from ..domain.ports import UrlOpenerPort


class SystemUrlOpener(UrlOpenerPort):
    """Open URLs with ``os.startfile``, ``open`` or ``xdg-open``."""

    def open(self, url: str) -> None:
        target = (url or "").strip()
        if not target:
            raise UrlOpenError(url, "empty URL")
        try:
            if sys.platform.startswith("win"):
                os.startfile(target)  # type: ignore[attr-defined]
                return
            if sys.platform == "darwin":
                subprocess.Popen(["open", target], start_new_session=True)
                return
            opener = shutil.which("xdg-open")
            if opener:
                subprocess.Popen(
                    [opener, target],
                    stdout=subprocess.DEVNULL,
                    stderr=subprocess.DEVNULL,
                    start_new_session=True,
                )
                return
        except OSError as exc:
            raise UrlOpenError(target, str(exc)) from exc
        if not webbrowser.open(target):
            raise UrlOpenError(target, "no browser available")


__all__ = ["SystemUrlOpener"]
