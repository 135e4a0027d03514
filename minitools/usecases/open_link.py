"""Effect handler for ``OpenUrl``.

Call context:
    ``AppRuntime._perform`` calls :class:`OpenLink` on the UI thread after the
    event that produced the effect has been applied. Failures end up in the
    log only; the session is never touched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..domain.ports import UrlOpenerPort

_log = logging.getLogger(__name__)


@dataclass
class OpenLink:
    """Open a URL and log failures; never raises into the UI loop."""

    opener: UrlOpenerPort

    def __call__(self, url: str) -> bool:
        try:
            self.opener.open(url)
        except Exception as exc:
            _log.warning("failed to open %r: %s", url, exc)
            return False
        _log.debug("Opened link %s", url)
        return True
