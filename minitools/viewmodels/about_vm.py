from __future__ import annotations
from dataclasses import dataclass, field
from importlib import metadata
from typing import Tuple

from minitools import __version__
from .nav_vm import APP_TITLE

Link = Tuple[str, str]

LICENSE_NAME = "GPL-3.0-only"
LICENSE_LINK: Link = ("License (GPL-3.0)", "https://www.gnu.org/licenses/gpl-3.0.html")


def _project_links(dist_name: str = "minitools") -> Tuple[Link, ...]:
    """Read ``Project-URL`` entries ("Label, url") from installed metadata."""
    try:
        entries = metadata.metadata(dist_name).get_all("Project-URL") or []
    except metadata.PackageNotFoundError:
        return ()
    links = []
    for entry in entries:
        label, _, url = str(entry).partition(",")
        if url.strip():
            links.append((label.strip(), url.strip()))
    return tuple(links)


def _default_links() -> Tuple[Link, ...]:
    """Project URLs from the installed metadata, then the license text."""
    links = _project_links()
    if LICENSE_LINK[1] not in {url for _, url in links}:
        links += (LICENSE_LINK,)
    return links


@dataclass
class AboutVM:
    """Static metadata rendered by the About dialog."""

    name: str = APP_TITLE
    version: str = __version__
    license: str = LICENSE_NAME
    links: Tuple[Link, ...] = field(default_factory=_default_links)

    def heading(self) -> str:
        return f"{self.name} {self.version}"
