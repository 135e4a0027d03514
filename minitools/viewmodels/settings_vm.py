"""User preferences persisted in ``user_settings.json``.

Call context:
    The composition roots load the stored payload through ``StorageLocal``
    and hand it to :meth:`SettingsVM.apply_dict`; on window close the Tk
    shell stores the active page and calls :meth:`SettingsVM.cmd_save`.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Callable, Dict, Mapping, Optional

from minitools.domain.pages import Page
from ..utils.logging import env_requests_debug

MIN_WATCH_INTERVAL_MS = 10

_TRUE_WORDS = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class SettingsConfig:
    watch_interval_ms: int = 1000
    start_page: str = Page.WATCH.value
    debug_logging: bool = False


def _to_interval(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ValueError("watch_interval_ms must be an integer.")
    try:
        interval = int(value.strip()) if isinstance(value, str) else int(value)
    except ValueError as exc:
        raise ValueError("watch_interval_ms must be an integer.") from exc
    if interval < MIN_WATCH_INTERVAL_MS:
        raise ValueError(f"watch_interval_ms must be at least {MIN_WATCH_INTERVAL_MS}.")
    return interval


def _to_page(value: Any) -> str:
    try:
        return Page.parse(value).value
    except ValueError as exc:
        raise ValueError(f"start_page: {exc}") from exc


def _to_flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_WORDS
    return bool(value)


_COERCERS: Dict[str, Callable[[Any], Any]] = {
    "watch_interval_ms": _to_interval,
    "start_page": _to_page,
    "debug_logging": _to_flag,
}


class SettingsVM:
    """Validated preferences; persistence goes through ``on_save``."""

    def __init__(
        self,
        *,
        config: Optional[SettingsConfig] = None,
        on_save: Optional[Callable[[dict], None]] = None,
    ) -> None:
        self.config = config or SettingsConfig(debug_logging=env_requests_debug())
        self.on_save = on_save

    @property
    def watch_interval_ms(self) -> int:
        return self.config.watch_interval_ms

    @watch_interval_ms.setter
    def watch_interval_ms(self, value: Any) -> None:
        self.apply_dict({"watch_interval_ms": value})

    @property
    def watch_interval_s(self) -> float:
        return self.config.watch_interval_ms / 1000.0

    @property
    def start_page(self) -> Page:
        return Page.parse(self.config.start_page)

    @start_page.setter
    def start_page(self, value: Any) -> None:
        self.apply_dict({"start_page": value})

    @property
    def debug_logging(self) -> bool:
        return self.config.debug_logging

    @debug_logging.setter
    def debug_logging(self, value: Any) -> None:
        self.apply_dict({"debug_logging": value})

    def apply_dict(self, payload: Mapping[str, Any]) -> None:
        """Validate ``payload`` and apply it; nothing changes on error.

        Raises:
            ValueError: unknown keys or a value that cannot be coerced.
        """
        if not isinstance(payload, Mapping):
            raise ValueError("Settings payload must be a JSON object.")
        known = {f.name for f in fields(SettingsConfig)}
        unknown = sorted(str(key) for key in payload if key not in known)
        if unknown:
            raise ValueError(f"Unsupported settings keys: {', '.join(unknown)}")
        updates = {key: _COERCERS[key](value) for key, value in payload.items()}
        if updates:
            self.config = replace(self.config, **updates)

    def to_dict(self) -> dict:
        return asdict(self.config)

    def cmd_save(self) -> None:
        if self.on_save:
            self.on_save(self.to_dict())


def default_settings_payload() -> dict:
    return asdict(SettingsConfig())


__all__ = [
    "MIN_WATCH_INTERVAL_MS",
    "SettingsConfig",
    "SettingsVM",
    "default_settings_payload",
]
