"""Load and save ``user_settings.json`` through ``StoragePort``.

Call context:
    Both composition roots call :class:`LoadUserSettings` at start-up; the Tk
    shell calls :class:`SaveUserSettings` on close. Storage failures surface
    as ``UseCaseError`` with a ``SETTINGS_*`` code.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional

from ..domain.ports import StoragePort, UseCaseError


@dataclass
class LoadUserSettings:
    storage: StoragePort

    def __call__(self) -> Optional[Dict]:
        try:
            return self.storage.load_user_settings()
        except (OSError, ValueError) as e:
            raise UseCaseError("SETTINGS_LOAD_FAILED", str(e))


@dataclass
class SaveUserSettings:
    storage: StoragePort

    def __call__(self, payload: Dict) -> None:
        try:
            self.storage.save_user_settings(payload)
        except OSError as e:
            raise UseCaseError("SETTINGS_SAVE_FAILED", str(e))
