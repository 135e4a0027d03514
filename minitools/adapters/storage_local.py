from __future__ import annotations
import json, os, tempfile
from typing import Dict, Optional
from minitools.domain.ports import StoragePort


class StorageLocal(StoragePort):
    """Local filesystem storage for user settings (JSON)."""

    SETTINGS_FILE = "user_settings.json"

    def __init__(self, root_dir: str = ".") -> None:
        self.root = root_dir

    @property
    def settings_path(self) -> str:
        return os.path.join(self.root, self.SETTINGS_FILE)

    def save_user_settings(self, payload: Dict) -> None:
        """Write settings atomically (temp file in the same dir, then replace)."""
        os.makedirs(self.root, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(prefix="user_settings_", suffix=".tmp", dir=self.root)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, ensure_ascii=False, indent=2, sort_keys=True)
            os.replace(tmp_path, self.settings_path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def load_user_settings(self) -> Optional[Dict]:
        path = self.settings_path
        if not os.path.exists(path):
            return None
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"{path} must contain a JSON object.")
        return data


__all__ = ["StorageLocal"]
