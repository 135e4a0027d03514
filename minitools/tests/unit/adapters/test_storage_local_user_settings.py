import json

import pytest

from minitools.adapters.storage_local import StorageLocal
from minitools.viewmodels.settings_vm import SettingsVM


def test_user_settings_missing_file_and_save(tmp_path):
    storage = StorageLocal(root_dir=str(tmp_path))
    settings_path = tmp_path / "user_settings.json"

    assert storage.load_user_settings() is None
    assert not settings_path.exists()

    vm = SettingsVM()
    storage.save_user_settings(vm.to_dict())

    assert settings_path.exists()
    assert list(tmp_path.glob("user_settings_*.tmp")) == []
    with settings_path.open("r", encoding="utf-8") as fh:
        persisted = json.load(fh)
    assert persisted == vm.to_dict()


def test_user_settings_round_trip_creates_root(tmp_path):
    storage = StorageLocal(root_dir=str(tmp_path / "nested"))
    payload = {"watch_interval_ms": 500, "start_page": "guess", "debug_logging": True}

    storage.save_user_settings(payload)

    assert storage.load_user_settings() == payload


def test_user_settings_rejects_non_object(tmp_path):
    (tmp_path / "user_settings.json").write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(ValueError):
        StorageLocal(root_dir=str(tmp_path)).load_user_settings()
