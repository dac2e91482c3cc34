"""Tests for the JSON file storage adapter."""

import pytest

from habitual.adapters.storage.json_store import JsonStorage
from habitual.ports.outbound import StoragePort


class TestJsonStorage:
    def test_implements_port(self, tmp_path):
        assert isinstance(JsonStorage(str(tmp_path)), StoragePort)

    def test_missing_key_loads_empty(self, tmp_path):
        assert JsonStorage(str(tmp_path)).load("nothing") == []

    def test_save_and_load(self, tmp_path):
        store = JsonStorage(str(tmp_path))
        store.save("api_calls", [{"cost": 0.1}, {"cost": 0.2}])
        assert store.load("api_calls") == [{"cost": 0.1}, {"cost": 0.2}]
        assert (tmp_path / "api_calls.json").exists()

    def test_creates_directory(self, tmp_path):
        target = tmp_path / "nested" / "dir"
        JsonStorage(str(target))
        assert target.is_dir()

    def test_corrupt_file_loads_empty(self, tmp_path, capsys):
        (tmp_path / "bad.json").write_text("{not json", encoding="utf-8")
        assert JsonStorage(str(tmp_path)).load("bad") == []
        assert "Failed to load bad.json" in capsys.readouterr().err

    def test_non_list_loads_empty(self, tmp_path):
        (tmp_path / "obj.json").write_text('{"a": 1}', encoding="utf-8")
        assert JsonStorage(str(tmp_path)).load("obj") == []

    def test_no_tmp_files_left(self, tmp_path):
        JsonStorage(str(tmp_path)).save("k", [1])
        assert not list(tmp_path.glob("*.tmp"))

    @pytest.mark.parametrize("key", ["../escape", "a/b", "", ".hidden"])
    def test_invalid_keys_rejected(self, tmp_path, key):
        with pytest.raises(ValueError):
            JsonStorage(str(tmp_path)).load(key)
