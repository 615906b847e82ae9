"""Tests for preference storage."""

import json

import pytest
import yaml

from portfolio.core.enums.theme_preference import ThemePreference
from portfolio.core.errors import StorageError
from portfolio.services.storage.key_value import FileKeyValueStorage, MemoryKeyValueStorage
from portfolio.services.storage.preference_store import ThemePreferenceStore


class TestMemoryKeyValueStorage:
    def test_get_missing_returns_none(self):
        assert MemoryKeyValueStorage().get_item("theme") is None

    def test_set_then_get(self):
        storage = MemoryKeyValueStorage()
        storage.set_item("theme", "dark")
        assert storage.get_item("theme") == "dark"
        assert storage.as_dict() == {"theme": "dark"}


class TestFileKeyValueStorage:
    def test_missing_file_reads_as_empty(self, tmp_path):
        storage = FileKeyValueStorage(tmp_path / "absent.json")
        assert storage.get_item("theme") is None

    def test_json_write_creates_parents(self, tmp_path):
        path = tmp_path / "nested" / "dir" / "preferences.json"
        FileKeyValueStorage(path).set_item("theme", "light")

        assert json.loads(path.read_text(encoding="utf-8")) == {"theme": "light"}

    def test_yaml_selected_by_suffix(self, tmp_path):
        path = tmp_path / "preferences.yaml"
        storage = FileKeyValueStorage(path)
        storage.set_item("theme", "dark")

        assert storage.is_yaml is True
        assert yaml.safe_load(path.read_text(encoding="utf-8")) == {"theme": "dark"}
        assert storage.get_item("theme") == "dark"

    def test_write_preserves_other_keys(self, tmp_path):
        path = tmp_path / "preferences.json"
        path.write_text(json.dumps({"volume": "7", "theme": "light"}), encoding="utf-8")

        FileKeyValueStorage(path).set_item("theme", "dark")

        assert json.loads(path.read_text(encoding="utf-8")) == {"volume": "7", "theme": "dark"}

    def test_non_string_value_is_stringified(self, tmp_path):
        path = tmp_path / "preferences.json"
        path.write_text(json.dumps({"theme": 3}), encoding="utf-8")

        assert FileKeyValueStorage(path).get_item("theme") == "3"

    @pytest.mark.parametrize(
        "name, text",
        [
            ("preferences.json", "{broken"),
            ("preferences.json", "[1, 2]"),
            ("preferences.yaml", "theme: [unclosed"),
            ("preferences.yaml", "- just\n- a list\n"),
        ],
    )
    def test_corrupt_document_raises_storage_error(self, tmp_path, name, text):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")

        with pytest.raises(StorageError):
            FileKeyValueStorage(path).get_item("theme")

    def test_write_replaces_corrupt_document(self, tmp_path):
        path = tmp_path / "preferences.json"
        path.write_text("{broken", encoding="utf-8")

        FileKeyValueStorage(path).set_item("theme", "dark")

        assert json.loads(path.read_text(encoding="utf-8")) == {"theme": "dark"}

    def test_unwritable_location_raises_storage_error(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory", encoding="utf-8")

        with pytest.raises(StorageError):
            FileKeyValueStorage(blocker / "preferences.json").set_item("theme", "dark")


class TestThemePreferenceStore:
    @pytest.mark.parametrize("preference", list(ThemePreference))
    def test_round_trip(self, preference):
        store = ThemePreferenceStore(MemoryKeyValueStorage())

        assert store.save(preference) is True
        assert store.load() is preference

    def test_missing_reads_as_system(self):
        assert ThemePreferenceStore(MemoryKeyValueStorage()).load() is ThemePreference.SYSTEM

    def test_invalid_reads_as_system(self):
        store = ThemePreferenceStore(MemoryKeyValueStorage({"theme": "purple"}))
        assert store.load() is ThemePreference.SYSTEM

    def test_custom_key(self):
        storage = MemoryKeyValueStorage()
        ThemePreferenceStore(storage, key="ui.theme").save(ThemePreference.DARK)

        assert storage.as_dict() == {"ui.theme": "dark"}

    def test_storage_failures_are_recovered(self, failing_storage):
        store = ThemePreferenceStore(failing_storage)

        assert store.load() is ThemePreference.SYSTEM
        assert store.save(ThemePreference.DARK) is False


class TestUnreachableStorageDirectory:
    """A storage path the OS refuses to stat must read and write as failures, not crash."""

    def test_over_long_path_raises_storage_error(self, tmp_path):
        storage = FileKeyValueStorage(tmp_path / ("x" * 300) / "preferences.json")

        with pytest.raises(StorageError):
            storage.get_item("theme")
        with pytest.raises(StorageError):
            storage.set_item("theme", "dark")

    def test_over_long_path_fails_soft(self, tmp_path):
        store = ThemePreferenceStore(FileKeyValueStorage(tmp_path / ("x" * 300) / "preferences.json"))

        assert store.load() is ThemePreference.SYSTEM
        assert store.save(ThemePreference.DARK) is False
