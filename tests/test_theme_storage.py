"""Tests for nightowl.theme.storage — MemoryStore and JsonFileStore."""

import json
import logging

import pytest

from nightowl.theme import JsonFileStore, KeyValueStore, MemoryStore


class TestMemoryStore:
    def test_missing_key_is_none(self) -> None:
        assert MemoryStore().get("dark") is None

    def test_set_then_get(self) -> None:
        store = MemoryStore()
        store.set("dark", "true")
        assert store.get("dark") == "true"
        assert "dark" in store
        assert len(store) == 1

    def test_initial_data_is_copied(self) -> None:
        initial = {"dark": "true"}
        store = MemoryStore(initial)
        store.set("dark", "false")
        assert initial == {"dark": "true"}

    def test_rejects_non_string(self) -> None:
        with pytest.raises(TypeError, match="strings"):
            MemoryStore().set("dark", True)  # type: ignore[arg-type]

    def test_satisfies_protocol(self) -> None:
        assert isinstance(MemoryStore(), KeyValueStore)


class TestJsonFileStore:
    def test_missing_file_reads_empty(self, tmp_path) -> None:
        store = JsonFileStore(tmp_path / "theme.json")
        assert store.get("dark") is None

    def test_set_writes_json_object(self, tmp_path) -> None:
        path = tmp_path / "theme.json"
        JsonFileStore(path).set("dark", "true")
        assert json.loads(path.read_text(encoding="utf-8")) == {"dark": "true"}

    def test_survives_new_instance(self, tmp_path) -> None:
        path = tmp_path / "theme.json"
        JsonFileStore(path).set("dark", "false")
        assert JsonFileStore(path).get("dark") == "false"

    def test_creates_parent_directories(self, tmp_path) -> None:
        path = tmp_path / "a" / "b" / "theme.json"
        JsonFileStore(path).set("dark", "true")
        assert path.exists()

    def test_keeps_other_keys(self, tmp_path) -> None:
        path = tmp_path / "theme.json"
        path.write_text(json.dumps({"font": "serif"}), encoding="utf-8")
        JsonFileStore(path).set("dark", "true")
        assert json.loads(path.read_text(encoding="utf-8")) == {"dark": "true", "font": "serif"}

    def test_corrupt_file_reads_empty(self, tmp_path, caplog: pytest.LogCaptureFixture) -> None:
        path = tmp_path / "theme.json"
        path.write_text("not json", encoding="utf-8")
        with caplog.at_level(logging.WARNING, logger="nightowl.theme"):
            assert JsonFileStore(path).get("dark") is None
        assert "unreadable" in caplog.text

    def test_corrupt_file_is_replaced_on_write(self, tmp_path) -> None:
        path = tmp_path / "theme.json"
        path.write_text("not json", encoding="utf-8")
        JsonFileStore(path).set("dark", "true")
        assert JsonFileStore(path).get("dark") == "true"

    def test_invalid_utf8_reads_empty(self, tmp_path, caplog: pytest.LogCaptureFixture) -> None:
        path = tmp_path / "theme.json"
        path.write_bytes(b'{"dark": "\xff\xfe"}')
        with caplog.at_level(logging.WARNING, logger="nightowl.theme"):
            assert JsonFileStore(path).get("dark") is None
        assert "unreadable" in caplog.text

    def test_invalid_utf8_is_replaced_on_write(self, tmp_path) -> None:
        path = tmp_path / "theme.json"
        path.write_bytes(b"\xff\xfe garbage")
        JsonFileStore(path).set("dark", "false")
        assert JsonFileStore(path).get("dark") == "false"

    def test_directory_path_reads_empty(self, tmp_path, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="nightowl.theme"):
            assert JsonFileStore(tmp_path).get("dark") is None
        assert "Cannot read" in caplog.text

    def test_directory_path_write_raises(self, tmp_path) -> None:
        with pytest.raises(OSError):
            JsonFileStore(tmp_path).set("dark", "true")

    def test_non_object_reads_empty(self, tmp_path) -> None:
        path = tmp_path / "theme.json"
        path.write_text("[1, 2]", encoding="utf-8")
        assert JsonFileStore(path).get("dark") is None

    def test_non_string_value_reads_as_absent(self, tmp_path) -> None:
        path = tmp_path / "theme.json"
        path.write_text(json.dumps({"dark": True}), encoding="utf-8")
        assert JsonFileStore(path).get("dark") is None

    def test_rejects_non_string(self, tmp_path) -> None:
        with pytest.raises(TypeError):
            JsonFileStore(tmp_path / "theme.json").set("dark", 1)  # type: ignore[arg-type]

    def test_satisfies_protocol(self, tmp_path) -> None:
        assert isinstance(JsonFileStore(tmp_path / "theme.json"), KeyValueStore)
