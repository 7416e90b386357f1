# -*- coding: utf-8 -*-
"""
Tests for the key-value persistence service.
"""

import pytest

from repositories.kv_store import InMemoryKeyValueStore, SQLiteKeyValueStore


@pytest.fixture(params=["memory", "sqlite"])
def store(request, tmp_path):
    """Create each store backend."""
    if request.param == "memory":
        yield InMemoryKeyValueStore()
    else:
        sqlite_store = SQLiteKeyValueStore(db_path=tmp_path / "kv.db")
        yield sqlite_store
        sqlite_store.close()


class TestBasicOperations:
    """Test set/get/remove."""

    def test_set_and_get(self, store):
        """Test values are stored as given, Arabic included."""
        store.set("currentFormData", '{"sector": "صور"}')
        assert store.get("currentFormData") == '{"sector": "صور"}'

    def test_missing_key(self, store):
        """Test unknown keys read as None."""
        assert store.get("nothing") is None

    def test_remove(self, store):
        """Test removal, including of unknown keys."""
        store.set("a", "1")
        store.remove("a")
        store.remove("never-set")

        assert store.get("a") is None


class TestKeyEnumeration:
    """Test keys() ordering and prefix filtering."""

    def test_insertion_order(self, store):
        """Test keys come back in the order they were first set."""
        for key in ("submission_3", "submission_1", "submission_2"):
            store.set(key, "{}")

        assert store.keys("submission_") == ["submission_3", "submission_1", "submission_2"]

    def test_overwrite_keeps_position(self, store):
        """Test overwriting a key does not move it to the end."""
        store.set("a", "1")
        store.set("b", "2")
        store.set("a", "3")

        assert store.keys() == ["a", "b"]
        assert store.get("a") == "3"

    def test_prefix_filter(self, store):
        """Test prefix excludes other keys."""
        store.set("submission_1", "{}")
        store.set("currentFormData", "{}")

        assert store.keys("submission_") == ["submission_1"]
        assert store.count("submission_") == 1
        assert store.count() == 2


class TestSQLitePersistence:
    """Test the SQLite backend keeps data across connections."""

    def test_reopen(self, tmp_path):
        """Test data survives closing and reopening the file."""
        path = tmp_path / "nested" / "kv.db"
        first = SQLiteKeyValueStore(db_path=path)
        first.set("submission_1", "{}")
        first.close()

        second = SQLiteKeyValueStore(db_path=path)
        try:
            assert second.keys() == ["submission_1"]
            assert second.is_connected() is True
        finally:
            second.close()
