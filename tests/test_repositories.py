"""Integration tests for metadata stores."""

import sqlite3
from unittest.mock import patch

import pytest

from common.constants import FLAG_DIR, FLAG_FILE, NO_VERSION
from common.types import Metadata
from controller.database import get_db_connection
from controller.exceptions import StoreError
from controller.grid_file import GridFile
from controller.repositories.metadata_repository import SqliteMetadataStore
from controller.store import InMemoryMetadataStore


def _record(flags: int = FLAG_FILE, length: int = 0) -> Metadata:
    return Metadata(length=length, modification_time=1_700_000_000_000, chunk_size=4000, flags=flags)


class TestSqliteMetadataStore:
    """Test SqliteMetadataStore with various scenarios."""

    def test_put_and_get(self, sqlite_store):
        record = _record(length=12)
        assert sqlite_store.put("/a", record)
        assert sqlite_store.get("/a") == record

    def test_get_missing(self, sqlite_store):
        assert sqlite_store.get("/missing") is None

    def test_records_stored_as_17_byte_blobs(self, sqlite_store):
        sqlite_store.put("/a", _record(FLAG_DIR))

        with get_db_connection(sqlite_store.db_path) as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT record FROM metadata WHERE path = ?", ("/a",))
            blob = bytes(cursor.fetchone()["record"])

        assert blob == _record(FLAG_DIR).to_bytes()
        assert len(blob) == 17

    def test_unconditional_put_overwrites(self, sqlite_store):
        sqlite_store.put("/a", _record(FLAG_FILE))
        sqlite_store.put("/a", _record(FLAG_DIR))

        assert sqlite_store.get("/a").is_directory
        assert sqlite_store.keys() == {"/a"}

    def test_conditional_modes_rejected(self, sqlite_store):
        with pytest.raises(StoreError):
            sqlite_store.put("/a", _record(), version=0)
        with pytest.raises(StoreError):
            sqlite_store.put("/a", _record(), version=NO_VERSION, ttl=500)
        assert sqlite_store.keys() == set()

    def test_keys(self, sqlite_store):
        for key in ("/a", "/a/b", "/c"):
            sqlite_store.put(key, _record(FLAG_DIR))
        assert sqlite_store.keys() == {"/a", "/a/b", "/c"}

    def test_short_record_raises_store_error(self, sqlite_store):
        with get_db_connection(sqlite_store.db_path) as conn:
            conn.execute(
                "INSERT INTO metadata (path, record, updated_at) VALUES (?, ?, ?)",
                ("/a", b"\x00\x01\x02\x03\x04", "2024-01-01T00:00:00+00:00"),
            )
            conn.commit()

        with pytest.raises(StoreError):
            sqlite_store.get("/a")
        assert not GridFile("/a/b", sqlite_store, 4000).mkdir()
        assert sqlite_store.keys() == {"/a"}

    def test_unencodable_record_raises_store_error(self, sqlite_store):
        with pytest.raises(StoreError):
            sqlite_store.put("/a", _record(length=2 ** 40))
        assert sqlite_store.keys() == set()

    def test_little_endian_store(self, tmp_path):
        store = SqliteMetadataStore(str(tmp_path / "le.db"), byte_order="little")
        store.put("/a", _record(length=3))

        assert store.get("/a").length == 3
        with get_db_connection(store.db_path) as conn:
            row = conn.execute("SELECT record FROM metadata").fetchone()
        assert bytes(row["record"])[:4] == b"\x03\x00\x00\x00"

    def test_persists_across_instances(self, tmp_path):
        db_path = str(tmp_path / "shared.db")
        SqliteMetadataStore(db_path).put("/a", _record(FLAG_DIR))

        assert SqliteMetadataStore(db_path).get("/a").is_directory

    def test_sqlite_errors_wrapped(self, sqlite_store):
        with patch(
            "controller.repositories.metadata_repository.get_db_connection",
            side_effect=sqlite3.OperationalError("database is locked"),
        ):
            with pytest.raises(StoreError):
                sqlite_store.get("/a")
            with pytest.raises(StoreError):
                sqlite_store.put("/a", _record())
            with pytest.raises(StoreError):
                sqlite_store.keys()


class TestInMemoryMetadataStore:
    def test_put_get_keys(self, memory_store):
        memory_store.put("/a", _record(FLAG_DIR))
        assert memory_store.get("/a").is_directory
        assert memory_store.keys() == {"/a"}
        assert memory_store.count() == 1

    def test_keys_is_a_snapshot(self, memory_store):
        memory_store.put("/a", _record())
        keys = memory_store.keys()
        memory_store.put("/b", _record())
        assert keys == {"/a"}

    def test_conditional_modes_rejected(self, memory_store):
        with pytest.raises(StoreError):
            memory_store.put("/a", _record(), version=3)
        with pytest.raises(StoreError):
            memory_store.put("/a", _record(), version=NO_VERSION, ttl=1000)

    def test_initial_records(self):
        store = InMemoryMetadataStore({"/a": _record()})
        assert store.get("/a") is not None
