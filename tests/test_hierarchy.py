"""Tests for ancestor-chain validation."""

from unittest.mock import Mock

from common.constants import FLAG_DIR, FLAG_FILE
from common.types import Metadata
from controller.exceptions import StoreError
from controller.hierarchy import HierarchyStatus, ensure_ancestors
from controller.store import InMemoryMetadataStore

CHUNK_SIZE = 4000


class RejectingStore(InMemoryMetadataStore):
    """Store that declines every write."""

    def put(self, key, value, version=-1, ttl=0):
        return False


def _record(flags: int) -> Metadata:
    return Metadata(length=0, modification_time=1_700_000_000_000, chunk_size=CHUNK_SIZE, flags=flags)


class TestEnsureAncestors:
    def test_single_segment_without_separator_touches_nothing(self):
        store = Mock()
        result = ensure_ancestors(store, "leaf.txt", False, CHUNK_SIZE)

        assert result.ok
        store.get.assert_not_called()
        store.put.assert_not_called()

    def test_top_level_path_touches_nothing(self):
        store = Mock()
        result = ensure_ancestors(store, "/leaf.txt", True, CHUNK_SIZE)

        assert result.ok
        store.get.assert_not_called()
        store.put.assert_not_called()

    def test_malformed_paths(self, store):
        for path in (None, "", "/"):
            result = ensure_ancestors(store, path, True, CHUNK_SIZE)
            assert result.status is HierarchyStatus.MALFORMED_PATH
            assert not result
        assert store.keys() == set()

    def test_existing_directories_pass(self, store):
        store.put("/a", _record(FLAG_DIR))
        store.put("/a/b", _record(FLAG_DIR))

        assert ensure_ancestors(store, "/a/b/c", False, CHUNK_SIZE)
        assert store.keys() == {"/a", "/a/b"}

    def test_missing_ancestor_without_create(self, store):
        store.put("/a", _record(FLAG_DIR))

        result = ensure_ancestors(store, "/a/b/c", False, CHUNK_SIZE)

        assert result.status is HierarchyStatus.ANCESTOR_MISSING
        assert result.ancestor == "/a/b"
        assert store.keys() == {"/a"}

    def test_missing_ancestors_are_created(self, store):
        assert ensure_ancestors(store, "/a/b/c", True, CHUNK_SIZE)

        assert store.keys() == {"/a", "/a/b"}
        created = store.get("/a/b")
        assert created.is_directory
        assert created.length == 0
        assert created.chunk_size == CHUNK_SIZE

    def test_relative_path_ancestors_are_rooted(self, store):
        assert ensure_ancestors(store, "a/b", True, CHUNK_SIZE)
        assert store.keys() == {"/a"}

    def test_file_ancestor_conflicts(self, store):
        store.put("/a", _record(FLAG_FILE))

        result = ensure_ancestors(store, "/a/b", True, CHUNK_SIZE)

        assert result.status is HierarchyStatus.ANCESTOR_IS_FILE
        assert result.ancestor == "/a"
        assert "is a file" in result.message
        assert store.keys() == {"/a"}

    def test_partial_creation_is_not_rolled_back(self, store):
        store.put("/a/b/c", _record(FLAG_FILE))

        result = ensure_ancestors(store, "/a/b/c/d", True, CHUNK_SIZE)

        assert result.status is HierarchyStatus.ANCESTOR_IS_FILE
        assert store.keys() == {"/a", "/a/b", "/a/b/c"}

    def test_flagless_ancestor_is_not_a_conflict(self, store):
        store.put("/a", _record(0))
        assert ensure_ancestors(store, "/a/b", False, CHUNK_SIZE)

    def test_store_failure_is_reported(self):
        store = Mock()
        store.get.side_effect = StoreError("connection lost")

        result = ensure_ancestors(store, "/a/b", True, CHUNK_SIZE)

        assert result.status is HierarchyStatus.STORE_FAILURE
        assert result.message == "connection lost"

    def test_rejected_write_is_reported(self):
        store = RejectingStore()

        result = ensure_ancestors(store, "/a/b/c", True, CHUNK_SIZE)

        assert result.status is HierarchyStatus.STORE_FAILURE
        assert result.ancestor == "/a"
        assert store.keys() == set()
