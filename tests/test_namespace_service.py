"""Tests for the namespace service."""

from unittest.mock import Mock

import pytest

from common.constants import FLAG_FILE
from common.types import Metadata
from controller import config
from controller.exceptions import (
    AncestorIsFileError,
    AncestorNotFoundError,
    MalformedPathError,
    PathAlreadyExistsError,
    PathNotFoundError,
    StoreError,
    StoreUnavailableError,
)
from controller.repositories.metadata_repository import SqliteMetadataStore
from controller.services import namespace_service
from controller.services.namespace_service import NamespaceService, create_store
from controller.store import InMemoryMetadataStore


@pytest.fixture
def service(store):
    return NamespaceService(store=store, chunk_size=1024)


def test_create_file_returns_info(service):
    service.make_directory("/docs")
    info = service.create_file("/docs/readme.txt")

    assert info.path == "/docs/readme.txt"
    assert info.metadata.is_file
    assert info.metadata.chunk_size == 1024


def test_create_file_twice(service):
    service.create_file("/a.txt")
    with pytest.raises(PathAlreadyExistsError):
        service.create_file("/a.txt")


def test_missing_parent(service):
    with pytest.raises(AncestorNotFoundError):
        service.make_directory("/a/b")


def test_make_directory_with_parents(service):
    info = service.make_directory("/a/b/c", parents=True)

    assert info.metadata.is_directory
    assert service.list_children("/a") == ["/a/b"]


def test_ancestor_is_file(service):
    service.create_file("/a")
    with pytest.raises(AncestorIsFileError):
        service.make_directory("/a/b", parents=True)


def test_malformed_path(service):
    with pytest.raises(MalformedPathError):
        service.create_file("   ")
    with pytest.raises(MalformedPathError):
        service.make_directory("/")


def test_stat_and_exists(service):
    service.make_directory("/d")

    assert service.exists("/d/")
    assert not service.exists("/e")
    assert service.stat("/d").metadata.is_directory
    with pytest.raises(PathNotFoundError):
        service.stat("/e")


def test_list_children_sorted(service):
    service.make_directory("/d")
    for name in ("c", "a", "b"):
        service.create_file(f"/d/{name}")

    assert service.list_children("/d") == ["/d/a", "/d/b", "/d/c"]


def test_list_missing_directory(service):
    with pytest.raises(PathNotFoundError):
        service.list_children("/nope")


def test_list_root(service):
    service.make_directory("/x")
    assert service.list_children("/") == ["/x"]


def test_list_file_has_no_children(service):
    service.create_file("/f")
    assert service.list_children("/f") == []


def test_store_failure_surfaces_as_unavailable():
    store = Mock()
    store.get.side_effect = StoreError("backend down")
    service = NamespaceService(store=store, chunk_size=1024)

    with pytest.raises(StoreUnavailableError):
        service.create_file("/a")
    with pytest.raises(StoreUnavailableError):
        service.exists("/a")


def test_create_store_backends(monkeypatch, tmp_path):
    monkeypatch.setattr(config, "STORE_BACKEND", "memory")
    assert isinstance(create_store(), InMemoryMetadataStore)

    monkeypatch.setattr(config, "STORE_BACKEND", "sqlite")
    monkeypatch.setattr(config, "DATABASE_PATH", str(tmp_path / "svc.db"))
    assert isinstance(create_store(), SqliteMetadataStore)

    monkeypatch.setattr(config, "STORE_BACKEND", "etcd")
    with pytest.raises(ValueError):
        create_store()


def test_default_store_is_shared(monkeypatch):
    monkeypatch.setattr(config, "STORE_BACKEND", "memory")
    namespace_service.set_store(None)
    try:
        first = NamespaceService()
        second = NamespaceService()
        assert first.store is second.store
    finally:
        namespace_service.set_store(None)


def test_preexisting_file_record_blocks_directory(service, store):
    store.put("/f", Metadata(length=1, modification_time=0, chunk_size=1, flags=FLAG_FILE))
    with pytest.raises(PathAlreadyExistsError):
        service.make_directory("/f")
