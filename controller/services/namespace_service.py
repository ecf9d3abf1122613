"""Namespace service for business logic."""

from dataclasses import dataclass
from typing import List, Optional

from common.constants import ROOT_PATH
from common.logging_config import get_logger
from common.paths import trim
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
from controller.grid_file import EntryKind, GridFile
from controller.hierarchy import HierarchyResult, HierarchyStatus
from controller.store import InMemoryMetadataStore, MetadataStore

logger = get_logger(__name__)

_ERRORS_BY_STATUS = {
    HierarchyStatus.MALFORMED_PATH: MalformedPathError,
    HierarchyStatus.ALREADY_EXISTS: PathAlreadyExistsError,
    HierarchyStatus.ANCESTOR_MISSING: AncestorNotFoundError,
    HierarchyStatus.ANCESTOR_IS_FILE: AncestorIsFileError,
    HierarchyStatus.STORE_FAILURE: StoreUnavailableError,
}

_store: Optional[MetadataStore] = None


def create_store() -> MetadataStore:
    """
    Build the store selected by DFS_STORE_BACKEND.

    Raises:
        ValueError: If the backend name is unknown
    """
    if config.STORE_BACKEND == "memory":
        return InMemoryMetadataStore()
    if config.STORE_BACKEND == "sqlite":
        from controller.repositories.metadata_repository import SqliteMetadataStore
        return SqliteMetadataStore(config.DATABASE_PATH, byte_order=config.METADATA_BYTE_ORDER)
    raise ValueError(f"Unknown store backend: {config.STORE_BACKEND}")


def get_store() -> MetadataStore:
    """
    Get or create the process-wide metadata store.
    """
    global _store
    if _store is None:
        _store = create_store()
        logger.info(f"Initialized {type(_store).__name__} [backend={config.STORE_BACKEND}]")
    return _store


def set_store(store: Optional[MetadataStore]) -> None:
    global _store
    _store = store


@dataclass(frozen=True)
class PathInfo:
    path: str
    metadata: Metadata


class NamespaceService:
    def __init__(self, store: Optional[MetadataStore] = None, chunk_size: Optional[int] = None):
        self.store = store if store is not None else get_store()
        self.chunk_size = chunk_size if chunk_size is not None else config.CHUNK_SIZE

    def _grid_file(self, path: str) -> GridFile:
        canonical = trim(path)
        if not canonical:
            raise MalformedPathError(f"Malformed path: {path!r}")
        return GridFile(canonical, self.store, self.chunk_size)

    def _raise_for(self, result: HierarchyResult) -> None:
        error_cls = _ERRORS_BY_STATUS.get(result.status)
        if error_cls is not None:
            raise error_cls(result.message or result.status.value)

    def _create(self, path: str, kind: EntryKind, parents: bool) -> PathInfo:
        grid_file = self._grid_file(path)
        result = grid_file.create(kind, parents=parents)
        self._raise_for(result)
        return self.stat(grid_file.path)

    def create_file(self, path: str) -> PathInfo:
        return self._create(path, EntryKind.FILE, parents=False)

    def make_directory(self, path: str, parents: bool = False) -> PathInfo:
        return self._create(path, EntryKind.DIRECTORY, parents=parents)

    def exists(self, path: str) -> bool:
        grid_file = self._grid_file(path)
        try:
            return grid_file.exists()
        except StoreError as e:
            raise StoreUnavailableError(str(e)) from e

    def stat(self, path: str) -> PathInfo:
        grid_file = self._grid_file(path)
        try:
            metadata = grid_file.metadata()
        except StoreError as e:
            raise StoreUnavailableError(str(e)) from e
        if metadata is None:
            raise PathNotFoundError(f"{grid_file.path} does not exist")
        return PathInfo(path=grid_file.path, metadata=metadata)

    def list_children(self, path: str) -> List[str]:
        """
        Sorted direct children of path. The root is always listable.

        Raises:
            PathNotFoundError: If path has no record
        """
        grid_file = self._grid_file(path)
        try:
            if grid_file.path != ROOT_PATH and not grid_file.exists():
                raise PathNotFoundError(f"{grid_file.path} does not exist")
            children = grid_file.list()
        except StoreError as e:
            raise StoreUnavailableError(str(e)) from e
        logger.debug(f"Listed {len(children)} children of {grid_file.path}")
        return sorted(children)
