"""Path-addressed file handle over a flat metadata store."""

from enum import Enum
from typing import List, Optional

from common.constants import DEFAULT_CHUNK_SIZE
from common.logging_config import get_logger
from common.paths import is_direct_child_of, join, name_of, parent_of, trim
from common.types import Metadata
from controller.exceptions import StoreError
from controller.hierarchy import HierarchyResult, HierarchyStatus, ensure_ancestors
from controller.store import MetadataStore

logger = get_logger(__name__)


class EntryKind(Enum):
    FILE = "file"
    DIRECTORY = "directory"


class GridFile:
    """
    A file or directory in the grid namespace, identified by its path.

    The handle holds no state besides the path; every query goes to the
    store. Concurrent creates of overlapping paths are not coordinated: a
    directory ancestor and a file at the same path can race, and the last
    write wins.
    """

    def __init__(self, path: str, store: MetadataStore, chunk_size: int = DEFAULT_CHUNK_SIZE):
        self.path = trim(path)
        self.store = store
        self.chunk_size = chunk_size

    @classmethod
    def child_of(
        cls,
        parent: str,
        child: str,
        store: MetadataStore,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> 'GridFile':
        return cls(join(parent, child), store, chunk_size)

    @property
    def name(self) -> str:
        return name_of(self.path)

    @property
    def parent(self) -> Optional[str]:
        return parent_of(self.path)

    def metadata(self) -> Optional[Metadata]:
        return self.store.get(self.path)

    def exists(self) -> bool:
        return self.metadata() is not None

    def is_file(self) -> bool:
        metadata = self.metadata()
        return metadata is not None and metadata.is_file

    def is_directory(self) -> bool:
        metadata = self.metadata()
        return metadata is not None and metadata.is_directory

    def length(self) -> int:
        metadata = self.metadata()
        return metadata.length if metadata is not None else 0

    def last_modified(self) -> int:
        """Modification time in epoch milliseconds, 0 if the path does not exist."""
        metadata = self.metadata()
        return metadata.modification_time if metadata is not None else 0

    def create(self, kind: EntryKind, parents: bool = False) -> HierarchyResult:
        """
        Create a file or directory record at this path.

        Args:
            kind: Whether to write a file or a directory record
            parents: Create missing ancestor directories

        Returns:
            HierarchyResult; ALREADY_EXISTS if a record is present
        """
        try:
            if self.exists():
                return HierarchyResult(
                    HierarchyStatus.ALREADY_EXISTS,
                    self.path,
                    message=f"{self.path} already exists",
                )
        except StoreError as e:
            return HierarchyResult(HierarchyStatus.STORE_FAILURE, self.path, message=str(e))

        result = ensure_ancestors(self.store, self.path, parents, self.chunk_size)
        if not result:
            logger.info(f"Cannot create {kind.value} {self.path}: {result.status.value}")
            return result

        if kind is EntryKind.FILE:
            metadata = Metadata.new_file(self.chunk_size)
        else:
            metadata = Metadata.new_directory(self.chunk_size)

        try:
            written = self.store.put(self.path, metadata)
        except StoreError as e:
            logger.error(f"Failed to store {kind.value} {self.path}: {e}")
            return HierarchyResult(HierarchyStatus.STORE_FAILURE, self.path, message=str(e))

        if not written:
            logger.error(f"Store rejected {kind.value} {self.path}")
            return HierarchyResult(
                HierarchyStatus.STORE_FAILURE, self.path, message=f"Store rejected write of {self.path}"
            )

        logger.info(f"Created {kind.value} {self.path}")
        return result

    def create_file(self) -> bool:
        return self.create(EntryKind.FILE).ok

    def mkdir(self) -> bool:
        return self.create(EntryKind.DIRECTORY).ok

    def mkdirs(self) -> bool:
        return self.create(EntryKind.DIRECTORY, parents=True).ok

    def list(self) -> List[str]:
        """
        Paths of the direct children of this path.

        Scans every key in the store; the order is unspecified.
        """
        return [key for key in self.store.keys() if is_direct_child_of(self.path, key)]

    def list_files(self) -> List['GridFile']:
        return [GridFile(key, self.store, self.chunk_size) for key in self.list()]

    def __repr__(self) -> str:
        return f"GridFile({self.path!r})"
