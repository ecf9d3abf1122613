"""Ancestor-chain validation for path creation."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from common.constants import PATH_SEPARATOR
from common.logging_config import get_logger
from common.paths import components
from common.types import Metadata
from controller.exceptions import StoreError
from controller.store import MetadataStore

logger = get_logger(__name__)


class HierarchyStatus(Enum):
    SUCCESS = "success"
    MALFORMED_PATH = "malformed_path"
    ALREADY_EXISTS = "already_exists"
    ANCESTOR_MISSING = "ancestor_missing"
    ANCESTOR_IS_FILE = "ancestor_is_file"
    STORE_FAILURE = "store_failure"


@dataclass(frozen=True)
class HierarchyResult:
    """
    Outcome of an ancestor check or create.

    ancestor names the prefix that caused an ANCESTOR_* failure.
    Truthy only on SUCCESS.
    """
    status: HierarchyStatus
    path: Optional[str]
    ancestor: Optional[str] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is HierarchyStatus.SUCCESS

    def __bool__(self) -> bool:
        return self.ok


def ensure_ancestors(
    store: MetadataStore,
    path: Optional[str],
    create_if_absent: bool,
    chunk_size: int,
) -> HierarchyResult:
    """
    Check that every ancestor of path exists and is a directory.

    Ancestors are built from the separator-rooted prefixes of path, e.g.
    "/a" and "/a/b" for "/a/b/c". Missing ancestors are written as directory
    records when create_if_absent is set. Directories created before a later
    failure are left in place.

    Args:
        store: Metadata store to read and write
        path: Canonical path about to be created
        create_if_absent: Create missing ancestors instead of failing
        chunk_size: Chunk size stamped on created directory records

    Returns:
        HierarchyResult describing success or the first failure
    """
    segments = components(path, 0)
    if segments is None:
        if path and PATH_SEPARATOR not in path:
            return HierarchyResult(HierarchyStatus.SUCCESS, path)
        return HierarchyResult(
            HierarchyStatus.MALFORMED_PATH, path, message=f"Malformed path: {path!r}"
        )
    if not segments:
        return HierarchyResult(
            HierarchyStatus.MALFORMED_PATH, path, message=f"Path has no segments: {path!r}"
        )
    if len(segments) == 1:
        return HierarchyResult(HierarchyStatus.SUCCESS, path)

    prefix = ""
    for segment in segments[:-1]:
        prefix = f"{prefix}{PATH_SEPARATOR}{segment}"
        try:
            existing = store.get(prefix)
            if existing is not None:
                if existing.is_file:
                    logger.warning(f"Cannot create {path}: ancestor {prefix} is a file")
                    return HierarchyResult(
                        HierarchyStatus.ANCESTOR_IS_FILE,
                        path,
                        ancestor=prefix,
                        message=f"Cannot create {path} as component {prefix} is a file",
                    )
                continue

            if not create_if_absent:
                return HierarchyResult(
                    HierarchyStatus.ANCESTOR_MISSING,
                    path,
                    ancestor=prefix,
                    message=f"Parent directory {prefix} does not exist",
                )

            if not store.put(prefix, Metadata.new_directory(chunk_size)):
                logger.error(f"Store rejected ancestor directory {prefix} of {path}")
                return HierarchyResult(
                    HierarchyStatus.STORE_FAILURE,
                    path,
                    ancestor=prefix,
                    message=f"Store rejected write of {prefix}",
                )
            logger.debug(f"Created missing ancestor directory {prefix}")
        except StoreError as e:
            logger.error(f"Store failure while checking ancestor {prefix} of {path}: {e}")
            return HierarchyResult(
                HierarchyStatus.STORE_FAILURE, path, ancestor=prefix, message=str(e)
            )

    return HierarchyResult(HierarchyStatus.SUCCESS, path)
