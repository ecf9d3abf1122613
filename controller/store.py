"""Metadata store contract and the in-memory implementation."""

import threading
from typing import Dict, Optional, Protocol, Set

from common.constants import NO_EXPIRY, NO_VERSION
from common.logging_config import get_logger
from common.types import Metadata
from controller.exceptions import StoreError

logger = get_logger(__name__)


class MetadataStore(Protocol):
    """
    Flat key-value store mapping canonical paths to Metadata records.

    Implementations raise StoreError on backend failures.
    """

    def get(self, key: str) -> Optional[Metadata]:
        """Point lookup. Returns None if the key is absent."""
        ...

    def put(
        self,
        key: str,
        value: Metadata,
        version: int = NO_VERSION,
        ttl: int = NO_EXPIRY,
    ) -> bool:
        """
        Upsert a record.

        version=NO_VERSION means no version check, ttl=NO_EXPIRY means the
        record never expires. Returns False if a version check rejected the write.
        """
        ...

    def keys(self) -> Set[str]:
        """Snapshot of every key currently stored."""
        ...


class InMemoryMetadataStore:
    """
    Dictionary-backed store for tests and single-process deployments.
    Only unconditional, non-expiring writes are supported.
    """

    def __init__(self, records: Optional[Dict[str, Metadata]] = None):
        self._records: Dict[str, Metadata] = dict(records or {})
        self._lock = threading.RLock()

    def get(self, key: str) -> Optional[Metadata]:
        with self._lock:
            return self._records.get(key)

    def put(
        self,
        key: str,
        value: Metadata,
        version: int = NO_VERSION,
        ttl: int = NO_EXPIRY,
    ) -> bool:
        if version != NO_VERSION or ttl != NO_EXPIRY:
            raise StoreError(
                f"In-memory store only supports unconditional writes (version={version}, ttl={ttl})"
            )
        with self._lock:
            self._records[key] = value
        logger.debug(f"Stored {key}: {value}")
        return True

    def keys(self) -> Set[str]:
        with self._lock:
            return set(self._records.keys())

    def count(self) -> int:
        with self._lock:
            return len(self._records)
