"""SQLite-backed metadata store."""

import sqlite3
from datetime import datetime, timezone
from typing import Optional, Set

from common.constants import DEFAULT_BYTE_ORDER, NO_EXPIRY, NO_VERSION
from common.logging_config import get_logger
from common.types import Metadata
from controller.database import get_db_connection, init_database
from controller.exceptions import StoreError

logger = get_logger(__name__)


class SqliteMetadataStore:
    """
    Persists Metadata records as 17-byte blobs keyed by path.

    Only unconditional, non-expiring writes are supported. A row that cannot
    be decoded is reported as a StoreError rather than as a missing entry.
    """

    def __init__(self, db_path: Optional[str] = None, byte_order: str = DEFAULT_BYTE_ORDER):
        self.db_path = db_path
        self.byte_order = byte_order
        try:
            init_database(db_path)
        except sqlite3.Error as e:
            raise StoreError(f"Failed to initialize metadata database: {e}") from e

    def get(self, key: str) -> Optional[Metadata]:
        try:
            with get_db_connection(self.db_path) as conn:
                cursor = conn.cursor()
                cursor.execute("SELECT record FROM metadata WHERE path = ?", (key,))
                row = cursor.fetchone()
        except sqlite3.Error as e:
            logger.error(f"Failed to read metadata for {key}: {e}")
            raise StoreError(f"Failed to read metadata for {key}: {e}") from e

        if row is None:
            return None
        try:
            return Metadata.from_bytes(bytes(row["record"]), self.byte_order)
        except ValueError as e:
            logger.error(f"Corrupt metadata record for {key}: {e}")
            raise StoreError(f"Corrupt metadata record for {key}: {e}") from e

    def put(
        self,
        key: str,
        value: Metadata,
        version: int = NO_VERSION,
        ttl: int = NO_EXPIRY,
    ) -> bool:
        """
        Upsert a record.

        Args:
            key: Canonical path
            value: Metadata to store
            version: Must be NO_VERSION
            ttl: Must be NO_EXPIRY

        Returns:
            True once the record is committed

        Raises:
            StoreError: On a conditional or expiring write, an unencodable
                record, or a database failure
        """
        if version != NO_VERSION or ttl != NO_EXPIRY:
            raise StoreError(
                f"SQLite store only supports unconditional writes (version={version}, ttl={ttl})"
            )
        try:
            record = value.to_bytes(self.byte_order)
        except ValueError as e:
            logger.error(f"Cannot encode metadata for {key}: {e}")
            raise StoreError(f"Cannot encode metadata for {key}: {e}") from e
        updated_at = datetime.now(timezone.utc).isoformat()

        try:
            with get_db_connection(self.db_path) as conn:
                cursor = conn.cursor()
                cursor.execute(
                    """
                    INSERT INTO metadata (path, record, updated_at)
                    VALUES (?, ?, ?)
                    ON CONFLICT(path) DO UPDATE SET
                        record = excluded.record,
                        updated_at = excluded.updated_at
                    """,
                    (key, record, updated_at)
                )
                conn.commit()
        except sqlite3.Error as e:
            logger.error(f"Failed to write metadata for {key}: {e}")
            raise StoreError(f"Failed to write metadata for {key}: {e}") from e

        logger.debug(f"Stored {key}: {value}")
        return True

    def keys(self) -> Set[str]:
        try:
            with get_db_connection(self.db_path) as conn:
                cursor = conn.cursor()
                cursor.execute("SELECT path FROM metadata")
                return {row["path"] for row in cursor.fetchall()}
        except sqlite3.Error as e:
            logger.error(f"Failed to enumerate metadata keys: {e}")
            raise StoreError(f"Failed to enumerate metadata keys: {e}") from e
