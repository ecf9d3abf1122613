"""Repository layer for data access."""

from controller.repositories.metadata_repository import SqliteMetadataStore

__all__ = [
    "SqliteMetadataStore",
]
