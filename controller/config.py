"""Configuration settings for the Controller server."""

import os
from common.constants import DEFAULT_BYTE_ORDER, DEFAULT_CHUNK_SIZE


DATABASE_PATH = os.environ.get("DFS_DATABASE_PATH", "/app/data/metadata.db")

CONTROLLER_HOST = os.environ.get("DFS_CONTROLLER_HOST", "0.0.0.0")

CONTROLLER_PORT = int(os.environ.get("DFS_CONTROLLER_PORT", "8000"))

# "sqlite" or "memory"
STORE_BACKEND = os.environ.get("DFS_STORE_BACKEND", "sqlite")

CHUNK_SIZE = int(os.environ.get("DFS_CHUNK_SIZE", str(DEFAULT_CHUNK_SIZE)))

METADATA_BYTE_ORDER = os.environ.get("DFS_METADATA_BYTE_ORDER", DEFAULT_BYTE_ORDER)
