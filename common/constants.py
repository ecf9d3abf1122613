"""Project-wide constants (path separator, metadata layout, default chunk size)."""

PATH_SEPARATOR: str = "/"
ROOT_PATH: str = PATH_SEPARATOR

DEFAULT_CHUNK_SIZE: int = 4000  # bytes per chunk for newly created entries

# Metadata type flags
FLAG_FILE: int = 1 << 0
FLAG_DIR: int = 1 << 1

METADATA_RECORD_SIZE: int = 17
DEFAULT_BYTE_ORDER: str = "big"

# Store put modes: unconditional overwrite, never expires
NO_VERSION: int = -1
NO_EXPIRY: int = 0
