"""Shared data type definitions (Metadata record and its binary layout)."""

import struct
from dataclasses import dataclass

from common.constants import DEFAULT_BYTE_ORDER, FLAG_DIR, FLAG_FILE, METADATA_RECORD_SIZE
from common.utils import current_time_millis, format_file_size, format_millis

_BYTE_ORDER_PREFIX = {"big": ">", "little": "<"}


def record_struct(byte_order: str = DEFAULT_BYTE_ORDER) -> struct.Struct:
    """
    Build the struct describing a Metadata record.

    Layout: int32 length, int64 modification_time, int32 chunk_size, uint8 flags.

    Args:
        byte_order: "big" or "little"

    Returns:
        struct.Struct for the record layout

    Raises:
        ValueError: If byte_order is not recognised
    """
    try:
        prefix = _BYTE_ORDER_PREFIX[byte_order]
    except KeyError:
        raise ValueError(f"Unsupported byte order: {byte_order!r}")
    return struct.Struct(f"{prefix}iqiB")


@dataclass(frozen=True)
class Metadata:
    """
    Metadata stored for every file and directory key.

    length and chunk_size are only meaningful for files. Nothing prevents
    both type flags (or neither) from being set; such records are kept as-is.
    """
    length: int
    modification_time: int
    chunk_size: int
    flags: int

    @classmethod
    def new_file(cls, chunk_size: int) -> 'Metadata':
        """Empty file record stamped with the current time."""
        return cls(length=0, modification_time=current_time_millis(), chunk_size=chunk_size, flags=FLAG_FILE)

    @classmethod
    def new_directory(cls, chunk_size: int) -> 'Metadata':
        """Directory record stamped with the current time."""
        return cls(length=0, modification_time=current_time_millis(), chunk_size=chunk_size, flags=FLAG_DIR)

    @property
    def is_file(self) -> bool:
        return bool(self.flags & FLAG_FILE)

    @property
    def is_directory(self) -> bool:
        return bool(self.flags & FLAG_DIR)

    @property
    def type_name(self) -> str:
        if self.is_file:
            return "file"
        if self.is_directory:
            return "dir"
        return "n/a"

    def to_bytes(self, byte_order: str = DEFAULT_BYTE_ORDER) -> bytes:
        """
        Serialize to the fixed 17-byte record.

        Raises:
            ValueError: If a field does not fit its encoded width
        """
        try:
            return record_struct(byte_order).pack(
                self.length, self.modification_time, self.chunk_size, self.flags
            )
        except struct.error as e:
            raise ValueError(f"Cannot encode metadata {self!r}: {e}")

    @classmethod
    def from_bytes(cls, data: bytes, byte_order: str = DEFAULT_BYTE_ORDER) -> 'Metadata':
        """
        Deserialize a 17-byte record.

        Raises:
            ValueError: If data is not exactly one record long
        """
        if len(data) != METADATA_RECORD_SIZE:
            raise ValueError(
                f"Metadata record must be {METADATA_RECORD_SIZE} bytes, got {len(data)}"
            )
        length, modification_time, chunk_size, flags = record_struct(byte_order).unpack(data)
        return cls(length=length, modification_time=modification_time, chunk_size=chunk_size, flags=flags)

    def __str__(self) -> str:
        parts = [self.type_name]
        if self.is_file:
            parts.append(f"len={format_file_size(self.length)}")
            parts.append(f"chunk_size={self.chunk_size}")
        parts.append(f"mod_time={format_millis(self.modification_time)}")
        return ", ".join(parts)
