"""Pydantic schemas for API requests and responses."""

from controller.schemas.paths import (
    CreateFileRequest,
    MakeDirectoryRequest,
    PathInfoResponse,
    ExistsResponse,
    ListChildrenResponse
)
from controller.schemas.common import ErrorResponse

__all__ = [
    "CreateFileRequest",
    "MakeDirectoryRequest",
    "PathInfoResponse",
    "ExistsResponse",
    "ListChildrenResponse",
    "ErrorResponse"
]
