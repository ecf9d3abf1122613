"""Pydantic schemas for namespace endpoints."""

from typing import List
from pydantic import BaseModel, Field


class CreateFileRequest(BaseModel):
    """Request model for file creation."""
    path: str = Field(..., min_length=1)


class MakeDirectoryRequest(BaseModel):
    """Request model for directory creation."""
    path: str = Field(..., min_length=1)
    parents: bool = False


class PathInfoResponse(BaseModel):
    """Response model for a single path's metadata."""
    path: str
    type: str
    length: int
    chunk_size: int
    modification_time: int
    is_file: bool
    is_directory: bool


class ExistsResponse(BaseModel):
    """Response model for existence checks."""
    path: str
    exists: bool


class ListChildrenResponse(BaseModel):
    """Response model for directory listing."""
    path: str
    children: List[str]
