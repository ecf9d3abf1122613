"""Namespace API routes."""

from fastapi import APIRouter, Depends, Query, status

from common.paths import trim
from controller.schemas.common import ErrorResponse
from controller.schemas.paths import (
    CreateFileRequest,
    MakeDirectoryRequest,
    PathInfoResponse,
    ExistsResponse,
    ListChildrenResponse,
)
from controller.services.namespace_service import NamespaceService, PathInfo

router = APIRouter(
    tags=["Namespace"],
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    }
)


def get_namespace_service() -> NamespaceService:
    return NamespaceService()


def _to_response(info: PathInfo) -> PathInfoResponse:
    return PathInfoResponse(
        path=info.path,
        type=info.metadata.type_name,
        length=info.metadata.length,
        chunk_size=info.metadata.chunk_size,
        modification_time=info.metadata.modification_time,
        is_file=info.metadata.is_file,
        is_directory=info.metadata.is_directory,
    )


@router.post("/files", response_model=PathInfoResponse, status_code=status.HTTP_201_CREATED)
async def create_file(
    request: CreateFileRequest,
    service: NamespaceService = Depends(get_namespace_service)
):
    """
    Create an empty file.

    Parameters:
        - path: Path of the new file; every ancestor must already be a directory

    Returns:
        - Metadata of the created file

    Raises:
        - 400: Malformed path
        - 404: Parent directory missing
        - 409: Path already exists, or an ancestor is a file
        - 503: Metadata store unavailable
    """
    return _to_response(service.create_file(request.path))


@router.post("/directories", response_model=PathInfoResponse, status_code=status.HTTP_201_CREATED)
async def make_directory(
    request: MakeDirectoryRequest,
    service: NamespaceService = Depends(get_namespace_service)
):
    """
    Create a directory.

    Parameters:
        - path: Path of the new directory
        - parents: Create missing ancestor directories as well

    Returns:
        - Metadata of the created directory

    Raises:
        - 400: Malformed path
        - 404: Parent directory missing (parents=false)
        - 409: Path already exists, or an ancestor is a file
        - 503: Metadata store unavailable
    """
    return _to_response(service.make_directory(request.path, parents=request.parents))


@router.get("/paths", response_model=PathInfoResponse)
async def stat_path(
    path: str = Query(..., min_length=1),
    service: NamespaceService = Depends(get_namespace_service)
):
    """
    Get the metadata stored for a path.

    Raises:
        - 404: Path does not exist
    """
    return _to_response(service.stat(path))


@router.get("/paths/exists", response_model=ExistsResponse)
async def path_exists(
    path: str = Query(..., min_length=1),
    service: NamespaceService = Depends(get_namespace_service)
):
    """
    Check whether a path has a metadata record.
    """
    exists = service.exists(path)
    return ExistsResponse(path=trim(path), exists=exists)


@router.get("/directories/children", response_model=ListChildrenResponse)
async def list_children(
    path: str = Query(..., min_length=1),
    service: NamespaceService = Depends(get_namespace_service)
):
    """
    List the direct children of a directory.

    Returns:
        - children: Sorted paths exactly one segment below path

    Raises:
        - 404: Path does not exist
    """
    children = service.list_children(path)
    return ListChildrenResponse(path=trim(path), children=children)
