"""Service layer for business logic."""

from controller.services.namespace_service import NamespaceService

__all__ = [
    "NamespaceService",
]
