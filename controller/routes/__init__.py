"""API routes package."""

from controller.routes.path_routes import router as path_router

__all__ = ["path_router"]
