"""Entry point for the Controller service."""

import uvicorn
import time
import uuid
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from common.logging_config import setup_logging
from controller.config import CONTROLLER_HOST, CONTROLLER_PORT, STORE_BACKEND
from controller.routes.path_routes import router as path_router
from controller.services.namespace_service import get_store
from controller.exceptions import (
    NamespaceException,
    MalformedPathError,
    PathAlreadyExistsError,
    PathNotFoundError,
    AncestorNotFoundError,
    AncestorIsFileError,
    StoreUnavailableError
)

logger = setup_logging('controller')


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Initialize the metadata store on application startup.
    """
    logger.info("Controller service starting up...")
    get_store()
    logger.info(f"Metadata store ready [backend={STORE_BACKEND}]")

    yield

    logger.info("Controller service shutting down")


app = FastAPI(
    title="GridFS Namespace Controller",
    description="Hierarchical file and directory namespace over a flat metadata store",
    version="1.0.0",
    lifespan=lifespan
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """
    Middleware to log all HTTP requests and responses.
    """
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    request.state.request_id = request_id

    start_time = time.time()

    logger.info(
        f"Request started: {request.method} {request.url.path} [request_id={request_id}]"
    )

    response = await call_next(request)

    duration = time.time() - start_time

    logger.info(
        f"Request completed: {request.method} {request.url.path} "
        f"status={response.status_code} duration={duration:.3f}s [request_id={request_id}]"
    )

    response.headers["X-Request-ID"] = request_id

    return response


def _error_response(request: Request, exc: Exception, status_code: int, code: str) -> JSONResponse:
    request_id = getattr(request.state, 'request_id', 'unknown')
    logger.warning(
        f"{type(exc).__name__}: {exc} [request_id={request_id}] path={request.url.path}"
    )
    return JSONResponse(
        status_code=status_code,
        content={"detail": str(exc), "code": code}
    )


@app.exception_handler(MalformedPathError)
async def malformed_path_handler(request: Request, exc: MalformedPathError):
    return _error_response(request, exc, status.HTTP_400_BAD_REQUEST, "MALFORMED_PATH")


@app.exception_handler(PathAlreadyExistsError)
async def path_already_exists_handler(request: Request, exc: PathAlreadyExistsError):
    return _error_response(request, exc, status.HTTP_409_CONFLICT, "PATH_ALREADY_EXISTS")


@app.exception_handler(PathNotFoundError)
async def path_not_found_handler(request: Request, exc: PathNotFoundError):
    return _error_response(request, exc, status.HTTP_404_NOT_FOUND, "PATH_NOT_FOUND")


@app.exception_handler(AncestorNotFoundError)
async def ancestor_not_found_handler(request: Request, exc: AncestorNotFoundError):
    return _error_response(request, exc, status.HTTP_404_NOT_FOUND, "ANCESTOR_NOT_FOUND")


@app.exception_handler(AncestorIsFileError)
async def ancestor_is_file_handler(request: Request, exc: AncestorIsFileError):
    return _error_response(request, exc, status.HTTP_409_CONFLICT, "ANCESTOR_IS_FILE")


@app.exception_handler(StoreUnavailableError)
async def store_unavailable_handler(request: Request, exc: StoreUnavailableError):
    request_id = getattr(request.state, 'request_id', 'unknown')
    logger.error(
        f"Store unavailable error: {exc} [request_id={request_id}] path={request.url.path}",
        exc_info=True
    )
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": str(exc), "code": "STORE_UNAVAILABLE"}
    )


@app.exception_handler(NamespaceException)
async def namespace_exception_handler(request: Request, exc: NamespaceException):
    request_id = getattr(request.state, 'request_id', 'unknown')
    logger.error(
        f"Namespace error: {exc} [request_id={request_id}] path={request.url.path}",
        exc_info=True
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc), "code": "INTERNAL_ERROR"}
    )


app.include_router(path_router)


@app.get("/")
async def root():
    """
    Root endpoint for health check.
    """
    return {"message": "GridFS Namespace Controller API", "status": "running"}


@app.get("/health")
async def health_check():
    """
    Health check endpoint for Docker healthcheck.
    Returns 200 if service is alive.
    """
    return {"status": "healthy", "service": "controller"}


def main() -> None:
    """
    Start the FastAPI server with uvicorn.
    """
    uvicorn.run(
        "controller.main:app",
        host=CONTROLLER_HOST,
        port=CONTROLLER_PORT
    )


if __name__ == "__main__":
    main()
