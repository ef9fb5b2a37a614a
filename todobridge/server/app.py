"""FastAPI application exposing the todo service over RPC-style JSON methods."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from todobridge.core.constants import PACKAGE_VERSION
from todobridge.exceptions import (
    DeadlineExceededError,
    DecodeError,
    NotImplementedOperationError,
    RemoteRejectedError,
    RemoteStatusError,
    TodoBridgeError,
    TodoNotFoundError,
    TransportError,
    ValidationError,
)
from todobridge.server.routes import router as todos_router

logger = logging.getLogger(__name__)

# Most specific classes first
ERROR_STATUS: list[tuple[type[TodoBridgeError], str, int]] = [
    (ValidationError, "ValidationError", 400),
    (TodoNotFoundError, "NotFound", 404),
    (NotImplementedOperationError, "NotImplemented", 501),
    (RemoteRejectedError, "RemoteRejected", 502),
    (DecodeError, "DecodeError", 502),
    (RemoteStatusError, "RemoteStatusError", 502),
    (DeadlineExceededError, "DeadlineExceeded", 504),
    (TransportError, "TransportError", 503),
]


def error_kind(exc: TodoBridgeError) -> tuple[str, int]:
    """Map a bridge error to its envelope kind and HTTP status."""
    for error_class, kind, status_code in ERROR_STATUS:
        if isinstance(exc, error_class):
            return kind, status_code
    return "InternalError", 500


def create_app() -> FastAPI:
    """Create the RPC application."""
    app = FastAPI(
        title="Todo Bridge",
        description="Todo service that forwards every mutation to the task API and mirrors confirmed results.",
        version=PACKAGE_VERSION,
        openapi_tags=[
            {"name": "health", "description": "Service health and status endpoints."},
            {"name": "todos", "description": "TodoService RPC methods."},
        ],
    )

    @app.exception_handler(TodoBridgeError)
    async def bridge_exception_handler(request: Request, exc: TodoBridgeError) -> JSONResponse:
        """
        Return a consistent JSON envelope for bridge errors.

        Response format:
            {
                "error": "<kind>",
                "message": "<error message>",
                "detail": "<raw task API response, if any>"
            }
        """
        kind, status_code = error_kind(exc)
        if status_code >= 500:
            logger.warning(f"{request.url.path} failed with {kind}: {exc}")
        return JSONResponse(
            status_code=status_code,
            content={
                "error": kind,
                "message": str(exc),
                "detail": getattr(exc, "response_text", None),
            },
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "ValidationError",
                "message": "Request validation failed",
                "detail": jsonable_errors(exc),
            },
        )

    # PUBLIC_INTERFACE
    @app.get("/", summary="Health Check", tags=["health"])
    def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"message": "Healthy"}

    app.include_router(todos_router)
    return app


def jsonable_errors(exc: RequestValidationError) -> list[dict[str, object]]:
    """Strip non-serializable context from request validation errors."""
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]


app = create_app()
