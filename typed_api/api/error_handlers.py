"""Error Handlers — global exception handlers for the Typed API.

Invariants:
    - ResourceNotFoundError → 404 with an empty body
    - TypedApiError → structured JSON with error code, message, severity
    - RequestValidationError → 400 with field-level details, the request path
      and, under a resource prefix, the resource name
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Four-layer handler: not-found, domain (TypedApiError), validation (Pydantic),
      catch-all (Exception)
    - Extracted from main.py to keep the app factory short
"""

import logging

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from typed_api.core.errors import (
    ErrorCategory, ErrorSeverity, ResourceNotFoundError, TypedApiError,
)

logger = logging.getLogger(__name__)

RESOURCE_PREFIXES = {
    "users": "User",
    "userTypes": "UserType",
    "companies": "Company",
    "permissions": "Permission",
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_not_found_handler(app)
    _register_typed_api_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_not_found_handler(app: FastAPI) -> None:
    """Register the empty-body 404 handler."""

    @app.exception_handler(ResourceNotFoundError)
    async def not_found_handler(request: Request, exc: ResourceNotFoundError):
        logger.info(
            exc.message,
            extra={
                "error_code": exc.code, "path": request.url.path,
                "resource": exc.resource_type, "resource_id": exc.resource_id,
            },
        )
        return Response(status_code=status.HTTP_404_NOT_FOUND)


def _register_typed_api_error_handler(app: FastAPI) -> None:
    """Register domain/configuration error handler."""

    @app.exception_handler(TypedApiError)
    async def typed_api_error_handler(request: Request, exc: TypedApiError):
        """Handle all Typed API errors not matched by a narrower handler."""
        logger.error(
            f"TypedApiError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        path = request.url.path
        resource = resource_for_path(path)
        logger.warning(
            f"Rejected {request.method} {path}: {len(exc.errors())} invalid field(s)",
            extra={"error_code": "VALIDATION_ERROR", "path": path, "resource": resource},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=build_validation_error_response(exc, path),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled {type(exc).__name__} on {request.method} {request.url.path}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": ErrorCategory.INTERNAL.value,
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def resource_for_path(path: str) -> str | None:
    """Map a request path to the resource its router serves, if any."""
    segment = path.strip("/").split("/", 1)[0]
    return RESOURCE_PREFIXES.get(segment)


def build_validation_error_response(exc: RequestValidationError, path: str) -> dict:
    """Build the 400 envelope: resource context plus one entry per bad field."""
    error = {
        "code": "VALIDATION_ERROR",
        "message": "Invalid request data",
        "category": ErrorCategory.VALIDATION.value,
        "severity": ErrorSeverity.ERROR.value,
        "path": path,
        "details": [
            {
                # loc[0] is the origin: body, path or query
                "field": ".".join(str(loc) for loc in e["loc"][1:]) or str(e["loc"][0]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ],
    }
    resource = resource_for_path(path)
    if resource is not None:
        error["resource"] = resource
    return {"error": error}
