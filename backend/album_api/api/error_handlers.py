"""Error Handlers: global exception handlers mapping failures to the error envelope.

Invariants:
    - AlbumApiError → its own status, envelope and headers (Allow on 405)
    - RequestValidationError (body not JSON or wrong shape) → 400 malformed-json
      with data.message describing the parse failure
    - Framework 404/405 → reclassified through core/route_table.resolve, so the
      Allow header lists every method of the matching pattern
    - Exception (catch-all) → 500 internal, never leaks internal details

Design Decisions:
    - Four-layer handler: domain, body shape, routing, catch-all
    - 500-level errors logged with traceback; caller errors logged at WARNING
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from album_api.api.responses import PrettyJSONResponse
from album_api.core.errors import (
    AlbumApiError, InternalError, MalformedJSONError, RouteNotFoundError,
)
from album_api.core.route_table import resolve

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_album_error_handler(app)
    _register_request_validation_handler(app)
    _register_routing_error_handler(app)
    _register_generic_error_handler(app)


def error_response(exc: AlbumApiError) -> PrettyJSONResponse:
    return PrettyJSONResponse(
        status_code=exc.http_status,
        content=exc.to_response(),
        headers=exc.headers or None,
    )


def _register_album_error_handler(app: FastAPI) -> None:
    """Register domain error handler."""

    @app.exception_handler(AlbumApiError)
    async def album_error_handler(request: Request, exc: AlbumApiError):
        level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
        logger.log(
            level, f"AlbumApiError: {exc.message}",
            extra={"error_kind": exc.kind.value, "path": request.url.path},
        )
        return error_response(exc)


def _register_request_validation_handler(app: FastAPI) -> None:
    """Register body parse/shape error handler."""

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError,
    ):
        error = MalformedJSONError(describe_request_errors(exc.errors()))
        logger.warning(
            f"Malformed body on {request.url.path}: {error.detail}",
            extra={"error_kind": error.kind.value, "path": request.url.path},
        )
        return error_response(error)


def _register_routing_error_handler(app: FastAPI) -> None:
    """Register handler for 404/405 raised by the framework router."""

    @app.exception_handler(StarletteHTTPException)
    async def routing_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        if exc.status_code not in (404, 405):
            logger.error(
                f"Unexpected HTTP {exc.status_code} on {request.url.path}: {exc.detail}",
            )
            return error_response(InternalError())
        try:
            resolve(request.method, request.url.path)
        except AlbumApiError as routing_error:
            error = routing_error
        else:
            # Route table matched but the framework did not: treat as unknown.
            error = RouteNotFoundError(request.url.path)
        logger.info(
            f"{error.kind.value}: {request.method} {request.url.path}",
            extra={"error_kind": error.kind.value, "path": request.url.path},
        )
        return error_response(error)


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return error_response(InternalError())


def describe_request_errors(errors: list[dict[str, Any]]) -> str:
    """Flatten FastAPI or pydantic body errors into one human-readable message."""
    parts = []
    for e in errors:
        loc = [str(p) for p in e.get("loc", ()) if p != "body"]
        msg = e.get("msg", "Invalid request body")
        ctx_error = (e.get("ctx") or {}).get("error")
        if e.get("type") == "json_invalid":
            # FastAPI: generic msg + decoder text in ctx; pydantic: decoder text in msg
            if ctx_error and str(ctx_error) not in msg:
                msg = f"{msg}: {ctx_error}"
            position = f" at position {loc[0]}" if loc else ""
            parts.append(f"{msg}{position}")
        elif e.get("type") == "missing" and not loc:
            parts.append("Request body is empty")
        elif loc:
            parts.append(f"{'.'.join(loc)}: {msg}")
        else:
            parts.append(msg)
    return "; ".join(parts)
