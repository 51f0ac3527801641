"""Error Hierarchy: typed exceptions for every failure the API reports.

Invariants:
    - Every error carries an ErrorKind and the HTTP status it maps to
    - to_response() produces {"status", "error", "data"?}; "data" omitted when empty
    - 500-level errors never carry internal detail in their response body
    - Store contract errors (AlbumNotFoundError, AlbumAlreadyExistsError) are
      subclasses of the HTTP-facing kinds, so the global handler renders them directly

Design Decisions:
    - Single hierarchy with AlbumApiError base: one FastAPI handler catches all
    - headers travel with the error (405 needs Allow)
"""

from typing import Any

from album_api.core.domain_types import ErrorKind, ValidationIssue


class AlbumApiError(Exception):
    """Base exception for all album API errors."""

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        http_status: int,
        data: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.http_status = http_status
        self.data = data or {}
        self.headers = headers or {}

    def to_response(self) -> dict:
        """Convert to the error envelope."""
        response: dict[str, Any] = {
            "status": self.http_status,
            "error": self.kind.value,
        }
        if self.data:
            response["data"] = self.data
        return response


# ─── Caller Errors (400-level) ──────────────────────────────────

class AlbumValidationError(AlbumApiError):
    """Create payload failed one or more field checks."""
    def __init__(self, issues: dict[str, ValidationIssue]):
        super().__init__(
            f"Invalid album fields: {', '.join(sorted(issues))}",
            ErrorKind.VALIDATION, 400,
            data={field: issue.to_dict() for field, issue in issues.items()},
        )
        self.issues = issues


class MalformedJSONError(AlbumApiError):
    """Request body could not be parsed as an album object."""
    def __init__(self, detail: str):
        super().__init__(
            f"Malformed JSON body: {detail}",
            ErrorKind.MALFORMED_JSON, 400,
            data={"message": detail},
        )
        self.detail = detail


class NotFoundError(AlbumApiError):
    """Requested resource does not exist."""
    def __init__(self, message: str):
        super().__init__(message, ErrorKind.NOT_FOUND, 404)


class RouteNotFoundError(NotFoundError):
    """No route pattern matches the request path."""
    def __init__(self, path: str):
        super().__init__(f"No route for path '{path}'")
        self.path = path


class AlbumNotFoundError(NotFoundError):
    """No album is stored under the given id."""
    def __init__(self, album_id: str):
        super().__init__(f"Album '{album_id}' not found")
        self.album_id = album_id


class MethodNotAllowedError(AlbumApiError):
    """Path is known but the method is not supported on it."""
    def __init__(self, method: str, allowed: tuple[str, ...]):
        super().__init__(
            f"Method {method} not allowed, expected one of {', '.join(allowed)}",
            ErrorKind.METHOD_NOT_ALLOWED, 405,
            headers={"Allow": ", ".join(allowed)},
        )
        self.method = method
        self.allowed = allowed


class AlreadyExistsError(AlbumApiError):
    """Resource with the same identity already exists."""
    def __init__(self, message: str):
        super().__init__(message, ErrorKind.ALREADY_EXISTS, 409)


class AlbumAlreadyExistsError(AlreadyExistsError):
    """An album with the given id is already stored."""
    def __init__(self, album_id: str):
        super().__init__(f"Album '{album_id}' already exists")
        self.album_id = album_id


# ─── Internal Errors (500-level) ────────────────────────────────

class DatabaseError(AlbumApiError):
    """Store reported an unexpected failure."""
    def __init__(self, operation: str, album_id: str | None = None):
        target = f" for album '{album_id}'" if album_id else ""
        super().__init__(
            f"Store {operation} failed{target}",
            ErrorKind.DATABASE, 500,
        )
        self.operation = operation
        self.album_id = album_id


class InternalError(AlbumApiError):
    """Serialization, body-read or other unexpected failure."""
    def __init__(self, message: str = "An unexpected error occurred"):
        super().__init__(message, ErrorKind.INTERNAL, 500)
