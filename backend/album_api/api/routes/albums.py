"""Album Routes: list, fetch and create albums against the injected AlbumStore.

Invariants:
    - Routes registered from ROUTE_TABLE in table order; every operation has one endpoint
    - Create body read raw and parsed as JSON regardless of Content-Type
    - Create payload validated (all issues collected) before the store is called
    - Store contract errors propagate as-is; any other store exception becomes DatabaseError
    - price omitted from album responses when zero (response_model_exclude_defaults)

Design Decisions:
    - Plain def endpoints: FastAPI runs them in its threadpool, one worker per request,
      and the store's lock is a blocking call
    - Store reached through app.state via get_store: no module-level store
"""

import logging
from contextlib import contextmanager

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError

from album_api.api.error_handlers import describe_request_errors
from album_api.core.domain_types import Operation
from album_api.core.errors import (
    AlbumApiError, AlbumValidationError, DatabaseError, InternalError,
    MalformedJSONError,
)
from album_api.core.repository_protocols import AlbumStore
from album_api.core.route_table import ROUTE_TABLE
from album_api.core.validate_album import validate_album
from album_api.schemas.album import AlbumCreate, AlbumResponse

logger = logging.getLogger(__name__)


def get_store(request: Request) -> AlbumStore:
    """Dependency: the store owned by the running app."""
    return request.app.state.store


@contextmanager
def store_call(operation: Operation, album_id: str | None = None):
    """Map unexpected store failures to DatabaseError."""
    try:
        yield
    except AlbumApiError:
        raise
    except Exception as e:
        logger.error(
            f"Store {operation.value} failed: {e}",
            exc_info=True, extra={"album_id": album_id},
        )
        raise DatabaseError(operation.value, album_id) from e


def list_albums(store: AlbumStore = Depends(get_store)) -> list[AlbumResponse]:
    """All albums, sorted by id."""
    with store_call(Operation.LIST_ALBUMS):
        albums = store.list_albums()
    return [AlbumResponse.from_album(album) for album in albums]


async def read_album_create(request: Request) -> AlbumCreate:
    """Dependency: parse the create body as JSON whatever its Content-Type."""
    try:
        raw = await request.body()
    except Exception as e:
        logger.error(f"Failed to read request body: {e}", exc_info=True)
        raise InternalError("Failed to read request body") from e
    try:
        return AlbumCreate.from_body(raw)
    except ValidationError as e:
        raise MalformedJSONError(describe_request_errors(e.errors())) from e


def add_album(
    body: AlbumCreate = Depends(read_album_create),
    store: AlbumStore = Depends(get_store),
) -> AlbumResponse:
    """Create an album; 400 on field issues, 409 on duplicate id."""
    album = body.to_album()
    issues = validate_album(album)
    if issues:
        raise AlbumValidationError(issues)
    with store_call(Operation.ADD_ALBUM, album.id):
        stored = store.add_album(album)
    return AlbumResponse.from_album(stored)


def get_album(
    album_id: str, store: AlbumStore = Depends(get_store),
) -> AlbumResponse:
    """Single album by id; 404 if unknown."""
    with store_call(Operation.GET_ALBUM, album_id):
        album = store.get_album(album_id)
    return AlbumResponse.from_album(album)


ENDPOINTS = {
    Operation.LIST_ALBUMS: list_albums,
    Operation.ADD_ALBUM: add_album,
    Operation.GET_ALBUM: get_album,
}


def build_router() -> APIRouter:
    """APIRouter with one endpoint per ROUTE_TABLE row, in table order."""
    router = APIRouter(tags=["albums"])
    for route in ROUTE_TABLE:
        router.add_api_route(
            route.pattern.template,
            ENDPOINTS[route.operation],
            methods=[route.method],
            status_code=route.status_code,
            response_model_exclude_defaults=True,
            name=route.operation.value,
        )
    return router
