"""Album Catalog API: FastAPI application factory and process entry point.

Invariants:
    - Routes registered explicitly from the route table (no auto-discovery)
    - Global error handlers map every failure to the {"status", "error", "data"?} envelope
    - The store is created by main() and handed to create_app; the app never builds one
    - Trailing-slash paths are not redirected (they are unknown routes)

Design Decisions:
    - App factory over module-level app: tests build a fresh app around their own store
    - argparse flags override pydantic-settings values for host/port
"""

import argparse
import logging
from contextlib import asynccontextmanager
from typing import Sequence

import uvicorn
from fastapi import FastAPI

from album_api.api.error_handlers import register_error_handlers
from album_api.api.responses import PrettyJSONResponse
from album_api.api.routes.albums import build_router
from album_api.config import Settings, get_settings
from album_api.core.domain_types import Album, AlbumId
from album_api.core.repository_protocols import AlbumStore
from album_api.infrastructure.memory_store import MemoryAlbumStore
from album_api.infrastructure.observability import log_requests, setup_logging

logger = logging.getLogger(__name__)

DEMO_ALBUMS = (
    Album(id=AlbumId("a1"), title="9th Symphony", artist="Beethoven", price=795),
    Album(id=AlbumId("a2"), title="Hey Jude", artist="The Beatles", price=2000),
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    logger.info("Album API started")
    yield
    logger.info("Album API shutting down")


def create_app(store: AlbumStore) -> FastAPI:
    """Build the FastAPI app serving the given store."""
    app = FastAPI(
        title="Album Catalog API", version="1.0.0", lifespan=lifespan,
        default_response_class=PrettyJSONResponse,
        redirect_slashes=False,
        docs_url=None, redoc_url=None, openapi_url=None,
    )
    app.state.store = store
    app.middleware("http")(log_requests)
    app.include_router(build_router())
    register_error_handlers(app)
    return app


def seed_demo_albums(store: AlbumStore) -> None:
    for album in DEMO_ALBUMS:
        store.add_album(album)


def parse_args(argv: Sequence[str] | None, settings: Settings) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve the album catalog API")
    parser.add_argument(
        "--host", default=settings.host,
        help=f"address to listen on (default {settings.host})",
    )
    parser.add_argument(
        "--port", type=int, default=settings.port,
        help=f"port to listen on (default {settings.port})",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    settings = get_settings()
    args = parse_args(argv, settings)
    setup_logging(settings.log_level, settings.log_format)

    store = MemoryAlbumStore()
    if settings.seed_demo_albums:
        seed_demo_albums(store)
    app = create_app(store)

    logger.info(f"listening on http://localhost:{args.port}")
    uvicorn.run(app, host=args.host, port=args.port, log_config=None)


if __name__ == "__main__":
    main()
