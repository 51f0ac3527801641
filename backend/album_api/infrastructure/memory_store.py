"""In-Memory Album Store: the AlbumStore implementation backed by a dict.

Invariants:
    - One threading.Lock guards _albums; every read and write holds it
    - At most one album per id; a rejected add leaves the stored album unchanged
    - list_albums hands out a fresh list, sorted by id
    - Albums are frozen dataclasses, so returned values cannot alias mutable state

Design Decisions:
    - Single mutex over a reader/writer lock: critical sections are a dict lookup
      or a sort of a small list
    - Store lifetime owned by the process entry point (main.py), passed to create_app
"""

import logging
import threading

from album_api.core.domain_types import Album
from album_api.core.errors import AlbumAlreadyExistsError, AlbumNotFoundError

logger = logging.getLogger(__name__)


class MemoryAlbumStore:
    """Thread-safe in-memory album store. State lost on restart."""

    def __init__(self):
        self._lock = threading.Lock()
        self._albums: dict[str, Album] = {}

    def list_albums(self) -> list[Album]:
        with self._lock:
            albums = list(self._albums.values())
        albums.sort(key=lambda album: album.id)
        return albums

    def get_album(self, album_id: str) -> Album:
        with self._lock:
            album = self._albums.get(album_id)
        if album is None:
            raise AlbumNotFoundError(album_id)
        return album

    def add_album(self, album: Album) -> Album:
        with self._lock:
            if album.id in self._albums:
                raise AlbumAlreadyExistsError(album.id)
            self._albums[album.id] = album
        logger.info(f"Album {album.id} added", extra={"album_id": album.id})
        return album
