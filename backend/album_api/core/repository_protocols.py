"""Boundary Protocols: the album store contract between the HTTP layer and storage.

Invariants:
    - The HTTP layer depends on AlbumStore only, never on a concrete store
    - list_albums returns a new list sorted ascending by id
    - get_album raises AlbumNotFoundError for an unknown id
    - add_album raises AlbumAlreadyExistsError for a duplicate id and leaves
      the stored record unchanged
    - Any other exception raised by a store is an unexpected store failure
    - Implementations are safe to call from many threads at once

Design Decisions:
    - Protocol over ABC: structural subtyping, a persistent backend only needs
      the same three methods
    - Synchronous methods: route functions run in FastAPI's threadpool
"""

from typing import Protocol

from album_api.core.domain_types import Album


class AlbumStore(Protocol):
    """Contract for album storage, implemented by infrastructure/."""
    def list_albums(self) -> list[Album]: ...
    def get_album(self, album_id: str) -> Album: ...
    def add_album(self, album: Album) -> Album: ...
