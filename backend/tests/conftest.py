"""Root conftest: fresh store + FastAPI test client per test.

Invariants:
    - Every test gets its own MemoryAlbumStore and its own app around it
    - Settings cache cleared so environment overrides in tests take effect
"""

import os

import pytest
from httpx import ASGITransport, AsyncClient

# Keep test output readable; tests never read a developer's .env values for these
os.environ.setdefault("ALBUMS_LOG_FORMAT", "text")

from album_api.config import get_settings  # noqa: E402
from album_api.core.domain_types import Album, AlbumId  # noqa: E402
from album_api.infrastructure.memory_store import MemoryAlbumStore  # noqa: E402
from album_api.main import create_app  # noqa: E402


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def store():
    return MemoryAlbumStore()


@pytest.fixture
def make_album():
    def _make(album_id="a1", title="9th Symphony", artist="Beethoven", price=795):
        return Album(id=AlbumId(album_id), title=title, artist=artist, price=price)
    return _make


@pytest.fixture
async def client(store):
    """Test client bound to a fresh app serving `store`."""
    app = create_app(store)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
