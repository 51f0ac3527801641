"""Route Table: tests for regex-free request classification.

Tests cover:
    - Exact and parameterized pattern matching
    - Method dispatch and 405 with Allow list in table order
    - Unknown paths, trailing slashes and empty segments are 404
    - Literal patterns win over parameterized ones regardless of table order
"""

import pytest

from album_api.core.domain_types import Operation
from album_api.core.errors import MethodNotAllowedError, RouteNotFoundError
from album_api.core.route_table import (
    ALBUM_BY_ID,
    ALBUMS,
    Route,
    RoutePattern,
    allowed_methods,
    patterns_by_priority,
    resolve,
)


# ─── RoutePattern ────────────────────────────────────────────────

def test_literal_pattern_matches_exact_path_only():
    assert ALBUMS.match("/albums") == {}
    assert ALBUMS.match("/albums/") is None
    assert ALBUMS.match("/album") is None
    assert ALBUMS.match("/albums/a1") is None


def test_placeholder_binds_single_segment():
    assert ALBUM_BY_ID.match("/albums/a1") == {"album_id": "a1"}
    assert ALBUM_BY_ID.match("/albums/with spaces") == {"album_id": "with spaces"}


def test_placeholder_rejects_empty_and_nested_segments():
    assert ALBUM_BY_ID.match("/albums/") is None
    assert ALBUM_BY_ID.match("/albums/a1/tracks") is None
    assert ALBUM_BY_ID.match("/albums//") is None


def test_is_literal():
    assert ALBUMS.is_literal
    assert not ALBUM_BY_ID.is_literal


# ─── resolve ─────────────────────────────────────────────────────

@pytest.mark.parametrize("method,path,operation", [
    ("GET", "/albums", Operation.LIST_ALBUMS),
    ("POST", "/albums", Operation.ADD_ALBUM),
    ("GET", "/albums/a1", Operation.GET_ALBUM),
    ("get", "/albums", Operation.LIST_ALBUMS),
])
def test_resolve_known_routes(method, path, operation):
    assert resolve(method, path).route.operation == operation


def test_resolve_binds_album_id():
    assert resolve("GET", "/albums/missing").params == {"album_id": "missing"}


def test_unsupported_method_on_collection_lists_get_and_post():
    with pytest.raises(MethodNotAllowedError) as exc_info:
        resolve("DELETE", "/albums")
    assert exc_info.value.allowed == ("GET", "POST")
    assert exc_info.value.headers == {"Allow": "GET, POST"}


@pytest.mark.parametrize("method", ["POST", "PUT", "PATCH", "DELETE", "HEAD"])
def test_unsupported_method_on_item_lists_get(method):
    with pytest.raises(MethodNotAllowedError) as exc_info:
        resolve(method, "/albums/a1")
    assert exc_info.value.headers == {"Allow": "GET"}


@pytest.mark.parametrize("path", ["/", "/albums/", "/albums/a1/", "/artists", "/albums/a1/tracks"])
def test_unknown_paths_not_found(path):
    with pytest.raises(RouteNotFoundError):
        resolve("GET", path)


def test_literal_pattern_tried_before_parameterized():
    param = RoutePattern("/albums/{album_id}")
    literal = RoutePattern("/albums/featured")
    table = (
        Route("GET", param, Operation.GET_ALBUM),
        Route("GET", literal, Operation.LIST_ALBUMS),
    )
    assert patterns_by_priority(table) == [literal, param]
    assert resolve("GET", "/albums/featured", table).route.operation == Operation.LIST_ALBUMS
    assert resolve("GET", "/albums/a1", table).route.operation == Operation.GET_ALBUM


def test_allowed_methods_in_table_order():
    assert allowed_methods(ALBUMS) == ("GET", "POST")
    assert allowed_methods(ALBUM_BY_ID) == ("GET",)
