"""Route Table: explicit (method, pattern, operation) entries and the matcher that classifies requests.

Invariants:
    - Every route is visible in ROUTE_TABLE, no auto-discovery
    - Patterns are matched segment by segment, no regex
    - A "{name}" placeholder matches exactly one non-empty path segment
    - Literal patterns are tried before parameterized ones; table order breaks ties
    - resolve() returns a match, or raises RouteNotFoundError (no pattern matches)
      or MethodNotAllowedError (pattern matches, method does not)
    - The Allow list of a pattern is its methods in table order

Design Decisions:
    - The same table drives FastAPI route registration (api/routes/albums.py) and
      the 404/405 classification in the error handlers, so they cannot drift apart
"""

from dataclasses import dataclass, field

from album_api.core.domain_types import Operation
from album_api.core.errors import MethodNotAllowedError, RouteNotFoundError


@dataclass(frozen=True)
class RoutePattern:
    """A path template such as "/albums/{album_id}"."""
    template: str
    segments: tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "segments", tuple(self.template.split("/")))

    @property
    def is_literal(self) -> bool:
        return not any(_is_placeholder(s) for s in self.segments)

    def match(self, path: str) -> dict[str, str] | None:
        """Return bound placeholders if path matches, else None."""
        parts = path.split("/")
        if len(parts) != len(self.segments):
            return None
        params: dict[str, str] = {}
        for expected, actual in zip(self.segments, parts):
            if _is_placeholder(expected):
                if not actual:
                    return None
                params[expected[1:-1]] = actual
            elif expected != actual:
                return None
        return params


@dataclass(frozen=True)
class Route:
    """One row of the route table."""
    method: str
    pattern: RoutePattern
    operation: Operation
    status_code: int = 200


@dataclass(frozen=True)
class RouteMatch:
    route: Route
    params: dict[str, str]


ALBUMS = RoutePattern("/albums")
ALBUM_BY_ID = RoutePattern("/albums/{album_id}")

ROUTE_TABLE: tuple[Route, ...] = (
    Route("GET", ALBUMS, Operation.LIST_ALBUMS, 200),
    Route("POST", ALBUMS, Operation.ADD_ALBUM, 201),
    Route("GET", ALBUM_BY_ID, Operation.GET_ALBUM, 200),
)


def _is_placeholder(segment: str) -> bool:
    return len(segment) > 2 and segment.startswith("{") and segment.endswith("}")


def patterns_by_priority(
    table: tuple[Route, ...] = ROUTE_TABLE,
) -> list[RoutePattern]:
    """Distinct patterns, literal ones first, otherwise in table order."""
    patterns: list[RoutePattern] = []
    for route in table:
        if route.pattern not in patterns:
            patterns.append(route.pattern)
    return sorted(patterns, key=lambda p: not p.is_literal)


def allowed_methods(
    pattern: RoutePattern, table: tuple[Route, ...] = ROUTE_TABLE,
) -> tuple[str, ...]:
    return tuple(r.method for r in table if r.pattern == pattern)


def resolve(
    method: str, path: str, table: tuple[Route, ...] = ROUTE_TABLE,
) -> RouteMatch:
    """Classify a request into exactly one route, or raise the routing error."""
    method = method.upper()
    for pattern in patterns_by_priority(table):
        params = pattern.match(path)
        if params is None:
            continue
        for route in table:
            if route.pattern == pattern and route.method == method:
                return RouteMatch(route, params)
        raise MethodNotAllowedError(method, allowed_methods(pattern, table))
    raise RouteNotFoundError(path)
