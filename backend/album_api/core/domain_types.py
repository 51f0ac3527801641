"""Domain Types: the Album record and the closed sets of kinds used across the API.

Invariants:
    - Album is immutable (frozen dataclass): stored values can be handed out without copying
    - price is integer cents, valid range is MIN_PRICE <= price < MAX_PRICE
    - ErrorKind values are the exact strings sent on the wire in the "error" field

Design Decisions:
    - int cents over float: no rounding error on currency
    - str Enums: serialize to JSON without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

AlbumId = NewType("AlbumId", str)


# ─── Value Bounds ────────────────────────────────────────────────

MIN_PRICE = 0
MAX_PRICE = 100_000  # exclusive, i.e. $1000.00


# ─── Entities ────────────────────────────────────────────────────

@dataclass(frozen=True)
class Album:
    """A single catalog record."""
    id: AlbumId
    title: str
    artist: str
    price: int = 0


@dataclass(frozen=True)
class ValidationIssue:
    """A structured complaint about one request field."""
    error: "IssueKind"
    message: str | None = None

    def to_dict(self) -> dict:
        issue = {"error": self.error.value}
        if self.message:
            issue["message"] = self.message
        return issue


# ─── Enums ───────────────────────────────────────────────────────

class ErrorKind(str, Enum):
    """Error kinds reported in the error envelope."""
    VALIDATION = "validation"
    MALFORMED_JSON = "malformed-json"
    NOT_FOUND = "not-found"
    METHOD_NOT_ALLOWED = "method-not-allowed"
    ALREADY_EXISTS = "already-exists"
    DATABASE = "database"
    INTERNAL = "internal"


class IssueKind(str, Enum):
    """Field-level validation complaint kinds."""
    REQUIRED = "required"
    OUT_OF_RANGE = "out-of-range"


class Operation(str, Enum):
    """Store operations reachable through the route table."""
    LIST_ALBUMS = "list_albums"
    ADD_ALBUM = "add_album"
    GET_ALBUM = "get_album"
