"""Album Validation: field checks applied to a create payload before it reaches the store.

Invariants:
    - All functions are PURE: no IO, no side effects
    - Single checks return a ValidationIssue on violation, None on success
    - validate_album runs every check and collects every issue (never fail-fast)
"""

from album_api.core.domain_types import (
    Album, IssueKind, ValidationIssue, MIN_PRICE, MAX_PRICE,
)

PRICE_RANGE_MESSAGE = "price must be between 0 and $1000"


def check_required(value: str) -> ValidationIssue | None:
    """Empty strings are missing values."""
    if not value:
        return ValidationIssue(IssueKind.REQUIRED)
    return None


def check_price_range(price: int) -> ValidationIssue | None:
    """Price in cents must satisfy MIN_PRICE <= price < MAX_PRICE."""
    if price < MIN_PRICE or price >= MAX_PRICE:
        return ValidationIssue(IssueKind.OUT_OF_RANGE, PRICE_RANGE_MESSAGE)
    return None


def validate_album(album: Album) -> dict[str, ValidationIssue]:
    """Return every field issue of the album, keyed by wire field name."""
    checks = {
        "id": check_required(album.id),
        "title": check_required(album.title),
        "artist": check_required(album.artist),
        "price": check_price_range(album.price),
    }
    return {field: issue for field, issue in checks.items() if issue is not None}
