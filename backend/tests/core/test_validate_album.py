"""Album Validation: tests for pure field checks.

Tests cover:
    - Empty id/title/artist reported as "required"
    - Price bounds: 0 and 99999 accepted, -1 and 100000 rejected with a message
    - All issues collected in one pass
"""

import pytest

from album_api.core.domain_types import Album, AlbumId, IssueKind, ValidationIssue
from album_api.core.validate_album import (
    PRICE_RANGE_MESSAGE,
    check_price_range,
    check_required,
    validate_album,
)


def _album(**overrides) -> Album:
    fields = {"id": AlbumId("a1"), "title": "Blue Train", "artist": "John Coltrane", "price": 1099}
    fields.update(overrides)
    return Album(**fields)


# ─── check_required ──────────────────────────────────────────────

def test_check_required_flags_empty_string():
    assert check_required("") == ValidationIssue(IssueKind.REQUIRED)


def test_check_required_accepts_whitespace_and_text():
    assert check_required(" ") is None
    assert check_required("Beethoven") is None


# ─── check_price_range ───────────────────────────────────────────

@pytest.mark.parametrize("price", [0, 1, 795, 99_999])
def test_price_in_range_accepted(price):
    assert check_price_range(price) is None


@pytest.mark.parametrize("price", [-1, 100_000, 250_000])
def test_price_out_of_range_rejected(price):
    issue = check_price_range(price)
    assert issue is not None
    assert issue.error == IssueKind.OUT_OF_RANGE
    assert issue.message == PRICE_RANGE_MESSAGE


# ─── validate_album ──────────────────────────────────────────────

def test_valid_album_has_no_issues():
    assert validate_album(_album()) == {}


def test_album_without_price_is_valid():
    assert validate_album(_album(price=0)) == {}


def test_collects_every_issue():
    issues = validate_album(Album(id=AlbumId(""), title="", artist="", price=-1))
    assert set(issues) == {"id", "title", "artist", "price"}


def test_empty_title_and_artist_reported_together():
    issues = validate_album(_album(title="", artist=""))
    assert issues == {
        "title": ValidationIssue(IssueKind.REQUIRED),
        "artist": ValidationIssue(IssueKind.REQUIRED),
    }


def test_issue_to_dict_omits_empty_message():
    assert ValidationIssue(IssueKind.REQUIRED).to_dict() == {"error": "required"}
    assert check_price_range(-1).to_dict() == {
        "error": "out-of-range",
        "message": "price must be between 0 and $1000",
    }
