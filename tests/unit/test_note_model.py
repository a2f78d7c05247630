"""Unit tests for ProblemNote serialisation and rating bands."""

import pytest

from domain.models import ProblemNote
from domain.rating import rating_class


def test_to_dict_omits_absent_metadata():
    note = ProblemNote(id="1", link="https://example.com/x", notes="", date="2024-01-01T00:00:00.000Z", name="https://example.com/x")

    assert note.to_dict() == {
        "id": "1",
        "link": "https://example.com/x",
        "notes": "",
        "date": "2024-01-01T00:00:00.000Z",
        "name": "https://example.com/x",
    }


def test_from_dict_uses_json_field_names():
    note = ProblemNote.from_dict(
        {
            "id": "1",
            "link": "https://codeforces.com/contest/1/problem/A",
            "notes": "n",
            "name": "Theatre Square",
            "rating": 1000,
            "tags": ["math"],
            "contestId": "1",
            "index": "A",
        }
    )

    assert note.contest_id == "1"
    assert note.index == "A"
    assert note.is_resolved
    assert note.extra == {}


def test_from_dict_drops_mistyped_metadata():
    note = ProblemNote.from_dict({"id": 5, "link": "a", "rating": "hard", "tags": "dp"})

    assert note.id == "5"
    assert note.notes == ""
    assert note.rating is None
    assert note.tags is None


@pytest.mark.parametrize(
    "rating, expected",
    [
        (None, "rating-gray"),
        (800, "rating-gray"),
        (1200, "rating-green"),
        (1599, "rating-cyan"),
        (1600, "rating-blue"),
        (1900, "rating-violet"),
        (2100, "rating-orange"),
        (2400, "rating-red"),
        (3500, "rating-red"),
    ],
)
def test_rating_class(rating, expected):
    assert rating_class(rating) == expected


def test_unknown_fields_round_trip_including_nulls():
    entry = {"id": "1", "link": "a", "notes": "", "pinned": None, "color": "red"}

    assert ProblemNote.from_dict(entry).to_dict() == entry
