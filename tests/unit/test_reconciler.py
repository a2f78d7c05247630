"""Unit tests for edit and import merge policy."""

from domain.models import NotePatch, ProblemNote
from domain.reconciler import (
    EPOCH,
    is_importable,
    merge_existing,
    merge_imported,
    parse_date,
    sort_by_date_desc,
)


def resolved_note(**overrides) -> ProblemNote:
    fields = dict(
        id="1",
        link="https://codeforces.com/contest/1/problem/A",
        notes="old",
        date="2024-01-01T00:00:00.000Z",
        name="Theatre Square",
        rating=1000,
        tags=["math"],
        contest_id="1",
        index="A",
    )
    fields.update(overrides)
    return ProblemNote(**fields)


def test_merge_existing_keeps_id_and_date():
    old = resolved_note()
    patch = NotePatch(link="https://example.com/x", notes="new", name="https://example.com/x")

    merged = merge_existing(old, patch)

    assert merged.id == "1"
    assert merged.date == "2024-01-01T00:00:00.000Z"
    assert merged.notes == "new"


def test_merge_existing_clears_metadata_missing_from_patch():
    """Test that switching to an unresolved link leaves no stale metadata."""
    merged = merge_existing(
        resolved_note(),
        NotePatch(link="https://example.com/x", notes="", name="https://example.com/x"),
    )

    assert merged.name == merged.link
    assert merged.rating is None
    assert merged.tags is None
    assert merged.contest_id is None
    assert merged.index is None
    assert not merged.is_resolved


def test_merge_existing_does_not_mutate_old_record():
    old = resolved_note()

    merge_existing(old, NotePatch(link=old.link, notes="changed", name=old.name))

    assert old.notes == "old"


def test_merge_imported_incoming_fields_win():
    existing = ProblemNote(id="1", link="a", notes="old", date="2024-01-01T00:00:00Z", name="a")

    merged = merge_imported(existing, {"id": "1", "link": "a", "notes": "new"})

    assert merged.notes == "new"
    assert merged.date == "2024-01-01T00:00:00Z"
    assert merged.name == "a"


def test_merge_imported_without_existing_takes_entry_as_is():
    entry = {"id": "7", "link": "a", "notes": "n", "date": "2023-05-01T00:00:00Z", "starred": True}

    merged = merge_imported(None, entry)

    assert merged.to_dict() == entry


def test_merge_imported_keeps_unknown_fields_from_both_sides():
    existing = merge_imported(None, {"id": "1", "link": "a", "notes": "", "color": "red"})

    merged = merge_imported(existing, {"id": "1", "link": "a", "starred": True})

    assert merged.extra == {"color": "red", "starred": True}


def test_is_importable_requires_id_and_link():
    assert is_importable({"id": "1", "link": "a"})
    assert not is_importable({"id": "1"})
    assert not is_importable({"link": "a"})
    assert not is_importable({"id": "", "link": "a"})
    assert not is_importable(["id", "link"])
    assert not is_importable(None)


def test_parse_date_falls_back_to_epoch():
    assert parse_date(None) == EPOCH
    assert parse_date("") == EPOCH
    assert parse_date("yesterday") == EPOCH
    assert parse_date("2024-01-01T00:00:00.000Z") > EPOCH


def test_sort_by_date_desc_puts_undated_last_and_is_stable():
    notes = [
        ProblemNote(id="undated", link="a"),
        ProblemNote(id="old", link="b", date="2023-01-01T00:00:00.000Z"),
        ProblemNote(id="new", link="c", date="2024-06-01T12:00:00.000Z"),
        ProblemNote(id="garbage", link="d", date="not a date"),
        ProblemNote(id="old-twin", link="e", date="2023-01-01T00:00:00+00:00"),
    ]

    ordered = [note.id for note in sort_by_date_desc(notes)]

    assert ordered == ["new", "old", "old-twin", "undated", "garbage"]
