"""Merge policy for edited and imported notes."""

from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Iterable, Mapping

from domain.models.note import NotePatch, ProblemNote

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def merge_existing(old: ProblemNote, patch: NotePatch) -> ProblemNote:
    """
    Apply an edit to a stored note.

    Every patch field overwrites, including metadata the patch leaves unset,
    so a note never keeps stale metadata from a previous link. The patch has
    no id or date, so both are preserved.
    """
    return replace(
        old,
        link=patch.link,
        notes=patch.notes,
        name=patch.name,
        rating=patch.rating,
        tags=list(patch.tags) if patch.tags is not None else None,
        contest_id=patch.contest_id,
        index=patch.index,
    )


def is_importable(entry: Any) -> bool:
    """Only entries carrying both an id and a link can be imported."""
    return isinstance(entry, Mapping) and bool(entry.get("id")) and bool(entry.get("link"))


def merge_imported(existing: ProblemNote | None, incoming: Mapping[str, Any]) -> ProblemNote:
    """
    Merge an imported entry onto the note with the same id.

    Keys present in the incoming entry win; everything else is kept from the
    existing note. Without an existing note the entry is taken as-is.
    """
    if existing is None:
        return ProblemNote.from_dict(dict(incoming))
    return ProblemNote.from_dict({**existing.to_dict(), **incoming})


def parse_date(value: str | None) -> datetime:
    """Parse an ISO-8601 timestamp; missing or invalid dates count as the epoch."""
    if not value:
        return EPOCH
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return EPOCH
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def sort_by_date_desc(notes: Iterable[ProblemNote]) -> list[ProblemNote]:
    """Newest first; stable for equal dates."""
    return sorted(notes, key=lambda note: parse_date(note.date), reverse=True)
