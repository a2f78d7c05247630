"""The problem-note record and the patch applied on edit."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from loguru import logger

# Known fields as they appear in the persisted/exported JSON.
NOTE_FIELDS = ("id", "link", "notes", "date", "name", "rating", "tags", "contestId", "index")


@dataclass
class NotePatch:
    """Fields overwritten when an existing note is edited."""

    link: str
    notes: str
    name: str | None = None
    rating: int | None = None
    tags: list[str] | None = None
    contest_id: str | None = None
    index: str | None = None


@dataclass
class ProblemNote:
    """A user note attached to one problem, with optional resolved metadata."""

    id: str
    link: str
    notes: str = ""
    date: str | None = None
    name: str | None = None
    rating: int | None = None
    tags: list[str] | None = None
    contest_id: str | None = None
    index: str | None = None
    # Unrecognised fields from imported payloads, kept so they survive export.
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def is_resolved(self) -> bool:
        return self.name is not None and self.name != self.link

    def to_dict(self) -> dict[str, Any]:
        known = {
            "id": self.id,
            "link": self.link,
            "notes": self.notes,
            "date": self.date,
            "name": self.name,
            "rating": self.rating,
            "tags": list(self.tags) if self.tags is not None else None,
            "contestId": self.contest_id,
            "index": self.index,
        }
        # Absent metadata is omitted; unknown imported fields are copied as-is, nulls included.
        data: dict[str, Any] = dict(self.extra)
        data.update({key: value for key, value in known.items() if value is not None})
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ProblemNote:
        """Build a note from its JSON form, normalising mistyped known fields."""
        note_id = str(data["id"])

        rating = data.get("rating")
        if rating is not None and (isinstance(rating, bool) or not isinstance(rating, int)):
            logger.warning(f"Dropping non-integer rating {rating!r} on note {note_id}")
            rating = None

        tags = data.get("tags")
        if tags is not None:
            if isinstance(tags, list) and all(isinstance(tag, str) for tag in tags):
                tags = list(tags)
            else:
                logger.warning(f"Dropping malformed tags {tags!r} on note {note_id}")
                tags = None

        return cls(
            id=note_id,
            link=str(data["link"]),
            notes=_optional_str(data.get("notes")) or "",
            date=_optional_str(data.get("date")),
            name=_optional_str(data.get("name")),
            rating=rating,
            tags=tags,
            contest_id=_optional_str(data.get("contestId")),
            index=_optional_str(data.get("index")),
            extra={key: value for key, value in data.items() if key not in NOTE_FIELDS},
        )


def _optional_str(value: Any) -> str | None:
    return None if value is None else str(value)
