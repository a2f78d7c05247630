"""Pydantic schemas for note API endpoints."""

from pydantic import BaseModel, Field

from domain.models import ProblemNote
from domain.rating import rating_class


class NoteRequest(BaseModel):
    """Request to create or edit a note."""

    link: str = Field(min_length=1)
    notes: str = ""


class NoteResponse(BaseModel):
    """A stored note with its resolved metadata."""

    id: str
    link: str
    notes: str
    date: str | None = None
    name: str | None = None
    rating: int | None = None
    rating_class: str
    tags: list[str] = []
    contest_id: str | None = None
    index: str | None = None
    resolved: bool

    @classmethod
    def from_note(cls, note: ProblemNote) -> "NoteResponse":
        return cls(
            id=note.id,
            link=note.link,
            notes=note.notes,
            date=note.date,
            name=note.name,
            rating=note.rating,
            rating_class=rating_class(note.rating),
            tags=note.tags or [],
            contest_id=note.contest_id,
            index=note.index,
            resolved=note.is_resolved,
        )


class NoteListResponse(BaseModel):
    """Filtered notes plus the size of the whole collection."""

    total: int
    notes: list[NoteResponse]


class ImportResponse(BaseModel):
    """Result of an import."""

    imported: int
