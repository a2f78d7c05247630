"""Filtering of the note collection for display."""

from typing import Sequence

from domain.models.note import ProblemNote
from domain.models.query import QueryCriteria


def filter_notes(notes: Sequence[ProblemNote], criteria: QueryCriteria) -> list[ProblemNote]:
    """
    Return the notes matching every criterion, in their original order.

    Args:
        notes: Collection in display order
        criteria: Normalised filter inputs

    Returns:
        New list; the input collection is not modified
    """
    return [note for note in notes if matches(note, criteria)]


def matches(note: ProblemNote, criteria: QueryCriteria) -> bool:
    """Text, rating and tag predicates, ANDed."""
    return (
        _matches_text(note, criteria.text)
        and _matches_rating(note, criteria.rating_equals)
        and _matches_tags(note, criteria.tags_all_of)
    )


def _matches_text(note: ProblemNote, text: str) -> bool:
    text = text.lower()
    haystacks = (
        note.link.lower(),
        note.notes.lower(),
        (note.name or "").lower(),
        " ".join(note.tags or []).lower(),
    )
    return any(text in haystack for haystack in haystacks)


def _matches_rating(note: ProblemNote, rating_equals: str | None) -> bool:
    if not rating_equals:
        return True
    # Unrated problems never match a rating filter.
    if not note.rating:
        return False
    return str(note.rating) == rating_equals


def _matches_tags(note: ProblemNote, terms: Sequence[str]) -> bool:
    if not terms:
        return True
    if not note.tags:
        return False
    tags = [tag.lower() for tag in note.tags]
    return all(any(term in tag for tag in tags) for term in terms)
