from typing import Any
from unittest.mock import AsyncMock

import pytest

from domain.models import ProblemIdentifier, ProblemMetadata, Resolved, Unresolved
from services.notes import NoteStore


class InMemoryStore:
    """Key-value store double that records every write."""

    def __init__(self, initial: dict[str, Any] | None = None):
        self.data: dict[str, Any] = dict(initial or {})
        self.writes: list[tuple[str, Any]] = []
        self.closed = False

    async def get(self, key: str) -> Any | None:
        return self.data.get(key)

    async def set(self, key: str, value: Any) -> None:
        self.writes.append((key, value))
        self.data[key] = value

    async def close(self) -> None:
        self.closed = True


def resolved(name: str, contest_id: str, index: str, rating=None, tags=None) -> Resolved:
    return Resolved(
        ProblemMetadata(
            name=name,
            identifier=ProblemIdentifier(contest_id=contest_id, index=index),
            rating=rating,
            tags=tuple(tags) if tags is not None else None,
        )
    )


@pytest.fixture
def storage() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def resolver() -> AsyncMock:
    resolver = AsyncMock()
    resolver.resolve.side_effect = lambda link: Unresolved(link)
    return resolver


@pytest.fixture
def note_store(storage, resolver) -> NoteStore:
    ids = iter(f"id-{i}" for i in range(1, 1000))
    dates = iter(f"2024-01-{day:02d}T00:00:00.000Z" for day in range(1, 29))
    return NoteStore(
        storage=storage,
        resolver=resolver,
        id_factory=lambda: next(ids),
        clock=lambda: next(dates),
    )
