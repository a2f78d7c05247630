"""Outcome of resolving a problem link to Codeforces metadata."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from .identifiers import ProblemIdentifier
from .note import NotePatch


@dataclass(frozen=True)
class ProblemMetadata:
    """Metadata for a problem found in a contest roster."""

    name: str
    identifier: ProblemIdentifier
    rating: int | None = None
    tags: tuple[str, ...] | None = None


@dataclass(frozen=True)
class Resolved:
    """The link was parsed and the problem found through the API."""

    metadata: ProblemMetadata

    def to_patch(self, link: str, notes: str) -> NotePatch:
        return NotePatch(
            link=link,
            notes=notes,
            name=self.metadata.name,
            rating=self.metadata.rating,
            tags=list(self.metadata.tags) if self.metadata.tags is not None else None,
            contest_id=self.metadata.identifier.contest_id,
            index=self.metadata.identifier.index,
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.metadata.name}
        if self.metadata.rating is not None:
            data["rating"] = self.metadata.rating
        if self.metadata.tags is not None:
            data["tags"] = list(self.metadata.tags)
        data["contestId"] = self.metadata.identifier.contest_id
        data["index"] = self.metadata.identifier.index
        return data


@dataclass(frozen=True)
class Unresolved:
    """Lookup was impossible or failed; the link doubles as the name."""

    link: str

    def to_patch(self, link: str, notes: str) -> NotePatch:
        return NotePatch(link=link, notes=notes, name=self.link)

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.link}


Resolution = Union[Resolved, Unresolved]
