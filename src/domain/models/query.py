"""Filter criteria for listing notes."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class QueryCriteria:
    """Normalised filter inputs: free text, exact rating and required tag terms."""

    text: str = ""
    rating_equals: str | None = None
    tags_all_of: tuple[str, ...] = ()

    @classmethod
    def from_inputs(
        cls,
        text: str | None = None,
        rating: str | None = None,
        tags: str | None = None,
    ) -> QueryCriteria:
        """
        Build criteria from raw user input.

        Args:
            text: Search text, matched case-insensitively
            rating: Exact rating, e.g. "1900"
            tags: Comma-separated tag terms, e.g. "dp, graphs"
        """
        rating = (rating or "").strip()
        terms = tuple(term.strip() for term in (tags or "").lower().split(","))
        return cls(
            text=(text or "").lower(),
            rating_equals=rating or None,
            tags_all_of=tuple(term for term in terms if term),
        )
