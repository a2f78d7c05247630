"""Domain models package."""

from .identifiers import ProblemIdentifier
from .metadata import ProblemMetadata, Resolution, Resolved, Unresolved
from .note import NotePatch, ProblemNote
from .query import QueryCriteria

__all__ = [
    "NotePatch",
    "ProblemIdentifier",
    "ProblemMetadata",
    "ProblemNote",
    "QueryCriteria",
    "Resolution",
    "Resolved",
    "Unresolved",
]
