"""Value objects for problem identification."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProblemIdentifier:
    """Identifies a specific Codeforces problem."""

    contest_id: str
    index: str

    def __str__(self) -> str:
        """String representation."""
        return f"{self.contest_id}/{self.index}"

    def matches(self, index: str) -> bool:
        """Check a roster index against this identifier, ignoring case."""
        return index.upper() == self.index.upper()
