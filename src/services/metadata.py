"""Best-effort resolution of problem links to Codeforces metadata."""

from typing import Any, Protocol

from loguru import logger

from domain.exceptions import URLParsingError
from domain.models import ProblemIdentifier, ProblemMetadata, Resolution, Resolved, Unresolved
from domain.parsers.url_parser import URLParser


class ContestAPIClientProtocol(Protocol):
    """Protocol for the contest roster source."""

    async def fetch_contest_standings(self, contest_id: str) -> dict[str, Any]:
        """Fetch contest.standings for a contest."""
        ...


class MetadataResolver:
    """Turns a problem link into Resolved metadata or an Unresolved fallback."""

    def __init__(
        self,
        *,
        api_client: ContestAPIClientProtocol,
        url_parser: type[URLParser] = URLParser,
    ):
        """Initialize resolver with dependencies."""
        self.api_client = api_client
        self.url_parser = url_parser

    async def resolve(self, link: str) -> Resolution:
        """
        Resolve a link. Never raises: any failure yields Unresolved(link).
        """
        try:
            identifier = self.url_parser.parse(link)
        except URLParsingError as e:
            logger.debug(f"Link not resolvable, keeping it as the name: {e}")
            return Unresolved(link)

        try:
            standings = await self.api_client.fetch_contest_standings(identifier.contest_id)
            problems = standings["result"]["problems"]
            metadata = self._find_problem(problems, identifier)
        except Exception as e:
            logger.warning(f"Metadata lookup failed for {identifier}: {e}")
            return Unresolved(link)

        if metadata is None:
            logger.warning(f"Problem {identifier} not found in contest roster")
            return Unresolved(link)

        logger.info(f"Resolved {identifier} to {metadata.name!r}")
        return Resolved(metadata)

    def _find_problem(
        self, problems: list[dict[str, Any]], identifier: ProblemIdentifier
    ) -> ProblemMetadata | None:
        for problem in problems:
            if not identifier.matches(str(problem.get("index", ""))):
                continue

            tags = problem.get("tags")
            return ProblemMetadata(
                name=problem["name"],
                identifier=identifier,
                rating=problem.get("rating"),
                tags=tuple(tags) if tags is not None else None,
            )
        return None
