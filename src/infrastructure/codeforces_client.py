"""Client for the public Codeforces API."""

from typing import Any

from loguru import logger

from .errors import CodeforcesAPIError
from .http_client import AsyncHTTPClient


class CodeforcesApiClient:
    """Calls Codeforces API methods and unwraps their status envelope."""

    def __init__(self, http_client: AsyncHTTPClient, base_url: str = "https://codeforces.com/api"):
        self.http_client = http_client
        self.base_url = base_url.rstrip("/")

    async def fetch_contest_standings(self, contest_id: str) -> dict[str, Any]:
        """
        Fetch contest.standings for a contest, limited to one row.

        The roster of problems comes back regardless of the row limit.

        Raises:
            CodeforcesAPIError: If the API status is not OK
            HTTPClientError: If the request itself fails
        """
        logger.debug(f"Fetching contest standings: {contest_id}")

        data = await self.http_client.get_json(
            f"{self.base_url}/contest.standings",
            params={"contestId": contest_id, "from": 1, "count": 1},
        )

        # Codeforces reports errors in the body, often with a 400 status
        # alongside; the envelope is what decides success.
        if not isinstance(data, dict) or data.get("status") != "OK":
            comment = data.get("comment") if isinstance(data, dict) else None
            raise CodeforcesAPIError(
                f"contest.standings failed for contest {contest_id}: {comment}",
                comment=comment,
            )

        return data
