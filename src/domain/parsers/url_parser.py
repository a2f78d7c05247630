"""Parser for Codeforces problem URLs."""

import re
from urllib.parse import urlparse

from loguru import logger

from domain.exceptions import URLParsingError
from domain.models.identifiers import ProblemIdentifier


class URLParser:
    """Parser for the Codeforces problem URL formats."""

    HOST = "codeforces.com"

    # contest/1234/problem/A
    CONTEST_PATTERN = re.compile(r"contest/(\d+)/problem/(\w+)", re.IGNORECASE | re.ASCII)
    # problemset/problem/1234/A
    PROBLEMSET_PATTERN = re.compile(r"problemset/problem/(\d+)/(\w+)", re.IGNORECASE | re.ASCII)

    @classmethod
    def parse(cls, url: str) -> ProblemIdentifier:
        """
        Parse Codeforces problem URL and extract problem identifier.
        """
        logger.debug(f"Parsing URL: {url}")

        try:
            parsed = urlparse(url)
            hostname = parsed.hostname
        except Exception as e:
            raise URLParsingError(f"Failed to parse URL: {url}") from e

        if not parsed.scheme or not hostname:
            raise URLParsingError(f"Invalid URL format: {url}")

        if hostname.lower() != cls.HOST:
            raise URLParsingError(f"Not a Codeforces URL: {url}")

        for pattern in (cls.CONTEST_PATTERN, cls.PROBLEMSET_PATTERN):
            match = pattern.search(parsed.path)
            if match:
                contest_id, index = match.groups()
                identifier = ProblemIdentifier(contest_id=contest_id, index=index)

                logger.debug(f"Parsed URL to problem: {identifier}")
                return identifier

        # No pattern matched
        raise URLParsingError(
            f"Unrecognized Codeforces URL format: {url}. "
            "Expected https://codeforces.com/contest/<contest_id>/problem/<index> "
            "or https://codeforces.com/problemset/problem/<contest_id>/<index>"
        )

    @classmethod
    def build_problem_url(cls, identifier: ProblemIdentifier) -> str:
        """
        Build problem URL from identifier.
        """
        url = f"https://{cls.HOST}/problemset/problem/{identifier.contest_id}/{identifier.index}"

        logger.debug(f"Built problem URL: {url}")
        return url


def parse_problem_url(url: str) -> ProblemIdentifier:
    """Convenience wrapper around URLParser.parse."""
    return URLParser.parse(url)
