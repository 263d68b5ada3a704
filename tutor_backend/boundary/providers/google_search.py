"""
Google Custom Search adapter.

Issues one query against the Custom Search JSON API and reduces each
hit to title, link, snippet and the registrable domain of the link.

Dependencies: httpx
System role: Web search provider
"""

import logging
import re

import httpx

from tutor_backend.models.search import SearchResult

logger = logging.getLogger(__name__)

SEARCH_ENDPOINT = "https://www.googleapis.com/customsearch/v1"

_HOST_PATTERN = re.compile(r"^(?:[a-z][a-z0-9+.-]*://)?(?:[^@/]*@)?([^/?#:]+)", re.IGNORECASE)
_REGISTRABLE_PATTERN = re.compile(
    r"([a-z0-9-]+\.(?:(?:co|com|ac|org|gov|edu|net)\.[a-z]{2}|[a-z]{2,}))$",
    re.IGNORECASE,
)


def extract_domain(link: str) -> str:
    """
    Return the registrable domain of a URL.

    ``https://docs.python.org/3/`` -> ``python.org``,
    ``https://www.bbc.co.uk/news`` -> ``bbc.co.uk``.
    """
    host_match = _HOST_PATTERN.match(link or "")
    if not host_match:
        return ""
    host = host_match.group(1).lower()
    domain_match = _REGISTRABLE_PATTERN.search(host)
    return domain_match.group(1) if domain_match else host


def format_results(results: list[SearchResult]) -> str:
    """Render search results as the text block stored in history."""
    if not results:
        return "No search results found."
    lines = []
    for index, result in enumerate(results, start=1):
        lines.append(f"{index}. {result.title} ({result.source})")
        if result.snippet:
            lines.append(f"   {result.snippet}")
        lines.append(f"   {result.link}")
    return "\n".join(lines)


class GoogleSearchAdapter:
    """Web search over one Custom Search engine."""

    name = "googleSearch"

    def __init__(
        self,
        api_key: str,
        engine_id: str,
        result_count: int = 3,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize search adapter.

        Args:
            api_key: Custom Search API key
            engine_id: Search engine id (cx)
            result_count: Maximum results returned per query
            timeout: Request timeout in seconds
            client: Optional shared httpx client (tests)
        """
        self._api_key = api_key
        self._engine_id = engine_id
        self._result_count = result_count
        self._timeout = timeout
        self._client = client

    async def search(self, query: str) -> list[SearchResult]:
        """
        Search the web for ``query``.

        Failures are logged and yield an empty result list.
        """
        params = {
            "key": self._api_key,
            "cx": self._engine_id,
            "q": query,
            "num": self._result_count,
        }
        logger.info("search - Google Search API call initiated")
        try:
            if self._client is not None:
                response = await self._client.get(SEARCH_ENDPOINT, params=params)
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await client.get(SEARCH_ENDPOINT, params=params)
            response.raise_for_status()
            items = response.json().get("items") or []
        except (httpx.HTTPError, ValueError) as e:
            logger.error("search - Error during Google Search: %s: %s", type(e).__name__, e)
            return []

        results = [
            SearchResult(
                title=item.get("title", ""),
                link=item.get("link", ""),
                snippet=item.get("snippet", ""),
                source=extract_domain(item.get("link", "")),
            )
            for item in items[: self._result_count]
        ]
        logger.info("search - Google Search returned %d results", len(results))
        return results
