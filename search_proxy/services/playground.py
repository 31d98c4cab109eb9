from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from search_proxy.core.config import Settings
from search_proxy.schemas.playground import PlaygroundImage, PlaygroundSearchPayload
from search_proxy.schemas.search import ErrorResponse, SearchResult

MISSING_QUERY_MESSAGE = "Please provide a search query."
UPSTREAM_FAILURE_MESSAGE = "Sorry, an error occurred while fetching the search results."

# Characters left unescaped by JavaScript's encodeURIComponent.
_URI_COMPONENT_SAFE = "-_.!~*'()"

ProxyResponse = SearchResult | ErrorResponse

logger = logging.getLogger(__name__)


def encode_query(query: str) -> str:
    return quote(query, safe=_URI_COMPONENT_SAFE)


def no_results_message(query: str) -> str:
    return f'No results found for "{query}".'


def shape_result(entry: Any) -> SearchResult:
    image = PlaygroundImage.model_validate(entry)
    # Absent upstream fields stay unset; explicit nulls are kept.
    fields: dict[str, Any] = {"title": image.title or "N/A"}
    if "prompt" in image.model_fields_set:
        fields["prompt"] = image.prompt
    if "displayName" in image.user.model_fields_set:
        fields["user"] = image.user.displayName
    if "url" in image.model_fields_set:
        fields["imageUrl"] = image.url
    return SearchResult(**fields)


def build_upstream_client(settings: Settings) -> httpx.AsyncClient:
    headers = {"User-Agent": settings.upstream_user_agent, "Accept": "application/json"}
    return httpx.AsyncClient(timeout=settings.upstream_timeout_seconds, headers=headers)


class PlaygroundSearch:
    """Forwards one query to the Playground page-data endpoint and shapes the answer.

    The URL template carries a single ``{query}`` slot. The logger is
    injected so callers can observe fault reporting without capturing
    output streams.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        url_template: str,
        *,
        log: logging.Logger | None = None,
    ) -> None:
        self.client = client
        self.url_template = url_template
        self.log = log or logger

    def upstream_url(self, query: str) -> str:
        return self.url_template.replace("{query}", encode_query(query))

    async def fetch(self, query: str) -> PlaygroundSearchPayload:
        resp = await self.client.get(self.upstream_url(query))
        resp.raise_for_status()
        return PlaygroundSearchPayload.model_validate(resp.json())

    async def search(self, query: str | None) -> tuple[int, ProxyResponse]:
        if not query:
            return 400, ErrorResponse(error=MISSING_QUERY_MESSAGE)

        try:
            payload = await self.fetch(query)
            results = payload.results()
            if not results:
                return 404, ErrorResponse(error=no_results_message(query))
            return 200, shape_result(results[0])
        except Exception:
            self.log.exception("Error fetching search results for query=%r", query)
            return 500, ErrorResponse(error=UPSTREAM_FAILURE_MESSAGE)
