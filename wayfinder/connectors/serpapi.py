"""SerpAPI web search connector, used when the assistant lacks an answer."""

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)

SEARCH_URL = "https://serpapi.com/search"
AI_OVERVIEW_URL = "https://serpapi.com/search.json"


class WebSearchError(Exception):
    """Base exception for web search operations."""


class WebSearchNotConfiguredError(WebSearchError):
    """SERPAPI_API_KEY is not set."""


def _list_items(items: list[dict[str, Any]], depth: int = 0) -> list[str]:
    lines = []
    for item in items:
        parts = [item[key] for key in ("title", "snippet") if item.get(key)]
        if parts:
            lines.append("  " * depth + "• " + ": ".join(parts))
        if isinstance(item.get("list"), list):
            lines.extend(_list_items(item["list"], depth + 1))
    return lines


def extract_ai_overview(overview: dict[str, Any]) -> str:
    """Flatten a Google AI Overview into plain text lines."""
    parts: list[str] = []
    for block in overview.get("text_blocks") or []:
        block_type = block.get("type")
        if block_type in ("paragraph", "heading"):
            if block.get("snippet"):
                parts.append(block["snippet"])
        elif block_type == "list" and isinstance(block.get("list"), list):
            parts.extend(_list_items(block["list"]))
        elif block_type == "table" and isinstance(block.get("table"), list):
            parts.append("\nTable:")
            parts.extend(" | ".join(map(str, row)) for row in block["table"] if isinstance(row, list))
        elif block.get("snippet"):
            parts.append(block["snippet"])

    text = "\n".join(p for p in parts if p)

    references = [
        f"{ref.get('title') or 'Source'}: {ref.get('link')}"
        for ref in (overview.get("references") or [])[:3]
    ]
    if text and references:
        text += "\n\nReferences:\n" + "\n".join(references)
    return text


def extract_organic_results(data: dict[str, Any], limit: int = 3) -> str:
    return "\n".join(
        f"{item.get('title')}: {item.get('snippet')}"
        for item in (data.get("organic_results") or [])[:limit]
    )


@dataclass
class SerpAPIClient:
    """Async Google search through SerpAPI.

    Example:
        client = SerpAPIClient(api_key="...")
        info = await client.search("admission last date RKSD College, Kaithal")
        await client.close()
    """

    api_key: str | None
    timeout: int = 20
    transport: httpx.AsyncBaseTransport | None = field(default=None, repr=False)

    _client: httpx.AsyncClient | None = field(default=None, init=False, repr=False)

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                transport=self.transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def _get_json(self, url: str, params: dict[str, str]) -> dict[str, Any]:
        try:
            response = await self._get_client().get(url, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            raise WebSearchError(f"SerpAPI error {e.response.status_code}") from e
        except (httpx.HTTPError, ValueError) as e:
            raise WebSearchError(f"SerpAPI request failed: {e}") from e

    async def _follow_overview(self, page_token: str) -> dict[str, Any] | None:
        params = {"engine": "google_ai_overview", "page_token": page_token, "api_key": self.api_key}
        try:
            data = await self._get_json(AI_OVERVIEW_URL, params)
        except WebSearchError as e:
            logger.warning("AI Overview follow-up failed: %s", e)
            return None
        return data.get("ai_overview")

    async def search(self, query: str) -> str:
        """Search Google and return text usable as prompt context.

        The AI Overview is preferred; the top organic results are used when
        there is none. Returns an empty string when nothing useful was found.

        Raises:
            WebSearchNotConfiguredError: If no API key is set.
            WebSearchError: If the search request fails.
        """
        if not self.is_configured:
            raise WebSearchNotConfiguredError("SERPAPI_API_KEY is not configured")

        logger.info("Web search: %s", query)
        data = await self._get_json(
            SEARCH_URL,
            {"engine": "google", "q": query, "api_key": self.api_key, "hl": "en"},
        )

        info = ""
        overview = data.get("ai_overview")
        if overview:
            if overview.get("page_token"):
                overview = await self._follow_overview(overview["page_token"]) or overview
            info = extract_ai_overview(overview)

        if not info:
            info = extract_organic_results(data)

        logger.info("Web search returned %d chars", len(info))
        return info
