"""Tests for the SerpAPI web search connector."""

import httpx
import pytest

from wayfinder.connectors.serpapi import (
    SerpAPIClient,
    WebSearchError,
    WebSearchNotConfiguredError,
    extract_ai_overview,
    extract_organic_results,
)


def client_for(handler) -> SerpAPIClient:
    return SerpAPIClient(api_key="serp-key", transport=httpx.MockTransport(handler))


class TestExtractors:
    def test_ai_overview_blocks(self):
        overview = {
            "text_blocks": [
                {"type": "heading", "snippet": "Admissions"},
                {"type": "paragraph", "snippet": "Admissions open in June."},
                {"type": "list", "list": [{"title": "BCA", "snippet": "3 years"}]},
            ],
            "references": [{"title": "College site", "link": "https://example.edu"}],
        }

        text = extract_ai_overview(overview)

        assert text.startswith("Admissions\nAdmissions open in June.\n• BCA: 3 years")
        assert "References:\nCollege site: https://example.edu" in text

    def test_empty_overview(self):
        assert extract_ai_overview({}) == ""

    def test_organic_results(self):
        data = {
            "organic_results": [
                {"title": f"Result {i}", "snippet": f"Snippet {i}"} for i in range(5)
            ]
        }
        assert extract_organic_results(data).splitlines() == [
            "Result 0: Snippet 0",
            "Result 1: Snippet 1",
            "Result 2: Snippet 2",
        ]


class TestSerpAPIClient:
    async def test_not_configured(self):
        client = SerpAPIClient(api_key=None)

        assert client.is_configured is False
        with pytest.raises(WebSearchNotConfiguredError):
            await client.search("anything")

    async def test_prefers_ai_overview(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.params["q"] == "fees RKSD"
            assert request.url.params["api_key"] == "serp-key"
            return httpx.Response(
                200,
                json={
                    "ai_overview": {"text_blocks": [{"type": "paragraph", "snippet": "Fees are low."}]},
                    "organic_results": [{"title": "Ignored", "snippet": "Ignored"}],
                },
            )

        client = client_for(handler)
        assert await client.search("fees RKSD") == "Fees are low."
        await client.close()

    async def test_follows_overview_page_token(self):
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.params.get("engine") == "google_ai_overview":
                assert request.url.params["page_token"] == "tok"
                return httpx.Response(
                    200,
                    json={"ai_overview": {"text_blocks": [{"type": "paragraph", "snippet": "Full"}]}},
                )
            return httpx.Response(200, json={"ai_overview": {"page_token": "tok"}})

        assert await client_for(handler).search("q") == "Full"

    async def test_falls_back_to_organic(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"organic_results": [{"title": "T", "snippet": "S"}]})

        assert await client_for(handler).search("q") == "T: S"

    async def test_nothing_found(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={})

        assert await client_for(handler).search("q") == ""

    async def test_http_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401, json={"error": "Invalid API key"})

        with pytest.raises(WebSearchError, match="SerpAPI error 401"):
            await client_for(handler).search("q")
