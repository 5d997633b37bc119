"""Outbound service connectors."""

from wayfinder.connectors.serpapi import (
    SerpAPIClient,
    WebSearchError,
    WebSearchNotConfiguredError,
)

__all__ = ["SerpAPIClient", "WebSearchError", "WebSearchNotConfiguredError"]
