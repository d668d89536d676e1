"""
Upstream Research Gateway

The two independent capability calls the orchestrator fans out to: a
web-grounded search and a single-shot text analysis.
"""

from typing import Any

from ..settings import Settings
from .analyzer import TextAnalyzer, extract_content_text
from .search import WebSearchClient, parse_search_payload


class ResearchGateway:
    """Stateless facade over the search and analysis providers."""

    def __init__(
        self,
        search_client: WebSearchClient | None = None,
        analyzer: TextAnalyzer | None = None,
        *,
        settings: Settings | None = None,
    ):
        self.search_client = search_client or WebSearchClient(settings)
        self.analyzer = analyzer or TextAnalyzer(settings=settings)

    async def search(self, query: str) -> dict[str, Any]:
        return await self.search_client.search(query)

    async def analyze(self, prompt: str, context: str | None = None) -> str:
        return await self.analyzer.analyze(prompt, context)


__all__ = [
    "ResearchGateway",
    "TextAnalyzer",
    "WebSearchClient",
    "extract_content_text",
    "parse_search_payload",
]
