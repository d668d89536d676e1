"""
Web-grounded search leg.

Issues a single chat-completion request to the Perplexity API and hands back the
raw provider payload, plus a parsing step that narrows that payload to the
fields the orchestrator actually uses.
"""

import asyncio
import itertools
import logging
from collections.abc import Mapping
from typing import Any

import httpx
from httpcore._async.connection import exponential_backoff

from ..errors import UpstreamError
from ..settings import Settings, get_settings
from ..types import SearchFindings

logger = logging.getLogger("research")


class WebSearchClient:
    """Async client for the web-grounded text-completion provider."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        backoff_factor: float = 1.0,
    ):
        """
        Initialize the search client.

        Args:
            settings: Provider configuration (defaults to get_settings())
            transport: Optional httpx transport, used to stub the provider in tests
            backoff_factor: Base delay in seconds between rate-limited retries
        """
        self.settings = settings or get_settings()
        self.transport = transport
        self.backoff_factor = backoff_factor

        if not self.settings.perplexity_api_key:
            logger.warning("⚠️ PERPLEXITY_API_KEY not set, search requests will fail")

    def _build_request_body(self, query: str) -> dict[str, Any]:
        return {
            "model": self.settings.perplexity_model,
            "messages": [
                {"role": "system", "content": self.settings.search_system_prompt},
                {"role": "user", "content": query},
            ],
        }

    async def search(self, query: str) -> dict[str, Any]:
        """
        Run a web-grounded search.

        Args:
            query: Fully built query text (depth instruction + topic)

        Returns:
            The provider's JSON payload, unmodified

        Raises:
            UpstreamError: On non-success status, timeout, transport failure or a
                body that is not JSON
        """
        url = f"{self.settings.perplexity_base_url.rstrip('/')}/chat/completions"
        headers = {
            "Authorization": f"Bearer {self.settings.perplexity_api_key}",
            "Content-Type": "application/json",
        }
        body = self._build_request_body(query)
        max_retries = self.settings.search_max_retries

        async with httpx.AsyncClient(
            timeout=self.settings.search_timeout_seconds, transport=self.transport
        ) as client:
            for attempt, delay in enumerate(
                itertools.islice(
                    exponential_backoff(factor=self.backoff_factor), max_retries + 1
                )
            ):
                await asyncio.sleep(delay)

                try:
                    response = await client.post(url, headers=headers, json=body)
                    response.raise_for_status()
                except httpx.TimeoutException as e:
                    raise UpstreamError("Search request timed out") from e
                except httpx.HTTPStatusError as e:
                    # Only rate limiting is retried
                    if e.response.status_code == 429 and attempt < max_retries:
                        logger.info(
                            f"⏳ Search rate limited, retrying (attempt {attempt + 1}/{max_retries + 1})"
                        )
                        continue
                    raise UpstreamError(
                        "Search API error",
                        status=e.response.status_code,
                        body=e.response.text,
                    ) from e
                except (httpx.HTTPError, ValueError) as e:
                    # ValueError covers request encoding, e.g. a non-ASCII header
                    raise UpstreamError(f"Search request failed: {e}") from e

                try:
                    return response.json()
                except ValueError as e:
                    raise UpstreamError(
                        "Search API returned a non-JSON body",
                        status=response.status_code,
                        body=response.text,
                    ) from e

        raise UpstreamError("Maximum retries exceeded for rate limited requests")


def parse_search_payload(payload: Any) -> SearchFindings | None:
    """
    Narrow a raw search payload to its answer text and citation list.

    Args:
        payload: Raw provider response (expected shape: choices[0].message.content
            plus an optional top-level citations list)

    Returns:
        SearchFindings, or None when the payload carries neither text nor citations
    """
    if not isinstance(payload, Mapping):
        return None

    text = ""
    choices = payload.get("choices")
    if isinstance(choices, list) and choices and isinstance(choices[0], Mapping):
        message = choices[0].get("message")
        if isinstance(message, Mapping) and isinstance(message.get("content"), str):
            text = message["content"]

    citations = payload.get("citations")
    if isinstance(citations, list):
        citations = [c for c in citations if isinstance(c, str)]
    else:
        citations = []

    if not text and not citations:
        return None

    return SearchFindings(text=text, citations=citations)
