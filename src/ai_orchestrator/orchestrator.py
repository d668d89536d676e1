"""
Research Orchestration Logic

Fans a research request out to the search and analysis legs concurrently,
tolerates failure of either leg, synthesizes both into one narrative and
memoizes the outcome behind a TTL cache.
"""

import asyncio
import time
import uuid
from datetime import datetime, timezone
from typing import Any

from .cache import ResearchCache
from .errors import OrchestrationError
from .gateway import ResearchGateway, parse_search_payload
from .logger import setup_logging
from .prompts import build_analysis_prompt, build_combination_prompt, build_search_query
from .settings import Settings, get_settings
from .types import CacheStats, ResearchRequest, ResearchResult


class ResearchOrchestrator:
    """
    Cached two-leg research with a synthesis step.

    Concurrent requests for the same uncached key share a single build.
    """

    def __init__(
        self,
        gateway: ResearchGateway | None = None,
        *,
        cache: ResearchCache | None = None,
        settings: Settings | None = None,
    ):
        settings = settings or get_settings()

        self.gateway = gateway or ResearchGateway(settings=settings)
        self.cache = cache or ResearchCache(
            ttl_seconds=settings.research_cache_ttl_seconds
        )

        # Set up logging
        self.research_logger = setup_logging()

        # Builds currently running, by cache key
        self._in_flight: dict[str, asyncio.Future[ResearchResult]] = {}

    async def conduct_research(
        self, topic: str, depth: str | None = None
    ) -> ResearchResult:
        """
        Research a topic, serving from cache when a fresh result exists.

        Args:
            topic: Topic to research
            depth: "basic", "detailed" or "comprehensive" (default: "detailed")

        Returns:
            The research result; cached=True when served from cache

        Raises:
            ValidationError: If the topic or depth is invalid
            OrchestrationError: If the synthesis step fails
        """
        request = ResearchRequest.create(topic, depth)
        cache_key = self.cache.generate_cache_key(request.topic, request.depth)

        cached_result = self.cache.get(cache_key)
        if cached_result is not None:
            self.research_logger.info(f"🔄 Cache hit for topic: {request.topic}")
            return _copy_result(cached_result, cached=True)

        build = self._in_flight.get(cache_key)
        if build is None:
            build = asyncio.ensure_future(self._build(request, cache_key))
            self._in_flight[cache_key] = build
            build.add_done_callback(lambda done: self._release(cache_key, done))
        else:
            self.research_logger.info(
                f"🔗 Joining in-flight research for topic: {request.topic}"
            )

        # Shielded so one caller's cancellation leaves the shared build running
        result = await asyncio.shield(build)
        return _copy_result(result, cached=False)

    def _release(self, cache_key: str, build: asyncio.Future) -> None:
        if self._in_flight.get(cache_key) is build:
            del self._in_flight[cache_key]

    async def _build(self, request: ResearchRequest, cache_key: str) -> ResearchResult:
        workflow_id = str(uuid.uuid4())[:8]
        workflow_start = time.time()
        self.research_logger.info(
            f"🚀 [{workflow_id}] Starting research for topic: {request.topic} with depth: {request.depth}"
        )

        search_outcome, analysis_outcome = await asyncio.gather(
            self.gateway.search(build_search_query(request.topic, request.depth)),
            self.gateway.analyze(build_analysis_prompt(request.topic, request.depth)),
            return_exceptions=True,
        )
        search_payload = self._settle(workflow_id, "search", search_outcome)
        analysis_text = self._settle(workflow_id, "analysis", analysis_outcome)

        findings = parse_search_payload(search_payload)
        if search_payload is not None and findings is None:
            self.research_logger.warning(
                f"⚠️ [{workflow_id}] Search payload carried no usable content"
            )
        sources = list(findings["citations"]) if findings else []

        combination_prompt = build_combination_prompt(
            request.topic, findings["text"] if findings else None, analysis_text
        )
        try:
            combined_insights = await self.gateway.analyze(combination_prompt)
        except Exception as e:
            self.research_logger.error(
                f"❌ [{workflow_id}] Synthesis failed for '{request.topic}': {e}"
            )
            raise OrchestrationError(request.topic) from e

        result = ResearchResult(
            topic=request.topic,
            raw_search_payload=search_payload,
            raw_analysis_text=analysis_text,
            combined_insights=combined_insights,
            sources=sources,
            timestamp=datetime.now(timezone.utc).isoformat(),
            cached=False,
        )
        self.cache.set(cache_key, result)

        total_time = time.time() - workflow_start
        self.research_logger.info(
            f"✅ [{workflow_id}] Research for '{request.topic}' completed in {total_time:.2f} seconds "
            f"({len(sources)} sources)"
        )
        return result

    def _settle(self, workflow_id: str, leg: str, outcome: Any) -> Any:
        """Turn a leg failure into None; cancellation still propagates."""
        if isinstance(outcome, Exception):
            self.research_logger.warning(
                f"⚠️ [{workflow_id}] {leg.capitalize()} leg failed: {outcome}"
            )
            return None
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    def clear_expired_cache(self) -> int:
        """Remove expired cache entries; returns the number removed."""
        return self.cache.cleanup_expired()

    def get_cache_stats(self) -> CacheStats:
        return self.cache.stats()


def _copy_result(result: ResearchResult, *, cached: bool) -> ResearchResult:
    return ResearchResult(
        **{**result, "sources": list(result["sources"]), "cached": cached}
    )
