"""
Research Result Caching Module

In-memory, time-bounded cache of research results keyed by normalized request
parameters.
"""

import logging
import time
from collections.abc import Callable

from .types import CacheEntry, CacheStats, ResearchResult

logger = logging.getLogger("research")

DEFAULT_TTL_SECONDS = 3600.0


class ResearchCache:
    """
    Process-local TTL cache for research results.

    Entries are never evicted on insert; they disappear when a lookup finds them
    expired, on cleanup_expired(), or on clear_all().
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
    ):
        """
        Initialize the research cache

        Args:
            ttl_seconds: How long a stored result stays fresh (default: 1 hour)
            clock: Returns the current epoch time in seconds
        """
        self.ttl_ms = int(ttl_seconds * 1000)
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}

    @staticmethod
    def generate_cache_key(topic: str, depth: str) -> str:
        """Generate the cache key for a topic/depth pair (case and whitespace insensitive)"""
        return f"{topic.lower().strip()}_{depth}"

    def _now_ms(self) -> float:
        return self._clock() * 1000

    def _is_expired(self, entry: CacheEntry, now_ms: float) -> bool:
        return now_ms - entry["stored_at_epoch_ms"] >= self.ttl_ms

    def get(self, key: str) -> ResearchResult | None:
        """
        Get a cached result if present and not expired

        Returns:
            The stored result, or None if not found/expired
        """
        entry = self._entries.get(key)
        if entry is None:
            return None

        if self._is_expired(entry, self._now_ms()):
            del self._entries[key]
            return None

        return entry["data"]

    def set(self, key: str, result: ResearchResult) -> None:
        """Store a result, fully replacing any previous entry for the key"""
        self._entries[key] = CacheEntry(data=result, stored_at_epoch_ms=self._now_ms())

    def cleanup_expired(self) -> int:
        """Remove all expired entries and return how many were removed"""
        now_ms = self._now_ms()
        expired_keys = [
            key
            for key, entry in self._entries.items()
            if self._is_expired(entry, now_ms)
        ]

        for key in expired_keys:
            del self._entries[key]

        if expired_keys:
            logger.info(f"🧹 Cleaned up {len(expired_keys)} expired cache entries")

        return len(expired_keys)

    def clear_all(self) -> None:
        """Clear all cached results"""
        self._entries.clear()
        logger.info("🗑️ Cleared all cached research results")

    def stats(self) -> CacheStats:
        return CacheStats(size=len(self._entries), ttl=self.ttl_ms)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries
