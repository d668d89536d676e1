"""
Common type definitions for the research orchestrator.

TypedDict definitions for the data flowing through the research core, plus the
validated request value object.
"""

from dataclasses import dataclass
from typing import Any, Literal, TypedDict, get_args

from .errors import ValidationError

Depth = Literal["basic", "detailed", "comprehensive"]

DEPTHS: tuple[str, ...] = get_args(Depth)
DEFAULT_DEPTH: Depth = "detailed"


class SearchFindings(TypedDict):
    """Narrow parsed view of a web-grounded search response."""

    text: str
    citations: list[str]


class ResearchResult(TypedDict):
    """Combined result of one research build."""

    topic: str
    raw_search_payload: Any  # Untouched provider response, or None
    raw_analysis_text: str | None
    combined_insights: str
    sources: list[str]
    timestamp: str
    cached: bool


class CacheEntry(TypedDict):
    """A stored research result and the epoch milliseconds it was stored at."""

    data: ResearchResult
    stored_at_epoch_ms: float


class CacheStats(TypedDict):
    size: int
    ttl: int


@dataclass(frozen=True)
class ResearchRequest:
    """Immutable, validated research input."""

    topic: str
    depth: Depth = DEFAULT_DEPTH

    @classmethod
    def create(cls, topic: Any, depth: Any = None) -> "ResearchRequest":
        """
        Validate raw caller input and build a request.

        Args:
            topic: Topic to research; must be a non-empty string
            depth: One of "basic", "detailed", "comprehensive" (None means "detailed")

        Returns:
            A ResearchRequest with a trimmed topic

        Raises:
            ValidationError: If the topic is empty or not a string, or the depth is unknown
        """
        if not isinstance(topic, str) or not topic.strip():
            raise ValidationError("Topic is required and must be a non-empty string")

        if depth is None:
            depth = DEFAULT_DEPTH
        if depth not in DEPTHS:
            raise ValidationError(
                f"Unknown depth '{depth}', expected one of: {', '.join(DEPTHS)}"
            )

        return cls(topic=topic.strip(), depth=depth)
