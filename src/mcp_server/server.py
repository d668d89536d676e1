"""
Research MCP Server Implementation

Provides MCP tools for cached research orchestration and cache maintenance.
"""

from mcp.server.fastmcp import FastMCP

from ai_orchestrator import (
    OrchestrationError,
    ResearchOrchestrator,
    ValidationError,
)
from ai_orchestrator.formatting import ResultFormatter

# Create the FastMCP server instance
mcp = FastMCP("AI Orchestrator")

# One orchestrator per process so every tool call shares the research cache
_orchestrator: ResearchOrchestrator | None = None

_formatter = ResultFormatter()


def get_orchestrator() -> ResearchOrchestrator:
    """Get the process-wide orchestrator, creating it on first use."""
    global _orchestrator
    if _orchestrator is None:
        _orchestrator = ResearchOrchestrator()
    return _orchestrator


@mcp.tool()
async def conduct_research(topic: str, depth: str = "detailed") -> str:
    """
    <tool_description>
    Research a topic by combining a web-grounded search with a model analysis,
    then synthesizing both into a single structured report.

    Results are cached for one hour per topic and depth; repeated requests
    (ignoring case and surrounding whitespace) are served from cache.
    </tool_description>

    <tool_usage_guidelines>
    Use this tool when the user asks for an overview, explanation or analysis
    of a topic that benefits from current web information.

    Pick the depth to match the request:
    - basic: a brief overview
    - detailed: detailed information with examples (default)
    - comprehensive: in-depth analysis with history, perspectives and challenges
    </tool_usage_guidelines>

    Args:
        topic: The research topic, as a short focused statement
        depth: One of "basic", "detailed", "comprehensive"

    Returns:
        Markdown research report with sources, or an error message
    """
    try:
        result = await get_orchestrator().conduct_research(topic, depth)
    except ValidationError as e:
        return f"Invalid request: {e}"
    except OrchestrationError as e:
        return f"Research failed: {e}"

    return _formatter.format_report(result)


@mcp.tool()
async def get_cache_stats() -> str:
    """
    <tool_description>
    Report the number of cached research results and the cache TTL.
    </tool_description>

    Returns:
        Cache size and TTL
    """
    stats = get_orchestrator().get_cache_stats()
    return f"Cached research results: {stats['size']} | TTL: {stats['ttl']} ms"


@mcp.tool()
async def clear_expired_cache() -> str:
    """
    <tool_description>
    Remove expired research results from the cache. Fresh results are kept.
    </tool_description>

    Returns:
        How many entries were removed
    """
    removed = get_orchestrator().clear_expired_cache()
    return f"Expired cache entries cleared ({removed} removed)"


def main() -> None:
    mcp.run()


if __name__ == "__main__":
    main()
