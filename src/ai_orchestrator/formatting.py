"""
Result formatting and output processing.

Renders research results for the CLI and MCP surfaces.
"""

from .types import ResearchResult


class ResultFormatter:
    """Formats research results as markdown reports."""

    def build_sources_section(self, sources: list[str]) -> str:
        """
        Build a numbered Sources section.

        Args:
            sources: Ordered list of source URLs

        Returns:
            Markdown section, or an empty string when there are no sources
        """
        if not sources:
            return ""

        lines = [f"[{index}] {url}" for index, url in enumerate(sources, 1)]
        return "\n\n## Sources\n\n" + "\n".join(lines)

    def summarize(self, result: ResearchResult) -> str:
        origin = "served from cache" if result["cached"] else "freshly researched"
        return (
            f"Research on '{result['topic']}' {origin} at {result['timestamp']} "
            f"with {len(result['sources'])} sources."
        )

    def format_report(self, result: ResearchResult) -> str:
        """
        Render a full markdown report.

        Args:
            result: The research result to render

        Returns:
            Report with a title, a metadata line, the combined insights and sources
        """
        header = f"# Research: {result['topic']}\n\n_{self.summarize(result)}_\n\n"
        return header + result["combined_insights"] + self.build_sources_section(
            result["sources"]
        )
