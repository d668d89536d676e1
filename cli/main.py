"""
AI Orchestrator - Command Line Entry Point

Runs a single research request and prints the synthesized report.
"""

import argparse
import asyncio
import sys

from ai_orchestrator import OrchestrationError, ResearchOrchestrator, ValidationError
from ai_orchestrator.formatting import ResultFormatter
from ai_orchestrator.types import DEFAULT_DEPTH, DEPTHS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Research a topic with web search, analysis and synthesis",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python cli/main.py "Machine Learning in Healthcare"
  python cli/main.py "Fusion energy" --depth basic
        """,
    )
    parser.add_argument("topic", help="Research topic to investigate")
    parser.add_argument(
        "--depth",
        choices=DEPTHS,
        default=DEFAULT_DEPTH,
        help=f"Research depth (default: {DEFAULT_DEPTH})",
    )
    return parser


async def main(argv: list[str] | None = None) -> int:
    """
    Run the research orchestrator with a user-provided topic
    """
    args = build_parser().parse_args(argv)

    orchestrator = ResearchOrchestrator()
    formatter = ResultFormatter()

    print("🚀 AI Orchestrator Research")
    print("=" * 50)
    print(f"📋 Research Topic: {args.topic} ({args.depth})")
    print("=" * 50)

    try:
        result = await orchestrator.conduct_research(args.topic, args.depth)
    except (ValidationError, OrchestrationError) as e:
        print(f"❌ Error during research: {e}", file=sys.stderr)
        return 1

    print("\n✨ Research Complete!")
    print(formatter.format_report(result))
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
