"""
Prompt construction for the research legs and the synthesis step.
"""

from .types import DEFAULT_DEPTH

SEARCH_DEPTH_INSTRUCTIONS = {
    "basic": "Provide a brief overview",
    "detailed": "Provide detailed information with examples",
    "comprehensive": "Provide comprehensive, in-depth analysis with multiple perspectives",
}

ANALYSIS_DEPTH_INSTRUCTIONS = {
    "basic": "Provide a concise analysis focusing on the most important aspects",
    "detailed": "Provide a detailed analysis covering key aspects, implications, and context",
    "comprehensive": (
        "Provide a comprehensive analysis including history, current state, "
        "future implications, different perspectives, and potential challenges"
    ),
}

NO_SEARCH_DATA = "No data available"
NO_ANALYSIS = "No analysis available"


def build_search_query(topic: str, depth: str) -> str:
    """Search query text; unknown depths use the "detailed" instruction."""
    instruction = SEARCH_DEPTH_INSTRUCTIONS.get(
        depth, SEARCH_DEPTH_INSTRUCTIONS[DEFAULT_DEPTH]
    )
    return f"{instruction} about: {topic}"


def build_analysis_prompt(topic: str, depth: str) -> str:
    """Analysis prompt text; unknown depths use the "detailed" instruction."""
    instruction = ANALYSIS_DEPTH_INSTRUCTIONS.get(
        depth, ANALYSIS_DEPTH_INSTRUCTIONS[DEFAULT_DEPTH]
    )
    return f'Analyze the following topic: "{topic}"\n\n{instruction}'


def build_combination_prompt(
    topic: str, search_text: str | None, analysis_text: str | None
) -> str:
    """
    Build the synthesis prompt that merges both legs.

    Args:
        topic: The research topic
        search_text: Answer text from the search leg, or None if that leg failed
        analysis_text: Text from the analysis leg, or None if that leg failed

    Returns:
        The prompt for the second-stage analysis call
    """
    return f"""You are synthesizing research on the topic: "{topic}"

Research from web search (includes current web data):
{search_text or NO_SEARCH_DATA}

Initial Analysis:
{analysis_text or NO_ANALYSIS}

Your task: Create a comprehensive, well-structured summary that:
1. Combines the most important insights from both sources
2. Organizes information logically with clear sections
3. Removes duplicated points that appear in both sources
4. Highlights key takeaways and actionable insights
5. Identifies any contradictions or gaps
6. Provides a balanced, objective perspective

Format your response with clear headings and bullet points for readability."""
