"""
Unit tests for research prompt construction.
"""

import pytest

from ai_orchestrator.prompts import (
    build_analysis_prompt,
    build_combination_prompt,
    build_search_query,
)


class TestSearchQuery:
    @pytest.mark.parametrize(
        "depth,expected",
        [
            ("basic", "Provide a brief overview about: fusion"),
            ("detailed", "Provide detailed information with examples about: fusion"),
            (
                "comprehensive",
                "Provide comprehensive, in-depth analysis with multiple perspectives about: fusion",
            ),
        ],
    )
    def test_depth_instruction(self, depth, expected):
        assert build_search_query("fusion", depth) == expected

    def test_unknown_depth_falls_back_to_detailed(self):
        assert build_search_query("fusion", "exhaustive") == build_search_query(
            "fusion", "detailed"
        )


class TestAnalysisPrompt:
    def test_basic_prompt(self):
        prompt = build_analysis_prompt("fusion", "basic")

        assert prompt.startswith('Analyze the following topic: "fusion"\n\n')
        assert "concise analysis" in prompt

    def test_comprehensive_prompt(self):
        prompt = build_analysis_prompt("fusion", "comprehensive")

        for aspect in ["history", "current state", "future implications", "challenges"]:
            assert aspect in prompt

    def test_unknown_depth_falls_back_to_detailed(self):
        assert build_analysis_prompt("fusion", "") == build_analysis_prompt(
            "fusion", "detailed"
        )


class TestCombinationPrompt:
    def test_embeds_topic_and_both_legs(self):
        prompt = build_combination_prompt("fusion", "Search text", "Analysis text")

        assert 'topic: "fusion"' in prompt
        assert "Search text" in prompt
        assert "Analysis text" in prompt
        assert "No data available" not in prompt
        assert "No analysis available" not in prompt

    def test_placeholders_for_missing_legs(self):
        prompt = build_combination_prompt("fusion", None, "")

        assert "No data available" in prompt
        assert "No analysis available" in prompt

    def test_instructions(self):
        """Test the merge, dedupe, contradiction and formatting instructions."""
        prompt = build_combination_prompt("fusion", "a", "b")

        assert "Combines the most important insights" in prompt
        assert "Organizes information logically" in prompt
        assert "Removes duplicated points" in prompt
        assert "contradictions or gaps" in prompt
        assert "clear headings and bullet points" in prompt
