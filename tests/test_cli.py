"""
Tests for the command-line entry point.
"""

from unittest.mock import AsyncMock, patch

import pytest

from ai_orchestrator.errors import OrchestrationError
from cli import main as cli_main


@pytest.fixture
def mock_orchestrator_cls():
    with patch.object(cli_main, "ResearchOrchestrator") as mock_orchestrator_cls:
        mock_orchestrator_cls.return_value.conduct_research = AsyncMock(
            return_value={
                "topic": "fusion energy",
                "raw_search_payload": None,
                "raw_analysis_text": None,
                "combined_insights": "Synthesized fusion report",
                "sources": [],
                "timestamp": "2024-01-01T00:00:00+00:00",
                "cached": False,
            }
        )
        yield mock_orchestrator_cls


class TestCli:
    def test_parser_defaults(self):
        args = cli_main.build_parser().parse_args(["fusion energy"])

        assert args.topic == "fusion energy"
        assert args.depth == "detailed"

    def test_parser_rejects_unknown_depth(self):
        with pytest.raises(SystemExit):
            cli_main.build_parser().parse_args(["fusion", "--depth", "deep"])

    @pytest.mark.asyncio
    async def test_main_prints_report(self, mock_orchestrator_cls, capsys):
        exit_code = await cli_main.main(["fusion energy", "--depth", "basic"])

        assert exit_code == 0
        mock_orchestrator_cls.return_value.conduct_research.assert_awaited_once_with(
            "fusion energy", "basic"
        )
        assert "Synthesized fusion report" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_main_reports_failure(self, mock_orchestrator_cls, capsys):
        mock_orchestrator_cls.return_value.conduct_research.side_effect = (
            OrchestrationError("fusion energy")
        )

        exit_code = await cli_main.main(["fusion energy"])

        assert exit_code == 1
        assert "fusion energy" in capsys.readouterr().err
