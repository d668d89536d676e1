"""
Tests for logging setup.
"""

import logging
from unittest.mock import patch

import pytest

from ai_orchestrator import logger as logger_module
from ai_orchestrator.settings import Settings


@pytest.fixture
def restore_loggers():
    """Detach handlers added during a test."""
    watched = [logging.getLogger("research"), logging.getLogger("strands")]
    before = {id(lg): list(lg.handlers) for lg in watched}
    yield
    for lg in watched:
        for handler in lg.handlers:
            if handler not in before[id(lg)]:
                handler.close()
        lg.handlers = before[id(lg)]


class TestLogging:
    def test_create_logger_writes_files(self, tmp_path, restore_loggers):
        research_logger = logger_module.create_logger(str(tmp_path / "logs"))

        research_logger.info("🚀 research started")
        for handler in research_logger.handlers:
            handler.flush()

        assert research_logger.name == "research"
        assert (tmp_path / "logs" / "strands_agents.log").exists()
        assert "research started" in (
            tmp_path / "logs" / "research_results.log"
        ).read_text(encoding="utf-8")

    def test_setup_logging_is_idempotent(self, tmp_path, restore_loggers):
        with patch.object(logger_module, "research_logger", None):
            first = logger_module.setup_logging(str(tmp_path))
            second = logger_module.setup_logging(str(tmp_path))

        assert first is second

    def test_create_logger_does_not_stack_handlers(self, tmp_path, restore_loggers):
        research_logger = logging.getLogger("research")
        before = len(research_logger.handlers)

        logger_module.create_logger(str(tmp_path))
        logger_module.create_logger(str(tmp_path))

        assert len(research_logger.handlers) == before + 1

    def test_research_log_level_from_settings(self, tmp_path, restore_loggers):
        research_logger = logging.getLogger("research")
        previous_level = research_logger.level
        try:
            logger_module.create_logger(
                str(tmp_path), settings=Settings(log_level="WARNING")
            )

            assert research_logger.level == logging.WARNING
        finally:
            research_logger.setLevel(previous_level)
