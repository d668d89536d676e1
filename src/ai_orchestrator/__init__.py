"""
AI Orchestrator Package

Research orchestration core: concurrent web-search and analysis legs, a
synthesis step, and a TTL cache keyed by normalized request parameters.
"""

from ai_orchestrator.cache import ResearchCache
from ai_orchestrator.errors import OrchestrationError, UpstreamError, ValidationError
from ai_orchestrator.logger import setup_logging
from ai_orchestrator.orchestrator import ResearchOrchestrator

__version__ = "1.0.0"
__all__ = [
    "OrchestrationError",
    "ResearchCache",
    "ResearchOrchestrator",
    "UpstreamError",
    "ValidationError",
    "setup_logging",
]
