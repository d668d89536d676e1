"""
Unit tests for ResearchRequest validation.
"""

import dataclasses

import pytest

from ai_orchestrator.errors import ValidationError
from ai_orchestrator.types import ResearchRequest


class TestResearchRequest:
    def test_create_trims_topic(self):
        request = ResearchRequest.create("  Fusion Energy  ", "basic")

        assert request == ResearchRequest(topic="Fusion Energy", depth="basic")

    def test_depth_defaults_to_detailed(self):
        assert ResearchRequest.create("fusion").depth == "detailed"
        assert ResearchRequest.create("fusion", None).depth == "detailed"

    @pytest.mark.parametrize("topic", ["", "  \n ", None, 3, ["fusion"]])
    def test_invalid_topic(self, topic):
        with pytest.raises(ValidationError, match="non-empty string"):
            ResearchRequest.create(topic)

    @pytest.mark.parametrize("depth", ["BASIC", "deep", "", 1])
    def test_invalid_depth(self, depth):
        with pytest.raises(ValidationError, match="Unknown depth"):
            ResearchRequest.create("fusion", depth)

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            ResearchRequest.create("")

    def test_request_is_immutable(self):
        request = ResearchRequest.create("fusion")

        with pytest.raises(dataclasses.FrozenInstanceError):
            request.topic = "other"  # type: ignore[misc]
