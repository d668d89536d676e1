"""
Model Provider Abstractions and Factory

Creates the analyzer model for the configured provider.
"""

from botocore.config import Config as BotocoreConfig
from strands.models.bedrock import BedrockModel
from strands.models.model import Model
from strands.models.ollama import OllamaModel

from .settings import Settings, get_settings


class ModelFactory:
    """Factory for creating model instances based on configuration."""

    @staticmethod
    def create_model(
        settings: Settings | None = None,
        max_tokens: int | None = None,
        **kwargs,
    ) -> Model:
        """
        Create a model instance based on configuration.

        Args:
            settings: Settings to read provider details from (defaults to get_settings())
            max_tokens: Maximum tokens for generation (defaults to analysis_max_tokens)
            **kwargs: Additional model-specific parameters

        Returns:
            Configured model instance
        """
        settings = settings or get_settings()
        max_tokens = max_tokens or settings.analysis_max_tokens

        if settings.model_type == "ollama":
            return ModelFactory._create_ollama_model(settings, max_tokens, **kwargs)
        return ModelFactory._create_bedrock_model(settings, max_tokens, **kwargs)

    @staticmethod
    def _create_ollama_model(
        settings: Settings, max_tokens: int, **kwargs
    ) -> OllamaModel:
        """Create an Ollama model instance."""
        config = {
            "host": settings.ollama_host,
            "model_id": settings.ollama_model,
            "temperature": settings.model_temperature,
            "max_tokens": max_tokens,
        }
        config.update(kwargs)
        return OllamaModel(**config)  # type: ignore[arg-type]

    @staticmethod
    def _create_bedrock_model(
        settings: Settings, max_tokens: int, **kwargs
    ) -> BedrockModel:
        """Create a Bedrock model instance with retry config."""
        # Adaptive retry mode backs off with jitter on throttling
        boto_config = BotocoreConfig(
            retries={
                "max_attempts": 10,
                "mode": "adaptive",
            },
            connect_timeout=30,
            read_timeout=120,
        )

        config = {
            "model_id": settings.bedrock_model,
            "temperature": settings.model_temperature,
            "max_tokens": max_tokens,
            "boto_client_config": boto_config,
        }
        config.update(kwargs)
        return BedrockModel(**config)  # type: ignore[arg-type]
