"""
Application Settings

Centralized configuration using Pydantic Settings for type safety and validation.
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with validation and type safety."""

    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore", protected_namespaces=("settings_",)
    )

    # Web-grounded search provider
    perplexity_api_key: str = ""
    perplexity_base_url: str = "https://api.perplexity.ai"
    perplexity_model: str = "llama-3.1-sonar-small-128k-online"
    search_system_prompt: str = (
        "You are a helpful research assistant. "
        "Provide comprehensive, factual information with sources."
    )
    search_timeout_seconds: float = 60.0
    search_max_retries: int = 3

    # Analyzer model settings
    model_type: Literal["ollama", "bedrock"] = "bedrock"
    model_temperature: float = 0.0
    analysis_max_tokens: int = 4096

    # Bedrock settings
    bedrock_model: str = "anthropic.claude-3-5-sonnet-20241022-v2:0"

    # Ollama settings
    ollama_host: str = "http://localhost:11434"
    ollama_model: str = "gpt-oss:20b"

    # Research cache
    research_cache_ttl_seconds: float = 3600

    log_dir: str = "logs"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
