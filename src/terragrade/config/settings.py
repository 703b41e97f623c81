"""
Application settings using Pydantic.

Provides environment-based configuration loading with TERRAGRADE_ prefix.
The OpenAI credential is also read from the conventional OPENAI_API_KEY.
"""

from typing import Any

from pydantic import AliasChoices, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict, SettingsError

from terragrade.core.errors import ConfigurationError
from terragrade.lockfile.matchers import DEFAULT_REGISTRY_HOSTS


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="TERRAGRADE_",
        extra="ignore",
        populate_by_name=True,
    )

    # Input
    lock_file: str = ".terraform.lock.hcl"
    registry_hosts: list[str] = list(DEFAULT_REGISTRY_HOSTS)

    # Logging
    log_json: bool = False

    # HTTP client settings
    user_agent: str = "terragrade/2.0.0"
    http_max_attempts: int = Field(default=1, ge=1)

    # GitHub existence probe
    github_base_url: str = "https://github.com"
    github_timeout: float = 10.0
    github_delay: float = 0.5

    # OpenSSF Scorecard
    scorecard_base_url: str = "https://api.securityscorecards.dev"
    scorecard_timeout: float = 15.0
    scorecard_delay: float = 1.0
    low_score_threshold: float = 5.0

    # OpenAI analysis
    openai_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("OPENAI_API_KEY", "TERRAGRADE_OPENAI_API_KEY"),
    )
    openai_base_url: str = "https://api.openai.com/v1"
    openai_model: str = "gpt-4o-mini"
    openai_max_tokens: int = 1000
    openai_temperature: float = 0.3
    openai_timeout: float = 60.0
    openai_connect_timeout: float = 30.0


def load_settings(**overrides: Any) -> Settings:
    """Build settings, turning validation failures into ConfigurationError."""
    try:
        return Settings(**overrides)
    except ValidationError as exc:
        raise ConfigurationError(
            "Invalid terragrade configuration",
            details={"errors": exc.error_count()},
        ) from exc
    except SettingsError as exc:
        raise ConfigurationError(
            "Invalid terragrade configuration",
            details={"error": str(exc)},
        ) from exc
