"""
Language model configuration settings.

Settings for the Gemini chat model that turns a topic into Mermaid source.

Dependencies: pydantic, pydantic_settings
System role: Model client configuration for diagram generation
"""

from pydantic import Field, SecretStr
from pydantic_settings import SettingsConfigDict

from backend.configs.base import BaseSettings


class LLMSettings(BaseSettings):
    """Gemini model configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GEMINI_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: SecretStr | None = Field(
        default=None,
        description="Google API key (falls back to GOOGLE_API_KEY when unset)",
    )
    model_id: str = Field(
        default="gemini-3-flash-preview",
        description="Gemini model identifier",
    )
    temperature: float = Field(
        default=0.0,
        ge=0.0,
        le=2.0,
        description="Sampling temperature (0.0 for deterministic output)",
    )
    max_retries: int = Field(
        default=2,
        ge=0,
        description="Retries performed by the model client on transient errors",
    )
    timeout_seconds: float = Field(
        default=60.0,
        gt=0,
        description="Per-request timeout for the model call",
    )
