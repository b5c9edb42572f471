"""Application settings using Pydantic BaseSettings for environment variable management."""

from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings

from credibility_system.errors import ConfigurationError


class Settings(BaseSettings):
    """
    Global application settings loaded from environment variables.

    Attributes:
        huggingface_api_key: HuggingFace Inference API token (required)
        mistral_api_key: Mistral API key (required)
        news_api_key: NewsAPI.org API key (required)
        classifier_model: Zero-shot classification model identifier
        mistral_model: Chat model used for the generative assessment
        max_attempts: Attempts per external call before giving up
        request_timeout: Per-attempt timeout in seconds
        backoff_base: First backoff delay in seconds (doubles per attempt)
        backoff_max: Upper bound for a single backoff delay in seconds
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Log output format (json for production, console for dev)
        report_store_path: Optional JSON file for saved reports
    """

    huggingface_api_key: str = Field(..., description="HuggingFace Inference API token")
    mistral_api_key: str = Field(..., description="Mistral API key")
    news_api_key: str = Field(..., description="NewsAPI.org API key")

    huggingface_api_url: str = Field(
        default="https://api-inference.huggingface.co/models",
        description="Base URL for HuggingFace hosted inference",
    )
    classifier_model: str = Field(
        default="facebook/bart-large-mnli",
        description="Zero-shot classification model",
    )
    mistral_api_url: str = Field(
        default="https://api.mistral.ai/v1/chat/completions",
        description="Mistral chat completions endpoint",
    )
    mistral_model: str = Field(default="mistral-small", description="Mistral model name")
    mistral_temperature: float = Field(
        default=0.1, ge=0.0, le=1.0, description="Sampling temperature for the assessor"
    )
    news_api_url: str = Field(
        default="https://newsapi.org/v2/everything",
        description="NewsAPI everything endpoint",
    )
    news_language: str = Field(default="en", description="NewsAPI language filter")
    news_page_size: int = Field(default=5, ge=1, le=100, description="NewsAPI result cap")

    max_attempts: int = Field(default=3, ge=1, description="Attempts per external call")
    request_timeout: float = Field(
        default=30.0, gt=0, description="Per-attempt timeout in seconds"
    )
    backoff_base: float = Field(default=1.0, ge=0, description="Initial backoff in seconds")
    backoff_max: float = Field(default=5.0, ge=0, description="Backoff ceiling in seconds")

    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Log output format: json or console")

    report_store_path: Optional[str] = Field(
        default=None,
        description="JSON file used by the report store (memory-only when unset)",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }

    @field_validator("huggingface_api_key", "mistral_api_key", "news_api_key")
    @classmethod
    def _credential_present(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("credential must not be empty")
        return value.strip()


def load_settings(**overrides) -> Settings:
    """
    Build Settings, turning validation errors into a ConfigurationError.

    Raises:
        ConfigurationError: A credential is missing or blank, or a value is invalid
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        fields = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
        raise ConfigurationError(
            f"Invalid or missing settings: {', '.join(fields) or 'unknown'}"
        ) from e


# Singleton instance - import this throughout the application
settings = load_settings()
