"""Type-safe environment configuration using Pydantic Settings."""

from typing import Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration loaded from environment variables.

    Every field has a default so the library works without any
    environment set up. Secrets are masked in string representations.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # Ignore extra fields in .env
        env_ignore_empty=True,
    )

    APP_NAME: str = Field(
        default="github-trending",
        description="Application name"
    )

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Application environment"
    )

    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level"
    )

    DEBUG: bool = Field(
        default=False,
        description="Debug mode flag"
    )

    API_TIMEOUT: float = Field(
        default=30.0,
        description="HTTP timeout in seconds",
        gt=0
    )

    # HTTP transport
    HTTP_PROXY_URL: str | None = Field(
        default=None,
        description="Upstream proxy URL for every outbound request"
    )

    USE_COMPRESSION: bool = Field(
        default=True,
        description="Request gzip/deflate transfer encoding for pages"
    )

    USER_AGENT: str = Field(
        default="github-trending-python",
        description="User-Agent header sent with every request"
    )

    # Upstream endpoints
    GITHUB_URL: str = Field(
        default="https://github.com",
        description="Base URL of the hosting site"
    )

    GITHUB_API_URL: str = Field(
        default="https://api.github.com",
        description="Base URL of the REST API"
    )

    LANGUAGES_URL: str = Field(
        default="https://raw.githubusercontent.com/github/linguist/master/lib/linguist/languages.yml",
        description="Language definition document"
    )

    # Secret fields - masked in repr
    GITHUB_TOKEN: SecretStr | None = Field(
        default=None,
        description="Token for the REST API"
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard levels."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                f"LOG_LEVEL must be one of {valid_levels}, got '{v}'"
            )
        return v_upper

    @field_validator("GITHUB_URL", "GITHUB_API_URL")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    def get_github_token(self) -> str | None:
        """Get the API token value if set."""
        return self.GITHUB_TOKEN.get_secret_value() if self.GITHUB_TOKEN else None


# Singleton instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get the application settings singleton.

    Loads settings from environment variables and .env file on first call.
    Subsequent calls return the cached instance.

    Returns:
        Settings: The application settings instance

    Raises:
        ValidationError: If an environment variable holds an invalid value
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset the settings singleton. Useful for testing."""
    global _settings
    _settings = None
