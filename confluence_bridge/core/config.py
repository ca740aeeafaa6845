"""
Confluence Bridge - Application Configuration

Patterns Applied:
- Pydantic Settings with SettingsConfigDict
- Environment variable prefix CONFLUENCE_ for every setting
- Settings resolved per invocation and passed explicitly into the pipeline

Anti-Patterns Avoided:
- Ambient os.environ reads inside the pipeline
- Cached settings hiding environment changes between invocations
"""

from __future__ import annotations

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from confluence_bridge.pipeline.models import Credentials

DEFAULT_LIMIT = 2
DEFAULT_PACING_INTERVAL = 1.0

class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings can be overridden via environment variables with CONFLUENCE_ prefix.
    Example: CONFLUENCE_BEARER_TOKEN=..., CONFLUENCE_LIMIT=5

    The result limit also honours a bare LIMIT variable for compatibility with
    existing deployments of the tool.
    """

    # Confluence backend
    base_url: str = "https://confluence.lexisnexis.dev"
    search_path: str = "/rest/api/search"
    content_path: str = "/rest/api/content"
    client_id: str = "next.ui.search"
    bearer_token: SecretStr | None = None

    # Pipeline behaviour
    limit: int = Field(
        default=DEFAULT_LIMIT,
        ge=1,
        validation_alias=AliasChoices("CONFLUENCE_LIMIT", "LIMIT"),
    )
    pacing_interval: float = Field(default=DEFAULT_PACING_INTERVAL, ge=0.0)
    request_timeout: float = Field(default=30.0, gt=0.0)

    # Application metadata
    service_name: str = "confluence-bridge"
    version: str = "1.0.0"
    environment: str = "development"

    # Logging configuration
    log_level: str = "INFO"
    log_json: bool = True

    # Tracing configuration
    tracing_enabled: bool = False
    tracing_console_export: bool = False

    model_config = SettingsConfigDict(
        env_prefix="CONFLUENCE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    def credentials(self) -> Credentials | None:
        """Return bearer credentials, or None when no usable token is configured."""
        if self.bearer_token is None:
            return None
        token = self.bearer_token.get_secret_value().strip()
        if not token:
            return None
        return Credentials(bearer_token=token)

def get_settings() -> Settings:
    """Get application settings instance.

    A fresh instance is built on every call so that each tool invocation sees
    the current environment.

    Returns:
        Settings instance with values from environment
    """
    return Settings()
