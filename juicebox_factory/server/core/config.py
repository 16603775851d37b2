"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.

Grouped settings use double underscore (__) as the nested delimiter. For example,
``DATABASE__URL`` maps to ``settings.database.url`` and ``GITHUB__TOKEN`` maps to
``settings.github.token``.
"""

from typing import Optional

from pydantic import BaseModel, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

# =====================================================================
# Grouped Configuration Models
# =====================================================================


class DatabaseConfig(BaseModel):
    """Relational store configuration."""

    url: str = Field(
        default="sqlite+aiosqlite:///./juicebox_factory.db",
        description="Async database connection URL (postgresql+asyncpg or sqlite+aiosqlite)",
    )
    echo: bool = Field(default=False, description="Echo SQL statements to the log")
    auto_create: bool = Field(
        default=True,
        description="Create all tables from ORM metadata on startup",
    )


class AIProviderConfig(BaseModel):
    """LLM provider configuration used by the live AI service."""

    model: str = Field(
        default="gpt-4o-mini",
        description="OpenAI chat model name",
    )
    timeout: float = Field(default=30.0, gt=0, description="Per-request timeout in seconds")


class GitHubConfig(BaseModel):
    """GitHub REST API configuration."""

    token: Optional[str] = Field(default=None, description="GitHub token; enables live discovery")
    api_url: str = Field(default="https://api.github.com", description="GitHub REST API base URL")
    timeout: float = Field(default=10.0, gt=0, description="HTTP timeout in seconds")


class NpmConfig(BaseModel):
    """NPM registry configuration."""

    registry_url: str = Field(default="https://registry.npmjs.org", description="NPM registry base URL")
    downloads_url: str = Field(default="https://api.npmjs.org", description="NPM download counts API base URL")
    live: bool = Field(default=False, description="Query the live NPM registry during discovery")
    timeout: float = Field(default=10.0, gt=0, description="HTTP timeout in seconds")


class ScoringConfig(BaseModel):
    """Score aggregator configuration."""

    batch_delay_seconds: float = Field(
        default=0.1,
        ge=0.0,
        description="Pause between tools when rescoring the whole catalog",
    )


class SearchConfig(BaseModel):
    """Search ranker configuration."""

    default_limit: int = Field(default=20, ge=1, description="Default number of search results")


class NotificationsConfig(BaseModel):
    """Notification broker configuration."""

    queue_size: int = Field(default=100, ge=1, description="Per-subscription buffered event count")


class CORSConfig(BaseModel):
    """CORS configuration."""

    origins: list[str] = Field(default=["*"], description="Allowed CORS origins (use * for all)")
    allow_credentials: bool = Field(default=True, description="Allow credentials in CORS requests")
    allow_methods: list[str] = Field(default=["*"], description="Allowed HTTP methods (use * for all)")
    allow_headers: list[str] = Field(default=["*"], description="Allowed HTTP headers (use * for all)")


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    # =====================================================================
    # Pydantic Configuration
    # =====================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
        populate_by_name=True,
    )

    # =====================================================================
    # JuiceBox Factory Server Configuration
    # =====================================================================
    server_host: str = Field(
        default="0.0.0.0",
        description="JuiceBox Factory server host address to bind to",
        alias="JUICEBOX_SERVER_HOST",
    )
    server_port: int = Field(
        default=8000,
        description="JuiceBox Factory server port number",
        alias="JUICEBOX_SERVER_PORT",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="JUICEBOX_LOG_LEVEL",
    )
    log_format: str = Field(
        default="detailed",
        description="Log format (simple, detailed, json)",
        alias="LOG_FORMAT",
    )
    log_file_dir: str = Field(default="logs", description="Directory for the log file", alias="LOG_FILE_DIR")
    enable_file_logging: bool = Field(
        default=False,
        description="Also write DEBUG logs to LOG_FILE_DIR",
        alias="ENABLE_FILE_LOGGING",
    )

    # =====================================================================
    # LLM Provider Credentials
    # =====================================================================
    openai_api_key: Optional[SecretStr] = Field(
        default=None,
        description="OpenAI API key; when unset the heuristic AI service is used",
        alias="OPENAI_API_KEY",
    )

    # =====================================================================
    # Grouped Configuration
    # =====================================================================
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    ai: AIProviderConfig = Field(default_factory=AIProviderConfig)
    github: GitHubConfig = Field(default_factory=GitHubConfig)
    npm: NpmConfig = Field(default_factory=NpmConfig)
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    notifications: NotificationsConfig = Field(default_factory=NotificationsConfig)
    cors: CORSConfig = Field(default_factory=CORSConfig)

    @property
    def ai_enabled(self) -> bool:
        """Whether a live LLM provider is configured."""
        return bool(self.openai_api_key and self.openai_api_key.get_secret_value())


settings = Settings()
