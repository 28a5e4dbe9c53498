"""Application configuration."""

from pathlib import Path
from typing import Literal
from pydantic import BaseModel, Field, computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SiteSettings(BaseModel):
    """Public site metadata."""

    name: str = "BlogDev"
    author: str = "Luan Frezarin"
    locale: str = "pt-BR"
    url: str = "https://blogdev.luanfrezarin.dev"


class ListingSettings(BaseModel):
    """Article listing configuration."""

    # Page size of the blog listing page
    posts_per_page: int = Field(default=6, ge=1)

    # Page size of the list endpoint when no limit is given
    default_limit: int = Field(default=10, ge=1)
    max_limit: int = Field(default=100, ge=1)

    # Sidebar widgets
    trending_limit: int = Field(default=5, ge=1)
    related_limit: int = Field(default=3, ge=1)


class ContentSettings(BaseModel):
    """Article catalog source."""

    # JSON file with article records. When unset the bundled seed is used.
    # Can be set via CONTENT__ARTICLES_FILE env var
    articles_file: Path | None = None

    # Whether the comment store starts with the demo comments
    seed_comments: bool = True


class APISettings(BaseModel):
    """Public API configuration (CORS origin)."""

    protocol: Literal["http", "https"]
    frontend_host: str

    @computed_field
    @property
    def frontend_url(self) -> str:
        """Frontend URL allowed by CORS.

        In development: http://localhost:3000
        In production: https://blogdev.luanfrezarin.dev
        """
        if self.frontend_host == "localhost":
            return "http://localhost:3000"
        else:
            return f"{self.protocol}://{self.frontend_host}"


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override:

    Development (default):
        HOST=localhost
        PORT=8000
        ENVIRONMENT=development
        -> API: http://localhost:8000
        -> Frontend: http://localhost:3000

    Production:
        HOST=api.blogdev.luanfrezarin.dev
        ENVIRONMENT=production
        FRONTEND_HOST=blogdev.luanfrezarin.dev
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows LISTING__POSTS_PER_PAGE syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Git commit SHA (loaded from version.txt file or defaults to "unknown")
    git_sha: str = "unknown"

    host: str = "localhost"
    port: int = 8000
    frontend_host: str = "localhost"

    # Nested settings
    # Overwritten in validator
    api: APISettings = APISettings(protocol="http", frontend_host="localhost")
    site: SiteSettings = SiteSettings()
    listing: ListingSettings = ListingSettings()
    content: ContentSettings = ContentSettings()
    observability: ObservabilitySettings = ObservabilitySettings()

    @model_validator(mode="after")
    def initialize_api_settings(self) -> "Settings":
        """Initialize API settings from host and environment."""
        protocol: Literal["http", "https"] = (
            "http" if self.environment in ("test", "development") else "https"
        )

        self.api = APISettings(
            protocol=protocol,
            frontend_host=self.frontend_host,
        )

        self.git_sha = self._load_git_sha()

        return self

    @staticmethod
    def _load_git_sha() -> str:
        """Load git SHA from version file.

        Returns:
            Git SHA if version file exists, otherwise "unknown"
        """
        version_file = Path("/app/version.txt")
        if version_file.exists():
            try:
                return version_file.read_text().strip()
            except OSError:
                return "unknown"
        return "unknown"
