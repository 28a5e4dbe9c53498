"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from blog.config import ContentSettings, ListingSettings, Settings, SiteSettings
from blog.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_listing_settings(self, settings: Settings) -> ListingSettings:
        """Provide listing settings."""
        return settings.listing

    @provide(scope=Scope.APP)
    def provide_content_settings(self, settings: Settings) -> ContentSettings:
        """Provide content settings."""
        return settings.content

    @provide(scope=Scope.APP)
    def provide_site_settings(self, settings: Settings) -> SiteSettings:
        """Provide public site metadata."""
        return settings.site
