"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from brew.config import AuthSettings, Settings, WalletSettings
from brew.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider.

    Settings are loaded from environment variables and .env file.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_wallet_settings(self, settings: Settings) -> WalletSettings:
        """Provide wallet settings."""
        return settings.wallet
