"""Application settings and configuration."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    app_name: str = "Trade Portfolio Tracker"
    app_version: str = "0.1.0"

    # Ledger storage
    database_url: str = "sqlite:///./trades.db"

    log_level: str = "INFO"

    # HTTP server
    port: int = 4000
    cors_origins: list[str] = ["*"]

    # Market data settings
    price_cache_ttl_seconds: int = 60
    quote_provider: str = "alphavantage"  # alphavantage | yfinance | stub
    alpha_vantage_key: Optional[str] = None
    quote_timeout_seconds: float = 10.0

    def is_sqlite(self) -> bool:
        """Return True when the ledger lives in SQLite."""
        return self.database_url.startswith("sqlite")


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance (used by tests and embedding apps)."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
