"""Application settings and configuration."""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_default_data_dir() -> Path:
    """Return the default data directory (~/.trip-ledger)."""
    return Path.home() / ".trip-ledger"


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Trip Ledger"
    app_version: str = "0.1.0"

    # Data directory (all app data lives here)
    data_dir: Optional[Path] = None

    # Database URL (derived from data_dir if not set explicitly)
    database_url: Optional[str] = None

    log_level: str = "INFO"

    # All ledger math happens in this currency
    accounting_currency: str = "CAD"

    # Exchange rate provider (stub provider is used when no key is set)
    exchange_rate_api_key: Optional[str] = None
    exchange_rate_api_url: str = "https://v6.exchangerate-api.com/v6"
    rate_provider_timeout_seconds: float = Field(default=10.0, gt=0)
    rate_cache_max_age_hours: int = Field(default=24, gt=0)

    @field_validator("accounting_currency")
    @classmethod
    def validate_accounting_currency(cls, v: str) -> str:
        code = v.strip().upper()
        if len(code) != 3 or not code.isalpha():
            raise ValueError(f"accounting_currency must be a 3-letter code, got {v!r}")
        return code

    def get_data_dir(self) -> Path:
        """Get the data directory, creating it if needed."""
        data_dir = self.data_dir or get_default_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def get_database_url(self) -> str:
        """Get database URL, deriving from data_dir if not set."""
        if self.database_url:
            return self.database_url
        db_path = self.get_data_dir() / "trip_ledger.db"
        return f"sqlite:///{db_path}"

    def get_accounting_currency(self) -> str:
        """Accounting currency code (validated, upper case)."""
        return self.accounting_currency


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Replace the global settings instance (tests, scripts)."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
