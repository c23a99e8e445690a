"""Application settings and configuration."""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


def get_default_data_dir() -> Path:
    """Return the default data directory."""
    return Path.home() / "Documents" / "Finledger Data"


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    app_name: str = "Financial Operations Ledger"
    app_version: str = "0.1.0"

    # Data directory (ledger file and logs live here)
    data_dir: Optional[Path] = None

    # Ledger JSON document (derived from data_dir if not set explicitly)
    ledger_file: Optional[Path] = None

    log_level: str = "INFO"

    # Display and defaults
    timezone: str = "Europe/Kyiv"
    base_currency: str = "UAH"
    default_role: str = "Reader"

    def get_data_dir(self) -> Path:
        """Get the data directory, creating it if needed."""
        data_dir = self.data_dir or get_default_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def get_ledger_file(self) -> Path:
        """Get the ledger document path, deriving from data_dir if not set."""
        if self.ledger_file:
            return self.ledger_file
        return self.get_data_dir() / "operations.json"

    def get_log_dir(self) -> Path:
        """Get the log directory."""
        log_dir = self.get_data_dir() / "logs"
        log_dir.mkdir(parents=True, exist_ok=True)
        return log_dir


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
