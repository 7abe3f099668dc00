"""Application configuration."""
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "Charger Map API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Station dataset
    STATIONS_DATA_PATH: str = str(PACKAGE_DIR / "data" / "stations.json")

    # Map defaults (Moscow city center)
    DEFAULT_MAP_CENTER_LATITUDE: float = 55.751244
    DEFAULT_MAP_CENTER_LONGITUDE: float = 37.618423

    # Minimum calculated power in kW
    DEFAULT_POWER_FILTER: float = 0.0

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="allow"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
