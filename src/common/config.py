"""Project configuration and paths.

Loads settings from config/settings.yaml and environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

# === Paths ===
PROJECT_ROOT = Path(__file__).parent.parent.parent
CONFIG_DIR = PROJECT_ROOT / "config"

# Load .env from project root
load_dotenv(PROJECT_ROOT / ".env")


class DiscogsSettings(BaseModel):
    """Settings for the Discogs API and marketplace pages."""
    api_base_url: str = "https://api.discogs.com"
    user_agent: str = "CannonCdPrices/1.0"
    preferred_country: str = "US"
    request_timeout: int = 30


class BatchSettings(BaseModel):
    """Settings for the appraisal batch run."""
    # Discogs allows 60 requests/minute; one appraisal makes up to 3.
    request_delay_seconds: float = 3.0


class FileSettings(BaseModel):
    """Input, cache and report locations."""
    input_path: str = "CDs.csv"
    cache_path: str = "data.json"
    output_path: str = "Prices.csv"


class Settings(BaseModel):
    """Top-level application settings."""
    discogs: DiscogsSettings = Field(default_factory=DiscogsSettings)
    batch: BatchSettings = Field(default_factory=BatchSettings)
    files: FileSettings = Field(default_factory=FileSettings)

    @classmethod
    def load(cls) -> Settings:
        """Load settings from config/settings.yaml, falling back to defaults."""
        settings_path = CONFIG_DIR / "settings.yaml"
        if settings_path.exists():
            with open(settings_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            return cls(**data)
        return cls()


def get_discogs_api_key() -> str:
    """Get the Discogs API token from environment."""
    key = os.getenv("DISCOGS_API_KEY", "")
    if not key:
        raise ValueError("Environment variable DISCOGS_API_KEY must be set")
    return key


# Singleton settings instance
settings = Settings.load()
