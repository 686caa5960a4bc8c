"""Runtime configuration for the appraiser."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from src.common.config import settings


@dataclass
class Config:
    """Central configuration loaded from settings and environment variables."""

    # Files
    input_path: str = field(default_factory=lambda: settings.files.input_path)
    cache_path: str = field(default_factory=lambda: settings.files.cache_path)
    output_path: str = field(default_factory=lambda: settings.files.output_path)

    # Rate limiting
    request_delay_seconds: float = field(
        default_factory=lambda: settings.batch.request_delay_seconds
    )

    # Discogs
    api_base_url: str = field(default_factory=lambda: settings.discogs.api_base_url)
    user_agent: str = field(default_factory=lambda: settings.discogs.user_agent)
    preferred_country: str = field(
        default_factory=lambda: settings.discogs.preferred_country
    )
    request_timeout: int = field(default_factory=lambda: settings.discogs.request_timeout)

    def __post_init__(self) -> None:
        """Load overrides from environment."""
        if path := os.getenv("APPRAISER_INPUT_PATH"):
            self.input_path = path
        if path := os.getenv("APPRAISER_CACHE_PATH"):
            self.cache_path = path
        if path := os.getenv("APPRAISER_OUTPUT_PATH"):
            self.output_path = path
        if delay := os.getenv("REQUEST_DELAY_SECONDS"):
            self.request_delay_seconds = float(delay)
        if timeout := os.getenv("REQUEST_TIMEOUT"):
            self.request_timeout = int(timeout)
        if ua := os.getenv("DISCOGS_USER_AGENT"):
            self.user_agent = ua
        if country := os.getenv("DISCOGS_PREFERRED_COUNTRY"):
            self.preferred_country = country
        if url := os.getenv("DISCOGS_API_BASE_URL"):
            self.api_base_url = url.rstrip("/")

    @property
    def search_url(self) -> str:
        return f"{self.api_base_url}/database/search"

    def release_url(self, release_id: int) -> str:
        return f"{self.api_base_url}/releases/{release_id}"

    @staticmethod
    def resolve_path(path: str | Path) -> Path:
        """Resolve a path relative to the current working directory."""
        p = Path(path)
        if p.is_absolute():
            return p
        return Path.cwd() / p

    @property
    def input_abs_path(self) -> Path:
        return self.resolve_path(self.input_path)

    @property
    def cache_abs_path(self) -> Path:
        return self.resolve_path(self.cache_path)

    @property
    def output_abs_path(self) -> Path:
        return self.resolve_path(self.output_path)

