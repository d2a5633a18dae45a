"""Centralized configuration settings."""
from __future__ import annotations

import os
from dataclasses import dataclass, field

from aeo_scanner.config.profiles import ScoringProfile, get_profile


@dataclass
class FetcherSettings:
    """Settings for the page fetcher."""
    request_timeout: int = 10
    max_response_size: int = 10 * 1024 * 1024  # 10 MB
    max_redirects: int = 5
    user_agent: str = "Mozilla/5.0 (compatible; AEO-Scanner/1.0)"


@dataclass
class ScoringSettings:
    """Settings for check scoring."""
    profile_name: str = "strict"

    @property
    def profile(self) -> ScoringProfile:
        return get_profile(self.profile_name)


@dataclass
class APISettings:
    """API-specific settings."""
    cors_origins: list[str] = field(default_factory=lambda: ["*"])


@dataclass
class Settings:
    """Main application settings container."""
    fetcher: FetcherSettings = field(default_factory=FetcherSettings)
    scoring: ScoringSettings = field(default_factory=ScoringSettings)
    api: APISettings = field(default_factory=APISettings)

    debug: bool = False

    def __post_init__(self):
        """Load settings from environment variables."""
        self.debug = os.environ.get("AEO_SCANNER_DEBUG", "").lower() in ("true", "1", "yes")

        # Fetcher overrides
        if timeout := os.environ.get("AEO_SCANNER_REQUEST_TIMEOUT"):
            self.fetcher.request_timeout = int(timeout)
        if max_redirects := os.environ.get("AEO_SCANNER_MAX_REDIRECTS"):
            self.fetcher.max_redirects = int(max_redirects)
        if user_agent := os.environ.get("AEO_SCANNER_USER_AGENT"):
            self.fetcher.user_agent = user_agent

        # Scoring profile; validated eagerly so a typo fails at startup
        if profile_name := os.environ.get("AEO_SCANNER_PROFILE"):
            self.scoring.profile_name = get_profile(profile_name).name

        # API overrides
        if cors := os.environ.get("AEO_API_CORS_ORIGINS"):
            self.api.cors_origins = [o.strip() for o in cors.split(",")]


# Global settings instance
settings = Settings()
