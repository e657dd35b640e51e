"""
Configuration Utility - Fetch and Report Settings

Centralized configuration loading using pydantic-settings.
Defaults reproduce the fixed target page, browser-like headers and timeout.
Only environment variables carrying the POLLEN_ prefix override them
(e.g. POLLEN_LOG_LEVEL=INFO); there is no configuration file.

Usage:
    from utils.config import get_settings

    settings = get_settings()
    url = settings.PAGE_URL
    headers = settings.request_headers()
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from apps.pollen.parser import DEFAULT_KEYWORDS


class Settings(BaseSettings):
    """Application settings, overridable through POLLEN_-prefixed environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="POLLEN_",
        case_sensitive=True,
        extra="ignore",
    )

    # Target page
    PAGE_URL: str = Field(
        default="https://www.accuweather.com/en/nl/leiden/251527/health-activities/251527"
    )
    HTTP_TIMEOUT: float = Field(default=15.0)

    # Request headers (desktop browser)
    USER_AGENT: str = Field(
        default=(
            "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
            "AppleWebKit/537.36 (KHTML, like Gecko) "
            "Chrome/120.0.0.0 Safari/537.36"
        )
    )
    ACCEPT: str = Field(
        default="text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8"
    )
    ACCEPT_LANGUAGE: str = Field(default="en-US,en;q=0.5")
    ACCEPT_ENCODING: str = Field(default="gzip, deflate, br")
    CONNECTION: str = Field(default="keep-alive")
    UPGRADE_INSECURE_REQUESTS: str = Field(default="1")

    # Extraction
    RELEVANCE_KEYWORDS: tuple[str, ...] = Field(default=DEFAULT_KEYWORDS)

    # Report
    REPORT_TITLE: str = Field(default="Pollen Levels - Leiden")
    LOCATION_LABEL: str = Field(default="Leiden, Netherlands")

    # Logging Configuration
    LOG_LEVEL: str = Field(default="WARNING")
    LOG_FORMAT: str = Field(default="text")

    @field_validator("HTTP_TIMEOUT")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("HTTP_TIMEOUT must be positive")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown LOG_LEVEL: {v}")
        return level

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        fmt = v.lower()
        if fmt not in ("text", "json"):
            raise ValueError("LOG_FORMAT must be 'text' or 'json'")
        return fmt

    def request_headers(self) -> dict[str, str]:
        """Build the outbound request headers.

        Returns:
            Header name to value mapping sent with the page request
        """
        return {
            "User-Agent": self.USER_AGENT,
            "Accept": self.ACCEPT,
            "Accept-Language": self.ACCEPT_LANGUAGE,
            "Accept-Encoding": self.ACCEPT_ENCODING,
            "Connection": self.CONNECTION,
            "Upgrade-Insecure-Requests": self.UPGRADE_INSECURE_REQUESTS,
        }


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Singleton Settings instance
    """
    return Settings()

