"""Runtime configuration for the addon API."""
from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from backend.resolver.fetcher import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from backend.resolver.metadata import PLACEHOLDER_POSTER
from backend.resolver.scrapers import CuevanaScraper, PelisplusScraper


class AddonSettings(BaseSettings):
    """Environment-aware settings for the addon service."""

    redis_url: str = Field(
        default="redis://localhost:6379/0",
        description="Connection URL for the Redis cache (fakeredis:// for in-process).",
    )
    primary_base_url: str = Field(
        default=CuevanaScraper.DEFAULT_BASE_URL,
        description="Page URL prefix of the primary source; the content id is appended.",
    )
    failover_base_url: str = Field(
        default=PelisplusScraper.DEFAULT_BASE_URL,
        description="Page URL prefix of the failover source; the content id is appended.",
    )
    fetch_timeout: float = Field(
        default=DEFAULT_TIMEOUT,
        gt=0,
        description="Per-request timeout in seconds for outbound scraping calls.",
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT, description="User-Agent header sent to scraped sites."
    )
    placeholder_poster: str = Field(
        default=PLACEHOLDER_POSTER, description="Poster URL used by metadata stubs."
    )
    host: str = Field(default="0.0.0.0", description="Bind address for the development server.")
    port: int = Field(default=7000, description="Bind port for the development server.")

    model_config = SettingsConfigDict(
        env_prefix="STREAMADDON_",
        env_file=".env",
        env_file_encoding="utf-8",
    )
