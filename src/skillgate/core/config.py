# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Application configuration via environment variables and .env files."""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SOURCE_URL = (
    "https://api.github.com/repos/VoltAgent/awesome-openclaw-skills/contents/README.md"
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SKILLGATE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
    )

    # Approved list source
    source_url: str = DEFAULT_SOURCE_URL
    source_host: str = "*"  # restrict to one host, e.g. "github.com"
    list_fetch_timeout: float = 15.0

    # Repository metadata
    api_base_url: str = "https://api.github.com"
    metadata_timeout: float = 10.0
    github_token: str = ""

    @field_validator("api_base_url", mode="before")
    @classmethod
    def _strip_trailing_slash(cls, v: object) -> object:
        return v.rstrip("/") if isinstance(v, str) else v

    # Cache
    cache_path: Path = Path("approved-skills.json")
    cache_ttl: int = 3600  # seconds (default 1 hour)

    # Audit trail
    audit_log_path: Path = Path("audit.log")

    # Logging
    log_level: str = "INFO"
    log_format: str = "text"


def get_settings() -> Settings:
    return Settings()
