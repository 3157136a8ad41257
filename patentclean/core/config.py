"""Application configuration via environment variables."""

from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings loaded from environment variables."""

    app_name: str = Field("Patent Export Cleaner", description="Human-readable service name.")
    debug: bool = Field(False, description="Enable FastAPI debug mode.")

    api_v1_prefix: str = Field("/api", description="Root prefix for versioned API routes.")
    allowed_hosts: List[str] = Field(
        default_factory=lambda: ["*"], description="Origins allowed to access the service."
    )

    default_source: str = Field(
        "sumobrain", description="Source preset used when a request does not name one."
    )
    cleaning_config_path: Optional[Path] = Field(
        None, description="Optional JSON file overriding cleaning defaults and dictionaries."
    )
    log_level: str = Field("INFO", description="Logging level for the service.")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


@lru_cache()
def get_settings() -> Settings:
    """Provide a cached Settings instance."""

    return Settings()
