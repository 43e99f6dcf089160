# structview/core/config.py
"""
Central configuration for structview.

Environment variables (prefixed ``STRUCTVIEW_``) override defaults.
"""
from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven settings with sensible defaults."""

    model_config = SettingsConfigDict(
        env_prefix="STRUCTVIEW_", env_file=".env", extra="ignore"
    )

    log_level: str = "INFO"
    log_json: bool = False

    # Extra capability registrations (glob patterns)
    capabilities_config_paths: list[str] = Field(
        default_factory=lambda: ["config/capabilities.yaml"]
    )

    collection_warn_threshold: int = Field(
        default=1000,
        description="Log a warning when a materialized collection is larger than this",
    )

    action_on_unpermitted_parameters: Literal["log", "raise", "ignore"] = Field(
        default="log",
        description="What permit() does with keys that were not whitelisted",
    )

    database_url: str = Field(
        default="sqlite+pysqlite:///:memory:",
        description="SQLAlchemy database URL",
    )


settings = Settings()
