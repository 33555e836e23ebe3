"""
Configuration settings, loaded from ``PAGEDRAFT_*`` environment variables
(and a ``.env`` file when the API starts).
"""

from __future__ import annotations

import os
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """pagedraft service configuration."""

    model_config = SettingsConfigDict(env_prefix="PAGEDRAFT_", extra="ignore")

    storage_backend: Literal["filesystem", "memory"] = "filesystem"
    storage_dir: str = Field(
        default_factory=lambda: os.path.join(os.path.expanduser("~"), ".pagedraft_snapshots")
    )

    # Preview cookie
    preview_secret: str = Field(..., min_length=16)
    preview_ttl_seconds: Optional[int] = Field(None, gt=0)
    preview_cookie_name: str = "pagedraft_preview"

    public_base_url: str = ""
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level {v!r}")
        return level
