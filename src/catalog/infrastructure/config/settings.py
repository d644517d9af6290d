"""Runtime settings, read from ``CATALOG_*`` environment variables or ``.env``."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_prefix="CATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    database_url: str = Field(default="sqlite:///./data/catalog.db")

    # The public disk: files here are served to end users by path.
    public_storage_root: Path = Field(default=Path("storage/public"))
    public_url: str = Field(default="/storage")

    log_level: str = Field(default="INFO")
    log_file: Path | None = Field(default=None)
