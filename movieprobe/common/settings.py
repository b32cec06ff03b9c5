# movieprobe/common/settings.py
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, Field, AliasChoices, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ProcessConfig(BaseModel):
    # None means "wait for the child to exit"
    probe_timeout_sec: Optional[int] = Field(None, ge=1)
    filter_timeout_sec: Optional[int] = Field(None, ge=1)


class Settings(BaseSettings):
    # -------- App / Env --------
    app_name: str = "movieprobe"
    app_env: str = "development"  # development|test|production
    log_level: str = "INFO"

    # -------- External binaries --------
    ffprobe_bin: str = Field(
        default="ffprobe",
        validation_alias=AliasChoices("FFPROBE_BIN", "ffprobe_bin"),
    )
    ffmpeg_bin: str = Field(
        default="ffmpeg",
        validation_alias=AliasChoices("FFMPEG_BIN", "ffmpeg_bin"),
    )

    # -------- Sub-configs --------
    process: ProcessConfig = ProcessConfig()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper(cls, v):
        return str(v or "INFO").strip().upper()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Use this everywhere you need config:
        from movieprobe.common.settings import get_settings
        cfg = get_settings()
    """
    return Settings()  # pydantic_settings will read from .env automatically
