# File: pixhash/core/config.py
"""
Library Configuration
"""
from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # PIXHASH_ prefix: the host process owns the bare names (LOG_LEVEL, ...)
    model_config = SettingsConfigDict(
        env_prefix="PIXHASH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    # Logging
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Level of the 'pixhash' logger",
    )

    # OpenCV
    OPENCV_NUM_THREADS: int | None = Field(
        default=None,
        description="If None -> auto: max(1, cpu_count//2)",
    )

    # Profiling
    PROFILE: bool = Field(default=False, description="Time hash calls")
    PROFILE_JSON_LOG: bool = Field(
        default=False,
        description="Emit profile records as JSON lines",
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def upper_level(cls, v):
        return v.strip().upper() if isinstance(v, str) else v


settings = Settings()
