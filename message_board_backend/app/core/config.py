"""Settings for the message board backend."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class IdSettings(BaseModel):
    """Message ID generation settings."""

    format: Literal["uuid4", "hex"] = Field(
        default="uuid4",
        description="uuid4 for canonical dashed UUIDs, hex for 32 char UUIDs",
    )


class MessageBoardSettings(BaseSettings):
    """Application settings resolved from environment and optional .env file.

    Environment variables use the ``MESSAGE_BOARD_`` prefix, nested fields are
    separated by ``__`` (e.g. ``MESSAGE_BOARD_IDS__FORMAT=hex``).
    """

    model_config = SettingsConfigDict(
        env_prefix="MESSAGE_BOARD_",
        env_nested_delimiter="__",
        env_file=".env",
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Root log level")
    log_file: Optional[Path] = Field(default=None, description="Optional log file path")
    ids: IdSettings = Field(default_factory=IdSettings)

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> MessageBoardSettings:
    """Return cached application settings."""
    return MessageBoardSettings()
