"""Configuration using Pydantic Settings for automatic env var support."""
from __future__ import annotations

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .formats import DEFAULT_INPUT_FORMAT, DEFAULT_OUTPUT_FORMAT


class Settings(BaseSettings):
    """Conversion settings, fixed for the lifetime of one invocation.

    Supports:
    - Environment variables (EPOCHCONV_FROM_FORMAT, EPOCHCONV_TO_FORMAT, EPOCHCONV_JSON_LOGS)
    - Explicit overrides from the command line
    """

    from_format: str = Field(default=DEFAULT_INPUT_FORMAT)
    to_format: str = Field(default=DEFAULT_OUTPUT_FORMAT)
    json_logs: bool = Field(default=False)

    model_config = SettingsConfigDict(
        env_prefix="EPOCHCONV_",
        frozen=True,
    )


def load_settings(**overrides: Any) -> Settings:
    """Build settings; ``None`` overrides fall through to env vars and defaults."""
    return Settings(**{key: value for key, value in overrides.items() if value is not None})


__all__ = ["Settings", "load_settings"]
