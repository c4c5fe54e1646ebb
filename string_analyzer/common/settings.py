"""
Process-wide settings loaded from environment variables.
Service-specific knobs live in `string_analyzer.api.api_config` and `string_analyzer.deploy.deploy_config`;
this module only covers what every entrypoint needs before anything else starts.
"""

from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseModel):
    """Typed runtime configuration."""

    model_config = ConfigDict(extra="ignore")

    PROJECT_NAME: str = "string-analyzer"
    ENV: str = "local"
    LOG_LEVEL: str = "INFO"

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            supported = ", ".join(sorted(_LOG_LEVELS))
            raise ValueError(f"LOG_LEVEL must be one of {supported}, got {value!r}")
        return level


def load_settings(*, load_env: bool = True) -> Settings:
    """Load and validate settings from `.env` and the process environment."""

    if load_env:
        load_dotenv()

    values = {key: os.environ[key] for key in Settings.model_fields if os.getenv(key)}
    try:
        return Settings.model_validate(values)
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached accessor for application settings."""

    return load_settings()
