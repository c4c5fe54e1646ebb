# This file defines runtime settings for both HTTP services in one place.
# The config loader reads environment variables and applies safe defaults for local development.
# Validators reject non-positive timeouts and cat fact URLs without an http(s) scheme.

from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

from string_analyzer import __version__

DEFAULT_CATFACT_URL = "https://catfact.ninja/fact"


class ApiConfig(BaseModel):
    """Typed API runtime configuration."""

    model_config = ConfigDict(extra="ignore")

    api_name: str = "String Analyzer API"
    profile_api_name: str = "Profile API"
    app_version: str = __version__
    host: str = "0.0.0.0"
    port: int = 8080
    profile_port: int = 8081
    environment: str = "local"
    enable_request_logging: bool = False
    allowed_origins: list[str] = Field(default_factory=list)
    catfact_url: str = DEFAULT_CATFACT_URL
    catfact_timeout_seconds: float = 5.0
    profile_email: str = "you@example.com"
    profile_name: str = "Your Name"
    profile_stack: str = "Python, FastAPI"

    @field_validator("port", "profile_port")
    @classmethod
    def validate_port(cls, value: int) -> int:
        if not 0 < value < 65536:
            raise ValueError("Port must be between 1 and 65535.")
        return value

    @field_validator("catfact_timeout_seconds")
    @classmethod
    def validate_positive_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("Value must be greater than 0.")
        return value

    @field_validator("catfact_url")
    @classmethod
    def validate_catfact_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("catfact_url must start with 'http://' or 'https://'.")
        return value


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "y", "on"}:
        return True
    if value in {"0", "false", "no", "n", "off"}:
        return False
    raise ValueError(f"{name} must be boolean-like, got {raw!r}")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return float(raw)


def _env_list(name: str, default: list[str] | None = None) -> list[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default or [])
    return [item.strip() for item in raw.split(",") if item.strip()]


def load_api_config(*, load_env: bool = True) -> ApiConfig:
    """Load API configuration from `.env` and process environment."""

    if load_env:
        load_dotenv()

    defaults = ApiConfig()
    config_values: dict[str, object] = {
        "api_name": os.getenv("API_NAME", defaults.api_name),
        "profile_api_name": os.getenv("PROFILE_API_NAME", defaults.profile_api_name),
        "app_version": os.getenv("APP_VERSION", defaults.app_version),
        "host": os.getenv("API_HOST", defaults.host),
        "port": _env_int("API_PORT", defaults.port),
        "profile_port": _env_int("PROFILE_API_PORT", defaults.profile_port),
        "environment": os.getenv("ENV", defaults.environment),
        "enable_request_logging": _env_bool("API_ENABLE_REQUEST_LOGGING", False),
        "allowed_origins": _env_list("API_ALLOWED_ORIGINS", []),
        "catfact_url": os.getenv("CATFACT_URL", defaults.catfact_url),
        "catfact_timeout_seconds": _env_float(
            "CATFACT_TIMEOUT_SECONDS", defaults.catfact_timeout_seconds
        ),
        "profile_email": os.getenv("PROFILE_EMAIL", defaults.profile_email),
        "profile_name": os.getenv("PROFILE_NAME", defaults.profile_name),
        "profile_stack": os.getenv("PROFILE_STACK", defaults.profile_stack),
    }
    return ApiConfig.model_validate(config_values)


@lru_cache(maxsize=1)
def get_api_config() -> ApiConfig:
    """Cached accessor for API config."""

    return load_api_config()
