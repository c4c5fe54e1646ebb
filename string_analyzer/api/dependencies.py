# This file provides dependency factories for FastAPI routes.
# Services are created once and shared through dependency injection so tests can override them.

from __future__ import annotations

from functools import lru_cache

from string_analyzer.api.api_config import ApiConfig, get_api_config
from string_analyzer.api.services.catfact_client import CatFactClient
from string_analyzer.api.services.profile_service import ProfileService
from string_analyzer.api.services.string_service import StringService
from string_analyzer.storage.store import InMemoryStringStore


@lru_cache(maxsize=1)
def get_string_store() -> InMemoryStringStore:
    return InMemoryStringStore()


@lru_cache(maxsize=1)
def get_string_service() -> StringService:
    return StringService(config=get_api_config(), store=get_string_store())


@lru_cache(maxsize=1)
def get_catfact_client() -> CatFactClient:
    config = get_api_config()
    return CatFactClient(
        base_url=config.catfact_url,
        timeout_seconds=config.catfact_timeout_seconds,
    )


@lru_cache(maxsize=1)
def get_profile_service() -> ProfileService:
    return ProfileService(config=get_api_config(), catfact_client=get_catfact_client())


def get_config() -> ApiConfig:
    return get_api_config()
