# This file provides shared helpers for API endpoint tests.
# Tests override service dependencies so no real network calls or shared state leak between cases.

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.testclient import TestClient

from string_analyzer.api.api_config import ApiConfig
from string_analyzer.api.app import app as strings_app
from string_analyzer.api.dependencies import (
    get_config,
    get_profile_service,
    get_string_service,
)
from string_analyzer.api.profile_app import app as profile_app
from string_analyzer.api.services.string_service import StringService
from string_analyzer.storage.store import InMemoryStringStore


def build_test_config(**overrides: Any) -> ApiConfig:
    """Create deterministic API config for tests."""

    values: dict[str, Any] = {
        "api_name": "Test String API",
        "profile_api_name": "Test Profile API",
        "app_version": "0.1.0",
        "host": "0.0.0.0",
        "port": 8080,
        "profile_port": 8081,
        "environment": "test",
        "enable_request_logging": False,
        "allowed_origins": [],
        "catfact_url": "https://catfact.test/fact",
        "catfact_timeout_seconds": 2.0,
        "profile_email": "dev@example.com",
        "profile_name": "Test Developer",
        "profile_stack": "Python, FastAPI",
    }
    values.update(overrides)
    return ApiConfig(**values)


def build_string_service(config: ApiConfig | None = None) -> StringService:
    return StringService(config=config or build_test_config(), store=InMemoryStringStore())


@contextmanager
def _scoped_client(app: FastAPI, overrides: dict[Any, Any]) -> Iterator[TestClient]:
    app.dependency_overrides.update(overrides)
    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()


@contextmanager
def strings_test_client(
    *,
    config: ApiConfig | None = None,
    string_service: StringService | None = None,
) -> Iterator[TestClient]:
    """Yield a TestClient for the strings app backed by a fresh in-memory store."""

    resolved_config = config or build_test_config()
    service = string_service or build_string_service(resolved_config)
    overrides = {
        get_config: lambda: resolved_config,
        get_string_service: lambda: service,
    }
    with _scoped_client(strings_app, overrides) as client:
        yield client


@contextmanager
def profile_test_client(
    *,
    config: ApiConfig | None = None,
    profile_service: Any | None = None,
) -> Iterator[TestClient]:
    """Yield a TestClient for the profile app with an injected profile service."""

    resolved_config = config or build_test_config()
    overrides: dict[Any, Any] = {get_config: lambda: resolved_config}
    if profile_service is not None:
        overrides[get_profile_service] = lambda: profile_service
    with _scoped_client(profile_app, overrides) as client:
        yield client
