# This file defines liveness and version endpoints shared by both services.
# The service name comes from app state so one router serves the strings and profile apps alike.

from __future__ import annotations

import subprocess
from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Request

from string_analyzer.api.api_config import ApiConfig
from string_analyzer.api.dependencies import get_config
from string_analyzer.api.schemas.health_schemas import HealthResponse, VersionResponse

router = APIRouter(tags=["health"])
ConfigDep = Annotated[ApiConfig, Depends(get_config)]


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


def _git_commit() -> str | None:
    try:
        completed = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            check=True,
            capture_output=True,
            text=True,
        )
    except (OSError, subprocess.CalledProcessError):
        return None
    return completed.stdout.strip() or None


def _service_name(request: Request, config: ApiConfig) -> str:
    return str(getattr(request.app.state, "service_name", config.api_name))


@router.get("/health", response_model=HealthResponse)
def health(
    request: Request,
    config: ConfigDep,
) -> dict[str, object]:
    return {
        "request_id": request.state.request_id,
        "status": "ok",
        "environment": config.environment,
        "service_name": _service_name(request, config),
        "timestamp": _utc_now(),
    }


@router.get("/version", response_model=VersionResponse)
def version(
    request: Request,
    config: ConfigDep,
) -> dict[str, object]:
    return {
        "request_id": request.state.request_id,
        "app_version": config.app_version,
        "git_commit": _git_commit(),
        "project": _service_name(request, config),
        "version": config.app_version,
        "timestamp": _utc_now(),
    }
