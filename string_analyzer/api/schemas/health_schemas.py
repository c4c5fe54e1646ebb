# This file defines response schemas for the health and version endpoints.
# The models include request tracing so monitoring checks can be correlated with logs.

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class HealthResponse(BaseModel):
    request_id: str
    status: str
    environment: str
    service_name: str
    timestamp: datetime


class VersionResponse(BaseModel):
    request_id: str
    app_version: str
    git_commit: str | None = None
    project: str
    version: str
    timestamp: datetime
