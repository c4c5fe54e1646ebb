# This file builds the profile FastAPI application.
# It is deployed separately from the strings service and shares only the ambient plumbing.

from __future__ import annotations

from fastapi import FastAPI

from string_analyzer.api.api_config import get_api_config
from string_analyzer.api.error_handlers import register_error_handlers
from string_analyzer.api.middleware import install_middleware
from string_analyzer.api.routers.health import router as health_router
from string_analyzer.api.routers.profile import router as profile_router
from string_analyzer.common.logging import configure_logging

SERVICE_NAME = "profile"


def create_profile_app() -> FastAPI:
    """Create configured profile API application instance."""

    configure_logging()
    config = get_api_config()

    app = FastAPI(
        title=config.profile_api_name,
        description="Returns a static profile together with a random cat fact from catfact.ninja.",
        version=config.app_version,
        openapi_tags=[
            {"name": "health", "description": "Service liveness and version metadata."},
            {"name": "profile", "description": "Profile with a live cat fact."},
        ],
    )
    app.state.service_name = config.profile_api_name

    install_middleware(app, config=config, service_name=SERVICE_NAME)
    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(profile_router)

    return app


app = create_profile_app()
