# This file builds the strings FastAPI application and registers its routers.
# Startup behavior, middleware, and error handling are configured in one place.

from __future__ import annotations

from fastapi import FastAPI

from string_analyzer.api.api_config import get_api_config
from string_analyzer.api.error_handlers import register_error_handlers
from string_analyzer.api.middleware import install_middleware
from string_analyzer.api.routers.health import router as health_router
from string_analyzer.api.routers.strings import router as strings_router
from string_analyzer.common.logging import configure_logging

SERVICE_NAME = "strings"


def create_app() -> FastAPI:
    """Create configured strings API application instance."""

    configure_logging()
    config = get_api_config()

    app = FastAPI(
        title=config.api_name,
        description=(
            "Analyzes submitted strings (length, palindrome check, unique characters, word count, "
            "SHA-256 hash, character frequency), keeps them in memory, and supports structured "
            "and natural language filtering."
        ),
        version=config.app_version,
        openapi_tags=[
            {"name": "health", "description": "Service liveness and version metadata."},
            {"name": "strings", "description": "Analyzed string records and filters."},
        ],
    )
    app.state.service_name = config.api_name

    install_middleware(app, config=config, service_name=SERVICE_NAME)
    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(strings_router)

    return app


app = create_app()
