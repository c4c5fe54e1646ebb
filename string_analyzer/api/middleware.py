# This file installs the cross-cutting HTTP middleware shared by both services.
# It adds request IDs, timing headers, Prometheus request metrics, and optional request logging.
# Metric objects are module level so two apps in one process share a single registry entry.

from __future__ import annotations

import logging
import time
import uuid

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Gauge, Histogram, generate_latest
from starlette.middleware.base import RequestResponseEndpoint

from string_analyzer.api.api_config import ApiConfig

LOGGER = logging.getLogger("api.requests")

API_HTTP_REQUESTS_TOTAL = Counter(
    "api_http_requests_total",
    "Total number of HTTP requests processed by the API.",
    ["service", "method", "path", "status_code"],
)
API_HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "api_http_request_duration_seconds",
    "API request duration in seconds.",
    ["service", "method", "path"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, 10),
)
API_HTTP_INFLIGHT_REQUESTS = Gauge(
    "api_http_inflight_requests",
    "Number of API requests currently being processed.",
    ["service", "method"],
)


def _route_label(request: Request) -> str:
    # Templated path keeps label cardinality bounded for /strings/{string_value:path}.
    route = request.scope.get("route")
    return getattr(route, "path", None) or request.url.path


def install_middleware(app: FastAPI, *, config: ApiConfig, service_name: str) -> None:
    """Attach CORS, request context, and metrics endpoint to `app`."""

    if config.allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.allowed_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.middleware("http")
    async def request_context_middleware(
        request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id

        method_label = request.method
        started = time.perf_counter()
        status_code = 500
        inflight = API_HTTP_INFLIGHT_REQUESTS.labels(service=service_name, method=method_label)
        inflight.inc()
        try:
            response: Response = await call_next(request)
            status_code = response.status_code
            duration_ms = (time.perf_counter() - started) * 1000.0

            response.headers["x-request-id"] = request_id
            response.headers["x-response-time-ms"] = f"{duration_ms:.2f}"

            if config.enable_request_logging:
                LOGGER.info(
                    "request_id=%s method=%s path=%s status=%s duration_ms=%.2f",
                    request_id,
                    request.method,
                    request.url.path,
                    response.status_code,
                    duration_ms,
                )
            return response
        finally:
            path_label = _route_label(request)
            API_HTTP_REQUESTS_TOTAL.labels(
                service=service_name,
                method=method_label,
                path=path_label,
                status_code=str(status_code),
            ).inc()
            API_HTTP_REQUEST_DURATION_SECONDS.labels(
                service=service_name,
                method=method_label,
                path=path_label,
            ).observe(time.perf_counter() - started)
            inflight.dec()

    @app.get("/metrics", include_in_schema=False)
    def metrics() -> Response:
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
