# This file tests health and version endpoints on both services.
# The tests confirm request IDs and version metadata are always returned.

from __future__ import annotations

from string_analyzer.api.middleware import API_HTTP_INFLIGHT_REQUESTS, API_HTTP_REQUESTS_TOTAL
from tests.api.support import build_test_config, profile_test_client, strings_test_client


def test_health_endpoint_returns_expected_fields() -> None:
    config = build_test_config()
    with strings_test_client(config=config) as client:
        response = client.get("/health")

    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "ok"
    assert payload["environment"] == "test"
    assert payload["request_id"]
    assert "timestamp" in payload
    assert response.headers["x-request-id"] == payload["request_id"]


def test_incoming_request_id_is_echoed() -> None:
    with strings_test_client() as client:
        response = client.get("/health", headers={"x-request-id": "req-123"})

    assert response.json()["request_id"] == "req-123"
    assert response.headers["x-request-id"] == "req-123"
    assert float(response.headers["x-response-time-ms"]) >= 0


def test_version_endpoint_returns_version_metadata() -> None:
    config = build_test_config(app_version="9.9.9")
    with strings_test_client(config=config) as client:
        response = client.get("/version")

    assert response.status_code == 200
    payload = response.json()
    assert payload["app_version"] == "9.9.9"
    assert payload["version"] == "9.9.9"
    assert payload["project"]


def test_profile_service_exposes_health() -> None:
    with profile_test_client() as client:
        response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_metrics_endpoint_exposes_request_counters() -> None:
    with strings_test_client() as client:
        client.get("/health")
        response = client.get("/metrics")

    assert response.status_code == 200
    assert "api_http_requests_total" in response.text


def test_unknown_route_uses_error_envelope() -> None:
    with strings_test_client() as client:
        response = client.get("/does-not-exist")

    assert response.status_code == 404
    payload = response.json()
    assert payload["error_code"] == "ROUTE_NOT_FOUND"
    assert payload["request_id"]


def test_unsupported_method_uses_error_envelope() -> None:
    with strings_test_client() as client:
        response = client.put("/strings", json={"value": "hello"})

    assert response.status_code == 405
    payload = response.json()
    assert payload["error_code"] == "METHOD_NOT_ALLOWED"
    assert payload["request_id"]


def test_metrics_labels_use_route_templates() -> None:
    with strings_test_client() as client:
        for index in range(25):
            assert client.get(f"/strings/missing-{index}").status_code == 404

    inflight_samples = API_HTTP_INFLIGHT_REQUESTS.collect()[0].samples
    assert all("path" not in sample.labels for sample in inflight_samples)
    assert len(inflight_samples) < 10

    request_paths = {
        sample.labels["path"]
        for sample in API_HTTP_REQUESTS_TOTAL.collect()[0].samples
        if sample.labels.get("service") == "strings"
    }
    assert "/strings/{string_value:path}" in request_paths
    assert not any(path.startswith("/strings/missing-") for path in request_paths)
