# This file implements the HTTP client for the third-party cat fact API.
# Transport failures, bad statuses, and malformed payloads all surface as one exception type.

from __future__ import annotations

from typing import Any

import requests

from string_analyzer.api.api_config import DEFAULT_CATFACT_URL


class CatFactUnavailableError(RuntimeError):
    """Raised when a cat fact cannot be retrieved."""


class CatFactClient:
    def __init__(
        self,
        *,
        base_url: str = DEFAULT_CATFACT_URL,
        timeout_seconds: float = 5.0,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout_seconds = timeout_seconds
        self.session = session or requests.Session()

    def get_fact(self) -> str:
        payload = self._request_json()
        fact = payload.get("fact")
        if not isinstance(fact, str) or not fact:
            raise CatFactUnavailableError(f"Cat fact payload from {self.base_url} has no 'fact' field")
        return fact

    def _request_json(self) -> dict[str, Any]:
        try:
            response = self.session.get(
                self.base_url,
                headers={"Accept": "application/json"},
                timeout=self.timeout_seconds,
            )
        except requests.RequestException as exc:
            raise CatFactUnavailableError(f"Cat fact request failed for {self.base_url}: {exc}") from exc

        if response.status_code >= 400:
            raise CatFactUnavailableError(
                f"Cat fact request failed with status {response.status_code} for {self.base_url}"
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise CatFactUnavailableError(f"Cat fact API did not return valid JSON for {self.base_url}") from exc

        if not isinstance(payload, dict):
            raise CatFactUnavailableError(f"Unexpected payload shape from {self.base_url}")
        return payload
