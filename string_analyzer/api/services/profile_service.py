# This file assembles the profile payload returned by GET /me.
# The user block comes from configuration; the fact is fetched live on every call.

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from string_analyzer.api.api_config import ApiConfig
from string_analyzer.api.services.catfact_client import CatFactClient


class ProfileService:
    def __init__(self, *, config: ApiConfig, catfact_client: CatFactClient) -> None:
        self.config = config
        self.catfact_client = catfact_client

    def get_profile(self) -> dict[str, Any]:
        fact = self.catfact_client.get_fact()
        return {
            "status": "success",
            "user": {
                "email": self.config.profile_email,
                "name": self.config.profile_name,
                "stack": self.config.profile_stack,
            },
            "timestamp": datetime.now(tz=UTC),
            "fact": fact,
        }
