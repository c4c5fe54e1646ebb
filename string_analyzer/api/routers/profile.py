# This file defines the profile endpoint that combines static user details with a live cat fact.

from __future__ import annotations

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends

from string_analyzer.api.dependencies import get_profile_service
from string_analyzer.api.error_handlers import APIError
from string_analyzer.api.schemas.common import ErrorResponse
from string_analyzer.api.schemas.profile_schemas import ProfileResponseV1
from string_analyzer.api.services.catfact_client import CatFactUnavailableError
from string_analyzer.api.services.profile_service import ProfileService

LOGGER = logging.getLogger("profile")

router = APIRouter(tags=["profile"])
ProfileServiceDep = Annotated[ProfileService, Depends(get_profile_service)]


@router.get(
    "/me",
    name="me",
    response_model=ProfileResponseV1,
    responses={502: {"model": ErrorResponse}},
)
def me(service: ProfileServiceDep) -> dict[str, Any]:
    try:
        return service.get_profile()
    except CatFactUnavailableError as exc:
        LOGGER.warning("cat fact lookup failed: %s", exc)
        raise APIError(
            status_code=502,
            error_code="CAT_FACT_UNAVAILABLE",
            message="Unable to fetch a cat fact from the upstream service.",
        ) from exc
