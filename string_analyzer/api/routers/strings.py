# This file defines the strings endpoints: create, fetch, list with filters, natural language filter, delete.
# Domain exceptions from the service layer are translated into APIError responses here.
# The natural language route is registered before `/{string_value:path}` so it is not captured as a value.
# Values may contain `/`, so the value routes use the path convertor.

from __future__ import annotations

from typing import Annotated, Any
from urllib.parse import quote

from fastapi import APIRouter, Depends, Query, Request, Response, status

from string_analyzer.api.dependencies import get_string_service
from string_analyzer.api.error_handlers import APIError
from string_analyzer.api.schemas.common import ErrorResponse
from string_analyzer.api.schemas.string_schemas import (
    NaturalLanguageFilterResponseV1,
    StringCreateRequest,
    StringListResponseV1,
    StringRecordV1,
)
from string_analyzer.api.services.string_service import (
    ConflictingFiltersError,
    StringService,
    UnparseableQueryError,
    parse_query_filters,
)
from string_analyzer.storage.store import DuplicateStringError, StringNotFoundError

router = APIRouter(prefix="/strings", tags=["strings"])
StringServiceDep = Annotated[StringService, Depends(get_string_service)]

NOT_FOUND_MESSAGE = "String does not exist in the system"
_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
    422: {"model": ErrorResponse},
}


def _invalid_body(message: str = "Invalid request body or missing value field") -> APIError:
    return APIError(status_code=400, error_code="INVALID_REQUEST_BODY", message=message)


def _not_found(value: str) -> APIError:
    return APIError(
        status_code=404,
        error_code="STRING_NOT_FOUND",
        message=NOT_FOUND_MESSAGE,
        details={"value": value},
    )


@router.post(
    "",
    response_model=StringRecordV1,
    status_code=status.HTTP_201_CREATED,
    responses=_ERROR_RESPONSES,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": StringCreateRequest.model_json_schema()}
            },
        }
    },
)
async def create_string(
    request: Request,
    response: Response,
    service: StringServiceDep,
) -> dict[str, Any]:
    try:
        payload = await request.json()
    except ValueError as exc:
        raise _invalid_body() from exc

    if not isinstance(payload, dict) or "value" not in payload or payload["value"] is None:
        raise _invalid_body()
    value = payload["value"]
    if not isinstance(value, str):
        raise APIError(
            status_code=422,
            error_code="INVALID_VALUE_TYPE",
            message="Invalid data type for value (must be string)",
        )

    try:
        record = service.create(value)
    except DuplicateStringError as exc:
        raise APIError(
            status_code=409,
            error_code="STRING_ALREADY_EXISTS",
            message="String already exists in the system",
        ) from exc
    except ValueError as exc:
        raise _invalid_body(str(exc)) from exc

    response.headers["Location"] = f"{router.prefix}/{quote(record.value, safe='')}"
    return record.as_dict()


@router.get("", response_model=StringListResponseV1, responses=_ERROR_RESPONSES)
def list_strings(
    service: StringServiceDep,
    is_palindrome: str | None = Query(default=None, description="true or false"),
    min_length: str | None = Query(default=None, description="Minimum length, inclusive"),
    max_length: str | None = Query(default=None, description="Maximum length, inclusive"),
    word_count: str | None = Query(default=None, description="Exact word count"),
    contains_character: str | None = Query(default=None, description="Character that must occur"),
) -> dict[str, Any]:
    try:
        filters = parse_query_filters(
            is_palindrome=is_palindrome,
            min_length=min_length,
            max_length=max_length,
            word_count=word_count,
            contains_character=contains_character,
        )
    except ValueError as exc:
        raise APIError(
            status_code=400,
            error_code="INVALID_QUERY_PARAM",
            message=str(exc),
        ) from exc

    records = service.list_strings(filters)
    return {
        "data": [record.as_dict() for record in records],
        "count": len(records),
        "filters_applied": filters.as_filters(),
    }


@router.get(
    "/filter-by-natural-language",
    response_model=NaturalLanguageFilterResponseV1,
    responses=_ERROR_RESPONSES,
)
def filter_by_natural_language(
    service: StringServiceDep,
    query: str | None = Query(default=None, examples=["all single word palindromic strings"]),
) -> dict[str, Any]:
    if query is None or not query.strip():
        raise APIError(
            status_code=400,
            error_code="INVALID_QUERY_PARAM",
            message="Missing query parameter",
        )

    try:
        result = service.filter_by_natural_language(query)
    except ConflictingFiltersError as exc:
        raise APIError(
            status_code=422,
            error_code="CONFLICTING_FILTERS",
            message=str(exc),
            details=exc.criteria.as_filters(),
        ) from exc
    except UnparseableQueryError as exc:
        raise APIError(
            status_code=400,
            error_code="UNPARSEABLE_QUERY",
            message=str(exc),
        ) from exc

    return {
        "data": [record.as_dict() for record in result.records],
        "count": len(result.records),
        "interpreted_query": {
            "original": query,
            "parsed_filters": result.criteria.as_filters(),
        },
    }


@router.get("/{string_value:path}", response_model=StringRecordV1, responses=_ERROR_RESPONSES)
def get_string(string_value: str, service: StringServiceDep) -> dict[str, Any]:
    try:
        return service.get(string_value).as_dict()
    except StringNotFoundError as exc:
        raise _not_found(string_value) from exc


@router.delete(
    "/{string_value:path}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_ERROR_RESPONSES,
)
def delete_string(string_value: str, service: StringServiceDep) -> Response:
    try:
        service.delete(string_value)
    except StringNotFoundError as exc:
        raise _not_found(string_value) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
