# This file defines request and response schemas for the strings endpoints.
# Response models mirror the stored record so OpenAPI documents the exact JSON clients receive.
# Filter echo fields are loose dictionaries because only the filters actually supplied are reported.

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class StringCreateRequest(BaseModel):
    """Documented request body for POST /strings.

    The endpoint parses the raw body itself so it can tell malformed (400)
    apart from wrongly typed (422) input.
    """

    value: str = Field(min_length=1, examples=["racecar"])


class StringPropertiesV1(BaseModel):
    length: int = Field(ge=0)
    is_palindrome: bool
    unique_characters: int = Field(ge=0)
    word_count: int = Field(ge=0)
    sha256_hash: str
    character_frequency_map: dict[str, int]


class StringRecordV1(BaseModel):
    id: str
    value: str
    properties: StringPropertiesV1
    created_at: datetime


class StringListResponseV1(BaseModel):
    data: list[StringRecordV1]
    count: int = Field(ge=0)
    filters_applied: dict[str, Any]


class InterpretedQueryV1(BaseModel):
    original: str
    parsed_filters: dict[str, Any]


class NaturalLanguageFilterResponseV1(BaseModel):
    data: list[StringRecordV1]
    count: int = Field(ge=0)
    interpreted_query: InterpretedQueryV1
