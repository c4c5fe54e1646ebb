# This file implements the application logic behind the strings endpoints.
# It analyzes submitted values, stores records, and applies structured or natural language filters.
# Routers stay thin: they translate the exceptions raised here into HTTP errors.

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from string_analyzer.analysis import analyzer
from string_analyzer.analysis.nl_parser import FilterCriteria, parse_natural_language
from string_analyzer.api.api_config import ApiConfig
from string_analyzer.storage.store import InMemoryStringStore, StringRecord

LOGGER = logging.getLogger("strings")

INVALID_QUERY_PARAMS_MESSAGE = "Invalid query parameter types"


class UnparseableQueryError(ValueError):
    """Raised when a natural language query matches none of the known patterns."""


class ConflictingFiltersError(ValueError):
    """Raised when a parsed query produces filters that cannot all hold."""

    def __init__(self, criteria: FilterCriteria) -> None:
        self.criteria = criteria
        super().__init__("Query parsed but resulted in conflicting filters")


@dataclass(frozen=True)
class QueryFilters:
    is_palindrome: bool | None = None
    min_length: int | None = None
    max_length: int | None = None
    word_count: int | None = None
    contains_character: str | None = None

    def as_filters(self) -> dict[str, Any]:
        values = {
            "is_palindrome": self.is_palindrome,
            "min_length": self.min_length,
            "max_length": self.max_length,
            "word_count": self.word_count,
            "contains_character": self.contains_character,
        }
        return {key: value for key, value in values.items() if value is not None}


@dataclass(frozen=True)
class NaturalLanguageResult:
    records: list[StringRecord]
    criteria: FilterCriteria


def _parse_bool(raw: str | None) -> bool | None:
    if raw is None:
        return None
    value = raw.strip().lower()
    if value == "true":
        return True
    if value == "false":
        return False
    raise ValueError(INVALID_QUERY_PARAMS_MESSAGE)


def _parse_int(raw: str | None) -> int | None:
    if raw is None:
        return None
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ValueError(INVALID_QUERY_PARAMS_MESSAGE) from exc


def parse_query_filters(
    *,
    is_palindrome: str | None = None,
    min_length: str | None = None,
    max_length: str | None = None,
    word_count: str | None = None,
    contains_character: str | None = None,
) -> QueryFilters:
    """Convert raw query-string values into typed filters."""

    return QueryFilters(
        is_palindrome=_parse_bool(is_palindrome),
        min_length=_parse_int(min_length),
        max_length=_parse_int(max_length),
        word_count=_parse_int(word_count),
        contains_character=contains_character or None,
    )


class StringService:
    """Create, read, delete, and filter analyzed strings."""

    def __init__(self, *, config: ApiConfig, store: InMemoryStringStore) -> None:
        self.config = config
        self.store = store

    def create(self, value: str) -> StringRecord:
        if not value:
            raise ValueError("Invalid request body or missing value field")

        properties = analyzer.analyze(value)
        record = StringRecord(
            id=properties.sha256_hash,
            value=value,
            properties=properties,
            created_at=datetime.now(tz=UTC),
        )
        self.store.add(record)
        LOGGER.info("stored string id=%s length=%s", record.id, properties.length)
        return record

    def get(self, value: str) -> StringRecord:
        return self.store.get(value)

    def delete(self, value: str) -> StringRecord:
        record = self.store.delete(value)
        LOGGER.info("deleted string id=%s", record.id)
        return record

    def list_strings(self, filters: QueryFilters) -> list[StringRecord]:
        records = self.store.all()

        if filters.is_palindrome is not None:
            records = [r for r in records if r.properties.is_palindrome == filters.is_palindrome]
        if filters.min_length is not None:
            records = [r for r in records if r.properties.length >= filters.min_length]
        if filters.max_length is not None:
            records = [r for r in records if r.properties.length <= filters.max_length]
        if filters.word_count is not None:
            records = [r for r in records if r.properties.word_count == filters.word_count]
        if filters.contains_character:
            char = filters.contains_character[0]
            records = [r for r in records if char in r.properties.character_frequency_map]
        return records

    def filter_by_natural_language(self, query: str) -> NaturalLanguageResult:
        criteria = parse_natural_language(query)
        if criteria is None:
            raise UnparseableQueryError("Unable to parse natural language query")
        if criteria.has_conflicts():
            raise ConflictingFiltersError(criteria)

        records = self.store.all()
        if criteria.is_palindrome is not None:
            records = [r for r in records if analyzer.is_palindrome(r.value) == criteria.is_palindrome]
        if criteria.word_count is not None:
            records = [r for r in records if analyzer.word_count(r.value) == criteria.word_count]
        if criteria.min_length is not None:
            records = [r for r in records if analyzer.string_length(r.value) >= criteria.min_length]
        if criteria.max_length is not None:
            records = [r for r in records if analyzer.string_length(r.value) <= criteria.max_length]
        if criteria.contains_character:
            needle = criteria.contains_character.casefold()
            records = [r for r in records if needle in r.value.casefold()]

        LOGGER.debug("natural language query=%r filters=%s matched=%d", query, criteria.as_filters(), len(records))
        return NaturalLanguageResult(records=records, criteria=criteria)
