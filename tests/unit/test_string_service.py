"""
Unit tests for the strings application service.
"""

import pytest

from string_analyzer.api.services.string_service import (
    ConflictingFiltersError,
    QueryFilters,
    UnparseableQueryError,
    parse_query_filters,
)
from string_analyzer.storage.store import DuplicateStringError
from tests.api.support import build_string_service


def test_create_uses_hash_as_id_and_utc_timestamp() -> None:
    service = build_string_service()
    record = service.create("madam")

    assert record.id == record.properties.sha256_hash
    assert record.created_at.tzinfo is not None
    assert service.get("madam") == record


def test_create_rejects_empty_and_duplicates() -> None:
    service = build_string_service()
    with pytest.raises(ValueError):
        service.create("")

    service.create("once")
    with pytest.raises(DuplicateStringError):
        service.create("once")


def test_parse_query_filters_converts_types() -> None:
    filters = parse_query_filters(
        is_palindrome="True", min_length=" 3 ", max_length="9", word_count="2", contains_character=""
    )
    assert filters == QueryFilters(is_palindrome=True, min_length=3, max_length=9, word_count=2)
    assert filters.as_filters() == {
        "is_palindrome": True,
        "min_length": 3,
        "max_length": 9,
        "word_count": 2,
    }


@pytest.mark.parametrize(
    "kwargs",
    [{"is_palindrome": "yes"}, {"min_length": "1.5"}, {"max_length": "ten"}, {"word_count": ""}],
)
def test_parse_query_filters_rejects_bad_values(kwargs: dict[str, str]) -> None:
    with pytest.raises(ValueError, match="Invalid query parameter types"):
        parse_query_filters(**kwargs)


def test_contains_character_uses_first_character_only() -> None:
    service = build_string_service()
    service.create("xylophone")
    service.create("banana")

    matched = service.list_strings(QueryFilters(contains_character="xq"))
    assert [record.value for record in matched] == ["xylophone"]


def test_natural_language_errors() -> None:
    service = build_string_service()
    with pytest.raises(UnparseableQueryError):
        service.filter_by_natural_language("anything at all")
    with pytest.raises(ConflictingFiltersError) as excinfo:
        service.filter_by_natural_language("longer than 5 and shorter than 2")
    assert excinfo.value.criteria.min_length == 6


def test_natural_language_contains_is_case_insensitive() -> None:
    service = build_string_service()
    service.create("Apple")
    service.create("berry")

    result = service.filter_by_natural_language("strings containing the first vowel")
    assert [record.value for record in result.records] == ["Apple"]
    assert result.criteria.contains_character == "a"
