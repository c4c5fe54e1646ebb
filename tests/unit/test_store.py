"""
Unit tests for the in-memory string store.
"""

from datetime import UTC, datetime

import pytest

from string_analyzer.analysis.analyzer import analyze
from string_analyzer.storage.store import (
    DuplicateStringError,
    InMemoryStringStore,
    StringNotFoundError,
    StringRecord,
)


def _record(value: str) -> StringRecord:
    properties = analyze(value)
    return StringRecord(
        id=properties.sha256_hash,
        value=value,
        properties=properties,
        created_at=datetime(2026, 1, 1, tzinfo=UTC),
    )


def test_add_get_and_order() -> None:
    store = InMemoryStringStore()
    store.add(_record("b"))
    store.add(_record("a"))

    assert store.get("a").value == "a"
    assert [record.value for record in store.all()] == ["b", "a"]
    assert store.count() == 2


def test_duplicate_values_are_rejected() -> None:
    store = InMemoryStringStore()
    store.add(_record("same"))
    with pytest.raises(DuplicateStringError):
        store.add(_record("same"))


def test_delete_and_missing_lookups() -> None:
    store = InMemoryStringStore()
    store.add(_record("gone"))
    assert store.delete("gone").value == "gone"

    with pytest.raises(StringNotFoundError):
        store.get("gone")
    with pytest.raises(StringNotFoundError):
        store.delete("gone")


def test_all_returns_a_snapshot() -> None:
    store = InMemoryStringStore()
    store.add(_record("x"))
    snapshot = store.all()
    store.clear()

    assert len(snapshot) == 1
    assert store.count() == 0


def test_record_as_dict_shape() -> None:
    payload = _record("hi").as_dict()
    assert set(payload) == {"id", "value", "properties", "created_at"}
    assert payload["properties"]["length"] == 2
