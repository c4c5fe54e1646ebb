# This module implements the in-memory store for analyzed strings.
# Records live in an insertion-ordered list and every lookup is a linear scan by value.
# A lock serializes access because FastAPI runs sync endpoints on a thread pool.
# Nothing is persisted; restarting the process empties the store.

from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from string_analyzer.analysis.analyzer import StringProperties


class DuplicateStringError(ValueError):
    """Raised when a value is already stored."""


class StringNotFoundError(KeyError):
    """Raised when no record matches the requested value."""


@dataclass(frozen=True)
class StringRecord:
    id: str
    value: str
    properties: StringProperties
    created_at: datetime

    def as_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "value": self.value,
            "properties": self.properties.as_dict(),
            "created_at": self.created_at,
        }


class InMemoryStringStore:
    def __init__(self) -> None:
        self._records: list[StringRecord] = []
        self._lock = threading.Lock()

    def add(self, record: StringRecord) -> StringRecord:
        with self._lock:
            if self._find(record.value) is not None:
                raise DuplicateStringError(f"String already exists: {record.value!r}")
            self._records.append(record)
        return record

    def get(self, value: str) -> StringRecord:
        with self._lock:
            record = self._find(value)
        if record is None:
            raise StringNotFoundError(value)
        return record

    def delete(self, value: str) -> StringRecord:
        with self._lock:
            record = self._find(value)
            if record is None:
                raise StringNotFoundError(value)
            self._records.remove(record)
        return record

    def all(self) -> list[StringRecord]:
        with self._lock:
            return list(self._records)

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def _find(self, value: str) -> StringRecord | None:
        for record in self._records:
            if record.value == value:
                return record
        return None
