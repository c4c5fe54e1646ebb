# This module computes the derived properties stored with every submitted string.
# Each helper is a single independent pass over the input and has no shared state.
# `analyze` bundles the results into one immutable properties object for the store and API.

from __future__ import annotations

import hashlib
from dataclasses import asdict, dataclass, field

_WORD_SEPARATORS = (" ", "\t", "\n", "\r")


@dataclass(frozen=True)
class StringProperties:
    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: dict[str, int] = field(default_factory=dict)

    def as_dict(self) -> dict[str, object]:
        return asdict(self)


def string_length(value: str) -> int:
    return len(value)


def is_palindrome(value: str) -> bool:
    """Case-insensitive comparison against the reversed value.

    Whitespace and punctuation are kept, so "A man, a plan" style sentences are not palindromes.
    """

    folded = value.casefold()
    return folded == folded[::-1]


def unique_character_count(value: str) -> int:
    """Count distinct letters and digits, ignoring case."""

    return len({char for char in value.lower() if char.isalnum()})


def word_count(value: str) -> int:
    if not value or value.isspace():
        return 0

    normalized = value
    for separator in _WORD_SEPARATORS[1:]:
        normalized = normalized.replace(separator, " ")
    return len([token for token in normalized.split(" ") if token])


def sha256_hash(value: str) -> str:
    return hashlib.sha256(value.encode("utf-8")).hexdigest()


def character_frequency(value: str) -> dict[str, int]:
    frequencies: dict[str, int] = {}
    for char in value:
        frequencies[char] = frequencies.get(char, 0) + 1
    return frequencies


def analyze(value: str) -> StringProperties:
    """Compute every derived property for `value`."""

    return StringProperties(
        length=string_length(value),
        is_palindrome=is_palindrome(value),
        unique_characters=unique_character_count(value),
        word_count=word_count(value),
        sha256_hash=sha256_hash(value),
        character_frequency_map=character_frequency(value),
    )
