# This module maps free-text filter requests onto structured string filters.
# It is a fixed sequence of keyword and regex checks, not a general language parser.
# Rules are evaluated on the lower-cased query; later rules may override earlier ones.
# Queries that match no rule are reported as unparseable by returning None.

from __future__ import annotations

import re

from pydantic import BaseModel

_LONGER_THAN_RE = re.compile(r"longer than (\d+)")
_SHORTER_THAN_RE = re.compile(r"shorter than (\d+)")
_CONTAINS_LETTER_RE = re.compile(r"containing the letter (\w)")

_WORD_COUNT_PHRASES: tuple[tuple[tuple[str, ...], int], ...] = (
    (("single word", "one word"), 1),
    (("two words",), 2),
    (("three words",), 3),
)

# "the first vowel" is read as the letter a
FIRST_VOWEL = "a"


class FilterCriteria(BaseModel):
    """Filters extracted from a natural language query."""

    is_palindrome: bool | None = None
    word_count: int | None = None
    min_length: int | None = None
    max_length: int | None = None
    contains_character: str | None = None

    def has_conflicts(self) -> bool:
        if self.min_length is not None and self.max_length is not None:
            return self.min_length > self.max_length
        return False

    def is_empty(self) -> bool:
        return not self.as_filters()

    def as_filters(self) -> dict[str, object]:
        return self.model_dump(exclude_none=True)


def parse_natural_language(query: str | None) -> FilterCriteria | None:
    """Translate `query` into filters, or None when nothing was recognised."""

    if query is None or not query.strip():
        return None

    text = query.lower()
    criteria = FilterCriteria()

    if "palindrome" in text or "palindromic" in text:
        criteria.is_palindrome = True
    if "not palindromic" in text or "non-palindromic" in text:
        criteria.is_palindrome = False

    for phrases, count in _WORD_COUNT_PHRASES:
        if any(phrase in text for phrase in phrases):
            criteria.word_count = count
            break

    longer = _LONGER_THAN_RE.search(text)
    if longer:
        criteria.min_length = int(longer.group(1)) + 1

    shorter = _SHORTER_THAN_RE.search(text)
    if shorter:
        criteria.max_length = int(shorter.group(1)) - 1

    letter = _CONTAINS_LETTER_RE.search(text)
    if letter:
        criteria.contains_character = letter.group(1)

    if "first vowel" in text:
        criteria.contains_character = FIRST_VOWEL

    if criteria.is_empty():
        return None
    return criteria
