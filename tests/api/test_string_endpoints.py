# This file tests the create, fetch, list, and delete endpoints of the strings service.
# Each test runs against a fresh in-memory store injected through dependency overrides.

from __future__ import annotations

import hashlib

from tests.api.support import strings_test_client


def _seed(client, *values: str) -> None:
    for value in values:
        assert client.post("/strings", json={"value": value}).status_code == 201


def test_create_string_returns_record_with_properties() -> None:
    with strings_test_client() as client:
        response = client.post("/strings", json={"value": "Racecar"})

    assert response.status_code == 201
    payload = response.json()
    expected_hash = hashlib.sha256("Racecar".encode("utf-8")).hexdigest()
    assert payload["id"] == expected_hash
    assert payload["value"] == "Racecar"
    assert payload["properties"] == {
        "length": 7,
        "is_palindrome": True,
        "unique_characters": 4,
        "word_count": 1,
        "sha256_hash": expected_hash,
        "character_frequency_map": {"R": 1, "a": 2, "c": 2, "e": 1, "r": 1},
    }
    assert payload["created_at"]
    assert response.headers["location"] == "/strings/Racecar"


def test_create_duplicate_string_conflicts() -> None:
    with strings_test_client() as client:
        client.post("/strings", json={"value": "hello"})
        response = client.post("/strings", json={"value": "hello"})

    assert response.status_code == 409
    assert response.json()["error_code"] == "STRING_ALREADY_EXISTS"


def test_create_rejects_missing_or_empty_value() -> None:
    with strings_test_client() as client:
        missing = client.post("/strings", json={"text": "hello"})
        empty = client.post("/strings", json={"value": ""})
        malformed = client.post(
            "/strings", content=b"{not json", headers={"content-type": "application/json"}
        )

    assert missing.status_code == 400
    assert empty.status_code == 400
    assert malformed.status_code == 400
    assert missing.json()["message"] == "Invalid request body or missing value field"


def test_create_rejects_non_string_value() -> None:
    with strings_test_client() as client:
        response = client.post("/strings", json={"value": 12345})

    assert response.status_code == 422
    assert response.json()["error_code"] == "INVALID_VALUE_TYPE"


def test_get_string_by_value() -> None:
    with strings_test_client() as client:
        _seed(client, "hello world")
        found = client.get("/strings/hello world")
        missing = client.get("/strings/absent")

    assert found.status_code == 200
    assert found.json()["properties"]["word_count"] == 2
    assert missing.status_code == 404
    assert missing.json()["message"] == "String does not exist in the system"


def test_delete_string() -> None:
    with strings_test_client() as client:
        _seed(client, "level")
        deleted = client.delete("/strings/level")
        again = client.delete("/strings/level")
        lookup = client.get("/strings/level")

    assert deleted.status_code == 204
    assert deleted.content == b""
    assert again.status_code == 404
    assert lookup.status_code == 404


def test_list_strings_without_filters_returns_everything() -> None:
    with strings_test_client() as client:
        _seed(client, "level", "hello world", "noon")
        response = client.get("/strings")

    assert response.status_code == 200
    payload = response.json()
    assert payload["count"] == 3
    assert [item["value"] for item in payload["data"]] == ["level", "hello world", "noon"]
    assert payload["filters_applied"] == {}


def test_list_strings_applies_combined_filters() -> None:
    with strings_test_client() as client:
        _seed(client, "level", "hello world", "noon", "a toyota")
        response = client.get(
            "/strings",
            params={"is_palindrome": "true", "min_length": "5", "word_count": "1"},
        )

    payload = response.json()
    assert response.status_code == 200
    assert [item["value"] for item in payload["data"]] == ["level"]
    assert payload["filters_applied"] == {
        "is_palindrome": True,
        "min_length": 5,
        "word_count": 1,
    }


def test_list_strings_contains_character_is_case_sensitive() -> None:
    with strings_test_client() as client:
        _seed(client, "Zebra", "zoo", "apple")
        response = client.get("/strings", params={"contains_character": "z"})

    assert [item["value"] for item in response.json()["data"]] == ["zoo"]


def test_list_strings_max_length_and_false_palindrome() -> None:
    with strings_test_client() as client:
        _seed(client, "abc", "abcdef", "aba")
        response = client.get("/strings", params={"is_palindrome": "FALSE", "max_length": "4"})

    assert [item["value"] for item in response.json()["data"]] == ["abc"]


def test_list_strings_rejects_invalid_parameter_types() -> None:
    with strings_test_client() as client:
        bad_bool = client.get("/strings", params={"is_palindrome": "maybe"})
        bad_int = client.get("/strings", params={"min_length": "five"})

    assert bad_bool.status_code == 400
    assert bad_int.status_code == 400
    assert bad_int.json()["message"] == "Invalid query parameter types"


def test_value_with_slash_is_reachable_through_location_header() -> None:
    with strings_test_client() as client:
        created = client.post("/strings", json={"value": "a/b"})
        assert created.status_code == 201
        location = created.headers["location"]
        assert location == "/strings/a%2Fb"

        fetched = client.get(location)
        deleted = client.delete(location)
        missing = client.get(location)

    assert fetched.status_code == 200
    assert fetched.json()["value"] == "a/b"
    assert deleted.status_code == 204
    assert missing.status_code == 404
    assert missing.json()["error_code"] == "STRING_NOT_FOUND"
