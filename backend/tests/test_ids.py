"""Tests for ObjectId-format id generation and validation."""

import itertools

import pytest

from noteful import ids
from noteful.exceptions import ValidationError
from noteful.ids import is_valid_object_id, new_object_id
from noteful.services.validation import require_object_id


class TestNewObjectId:

    def test_is_24_lowercase_hex(self):
        value = new_object_id()
        assert len(value) == 24
        assert value == value.lower()
        int(value, 16)

    def test_generated_ids_are_valid(self):
        assert is_valid_object_id(new_object_id())

    def test_ids_are_unique(self):
        ids = {new_object_id() for _ in range(1000)}
        assert len(ids) == 1000


class TestIsValidObjectId:

    @pytest.mark.parametrize("value", [
        "000000000000000000000000",
        "111111111111111111111100",
        "AAAAAAAAAAAAAAAAAAAAAAAA",
        "5b7c1f6e2d8a4c3e9f0a1b2c",
    ])
    def test_accepts_24_hex_chars(self, value):
        assert is_valid_object_id(value)

    @pytest.mark.parametrize("value", [
        "99-99-99",
        "02135468",
        "9999",
        "abcdefghijkl",               # 12 chars, not hex
        "5b7c1f6e2d8a4c3e9f0a1b2",    # 23 chars
        "5b7c1f6e2d8a4c3e9f0a1b2cd",  # 25 chars
        "zzzzzzzzzzzzzzzzzzzzzzzz",
        "",
        None,
        123456789012345678901234,
    ])
    def test_rejects_everything_else(self, value):
        assert not is_valid_object_id(value)


class TestCounterWrap:

    def test_counter_uses_all_three_bytes(self, monkeypatch):
        monkeypatch.setattr(ids, "_counter", itertools.count(0xFFFFFF))

        assert new_object_id().endswith("ffffff")
        assert new_object_id().endswith("000000")


class TestRequireObjectId:

    def test_returns_lowercase(self):
        assert require_object_id("5B7C1F6E2D8A4C3E9F0A1B2C") == "5b7c1f6e2d8a4c3e9f0a1b2c"

    def test_rejects_invalid(self):
        with pytest.raises(ValidationError, match="The `tagId` is not valid"):
            require_object_id("xyz", "tagId")
