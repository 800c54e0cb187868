"""Tests for like count parsing/rendering."""

import pytest

from app.domain.errors import MalformedStoredValue, StorageUnavailable
from app.domain.value_objects.like_count import parse_like_count, render_like_count


def test_parse_plain_decimal():
    assert parse_like_count("42") == 42


def test_parse_zero():
    assert parse_like_count("0") == 0


def test_parse_tolerates_surrounding_whitespace():
    assert parse_like_count(" 7\n") == 7


@pytest.mark.parametrize("raw", ["", "abc", "4.5", "-3", "12abc", "٣"])
def test_parse_rejects_non_counts(raw):
    with pytest.raises(MalformedStoredValue) as exc:
        parse_like_count(raw)
    assert exc.value.raw == raw
    assert exc.value.code == "malformed_stored_value"


def test_render_is_plain_decimal():
    assert render_like_count(1234) == "1234"


def test_render_negative_raises():
    with pytest.raises(ValueError, match="negative"):
        render_like_count(-1)


def test_error_codes_are_distinct():
    assert StorageUnavailable("x").code == "storage_unavailable"
    assert MalformedStoredValue("x").code != StorageUnavailable.code
