"""Unit tests for front_matter.coercion and the timestamp value object."""

from datetime import datetime, timedelta, timezone

import pytest

from blogmeta.domain.exceptions import InvalidDateFormat, InvalidFieldType
from blogmeta.domain.value_objects import FieldKind, parse_timestamp
from blogmeta.infrastructure.front_matter.coercion import (
    coerce,
    coerce_date,
    coerce_string,
    coerce_string_array,
    raw_extra_value,
    unquote,
)


class TestCoerceString:
    """Tests for coerce_string and unquote."""

    def test_quoted(self) -> None:
        assert coerce_string("title", '"Hallo Welt"') == "Hallo Welt"

    def test_empty_quoted(self) -> None:
        assert coerce_string("description", '""') == ""

    def test_no_escape_processing(self) -> None:
        assert coerce_string("title", r'"a\nb"') == r"a\nb"

    @pytest.mark.parametrize("raw", ["Hallo", "'Hallo'", '"Hal"lo"', '"Hallo', '["x"]'])
    def test_rejects_non_string(self, raw: str) -> None:
        with pytest.raises(InvalidFieldType) as exc_info:
            coerce_string("title", raw)
        assert exc_info.value.field == "title"

    def test_unquote_returns_none_for_bare(self) -> None:
        assert unquote("true") is None


class TestCoerceDate:
    """Tests for coerce_date and parse_timestamp."""

    def test_valid(self) -> None:
        assert coerce_date("date", '"2024-05-22T14:25:47+03:00"') == datetime(
            2024, 5, 22, 14, 25, 47, tzinfo=timezone(timedelta(hours=3))
        )

    def test_negative_offset(self) -> None:
        value = parse_timestamp("2023-12-31T23:59:59-05:30")
        assert value.utcoffset() == -timedelta(hours=5, minutes=30)

    @pytest.mark.parametrize(
        "value",
        [
            "2024-05-22",
            "2024-05-22T14:25:47",
            "2024-05-22T14:25:47Z",
            "2024-05-22 14:25:47+03:00",
            "2024-05-22T14:25:47+0300",
            "2024-13-01T00:00:00+00:00",
            "2024-02-30T00:00:00+00:00",
            "",
        ],
    )
    def test_invalid(self, value: str) -> None:
        with pytest.raises(InvalidDateFormat):
            parse_timestamp(value)

    def test_unquoted_date_is_invalid_type(self) -> None:
        with pytest.raises(InvalidFieldType):
            coerce_date("date", "2024-05-22T14:25:47+03:00")


class TestCoerceStringArray:
    """Tests for coerce_string_array."""

    def test_trailing_comma(self) -> None:
        assert coerce_string_array("tags", '["a","b","c",]') == ("a", "b", "c")

    def test_spaces(self) -> None:
        assert coerce_string_array("tags", '[ "a" , "b" ]') == ("a", "b")

    def test_empty(self) -> None:
        assert coerce_string_array("tags", "[]") == ()

    @pytest.mark.parametrize(
        "raw",
        ['["a", "b"', '"a", "b"]', "[a, b]", "[,]", '["a",,"b"]', '["a" "b"]', '"a"'],
    )
    def test_invalid(self, raw: str) -> None:
        with pytest.raises(InvalidFieldType) as exc_info:
            coerce_string_array("tags", raw)
        assert exc_info.value.field == "tags"


def test_coerce_dispatches_on_kind() -> None:
    assert coerce("tags", '["x"]', FieldKind.STRING_ARRAY) == ("x",)
    assert coerce("title", '"x"', FieldKind.STRING) == "x"


def test_raw_extra_value() -> None:
    assert raw_extra_value('"true"') == "true"
    assert raw_extra_value("true") == "true"
    assert raw_extra_value('["a"]') == '["a"]'
