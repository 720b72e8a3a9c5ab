"""Tests for twitter_archive.numeric_codecs."""
from __future__ import annotations

import pytest
from hypothesis import given, strategies as st

from twitter_archive.codec_types import UINT64_MAX, Err, FormatErrorKind, IndexRange, Ok
from twitter_archive.numeric_codecs import (
    INDICES,
    NUMBER_LIKE_STRING,
    NumberLikeStringCodec,
)

u64 = st.integers(min_value=0, max_value=UINT64_MAX)


class TestNumberLikeString:
    def test_decode(self) -> None:
        assert NUMBER_LIKE_STRING.decode("68419") == Ok(68419)

    def test_encode(self) -> None:
        assert NUMBER_LIKE_STRING.encode(68419) == "68419"

    def test_zero(self) -> None:
        assert NUMBER_LIKE_STRING.decode("0") == Ok(0)
        assert NUMBER_LIKE_STRING.encode(0) == "0"

    def test_leading_zeros_are_not_preserved(self) -> None:
        # Known asymmetry: the canonical form drops leading zeros.
        result = NUMBER_LIKE_STRING.decode("007")
        assert result == Ok(7)
        assert NUMBER_LIKE_STRING.encode(result.value) == "7"

    def test_uint64_bounds(self) -> None:
        assert NUMBER_LIKE_STRING.decode(str(UINT64_MAX)) == Ok(UINT64_MAX)
        result = NUMBER_LIKE_STRING.decode(str(UINT64_MAX + 1))
        assert isinstance(result, Err)
        assert result.error.kind is FormatErrorKind.PATTERN_MISMATCH

    @pytest.mark.parametrize("text", ["", "+5", "-5", " 5", "5 ", "5\n", "1_000", "1,000", "0x10", "1e3", "٣"])
    def test_non_digits_rejected(self, text: str) -> None:
        result = NUMBER_LIKE_STRING.decode(text)
        assert isinstance(result, Err)
        assert result.error.kind is FormatErrorKind.PATTERN_MISMATCH

    @pytest.mark.parametrize("value", [5, 5.0, None, True, ["5"]])
    def test_json_numbers_are_shape_mismatch(self, value: object) -> None:
        result = NUMBER_LIKE_STRING.decode(value)
        assert isinstance(result, Err)
        assert result.error.kind is FormatErrorKind.SHAPE_MISMATCH

    def test_encode_out_of_range_is_programming_error(self) -> None:
        with pytest.raises(ValueError):
            NUMBER_LIKE_STRING.encode(-1)
        with pytest.raises(ValueError):
            NUMBER_LIKE_STRING.encode(UINT64_MAX + 1)

    def test_narrower_width(self) -> None:
        codec = NumberLikeStringCodec(max_value=255)
        assert codec.decode("255") == Ok(255)
        assert isinstance(codec.decode("256"), Err)


class TestIndices:
    def test_decode_pair(self) -> None:
        assert INDICES.decode(["1", "2"]) == Ok(IndexRange(1, 2))

    def test_encode_pair(self) -> None:
        assert INDICES.encode(IndexRange(68, 419)) == ["68", "419"]

    @pytest.mark.parametrize("value", [[], ["1"], ["1", "2", "3"]])
    def test_wrong_length(self, value: list[str]) -> None:
        result = INDICES.decode(value)
        assert isinstance(result, Err)
        assert result.error.kind is FormatErrorKind.LENGTH_MISMATCH

    def test_start_may_exceed_end(self) -> None:
        assert INDICES.decode(["10", "3"]) == Ok(IndexRange(10, 3))

    def test_bad_element_reports_index(self) -> None:
        result = INDICES.decode(["1", "x"])
        assert isinstance(result, Err)
        assert result.error.kind is FormatErrorKind.PATTERN_MISMATCH
        assert result.error.path == (1,)

    def test_numbers_instead_of_strings(self) -> None:
        result = INDICES.decode([1, 2])
        assert isinstance(result, Err)
        assert result.error.kind is FormatErrorKind.SHAPE_MISMATCH
        assert result.error.path == (0,)

    @pytest.mark.parametrize("value", ["1,2", {"start": "1", "end": "2"}, None])
    def test_non_array_is_shape_mismatch(self, value: object) -> None:
        result = INDICES.decode(value)
        assert isinstance(result, Err)
        assert result.error.kind is FormatErrorKind.SHAPE_MISMATCH

    def test_as_tuple(self) -> None:
        assert IndexRange(3, 9).as_tuple() == (3, 9)


@given(u64)
def test_number_like_string_roundtrip(n: int) -> None:
    assert NUMBER_LIKE_STRING.decode(NUMBER_LIKE_STRING.encode(n)) == Ok(n)


@given(u64)
def test_number_like_string_is_minimal(n: int) -> None:
    text = NUMBER_LIKE_STRING.encode(n)
    assert text == "0" or not text.startswith("0")


@given(u64, u64)
def test_indices_roundtrip(start: int, end: int) -> None:
    pair = IndexRange(start, end)
    assert INDICES.decode(INDICES.encode(pair)) == Ok(pair)
