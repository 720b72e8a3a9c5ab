"""Codecs for integers the export stores as JSON strings.

IDs and counters are written as ``"68419"`` rather than ``68419`` so that
number-based JSON parsers cannot lose precision on 64-bit values.

Encoding always emits the minimal decimal form. A source value with leading
zeros therefore does not round-trip byte-for-byte: ``"007"`` decodes to 7 and
re-encodes as ``"7"``.
"""

from __future__ import annotations

import re
from typing import Any

from twitter_archive.codec_types import (
    UINT64_MAX,
    Err,
    FormatError,
    FormatErrorKind,
    IndexRange,
    Ok,
    Result,
    format_error,
)

_DIGITS_RE = re.compile(r"[0-9]+", re.ASCII)


class NumberLikeStringCodec:
    """Unsigned integer <-> JSON string of ASCII decimal digits."""

    name = "number_like_string"

    def __init__(self, max_value: int = UINT64_MAX) -> None:
        self.max_value = max_value

    def decode(self, value: Any) -> Result[int, FormatError]:
        if not isinstance(value, str):
            return format_error(
                FormatErrorKind.SHAPE_MISMATCH, self.name, value,
                "expected a JSON string of decimal digits",
            )
        if _DIGITS_RE.fullmatch(value) is None:
            return format_error(
                FormatErrorKind.PATTERN_MISMATCH, self.name, value,
                "expected only decimal digits",
            )
        number = int(value)
        if number > self.max_value:
            return format_error(
                FormatErrorKind.PATTERN_MISMATCH, self.name, value,
                f"exceeds {self.max_value}",
            )
        return Ok(number)

    def encode(self, value: int) -> str:
        if value < 0 or value > self.max_value:
            raise ValueError(f"{value} is outside 0..{self.max_value}")
        return str(value)


NUMBER_LIKE_STRING = NumberLikeStringCodec()


class IndicesCodec:
    """IndexRange <-> JSON array of exactly two number-like strings."""

    name = "indices"

    def __init__(self, element: NumberLikeStringCodec = NUMBER_LIKE_STRING) -> None:
        self.element = element

    def decode(self, value: Any) -> Result[IndexRange, FormatError]:
        if not isinstance(value, list):
            return format_error(
                FormatErrorKind.SHAPE_MISMATCH, self.name, value,
                "expected a JSON array",
            )
        if len(value) != 2:
            return format_error(
                FormatErrorKind.LENGTH_MISMATCH, self.name, value,
                f"expected exactly 2 elements, got {len(value)}",
            )
        bounds: list[int] = []
        for i, item in enumerate(value):
            match self.element.decode(item):
                case Ok(value=number):
                    bounds.append(number)
                case Err(error=error):
                    return Err(error.at(i))
        return Ok(IndexRange(bounds[0], bounds[1]))

    def encode(self, value: IndexRange) -> list[str]:
        return [self.element.encode(value.start), self.element.encode(value.end)]


INDICES = IndicesCodec()
