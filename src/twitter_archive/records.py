"""Declarative record schemas: JSON object <-> frozen dataclass.

An entity is declared once as a frozen dataclass plus a tuple of ``Field``s,
each mapping one JSON key to one attribute through a codec::

    BLOCKING = RecordCodec(Blocking, (
        Field("accountId", "account_id", STRING),
        Field("userLink", "user_link", STRING),
    ))

Decoding is strict: an unknown key is a LENGTH_MISMATCH, so every decoded
record re-encodes to the object it came from. Encoding emits keys in field
declaration order, which is the order the export writes them in.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from twitter_archive.codec_types import (
    Codec,
    Err,
    FormatError,
    FormatErrorKind,
    Ok,
    Result,
    format_error,
)


# ---------------------------------------------------------------------------
# Leaf codecs for plain JSON scalars
# ---------------------------------------------------------------------------

class StringCodec:
    name = "string"

    def decode(self, value: Any) -> Result[str, FormatError]:
        if not isinstance(value, str):
            return format_error(
                FormatErrorKind.SHAPE_MISMATCH, self.name, value, "expected a JSON string",
            )
        return Ok(value)

    def encode(self, value: str) -> str:
        return value


class BooleanCodec:
    name = "boolean"

    def decode(self, value: Any) -> Result[bool, FormatError]:
        if not isinstance(value, bool):
            return format_error(
                FormatErrorKind.SHAPE_MISMATCH, self.name, value, "expected true or false",
            )
        return Ok(value)

    def encode(self, value: bool) -> bool:
        return value


class ListCodec[T]:
    """JSON array <-> tuple, every element through ``inner``.

    The first failing element fails the whole array; no partial tuples.
    """

    def __init__(self, inner: Codec[T]) -> None:
        self.inner = inner
        self.name = f"list[{inner.name}]"

    def decode(self, value: Any) -> Result[tuple[T, ...], FormatError]:
        if not isinstance(value, list):
            return format_error(
                FormatErrorKind.SHAPE_MISMATCH, self.name, value, "expected a JSON array",
            )
        items: list[T] = []
        for i, element in enumerate(value):
            match self.inner.decode(element):
                case Ok(value=item):
                    items.append(item)
                case Err(error=error):
                    return Err(error.at(i))
        return Ok(tuple(items))

    def encode(self, value: tuple[T, ...]) -> list[Any]:
        return [self.inner.encode(item) for item in value]


class MappingCodec[T]:
    """JSON object with open-ended keys <-> read-only mapping, values through ``inner``.

    For objects keyed by data, such as the manifest's ``dataTypes``. Key order
    is kept.
    """

    def __init__(self, inner: Codec[T]) -> None:
        self.inner = inner
        self.name = f"mapping[{inner.name}]"

    def decode(self, value: Any) -> Result[Mapping[str, T], FormatError]:
        if not isinstance(value, dict):
            return format_error(
                FormatErrorKind.SHAPE_MISMATCH, self.name, value, "expected a JSON object",
            )
        items: dict[str, T] = {}
        for key, element in value.items():
            match self.inner.decode(element):
                case Ok(value=item):
                    items[key] = item
                case Err(error=error):
                    return Err(error.at(key))
        return Ok(MappingProxyType(items))

    def encode(self, value: Mapping[str, T]) -> dict[str, Any]:
        return {key: self.inner.encode(item) for key, item in value.items()}


STRING = StringCodec()
BOOLEAN = BooleanCodec()
STRING_LIST = ListCodec(STRING)


# ---------------------------------------------------------------------------
# Record schemas
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Field:
    """One JSON key mapped to one dataclass attribute."""
    json_key: str          # "accountId"
    attr: str              # "account_id"
    codec: Codec[Any]
    optional: bool = False  # absent on decode -> None; None on encode -> key omitted


class RecordCodec[T]:
    """JSON object <-> instance of ``cls`` described by ``fields``."""

    def __init__(self, cls: type[T], fields: tuple[Field, ...]) -> None:
        self.cls = cls
        self.fields = fields
        self.name = cls.__name__
        self._keys = frozenset(f.json_key for f in fields)

    def __repr__(self) -> str:
        return f"RecordCodec({self.name}, {len(self.fields)} fields)"

    def decode(self, value: Any) -> Result[T, FormatError]:
        if not isinstance(value, dict):
            return format_error(
                FormatErrorKind.SHAPE_MISMATCH, self.name, value, "expected a JSON object",
            )
        unknown = sorted(str(k) for k in value if k not in self._keys)
        if unknown:
            return format_error(
                FormatErrorKind.LENGTH_MISMATCH, self.name, unknown,
                f"unexpected keys for {self.name}",
            )

        kwargs: dict[str, Any] = {}
        for f in self.fields:
            if f.json_key not in value:
                if f.optional:
                    kwargs[f.attr] = None
                    continue
                return format_error(
                    FormatErrorKind.LENGTH_MISMATCH, self.name, sorted(value),
                    f"missing key {f.json_key!r}",
                )
            match f.codec.decode(value[f.json_key]):
                case Ok(value=decoded):
                    kwargs[f.attr] = decoded
                case Err(error=error):
                    return Err(error.at(f.json_key))
        return Ok(self.cls(**kwargs))

    def encode(self, value: T) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for f in self.fields:
            attr = getattr(value, f.attr)
            if attr is None and f.optional:
                continue
            out[f.json_key] = f.codec.encode(attr)
        return out
