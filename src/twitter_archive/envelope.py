"""Single-key envelope wrapper.

Almost every unit in the export is nested one level deeper than its content::

    {"blocking": {"accountId": "123", "userLink": "https://..."}}

``Envelope(key, inner)`` decodes such an object only if ``key`` is its sole
key, handing the value to ``inner``. Encoding re-wraps under the same key.
Every entity record reuses this class instead of declaring its own wrapper.
"""

from __future__ import annotations

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


class Envelope[T]:
    def __init__(self, key: str, inner: Codec[T]) -> None:
        self.key = key
        self.inner = inner
        self.name = f"envelope[{key}]"

    def __repr__(self) -> str:
        return f"Envelope({self.key!r}, {self.inner.name})"

    def decode(self, value: Any) -> Result[T, FormatError]:
        if not isinstance(value, dict):
            return format_error(
                FormatErrorKind.SHAPE_MISMATCH, self.name, value,
                f"expected a JSON object with the single key {self.key!r}",
            )
        if len(value) != 1 or self.key not in value:
            keys = sorted(str(k) for k in value)
            return format_error(
                FormatErrorKind.LENGTH_MISMATCH, self.name, keys,
                f"expected the single key {self.key!r}",
            )
        match self.inner.decode(value[self.key]):
            case Ok() as ok:
                return ok
            case Err(error=error):
                return Err(error.at(self.key))

    def encode(self, value: T) -> dict[str, Any]:
        return {self.key: self.inner.encode(value)}
