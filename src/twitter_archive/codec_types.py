"""Core types for the codec layer.

Every codec in the package shares these types. A codec never raises on bad
input: it returns ``Err(FormatError)`` and leaves the decision to abort or skip
to its caller. Only the I/O boundary (archive loader, CLI tools) turns an
``Err`` into an exception via ``decode_or_raise``.

Type hierarchy:
  Ok[T] / Err[E]     : Strict algebraic Result type
  FormatErrorKind    : Closed taxonomy of decode failures
  FormatError        : Typed failure with codec name, offending value and JSON path
  FormatDecodeError  : Exception raised at I/O boundaries
  IndexRange         : (start, end) pair decoded from a two-element string array
  Codec[T]           : Protocol every decode/encode pair satisfies
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol

# Numeric strings in the export hold 64-bit IDs and counters.
UINT64_MAX = 2**64 - 1

type JsonPath = tuple[str | int, ...]


# ---------------------------------------------------------------------------
# Result: Ok/Err
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Success case of Result[T, E].

    Usage::

        match CREATED_AT.decode(text):
            case Ok(value=instant): print(instant)
            case Err(error=e): print(e.describe())
    """
    value: T


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Failure case of Result[T, E].

    Preserves the typed failure reason. A silently substituted default would
    hide a corrupt archive record; the error keeps the offending text.
    """
    error: E


type Result[T, E] = Ok[T] | Err[E]


# ---------------------------------------------------------------------------
# FormatError: typed decode failure
# ---------------------------------------------------------------------------

class FormatErrorKind(Enum):
    SHAPE_MISMATCH = "shape_mismatch"          # wrong JSON kind for the codec
    PATTERN_MISMATCH = "pattern_mismatch"      # text does not match the fixed layout
    LENGTH_MISMATCH = "length_mismatch"        # wrong element or key count
    NO_VARIANT_MATCHED = "no_variant_matched"  # every event variant rejected an element


@dataclass(frozen=True, slots=True)
class FormatError:
    """Typed failure for one decode call.

    ``path`` locates the offending value inside the decoded document, outermost
    key first. Containers prepend their own key or index with ``at()`` as the
    error propagates outwards.
    """
    kind: FormatErrorKind
    codec: str              # "created_at" | "number_like_string" | "envelope[tweet]" | ...
    value: str              # repr() of the offending JSON value, truncated
    message: str
    path: JsonPath = ()

    def at(self, key: str | int) -> FormatError:
        """Return a copy located one level deeper, under ``key``."""
        return FormatError(
            kind=self.kind,
            codec=self.codec,
            value=self.value,
            message=self.message,
            path=(key, *self.path),
        )

    def describe(self) -> str:
        location = "".join(f"[{p!r}]" for p in self.path) or "<root>"
        return (
            f"{self.kind.value} in {self.codec} at {location}: "
            f"{self.message} (got {self.value})"
        )


def format_error(
    kind: FormatErrorKind, codec: str, value: Any, message: str,
) -> Err[FormatError]:
    """Build an ``Err`` for ``value``; long reprs are cut to keep messages readable."""
    shown = repr(value)
    if len(shown) > 80:
        shown = shown[:77] + "..."
    return Err(FormatError(kind=kind, codec=codec, value=shown, message=message))


class FormatDecodeError(ValueError):
    """Raised at I/O boundaries when a decode returns ``Err``."""

    def __init__(self, error: FormatError) -> None:
        super().__init__(error.describe())
        self.error = error


# ---------------------------------------------------------------------------
# Codec protocol
# ---------------------------------------------------------------------------

class Codec[T](Protocol):
    """A decode/encode pair between a JSON value and a typed value.

    ``decode`` is fallible and returns a Result; ``encode`` is total over the
    codec's canonical domain.
    """

    name: str

    def decode(self, value: Any) -> Result[T, FormatError]: ...

    def encode(self, value: T) -> Any: ...


def decode_or_raise[T](codec: Codec[T], value: Any) -> T:
    """Decode ``value`` with ``codec``, raising FormatDecodeError on failure."""
    match codec.decode(value):
        case Ok(value=decoded):
            return decoded
        case Err(error=error):
            raise FormatDecodeError(error)


# ---------------------------------------------------------------------------
# IndexRange: character offsets into a text field
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class IndexRange:
    """Character offsets into a text field, e.g. a hashtag inside ``full_text``.

    No ordering is enforced between ``start`` and ``end``: the export is
    archived as-is and malformed ranges are kept rather than rejected.
    """
    start: int
    end: int

    def as_tuple(self) -> tuple[int, int]:
        return (self.start, self.end)
