"""Polymorphic decoding of untagged, heterogeneous event lists.

Group conversations in ``direct-messages-group.js`` hold one ``messages``
array mixing several event shapes, with no discriminant field::

    [{"messageCreate": {...}}, {"participantsLeave": {...}}, {"joinConversation": {...}}]

An ``EventListCodec`` owns an ordered tuple of ``VariantProbe``s. Each
element is classified by trying the probes in that order:

  1. the probe's predicate (cheap, total) must accept the element;
  2. the probe's codec must then decode the element in full.

The first probe passing both wins; later probes are never consulted, so the
tuple order is the tie-breaker for elements more than one shape accepts. If no
probe accepts an element, decoding the whole list fails with
NO_VARIANT_MATCHED. A partial list is never returned.

Each decoded element is an ``Event`` that remembers its variant. Encoding
re-emits through that variant's codec, so the list round-trips verbatim.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
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
from twitter_archive.envelope import Envelope

log = logging.getLogger(__name__)

type Predicate = Callable[[Any], bool]


@dataclass(frozen=True, slots=True)
class Event[T]:
    """One decoded list element, tagged with the variant that produced it."""
    variant: str
    value: T


@dataclass(frozen=True, slots=True)
class VariantProbe:
    """One candidate shape: a total predicate plus the codec for that shape."""
    name: str
    predicate: Predicate
    codec: Codec[Any]


def has_keys(*keys: str) -> Predicate:
    """Predicate accepting JSON objects that contain every key in ``keys``."""
    required = frozenset(keys)

    def predicate(value: Any) -> bool:
        return isinstance(value, dict) and required.issubset(value)

    return predicate


def envelope_probe(key: str, inner: Codec[Any]) -> VariantProbe:
    """Probe for an envelope-wrapped variant; the envelope key names the variant."""
    return VariantProbe(name=key, predicate=has_keys(key), codec=Envelope(key, inner))


class EventListCodec:
    """JSON array of untagged events <-> tuple of ``Event``s, order preserved."""

    def __init__(self, name: str, probes: tuple[VariantProbe, ...]) -> None:
        if not probes:
            raise ValueError(f"{name}: at least one variant probe is required")
        names = [p.name for p in probes]
        if len(set(names)) != len(names):
            raise ValueError(f"{name}: duplicate variant names in {names}")
        self.name = name
        self.probes = probes
        self._by_name = {p.name: p for p in probes}

    def __repr__(self) -> str:
        return f"EventListCodec({self.name!r}, {[p.name for p in self.probes]})"

    @property
    def priority(self) -> tuple[str, ...]:
        """Variant names in the order they are tried."""
        return tuple(p.name for p in self.probes)

    def classify(self, element: Any) -> Result[Event[Any], FormatError]:
        """Decode one element with the first probe that accepts it."""
        rejections: list[str] = []
        for probe in self.probes:
            if not probe.predicate(element):
                rejections.append(f"{probe.name}: shape not present")
                continue
            match probe.codec.decode(element):
                case Ok(value=decoded):
                    return Ok(Event(probe.name, decoded))
                case Err(error=error):
                    log.debug("%s: variant %s rejected: %s", self.name, probe.name, error.describe())
                    rejections.append(f"{probe.name}: {error.kind.value}")
        return format_error(
            FormatErrorKind.NO_VARIANT_MATCHED, self.name, element,
            "no variant matched (tried " + "; ".join(rejections) + ")",
        )

    def decode(self, value: Any) -> Result[tuple[Event[Any], ...], FormatError]:
        if not isinstance(value, list):
            return format_error(
                FormatErrorKind.SHAPE_MISMATCH, self.name, value, "expected a JSON array",
            )
        events: list[Event[Any]] = []
        for i, element in enumerate(value):
            match self.classify(element):
                case Ok(value=event):
                    events.append(event)
                case Err(error=error):
                    return Err(error.at(i))
        return Ok(tuple(events))

    def encode(self, value: tuple[Event[Any], ...]) -> list[Any]:
        out: list[Any] = []
        for event in value:
            probe = self._by_name.get(event.variant)
            if probe is None:
                raise ValueError(f"{self.name}: unknown variant {event.variant!r}")
            out.append(probe.codec.encode(event.value))
        return out
