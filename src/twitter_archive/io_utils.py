"""I/O utilities for archive members and JSON text.

Archive members are JavaScript, not JSON: each ``data/<name>.js`` file starts
with an assignment such as ``window.YTD.tweets.part0 = `` (``manifest.js``
uses ``window.__THAR_CONFIG = ``) followed by the JSON payload.
``strip_javascript_prefix`` removes it before the codec layer sees the text.

JSON is parsed and rendered with orjson. ``encode_json`` renders compactly in
insertion order, which for re-encoded records is field declaration order.
"""
from __future__ import annotations

import logging
import re
import zipfile
from pathlib import Path
from typing import Any

import orjson

from twitter_archive.codec_types import Codec, decode_or_raise

log = logging.getLogger(__name__)

JAVASCRIPT_PREFIX_RE = re.compile(
    r"\A\s*window\.(?:YTD\.(?P<name>[A-Za-z0-9_]+)\.part(?P<part>[0-9]+)|__THAR_CONFIG)"
    r"\s*=\s*",
    re.ASCII,
)


def strip_javascript_prefix(text: str) -> str:
    """Remove one leading ``window.YTD.<name>.part<N> = `` or
    ``window.__THAR_CONFIG = `` assignment.

    Text without the assignment is returned unchanged.
    """
    m = JAVASCRIPT_PREFIX_RE.match(text)
    if m is None:
        return text
    return text[m.end():]


def member_name(name: str, part: int = 0) -> str:
    """Zip member path for a data file: ``tweets`` -> ``data/tweets.js``.

    Large archives split a file into parts; part N > 0 lives in
    ``data/<name>-part<N>.js``.
    """
    if part < 0:
        raise ValueError(f"part must be >= 0, got {part}")
    if part == 0:
        return f"data/{name}.js"
    return f"data/{name}-part{part}.js"


def load_json(text: str | bytes) -> Any:
    """Parse JSON text with orjson."""
    return orjson.loads(text)


def encode_json(value: Any) -> bytes:
    """Render a JSON value compactly, preserving key order."""
    return orjson.dumps(value)


def read_member(zip_path: Path, member: str) -> str:
    """Read one member of a zip archive as UTF-8 text."""
    with zipfile.ZipFile(zip_path) as archive:
        raw = archive.read(member)
    log.debug("read %s from %s (%d bytes)", member, zip_path, len(raw))
    return raw.decode("utf-8")


def decode_text[T](text: str, codec: Codec[T]) -> T:
    """Strip the JavaScript prefix, parse, and decode with ``codec``.

    Raises:
        orjson.JSONDecodeError: the payload is not JSON.
        FormatDecodeError: the JSON does not match ``codec``.
    """
    return decode_or_raise(codec, load_json(strip_javascript_prefix(text)))


def load_member[T](zip_path: Path, name: str, codec: Codec[T], *, part: int = 0) -> T:
    """Read ``data/<name>.js`` from the archive and decode it with ``codec``."""
    return decode_text(read_member(zip_path, member_name(name, part)), codec)
