#!/usr/bin/env python3
"""Check that every supported data file of an export decodes and round-trips.

For each supported ``data/<stem>.js`` member (and its ``-part<N>`` siblings)
present in the zip: strip the JavaScript prefix, decode with the file's codec,
re-encode, and compare the compact JSON bytes of both, key order included. A
member fails when it cannot be read, when decoding returns an error, or when
the re-encoded bytes differ.

Usage:
    python3 scripts/verify_archive.py --input-file ~/Downloads/twitter-archive.zip
    python3 scripts/verify_archive.py --input-file export.zip --only tweets --only like

Structured JSON output goes to stdout; human messages go to stderr.
Exit status is 1 when any member fails.
"""
from __future__ import annotations

import argparse
import logging
import re
import sys
import zipfile
from pathlib import Path
from typing import Any

import orjson

from twitter_archive.codec_types import Codec, Err, Ok
from twitter_archive.entities import FILE_CODECS
from twitter_archive.io_utils import encode_json, load_json, strip_javascript_prefix

log = logging.getLogger("verify_archive")

_MEMBER_RE = re.compile(r"data/(?P<stem>[a-z0-9-]+?)(?:-part(?P<part>[0-9]+))?\.js")


def dump_json(obj: Any) -> None:
    sys.stdout.buffer.write(orjson.dumps(obj, option=orjson.OPT_INDENT_2))
    sys.stdout.buffer.write(b"\n")


def supported_members(names: list[str], only: set[str] | None = None) -> list[tuple[str, str]]:
    """(member, stem) for every archive member with a codec, in archive order."""
    found: list[tuple[str, str]] = []
    for name in names:
        m = _MEMBER_RE.fullmatch(name)
        if m is None:
            continue
        stem = m.group("stem")
        if stem not in FILE_CODECS or (only and stem not in only):
            continue
        found.append((name, stem))
    return found


def verify_text(text: str, codec: Codec[Any]) -> dict[str, Any]:
    """Decode and re-encode one member's text; report the outcome."""
    try:
        raw = load_json(strip_javascript_prefix(text))
    except orjson.JSONDecodeError as exc:
        return {"status": "invalid_json", "detail": str(exc)}

    match codec.decode(raw):
        case Err(error=error):
            return {
                "status": "decode_failed",
                "kind": error.kind.value,
                "detail": error.describe(),
            }
        case Ok(value=decoded):
            # Compared as compact bytes so that key order counts.
            if encode_json(codec.encode(decoded)) != encode_json(raw):
                return {"status": "roundtrip_mismatch"}
            records = len(decoded) if isinstance(decoded, tuple) else 1
            return {"status": "ok", "records": records}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Decode and round-trip every supported data file of an archive export."
    )
    parser.add_argument(
        "--input-file", type=Path, required=True,
        help="Path to the twitter-<uuid>.zip export",
    )
    parser.add_argument(
        "--only", action="append", choices=sorted(FILE_CODECS), default=None,
        help="Restrict to this data file stem (repeatable)",
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    try:
        archive = zipfile.ZipFile(args.input_file)
    except (OSError, zipfile.BadZipFile) as exc:
        log.error("cannot open %s: %s", args.input_file, exc)
        return 1

    results: dict[str, Any] = {}
    with archive:
        members = supported_members(archive.namelist(), set(args.only) if args.only else None)
        log.info("verifying %d members of %s", len(members), args.input_file)
        for member, stem in members:
            try:
                text = archive.read(member).decode("utf-8")
            except (zipfile.BadZipFile, UnicodeDecodeError) as exc:
                results[member] = {"status": "unreadable", "detail": str(exc)}
            else:
                results[member] = verify_text(text, FILE_CODECS[stem])
            log.debug("%s: %s", member, results[member]["status"])

    failed = sorted(m for m, r in results.items() if r["status"] != "ok")
    for member in failed:
        log.warning("%s: %s", member, results[member].get("detail", results[member]["status"]))
    dump_json({"members": results, "failed": failed})
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
