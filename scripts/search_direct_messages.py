#!/usr/bin/env python3
"""Search one-to-one and group direct messages with a regular expression.

Reads ``data/direct-messages.js`` and ``data/direct-messages-group.js`` out of
the export zip. Group conversations also hold join/leave events; only created
messages are searched.

Usage:
    python3 scripts/search_direct_messages.py --input-file ~/Downloads/twitter-archive.zip --expression 'invoice'
    python3 scripts/search_direct_messages.py --input-file export.zip --expression 'lunch' --skip-group

Matches go to stdout; diagnostics go to stderr.
"""
from __future__ import annotations

import argparse
import logging
import re
import sys
import zipfile
from collections.abc import Iterable, Iterator
from pathlib import Path

import orjson

from twitter_archive.codec_types import FormatDecodeError
from twitter_archive.entities.direct_messages import (
    DIRECT_MESSAGES,
    DIRECT_MESSAGES_GROUP,
    MessageCreate,
)
from twitter_archive.io_utils import load_member

log = logging.getLogger("search_direct_messages")


def matching_messages(
    conversations: Iterable[tuple[str, Iterable[tuple[int, MessageCreate]]]],
    pattern: re.Pattern[str],
) -> Iterator[tuple[str, int, MessageCreate]]:
    """Yield (conversation_id, index, message) for messages whose text matches.

    ``index`` is the message's position in the archived ``messages`` array,
    counting join/leave events in group conversations.
    """
    for conversation_id, messages in conversations:
        for index, message in messages:
            if pattern.search(message.text):
                yield conversation_id, index, message


def format_match(conversation_id: str, index: int, message: MessageCreate) -> str:
    return (
        f"Conversation ID: {conversation_id}\n"
        f"Index: {index}\n"
        f"Sender ID: {message.sender_id}\n"
        f"Created at: {message.created_at.isoformat()}\n"
        f"vvv Content\n{message.text}\n^^^ Content"
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Print direct messages from an archive export whose text matches a regular expression."
    )
    parser.add_argument(
        "--input-file", type=Path, required=True,
        help="Path to the twitter-<uuid>.zip export",
    )
    parser.add_argument(
        "--expression", required=True,
        help="Regular expression searched for in each message's text",
    )
    parser.add_argument(
        "--skip-group", action="store_true",
        help="Only search one-to-one conversations",
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    try:
        pattern = re.compile(args.expression)
    except re.error as exc:
        log.error("invalid --expression %r: %s", args.expression, exc)
        return 1

    conversations: list[tuple[str, list[tuple[int, MessageCreate]]]] = []
    try:
        for conversation in load_member(args.input_file, "direct-messages", DIRECT_MESSAGES):
            conversations.append((conversation.conversation_id, list(enumerate(conversation.messages))))
    except (OSError, KeyError, zipfile.BadZipFile, orjson.JSONDecodeError, FormatDecodeError) as exc:
        log.error("cannot read direct messages from %s: %s", args.input_file, exc)
        return 1

    if not args.skip_group:
        try:
            groups = load_member(args.input_file, "direct-messages-group", DIRECT_MESSAGES_GROUP)
        except KeyError:
            # Exports of accounts that never joined a group omit the file.
            log.info("no group conversations in %s", args.input_file)
            groups = ()
        except (OSError, zipfile.BadZipFile, orjson.JSONDecodeError, FormatDecodeError) as exc:
            log.error("cannot read group direct messages from %s: %s", args.input_file, exc)
            return 1
        for group in groups:
            conversations.append((group.conversation_id, group.indexed_messages()))

    hits = 0
    for conversation_id, index, message in matching_messages(conversations, pattern):
        print(format_match(conversation_id, index, message))
        hits += 1
    log.info("%d messages matched across %d conversations", hits, len(conversations))
    return 0


if __name__ == "__main__":
    sys.exit(main())
