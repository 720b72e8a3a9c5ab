#!/usr/bin/env python3
"""Search the tweets of an archive export with a regular expression.

Reads ``data/tweets.js`` out of the export zip and prints every tweet whose
``full_text`` matches.

Usage:
    python3 scripts/search_tweets.py --input-file ~/Downloads/twitter-archive.zip --expression 'rust|python'

Matches go to stdout; diagnostics go to stderr.
"""
from __future__ import annotations

import argparse
import logging
import re
import sys
import zipfile
from collections.abc import Iterator
from pathlib import Path

import orjson

from twitter_archive.codec_types import FormatDecodeError
from twitter_archive.entities.tweets import TWEETS, Tweet
from twitter_archive.io_utils import load_member

log = logging.getLogger("search_tweets")


def matching_tweets(
    tweets: tuple[Tweet, ...], pattern: re.Pattern[str],
) -> Iterator[tuple[int, Tweet]]:
    """Yield (index, tweet) for tweets whose full text matches ``pattern``."""
    for index, tweet in enumerate(tweets):
        if pattern.search(tweet.full_text):
            yield index, tweet


def format_match(index: int, tweet: Tweet) -> str:
    return (
        f"Index: {index}\n"
        f"Created at: {tweet.created_at.isoformat()}\n"
        f"vvv Content\n{tweet.full_text}\n^^^ Content"
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Print tweets from an archive export whose text matches a regular expression."
    )
    parser.add_argument(
        "--input-file", type=Path, required=True,
        help="Path to the twitter-<uuid>.zip export",
    )
    parser.add_argument(
        "--expression", required=True,
        help="Regular expression searched for in each tweet's full text",
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

    try:
        tweets = load_member(args.input_file, "tweets", TWEETS)
    except (OSError, KeyError, zipfile.BadZipFile, orjson.JSONDecodeError, FormatDecodeError) as exc:
        log.error("cannot read tweets from %s: %s", args.input_file, exc)
        return 1

    hits = 0
    for index, tweet in matching_tweets(tweets, pattern):
        print(format_match(index, tweet))
        hits += 1
    log.info("%d of %d tweets matched", hits, len(tweets))
    return 0


if __name__ == "__main__":
    sys.exit(main())
