"""Account relationships: block.js, mute.js, follower.js, following.js, like.js.

All four relationship files share one inner shape and differ only in the
envelope key::

    [{"blocking": {"accountId": "1111", "userLink": "https://twitter.com/intent/user?user_id=1111"}}]
"""
from __future__ import annotations

from dataclasses import dataclass

from twitter_archive.envelope import Envelope
from twitter_archive.records import STRING, Field, ListCodec, RecordCodec


@dataclass(frozen=True, slots=True)
class AccountLink:
    """Another account, by ID and intent URL."""
    account_id: str
    user_link: str


ACCOUNT_LINK = RecordCodec(AccountLink, (
    Field("accountId", "account_id", STRING),
    Field("userLink", "user_link", STRING),
))

BLOCK = ListCodec(Envelope("blocking", ACCOUNT_LINK))
MUTE = ListCodec(Envelope("muting", ACCOUNT_LINK))
FOLLOWER = ListCodec(Envelope("follower", ACCOUNT_LINK))
FOLLOWING = ListCodec(Envelope("following", ACCOUNT_LINK))


@dataclass(frozen=True, slots=True)
class Like:
    tweet_id: str
    full_text: str | None   # absent for likes of since-deleted tweets
    expanded_url: str


LIKE_RECORD = RecordCodec(Like, (
    Field("tweetId", "tweet_id", STRING),
    Field("fullText", "full_text", STRING, optional=True),
    Field("expandedUrl", "expanded_url", STRING),
))

LIKE = ListCodec(Envelope("like", LIKE_RECORD))
