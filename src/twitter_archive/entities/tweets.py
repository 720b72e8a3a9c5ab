"""tweets.js and deleted-tweets.js: the account's own tweets.

Both files hold the same tweet object shape. Unlike most files, tweet objects
use snake_case keys, apart from ``edit_info.initial`` which is camelCase.
Counters are number-like strings; entity offsets are two-element
index arrays into ``full_text``.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from twitter_archive.codec_types import IndexRange
from twitter_archive.datetime_codecs import CREATED_AT, DATE_TIME_ISO_8601
from twitter_archive.envelope import Envelope
from twitter_archive.numeric_codecs import INDICES, NUMBER_LIKE_STRING
from twitter_archive.records import (
    BOOLEAN,
    STRING,
    STRING_LIST,
    Field,
    ListCodec,
    RecordCodec,
)


@dataclass(frozen=True, slots=True)
class EditInfoInitial:
    edit_tweet_ids: tuple[str, ...]
    editable_until: datetime
    edits_remaining: int
    is_edit_eligible: bool


@dataclass(frozen=True, slots=True)
class EditInfo:
    initial: EditInfoInitial


@dataclass(frozen=True, slots=True)
class EntityEntry:
    """Hashtag or cashtag."""
    text: str
    indices: IndexRange


@dataclass(frozen=True, slots=True)
class UserMention:
    name: str
    screen_name: str
    indices: IndexRange
    id_str: str
    id: str


@dataclass(frozen=True, slots=True)
class UrlEntity:
    url: str
    expanded_url: str
    display_url: str
    indices: IndexRange


@dataclass(frozen=True, slots=True)
class Entities:
    hashtags: tuple[EntityEntry, ...]
    symbols: tuple[EntityEntry, ...]
    user_mentions: tuple[UserMention, ...]
    urls: tuple[UrlEntity, ...]


@dataclass(frozen=True, slots=True)
class Tweet:
    edit_info: EditInfo
    retweeted: bool
    source: str
    entities: Entities
    display_text_range: IndexRange
    favorite_count: int
    in_reply_to_status_id_str: str | None
    id_str: str
    in_reply_to_user_id: str | None
    truncated: bool
    retweet_count: int
    id: str
    in_reply_to_status_id: str | None
    possibly_sensitive: bool | None
    created_at: datetime
    favorited: bool
    full_text: str
    lang: str
    in_reply_to_screen_name: str | None
    in_reply_to_user_id_str: str | None


EDIT_INFO_INITIAL = RecordCodec(EditInfoInitial, (
    Field("editTweetIds", "edit_tweet_ids", STRING_LIST),
    Field("editableUntil", "editable_until", DATE_TIME_ISO_8601),
    Field("editsRemaining", "edits_remaining", NUMBER_LIKE_STRING),
    Field("isEditEligible", "is_edit_eligible", BOOLEAN),
))

EDIT_INFO = RecordCodec(EditInfo, (
    Field("initial", "initial", EDIT_INFO_INITIAL),
))

ENTITY_ENTRY = RecordCodec(EntityEntry, (
    Field("text", "text", STRING),
    Field("indices", "indices", INDICES),
))

USER_MENTION = RecordCodec(UserMention, (
    Field("name", "name", STRING),
    Field("screen_name", "screen_name", STRING),
    Field("indices", "indices", INDICES),
    Field("id_str", "id_str", STRING),
    Field("id", "id", STRING),
))

URL_ENTITY = RecordCodec(UrlEntity, (
    Field("url", "url", STRING),
    Field("expanded_url", "expanded_url", STRING),
    Field("display_url", "display_url", STRING),
    Field("indices", "indices", INDICES),
))

ENTITIES = RecordCodec(Entities, (
    Field("hashtags", "hashtags", ListCodec(ENTITY_ENTRY)),
    Field("symbols", "symbols", ListCodec(ENTITY_ENTRY)),
    Field("user_mentions", "user_mentions", ListCodec(USER_MENTION)),
    Field("urls", "urls", ListCodec(URL_ENTITY)),
))

TWEET = RecordCodec(Tweet, (
    Field("edit_info", "edit_info", EDIT_INFO),
    Field("retweeted", "retweeted", BOOLEAN),
    Field("source", "source", STRING),
    Field("entities", "entities", ENTITIES),
    Field("display_text_range", "display_text_range", INDICES),
    Field("favorite_count", "favorite_count", NUMBER_LIKE_STRING),
    Field("in_reply_to_status_id_str", "in_reply_to_status_id_str", STRING, optional=True),
    Field("id_str", "id_str", STRING),
    Field("in_reply_to_user_id", "in_reply_to_user_id", STRING, optional=True),
    Field("truncated", "truncated", BOOLEAN),
    Field("retweet_count", "retweet_count", NUMBER_LIKE_STRING),
    Field("id", "id", STRING),
    Field("in_reply_to_status_id", "in_reply_to_status_id", STRING, optional=True),
    Field("possibly_sensitive", "possibly_sensitive", BOOLEAN, optional=True),
    Field("created_at", "created_at", CREATED_AT),
    Field("favorited", "favorited", BOOLEAN),
    Field("full_text", "full_text", STRING),
    Field("lang", "lang", STRING),
    Field("in_reply_to_screen_name", "in_reply_to_screen_name", STRING, optional=True),
    Field("in_reply_to_user_id_str", "in_reply_to_user_id_str", STRING, optional=True),
))

TWEETS = ListCodec(Envelope("tweet", TWEET))
