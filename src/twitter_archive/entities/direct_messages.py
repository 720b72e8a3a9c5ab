"""direct-messages.js and direct-messages-group.js.

One-to-one conversations only ever contain ``messageCreate`` events. Group
conversations mix three event shapes in one untagged ``messages`` array and are
decoded with an EventListCodec. The probe order below is a fixed part of the
format: message creation first, then participants leaving, then joins.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from twitter_archive.datetime_codecs import DATE_TIME_ISO_8601
from twitter_archive.envelope import Envelope
from twitter_archive.events import Event, EventListCodec, envelope_probe
from twitter_archive.records import STRING, STRING_LIST, Field, ListCodec, RecordCodec


@dataclass(frozen=True, slots=True)
class Reaction:
    sender_id: str
    reaction_key: str   # "like", "funny", "surprised", ...
    event_id: str
    created_at: datetime


@dataclass(frozen=True, slots=True)
class MessageUrl:
    url: str
    expanded: str
    display: str


@dataclass(frozen=True, slots=True)
class MessageCreate:
    reactions: tuple[Reaction, ...]
    urls: tuple[MessageUrl, ...]
    text: str
    media_urls: tuple[str, ...]
    sender_id: str
    id: str
    created_at: datetime
    recipient_id: str | None = None   # one-to-one conversations only


@dataclass(frozen=True, slots=True)
class ParticipantsLeave:
    user_ids: tuple[str, ...]
    created_at: datetime


@dataclass(frozen=True, slots=True)
class JoinConversation:
    initiating_user_id: str
    participants_snapshot: tuple[str, ...]
    created_at: datetime


@dataclass(frozen=True, slots=True)
class Conversation:
    conversation_id: str      # "<lower id>-<higher id>"
    messages: tuple[MessageCreate, ...]


@dataclass(frozen=True, slots=True)
class GroupConversation:
    conversation_id: str
    messages: tuple[Event[Any], ...]

    def created_messages(self) -> list[MessageCreate]:
        """Only the ``messageCreate`` events, in archive order."""
        return [m for _, m in self.indexed_messages()]

    def indexed_messages(self) -> list[tuple[int, MessageCreate]]:
        """``messageCreate`` events paired with their position in ``messages``."""
        return [
            (i, e.value) for i, e in enumerate(self.messages) if e.variant == "messageCreate"
        ]


REACTION = RecordCodec(Reaction, (
    Field("senderId", "sender_id", STRING),
    Field("reactionKey", "reaction_key", STRING),
    Field("eventId", "event_id", STRING),
    Field("createdAt", "created_at", DATE_TIME_ISO_8601),
))

MESSAGE_URL = RecordCodec(MessageUrl, (
    Field("url", "url", STRING),
    Field("expanded", "expanded", STRING),
    Field("display", "display", STRING),
))

_MESSAGE_BODY = (
    Field("reactions", "reactions", ListCodec(REACTION)),
    Field("urls", "urls", ListCodec(MESSAGE_URL)),
    Field("text", "text", STRING),
    Field("mediaUrls", "media_urls", STRING_LIST),
    Field("senderId", "sender_id", STRING),
    Field("id", "id", STRING),
    Field("createdAt", "created_at", DATE_TIME_ISO_8601),
)

DIRECT_MESSAGE_CREATE = RecordCodec(MessageCreate, (
    Field("recipientId", "recipient_id", STRING),
    *_MESSAGE_BODY,
))

GROUP_MESSAGE_CREATE = RecordCodec(MessageCreate, _MESSAGE_BODY)

PARTICIPANTS_LEAVE = RecordCodec(ParticipantsLeave, (
    Field("userIds", "user_ids", STRING_LIST),
    Field("createdAt", "created_at", DATE_TIME_ISO_8601),
))

JOIN_CONVERSATION = RecordCodec(JoinConversation, (
    Field("initiatingUserId", "initiating_user_id", STRING),
    Field("participantsSnapshot", "participants_snapshot", STRING_LIST),
    Field("createdAt", "created_at", DATE_TIME_ISO_8601),
))

GROUP_MESSAGE_EVENTS = EventListCodec("group_messages", (
    envelope_probe("messageCreate", GROUP_MESSAGE_CREATE),
    envelope_probe("participantsLeave", PARTICIPANTS_LEAVE),
    envelope_probe("joinConversation", JOIN_CONVERSATION),
))

CONVERSATION = RecordCodec(Conversation, (
    Field("conversationId", "conversation_id", STRING),
    Field("messages", "messages", ListCodec(Envelope("messageCreate", DIRECT_MESSAGE_CREATE))),
))

GROUP_CONVERSATION = RecordCodec(GroupConversation, (
    Field("conversationId", "conversation_id", STRING),
    Field("messages", "messages", GROUP_MESSAGE_EVENTS),
))

DIRECT_MESSAGES = ListCodec(Envelope("dmConversation", CONVERSATION))
DIRECT_MESSAGES_GROUP = ListCodec(Envelope("dmConversation", GROUP_CONVERSATION))
