"""Typed records for the data files of an archive export.

``FILE_CODECS`` maps the stem of each supported ``data/<stem>.js`` member to
the codec for its whole payload.
"""

from types import MappingProxyType
from typing import Any

from twitter_archive.codec_types import Codec
from twitter_archive.entities.ads import AD_IMPRESSIONS, Impression
from twitter_archive.entities.devices import NI_DEVICES, MessagingDevice
from twitter_archive.entities.direct_messages import (
    DIRECT_MESSAGES,
    DIRECT_MESSAGES_GROUP,
    GROUP_MESSAGE_EVENTS,
    Conversation,
    GroupConversation,
    JoinConversation,
    MessageCreate,
    ParticipantsLeave,
)
from twitter_archive.entities.manifest import MANIFEST, Manifest
from twitter_archive.entities.relationships import (
    BLOCK,
    FOLLOWER,
    FOLLOWING,
    LIKE,
    MUTE,
    AccountLink,
    Like,
)
from twitter_archive.entities.tweets import TWEETS, Tweet

FILE_CODECS: MappingProxyType[str, Codec[Any]] = MappingProxyType({
    "ad-impressions": AD_IMPRESSIONS,
    "block": BLOCK,
    "direct-messages": DIRECT_MESSAGES,
    "deleted-tweets": TWEETS,
    "direct-messages-group": DIRECT_MESSAGES_GROUP,
    "follower": FOLLOWER,
    "following": FOLLOWING,
    "like": LIKE,
    "manifest": MANIFEST,
    "mute": MUTE,
    "ni-devices": NI_DEVICES,
    "tweets": TWEETS,
})

__all__ = [
    "AD_IMPRESSIONS",
    "AccountLink",
    "BLOCK",
    "Conversation",
    "DIRECT_MESSAGES",
    "DIRECT_MESSAGES_GROUP",
    "FILE_CODECS",
    "FOLLOWER",
    "FOLLOWING",
    "GROUP_MESSAGE_EVENTS",
    "GroupConversation",
    "Impression",
    "JoinConversation",
    "LIKE",
    "Like",
    "MANIFEST",
    "MUTE",
    "Manifest",
    "MessageCreate",
    "MessagingDevice",
    "NI_DEVICES",
    "ParticipantsLeave",
    "TWEETS",
    "Tweet",
]
