"""Tests for twitter_archive.events (polymorphic event lists)."""
from __future__ import annotations

import logging

import orjson
import pytest

from twitter_archive.codec_types import Err, FormatErrorKind, Ok
from twitter_archive.entities.direct_messages import (
    GROUP_MESSAGE_EVENTS,
    JoinConversation,
    MessageCreate,
    ParticipantsLeave,
)
from twitter_archive.envelope import Envelope
from twitter_archive.events import (
    Event,
    EventListCodec,
    VariantProbe,
    envelope_probe,
    has_keys,
)
from twitter_archive.io_utils import encode_json
from twitter_archive.numeric_codecs import NUMBER_LIKE_STRING
from twitter_archive.records import STRING

MESSAGE = {
    "messageCreate": {
        "reactions": [],
        "urls": [],
        "text": "hello",
        "mediaUrls": [],
        "senderId": "111",
        "id": "9001",
        "createdAt": "2023-08-12T16:10:37.000Z",
    }
}
LEAVE = {"participantsLeave": {"userIds": ["222"], "createdAt": "2023-08-12T16:11:00.000Z"}}
JOIN = {
    "joinConversation": {
        "initiatingUserId": "111",
        "participantsSnapshot": ["111", "222", "333"],
        "createdAt": "2023-08-12T16:00:00.000Z",
    }
}


class TestHasKeys:
    def test_requires_every_key(self) -> None:
        pred = has_keys("a", "b")
        assert pred({"a": 1, "b": 2, "c": 3})
        assert not pred({"a": 1})

    def test_total_over_non_objects(self) -> None:
        pred = has_keys("a")
        for value in (None, "a", ["a"], 1):
            assert pred(value) is False


class TestVariantPriority:
    def test_group_message_priority_is_fixed(self) -> None:
        assert GROUP_MESSAGE_EVENTS.priority == (
            "messageCreate", "participantsLeave", "joinConversation",
        )

    def test_earlier_variant_wins_when_both_match(self) -> None:
        first = VariantProbe("first", has_keys("a"), Envelope("a", STRING))
        second = VariantProbe("second", has_keys("a"), Envelope("a", STRING))
        assert EventListCodec("ab", (first, second)).decode([{"a": "x"}]) == Ok(
            (Event("first", "x"),)
        )
        assert EventListCodec("ba", (second, first)).decode([{"a": "x"}]) == Ok(
            (Event("second", "x"),)
        )

    def test_falls_through_when_full_decode_fails(self) -> None:
        numeric = VariantProbe("numeric", has_keys("a"), Envelope("a", NUMBER_LIKE_STRING))
        text = VariantProbe("text", has_keys("a"), Envelope("a", STRING))
        codec = EventListCodec("mixed", (numeric, text))
        assert codec.decode([{"a": "7"}, {"a": "seven"}]) == Ok(
            (Event("numeric", 7), Event("text", "seven"))
        )

    def test_rejected_probe_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        numeric = VariantProbe("numeric", has_keys("a"), Envelope("a", NUMBER_LIKE_STRING))
        text = VariantProbe("text", has_keys("a"), Envelope("a", STRING))
        with caplog.at_level(logging.DEBUG, logger="twitter_archive.events"):
            EventListCodec("mixed", (numeric, text)).decode([{"a": "seven"}])
        assert "variant numeric rejected" in caplog.text


class TestGroupMessages:
    def test_mixed_list_decodes_in_order(self) -> None:
        result = GROUP_MESSAGE_EVENTS.decode([JOIN, MESSAGE, LEAVE])
        assert isinstance(result, Ok)
        variants = [e.variant for e in result.value]
        assert variants == ["joinConversation", "messageCreate", "participantsLeave"]
        assert isinstance(result.value[0].value, JoinConversation)
        assert isinstance(result.value[1].value, MessageCreate)
        assert isinstance(result.value[2].value, ParticipantsLeave)
        assert result.value[1].value.recipient_id is None

    def test_roundtrip_is_verbatim(self) -> None:
        raw = [MESSAGE, LEAVE, JOIN, MESSAGE]
        result = GROUP_MESSAGE_EVENTS.decode(raw)
        assert isinstance(result, Ok)
        assert encode_json(GROUP_MESSAGE_EVENTS.encode(result.value)) == orjson.dumps(raw)

    def test_empty_list(self) -> None:
        assert GROUP_MESSAGE_EVENTS.decode([]) == Ok(())

    def test_unmatched_element_fails_whole_list(self) -> None:
        unknown = {"conversationNameUpdate": {"name": "x"}}
        result = GROUP_MESSAGE_EVENTS.decode([MESSAGE, unknown, LEAVE])
        assert isinstance(result, Err)
        assert result.error.kind is FormatErrorKind.NO_VARIANT_MATCHED
        assert result.error.path == (1,)
        for name in GROUP_MESSAGE_EVENTS.priority:
            assert name in result.error.message

    def test_malformed_known_variant_fails_whole_list(self) -> None:
        bad_leave = {"participantsLeave": {"userIds": ["222"], "createdAt": "2023-08-12"}}
        result = GROUP_MESSAGE_EVENTS.decode([MESSAGE, MESSAGE, bad_leave])
        assert isinstance(result, Err)
        assert result.error.kind is FormatErrorKind.NO_VARIANT_MATCHED
        assert result.error.path == (2,)
        assert "participantsLeave: pattern_mismatch" in result.error.message

    def test_element_with_two_envelope_keys_matches_nothing(self) -> None:
        merged = {**MESSAGE, **LEAVE}
        result = GROUP_MESSAGE_EVENTS.decode([merged])
        assert isinstance(result, Err)
        assert result.error.kind is FormatErrorKind.NO_VARIANT_MATCHED

    def test_non_list_is_shape_mismatch(self) -> None:
        result = GROUP_MESSAGE_EVENTS.decode(MESSAGE)
        assert isinstance(result, Err)
        assert result.error.kind is FormatErrorKind.SHAPE_MISMATCH


class TestEventListCodecConstruction:
    def test_requires_probes(self) -> None:
        with pytest.raises(ValueError):
            EventListCodec("empty", ())

    def test_rejects_duplicate_names(self) -> None:
        probe = envelope_probe("a", STRING)
        with pytest.raises(ValueError):
            EventListCodec("dup", (probe, probe))

    def test_encode_unknown_variant(self) -> None:
        codec = EventListCodec("one", (envelope_probe("a", STRING),))
        with pytest.raises(ValueError):
            codec.encode((Event("b", "x"),))
