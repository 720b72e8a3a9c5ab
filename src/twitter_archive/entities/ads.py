"""ad-impressions.js: promoted content shown to the account.

Each file entry nests four envelopes deep before reaching the impressions::

    {"ad": {"adsUserData": {"adImpressions": {"impressions": [...]}}}}
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from twitter_archive.datetime_codecs import DATE_YEAR_MONTH_DAY_HOUR_MINUTE_SECOND
from twitter_archive.envelope import Envelope
from twitter_archive.records import STRING, STRING_LIST, Field, ListCodec, RecordCodec


@dataclass(frozen=True, slots=True)
class DeviceInfo:
    os_type: str


@dataclass(frozen=True, slots=True)
class PromotedTweetInfo:
    tweet_id: str
    tweet_text: str
    urls: tuple[str, ...]
    media_urls: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class AdvertiserInfo:
    advertiser_name: str | None
    screen_name: str | None


@dataclass(frozen=True, slots=True)
class TargetingCriteria:
    targeting_type: str
    targeting_value: str | None


@dataclass(frozen=True, slots=True)
class Impression:
    device_info: DeviceInfo
    display_location: str
    promoted_tweet_info: PromotedTweetInfo | None
    advertiser_info: AdvertiserInfo
    matched_targeting_criteria: tuple[TargetingCriteria, ...] | None
    impression_time: datetime   # "2023-06-05 17:00:52", UTC


DEVICE_INFO = RecordCodec(DeviceInfo, (
    Field("osType", "os_type", STRING),
))

PROMOTED_TWEET_INFO = RecordCodec(PromotedTweetInfo, (
    Field("tweetId", "tweet_id", STRING),
    Field("tweetText", "tweet_text", STRING),
    Field("urls", "urls", STRING_LIST),
    Field("mediaUrls", "media_urls", STRING_LIST),
))

ADVERTISER_INFO = RecordCodec(AdvertiserInfo, (
    Field("advertiserName", "advertiser_name", STRING, optional=True),
    Field("screenName", "screen_name", STRING, optional=True),
))

TARGETING_CRITERIA = RecordCodec(TargetingCriteria, (
    Field("targetingType", "targeting_type", STRING),
    Field("targetingValue", "targeting_value", STRING, optional=True),
))

IMPRESSION = RecordCodec(Impression, (
    Field("deviceInfo", "device_info", DEVICE_INFO),
    Field("displayLocation", "display_location", STRING),
    Field("promotedTweetInfo", "promoted_tweet_info", PROMOTED_TWEET_INFO, optional=True),
    Field("advertiserInfo", "advertiser_info", ADVERTISER_INFO),
    Field(
        "matchedTargetingCriteria", "matched_targeting_criteria",
        ListCodec(TARGETING_CRITERIA), optional=True,
    ),
    Field("impressionTime", "impression_time", DATE_YEAR_MONTH_DAY_HOUR_MINUTE_SECOND),
))

AD_IMPRESSIONS = ListCodec(
    Envelope("ad", Envelope("adsUserData", Envelope("adImpressions", Envelope(
        "impressions", ListCodec(IMPRESSION),
    ))))
)
