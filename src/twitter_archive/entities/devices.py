"""ni-devices.js: messaging devices (SMS notification numbers)."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from twitter_archive.datetime_codecs import DATE_YEAR_MONTH_DAY
from twitter_archive.envelope import Envelope
from twitter_archive.records import STRING, Field, ListCodec, RecordCodec


@dataclass(frozen=True, slots=True)
class MessagingDevice:
    phone_number: str
    carrier: str
    device_type: str
    updated_date: datetime   # "2021.10.20", midnight UTC
    created_date: datetime


MESSAGING_DEVICE = RecordCodec(MessagingDevice, (
    Field("phoneNumber", "phone_number", STRING),
    Field("carrier", "carrier", STRING),
    Field("deviceType", "device_type", STRING),
    Field("updatedDate", "updated_date", DATE_YEAR_MONTH_DAY),
    Field("createdDate", "created_date", DATE_YEAR_MONTH_DAY),
))

NI_DEVICES = ListCodec(
    Envelope("niDeviceResponse", Envelope("messagingDevice", MESSAGING_DEVICE))
)
