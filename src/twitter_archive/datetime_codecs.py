"""Date/time codecs for the four fixed layouts in the archive export.

Each codec owns exactly one FormatSpec. There is no auto-detection and no
fallback between layouts: the record schema picks the codec for each field.

Decoding normalizes to an aware UTC ``datetime``. Encoding reproduces the
layout, not just an equivalent instant:

    CREATED_AT                              "Sat Aug 12 16:10:37 +0000 2023"
    DATE_TIME_ISO_8601                      "2023-08-30T23:20:03.000Z"
    DATE_YEAR_MONTH_DAY                     "2021.10.20"
    DATE_YEAR_MONTH_DAY_HOUR_MINUTE_SECOND  "2023-06-05 17:00:52"

CREATED_AT accepts any numeric offset but always renders ``+0000``, so only
UTC-stamped text round-trips byte-for-byte (the export only contains those).
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

from twitter_archive.codec_types import (
    FormatError,
    FormatErrorKind,
    Ok,
    Result,
    format_error,
)
from twitter_archive.formats import (
    CREATED_AT_FORMAT,
    ISO_8601_MILLIS_FORMAT,
    MONTH_NAMES,
    WEEKDAY_NAMES,
    YEAR_MONTH_DAY_FORMAT,
    YEAR_MONTH_DAY_HMS_FORMAT,
    FormatSpec,
)


def as_utc(instant: datetime) -> datetime:
    """Normalize to aware UTC. Naive datetimes are taken to already be UTC."""
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


class DateTimeCodec:
    """Codec between one FormatSpec and canonical UTC instants."""

    def __init__(self, spec: FormatSpec) -> None:
        self.spec = spec
        self.name = spec.name

    def __repr__(self) -> str:
        return f"DateTimeCodec({self.spec.name!r})"

    def decode(self, value: Any) -> Result[datetime, FormatError]:
        if not isinstance(value, str):
            return format_error(
                FormatErrorKind.SHAPE_MISMATCH, self.name, value,
                "expected a JSON string",
            )
        m = self.spec.match(value)
        if m is None:
            return self._mismatch(value, f"does not match {self.spec.layout}")

        fields = m.groupdict()
        if fields.get("month_name") is not None:
            month = MONTH_NAMES.index(fields["month_name"]) + 1
        else:
            month = int(fields["month"])
        millis = fields.get("millis")

        try:
            local = datetime(
                int(fields["year"]),
                month,
                int(fields["day"]),
                int(fields.get("hour") or 0),
                int(fields.get("minute") or 0),
                int(fields.get("second") or 0),
                int(millis) * 1000 if millis is not None else 0,
            )
        except ValueError as exc:
            return self._mismatch(value, str(exc))

        weekday = fields.get("weekday")
        if weekday is not None and WEEKDAY_NAMES[local.weekday()] != weekday:
            return self._mismatch(
                value,
                f"weekday {weekday} does not fall on {local.date().isoformat()}",
            )

        if fields.get("offset_sign") is None:
            return Ok(local.replace(tzinfo=timezone.utc))

        hours = int(fields["offset_hours"])
        minutes = int(fields["offset_minutes"])
        if hours > 23 or minutes > 59:
            return self._mismatch(value, "UTC offset out of range")
        offset = timedelta(hours=hours, minutes=minutes)
        if fields["offset_sign"] == "-":
            offset = -offset
        try:
            return Ok(local.replace(tzinfo=timezone(offset)).astimezone(timezone.utc))
        except OverflowError:
            return self._mismatch(value, "instant falls outside the representable years")

    def encode(self, value: datetime) -> str:
        utc = as_utc(value)
        return self.spec.template.format(
            year=utc.year,
            month=utc.month,
            day=utc.day,
            hour=utc.hour,
            minute=utc.minute,
            second=utc.second,
            millis=utc.microsecond // 1000,
            weekday=WEEKDAY_NAMES[utc.weekday()],
            month_name=MONTH_NAMES[utc.month - 1],
        )

    def _mismatch(self, value: str, reason: str) -> Result[datetime, FormatError]:
        return format_error(FormatErrorKind.PATTERN_MISMATCH, self.name, value, reason)


CREATED_AT = DateTimeCodec(CREATED_AT_FORMAT)
DATE_TIME_ISO_8601 = DateTimeCodec(ISO_8601_MILLIS_FORMAT)
DATE_YEAR_MONTH_DAY = DateTimeCodec(YEAR_MONTH_DAY_FORMAT)
DATE_YEAR_MONTH_DAY_HOUR_MINUTE_SECOND = DateTimeCodec(YEAR_MONTH_DAY_HMS_FORMAT)
