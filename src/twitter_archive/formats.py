"""Fixed textual date/time layouts found in the archive export.

Each FormatSpec is matched in full (``re.fullmatch``) with ASCII-only digit
classes, so partially valid or locale-specific text never decodes. Rendering
uses ``str.format`` over the named fields below rather than ``strftime`` so
that weekday and month names never depend on the process locale.

Named groups recognized by the date/time codecs:
    year, month, day, hour, minute, second, millis   : zero-padded digits
    weekday, month_name                              : English abbreviations
    offset_sign, offset_hours, offset_minutes        : numeric UTC offset
"""

from __future__ import annotations

import re
from dataclasses import dataclass

WEEKDAY_NAMES: tuple[str, ...] = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

MONTH_NAMES: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


@dataclass(frozen=True, slots=True)
class FormatSpec:
    """One fixed textual layout."""

    name: str
    layout: str                 # human-readable, used in error messages
    pattern: re.Pattern[str]
    template: str               # str.format template over the named fields

    def match(self, text: str) -> re.Match[str] | None:
        return self.pattern.fullmatch(text)


_YEAR = r"(?P<year>[0-9]{4})"
_MONTH = r"(?P<month>[0-9]{2})"
_DAY = r"(?P<day>[0-9]{2})"
_TIME = r"(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})"

# "Sat Aug 12 16:10:37 +0000 2023": tweets[].tweet.created_at
CREATED_AT_FORMAT = FormatSpec(
    name="created_at",
    layout="<Www> <Mmm> <DD> <HH:MM:SS> <+hhmm> <YYYY>",
    pattern=re.compile(
        r"(?P<weekday>" + "|".join(WEEKDAY_NAMES) + r") "
        r"(?P<month_name>" + "|".join(MONTH_NAMES) + r") "
        + _DAY + " " + _TIME + " "
        r"(?P<offset_sign>[+-])(?P<offset_hours>[0-9]{2})(?P<offset_minutes>[0-9]{2}) "
        + _YEAR,
        re.ASCII,
    ),
    template=(
        "{weekday} {month_name} {day:02d} {hour:02d}:{minute:02d}:{second:02d} "
        "+0000 {year:04d}"
    ),
)

# "2023-08-30T23:20:03.000Z": editableUntil, direct message createdAt
ISO_8601_MILLIS_FORMAT = FormatSpec(
    name="date_time_iso_8601",
    layout="<YYYY>-<MM>-<DD>T<HH:MM:SS>.<mmm>Z",
    pattern=re.compile(
        _YEAR + "-" + _MONTH + "-" + _DAY + "T" + _TIME + r"\.(?P<millis>[0-9]{3})Z",
        re.ASCII,
    ),
    template=(
        "{year:04d}-{month:02d}-{day:02d}T"
        "{hour:02d}:{minute:02d}:{second:02d}.{millis:03d}Z"
    ),
)

# "2021.10.20": ni_devices messagingDevice updatedDate/createdDate
YEAR_MONTH_DAY_FORMAT = FormatSpec(
    name="date_year_month_day",
    layout="<YYYY>.<MM>.<DD>",
    pattern=re.compile(_YEAR + r"\." + _MONTH + r"\." + _DAY, re.ASCII),
    template="{year:04d}.{month:02d}.{day:02d}",
)

# "2023-06-05 17:00:52": ad impressions impressionTime
YEAR_MONTH_DAY_HMS_FORMAT = FormatSpec(
    name="date_year_month_day_hour_minute_second",
    layout="<YYYY>-<MM>-<DD> <HH:MM:SS>",
    pattern=re.compile(_YEAR + "-" + _MONTH + "-" + _DAY + " " + _TIME, re.ASCII),
    template="{year:04d}-{month:02d}-{day:02d} {hour:02d}:{minute:02d}:{second:02d}",
)

ALL_FORMATS: tuple[FormatSpec, ...] = (
    CREATED_AT_FORMAT,
    ISO_8601_MILLIS_FORMAT,
    YEAR_MONTH_DAY_FORMAT,
    YEAR_MONTH_DAY_HMS_FORMAT,
)
