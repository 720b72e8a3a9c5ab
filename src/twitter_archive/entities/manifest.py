"""manifest.js: archive metadata and the index of data files.

The payload is a single object (not a list) assigned to
``window.__THAR_CONFIG``. ``dataTypes`` is keyed by data type name; each entry
lists its files and, for media-bearing types, a media directory.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime

from twitter_archive.datetime_codecs import DATE_TIME_ISO_8601
from twitter_archive.numeric_codecs import NUMBER_LIKE_STRING
from twitter_archive.records import (
    BOOLEAN,
    STRING,
    Field,
    ListCodec,
    MappingCodec,
    RecordCodec,
)


@dataclass(frozen=True, slots=True)
class UserInfo:
    account_id: str
    user_name: str
    display_name: str


@dataclass(frozen=True, slots=True)
class ArchiveInfo:
    size_bytes: int
    generation_date: datetime
    is_partial_archive: bool
    max_part_size_bytes: int


@dataclass(frozen=True, slots=True)
class ReadmeInfo:
    file_name: str
    directory: str
    name: str


@dataclass(frozen=True, slots=True)
class DataFile:
    file_name: str      # "data/tweets.js"
    global_name: str    # "YTD.tweets.part0"
    count: int


@dataclass(frozen=True, slots=True)
class DataType:
    media_directory: str | None
    files: tuple[DataFile, ...] | None


@dataclass(frozen=True, slots=True)
class Manifest:
    user_info: UserInfo
    archive_info: ArchiveInfo
    readme_info: ReadmeInfo
    data_types: Mapping[str, DataType]


USER_INFO = RecordCodec(UserInfo, (
    Field("accountId", "account_id", STRING),
    Field("userName", "user_name", STRING),
    Field("displayName", "display_name", STRING),
))

ARCHIVE_INFO = RecordCodec(ArchiveInfo, (
    Field("sizeBytes", "size_bytes", NUMBER_LIKE_STRING),
    Field("generationDate", "generation_date", DATE_TIME_ISO_8601),
    Field("isPartialArchive", "is_partial_archive", BOOLEAN),
    Field("maxPartSizeBytes", "max_part_size_bytes", NUMBER_LIKE_STRING),
))

README_INFO = RecordCodec(ReadmeInfo, (
    Field("fileName", "file_name", STRING),
    Field("directory", "directory", STRING),
    Field("name", "name", STRING),
))

DATA_FILE = RecordCodec(DataFile, (
    Field("fileName", "file_name", STRING),
    Field("globalName", "global_name", STRING),
    Field("count", "count", NUMBER_LIKE_STRING),
))

DATA_TYPE = RecordCodec(DataType, (
    Field("mediaDirectory", "media_directory", STRING, optional=True),
    Field("files", "files", ListCodec(DATA_FILE), optional=True),
))

MANIFEST = RecordCodec(Manifest, (
    Field("userInfo", "user_info", USER_INFO),
    Field("archiveInfo", "archive_info", ARCHIVE_INFO),
    Field("readmeInfo", "readme_info", README_INFO),
    Field("dataTypes", "data_types", MappingCodec(DATA_TYPE)),
))
