"""Parsing of object metadata given as ``key:value#key:value`` strings."""

from __future__ import annotations

import re
import string
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

_TOKEN_CHARS = frozenset(string.ascii_letters + string.digits + "!#$%&'*+-.^_`|~")

_RFC3339 = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(\.\d+)?(Z|[+-]\d{2}:\d{2})"
)
_INT64 = re.compile(r"[+-]?\d+")
_DAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


@dataclass
class Meta:
    """Standard and custom headers to attach to uploaded objects."""

    cache_control: str = ""
    content_disposition: str = ""
    content_encoding: str = ""
    content_type: str = ""
    content_md5: str = ""
    content_length: int = 0
    content_language: str = ""
    expires: str = ""
    x_cos_meta: dict[str, str] = field(default_factory=dict)
    meta_change: bool = False


def _canonical_header_key(key: str) -> str:
    if not key or any(ch not in _TOKEN_CHARS for ch in key):
        return key
    return "-".join(part[:1].upper() + part[1:].lower() for part in key.split("-"))


def _rfc3339_to_rfc1123(value: str) -> str:
    match = _RFC3339.fullmatch(value)
    if not match:
        raise ValueError(f'cannot parse "{value}" as RFC3339')
    year, month, day, hour, minute, second = (int(g) for g in match.groups()[:6])
    zone = match.group(8)
    if zone == "Z":
        tz = timezone.utc
        zone_name = "UTC"
    else:
        sign = -1 if zone[0] == "-" else 1
        hours, minutes = int(zone[1:3]), int(zone[4:6])
        tz = timezone(sign * timedelta(hours=hours, minutes=minutes))
        zone_name = f"{zone[0]}{zone[1:3]}{zone[4:6]}"
    moment = datetime(year, month, day, hour, minute, second, tzinfo=tz)
    return (
        f"{_DAYS[moment.weekday()]}, {moment.day:02d} {_MONTHS[moment.month - 1]} "
        f"{moment.year:04d} {moment.hour:02d}:{moment.minute:02d}:{moment.second:02d} "
        f"{zone_name}"
    )


def meta_string_to_header(meta: str) -> Meta:
    """Parse ``key:value`` pairs separated by ``#`` into a :class:`Meta`."""
    if meta == "":
        return Meta()
    headers: dict[str, str] = {}
    custom: dict[str, str] = {}
    meta_change = False
    for kv in meta.strip().split("#"):
        if kv == "":
            continue
        item = kv.split(":")
        if len(item) < 2:
            raise ValueError(f"invalid meta item [{' '.join(item)}]")
        key = item[0].lower()
        value = ":".join(item[1:])
        if key.startswith("x-cos-meta-"):
            custom[_canonical_header_key(key)] = value
            meta_change = True
        else:
            headers[key] = value

    expires = headers.get("expires", "")
    if expires:
        try:
            expires = _rfc3339_to_rfc1123(expires)
        except ValueError as exc:
            raise ValueError(f"invalid meta expires format, {exc}") from exc

    result = Meta(
        cache_control=headers.get("cache-control", ""),
        content_disposition=headers.get("content-disposition", ""),
        content_encoding=headers.get("content-encoding", ""),
        content_type=headers.get("content-type", ""),
        content_md5=headers.get("content-md5", ""),
        content_length=0,
        content_language=headers.get("content-language", ""),
        expires=expires,
        x_cos_meta=custom,
        meta_change=meta_change,
    )

    length = headers.get("content-length", "")
    if length:
        if not _INT64.fullmatch(length) or not -(2**63) <= int(length) < 2**63:
            raise ValueError(f'parse meta ContentLength invalid, invalid value "{length}"')
        result.content_length = int(length)
    return result