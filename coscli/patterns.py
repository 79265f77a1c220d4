"""Decoding and regular-expression filtering of listed object keys."""

from __future__ import annotations

import copy
import dataclasses
import re
from collections.abc import Iterable, Mapping
from typing import Any, TypeVar
from urllib.parse import unquote_plus

T = TypeVar("T")

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _query_unescape(value: str) -> str:
    """Decode a query-escaped key; malformed escapes yield an empty string."""
    if _BAD_ESCAPE.search(value):
        return ""
    return unquote_plus(value)


def _key_of(item: Any) -> str:
    if isinstance(item, Mapping):
        return item["key"]
    return item.key


def _with_key(item: T, key: str) -> T:
    if isinstance(item, Mapping):
        updated = dict(item)
        updated["key"] = key
        return updated  # type: ignore[return-value]
    if dataclasses.is_dataclass(item) and not isinstance(item, type):
        return dataclasses.replace(item, key=key)
    duplicate = copy.copy(item)
    duplicate.key = key  # type: ignore[attr-defined]
    return duplicate


def url_decode_keys(items: Iterable[T]) -> list[T]:
    """Return copies of ``items`` with their URL-encoded ``key`` decoded.

    Items are mappings with a ``"key"`` entry or objects with a ``key``
    attribute; the originals are left untouched.
    """
    return [_with_key(item, _query_unescape(_key_of(item))) for item in items]


def match_key_pattern(items: Iterable[T], pattern: str, include: bool) -> list[T]:
    """Keep the items whose key matches ``pattern`` (or does not, if excluding).

    The pattern matches anywhere in the key. An invalid pattern matches
    nothing, so it keeps nothing when including and everything when excluding.
    """
    try:
        regex: re.Pattern[str] | None = re.compile(pattern)
    except re.error:
        regex = None

    def matches(item: T) -> bool:
        found = regex is not None and regex.search(_key_of(item)) is not None
        return found if include else not found

    return [item for item in items if matches(item)]