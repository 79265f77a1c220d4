"""Parsed ``cos://bucket/key`` and local file locations."""

from __future__ import annotations

import os
import sys
from typing import ClassVar

SCHEME_PREFIX = "cos://"
COS_SEPARATOR = "/"


def _cos_string(bucket: str, obj: str) -> str:
    if obj == "":
        return f"{SCHEME_PREFIX}{bucket}"
    return f"{SCHEME_PREFIX}{bucket}{COS_SEPARATOR}{obj}"


class StorageUrl:
    """A location that is either in object storage or on the local disk."""

    is_cos_url: ClassVar[bool] = False
    is_file_url: ClassVar[bool] = False

    def update(self, url_str: str) -> None:
        """Point this location at ``url_str``."""
        raise NotImplementedError

    def __str__(self) -> str:
        raise NotImplementedError


class CosUrl(StorageUrl):
    """A bucket and object key in object storage."""

    is_cos_url = True

    def __init__(self, url_str: str) -> None:
        self.url_str = url_str
        self.bucket = ""
        self.object = ""
        self._parse()
        if self.bucket == "" and self.object != "":
            raise ValueError(f"invalid cos url: {url_str}, miss bucket")

    def _parse(self) -> None:
        path = self.url_str
        if path.lower().startswith(SCHEME_PREFIX):
            path = path[len(SCHEME_PREFIX):]
        elif path.startswith("/"):
            path = path[1:]
        bucket, _, obj = path.partition("/")
        self.bucket = bucket
        self.object = obj

    def update(self, url_str: str) -> None:
        """Re-parse bucket and object from ``url_str``."""
        self.url_str = url_str
        self._parse()

    def __str__(self) -> str:
        return _cos_string(self.bucket, self.object)

    def __repr__(self) -> str:
        return f"CosUrl({str(self)!r})"


def current_home_dir() -> str:
    """Return the current user's home directory, or an empty string."""
    home_drive = os.environ.get("HOMEDRIVE", "")
    home_path = os.environ.get("HOMEPATH", "")
    if sys.platform == "win32" and home_drive and home_path:
        return home_drive + os.sep + home_path
    try:
        import pwd

        return pwd.getpwuid(os.getuid()).pw_dir
    except (ImportError, KeyError, AttributeError):
        return os.environ.get("HOME", "")


class FileUrl(StorageUrl):
    """A path on the local file system."""

    is_file_url = True

    def __init__(self, url_str: str) -> None:
        if url_str.startswith("~" + os.sep):
            home = current_home_dir()
            if not home:
                raise ValueError("current home dir is empty")
            url_str = url_str.replace("~", home, 1)
        self.url_str = url_str

    def update(self, url_str: str) -> None:
        """Replace the stored path."""
        self.url_str = url_str

    def __str__(self) -> str:
        return self.url_str

    def __repr__(self) -> str:
        return f"FileUrl({self.url_str!r})"


def format_url(url_str: str) -> StorageUrl:
    """Return a :class:`CosUrl` for ``cos://`` locations, else a :class:`FileUrl`."""
    if url_str.lower().startswith(SCHEME_PREFIX):
        return CosUrl(url_str)
    return FileUrl(url_str)


def get_cos_url(bucket: str, obj: str) -> str:
    """Return the ``cos://`` form of a bucket and object key."""
    return _cos_string(bucket, obj)


def format_upload_path(file_url: StorageUrl, cos_url: CosUrl, recursive: bool) -> None:
    """Normalise the local source and object destination of an upload in place."""
    local_path = str(file_url)
    if local_path == "":
        raise ValueError("localPath is empty")

    is_dir = os.path.isdir(local_path)
    if not is_dir:
        os.stat(local_path)

    if is_dir and not recursive:
        raise ValueError(f"localPath:{local_path} is dir, please use --recursive option")

    cos_path = cos_url.object
    if not local_path.endswith(os.sep) and cos_path.endswith(COS_SEPARATOR):
        cos_path += os.path.basename(local_path.rstrip(os.sep)) or os.sep

    if recursive and is_dir and not local_path.endswith(os.sep):
        local_path += os.sep

    if recursive and is_dir and cos_path and not cos_path.endswith(COS_SEPARATOR):
        cos_path += COS_SEPARATOR

    file_url.update(local_path)
    cos_url.update(SCHEME_PREFIX + cos_url.bucket + COS_SEPARATOR + cos_path)