"""Configuration and operation settings shared across commands."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Mapping

from coscli.meta import Meta


class CpType(enum.IntEnum):
    """Direction of a transfer."""

    UPLOAD = 0
    DOWNLOAD = 1
    COPY = 2


def _text(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value)


@dataclass
class BaseConfig:
    """Credentials and connection defaults."""

    secret_id: str = ""
    secret_key: str = ""
    session_token: str = ""
    protocol: str = ""
    mode: str = ""
    cvm_role_name: str = ""
    close_auto_switch_host: str = ""
    disable_encryption: str = ""

    _KEYS = (
        ("secret_id", "secretid"),
        ("secret_key", "secretkey"),
        ("session_token", "sessiontoken"),
        ("protocol", "protocol"),
        ("mode", "mode"),
        ("cvm_role_name", "cvmrolename"),
        ("close_auto_switch_host", "closeautoswitchhost"),
        ("disable_encryption", "disableencryption"),
    )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "BaseConfig":
        """Build from the keys used in the configuration file."""
        return cls(**{attr: _text(data, key) for attr, key in cls._KEYS})

    def to_mapping(self) -> dict[str, str]:
        """Return the configuration-file representation."""
        return {key: getattr(self, attr) for attr, key in self._KEYS}


@dataclass
class BucketConfig:
    """A configured bucket and how to reach it."""

    name: str = ""
    alias: str = ""
    region: str = ""
    endpoint: str = ""
    ofs: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "BucketConfig":
        """Build from the keys used in the configuration file."""
        return cls(
            name=_text(data, "name"),
            alias=_text(data, "alias"),
            region=_text(data, "region"),
            endpoint=_text(data, "endpoint"),
            ofs=bool(data.get("ofs", False)),
        )

    def to_mapping(self) -> dict[str, Any]:
        """Return the configuration-file representation."""
        return {
            "name": self.name,
            "alias": self.alias,
            "region": self.region,
            "endpoint": self.endpoint,
            "ofs": self.ofs,
        }


@dataclass
class Config:
    """The whole configuration file."""

    base: BaseConfig = field(default_factory=BaseConfig)
    buckets: list[BucketConfig] = field(default_factory=list)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Config":
        """Build from a parsed configuration document."""
        return cls(
            base=BaseConfig.from_mapping(data.get("base") or {}),
            buckets=[BucketConfig.from_mapping(b) for b in data.get("buckets") or []],
        )

    def to_mapping(self) -> dict[str, Any]:
        """Return the configuration-file representation."""
        return {
            "base": self.base.to_mapping(),
            "buckets": [bucket.to_mapping() for bucket in self.buckets],
        }


@dataclass
class Param:
    """Settings given on the command line that override the configuration."""

    secret_id: str = ""
    secret_key: str = ""
    session_token: str = ""
    endpoint: str = ""
    customized: bool = False
    protocol: str = ""


@dataclass
class UploadInfo:
    """A multipart upload in progress."""

    key: str = ""
    upload_id: str = ""
    initiated: str = ""


@dataclass
class FilterOption:
    """An include or exclude filter pattern."""

    name: str
    pattern: str


@dataclass
class Operation:
    """Options controlling a file operation."""

    recursive: bool = False
    filters: list[FilterOption] = field(default_factory=list)
    storage_class: str = ""
    rate_limiting: float = 0.0
    part_size: int = 0
    thread_num: int = 0
    routines: int = 0
    fail_output: bool = False
    fail_output_path: str = ""
    meta: Meta = field(default_factory=Meta)
    retry_num: int = 0
    err_retry_num: int = 0
    err_retry_interval: int = 0
    only_current_dir: bool = False
    disable_all_symlink: bool = False
    enable_symlink_dir: bool = False
    disable_crc64: bool = False
    disable_checksum: bool = False
    disable_long_links: bool = False
    long_links_nums: int = 0
    version_id: str = ""
    all_versions: bool = False
    snapshot_path: str = ""
    delete: bool = False
    backup_dir: str = ""
    force: bool = False
    days: int = 0
    restore_mode: str = ""
    move: bool = False