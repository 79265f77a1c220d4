"""Construction of service, bucket and CI endpoint URLs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from coscli.models import Config, Param

DEFAULT_PROTOCOL = "https"


@dataclass(frozen=True)
class BaseURL:
    """Base URLs a client talks to; unset ones are ``None``."""

    bucket_url: Optional[str] = None
    service_url: Optional[str] = None
    ci_url: Optional[str] = None


def gen_bucket_url(bucket_id_name: str, protocol: str, endpoint: str, customized: bool) -> str:
    """Return the bucket URL, using the endpoint alone when it is customized."""
    if customized:
        return f"{protocol}://{endpoint}"
    return f"{protocol}://{bucket_id_name}.{endpoint}"


def gen_service_url(protocol: str, endpoint: str) -> str:
    """Return the service URL for an endpoint."""
    return f"{protocol}://{endpoint}"


def gen_ci_url(bucket_id_name: str, protocol: str, endpoint: str) -> str:
    """Return the CI URL for a bucket."""
    return f"{protocol}://{bucket_id_name}.{endpoint}"


def create_url(id_name: str, protocol: str, endpoint: str, customized: bool) -> BaseURL:
    """Build all base URLs for a bucket."""
    return BaseURL(
        bucket_url=gen_bucket_url(id_name, protocol, endpoint, customized),
        service_url=gen_service_url(protocol, endpoint),
        ci_url=gen_ci_url(id_name, protocol, endpoint),
    )


def create_base_url(protocol: str, endpoint: str) -> BaseURL:
    """Build base URLs holding only the service URL."""
    return BaseURL(service_url=gen_service_url(protocol, endpoint))


def gen_base_url(config: Config, param: Param) -> Optional[BaseURL]:
    """Build the service URL from command-line and configured settings.

    Returns ``None`` when no endpoint was given on the command line.
    """
    if not param.endpoint:
        return None
    protocol = DEFAULT_PROTOCOL
    if config.base.protocol:
        protocol = config.base.protocol
    if param.protocol:
        protocol = param.protocol
    return create_base_url(protocol, param.endpoint)