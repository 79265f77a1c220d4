from urllib.parse import urlsplit

from coscli.models import BaseConfig, Config, Param
from coscli.urls import (
    BaseURL,
    create_base_url,
    create_url,
    gen_base_url,
    gen_bucket_url,
    gen_ci_url,
    gen_service_url,
)

ENDPOINT = "cos.ap-guangzhou.myqcloud.com"
BUCKET = "examplebucket-1250000000"


def test_bucket_url_prefixes_bucket_name():
    assert gen_bucket_url(BUCKET, "https", ENDPOINT, False) == (
        "https://examplebucket-1250000000.cos.ap-guangzhou.myqcloud.com")


def test_customized_bucket_url_uses_endpoint_only():
    assert gen_bucket_url(BUCKET, "http", ENDPOINT, True) == gen_service_url("http", ENDPOINT)


def test_service_url_parts():
    parts = urlsplit(gen_service_url("https", ENDPOINT))
    assert parts.scheme == "https"
    assert parts.netloc == ENDPOINT


def test_ci_url_matches_uncustomized_bucket_url():
    assert gen_ci_url(BUCKET, "https", ENDPOINT) == gen_bucket_url(BUCKET, "https", ENDPOINT, False)


def test_create_url_fills_all_parts():
    urls = create_url(BUCKET, "https", ENDPOINT, False)
    assert urls.service_url == gen_service_url("https", ENDPOINT)
    assert urlsplit(urls.bucket_url).netloc.startswith(BUCKET + ".")
    assert urls.ci_url == urls.bucket_url


def test_create_base_url_only_service():
    urls = create_base_url("https", ENDPOINT)
    assert urls == BaseURL(service_url=gen_service_url("https", ENDPOINT))


def test_gen_base_url_without_endpoint_is_none():
    assert gen_base_url(Config(), Param()) is None


def test_gen_base_url_default_protocol_is_https():
    urls = gen_base_url(Config(), Param(endpoint=ENDPOINT))
    assert urlsplit(urls.service_url).scheme == "https"
    assert urls.bucket_url is None


def test_gen_base_url_protocol_precedence():
    config = Config(base=BaseConfig(protocol="http"))
    from_config = gen_base_url(config, Param(endpoint=ENDPOINT))
    assert urlsplit(from_config.service_url).scheme == "http"
    from_param = gen_base_url(config, Param(endpoint=ENDPOINT, protocol="https"))
    assert urlsplit(from_param.service_url).scheme == "https"