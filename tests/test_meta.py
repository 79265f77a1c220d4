import pytest

from coscli.meta import Meta, meta_string_to_header


def test_empty_string_gives_default_meta():
    assert meta_string_to_header("") == Meta()


def test_whitespace_only_gives_empty_fields():
    result = meta_string_to_header("   ")
    assert result.content_type == ""
    assert result.meta_change is False


def test_standard_headers_are_read_case_insensitively():
    result = meta_string_to_header("Content-Type:text/plain#CACHE-CONTROL:no-cache")
    assert result.content_type == "text/plain"
    assert result.cache_control == "no-cache"
    assert result.meta_change is False


def test_value_may_contain_colons():
    result = meta_string_to_header("Content-Disposition:a:b:c")
    assert result.content_disposition == "a:b:c"


def test_custom_meta_is_canonicalised():
    result = meta_string_to_header("x-cos-meta-foo:bar")
    assert result.x_cos_meta == {"X-Cos-Meta-Foo": "bar"}
    assert result.meta_change is True


def test_later_duplicate_overrides_earlier():
    result = meta_string_to_header("content-type:a#Content-Type:b")
    assert result.content_type == "b"


def test_content_length_parsed():
    result = meta_string_to_header("Content-Length:2048")
    assert result.content_length == 2048


def test_invalid_content_length_raises():
    with pytest.raises(ValueError, match="ContentLength"):
        meta_string_to_header("Content-Length:abc")


def test_item_without_colon_raises():
    with pytest.raises(ValueError, match="invalid meta item"):
        meta_string_to_header("content-type")


def test_expires_converted_from_rfc3339():
    result = meta_string_to_header("Expires:2006-01-02T15:04:05Z")
    assert result.expires == "Mon, 02 Jan 2006 15:04:05 UTC"


def test_expires_with_offset_keeps_local_clock():
    result = meta_string_to_header("Expires:2006-01-02T15:04:05+08:00")
    assert result.expires.endswith("+0800")
    assert "15:04:05" in result.expires


def test_invalid_expires_raises():
    with pytest.raises(ValueError, match="expires"):
        meta_string_to_header("Expires:tomorrow")


def test_empty_items_are_skipped():
    result = meta_string_to_header("##Content-Language:en##")
    assert result.content_language == "en"