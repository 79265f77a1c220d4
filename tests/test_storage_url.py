import os

import pytest

from coscli.storage_url import (
    CosUrl,
    FileUrl,
    current_home_dir,
    format_upload_path,
    format_url,
    get_cos_url,
)


def test_format_url_parses_bucket_and_object():
    url = format_url("cos://examplebucket/dir/a.txt")
    assert isinstance(url, CosUrl)
    assert url.bucket == "examplebucket"
    assert url.object == "dir/a.txt"
    assert url.is_cos_url and not url.is_file_url


def test_cos_url_string_round_trip():
    text = "cos://examplebucket/dir/a.txt"
    assert str(format_url(text)) == text


def test_cos_url_bucket_only():
    url = format_url("cos://examplebucket")
    assert url.object == ""
    assert str(url) == "cos://examplebucket"


def test_scheme_is_case_insensitive():
    url = format_url("COS://examplebucket/key")
    assert isinstance(url, CosUrl)
    assert url.bucket == "examplebucket"
    assert url.object == "key"


def test_missing_bucket_is_rejected():
    with pytest.raises(ValueError, match="miss bucket"):
        format_url("cos:///only-object")


def test_local_path_becomes_file_url():
    url = format_url("local/file.txt")
    assert isinstance(url, FileUrl)
    assert str(url) == "local/file.txt"
    assert url.is_file_url and not url.is_cos_url


def test_home_prefix_expanded():
    url = FileUrl("~" + os.sep + "data")
    assert str(url) == current_home_dir() + os.sep + "data"


def test_get_cos_url_with_and_without_object():
    assert get_cos_url("examplebucket", "") == "cos://examplebucket"
    assert get_cos_url("examplebucket", "k/v") == "cos://examplebucket/k/v"


def test_update_reparses():
    url = CosUrl("cos://first/old")
    url.update("cos://second/new/key")
    assert (url.bucket, url.object) == ("second", "new/key")


def test_update_with_leading_slash():
    url = CosUrl("cos://first/old")
    url.update("/second/key")
    assert (url.bucket, url.object) == ("second", "key")


def test_upload_single_file_to_directory_key(tmp_path):
    local = tmp_path / "report.csv"
    local.write_text("x")
    file_url = FileUrl(str(local))
    cos_url = CosUrl("cos://examplebucket/dir/")
    format_upload_path(file_url, cos_url, recursive=False)
    assert cos_url.object == "dir/report.csv"
    assert str(file_url) == str(local)


def test_upload_directory_requires_recursive(tmp_path):
    with pytest.raises(ValueError, match="--recursive"):
        format_upload_path(FileUrl(str(tmp_path)), CosUrl("cos://b/dir/"), recursive=False)


def test_upload_directory_recursive(tmp_path):
    folder = tmp_path / "photos"
    folder.mkdir()
    file_url = FileUrl(str(folder))
    cos_url = CosUrl("cos://examplebucket/target")
    format_upload_path(file_url, cos_url, recursive=True)
    assert str(file_url) == str(folder) + os.sep
    assert cos_url.object == "target/"


def test_upload_directory_into_directory_key(tmp_path):
    folder = tmp_path / "photos"
    folder.mkdir()
    cos_url = CosUrl("cos://examplebucket/dir/")
    format_upload_path(FileUrl(str(folder)), cos_url, recursive=True)
    assert cos_url.object == "dir/photos/"


def test_upload_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        format_upload_path(FileUrl(str(tmp_path / "absent")), CosUrl("cos://b/"), False)


def test_upload_empty_local_path():
    with pytest.raises(ValueError, match="localPath is empty"):
        format_upload_path(FileUrl(""), CosUrl("cos://b/"), False)