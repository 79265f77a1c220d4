# coscli

Building blocks for a command-line client for cloud object storage. The
package covers the parts that need no network connection:

- `coscli.storage_url` reads `cos://bucket/key` and local paths into
  `CosUrl` and `FileUrl` objects (`format_url`, `get_cos_url`,
  `current_home_dir`). `format_upload_path` normalises the local source and
  the object destination of an upload in place, raising `ValueError` for an
  empty path or for a directory without `recursive`.
- `coscli.paths` joins and fixes up paths for upload, download and copy
  (`is_cos_path`, `parse_path`, `upload_path_fixed`, `download_path_fixed`,
  `copy_path_fixed`, `get_abs_path`, `create_parent_directory`).
  `check_path` raises `ValueError` when a snapshot or failure-output path
  (`PathType`) lies inside the tree being transferred.
- `coscli.urls` builds bucket, service and CI endpoints (`gen_bucket_url`,
  `gen_service_url`, `gen_ci_url`, `create_url`, `create_base_url`,
  `gen_base_url`), returned as a frozen `BaseURL`.
- `coscli.meta` parses `--meta` strings such as
  `Content-Type:text/plain#x-cos-meta-a:b` into a `Meta` with
  `meta_string_to_header`. An RFC 3339 `Expires` value is rewritten in
  RFC 1123 form; malformed items, dates or lengths raise `ValueError`.
- `coscli.secret` obfuscates secrets kept in configuration files
  (`encrypt_secret`, `decrypt_secret`) with AES and zero padding under a
  fixed built-in key; `AesTool` offers the same in ECB or CBC mode
  (`AesMode`). This hides values from casual reading, it is not protection
  against anyone who has the package.
- `coscli.size` formats byte counts (`format_size`, `format_bytes`,
  `get_size_string`).
- `coscli.patterns` decodes URL-encoded listed keys and filters items by a
  regular expression on their key (`url_decode_keys`, `match_key_pattern`).
  Items may be mappings with a `"key"` entry or objects with a `key`
  attribute.
- `coscli.process_monitor` counts scanned, transferred, skipped and failed
  items from any number of threads (`FileProcessMonitor`,
  `MonitorSnapshot`, `ExitStatus`) and produces progress and summary lines;
  `draw_bar` draws a 30 character bar.
- `coscli.report` prints the average speed and elapsed time of a transfer
  (`print_transfer_stats`, `print_cost_time`).
- `coscli.models` holds the configuration and operation records (`Config`,
  `BaseConfig`, `BucketConfig`, `Param`, `Operation`, `FilterOption`,
  `CpType`, `UploadInfo`); the configuration records convert to and from
  plain mappings with `from_mapping` and `to_mapping`.

## Install

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Examples

    from coscli.storage_url import format_url
    from coscli.size import get_size_string
    from coscli.meta import meta_string_to_header

    url = format_url("cos://examplebucket/photos/cat.jpg")
    print(url.bucket, url.object)          # examplebucket photos/cat.jpg

    print(get_size_string(1234567))        # 1,234,567 Byte (1.18 MB)

    meta = meta_string_to_header("Content-Type:text/plain#x-cos-meta-owner:ops")
    print(meta.content_type, meta.meta_change)   # text/plain True

Progress reporting:

    from coscli.models import CpType
    from coscli.process_monitor import FileProcessMonitor

    monitor = FileProcessMonitor()
    monitor.reset(CpType.UPLOAD)
    monitor.update_scan_size_num(2048, 2)
    monitor.set_scan_end()
    monitor.update_monitor(False, None, False, 1024)
    monitor.update_monitor(False, None, False, 1024)
    print(monitor.finish_info())

`FileProcessMonitor.progress_bar(False)` returns a running status line at
most once per tick interval (five seconds by default) and an empty string
otherwise; `progress_bar(True, exit_stat)` returns the final line once.

## What this package does not do

There is no command to run and no storage service client. The package does
not list, upload, download, copy, restore or delete objects, does not read
or write configuration files, and keeps no sync snapshot database. It gives
a program that does those things its URL and path handling, metadata
parsing, secret obfuscation, size formatting, key filtering and progress
reporting.