"""Helpers for combining and checking local and object paths."""

from __future__ import annotations

import enum
import os

from coscli.models import Operation
from coscli.storage_url import StorageUrl

_COS_PREFIX = "cos://"


class PathType(str, enum.Enum):
    """Kinds of auxiliary paths that must not lie inside the transferred tree."""

    SNAPSHOT_PATH = "snapshot-path"
    FAIL_OUTPUT_PATH = "fail-output-path"


def is_cos_path(path: str) -> bool:
    """Tell whether ``path`` is a ``cos://`` location with something after the scheme."""
    return len(path) > len(_COS_PREFIX) and path.startswith(_COS_PREFIX)


def parse_path(url: str) -> tuple[str, str]:
    """Split a location into ``(bucket, path)``; local paths have an empty bucket."""
    if is_cos_path(url):
        bucket, _, path = url[len(_COS_PREFIX):].partition("/")
        return bucket, path
    if url == "":
        raise ValueError("empty path")
    if url.startswith("~"):
        return "", os.path.expanduser("~") + url[1:]
    return "", url


def upload_path_fixed(file_path: str, directory: str, cos_path: str) -> tuple[str, str]:
    """Return the local file path and the object key it uploads to.

    A key that is empty or ends with ``/`` gets the relative file path appended.
    """
    if cos_path == "" or cos_path.endswith("/"):
        cos_path += file_path.replace(os.sep, "/").replace("\\", "/")
    parts = [p for p in (directory, file_path) if p]
    local = os.path.normpath(os.path.join(*parts)) if parts else ""
    return local, cos_path


def download_path_fixed(relative_object: str, file_path: str) -> str:
    """Return the local destination for a downloaded object."""
    if file_path.endswith("/") or file_path.endswith("\\"):
        return file_path + relative_object
    return file_path.replace("/", os.sep)


def copy_path_fixed(relative_object: str, dest_path: str) -> str:
    """Return the destination key for a copied object."""
    if dest_path == "" or dest_path.endswith("/"):
        return dest_path + relative_object
    return dest_path


def get_abs_path(path: str) -> str:
    """Return an absolute form of ``path``; relative ones end with a separator."""
    if os.path.isabs(path):
        return path
    if not path.endswith(os.sep):
        path += os.sep
    joined = os.getcwd() + os.sep + path
    absolute = os.path.abspath(joined)
    if not absolute.endswith(os.sep):
        absolute += os.sep
    return absolute


def check_path(file_url: StorageUrl, operation: Operation, path_type: PathType | str) -> None:
    """Raise ``ValueError`` if the auxiliary path lies inside ``file_url``."""
    try:
        kind = PathType(path_type)
    except ValueError as exc:
        raise ValueError(f"check path failed , invalid pathType {path_type}") from exc

    abs_file_dir = get_abs_path(str(file_url))
    if kind is PathType.SNAPSHOT_PATH:
        path = operation.snapshot_path
    elif operation.fail_output:
        path = operation.fail_output_path
    else:
        return

    abs_path = get_abs_path(path)
    if abs_file_dir in abs_path:
        raise ValueError(
            f"{kind.value} {operation.snapshot_path} is subdirectory of {file_url}"
        )


def create_parent_directory(local_file_path: str) -> None:
    """Create the directory that will hold ``local_file_path``."""
    directory = os.path.dirname(os.path.abspath(local_file_path))
    os.makedirs(directory, mode=0o755, exist_ok=True)