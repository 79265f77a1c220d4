"""Offline helpers for a cloud object storage command-line client.

URL and path handling, metadata parsing, secret obfuscation, size
formatting, key filtering and transfer progress reporting.
"""

__version__ = "0.1.0"
__all__ = [
    "meta",
    "models",
    "paths",
    "patterns",
    "process_monitor",
    "report",
    "secret",
    "size",
    "storage_url",
    "urls",
]