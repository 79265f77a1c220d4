"""Printing of transfer summaries."""

from __future__ import annotations

import os

from coscli.process_monitor import FileProcessMonitor
from coscli.size import format_bytes


def print_transfer_stats(
    start_ms: int,
    end_ms: int,
    monitor: FileProcessMonitor,
    fail_output: bool,
    err_output_path: str,
) -> None:
    """Print where failures were logged and the average transfer speed."""
    if monitor.err_num > 0 and fail_output:
        abs_path = os.path.abspath(err_output_path)
        print(
            "Some file upload failed, please check the detailed information "
            f"in dir {abs_path}."
        )
    elapsed = end_ms - start_ms
    if elapsed > 0:
        speed = monitor.transfer_size / elapsed * 1000
        print(f"\nAvgSpeed: {format_bytes(speed)}/s")


def print_cost_time(start_ms: int, end_ms: int) -> None:
    """Print the elapsed time in seconds."""
    elapsed = (end_ms - start_ms) / 1000
    print(f"\ncost {elapsed:.6f}(s)")