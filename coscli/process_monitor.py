"""Progress accounting and status lines for multi-file transfers."""

from __future__ import annotations

import dataclasses
import enum
import threading
import time
from dataclasses import dataclass
from typing import Callable, Optional

from coscli.models import CpType
from coscli.size import format_bytes, get_size_string

DEFAULT_TICK_INTERVAL = 5.0
_BAR_WIDTH = 30


class ExitStatus(enum.IntEnum):
    """How a transfer ended."""

    NORMAL = 0
    ERROR = 1


@dataclass(frozen=True)
class MonitorSnapshot:
    """Counters of a monitor at one moment; durations are in nanoseconds."""

    transfer_size: int = 0
    skip_size: int = 0
    deal_size: int = 0
    file_num: int = 0
    dir_num: int = 0
    skip_num: int = 0
    skip_num_dir: int = 0
    err_num: int = 0
    ok_num: int = 0
    deal_num: int = 0
    duration: int = 0
    increment_size: int = 0


def draw_bar(percent: int) -> str:
    """Return a 30 character bar, ``#`` for the done part and ``-`` for the rest."""
    done = int(_BAR_WIDTH * percent / 100)
    if not 0 <= done <= _BAR_WIDTH:
        raise ValueError(f"percent out of range: {percent}")
    return "#" * done + "-" * (_BAR_WIDTH - done)


class FileProcessMonitor:
    """Thread-safe counters of scanned, transferred, skipped and failed items."""

    def __init__(
        self,
        op: CpType = CpType.UPLOAD,
        tick_interval: float = DEFAULT_TICK_INTERVAL,
        on_change: Optional[Callable[[], None]] = None,
        clock: Callable[[], int] = time.monotonic_ns,
    ) -> None:
        self._lock = threading.Lock()
        self._clock = clock
        self.on_change = on_change
        self.tick_interval = tick_interval
        self._clear_len = 0
        self.reset(op)

    def reset(self, op: CpType) -> None:
        """Zero all counters and start timing for operation ``op``."""
        with self._lock:
            self.op = CpType(op)
            self.total_size = 0
            self.total_num = 0
            self.scan_end = False
            self.scan_error: Optional[BaseException] = None
            self.transfer_size = 0
            self.skip_size = 0
            self.deal_size = 0
            self.file_num = 0
            self.dir_num = 0
            self.skip_num = 0
            self.skip_num_dir = 0
            self.err_num = 0
            self.finished = False
            self.last_snap_size = 0
            self.last_snap_time = self._clock()
            self.tick_duration = int(self.tick_interval * 1_000_000_000)

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change()

    def set_scan_error(self, err: BaseException) -> None:
        """Record that scanning stopped with ``err``."""
        self.scan_error = err
        self.scan_end = True

    def set_scan_end(self) -> None:
        """Record that scanning finished."""
        self.scan_end = True

    def update_scan_num(self, num: int) -> None:
        with self._lock:
            self.total_num += num

    def update_scan_size_num(self, size: int, num: int) -> None:
        with self._lock:
            self.total_size += size
            self.total_num += num

    def update_transfer_size(self, size: int) -> None:
        with self._lock:
            self.transfer_size += size

    def update_deal_size(self, size: int) -> None:
        with self._lock:
            self.deal_size += size

    def update_file(self, size: int, num: int) -> None:
        with self._lock:
            self.file_num += num
            self.transfer_size += size
            self.deal_size += size

    def update_dir(self, size: int, num: int) -> None:
        with self._lock:
            self.dir_num += num
            self.transfer_size += size
            self.deal_size += size

    def update_skip(self, size: int, num: int) -> None:
        with self._lock:
            self.skip_num += num
            self.skip_size += size

    def update_skip_dir(self, num: int) -> None:
        with self._lock:
            self.skip_num_dir += num

    def update_err(self, num: int) -> None:
        with self._lock:
            self.err_num += num

    def update_monitor(
        self, skip: bool, err: Optional[BaseException], is_dir: bool, size: int
    ) -> None:
        """Count one processed item according to its outcome."""
        if err is not None:
            self.update_err(1)
        elif skip:
            if is_dir:
                self.update_skip_dir(1)
            else:
                self.update_skip(size, 1)
        elif is_dir:
            self.update_dir(size, 1)
        else:
            self.update_file(size, 1)
        self._notify()

    def snapshot(self) -> MonitorSnapshot:
        """Return the current counters."""
        with self._lock:
            ok_num = self.file_num + self.dir_num + self.skip_num
            return MonitorSnapshot(
                transfer_size=self.transfer_size,
                skip_size=self.skip_size,
                deal_size=self.deal_size + self.skip_size,
                file_num=self.file_num,
                dir_num=self.dir_num,
                skip_num=self.skip_num,
                skip_num_dir=self.skip_num_dir,
                err_num=self.err_num,
                ok_num=ok_num,
                deal_num=ok_num + self.err_num,
                duration=self._clock() - self.last_snap_time,
            )

    @property
    def _scan_ok(self) -> bool:
        return self.scan_end and self.scan_error is None

    def progress_bar(self, finish: bool, exit_stat: ExitStatus = ExitStatus.NORMAL) -> str:
        """Return the status line to print, or ``""`` when nothing is due."""
        if self.finished:
            return ""
        self.finished = self.finished or finish
        if not finish:
            return self._running_bar()
        if exit_stat == ExitStatus.NORMAL:
            return self._clear(self.finish_info())
        return self._defeat_bar()

    def finish_info(self) -> str:
        """Return the summary line for a transfer that ended normally."""
        snap = self.snapshot()
        if self._scan_ok:
            if snap.err_num == 0:
                return (
                    f"Succeed: Total num: {self.total_num}, size: {get_size_string(self.total_size)}. "
                    f"OK num: {snap.ok_num}{self._deal_num_detail(snap)}{self._skip_size(snap)}.\n"
                )
            return (
                f"FinishWithError: Total num: {self.total_num}, size: {get_size_string(self.total_size)}. "
                f"Error num: {snap.err_num}. OK num: {snap.ok_num}"
                f"{self._ok_num_detail(snap)}{self._size_detail(snap)}.\n"
            )
        scan_num = max(self.total_num, snap.deal_num)
        if snap.err_num == 0:
            return (
                f"Succeed: Total num: {scan_num}, size: {get_size_string(snap.deal_size)}. "
                f"OK num: {snap.ok_num}{self._deal_num_detail(snap)}{self._skip_size(snap)}.\n"
            )
        return (
            f"FinishWithError: Scanned {scan_num} {self._subject()}. Error num: {snap.err_num}. "
            f"OK num: {snap.ok_num}{self._ok_num_detail(snap)}{self._size_detail(snap)}.\n"
        )

    def _running_bar(self) -> str:
        snap = self.snapshot()
        if snap.duration < self.tick_duration:
            return ""
        with self._lock:
            self.last_snap_time = self._clock()
            snap = dataclasses.replace(
                snap, increment_size=self.transfer_size - self.last_snap_size
            )
            self.last_snap_size = snap.transfer_size

        details = f"{self._deal_num_detail(snap)}{self._deal_size_detail(snap)}"
        if self._scan_ok:
            return self._clear(
                f"Total num: {self.total_num}, size: {get_size_string(self.total_size)}. "
                f"Processed num: {snap.deal_num}{details}, "
                f"Progress: {self._percent(snap):.3f}%, Speed: {self._speed(snap)}/s"
            )
        scan_num = max(self.total_num, snap.deal_num)
        scan_size = max(self.total_size, snap.deal_size)
        return self._clear(
            f"Scanned num: {scan_num}, size: {get_size_string(scan_size)}. "
            f"Processed num: {snap.deal_num}{details}, Speed: {self._speed(snap)}/s."
        )

    def _defeat_bar(self) -> str:
        snap = self.snapshot()
        details = f"{self._ok_num_detail(snap)}{self._size_detail(snap)}"
        if self._scan_ok:
            return self._clear(
                f"Total num: {self.total_num}, size: {get_size_string(self.total_size)}. "
                f"Processed num: {snap.ok_num}{details}. When error happens.\n"
            )
        scan_num = max(self.total_num, snap.deal_num)
        return self._clear(
            f"Scanned {scan_num} {self._subject()}. "
            f"Processed num: {snap.ok_num}{details}. When error happens.\n"
        )

    def _clear(self, text: str) -> str:
        if self._clear_len <= len(text):
            self._clear_len = len(text)
            return f"\r{text}"
        return f"\r{' ' * self._clear_len}\r{text}"

    def _deal_num_detail(self, snap: MonitorSnapshot) -> str:
        return self._num_detail(snap, has_err=True)

    def _ok_num_detail(self, snap: MonitorSnapshot) -> str:
        return self._num_detail(snap, has_err=False)

    def _num_detail(self, snap: MonitorSnapshot, has_err: bool) -> str:
        if not has_err and snap.ok_num == 0:
            return ""
        parts = []
        if has_err and snap.err_num:
            parts.append(f"Error {snap.err_num} {self._subject()}")
        if snap.file_num:
            parts.append(f"{self._op_str()} {snap.file_num} {self._subject()}")
        if snap.dir_num:
            if snap.file_num:
                parts.append(f"{snap.dir_num} directories")
            else:
                parts.append(f"{self._op_str()} {snap.dir_num} directories")
        if snap.skip_num:
            parts.append(f"skip {snap.skip_num} {self._subject()}")
        if snap.skip_num_dir:
            parts.append(f"skip {snap.skip_num_dir} directory")
        if not parts:
            return ""
        return f"({', '.join(parts)})"

    @staticmethod
    def _size_detail(snap: MonitorSnapshot) -> str:
        if snap.skip_size == 0:
            return f", Transfer size: {get_size_string(snap.transfer_size)}"
        if snap.transfer_size == 0:
            return f", Skip size: {get_size_string(snap.skip_size)}"
        return (
            f", OK size: {get_size_string(snap.transfer_size + snap.skip_size)}"
            f"(transfer: {get_size_string(snap.transfer_size)}, "
            f"skip: {get_size_string(snap.skip_size)})"
        )

    @staticmethod
    def _skip_size(snap: MonitorSnapshot) -> str:
        if snap.skip_size:
            return f", Skip size: {get_size_string(snap.skip_size)}"
        return ""

    @staticmethod
    def _deal_size_detail(snap: MonitorSnapshot) -> str:
        return f", OK size: {get_size_string(snap.deal_size)}"

    @staticmethod
    def _speed(snap: MonitorSnapshot) -> str:
        if snap.duration <= 0:
            return format_bytes(0.0)
        return format_bytes(snap.increment_size / (snap.duration * 1e-9))

    def _percent(self, snap: MonitorSnapshot) -> float:
        if not self._scan_ok:
            return 0.0
        if self.total_size:
            return snap.deal_size * 100.0 / self.total_size
        if self.total_num:
            return snap.deal_num * 100.0 / self.total_num
        return 100.0

    def _op_str(self) -> str:
        if self.op is CpType.UPLOAD:
            return "upload"
        if self.op is CpType.DOWNLOAD:
            return "download"
        return "copy"

    def _subject(self) -> str:
        return "files" if self.op is CpType.UPLOAD else "objects"