import os

from coscli.models import CpType
from coscli.process_monitor import FileProcessMonitor
from coscli.report import print_cost_time, print_transfer_stats
from coscli.size import format_bytes


def make_monitor():
    return FileProcessMonitor(CpType.UPLOAD, clock=lambda: 0)


def test_print_cost_time(capsys):
    print_cost_time(0, 1500)
    assert capsys.readouterr().out == "\ncost 1.500000(s)\n"


def test_no_speed_without_elapsed_time(capsys):
    monitor = make_monitor()
    monitor.update_file(1024, 1)
    print_transfer_stats(100, 100, monitor, False, "out")
    assert capsys.readouterr().out == ""


def test_average_speed(capsys):
    monitor = make_monitor()
    monitor.update_file(1024, 1)
    print_transfer_stats(0, 1000, monitor, False, "out")
    assert f"AvgSpeed: {format_bytes(1024.0)}/s" in capsys.readouterr().out


def test_failure_message_with_fail_output(capsys, tmp_path):
    monitor = make_monitor()
    monitor.update_err(1)
    path = str(tmp_path / "errors")
    print_transfer_stats(0, 0, monitor, True, path)
    out = capsys.readouterr().out
    assert os.path.abspath(path) in out
    assert out.startswith("Some file upload failed")


def test_no_failure_message_without_fail_output(capsys):
    monitor = make_monitor()
    monitor.update_err(1)
    print_transfer_stats(0, 0, monitor, False, "errors")
    assert "failed" not in capsys.readouterr().out