import re

import pytest

from garagemqtt.diagnostics import debug, dprint, error, log, warn


def _split_stamp(line):
    stamp, rest = line.split("] ", 1)
    return stamp.lstrip("["), rest


def test_dprint_single_message(capsys):
    dprint("door opened")
    stamp, rest = _split_stamp(capsys.readouterr().out)
    assert rest == "door opened\n"
    assert stamp.isdigit() is True


def test_dprint_name_and_value(capsys):
    dprint("steps", 1000)
    stamp, rest = _split_stamp(capsys.readouterr().out)
    assert rest == "steps = 1000\n"
    assert stamp.isdigit() is True


def test_dprint_timestamps_do_not_decrease(capsys):
    dprint("a")
    dprint("b")
    lines = capsys.readouterr().out.splitlines()
    stamps = [int(re.match(r"\[(\d+)\]", line).group(1)) for line in lines]
    assert stamps[0] <= stamps[1]


def test_dprint_rejects_wrong_argument_count():
    with pytest.raises(TypeError):
        dprint("a", "b", "c")
    with pytest.raises(TypeError):
        dprint()


def test_debug_names_caller_and_formats(capsys):
    debug("Rc %d from sending packet\r\n", -1)
    out = capsys.readouterr().out
    assert out.startswith("DEBUG:   test_debug_names_caller_and_formats L#")
    assert out.endswith("Rc -1 from sending packet\r\n")


def test_log_and_warn_tags(capsys):
    log("hello")
    warn("Maximum number of incoming QoS2 messages exceeded")
    out = capsys.readouterr().out
    assert out.startswith("LOG:   test_log_and_warn_tags L#")
    assert "WARN:  test_log_and_warn_tags L#" in out
    assert out.endswith("Maximum number of incoming QoS2 messages exceeded")


def test_message_without_args_keeps_percent(capsys):
    log("100%")
    assert capsys.readouterr().out.endswith("100%")


def test_error_exits_with_status_one(capsys):
    with pytest.raises(SystemExit) as info:
        error("fatal %s", "thing")
    assert info.value.code == 1
    assert capsys.readouterr().out.startswith("ERROR: ")