"""Timestamped debug printing and tagged log lines."""

from __future__ import annotations

import inspect
import sys
import time

_START_NS = time.monotonic_ns()


def _time_us_32() -> int:
    """Microseconds since start-up, wrapped to 32 bits."""
    return ((time.monotonic_ns() - _START_NS) // 1000) & 0xFFFFFFFF


def dprint(*args: object) -> None:
    """Print a message, or a name and a value, with a microsecond timestamp."""
    if len(args) == 1:
        text = f"{args[0]}"
    elif len(args) == 2:
        text = f"{args[0]} = {args[1]}"
    else:
        raise TypeError(f"dprint takes 1 or 2 arguments ({len(args)} given)")
    print(f"[{_time_us_32()}] {text}", file=sys.stdout)


def _emit(tag: str, fmt: str, args: tuple[object, ...]) -> None:
    frame = inspect.currentframe()
    caller = frame.f_back.f_back if frame and frame.f_back else None
    if caller is not None:
        where = f"{caller.f_code.co_name} L#{caller.f_lineno} "
    else:
        where = "? L#0 "
    del frame, caller
    body = fmt % args if args else fmt
    stream = sys.stdout
    stream.write(f"{tag}{where}{body}")
    stream.flush()


def debug(fmt: str, *args: object) -> None:
    """Write a DEBUG line naming the calling function and line."""
    _emit("DEBUG:   ", fmt, args)


def log(fmt: str, *args: object) -> None:
    """Write a LOG line naming the calling function and line."""
    _emit("LOG:   ", fmt, args)


def warn(fmt: str, *args: object) -> None:
    """Write a WARN line naming the calling function and line."""
    _emit("WARN:  ", fmt, args)


def error(fmt: str, *args: object) -> None:
    """Write an ERROR line and end the program with status 1."""
    _emit("ERROR: ", fmt, args)
    raise SystemExit(1)