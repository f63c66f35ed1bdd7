"""Status line assembly and the command that publishes it periodically."""

from __future__ import annotations

import os
import signal
import subprocess
import sys
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, NoReturn

from . import basic, memory
from .util import warn

VERSION = "1.1"
INTERVAL_MS = 1000
UNKNOWN_STR = "n/a"
MAXLEN = 2048
_PROG = "slstatus"


@dataclass(frozen=True)
class Component:
    """One status element: a function, a printf-style format and its argument."""

    func: Callable[[Any], str | None]
    fmt: str
    arg: Any = None


def default_components() -> list[Component]:
    """The configured list of status components."""
    return [
        Component(basic.run_command, "󰕾 %s | ", "pamixer --get-volume-human"),
        Component(memory.ram_used, "󰍛 %s | ", None),
        Component(basic.disk_free, "󰋊 %s free | ", "/home"),
        Component(basic.datetime, "󰃰 %s | ", "%a %b %d %I:%M %p"),
        Component(basic.hostname, "󰒋 %s | ", None),
        Component(basic.kernel_release, " %s | ", None),
    ]


def render_status(
    components: list[Component], unknown: str = UNKNOWN_STR, maxlen: int = MAXLEN
) -> str:
    """Join the formatted components, stopping at the first that does not fit."""
    status = ""
    used = 0
    for component in components:
        value = component.func(component.arg)
        if value is None:
            value = unknown
        piece = component.fmt % (value,)
        size = len(piece.encode())
        if size >= maxlen - used:
            warn("vsnprintf: Output truncated")
            break
        status += piece
        used += size
    return status


def _die(message: str) -> NoReturn:
    warn(message)
    raise SystemExit(1)


def _usage() -> NoReturn:
    _die(f"usage: {_PROG} [-v] [-s] [-1]")


def _parse_args(args: list[str]) -> tuple[bool, bool]:
    sflag = once = False
    while args and args[0].startswith("-") and len(args[0]) > 1:
        flag = args.pop(0)
        if flag == "--":
            break
        for ch in flag[1:]:
            if ch == "v":
                _die(f"{_PROG}-{VERSION}")
            elif ch == "1":
                once = True
                sflag = True
            elif ch == "s":
                sflag = True
            else:
                _usage()
    if args:
        _usage()
    return sflag, once


def _store_name(text: str) -> None:
    try:
        subprocess.run(["xsetroot", "-name", text], check=True)
    except (OSError, subprocess.CalledProcessError):
        _die("XStoreName: Allocation failed")


class _Loop:
    def __init__(self, done: bool) -> None:
        self.done = done
        self.wake = threading.Event()

    def on_signal(self, signo: int, frame: object) -> None:
        if signo != signal.SIGUSR1:
            self.done = True
        self.wake.set()


def main(argv: list[str] | None = None) -> int:
    """Print or publish the status line until told to stop."""
    args = list(sys.argv[1:] if argv is None else argv)
    sflag, once = _parse_args(args)

    if not sflag and not os.environ.get("DISPLAY"):
        _die("XOpenDisplay: Failed to open display")

    loop = _Loop(done=once)
    previous: dict[int, Any] = {}
    for signo in (signal.SIGINT, signal.SIGTERM, signal.SIGUSR1):
        try:
            previous[signo] = signal.signal(signo, loop.on_signal)
        except ValueError:
            break

    components = default_components()
    try:
        while True:
            start = time.monotonic()
            status = render_status(components, UNKNOWN_STR, MAXLEN)
            if sflag:
                try:
                    print(status, flush=True)
                except OSError:
                    _die("puts:")
            else:
                _store_name(status)

            if not loop.done:
                wait = INTERVAL_MS / 1000 - (time.monotonic() - start)
                if wait >= 0:
                    loop.wake.wait(wait)
                    loop.wake.clear()
            if loop.done:
                break
    finally:
        for signo, handler in previous.items():
            signal.signal(signo, handler)

    if not sflag:
        _store_name("")
    return 0