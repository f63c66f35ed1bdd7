"""Simple status components: files, time, disks, host and user information."""

from __future__ import annotations

import os
import platform
import pwd
import socket
import subprocess
import sys
import time

from .util import fmt_human, read_first_line, read_uint, warn

_BUFSIZE = 1024
_ENTROPY_AVAIL = "/proc/sys/kernel/random/entropy_avail"


def _uptime_clock() -> int:
    for name in ("CLOCK_BOOTTIME", "CLOCK_UPTIME"):
        if hasattr(time, name):
            return getattr(time, name)
    return time.CLOCK_MONOTONIC


def cat(path: str) -> str | None:
    """First line of an arbitrary file, or None if it is empty."""
    line = read_first_line(path)
    if line is None:
        return None
    line = line[: _BUFSIZE - 2]
    return line or None


def datetime(fmt: str) -> str | None:
    """Current local date and time formatted with ``fmt``."""
    result = time.strftime(fmt, time.localtime())
    if not result or len(result.encode()) >= _BUFSIZE:
        warn("strftime: Result string exceeds buffer size")
        return None
    return result


def _statvfs(path: str) -> os.statvfs_result | None:
    try:
        return os.statvfs(path)
    except OSError:
        warn(f"statvfs '{path}':")
        return None


def disk_free(path: str) -> str | None:
    """Free disk space available to unprivileged users."""
    fs = _statvfs(path)
    if fs is None:
        return None
    return fmt_human(fs.f_frsize * fs.f_bavail, 1024)


def disk_perc(path: str) -> str | None:
    """Disk usage in percent."""
    fs = _statvfs(path)
    if fs is None or fs.f_blocks == 0:
        return None
    return str(int(100 * (1 - fs.f_bavail / fs.f_blocks)))


def disk_total(path: str) -> str | None:
    """Total disk space."""
    fs = _statvfs(path)
    if fs is None:
        return None
    return fmt_human(fs.f_frsize * fs.f_blocks, 1024)


def disk_used(path: str) -> str | None:
    """Used disk space."""
    fs = _statvfs(path)
    if fs is None:
        return None
    return fmt_human(fs.f_frsize * (fs.f_blocks - fs.f_bfree), 1024)


def entropy(unused: object = None) -> str | None:
    """Available kernel entropy."""
    if sys.platform.startswith("linux"):
        num = read_uint(_ENTROPY_AVAIL)
        return None if num is None else str(num)
    return "\u221e"


def hostname(unused: object = None) -> str | None:
    """Host name of this machine."""
    try:
        return socket.gethostname()
    except OSError:
        warn("gethostname:")
        return None


def kernel_release(unused: object = None) -> str | None:
    """Kernel release, as printed by ``uname -r``."""
    release = platform.release()
    return release or None


def load_avg(unused: object = None) -> str | None:
    """1, 5 and 15 minute load averages."""
    try:
        one, five, fifteen = os.getloadavg()
    except OSError:
        warn("getloadavg: Failed to obtain load average")
        return None
    return f"{one:.2f} {five:.2f} {fifteen:.2f}"


def num_files(path: str) -> str | None:
    """Number of entries in a directory."""
    try:
        return str(len(os.listdir(path)))
    except OSError:
        warn(f"opendir '{path}':")
        return None


def run_command(cmd: str) -> str | None:
    """First line of output of a shell command."""
    try:
        with subprocess.Popen(cmd, shell=True, stdout=subprocess.PIPE) as proc:
            assert proc.stdout is not None
            raw = proc.stdout.readline(_BUFSIZE - 2)
    except OSError:
        warn(f"popen '{cmd}':")
        return None
    if not raw:
        return None
    line = raw.decode(errors="replace")
    newline = line.rfind("\n")
    if newline >= 0:
        line = line[:newline]
    return line or None


def uptime(unused: object = None) -> str | None:
    """System uptime as hours and minutes."""
    clock = _uptime_clock()
    try:
        seconds = int(time.clock_gettime(clock))
    except OSError:
        warn(f"clock_gettime {clock}")
        return None
    hours, rest = divmod(seconds, 3600)
    return f"{hours}h {rest // 60}m"


def gid(unused: object = None) -> str:
    """Group id of the current user."""
    return str(os.getgid())


def uid(unused: object = None) -> str:
    """Effective user id."""
    return str(os.geteuid())


def username(unused: object = None) -> str | None:
    """Name of the effective user."""
    euid = os.geteuid()
    try:
        return pwd.getpwuid(euid).pw_name
    except KeyError:
        warn(f"getpwuid '{euid}': no such user")
        return None


def temp(file: str) -> str | None:
    """Temperature in degrees Celsius from a millidegree sensor file."""
    value = read_uint(file)
    return None if value is None else str(value // 1000)