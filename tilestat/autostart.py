"""Starting helper programs: autostart scripts, status bar lookup and spawning."""

from __future__ import annotations

import os
import re
import shlex
import subprocess
from typing import Mapping, Optional, Sequence

AUTOSTART_BLOCKING = "autostart_blocking.sh"
AUTOSTART = "autostart.sh"
STATUSBAR = "dwmblocks"
_DWMDIR = "dwm"
_LOCALSHARE = ".local/share"
_PROC_ROOT = "/proc"
_CMDLINE_MAX = 31

_STRTOL = re.compile(r"\s*([+-]?[0-9]+)")


def autostart_dir(env: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Directory holding the autostart scripts, or None without a home directory.

    ``$XDG_DATA_HOME/dwm`` (or ``~/.local/share/dwm``) is used when it is a
    directory; otherwise ``~/.dwm``.
    """
    env = os.environ if env is None else env
    home = env.get("HOME")
    if home is None:
        return None
    xdg = env.get("XDG_DATA_HOME")
    if xdg:
        path = f"{xdg}/{_DWMDIR}"
    else:
        path = f"{home}/{_LOCALSHARE}/{_DWMDIR}"
    if not os.path.isdir(path):
        path = f"{home}/.{_DWMDIR}"
    return path


def run_autostart(env: Optional[Mapping[str, str]] = None) -> list[str]:
    """Run the blocking script, then start the background one.

    Only executable scripts are run. Returns the paths of the scripts started.
    """
    directory = autostart_dir(env)
    if directory is None:
        return []
    started: list[str] = []
    blocking = f"{directory}/{AUTOSTART_BLOCKING}"
    if os.access(blocking, os.X_OK):
        subprocess.run(shlex.quote(blocking), shell=True, check=False)
        started.append(blocking)
    background = f"{directory}/{AUTOSTART}"
    if os.access(background, os.X_OK):
        subprocess.run(f"{shlex.quote(background)} &", shell=True, check=False)
        started.append(background)
    return started


def _argv0(pid: int, proc_root: str) -> Optional[str]:
    try:
        with open(f"{proc_root}/{pid}/cmdline", "rb") as fp:
            data = fp.read(_CMDLINE_MAX)
    except OSError:
        return None
    newline = data.find(b"\n")
    if newline >= 0:
        data = data[: newline + 1]
    data = data.split(b"\0", 1)[0]
    return data.decode(errors="replace").rsplit("/", 1)[-1]


def statusbar_pid(
    name: str = STATUSBAR, previous: int = -1, proc_root: str = _PROC_ROOT
) -> int:
    """Process id of the status bar program.

    ``previous`` is reused while its command is still ``name``; otherwise the
    process is looked up with ``pidof``. Returns 0 when none is found and -1
    when the lookup cannot be run.
    """
    if previous > 0 and _argv0(previous, proc_root) == name:
        return previous
    try:
        result = subprocess.run(
            ["pidof", "-s", name], capture_output=True, text=True, check=False
        )
    except FileNotFoundError:
        return 0
    except OSError:
        return -1
    match = _STRTOL.match(result.stdout)
    return int(match.group(1)) if match else 0


def spawn(argv: Sequence[str]) -> subprocess.Popen:
    """Start ``argv`` in a new session, detached from this process's descriptors."""
    if not argv:
        raise ValueError("spawn: empty command")
    return subprocess.Popen(list(argv), start_new_session=True, close_fds=True)