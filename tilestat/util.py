"""Shared helpers for status components: warnings, human-readable sizes, file reading."""

from __future__ import annotations

import re
import sys

_PREFIXES = {
    1000: ("", "k", "M", "G", "T", "P", "E", "Z", "Y"),
    1024: ("", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"),
}

_UINT = re.compile(r"\s*\+?(\d+)")


def warn(message: str) -> None:
    """Write a warning to stderr.

    A message ending in ':' is followed by the description of the
    exception currently being handled, if there is one.
    """
    if message.endswith(":"):
        exc = sys.exc_info()[1]
        detail = ""
        if exc is not None:
            detail = getattr(exc, "strerror", None) or str(exc)
        print(f"{message} {detail}", file=sys.stderr)
    else:
        print(message, file=sys.stderr)


def fmt_human(num: float, base: int) -> str:
    """Format ``num`` with a decimal (1000) or binary (1024) unit prefix."""
    try:
        prefixes = _PREFIXES[base]
    except KeyError:
        raise ValueError(f"fmt_human: invalid base {base!r}") from None
    scaled = float(num)
    index = 0
    while index < len(prefixes) - 1 and scaled >= base:
        scaled /= base
        index += 1
    return f"{scaled:.1f} {prefixes[index]}"


def read_first_line(path: str) -> str | None:
    """Return the first line of ``path`` without its newline.

    Returns None if the file cannot be opened or is empty.
    """
    try:
        with open(path, encoding="utf-8", errors="replace") as fp:
            line = fp.readline()
    except OSError:
        warn(f"fopen '{path}':")
        return None
    if not line:
        return None
    return line[:-1] if line.endswith("\n") else line


def read_uint(path: str) -> int | None:
    """Read an unsigned integer from the start of ``path``, or None."""
    try:
        with open(path, encoding="utf-8", errors="replace") as fp:
            text = fp.read(4096)
    except OSError:
        warn(f"fopen '{path}':")
        return None
    match = _UINT.match(text)
    return int(match.group(1)) if match else None