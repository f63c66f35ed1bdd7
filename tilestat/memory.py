"""Memory and swap usage components read from the kernel's meminfo table."""

from __future__ import annotations

from .util import fmt_human, warn

MEMINFO = "/proc/meminfo"


def parse_meminfo(text: str) -> dict[str, int]:
    """Parse ``Name: value kB`` lines into a mapping of names to values in kB."""
    fields: dict[str, int] = {}
    for line in text.splitlines():
        name, sep, rest = line.partition(":")
        if not sep:
            continue
        parts = rest.split()
        if not parts:
            continue
        try:
            fields[name.strip()] = int(parts[0])
        except ValueError:
            continue
    return fields


def _fields(path: str, *names: str) -> tuple[int, ...] | None:
    try:
        with open(path, encoding="utf-8", errors="replace") as fp:
            info = parse_meminfo(fp.read())
    except OSError:
        warn(f"fopen '{path}':")
        return None
    try:
        return tuple(info[name] for name in names)
    except KeyError:
        return None


def _percent(part: int, total: int) -> int:
    """100 * part / total, truncated toward zero."""
    quotient = abs(100 * part) // abs(total)
    return quotient if (part >= 0) == (total > 0) else -quotient


_RAM_FIELDS = ("MemTotal", "MemFree", "MemAvailable", "Buffers", "Cached")


def ram_free(unused: object = None, path: str = MEMINFO) -> str | None:
    """Available memory."""
    values = _fields(path, *_RAM_FIELDS[:3])
    if values is None:
        return None
    return fmt_human(values[2] * 1024, 1024)


def ram_perc(unused: object = None, path: str = MEMINFO) -> str | None:
    """Memory usage in percent, not counting buffers and cache."""
    values = _fields(path, *_RAM_FIELDS)
    if values is None:
        return None
    total, free, _, buffers, cached = values
    if total == 0:
        return None
    return str(_percent((total - free) - (buffers + cached), total))


def ram_total(unused: object = None, path: str = MEMINFO) -> str | None:
    """Total memory."""
    values = _fields(path, "MemTotal")
    if values is None:
        return None
    return fmt_human(values[0] * 1024, 1024)


def ram_used(unused: object = None, path: str = MEMINFO) -> str | None:
    """Used memory, not counting buffers and cache."""
    values = _fields(path, *_RAM_FIELDS)
    if values is None:
        return None
    total, free, _, buffers, cached = values
    return fmt_human((total - free - buffers - cached) * 1024, 1024)


def swap_free(unused: object = None, path: str = MEMINFO) -> str | None:
    """Free swap space."""
    values = _fields(path, "SwapFree")
    if values is None:
        return None
    return fmt_human(values[0] * 1024, 1024)


def swap_perc(unused: object = None, path: str = MEMINFO) -> str | None:
    """Swap usage in percent."""
    values = _fields(path, "SwapTotal", "SwapFree", "SwapCached")
    if values is None:
        return None
    total, free, cached = values
    if total == 0:
        return None
    return str(_percent(total - free - cached, total))


def swap_total(unused: object = None, path: str = MEMINFO) -> str | None:
    """Total swap space."""
    values = _fields(path, "SwapTotal")
    if values is None:
        return None
    return fmt_human(values[0] * 1024, 1024)


def swap_used(unused: object = None, path: str = MEMINFO) -> str | None:
    """Used swap space, not counting swap cache."""
    values = _fields(path, "SwapTotal", "SwapFree", "SwapCached")
    if values is None:
        return None
    total, free, cached = values
    return fmt_human((total - free - cached) * 1024, 1024)