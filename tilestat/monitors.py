"""Monitor geometry: overlap, lookup by rectangle or direction, and screen layout updates."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from .model import Monitor, Screen

Geometry = tuple[int, int, int, int]


def intersect(x: int, y: int, w: int, h: int, m: Monitor) -> int:
    """Area shared by a rectangle and the window area of ``m``."""
    dx = max(0, min(x + w, m.wx + m.ww) - max(x, m.wx))
    dy = max(0, min(y + h, m.wy + m.wh) - max(y, m.wy))
    return dx * dy


def recttomon(
    monitors: Iterable[Monitor],
    selected: Optional[Monitor],
    x: int,
    y: int,
    w: int,
    h: int,
) -> Optional[Monitor]:
    """The monitor with the largest overlap with a rectangle, else ``selected``."""
    result = selected
    area = 0
    for m in monitors:
        a = intersect(x, y, w, h, m)
        if a > area:
            area = a
            result = m
    return result


def dirtomon(
    monitors: Sequence[Monitor], selected: Monitor, direction: int
) -> Monitor:
    """The monitor after (direction > 0) or before ``selected``, wrapping around."""
    if not monitors:
        raise ValueError("no monitors")
    index = monitors.index(selected)
    if direction > 0:
        return monitors[(index + 1) % len(monitors)]
    return monitors[index - 1]


def unique_geometries(infos: Iterable[Geometry]) -> list[Geometry]:
    """Screen geometries with duplicates removed, in first-seen order."""
    unique: list[Geometry] = []
    for info in infos:
        geometry = tuple(info)
        if geometry not in unique:
            unique.append(geometry)  # type: ignore[arg-type]
    return unique


def update_geometry(
    monitors: list[Monitor],
    infos: Optional[Iterable[Geometry]],
    screen: Screen,
) -> bool:
    """Bring ``monitors`` in line with the given screen geometries.

    ``infos`` holds ``(x, y, width, height)`` of each physical screen; when it
    is None or empty a single monitor covers the whole ``screen``. Monitors are
    added or removed as needed, and clients of removed monitors move to the
    first one. Returns whether anything changed.
    """
    dirty = False
    unique = unique_geometries(infos or ())

    if unique:
        n = len(monitors)
        nn = len(unique)
        for _ in range(n, nn):
            monitors.append(Monitor(screen=screen))
        for i, (m, (gx, gy, gw, gh)) in enumerate(zip(monitors, unique)):
            if i >= n or (gx, gy, gw, gh) != (m.mx, m.my, m.mw, m.mh):
                dirty = True
                m.num = i
                m.mx = m.wx = gx
                m.my = m.wy = gy
                m.mw = m.ww = gw
                m.mh = m.wh = gh
                m.update_bar_pos()
        for _ in range(nn, n):
            m = monitors[-1]
            target = monitors[0]
            while m.clients:
                dirty = True
                c = m.clients.pop(0)
                m.detach_stack(c)
                c.mon = target
                target.attach_bottom(c)
                target.attach_stack(c)
            monitors.pop()
    else:
        if not monitors:
            monitors.append(Monitor(screen=screen))
        first = monitors[0]
        if first.mw != screen.width or first.mh != screen.height:
            dirty = True
            first.mw = first.ww = screen.width
            first.mh = first.wh = screen.height
            first.update_bar_pos()
    return dirty


def systraytomon(
    monitors: Sequence[Monitor],
    selected: Optional[Monitor],
    m: Optional[Monitor],
    pinning: int,
    failfirst: bool,
) -> Optional[Monitor]:
    """The monitor that holds the system tray.

    With ``pinning`` of 0 the tray follows the selected monitor; otherwise it
    is pinned to monitor number ``pinning`` (counted from 1), falling back to
    the first monitor when ``failfirst`` is set, or the last one otherwise.
    """
    if not pinning:
        if m is None:
            return selected
        return m if m is selected else None
    if not monitors:
        return None
    n = len(monitors)
    if failfirst and n < pinning:
        return monitors[0]
    return monitors[min(pinning, n) - 1]