"""Fibonacci arrangements (spiral and dwindle) and moving clients in the tiling order."""

from __future__ import annotations

from typing import Optional

from .model import Client, Monitor


def fibonacci(m: Monitor, s: int) -> None:
    """Split the window area in halves, turning inward (s=0) or down-right (s=1)."""
    clients = m.tiled()
    n = len(clients)
    if n == 0:
        return

    nx, ny, nw, nh = m.wx, 0, m.ww, m.wh
    i = 0
    for c in clients:
        if (i % 2 and nh // 2 > 2 * c.bw) or (not i % 2 and nw // 2 > 2 * c.bw):
            if i < n - 1:
                if i % 2:
                    nh //= 2
                else:
                    nw //= 2
                if i % 4 == 2 and not s:
                    nx += nw
                elif i % 4 == 3 and not s:
                    ny += nh
            quarter = i % 4
            if quarter == 0:
                ny = ny + nh if s else ny - nh
            elif quarter == 1:
                nx += nw
            elif quarter == 2:
                ny += nh
            else:
                nx = nx + nw if s else nx - nw
            if i == 0:
                if n != 1:
                    nw = int(m.ww * m.mfact)
                ny = m.wy
            elif i == 1:
                nw = m.ww - nw
            i += 1
        c.resize(nx, ny, nw - 2 * c.bw, nh - 2 * c.bw, False)


def spiral(m: Monitor) -> None:
    """Fibonacci layout spiralling inward."""
    fibonacci(m, 0)


def dwindle(m: Monitor) -> None:
    """Fibonacci layout dwindling toward the bottom right."""
    fibonacci(m, 1)


def _tileable(c: Client) -> bool:
    return c.is_visible() and not c.isfloating


def movestack(m: Monitor, direction: int) -> Optional[Client]:
    """Swap the selected client with the next (direction > 0) or previous tiled one.

    Returns the client it was swapped with, or None when nothing moved.
    """
    sel = m.sel
    if sel is None or sel not in m.clients:
        return None
    clients = m.clients
    idx = clients.index(sel)

    target: Optional[Client] = None
    if direction > 0:
        target = next((c for c in clients[idx + 1 :] if _tileable(c)), None)
        if target is None:
            target = next((c for c in clients if _tileable(c)), None)
    else:
        before = [c for c in clients[:idx] if _tileable(c)]
        if before:
            target = before[-1]
        else:
            after = [c for c in clients[idx:] if _tileable(c)]
            target = after[-1] if after else None

    if target is None or target is sel:
        return None
    j = clients.index(target)
    clients[idx], clients[j] = clients[j], clients[idx]
    return target