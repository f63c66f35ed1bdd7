"""Tiled and monocle arrangements."""

from __future__ import annotations

from .model import Monitor

_LTSYMBOL_MAX = 15


def tile(m: Monitor) -> None:
    """Master column on the left, remaining clients stacked on the right."""
    clients = m.tiled()
    n = len(clients)
    if n == 0:
        return
    gap = m.gappx
    if n > m.nmaster:
        mw = int(m.ww * m.mfact) if m.nmaster else 0
    else:
        mw = m.ww - gap
    my = ty = gap
    for i, c in enumerate(clients):
        if i < m.nmaster:
            h = (m.wh - my) // (min(n, m.nmaster) - i) - gap
            c.resize(m.wx + gap, m.wy + my, mw - 2 * c.bw - gap, h - 2 * c.bw, False)
            if my + c.height() + gap < m.wh:
                my += c.height() + gap
        else:
            h = (m.wh - ty) // (n - i) - gap
            c.resize(
                m.wx + mw + gap,
                m.wy + ty,
                m.ww - mw - 2 * c.bw - 2 * gap,
                h - 2 * c.bw,
                False,
            )
            if ty + c.height() + gap < m.wh:
                ty += c.height() + gap


def monocle(m: Monitor) -> None:
    """Every tiled client fills the window area; the symbol shows the count."""
    n = len(m.visible())
    if n > 0:
        m.ltsymbol = f"[{n}]"[:_LTSYMBOL_MAX]
    for c in m.tiled():
        c.resize(m.wx, m.wy, m.ww - 2 * c.bw, m.wh - 2 * c.bw, False)