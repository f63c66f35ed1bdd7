"""Core window-manager data: layouts, screens, size hints, rules, clients and monitors."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, Optional

BROKEN = "broken"
_LTSYMBOL_MAX = 15


@dataclass(frozen=True)
class Layout:
    """A named arrangement; ``arrange`` of None means floating behaviour."""

    symbol: str
    arrange: Optional[Callable[["Monitor"], None]] = None


FLOATING = Layout("><>", None)


@dataclass
class Screen:
    """Whole-display geometry and bar settings shared by all monitors."""

    width: int = 0
    height: int = 0
    bar_height: int = 0
    vertpad: int = 0
    topbar: bool = True
    resizehints: bool = True
    vp: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        self.vp = self.vertpad if self.topbar else -self.vertpad


@dataclass(frozen=True)
class SizeHints:
    """WM_NORMAL_HINTS of a window; a field of None means the hint is absent."""

    base_size: Optional[tuple[int, int]] = None
    min_size: Optional[tuple[int, int]] = None
    max_size: Optional[tuple[int, int]] = None
    resize_inc: Optional[tuple[int, int]] = None
    min_aspect: Optional[tuple[int, int]] = None
    max_aspect: Optional[tuple[int, int]] = None


@dataclass(frozen=True)
class Rule:
    """Placement rule matched against a new window's class, instance and title."""

    wm_class: Optional[str] = None
    instance: Optional[str] = None
    title: Optional[str] = None
    tags: int = 0
    isfloating: bool = False
    monitor: int = -1


def _ratio(a: float, b: float) -> float:
    if b == 0:
        if a > 0:
            return math.inf
        if a < 0:
            return -math.inf
        return math.nan
    return a / b


def _c_rem(a: int, b: int) -> int:
    """Remainder with the sign of the dividend, as integer division in C."""
    r = abs(a) % abs(b)
    return r if a >= 0 else -r


@dataclass(eq=False)
class Client:
    """A managed top-level window."""

    win: int = 0
    name: str = ""
    mon: Optional["Monitor"] = None
    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0
    oldx: int = 0
    oldy: int = 0
    oldw: int = 0
    oldh: int = 0
    basew: int = 0
    baseh: int = 0
    incw: int = 0
    inch: int = 0
    maxw: int = 0
    maxh: int = 0
    minw: int = 0
    minh: int = 0
    mina: float = 0.0
    maxa: float = 0.0
    hintsvalid: bool = False
    bw: int = 0
    oldbw: int = 0
    tags: int = 0
    isfixed: bool = False
    isfloating: bool = False
    isurgent: bool = False
    neverfocus: bool = False
    oldstate: bool = False
    isfullscreen: bool = False
    size_hints: Optional[SizeHints] = None

    def width(self) -> int:
        """Outer width including both borders."""
        return self.w + 2 * self.bw

    def height(self) -> int:
        """Outer height including both borders."""
        return self.h + 2 * self.bw

    def is_visible(self) -> bool:
        """Whether the client shares a tag with its monitor's current view."""
        m = self.mon
        if m is None:
            return False
        return bool(self.tags & m.tagset[m.seltags])

    def update_size_hints(self, hints: Optional[SizeHints]) -> None:
        """Store ``hints`` and derive base, increment, limit and aspect values."""
        self.size_hints = hints
        h = hints if hints is not None else SizeHints()
        if h.base_size is not None:
            self.basew, self.baseh = h.base_size
        elif h.min_size is not None:
            self.basew, self.baseh = h.min_size
        else:
            self.basew = self.baseh = 0
        if h.resize_inc is not None:
            self.incw, self.inch = h.resize_inc
        else:
            self.incw = self.inch = 0
        if h.max_size is not None:
            self.maxw, self.maxh = h.max_size
        else:
            self.maxw = self.maxh = 0
        if h.min_size is not None:
            self.minw, self.minh = h.min_size
        elif h.base_size is not None:
            self.minw, self.minh = h.base_size
        else:
            self.minw = self.minh = 0
        if h.min_aspect is not None and h.max_aspect is not None:
            self.mina = _ratio(h.min_aspect[1], h.min_aspect[0])
            self.maxa = _ratio(h.max_aspect[0], h.max_aspect[1])
        else:
            self.mina = self.maxa = 0.0
        self.isfixed = bool(
            self.maxw and self.maxh and self.maxw == self.minw and self.maxh == self.minh
        )
        self.hintsvalid = True

    def apply_size_hints(
        self, x: int, y: int, w: int, h: int, interact: bool
    ) -> tuple[int, int, int, int, bool]:
        """Constrain a requested geometry.

        Returns the adjusted ``(x, y, w, h)`` followed by whether it differs
        from the client's current geometry.
        """
        m = self.mon
        if m is None:
            raise ValueError("client has no monitor")
        screen = m.screen
        w = max(1, w)
        h = max(1, h)
        if interact:
            if x > screen.width:
                x = screen.width - self.width()
            if y > screen.height:
                y = screen.height - self.height()
            if x + w + 2 * self.bw < 0:
                x = 0
            if y + h + 2 * self.bw < 0:
                y = 0
        else:
            if x >= m.wx + m.ww:
                x = m.wx + m.ww - self.width()
            if y >= m.wy + m.wh:
                y = m.wy + m.wh - self.height()
            if x + w + 2 * self.bw <= m.wx:
                x = m.wx
            if y + h + 2 * self.bw <= m.wy:
                y = m.wy
        if h < screen.bar_height:
            h = screen.bar_height
        if w < screen.bar_height:
            w = screen.bar_height
        if screen.resizehints or self.isfloating or m.lt[m.sellt].arrange is None:
            if not self.hintsvalid:
                self.update_size_hints(self.size_hints)
            baseismin = self.basew == self.minw and self.baseh == self.minh
            if not baseismin:
                w -= self.basew
                h -= self.baseh
            if self.mina > 0 and self.maxa > 0:
                if self.maxa < _ratio(w, h):
                    w = int(h * self.maxa + 0.5)
                elif self.mina < _ratio(h, w):
                    h = int(w * self.mina + 0.5)
            if baseismin:
                w -= self.basew
                h -= self.baseh
            if self.incw:
                w -= _c_rem(w, self.incw)
            if self.inch:
                h -= _c_rem(h, self.inch)
            w = max(w + self.basew, self.minw)
            h = max(h + self.baseh, self.minh)
            if self.maxw:
                w = min(w, self.maxw)
            if self.maxh:
                h = min(h, self.maxh)
        changed = x != self.x or y != self.y or w != self.w or h != self.h
        return x, y, w, h, changed

    def resize(self, x: int, y: int, w: int, h: int, interact: bool) -> bool:
        """Apply size hints and move the client if the geometry changes."""
        x, y, w, h, changed = self.apply_size_hints(x, y, w, h, interact)
        if changed:
            self.resize_client(x, y, w, h)
        return changed

    def resize_client(self, x: int, y: int, w: int, h: int) -> None:
        """Set the geometry unconditionally, remembering the previous one."""
        self.oldx, self.x = self.x, x
        self.oldy, self.y = self.y, y
        self.oldw, self.w = self.w, w
        self.oldh, self.h = self.h, h


@dataclass(eq=False)
class Monitor:
    """One physical output with its clients, focus stack and view state."""

    num: int = 0
    mfact: float = 0.55
    nmaster: int = 1
    gappx: int = 0
    showbar: bool = True
    topbar: bool = True
    mx: int = 0
    my: int = 0
    mw: int = 0
    mh: int = 0
    wx: int = 0
    wy: int = 0
    ww: int = 0
    wh: int = 0
    by: int = 0
    seltags: int = 0
    sellt: int = 0
    tagset: list[int] = field(default_factory=lambda: [1, 1])
    lt: list[Layout] = field(default_factory=lambda: [FLOATING, FLOATING])
    ltsymbol: str = ""
    clients: list[Client] = field(default_factory=list)
    stack: list[Client] = field(default_factory=list)
    sel: Optional[Client] = None
    screen: Screen = field(default_factory=Screen)
    barwin: int = 0

    def __post_init__(self) -> None:
        if not self.ltsymbol:
            self.ltsymbol = self.lt[0].symbol[:_LTSYMBOL_MAX]

    def attach(self, client: Client) -> None:
        """Put ``client`` at the head of the client list."""
        self.clients.insert(0, client)

    def attach_bottom(self, client: Client) -> None:
        """Put ``client`` at the end of the client list."""
        self.clients.append(client)

    def attach_stack(self, client: Client) -> None:
        """Put ``client`` on top of the focus stack."""
        self.stack.insert(0, client)

    def detach(self, client: Client) -> None:
        """Remove ``client`` from the client list."""
        if client in self.clients:
            self.clients.remove(client)

    def detach_stack(self, client: Client) -> None:
        """Remove ``client`` from the focus stack, reselecting if it was selected."""
        if client in self.stack:
            self.stack.remove(client)
        if client is self.sel:
            self.sel = next((c for c in self.stack if c.is_visible()), None)

    def tiled(self) -> list[Client]:
        """Visible, non-floating clients in list order."""
        return [c for c in self.clients if not c.isfloating and c.is_visible()]

    def visible(self) -> list[Client]:
        """Visible clients in list order."""
        return [c for c in self.clients if c.is_visible()]

    def update_bar_pos(self) -> None:
        """Recompute the window area and bar position from the monitor area."""
        screen = self.screen
        bh = screen.bar_height
        self.wy = self.my
        self.wh = self.mh
        if self.showbar:
            self.wh = self.wh - screen.vertpad - bh
            self.by = self.wy if self.topbar else self.wy + self.wh + screen.vertpad
            self.wy = self.wy + bh + screen.vp if self.topbar else self.wy
        else:
            self.by = -bh - screen.vp


def apply_rules(
    client: Client,
    rules: list[Rule],
    monitors: list[Monitor],
    tagmask: int,
    wm_class: Optional[str],
    instance: Optional[str],
) -> None:
    """Set floating state, tags and monitor of a new client from matching rules."""
    client.isfloating = False
    tags = 0
    cls = wm_class or BROKEN
    inst = instance or BROKEN
    for rule in rules:
        if (
            (not rule.title or rule.title in client.name)
            and (not rule.wm_class or rule.wm_class in cls)
            and (not rule.instance or rule.instance in inst)
        ):
            client.isfloating = rule.isfloating
            tags |= rule.tags
            target = next((m for m in monitors if m.num == rule.monitor), None)
            if target is not None:
                client.mon = target
    if client.mon is None:
        raise ValueError("client has no monitor")
    masked = tags & tagmask
    client.tags = masked if masked else client.mon.tagset[client.mon.seltags]