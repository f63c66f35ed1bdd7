"""Window management state machine: monitors, clients, focus, tags and layouts."""

from __future__ import annotations

from typing import Optional

from .bindings import matching_keys
from .layouts import movestack as _movestack
from .model import BROKEN, Client, Layout, Monitor, Screen, apply_rules
from .monitors import dirtomon
from .wmconfig import Config, default_config

_LTSYMBOL_MAX = 15


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


class WindowManager:
    """Monitors and their clients, driven by the configured actions."""

    def __init__(
        self,
        config: Optional[Config] = None,
        width: int = 0,
        height: int = 0,
        bar_height: int = 0,
    ) -> None:
        self.config = config if config is not None else default_config()
        self.screen = Screen(
            width=width,
            height=height,
            bar_height=bar_height,
            vertpad=self.config.vertpad,
            topbar=self.config.topbar,
            resizehints=self.config.resizehints,
        )
        self.monitors: list[Monitor] = []
        self.selmon: Optional[Monitor] = None
        self.numlockmask = 0
        self.running = True
        self.statussig = 0
        self.statuspid = -1

    def _mon(self) -> Monitor:
        if self.selmon is None:
            raise RuntimeError("no monitor")
        return self.selmon

    def add_monitor(self, x: int, y: int, w: int, h: int) -> Monitor:
        """Create a monitor covering the given area."""
        cfg = self.config
        layouts = cfg.layouts
        m = Monitor(
            num=len(self.monitors),
            mfact=cfg.mfact,
            nmaster=cfg.nmaster,
            gappx=cfg.gappx,
            showbar=cfg.showbar,
            topbar=cfg.topbar,
            mx=x, my=y, mw=w, mh=h,
            wx=x, wy=y, ww=w, wh=h,
            lt=[layouts[0], layouts[1 % len(layouts)]],
            ltsymbol=layouts[0].symbol[:_LTSYMBOL_MAX],
            screen=self.screen,
        )
        m.update_bar_pos()
        self.monitors.append(m)
        if self.selmon is None:
            self.selmon = m
        return m

    def manage(
        self,
        win: int,
        x: int,
        y: int,
        w: int,
        h: int,
        name: str = "",
        wm_class: Optional[str] = None,
        instance: Optional[str] = None,
        transient_for: Optional[int] = None,
    ) -> Client:
        """Start managing a new window and return its client."""
        selmon = self._mon()
        c = Client(win=win, name=name or BROKEN, x=x, y=y, w=w, h=h,
                   oldx=x, oldy=y, oldw=w, oldh=h)
        parent = self.find_client(transient_for) if transient_for is not None else None
        if parent is not None:
            c.mon = parent.mon
            c.tags = parent.tags
        else:
            c.mon = selmon
            apply_rules(c, self.config.rules, self.monitors, self.config.tagmask(),
                        wm_class, instance)
        m = c.mon
        assert m is not None
        if c.x + c.width() > m.wx + m.ww:
            c.x = m.wx + m.ww - c.width()
        if c.y + c.height() > m.wy + m.wh:
            c.y = m.wy + m.wh - c.height()
        c.x = max(c.x, m.wx)
        c.y = max(c.y, m.wy)
        c.bw = self.config.borderpx
        c.update_size_hints(None)
        c.x = m.mx + _cdiv(m.mw - c.width(), 2)
        c.y = m.my + _cdiv(m.mh - c.height(), 2)
        if not c.isfloating:
            c.isfloating = c.oldstate = transient_for is not None or c.isfixed
        m.attach_bottom(c)
        m.attach_stack(c)
        m.sel = c
        self.arrange(m)
        self.focus(None)
        return c

    def unmanage(self, client: Client) -> None:
        """Stop managing ``client``."""
        m = client.mon
        if m is None:
            raise ValueError("client is not managed")
        m.detach(client)
        m.detach_stack(client)
        self.focus(None)
        self.arrange(m)

    def find_client(self, win: Optional[int]) -> Optional[Client]:
        """The client for window ``win``, if managed."""
        for m in self.monitors:
            for c in m.clients:
                if c.win == win:
                    return c
        return None

    def _showhide(self, m: Monitor) -> None:
        floating_layout = m.lt[m.sellt].arrange is None
        for c in m.stack:
            if c.is_visible() and (floating_layout or c.isfloating) and not c.isfullscreen:
                c.resize(c.x, c.y, c.w, c.h, False)

    def _arrangemon(self, m: Monitor) -> None:
        layout = m.lt[m.sellt]
        m.ltsymbol = layout.symbol[:_LTSYMBOL_MAX]
        if layout.arrange is not None:
            layout.arrange(m)

    def arrange(self, m: Optional[Monitor] = None) -> None:
        """Lay out ``m``, or every monitor when None."""
        targets = [m] if m is not None else list(self.monitors)
        for mon in targets:
            self._showhide(mon)
        for mon in targets:
            self._arrangemon(mon)

    def focus(self, client: Optional[Client] = None) -> None:
        """Focus ``client``, or the topmost visible client of the selected monitor."""
        if self.selmon is None:
            return
        c = client
        if c is None or not c.is_visible():
            c = next((s for s in self.selmon.stack if s.is_visible()), None)
        if c is not None:
            if c.mon is not self.selmon:
                self.selmon = c.mon
            c.isurgent = False
            m = c.mon
            assert m is not None
            m.detach_stack(c)
            m.attach_stack(c)
        assert self.selmon is not None
        self.selmon.sel = c

    def focusstack(self, direction: int) -> None:
        """Focus the next or previous visible client."""
        m = self._mon()
        sel = m.sel
        if sel is None or (sel.isfullscreen and self.config.lockfullscreen):
            return
        clients = m.clients
        idx = clients.index(sel)
        c: Optional[Client]
        if direction > 0:
            c = next((x for x in clients[idx + 1 :] if x.is_visible()), None)
            if c is None:
                c = next((x for x in clients if x.is_visible()), None)
        else:
            before = [x for x in clients[:idx] if x.is_visible()]
            after = [x for x in clients[idx:] if x.is_visible()]
            c = before[-1] if before else (after[-1] if after else None)
        if c is not None:
            self.focus(c)

    def focusmon(self, direction: int) -> None:
        """Focus the next or previous monitor."""
        if len(self.monitors) < 2:
            return
        m = dirtomon(self.monitors, self._mon(), direction)
        if m is self.selmon:
            return
        self.selmon = m
        self.focus(None)

    def sendmon(self, client: Client, m: Monitor) -> None:
        """Move ``client`` to monitor ``m``, taking that monitor's current tags."""
        if client.mon is m:
            return
        old = client.mon
        if old is not None:
            old.detach(client)
            old.detach_stack(client)
        client.mon = m
        client.tags = m.tagset[m.seltags]
        m.attach_bottom(client)
        m.attach_stack(client)
        self.focus(None)
        self.arrange(None)

    def tagmon(self, direction: int) -> None:
        """Send the selected client to the next or previous monitor."""
        m = self._mon()
        if m.sel is None or len(self.monitors) < 2:
            return
        self.sendmon(m.sel, dirtomon(self.monitors, m, direction))

    def view(self, tags: int) -> None:
        """Show ``tags``; 0 switches back to the previous view."""
        m = self._mon()
        mask = tags & self.config.tagmask()
        if mask == m.tagset[m.seltags]:
            return
        m.seltags ^= 1
        if mask:
            m.tagset[m.seltags] = mask
        self.focus(None)
        self.arrange(m)

    def toggleview(self, tags: int) -> None:
        """Add or remove ``tags`` from the current view."""
        m = self._mon()
        newtagset = m.tagset[m.seltags] ^ (tags & self.config.tagmask())
        if newtagset:
            m.tagset[m.seltags] = newtagset
            self.focus(None)
            self.arrange(m)

    def tag(self, tags: int) -> None:
        """Give the selected client exactly ``tags``."""
        m = self._mon()
        mask = tags & self.config.tagmask()
        if m.sel is not None and mask:
            m.sel.tags = mask
            self.focus(None)
            self.arrange(m)

    def toggletag(self, tags: int) -> None:
        """Add or remove ``tags`` on the selected client, keeping at least one."""
        m = self._mon()
        if m.sel is None:
            return
        newtags = m.sel.tags ^ (tags & self.config.tagmask())
        if newtags:
            m.sel.tags = newtags
            self.focus(None)
            self.arrange(m)

    def incnmaster(self, delta: int) -> None:
        """Change the number of master clients, not below zero."""
        m = self._mon()
        m.nmaster = max(m.nmaster + delta, 0)
        self.arrange(m)

    def setmfact(self, f: Optional[float]) -> None:
        """Adjust the master factor by ``f``, or set it to ``f - 1`` when ``f >= 1``."""
        m = self._mon()
        if f is None or m.lt[m.sellt].arrange is None:
            return
        value = f + m.mfact if f < 1.0 else f - 1.0
        if value < 0.05 or value > 0.95:
            return
        m.mfact = value
        self.arrange(m)

    def setgaps(self, delta: int) -> None:
        """Change the gap between windows; 0 removes it."""
        m = self._mon()
        if delta == 0 or m.gappx + delta < 0:
            m.gappx = 0
        else:
            m.gappx += delta
        self.arrange(m)

    def setlayout(self, layout: Optional[Layout]) -> None:
        """Switch to ``layout``, or toggle to the previous layout when None."""
        m = self._mon()
        if layout is None or layout is not m.lt[m.sellt]:
            m.sellt ^= 1
        if layout is not None:
            m.lt[m.sellt] = layout
        m.ltsymbol = m.lt[m.sellt].symbol[:_LTSYMBOL_MAX]
        if m.sel is not None:
            self.arrange(m)

    def togglefloating(self) -> None:
        """Toggle floating for the selected client."""
        m = self._mon()
        c = m.sel
        if c is None or c.isfullscreen:
            return
        c.isfloating = not c.isfloating or c.isfixed
        if c.isfloating:
            c.resize(c.x, c.y, c.w, c.h, False)
        self.arrange(m)

    def togglebar(self) -> None:
        """Show or hide the bar of the selected monitor."""
        m = self._mon()
        m.showbar = not m.showbar
        m.update_bar_pos()
        self.arrange(m)

    def setfullscreen(self, client: Client, fullscreen: bool) -> None:
        """Make ``client`` cover its monitor, or restore it."""
        m = client.mon
        if m is None:
            raise ValueError("client is not managed")
        if fullscreen and not client.isfullscreen:
            client.isfullscreen = True
            client.oldstate = client.isfloating
            client.oldbw = client.bw
            client.bw = 0
            client.isfloating = True
            client.resize_client(m.mx, m.my, m.mw, m.mh)
        elif not fullscreen and client.isfullscreen:
            client.isfullscreen = False
            client.isfloating = client.oldstate
            client.bw = client.oldbw
            client.x, client.y = client.oldx, client.oldy
            client.w, client.h = client.oldw, client.oldh
            client.resize_client(client.x, client.y, client.w, client.h)
            self.arrange(m)

    def zoom(self) -> None:
        """Move the selected tiled client to the master position."""
        m = self._mon()
        c = m.sel
        if m.lt[m.sellt].arrange is None or c is None or c.isfloating:
            return
        tiled = m.tiled()
        if tiled and c is tiled[0]:
            if len(tiled) < 2:
                return
            c = tiled[1]
        m.detach(c)
        m.attach(c)
        self.focus(c)
        self.arrange(c.mon)

    def movestack(self, direction: int) -> None:
        """Swap the selected client with its tiled neighbour."""
        m = self._mon()
        if _movestack(m, direction) is not None:
            self.arrange(m)

    def keypress(self, keysym: object, state: int) -> int:
        """Run every binding for ``keysym`` in ``state``; returns how many ran."""
        matched = matching_keys(self.config.keys or (), keysym, state, self.numlockmask)
        for key in matched:
            assert key.func is not None
            key.func(self, key.arg)
        return len(matched)