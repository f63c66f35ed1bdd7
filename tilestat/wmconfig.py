"""Window manager configuration: appearance, tags, rules, layouts and bindings."""

from __future__ import annotations

import os
import signal
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from .autostart import spawn, statusbar_pid
from .bindings import Button, Click, Key, Mod
from .layouts import dwindle, movestack, spiral
from .model import Layout, Rule
from .tiling import monocle, tile

MODKEY = Mod.MOD4
_MAX_TAGS = 31

Action = Callable[[Any, Any], Any]


def _action(name: str, with_arg: bool = True) -> Action:
    """Binding action that calls the window manager method ``name``."""

    def run(wm: Any, arg: Any) -> Any:
        method = getattr(wm, name)
        return method(arg) if with_arg else method()

    run.__name__ = name
    return run


def _spawn(wm: Any, argv: Any) -> Any:
    command = list(argv)
    if command == list(wm.config.dmenucmd) and wm.selmon is not None and "-m" in command:
        command[command.index("-m") + 1] = chr(ord("0") + wm.selmon.num)
    return spawn(command)


def _killclient(wm: Any, arg: Any) -> None:
    if wm.selmon is not None and wm.selmon.sel is not None:
        wm.unmanage(wm.selmon.sel)


def _quit(wm: Any, arg: Any) -> None:
    wm.running = False


def _sigstatusbar(wm: Any, arg: Any) -> None:
    """Signal the status bar with the block number that was clicked."""
    if not wm.statussig:
        return
    wm.statuspid = statusbar_pid(wm.config.statusbar, wm.statuspid)
    if wm.statuspid <= 0:
        return
    os.kill(wm.statuspid, signal.SIGRTMIN + wm.statussig)


view = _action("view")
toggleview = _action("toggleview")
tag = _action("tag")
toggletag = _action("toggletag")
togglebar = _action("togglebar", with_arg=False)
focusstack = _action("focusstack")
incnmaster = _action("incnmaster")
setmfact = _action("setmfact")
movestack_action = _action("movestack")
zoom = _action("zoom", with_arg=False)
setlayout = _action("setlayout")
togglefloating = _action("togglefloating", with_arg=False)
focusmon = _action("focusmon")
tagmon = _action("tagmon")
setgaps = _action("setgaps")


def shcmd(cmd: str) -> list[str]:
    """A command run through the shell."""
    return ["/bin/sh", "-c", cmd]


def _default_colors() -> dict[str, tuple[str, str, str]]:
    # fg, bg, border
    return {
        "norm": ("#bbbbbb", "#222222", "#444444"),
        "sel": ("#222222", "#FFA500", "#FFA500"),
    }


def _default_rules() -> list[Rule]:
    return [
        Rule(wm_class="Gimp", tags=0, isfloating=True, monitor=-1),
        Rule(wm_class="Firefox", tags=1 << 8, isfloating=False, monitor=-1),
    ]


def _default_layouts() -> tuple[Layout, ...]:
    return (
        Layout("[]=", tile),
        Layout("[@]", spiral),
        Layout("><>", None),
        Layout("[M]", monocle),
        Layout("[\\]", dwindle),
    )


def _default_dmenucmd() -> list[str]:
    return [
        "dmenu_run", "-m", "0", "-fn", "monospace:size=10",
        "-nb", "#222222", "-nf", "#bbbbbb", "-sb", "#FFA500", "-sf", "#eeeeee",
    ]


def _tagkeys(keysym: str, index: int) -> list[Key]:
    mask = 1 << index
    return [
        Key(MODKEY, keysym, view, mask),
        Key(MODKEY | Mod.CONTROL, keysym, toggleview, mask),
        Key(MODKEY | Mod.SHIFT, keysym, tag, mask),
        Key(MODKEY | Mod.CONTROL | Mod.SHIFT, keysym, toggletag, mask),
    ]


def _default_keys(cfg: "Config") -> list[Key]:
    lay = cfg.layouts
    shift = MODKEY | Mod.SHIFT
    ctrl = MODKEY | Mod.CONTROL
    ctrlshift = MODKEY | Mod.CONTROL | Mod.SHIFT
    keys = [
        Key(MODKEY, "space", _spawn, cfg.roficmd),
        Key(MODKEY, "Return", _spawn, cfg.termcmd),
        Key(MODKEY, "b", _spawn, shcmd("brave-browser")),
        Key(MODKEY, "e", _spawn, shcmd("geany")),
        Key(MODKEY, "f", _spawn, shcmd("thunar")),
        Key(MODKEY, "g", _spawn, shcmd("steam")),
        Key(MODKEY, "m", _spawn, shcmd("thunderbird")),
        Key(MODKEY, "o", _spawn, shcmd("onlyoffice-desktopeditors")),
        Key(MODKEY, "p", _spawn, shcmd("copyq show")),
        Key(MODKEY, "Print", _spawn, shcmd("flameshot gui")),
        Key(shift, "b", togglebar, None),
        Key(MODKEY, "Down", focusstack, 1),
        Key(MODKEY, "Up", focusstack, -1),
        Key(ctrl, "Tab", incnmaster, 1),
        Key(ctrlshift, "Tab", incnmaster, -1),
        Key(MODKEY, "Left", setmfact, -0.05),
        Key(MODKEY, "Right", setmfact, 0.05),
        Key(shift, "Down", movestack_action, 1),
        Key(shift, "Up", movestack_action, -1),
        Key(shift, "Return", zoom, None),
        Key(MODKEY, "v", view, 0),
        Key(MODKEY, "x", _killclient, None),
        Key(MODKEY, "h", setlayout, lay[0]),
        Key(MODKEY, "j", setlayout, lay[1]),
        Key(MODKEY, "k", setlayout, lay[2]),
        Key(MODKEY, "r", setlayout, lay[3]),
        Key(shift, "r", setlayout, lay[4]),
        Key(MODKEY, "l", setlayout, None),
        Key(MODKEY, "Tab", togglefloating, None),
        Key(MODKEY, "0", view, ~0),
        Key(shift, "0", tag, ~0),
        Key(MODKEY, "comma", focusmon, -1),
        Key(MODKEY, "period", focusmon, 1),
        Key(shift, "comma", tagmon, -1),
        Key(shift, "period", tagmon, 1),
        Key(MODKEY, "minus", setgaps, -1),
        Key(MODKEY, "equal", setgaps, 1),
        Key(shift, "equal", setgaps, 0),
    ]
    for index in range(9):
        keys.extend(_tagkeys(str(index + 1), index))
    keys.extend(
        [
            Key(shift, "Escape", _spawn, shcmd("~/.config/scripts/rofi_power.sh")),
            Key(ctrlshift, "Escape", _quit, None),
            Key(MODKEY, "F12", _spawn, shcmd("pamixer -i 5")),
            Key(MODKEY, "F11", _spawn, shcmd("pamixer -d 5")),
            Key(MODKEY, "F10", _spawn, shcmd("pamixer -t")),
        ]
    )
    return keys


def _default_buttons(cfg: "Config") -> list[Button]:
    buttons = [
        Button(Click.LT_SYMBOL, 0, 1, setlayout, None),
        Button(Click.LT_SYMBOL, 0, 3, setlayout, cfg.layouts[2]),
        Button(Click.WIN_TITLE, 0, 2, zoom, None),
    ]
    buttons.extend(Button(Click.STATUS_TEXT, 0, b, _sigstatusbar, b) for b in range(1, 6))
    buttons.extend(
        [
            # Moving and resizing with the pointer need a live display grab.
            Button(Click.CLIENT_WIN, MODKEY, 1, None, None),
            Button(Click.CLIENT_WIN, MODKEY, 2, togglefloating, None),
            Button(Click.CLIENT_WIN, MODKEY, 3, None, None),
            Button(Click.TAG_BAR, 0, 1, view, 0),
            Button(Click.TAG_BAR, 0, 3, toggleview, 0),
            Button(Click.TAG_BAR, MODKEY, 1, tag, 0),
            Button(Click.TAG_BAR, MODKEY, 3, toggletag, 0),
        ]
    )
    return buttons


@dataclass
class Config:
    """All settings of the window manager."""

    borderpx: int = 3
    gappx: int = 10
    snap: int = 32
    systraypinning: int = 1
    systrayonleft: bool = False
    systrayspacing: int = 2
    systraypinningfailfirst: bool = True
    showsystray: bool = True
    vertpad: int = 10
    sidepad: int = 10
    showbar: bool = True
    topbar: bool = True
    fonts: tuple[str, ...] = ("JetBrainsMono Nerd Font:size=13",)
    dmenufont: str = "monospace:size=10"
    colors: dict[str, tuple[str, str, str]] = field(default_factory=_default_colors)
    tags: tuple[str, ...] = ("1", "2", "3", "4", "5", "6", "7", "8", "9")
    rules: list[Rule] = field(default_factory=_default_rules)
    mfact: float = 0.55
    nmaster: int = 1
    resizehints: bool = True
    lockfullscreen: bool = True
    layouts: tuple[Layout, ...] = field(default_factory=_default_layouts)
    statusbar: str = "dwmblocks"
    dmenucmd: list[str] = field(default_factory=_default_dmenucmd)
    roficmd: list[str] = field(default_factory=lambda: ["rofi", "-show", "drun"])
    termcmd: list[str] = field(default_factory=lambda: ["kitty"])
    keys: Optional[list[Key]] = None
    buttons: Optional[list[Button]] = None

    def __post_init__(self) -> None:
        if len(self.tags) > _MAX_TAGS:
            raise ValueError(f"at most {_MAX_TAGS} tags are supported")
        if not self.layouts:
            raise ValueError("at least one layout is required")
        if self.keys is None:
            self.keys = _default_keys(self)
        if self.buttons is None:
            self.buttons = _default_buttons(self)

    def tagmask(self) -> int:
        """Bit mask covering every configured tag."""
        return (1 << len(self.tags)) - 1


def default_config() -> Config:
    """The shipped configuration."""
    return Config()