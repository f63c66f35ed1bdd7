"""Key and button bindings: modifier masks, clicks and matching of input events."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional, Sequence


class Mod(enum.IntFlag):
    """X modifier masks."""

    SHIFT = 1 << 0
    LOCK = 1 << 1
    CONTROL = 1 << 2
    MOD1 = 1 << 3
    MOD2 = 1 << 4
    MOD3 = 1 << 5
    MOD4 = 1 << 6
    MOD5 = 1 << 7


_RELEVANT = (
    Mod.SHIFT | Mod.CONTROL | Mod.MOD1 | Mod.MOD2 | Mod.MOD3 | Mod.MOD4 | Mod.MOD5
)


class Click(enum.Enum):
    """Where a mouse button was pressed."""

    TAG_BAR = enum.auto()
    LT_SYMBOL = enum.auto()
    STATUS_TEXT = enum.auto()
    WIN_TITLE = enum.auto()
    CLIENT_WIN = enum.auto()
    ROOT_WIN = enum.auto()


@dataclass(frozen=True)
class Key:
    """A key binding: modifiers, key symbol, action and its argument."""

    mod: int
    keysym: Any
    func: Optional[Callable[..., Any]]
    arg: Any = None


@dataclass(frozen=True)
class Button:
    """A mouse binding: click area, modifiers, button number, action and argument."""

    click: Click
    mask: int
    button: int
    func: Optional[Callable[..., Any]]
    arg: Any = None


def clean_mask(mask: int, numlockmask: int) -> int:
    """Drop Lock and NumLock and any bits that are not real modifiers."""
    return int(mask) & ~(int(numlockmask) | int(Mod.LOCK)) & int(_RELEVANT)


def matching_keys(
    keys: Iterable[Key], keysym: Any, state: int, numlockmask: int
) -> list[Key]:
    """Bindings with an action that a key press of ``keysym`` in ``state`` triggers."""
    wanted = clean_mask(state, numlockmask)
    return [
        k
        for k in keys
        if k.keysym == keysym
        and clean_mask(k.mod, numlockmask) == wanted
        and k.func is not None
    ]


def matching_buttons(
    buttons: Iterable[Button],
    click: Click,
    button: int,
    state: int,
    numlockmask: int,
) -> list[Button]:
    """Bindings with an action that a press of ``button`` on ``click`` triggers."""
    wanted = clean_mask(state, numlockmask)
    return [
        b
        for b in buttons
        if b.click == click
        and b.func is not None
        and b.button == button
        and clean_mask(b.mask, numlockmask) == wanted
    ]


def bar_click(
    x: int,
    tags: Sequence[str],
    textw: Callable[[str], int],
    ltsymbol: str,
    ww: int,
    statusw: int,
    systray_width: int,
) -> tuple[Click, Optional[int]]:
    """Classify a press at ``x`` on the bar.

    Returns the click area and, for the tag bar, the bit mask of the tag hit.
    """
    i = 0
    pos = 0
    if tags:
        while True:
            pos += textw(tags[i])
            if x >= pos:
                i += 1
                if i < len(tags):
                    continue
            break
    if i < len(tags):
        return Click.TAG_BAR, 1 << i
    if x < pos + textw(ltsymbol):
        return Click.LT_SYMBOL, None
    if x > ww - statusw - systray_width:
        return Click.STATUS_TEXT, None
    return Click.WIN_TITLE, None