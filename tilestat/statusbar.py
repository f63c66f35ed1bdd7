"""Status text handling for the bar: inline markup, widths and click signals."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Callable, Optional

TextWidth = Callable[[str], int]

_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_CONTROL = re.compile(r"[\x00-\x1f]")
_COLOR_LEN = 7


def _atoi(text: str, pos: int) -> int:
    """Leading integer of ``text[pos:]``, or 0 when there is none."""
    if pos >= len(text):
        return 0
    match = _ATOI.match(text, pos)
    return int(match.group(1)) if match else 0


@dataclass(frozen=True)
class StatusSegment:
    """One element of marked-up status text."""

    class Kind(enum.Enum):
        TEXT = "text"
        FG = "fg"
        BG = "bg"
        RESET = "reset"
        RECT = "rect"
        FORWARD = "forward"

    kind: "StatusSegment.Kind"
    text: str = ""
    color: str = ""
    rect: Optional[tuple[int, int, int, int]] = None
    offset: int = 0


def parse_status(text: str) -> list[StatusSegment]:
    """Split status text into plain text and ``^...^`` drawing commands.

    Inside a command, ``c`` and ``b`` take a seven-character colour, ``d``
    restores the default colours, ``r`` takes ``x,y,w,h`` of a rectangle and
    ``f`` moves forward by a number of pixels. Empty text pieces are dropped.
    """
    kind = StatusSegment.Kind
    segments: list[StatusSegment] = []
    n = len(text)
    start = 0
    i = 0
    while i < n:
        if text[i] != "^":
            i += 1
            continue
        if i > start:
            segments.append(StatusSegment(kind.TEXT, text=text[start:i]))
        i += 1
        while i < n and text[i] != "^":
            ch = text[i]
            if ch in "cb":
                color = text[i + 1 : i + 1 + _COLOR_LEN]
                segments.append(StatusSegment(kind.FG if ch == "c" else kind.BG, color=color))
                i += _COLOR_LEN
            elif ch == "d":
                segments.append(StatusSegment(kind.RESET))
            elif ch == "r":
                i += 1
                values = [_atoi(text, i)]
                for _ in range(3):
                    i += 1
                    while i < n and text[i] != ",":
                        i += 1
                    i += 1
                    values.append(_atoi(text, i))
                segments.append(StatusSegment(kind.RECT, rect=tuple(values)))  # type: ignore[arg-type]
            elif ch == "f":
                i += 1
                segments.append(StatusSegment(kind.FORWARD, offset=_atoi(text, i)))
            i += 1
        start = i + 1
        i += 1
    if start < n:
        segments.append(StatusSegment(kind.TEXT, text=text[start:]))
    return segments


def markup_width(text: str, textw: TextWidth, lrpad: int) -> int:
    """Width of marked-up status text including padding.

    ``textw`` gives the padded width of a string. Only a forward command that
    opens a ``^...^`` block adds to the width; an unterminated block adds nothing.
    """
    w = 0
    start = 0
    in_code = False
    n = len(text)
    i = 0
    while i < n:
        if text[i] == "^":
            if not in_code:
                in_code = True
                w += textw(text[start:i]) - lrpad
                i += 1
                if i < n and text[i] == "f":
                    i += 1
                    w += _atoi(text, i)
                if i >= n:
                    break
            else:
                in_code = False
                start = i + 1
        i += 1
    if not in_code:
        w += textw(text[start:]) - lrpad
    return w + lrpad


def status_width(text: str, textw: TextWidth, lrpad: int) -> int:
    """Width reserved for status text whose blocks are split by control bytes."""
    return sum(textw(part) - lrpad for part in _CONTROL.split(text)) + 2


def status_signal_at(
    text: str, click_x: int, start_x: int, textw: TextWidth, lrpad: int
) -> int:
    """Signal number of the status block under ``click_x``, or 0.

    Blocks are preceded by a control byte giving their signal; ``start_x`` is
    where the status text begins on the bar.
    """
    sig = 0
    x = start_x
    seg_start = 0
    for pos, ch in enumerate(text):
        if x > click_x:
            break
        code = ord(ch)
        if code < 0x20:
            x += textw(text[seg_start:pos]) - lrpad
            seg_start = pos + 1
            if x >= click_x:
                break
            sig = 0 if code == sig else code
    return sig