import pytest

from tilestat.model import Client, Monitor, Screen
from tilestat.monitors import (
    dirtomon,
    intersect,
    recttomon,
    systraytomon,
    unique_geometries,
    update_geometry,
)


def _mon(x, y, w, h, num=0):
    return Monitor(num=num, mx=x, my=y, mw=w, mh=h, wx=x, wy=y, ww=w, wh=h)


def test_intersect_inside_is_rect_area():
    m = _mon(0, 0, 100, 100)
    assert intersect(10, 10, 20, 30, m) == 20 * 30


def test_intersect_disjoint_is_zero():
    m = _mon(0, 0, 100, 100)
    assert intersect(200, 200, 10, 10, m) == 0


def test_intersect_symmetric_clip():
    m = _mon(0, 0, 100, 100)
    assert intersect(-10, 0, 20, 100, m) == intersect(90, 0, 20, 100, m)


def test_recttomon_picks_largest_overlap():
    left = _mon(0, 0, 100, 100)
    right = _mon(100, 0, 100, 100, num=1)
    assert recttomon([left, right], left, 150, 10, 10, 10) is right
    assert recttomon([left, right], right, 10, 10, 10, 10) is left


def test_recttomon_falls_back_to_selected():
    left = _mon(0, 0, 100, 100)
    right = _mon(100, 0, 100, 100, num=1)
    assert recttomon([left, right], right, 1000, 1000, 5, 5) is right


def test_dirtomon_wraps_both_ways():
    mons = [_mon(0, 0, 10, 10, i) for i in range(3)]
    assert dirtomon(mons, mons[2], 1) is mons[0]
    assert dirtomon(mons, mons[0], 1) is mons[1]
    assert dirtomon(mons, mons[0], -1) is mons[2]
    assert dirtomon(mons, mons[1], -1) is mons[0]


def test_dirtomon_single_monitor_returns_itself():
    only = _mon(0, 0, 10, 10)
    assert dirtomon([only], only, 1) is only
    assert dirtomon([only], only, -1) is only


def test_unique_geometries_keeps_order():
    a = (0, 0, 100, 100)
    b = (100, 0, 100, 100)
    assert unique_geometries([a, b, a, b]) == [a, b]


def test_update_geometry_default_single_monitor():
    screen = Screen(width=800, height=600, bar_height=20)
    mons = []
    assert update_geometry(mons, None, screen) is True
    assert len(mons) == 1
    assert (mons[0].mw, mons[0].mh) == (screen.width, screen.height)
    assert mons[0].wy + mons[0].wh <= mons[0].my + mons[0].mh
    assert update_geometry(mons, None, screen) is False


def test_update_geometry_adds_monitors_per_unique_screen():
    screen = Screen(width=200, height=100, bar_height=10)
    a = (0, 0, 100, 100)
    b = (100, 0, 100, 100)
    mons = []
    assert update_geometry(mons, [a, b, a], screen) is True
    assert [m.num for m in mons] == [0, 1]
    assert [(m.mx, m.my, m.mw, m.mh) for m in mons] == [a, b]
    assert update_geometry(mons, [a, b], screen) is False


def test_update_geometry_moves_clients_of_removed_monitor():
    screen = Screen(width=200, height=100, bar_height=10)
    a = (0, 0, 100, 100)
    b = (100, 0, 100, 100)
    mons = []
    update_geometry(mons, [a, b], screen)
    gone = mons[1]
    c = Client(win=7, mon=gone, tags=1)
    gone.attach_bottom(c)
    gone.attach_stack(c)
    gone.sel = c
    assert update_geometry(mons, [a], screen) is True
    assert mons == [mons[0]] and len(mons) == 1
    assert c.mon is mons[0]
    assert c in mons[0].clients and c in mons[0].stack
    assert gone.clients == [] and gone.stack == []


def test_systraytomon_follows_selection_without_pinning():
    mons = [_mon(0, 0, 10, 10, i) for i in range(2)]
    assert systraytomon(mons, mons[1], None, 0, True) is mons[1]
    assert systraytomon(mons, mons[1], mons[1], 0, True) is mons[1]
    assert systraytomon(mons, mons[1], mons[0], 0, True) is None


def test_systraytomon_pinned():
    mons = [_mon(0, 0, 10, 10, i) for i in range(3)]
    assert systraytomon(mons, mons[0], None, 2, True) is mons[1]
    assert systraytomon(mons, mons[0], None, 5, True) is mons[0]
    assert systraytomon(mons, mons[0], None, 5, False) is mons[2]


def test_dirtomon_empty_raises():
    with pytest.raises(ValueError):
        dirtomon([], None, 1)