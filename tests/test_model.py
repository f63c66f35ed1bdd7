import pytest

from tilestat.model import (
    FLOATING,
    Client,
    Layout,
    Monitor,
    Rule,
    Screen,
    SizeHints,
    apply_rules,
)


def make_monitor(**kw):
    screen = kw.pop("screen", Screen(width=1000, height=800, bar_height=20))
    return Monitor(mx=0, my=0, mw=1000, mh=800, wx=0, wy=0, ww=1000, wh=800, screen=screen, **kw)


def make_client(m, **kw):
    kw.setdefault("tags", m.tagset[m.seltags])
    return Client(mon=m, **kw)


def test_visibility_follows_tagset():
    m = make_monitor(tagset=[2, 1])
    c = make_client(m, tags=2)
    assert c.is_visible() is True
    m.seltags = 1
    assert c.is_visible() is False


def test_client_without_monitor_is_hidden():
    assert Client(tags=1).is_visible() is False


def test_outer_size_includes_borders():
    m = make_monitor()
    c = make_client(m, w=100, h=50, bw=3)
    assert c.width() == c.w + 2 * c.bw
    assert c.height() == c.h + 2 * c.bw


def test_attach_orders():
    m = make_monitor()
    a, b, d = (make_client(m, win=i) for i in range(3))
    m.attach_bottom(a)
    m.attach_bottom(b)
    m.attach(d)
    assert m.clients == [d, a, b]
    m.detach(a)
    assert m.clients == [d, b]


def test_detach_stack_reselects_visible():
    m = make_monitor()
    hidden = make_client(m, tags=4)
    shown = make_client(m)
    sel = make_client(m)
    for c in (shown, hidden, sel):
        m.attach_stack(c)
    m.sel = sel
    m.detach_stack(sel)
    assert m.sel is shown
    assert sel not in m.stack


def test_tiled_and_visible():
    m = make_monitor()
    a = make_client(m)
    f = make_client(m, isfloating=True)
    h = make_client(m, tags=8)
    for c in (a, f, h):
        m.attach_bottom(c)
    assert m.tiled() == [a]
    assert m.visible() == [a, f]


def test_ltsymbol_defaults_to_first_layout():
    m = Monitor(lt=[Layout("[]=", None), FLOATING])
    assert m.ltsymbol == "[]="


def test_update_size_hints_min_as_base_and_fixed():
    m = make_monitor()
    c = make_client(m)
    c.update_size_hints(SizeHints(min_size=(40, 30), max_size=(40, 30)))
    assert (c.basew, c.baseh) == (40, 30)
    assert (c.minw, c.minh) == (40, 30)
    assert c.isfixed is True
    assert c.hintsvalid is True


def test_update_size_hints_none_clears():
    m = make_monitor()
    c = make_client(m, basew=5, incw=3, maxw=9)
    c.update_size_hints(None)
    assert (c.basew, c.incw, c.maxw, c.minw) == (0, 0, 0, 0)
    assert c.isfixed is False


def test_resize_increment_applied():
    m = make_monitor()
    c = make_client(m, x=10, y=10, w=50, h=50)
    c.update_size_hints(SizeHints(resize_inc=(10, 10)))
    x, y, w, h, changed = c.apply_size_hints(10, 10, 105, 107, False)
    assert w % 10 == 0 and 95 < w <= 105
    assert h % 10 == 0 and 97 < h <= 107
    assert changed is True


def test_increment_relative_to_base():
    m = make_monitor()
    c = make_client(m)
    c.update_size_hints(SizeHints(base_size=(5, 5), min_size=(1, 1), resize_inc=(10, 10)))
    _, _, w, h, _ = c.apply_size_hints(0, 0, 105, 107, False)
    assert (w - 5) % 10 == 0
    assert (h - 5) % 10 == 0


def test_max_and_min_size_clamp():
    m = make_monitor()
    c = make_client(m)
    c.update_size_hints(SizeHints(min_size=(60, 70), max_size=(300, 200)))
    _, _, w, h, _ = c.apply_size_hints(0, 0, 500, 500, False)
    assert (w, h) == (300, 200)
    _, _, w, h, _ = c.apply_size_hints(0, 0, 30, 30, False)
    assert (w, h) == (60, 70)


def test_square_aspect():
    m = make_monitor()
    c = make_client(m)
    c.update_size_hints(SizeHints(min_aspect=(1, 1), max_aspect=(1, 1)))
    _, _, w, h, _ = c.apply_size_hints(0, 0, 400, 200, False)
    assert w == h


def test_bar_height_is_minimum():
    m = make_monitor()
    c = make_client(m)
    _, _, w, h, _ = c.apply_size_hints(0, 0, 5, 5, False)
    assert w == m.screen.bar_height
    assert h == m.screen.bar_height


def test_interactive_offscreen_is_pulled_back():
    m = make_monitor()
    c = make_client(m, w=100, h=100, bw=2)
    x, y, _, _, _ = c.apply_size_hints(5000, -5000, 100, 100, True)
    assert x == m.screen.width - c.width()
    assert y == 0


def test_noninteractive_kept_in_window_area():
    m = make_monitor()
    c = make_client(m, w=100, h=100, bw=2)
    x, y, _, _, _ = c.apply_size_hints(m.wx + m.ww, -500, 100, 100, False)
    assert x == m.wx + m.ww - c.width()
    assert y == m.wy


def test_hints_ignored_when_tiled_without_resizehints():
    screen = Screen(width=1000, height=800, bar_height=20, resizehints=False)
    m = make_monitor(screen=screen, lt=[Layout("[]=", lambda mon: None), FLOATING])
    c = make_client(m)
    c.update_size_hints(SizeHints(resize_inc=(10, 10)))
    _, _, w, _, _ = c.apply_size_hints(0, 0, 105, 105, False)
    assert w == 105


def test_resize_records_old_geometry():
    m = make_monitor()
    c = make_client(m, x=1, y=2, w=100, h=110)
    assert c.resize(30, 40, 200, 210, False) is True
    assert (c.x, c.y, c.w, c.h) == (30, 40, 200, 210)
    assert (c.oldx, c.oldy, c.oldw, c.oldh) == (1, 2, 100, 110)


def test_resize_noop_when_unchanged():
    m = make_monitor()
    c = make_client(m, x=30, y=40, w=200, h=210)
    assert c.resize(30, 40, 200, 210, False) is False
    assert (c.oldx, c.oldw) == (0, 0)


def test_apply_size_hints_requires_monitor():
    with pytest.raises(ValueError):
        Client().apply_size_hints(0, 0, 10, 10, False)


def test_update_bar_pos_top():
    screen = Screen(width=1000, height=800, bar_height=20, vertpad=10)
    m = make_monitor(screen=screen)
    m.update_bar_pos()
    assert m.by == m.my
    assert m.wy == m.my + screen.bar_height + screen.vp
    assert m.wh == m.mh - screen.vertpad - screen.bar_height


def test_update_bar_pos_bottom_and_hidden():
    screen = Screen(width=1000, height=800, bar_height=20, vertpad=10)
    m = make_monitor(screen=screen, topbar=False)
    m.update_bar_pos()
    assert m.wy == m.my
    assert m.by == m.wy + m.wh + screen.vertpad
    m.showbar = False
    m.update_bar_pos()
    assert m.wh == m.mh
    assert m.by == -screen.bar_height - screen.vp


def test_apply_rules_matching_class():
    m0 = make_monitor(num=0)
    m1 = make_monitor(num=1)
    c = make_client(m0, name="page")
    rules = [Rule(wm_class="Firefox", tags=1 << 8, monitor=1)]
    apply_rules(c, rules, [m0, m1], (1 << 9) - 1, "Firefox", "navigator")
    assert c.tags == 1 << 8
    assert c.mon is m1
    assert c.isfloating is False


def test_apply_rules_no_match_uses_view():
    m = make_monitor(tagset=[4, 1])
    c = make_client(m, tags=0)
    rules = [Rule(wm_class="Gimp", isfloating=True)]
    apply_rules(c, rules, [m], (1 << 9) - 1, "Other", "other")
    assert c.tags == 4
    assert c.isfloating is False


def test_apply_rules_missing_class_is_broken():
    m = make_monitor()
    c = make_client(m)
    apply_rules(c, [Rule(wm_class="broken", isfloating=True)], [m], 511, None, None)
    assert c.isfloating is True