import platform
import socket

import pytest

from tilestat import basic, memory, status


def test_render_status_joins_and_substitutes_unknown():
    components = [
        status.Component(lambda arg: arg, "[%s]", "x"),
        status.Component(lambda arg: None, "%s", None),
    ]
    assert status.render_status(components) == "[x]n/a"


def test_render_status_custom_unknown():
    components = [status.Component(lambda arg: None, "<%s>", None)]
    assert status.render_status(components, unknown="?") == "<?>"


def test_render_status_empty_string_is_not_unknown():
    components = [status.Component(lambda arg: "", "a%sb", None)]
    assert status.render_status(components) == "ab"


def test_render_status_stops_when_output_does_not_fit():
    components = [
        status.Component(lambda arg: arg, "%s", "abcd"),
        status.Component(lambda arg: arg, "%s", "e"),
        status.Component(lambda arg: arg, "%s", ""),
    ]
    assert status.render_status(components, maxlen=5) == "abcd"


def test_render_status_first_piece_too_long():
    components = [status.Component(lambda arg: arg, "%s", "abcdef")]
    assert status.render_status(components, maxlen=4) == ""


def test_render_status_passes_argument():
    seen = []
    components = [status.Component(lambda arg: seen.append(arg) or "ok", "%s", "/home")]
    assert status.render_status(components) == "ok"
    assert seen == ["/home"]


def test_default_components_match_configuration():
    comps = status.default_components()
    assert [c.func for c in comps] == [
        basic.run_command,
        memory.ram_used,
        basic.disk_free,
        basic.datetime,
        basic.hostname,
        basic.kernel_release,
    ]
    assert [c.arg for c in comps] == [
        "pamixer --get-volume-human",
        None,
        "/home",
        "%a %b %d %I:%M %p",
        None,
        None,
    ]
    assert all(c.fmt.endswith(" | ") and "%s" in c.fmt for c in comps)


def test_main_once_prints_single_line(capsys):
    assert status.main(["-1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 1
    assert socket.gethostname() in lines[0]
    assert platform.release() in lines[0]
    assert lines[0].endswith(" | ")


def test_main_combined_flags(capsys):
    assert status.main(["-s1"]) == 0
    assert len(capsys.readouterr().out.splitlines()) == 1


def test_main_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        status.main(["-v"])
    assert excinfo.value.code == 1
    assert "slstatus-1.1" in capsys.readouterr().err


@pytest.mark.parametrize("argv", [["-x"], ["extra"], ["--", "-s"], ["-"], ["-s", "more"]])
def test_main_usage_errors(argv, capsys):
    with pytest.raises(SystemExit) as excinfo:
        status.main(argv)
    assert excinfo.value.code == 1
    assert "usage:" in capsys.readouterr().err


def test_main_without_display_fails(monkeypatch, capsys):
    monkeypatch.delenv("DISPLAY", raising=False)
    with pytest.raises(SystemExit) as excinfo:
        status.main([])
    assert excinfo.value.code == 1
    assert "XOpenDisplay" in capsys.readouterr().err