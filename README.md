# tilestat

`tilestat` holds the pieces of a minimal tiling desktop in one Python
package:

- **Status components.** Small functions that each return one short string
  for a status line, or `None` when they have no value.
- **A status loop.** The `tilestat` command renders the components into one
  line once a second.
- **A window-management model.** Clients, monitors, tags, size hints, rules,
  key bindings and the tile, monocle, spiral and dwindle layouts. It computes
  window geometry and focus without a display server, so you can test it,
  simulate it or build on it.

## Installation

```
pip install tilestat
```

With the test dependencies:

```
pip install "tilestat[test]"
```

## Status line

Run the status loop:

```
tilestat
```

Options:

- `-s` writes each status line to standard output instead of the root
  window name.
- `-1` writes the status once and exits. It implies `-s`.
- `-v` prints `slstatus-1.1` to standard error and exits with status 1.

Without `-s`, the command needs `DISPLAY` to be set and sets the root window
name by running `xsetroot -name`; the name is cleared when the loop ends.
The loop stops on SIGINT or SIGTERM. SIGUSR1 makes it update at once.

### Components

Every component takes one argument (a path, format, interface or command,
or an unused value) and returns a string or `None`:

| Module | Functions |
| --- | --- |
| `tilestat.basic` | `cat`, `datetime`, `disk_free`, `disk_perc`, `disk_total`, `disk_used`, `entropy`, `hostname`, `kernel_release`, `load_avg`, `num_files`, `run_command`, `uptime`, `gid`, `uid`, `username`, `temp` |
| `tilestat.memory` | `ram_free`, `ram_perc`, `ram_total`, `ram_used`, `swap_free`, `swap_perc`, `swap_total`, `swap_used`, `parse_meminfo` |
| `tilestat.cpu` | `cpu_freq`, `cpu_perc`, class `CpuMeter` |
| `tilestat.power` | `battery_perc`, `battery_state`, `battery_remaining` |
| `tilestat.network` | `netspeed_rx`, `netspeed_tx`, `ipv4`, `ipv6`, `up`, class `NetSpeed` |

Memory, CPU, battery and network speed readings come from `/proc` and
`/sys`; addresses and link state come from `psutil`. `cpu_perc`,
`netspeed_rx` and `netspeed_tx` compare with the previous call, so the
first call returns `None`.

```python
from tilestat.basic import datetime, disk_free, hostname
from tilestat.memory import ram_used

print(datetime("%a %b %d %I:%M %p"))
print(disk_free("/home"))
print(ram_used(None))
print(hostname(None))
```

To build your own line, pass a list of `Component(func, fmt, arg)` entries
to `render_status`. A component returning `None` shows the unknown text;
rendering stops at the first piece that would not fit in `maxlen` bytes.
`default_components()` returns the list the command uses.

```python
from tilestat.status import default_components, render_status

print(render_status(default_components(), "n/a", 2048))
```

Sizes are formatted by `tilestat.util.fmt_human`:

```python
from tilestat.util import fmt_human

fmt_human(1536, 1024)   # "1.5 Ki"
fmt_human(2000, 1000)   # "2.0 k"
```

Any other base raises `ValueError`.

## Window-management model

`tilestat.manager.WindowManager` keeps monitors and clients and applies the
layouts and actions of the configuration:

```python
from tilestat.manager import WindowManager

wm = WindowManager()
wm.add_monitor(0, 0, 1920, 1080)
wm.manage(1, 0, 0, 800, 600, "term", "kitty", "kitty", None)
wm.manage(2, 0, 0, 800, 600, "editor", "Geany", "geany", None)
wm.focusstack(+1)
wm.setmfact(+0.05)
wm.zoom()
```

Its methods include `view`, `toggleview`, `tag`, `toggletag`, `focusmon`,
`tagmon`, `sendmon`, `incnmaster`, `setgaps`, `setlayout`,
`togglefloating`, `togglebar`, `setfullscreen`, `movestack` and
`keypress(keysym, state)`, which runs every matching key binding.

Other modules:

- `tilestat.model`: `Client`, `Monitor`, `Layout`, `Rule`, `SizeHints`,
  `Screen` and `apply_rules`.
- `tilestat.tiling`: `tile` and `monocle`; `tilestat.layouts`: `spiral`,
  `dwindle`, `fibonacci` and `movestack`.
- `tilestat.monitors`: monitor lookup by rectangle or direction, screen
  geometry updates and tray placement.
- `tilestat.bindings`: `Mod`, `Click`, `Key`, `Button`, mask cleaning and
  bar click classification.
- `tilestat.statusbar`: parsing of `^c#rrggbb^`-style status markup, status
  widths, and the signal of the block under a click.
- `tilestat.autostart`: finding and running the autostart scripts, looking
  up the status bar process, and `spawn`.
- `tilestat.wmconfig`: `Config` and `default_config()` with tags, rules,
  layouts, commands and key and button bindings.

## What it does not do

The window-management model does not connect to a display server. It does
not receive window events, draw a bar, host a system tray, or move and
resize windows with the pointer; the pointer bindings for those have no
action. There is no command that runs it as a window manager. The status
components have no keyboard indicator, keymap, volume or wifi readings.