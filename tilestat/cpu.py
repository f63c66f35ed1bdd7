"""CPU frequency and usage components."""

from __future__ import annotations

from .util import fmt_human, read_uint, warn

CPU_FREQ = "/sys/devices/system/cpu/cpu0/cpufreq/scaling_cur_freq"
PROC_STAT = "/proc/stat"


def cpu_freq(unused: object = None, path: str = CPU_FREQ) -> str | None:
    """Current frequency of the first CPU, read in kHz."""
    freq = read_uint(path)
    if freq is None:
        return None
    return fmt_human(freq * 1000, 1000)


class CpuMeter:
    """CPU usage between successive samples of the aggregate stat line."""

    def __init__(self, path: str = PROC_STAT) -> None:
        self.path = path
        self._last = [0.0] * 7

    def _read(self) -> list[float] | None:
        try:
            with open(self.path, encoding="utf-8", errors="replace") as fp:
                tokens = fp.readline().split()
        except OSError:
            warn(f"fopen '{self.path}':")
            return None
        try:
            values = [float(token) for token in tokens[1:8]]
        except ValueError:
            return None
        return values if len(values) == 7 else None

    def sample(self, unused: object = None) -> str | None:
        """Percentage of busy time since the previous sample, or None."""
        previous = self._last
        current = self._read()
        if current is None:
            return None
        self._last = current
        if previous[0] == 0:
            return None

        total = sum(previous) - sum(current)
        if total == 0:
            return None
        busy = [0, 1, 2, 5, 6]
        busy_diff = sum(previous[i] for i in busy) - sum(current[i] for i in busy)
        return str(int(100 * busy_diff / total))


_default_meter = CpuMeter()


def cpu_perc(unused: object = None) -> str | None:
    """CPU usage in percent since the previous call."""
    return _default_meter.sample(unused)