"""Network components: transfer speeds, addresses and link state."""

from __future__ import annotations

import os
import socket

import psutil

from .util import fmt_human, read_uint, warn

NET_ROOT = "/sys/class/net"
DEFAULT_INTERVAL_MS = 1000


class NetSpeed:
    """Receive and transmit speeds between successive calls."""

    def __init__(self, interval: int = DEFAULT_INTERVAL_MS, root: str = NET_ROOT) -> None:
        self.interval = interval
        self.root = root
        self._rx_bytes = 0
        self._tx_bytes = 0

    def _path(self, interface: str, name: str) -> str:
        return os.path.join(self.root, interface, "statistics", name)

    def _speed(self, old: int, new: int) -> str:
        return fmt_human((new - old) * 1000 // self.interval, 1024)

    def rx(self, interface: str) -> str | None:
        """Receive speed per second since the previous call, or None."""
        old = self._rx_bytes
        value = read_uint(self._path(interface, "rx_bytes"))
        if value is None:
            return None
        self._rx_bytes = value
        if old == 0:
            return None
        return self._speed(old, value)

    def tx(self, interface: str) -> str | None:
        """Transmit speed per second since the previous call, or None."""
        old = self._tx_bytes
        value = read_uint(self._path(interface, "tx_bytes"))
        if value is None:
            return None
        self._tx_bytes = value
        if old == 0:
            return None
        return self._speed(old, value)


_default_speed = NetSpeed()


def netspeed_rx(interface: str) -> str | None:
    """Receive speed of ``interface``."""
    return _default_speed.rx(interface)


def netspeed_tx(interface: str) -> str | None:
    """Transmit speed of ``interface``."""
    return _default_speed.tx(interface)


def _addresses(interface: str) -> list | None:
    try:
        table = psutil.net_if_addrs()
    except OSError:
        warn("getifaddrs:")
        return None
    return table.get(interface)


def _ip(interface: str, family: int) -> str | None:
    for addr in _addresses(interface) or ():
        if addr.family == family:
            return addr.address
    return None


def ipv4(interface: str) -> str | None:
    """IPv4 address of ``interface``."""
    return _ip(interface, socket.AF_INET)


def ipv6(interface: str) -> str | None:
    """IPv6 address of ``interface``."""
    return _ip(interface, socket.AF_INET6)


def up(interface: str) -> str | None:
    """'up' or 'down' for an interface that has an address, else None."""
    if not _addresses(interface):
        return None
    try:
        stats = psutil.net_if_stats().get(interface)
    except OSError:
        warn("getifaddrs:")
        return None
    if stats is None:
        return None
    return "up" if stats.isup else "down"