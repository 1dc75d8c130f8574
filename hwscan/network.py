"""Network interface information from the interface table and sysfs."""

from __future__ import annotations

import os
import socket
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import psutil

from hwscan.sysfs import read_first_line

DEFAULT_NET_ROOT = "/sys/class/net"
UNKNOWN = "<unknown>"

Addresses = Mapping[str, Sequence[Any]]


@dataclass(frozen=True)
class Network:
    """One network interface."""

    interface_index: str = ""
    description: str = ""
    mac: str = ""
    ip4: str = ""
    ip6: str = ""


def interface_index(name: str) -> str:
    """Return the kernel index of an interface as text, or "<unknown>"."""
    try:
        index = socket.if_nametoindex(name)
    except (OSError, ValueError):
        return UNKNOWN
    return str(index) if index > 0 else UNKNOWN


def mac_address(name: str, net_root: str | os.PathLike[str] = DEFAULT_NET_ROOT) -> str:
    """Return the hardware address of an interface, or "<unknown>"."""
    value = read_first_line(Path(net_root) / name / "address")
    return value if value else UNKNOWN


def _addresses(addrs: Addresses | None) -> Addresses:
    return psutil.net_if_addrs() if addrs is None else addrs


def ipv4_address(name: str, addrs: Addresses | None = None) -> str:
    """Return the first IPv4 address of an interface, or "<unknown>"."""
    for entry in _addresses(addrs).get(name, ()):
        if entry.family == socket.AF_INET:
            return entry.address
    return UNKNOWN


def ipv6_address(name: str, addrs: Addresses | None = None) -> str:
    """Return the first link-local IPv6 address of an interface, or "<unknown>"."""
    for entry in _addresses(addrs).get(name, ()):
        if entry.family != socket.AF_INET6:
            continue
        address = entry.address.partition("%")[0]
        if address.startswith("fe80"):
            return address
    return UNKNOWN


def get_all_networks(net_root: str | os.PathLike[str] = DEFAULT_NET_ROOT) -> list[Network]:
    """Return every interface that has a link-layer address."""
    addrs = psutil.net_if_addrs()
    networks: list[Network] = []
    for name, entries in addrs.items():
        if not any(entry.family == psutil.AF_LINK for entry in entries):
            continue
        networks.append(
            Network(
                interface_index=interface_index(name),
                description=name,
                mac=mac_address(name, net_root),
                ip4=ipv4_address(name, addrs),
                ip6=ipv6_address(name, addrs),
            )
        )
    return networks