import socket
from collections import namedtuple
from unittest import mock

import psutil

from hwscan.network import (
    UNKNOWN,
    Network,
    get_all_networks,
    interface_index,
    ipv4_address,
    ipv6_address,
    mac_address,
)

Addr = namedtuple("Addr", "family address")

ADDRS = {
    "eth-test": [
        Addr(psutil.AF_LINK, "02:00:00:00:00:01"),
        Addr(socket.AF_INET, "192.0.2.1"),
        Addr(socket.AF_INET, "192.0.2.2"),
        Addr(socket.AF_INET6, "2001:db8::1"),
        Addr(socket.AF_INET6, "fe80::1%eth-test"),
    ],
    "nolink": [Addr(socket.AF_INET, "198.51.100.7")],
}


def test_interface_index_unknown_name():
    assert interface_index("no-such-interface-xyz") == UNKNOWN


def test_mac_address_read_from_sysfs(tmp_path):
    (tmp_path / "eth-test").mkdir()
    (tmp_path / "eth-test" / "address").write_text("02:00:00:00:00:01\n")
    assert mac_address("eth-test", tmp_path) == "02:00:00:00:00:01"


def test_mac_address_missing_or_empty(tmp_path):
    (tmp_path / "empty").mkdir()
    (tmp_path / "empty" / "address").write_text("")
    assert mac_address("empty", tmp_path) == UNKNOWN
    assert mac_address("absent", tmp_path) == UNKNOWN


def test_ipv4_first_address():
    assert ipv4_address("eth-test", ADDRS) == "192.0.2.1"
    assert ipv4_address("nolink", ADDRS) == "198.51.100.7"
    assert ipv4_address("absent", ADDRS) == UNKNOWN


def test_ipv6_only_link_local():
    assert ipv6_address("eth-test", ADDRS) == "fe80::1"
    assert ipv6_address("nolink", ADDRS) == UNKNOWN


def test_ipv6_without_link_local():
    addrs = {"x": [Addr(socket.AF_INET6, "2001:db8::5")]}
    assert ipv6_address("x", addrs) == UNKNOWN


def test_get_all_networks_only_link_interfaces(tmp_path):
    (tmp_path / "eth-test").mkdir()
    (tmp_path / "eth-test" / "address").write_text("02:00:00:00:00:01\n")
    with mock.patch("psutil.net_if_addrs", return_value=ADDRS):
        networks = get_all_networks(tmp_path)
    assert networks == [
        Network(
            interface_index=UNKNOWN,
            description="eth-test",
            mac="02:00:00:00:00:01",
            ip4="192.0.2.1",
            ip6="fe80::1",
        )
    ]