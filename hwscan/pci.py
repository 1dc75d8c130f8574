"""Lookup of PCI vendor and device names from a pci.ids database."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

from hwscan.strutil import split, strip

DEFAULT_PCI_IDS_PATHS = (
    "/usr/share/hwdata/pci.ids",
    "/usr/share/misc/pci.ids",
    "/usr/share/pci.ids",
)

_INVALID_ID = "0000"
_INVALID_NAME = "invalid"


def _without_hex_prefix(identifier: str) -> str:
    return identifier[2:] if identifier.startswith("0x") else identifier


def _split_entry(line: str) -> list[str]:
    return split(strip(line), "  ")


@dataclass
class PCIDevice:
    """A PCI device with its subsystems."""

    device_id: str
    device_name: str
    subsystems: dict[str, str] = field(default_factory=dict)


@dataclass
class PCIVendor:
    """A PCI vendor and the devices it makes."""

    vendor_id: str
    vendor_name: str
    devices: dict[str, PCIDevice] = field(default_factory=dict)
    _invalid_device: PCIDevice = field(
        default_factory=lambda: PCIDevice(_INVALID_ID, _INVALID_NAME),
        init=False,
        repr=False,
        compare=False,
    )

    def __getitem__(self, device_id: str) -> PCIDevice:
        """Return the device with this id, or a device named "invalid"."""
        return self.devices.get(_without_hex_prefix(device_id), self._invalid_device)


class PCIMapper:
    """Vendors and devices parsed from the text of a pci.ids file."""

    def __init__(self, text: str = "") -> None:
        self._vendors: dict[str, PCIVendor] = {}
        self._invalid_vendor = PCIVendor(_INVALID_ID, _INVALID_NAME)
        vendor: PCIVendor | None = None
        device: PCIDevice | None = None
        for line in text.split("\n"):
            if not line or line.startswith("#"):
                continue
            parts = _split_entry(line)
            if len(parts) != 2:
                continue
            key, name = parts
            if line.startswith("\t\t"):
                if device is not None:
                    device.subsystems.setdefault(key, name)
            elif line.startswith("\t"):
                if vendor is not None:
                    device = vendor.devices.setdefault(key, PCIDevice(key, name))
            else:
                vendor = self._vendors.setdefault(key, PCIVendor(key, name))

    def vendor_from_id(self, vendor_id: str) -> PCIVendor:
        """Return the vendor with this id, or a vendor named "invalid"."""
        return self._vendors.get(_without_hex_prefix(vendor_id), self._invalid_vendor)

    def __getitem__(self, vendor_id: str) -> PCIVendor:
        return self.vendor_from_id(vendor_id)

    def __len__(self) -> int:
        return len(self._vendors)


@lru_cache(maxsize=None)
def _load(path: str | None) -> PCIMapper:
    candidates = (path,) if path is not None else DEFAULT_PCI_IDS_PATHS
    for candidate in candidates:
        try:
            text = Path(candidate).read_text(encoding="utf-8", errors="replace")
        except OSError:
            continue
        return PCIMapper(text)
    return PCIMapper()


def load_mapper(path: str | os.PathLike[str] | None = None) -> PCIMapper:
    """Load and cache a mapper from ``path`` or the usual pci.ids locations.

    A database that cannot be read gives an empty mapper.
    """
    return _load(None if path is None else os.fspath(path))