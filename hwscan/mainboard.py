"""Main board information read from the DMI tables in sysfs."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from hwscan.sysfs import read_first_line

DEFAULT_DMI_ROOTS = ("/sys/devices/virtual/dmi/", "/sys/class/dmi/")
UNKNOWN = "<unknown>"


@dataclass(frozen=True)
class MainBoard:
    """The main board of a machine."""

    vendor: str = UNKNOWN
    name: str = UNKNOWN
    version: str = UNKNOWN
    serial_number: str = UNKNOWN


def read_dmi(
    name: str,
    roots: Iterable[str | os.PathLike[str]] = DEFAULT_DMI_ROOTS,
) -> str:
    """Return the first non-empty value of a DMI attribute under the given roots."""
    for root in roots:
        value = read_first_line(Path(root) / "id" / name)
        if value:
            return value
    return UNKNOWN


def detect_mainboard(
    roots: Iterable[str | os.PathLike[str]] = DEFAULT_DMI_ROOTS,
) -> MainBoard:
    """Read the vendor, name, version and serial number of the main board."""
    candidates = tuple(roots)
    return MainBoard(
        vendor=read_dmi("board_vendor", candidates),
        name=read_dmi("board_name", candidates),
        version=read_dmi("board_version", candidates),
        serial_number=read_dmi("board_serial", candidates),
    )