"""Graphics card information read from the DRM class in sysfs."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path

from hwscan.pci import PCIMapper, load_mapper
from hwscan.sysfs import read_first_line

DEFAULT_DRM_ROOT = "/sys/class/drm"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class GPU:
    """One graphics card."""

    vendor: str = ""
    name: str = ""
    driver_version: str = ""
    memory_bytes: int = 0
    frequency_mhz: int = 0
    num_cores: int = 0
    id: int = 0
    vendor_id: str = ""
    device_id: str = ""


def read_drm(path: str | os.PathLike[str]) -> str:
    """Return the first line of a DRM attribute file, or "" if unreadable."""
    line = read_first_line(path)
    return "" if line is None else line


def _drm_int(path: Path) -> int | None:
    match = _LEADING_INT.match(read_drm(path))
    return int(match.group(1)) if match else None


def frequencies(drm_path: str | os.PathLike[str]) -> tuple[int, int, int]:
    """Return the (minimum, current, maximum) GPU frequencies in MHz.

    Any value that cannot be read marks the minimum as -1; an unreadable
    current or maximum value stays 0.
    """
    root = Path(drm_path)
    values = [0, 0, 0]
    for slot, name in enumerate(("gt_min_freq_mhz", "gt_cur_freq_mhz", "gt_max_freq_mhz")):
        number = _drm_int(root / name)
        if number is None:
            values[0] = -1
        else:
            values[slot] = number
    return values[0], values[1], values[2]


def get_all_gpus(
    drm_root: str | os.PathLike[str] = DEFAULT_DRM_ROOT,
    mapper: PCIMapper | None = None,
) -> list[GPU]:
    """Return the cards ``card0``, ``card1``, ... found under ``drm_root``.

    Up to three missing card numbers are skipped before the search stops.
    """
    pci = load_mapper() if mapper is None else mapper
    root = Path(drm_root)
    gpus: list[GPU] = []
    card_id = 0
    while True:
        path = root / f"card{card_id}"
        if not path.is_dir():
            if card_id > 2:
                break
            card_id += 1
            continue
        vendor_id = read_drm(path / "device" / "vendor")
        device_id = read_drm(path / "device" / "device")
        if not vendor_id or not device_id:
            card_id += 1
            continue
        vendor = pci[vendor_id]
        gpus.append(
            GPU(
                id=card_id,
                vendor_id=vendor_id,
                device_id=device_id,
                vendor=vendor.vendor_name,
                name=vendor[device_id].device_name,
                frequency_mhz=frequencies(path)[2],
            )
        )
        card_id += 1
    return gpus