"""Disk information read from the block class in sysfs."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass

from hwscan.strutil import strip
from hwscan.sysfs import directory_entries, exists, read_first_line

# Linux counts sizes in 512-byte sectors whatever the device's block size.
BLOCK_SIZE = 512
DEFAULT_BLOCK_PATH = "/sys/class/block/"
UNKNOWN = "<unknown>"

_PARTITION = re.compile(r"(sd[a-z]|nvme\d+n\d+)p?\d+$")


@dataclass
class Disk:
    """One whole disk."""

    vendor: str = ""
    model: str = ""
    serial_number: str = ""
    size_bytes: int = -1
    id: int = -1


def is_partition(path: str) -> bool:
    """Return whether a block device path names a partition rather than a disk."""
    return _PARTITION.search(path) is not None


def _read_stripped(path: str) -> str:
    line = read_first_line(path)
    return UNKNOWN if line is None else strip(line)


def disk_vendor(path: str) -> str:
    """Return the vendor of a disk; NVMe vendors are read from the nvme class."""
    vendor_path = path
    nvme_pos = path.find("nvme")
    if nvme_pos != -1:
        nvme_name = path[nvme_pos : nvme_pos + 5]
        end = nvme_pos - 6
        prefix = path[:end] if end >= 0 else path
        vendor_path = prefix + "nvme/" + nvme_name
    return _read_stripped(vendor_path + "/device/vendor")


def disk_model(path: str) -> str:
    """Return the model of a disk."""
    return _read_stripped(path + "/device/model")


def disk_serial_number(path: str) -> str:
    """Return the serial number of a disk."""
    return _read_stripped(path + "/device/serial")


def disk_size_bytes(path: str) -> int:
    """Return the size of a disk in bytes, or -1 if unknown."""
    try:
        with open(path + "/size", encoding="utf-8", errors="replace") as handle:
            tokens = handle.read().split()
    except OSError:
        return -1
    if not tokens:
        return -1
    try:
        return int(tokens[0]) * BLOCK_SIZE
    except ValueError:
        return -1


def get_all_disks(base_path: str | os.PathLike[str] = DEFAULT_BLOCK_PATH) -> list[Disk]:
    """Return the disks under ``base_path``, skipping partitions and unidentified devices."""
    base = os.fspath(base_path)
    if not base.endswith("/"):
        base += "/"
    disks: list[Disk] = []
    for entry in directory_entries(base):
        path = base + entry
        if not exists(path) or is_partition(path):
            continue
        disk = Disk(
            vendor=disk_vendor(path),
            model=disk_model(path),
            serial_number=disk_serial_number(path),
        )
        if disk.vendor == UNKNOWN and disk.model == UNKNOWN and disk.serial_number == UNKNOWN:
            continue
        disk.size_bytes = disk_size_bytes(path)
        disks.append(disk)
    return disks