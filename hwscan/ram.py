"""Main memory information read from /proc/meminfo."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

from hwscan.strutil import split, strip

DEFAULT_MEMINFO_PATH = "/proc/meminfo"
UNKNOWN = "<unknown>"

_FIELDS = (("MemTotal", "total"), ("MemFree", "free"), ("MemAvailable", "available"))


@dataclass(frozen=True)
class MemInfo:
    """Total, free and available memory in bytes; -1 where unknown."""

    total: int = -1
    free: int = -1
    available: int = -1


@dataclass(frozen=True)
class MemoryModule:
    """One memory module."""

    id: int
    vendor: str
    name: str
    model: str
    serial_number: str
    total_bytes: int
    frequency_hz: int


def _kib_value(line: str) -> int | None:
    parts = split(line, ":")
    if len(parts) != 2:
        return None
    value = strip(parts[1])
    number, space, _ = value.partition(" ")
    if not space:
        return None
    try:
        return int(number) * 1024
    except ValueError:
        raise ValueError(f"not an integer: {number!r}") from None


def parse_meminfo(text: str) -> MemInfo:
    """Parse the text of /proc/meminfo; reading stops once all three values are known."""
    values = {key: -1 for _, key in _FIELDS}
    for line in text.split("\n"):
        if all(value != -1 for value in values.values()):
            break
        for prefix, key in _FIELDS:
            if line.startswith(prefix):
                parsed = _kib_value(line)
                if parsed is not None:
                    values[key] = parsed
                break
    return MemInfo(**values)


def _sysconf(name: str) -> int:
    try:
        return os.sysconf(name)
    except (AttributeError, OSError, ValueError):
        return -1


def _with_sysconf(info: MemInfo) -> MemInfo:
    pages = _sysconf("SC_PHYS_PAGES")
    available_pages = _sysconf("SC_AVPHYS_PAGES")
    page_size = _sysconf("SC_PAGESIZE")
    if page_size > 0 and pages > 0:
        info = replace(info, total=pages * page_size)
    if page_size > 0 and available_pages > 0:
        info = replace(info, available=available_pages * page_size)
    return info


def read_meminfo(path: str | os.PathLike[str] = DEFAULT_MEMINFO_PATH) -> MemInfo:
    """Read memory figures from a meminfo file, falling back to sysconf.

    The fallback is used when the file cannot be read or lacks the total
    or the available size.
    """
    try:
        text = Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError:
        return _with_sysconf(MemInfo())
    info = parse_meminfo(text)
    if info.total == -1 or info.available == -1:
        info = _with_sysconf(info)
    return info


class Memory:
    """Main memory of this machine, seen as one module."""

    def __init__(self, meminfo_path: str | os.PathLike[str] = DEFAULT_MEMINFO_PATH) -> None:
        self._meminfo_path = os.fspath(meminfo_path)
        self.modules: list[MemoryModule] = [
            MemoryModule(
                id=0,
                vendor=UNKNOWN,
                name=UNKNOWN,
                model=UNKNOWN,
                serial_number=UNKNOWN,
                total_bytes=read_meminfo(self._meminfo_path).total,
                frequency_hz=-1,
            )
        ]

    def total_bytes(self) -> int:
        """Return the summed size of all modules."""
        return sum(module.total_bytes for module in self.modules)

    def free_bytes(self) -> int:
        """Return the currently free memory, or -1."""
        return read_meminfo(self._meminfo_path).free

    def available_bytes(self) -> int:
        """Return the currently available memory, or -1."""
        return read_meminfo(self._meminfo_path).available