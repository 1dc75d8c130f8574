"""Access to pseudo file systems such as /sys and /proc."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from itertools import islice

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class Jiffies:
    """CPU time counters: total time and time spent working."""

    all: int = -1
    working: int = -1


def exists(path: str | os.PathLike[str]) -> bool:
    """Return whether ``path`` can be stat'ed."""
    return os.path.exists(path)


def directory_entries(path: str | os.PathLike[str]) -> list[str]:
    """Return the names in a directory, or an empty list if it cannot be read."""
    try:
        return os.listdir(path)
    except OSError:
        return []


def read_first_line(path: str | os.PathLike[str]) -> str | None:
    """Return the first line of a file without its newline, or None if unreadable."""
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as handle:
            line = handle.readline()
    except OSError:
        return None
    return line[:-1] if line.endswith("\n") else line


def read_int(path: str | os.PathLike[str]) -> int:
    """Read the integer that starts the first line of a file, or -1."""
    line = read_first_line(path)
    if line is None:
        return -1
    match = _LEADING_INT.match(line)
    if match is None:
        return -1
    return int(match.group(1))


def parse_jiffies(line: str) -> Jiffies:
    """Parse one ``cpu`` line of /proc/stat.

    The total sums the ten counters; working time is user, nice and system.
    """
    fields = line.split()
    if len(fields) < 11:
        raise ValueError(f"expected ten counters in stat line: {line!r}")
    counters = [int(value) for value in fields[1:11]]
    return Jiffies(all=sum(counters), working=sum(counters[:3]))


def read_jiffies(index: int, stat_path: str | os.PathLike[str] = "/proc/stat") -> Jiffies:
    """Read the counters from line ``index`` of a stat file.

    Line 0 holds the aggregate of all CPUs, line ``n + 1`` thread ``n``.
    An unreadable file gives counters of -1.
    """
    try:
        with open(stat_path, encoding="utf-8", errors="replace") as handle:
            line = next(islice(handle, index, None), "")
    except OSError:
        return Jiffies()
    return parse_jiffies(line)