"""Processor information read from /proc/cpuinfo, /proc/stat and cpufreq in sysfs."""

from __future__ import annotations

import math
import os
import re
import time
from dataclasses import dataclass, field
from pathlib import Path

from hwscan.strutil import split, split_terminated, strip
from hwscan.sysfs import Jiffies, read_int, read_jiffies

DEFAULT_CPU_ROOT = "/sys/devices/system/cpu"
DEFAULT_CPUINFO_PATH = "/proc/cpuinfo"
DEFAULT_STAT_PATH = "/proc/stat"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _to_int(value: str) -> int:
    """Parse the integer that starts ``value``; raise ValueError if there is none."""
    match = _LEADING_INT.match(value)
    if match is None:
        raise ValueError(f"not an integer: {value!r}")
    return int(match.group(1))


def _frequency_mhz(core_id: int, root: str | os.PathLike[str], name: str) -> int:
    value = read_int(Path(root) / f"cpu{core_id}" / "cpufreq" / name)
    return value // 1000 if value > -1 else -1


def max_clock_speed_mhz(core_id: int, root: str | os.PathLike[str] = DEFAULT_CPU_ROOT) -> int:
    """Return the scaling maximum frequency of a core, or -1 if unknown."""
    return _frequency_mhz(core_id, root, "scaling_max_freq")


def regular_clock_speed_mhz(core_id: int, root: str | os.PathLike[str] = DEFAULT_CPU_ROOT) -> int:
    """Return the base frequency of a core, or -1 if unknown."""
    return _frequency_mhz(core_id, root, "base_frequency")


def min_clock_speed_mhz(core_id: int, root: str | os.PathLike[str] = DEFAULT_CPU_ROOT) -> int:
    """Return the scaling minimum frequency of a core, or -1 if unknown."""
    return _frequency_mhz(core_id, root, "scaling_min_freq")


def _ratio(work: int, total: int, upper: float) -> float:
    if total == 0:
        return -1.0
    ratio = work / total
    if ratio < 0 or ratio > upper or math.isnan(ratio):
        return -1.0
    return ratio


@dataclass
class CPU:
    """One processor socket."""

    id: int = -1
    model_name: str = ""
    vendor: str = ""
    num_physical_cores: int = -1
    num_logical_cores: int = -1
    max_clock_speed_mhz: int = -1
    regular_clock_speed_mhz: int = -1
    l1_cache_size_bytes: int = -1
    l2_cache_size_bytes: int = -1
    l3_cache_size_bytes: int = -1
    flags: list[str] = field(default_factory=list)
    sysfs_root: str = DEFAULT_CPU_ROOT
    stat_path: str = DEFAULT_STAT_PATH
    warmup_seconds: float = 1.0
    _jiffies_ready: bool = field(default=False, init=False, repr=False, compare=False)
    _last_total: Jiffies = field(default_factory=Jiffies, init=False, repr=False, compare=False)
    _last_threads: dict[int, Jiffies] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def _warm_up(self) -> None:
        # The first sample needs a delta, so give the counters time to move.
        if not self._jiffies_ready:
            if self.warmup_seconds > 0:
                time.sleep(self.warmup_seconds)
            self._jiffies_ready = True

    def current_clock_speeds_mhz(self) -> list[int]:
        """Return the current frequency of each thread, in order, until one is missing."""
        speeds = []
        core_id = 0
        while True:
            value = read_int(Path(self.sysfs_root) / f"cpu{core_id}" / "cpufreq" / "scaling_cur_freq")
            if value == -1:
                break
            speeds.append(value // 1000)
            core_id += 1
        return speeds

    def current_utilisation(self) -> float:
        """Return the share of working time since the previous call, or -1.0."""
        self._warm_up()
        current = read_jiffies(0, self.stat_path)
        last = self._last_total
        self._last_total = current
        return _ratio(current.working - last.working, current.all - last.all, 1)

    def thread_utilisation(self, thread_index: int) -> float:
        """Return the share of working time of one thread since its previous call, or -1.0."""
        self._warm_up()
        current = read_jiffies(thread_index + 1, self.stat_path)
        last = self._last_threads.get(thread_index, Jiffies())
        self._last_threads[thread_index] = current
        return _ratio(current.working - last.working, current.all - last.all, 100)

    def threads_utilisation(self) -> list[float]:
        """Return the utilisation of every logical core."""
        return [self.thread_utilisation(index) for index in range(self.num_logical_cores)]


def parse_cpuinfo(text: str, root: str | os.PathLike[str] = DEFAULT_CPU_ROOT) -> list[CPU]:
    """Build one CPU per physical socket from the text of /proc/cpuinfo.

    Blocks are separated by blank lines; the last line of a block is not
    read. A block is added when its physical id differs from the number of
    sockets seen so far minus one.
    """
    sysfs_root = os.fspath(root)
    cpus: list[CPU] = []
    physical_id = -1
    for block in split(text, "\n\n"):
        cpu = CPU(sysfs_root=sysfs_root)
        add = False
        for line in split_terminated(block, "\n"):
            parts = split(line, ":")
            if len(parts) < 2:
                continue
            name, value = strip(parts[0]), strip(parts[1])
            if name == "vendor_id":
                cpu.vendor = value
            elif name == "model name":
                cpu.model_name = value
            elif name == "cache size":
                cpu.l3_cache_size_bytes = _to_int(split(value, " ")[0]) * 1024
            elif name == "siblings":
                cpu.num_logical_cores = _to_int(value)
            elif name == "cpu cores":
                cpu.num_physical_cores = _to_int(value)
            elif name == "flags":
                cpu.flags = split(value, " ")
            elif name == "physical id":
                socket_id = _to_int(value)
                if socket_id == physical_id:
                    continue
                cpu.id = socket_id
                add = True
        if add:
            cpu.max_clock_speed_mhz = max_clock_speed_mhz(cpu.id, sysfs_root)
            cpu.regular_clock_speed_mhz = regular_clock_speed_mhz(cpu.id, sysfs_root)
            physical_id += 1
            cpus.append(cpu)
    return cpus


def get_all_cpus(
    cpuinfo_path: str | os.PathLike[str] = DEFAULT_CPUINFO_PATH,
    root: str | os.PathLike[str] = DEFAULT_CPU_ROOT,
) -> list[CPU]:
    """Read the processors of this machine; an unreadable cpuinfo gives none."""
    try:
        text = Path(cpuinfo_path).read_text(encoding="utf-8", errors="replace")
    except OSError:
        return []
    return parse_cpuinfo(text, root)