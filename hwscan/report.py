"""A plain-text report of the hardware of this machine."""

from __future__ import annotations

import argparse
import math
from collections.abc import Sequence
from typing import Any

from hwscan.battery import Battery, get_all_batteries
from hwscan.cpu import CPU, get_all_cpus
from hwscan.disk import Disk, get_all_disks
from hwscan.gpu import GPU, get_all_gpus
from hwscan.mainboard import MainBoard, detect_mainboard
from hwscan.network import Network, get_all_networks
from hwscan.osinfo import OS, detect_os
from hwscan.ram import Memory
from hwscan.units import bytes_to_mib


def _text(value: Any) -> str:
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def _field(label: str, value: Any) -> str:
    return f"{label:<20} {_text(value)}"


def _cpu_lines(cpus: Sequence[CPU]) -> list[str]:
    lines = ["----------------------------------- CPU ------------------------------------"]
    for cpu in cpus:
        lines += [
            f"Socket {cpu.id}:",
            _field("vendor:", cpu.vendor),
            _field("model:", cpu.model_name),
            _field("physical cores:", cpu.num_physical_cores),
            _field("logical cores:", cpu.num_logical_cores),
            _field("max frequency:", cpu.max_clock_speed_mhz),
            _field("regular frequency:", cpu.regular_clock_speed_mhz),
            _field(
                "cache size:",
                f"L1: {cpu.l1_cache_size_bytes}, L2: {cpu.l2_cache_size_bytes}, "
                f"L3: {cpu.l3_cache_size_bytes}",
            ),
        ]
        utilisation = cpu.threads_utilisation()
        speeds = cpu.current_clock_speeds_mhz()
        for thread_id, (speed, usage) in enumerate(zip(speeds, utilisation)):
            lines.append(_field(" ", f"Thread {thread_id}: {speed} MHz ({_text(usage * 100)}%)"))
    return lines


def _os_lines(os_info: OS) -> list[str]:
    return [
        "----------------------------------- OS ------------------------------------",
        _field("Operating System:", os_info.name),
        _field("version:", os_info.version),
        _field("kernel:", os_info.kernel),
        _field("architecture:", "32 bit" if os_info.is_32bit else "64 bit"),
        _field("endianess:", "little endian" if os_info.is_little_endian else "big endian"),
    ]


def _gpu_lines(gpus: Sequence[GPU]) -> list[str]:
    lines = ["----------------------------------- GPU -----------------------------------"]
    for gpu in gpus:
        lines += [
            f"GPU {gpu.id}:",
            _field("vendor:", gpu.vendor),
            _field("model:", gpu.name),
            _field("driverVersion:", gpu.driver_version),
            _field("memory [MiB]:", bytes_to_mib(gpu.memory_bytes)),
            _field("frequency:", gpu.frequency_mhz),
            _field("cores:", gpu.num_cores),
            _field("vendor_id:", gpu.vendor_id),
            _field("device_id:", gpu.device_id),
        ]
    return lines


def _memory_lines(memory: Memory) -> list[str]:
    lines = [
        "----------------------------------- RAM -----------------------------------",
        _field("size [MiB]:", bytes_to_mib(memory.total_bytes())),
        _field("free [MiB]:", bytes_to_mib(memory.free_bytes())),
        _field("available [MiB]:", bytes_to_mib(memory.available_bytes())),
    ]
    for module in memory.modules:
        frequency = -1 if module.frequency_hz == -1 else module.frequency_hz / 1e6
        lines += [
            f"RAM {module.id}:",
            _field("vendor:", module.vendor),
            _field("model:", module.model),
            _field("name:", module.name),
            _field("serial-number:", module.serial_number),
            _field("Frequency [MHz]:", frequency),
        ]
    return lines


def _mainboard_lines(board: MainBoard) -> list[str]:
    return [
        "------------------------------- Main Board --------------------------------",
        _field("vendor:", board.vendor),
        _field("name:", board.name),
        _field("version:", board.version),
        _field("serial-number:", board.serial_number),
    ]


def _battery_lines(batteries: Sequence[Battery]) -> list[str]:
    lines = ["------------------------------- Batteries ---------------------------------"]
    if not batteries:
        return lines + ["No Batteries installed or detected"]
    for counter, battery in enumerate(batteries):
        lines += [
            f"Battery {counter}:",
            _field("vendor:", battery.vendor()),
            _field("model:", battery.model()),
            _field("serial-number:", battery.serial_number()),
            _field("charging:", "yes" if battery.charging() else "no"),
            _field("capacity:", battery.capacity()),
        ]
    return lines


def _disk_lines(disks: Sequence[Disk]) -> list[str]:
    lines = ["--------------------------------- Disks -----------------------------------"]
    if not disks:
        return lines + ["No Disks installed or detected"]
    for counter, disk in enumerate(disks):
        lines += [
            f"Disk {counter}:",
            _field("vendor:", disk.vendor),
            _field("model:", disk.model),
            _field("serial-number:", disk.serial_number),
            _field("size:", disk.size_bytes),
        ]
    return lines


def _network_lines(networks: Sequence[Network]) -> list[str]:
    lines = ["--------------------------------- Networks -----------------------------------"]
    if not networks:
        return lines + ["No Networks installed or detected"]
    shown = (network for network in networks if network.ip4 or network.ip6)
    for counter, network in enumerate(shown):
        lines += [
            f"Network {counter}:",
            _field("description:", network.description),
            _field("interface index:", network.interface_index),
            _field("mac:", network.mac),
            _field("ipv4:", network.ip4),
            _field("ipv6:", network.ip6),
        ]
    return lines


def format_report(
    cpus: Sequence[CPU],
    os_info: OS,
    gpus: Sequence[GPU],
    memory: Memory,
    mainboard: MainBoard,
    batteries: Sequence[Battery],
    disks: Sequence[Disk],
    networks: Sequence[Network],
) -> str:
    """Render the hardware report for the given components."""
    lines = ["Hardware Report:", ""]
    lines += _cpu_lines(cpus)
    lines += _os_lines(os_info)
    lines += _gpu_lines(gpus)
    lines += _memory_lines(memory)
    lines += _mainboard_lines(mainboard)
    lines += _battery_lines(batteries)
    lines += _disk_lines(disks)
    lines += _network_lines(networks)
    return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Print a hardware report of this machine."""
    parser = argparse.ArgumentParser(prog="hwscan", description="Print a hardware report of this machine.")
    parser.parse_args(argv)
    cpus = get_all_cpus()
    os_info = detect_os()
    gpus = get_all_gpus()
    memory = Memory()
    board = detect_mainboard()
    batteries = get_all_batteries()
    disks = get_all_disks()
    networks = get_all_networks()
    print(format_report(cpus, os_info, gpus, memory, board, batteries, disks, networks), end="")
    return 0