# hwscan

Hardware and system information for Linux, read from `/proc`, `/sys` and
`/etc/os-release`.

hwscan reports on:

- CPUs (`hwscan.cpu`): vendor, model, physical and logical core counts,
  maximum and base clock speed, cache size, flags, per-thread frequency and
  utilisation
- memory (`hwscan.ram`): total, free and available bytes from `/proc/meminfo`,
  with a `sysconf` fallback
- GPUs (`hwscan.gpu`) found as `card<n>` under `/sys/class/drm`, with vendor
  and device names looked up in a `pci.ids` database (`hwscan.pci`)
- batteries (`hwscan.battery`) under `/sys/class/power_supply`
- disks (`hwscan.disk`) under `/sys/class/block`, partitions left out
- the main board (`hwscan.mainboard`) from the DMI tables
- network interfaces (`hwscan.network`): index, MAC, first IPv4 address and
  first link-local IPv6 address
- the operating system (`hwscan.osinfo`): name, version, kernel release,
  word size and byte order

## Installation

```
pip install .
```

## Command line

```
hwscan
```

This prints a hardware report with one section for each kind of device.
Measuring CPU utilisation waits one second before the first sample, so the
report takes a moment to appear.

## Library use

```python
from hwscan.cpu import get_all_cpus
from hwscan.ram import Memory
from hwscan.units import bytes_to_mib
from hwscan.osinfo import detect_os
from hwscan.disk import get_all_disks

for cpu in get_all_cpus():
    print(cpu.vendor, cpu.model_name, cpu.threads_utilisation())

memory = Memory()
print(bytes_to_mib(memory.total_bytes()), bytes_to_mib(memory.available_bytes()))

print(detect_os().name)

for disk in get_all_disks():
    print(disk.model, disk.size_bytes)
```

`hwscan.report.format_report` renders the same text as the command from
objects you pass in.

Values that cannot be found mostly show up as `"<unknown>"` for text fields
and as `-1` for numbers; battery energies that cannot be read are `0`.

Most functions take the path they read from as an argument, with the usual
system location as the default. That lets you point them at a copy of
`/sys` or `/proc`, for example in tests.

## Limits

- Only Linux is supported; the data comes from Linux pseudo file systems.
- GPU driver version, memory size and core count are not detected and stay
  empty or `0`.
- Memory is reported as a single module with unknown vendor, model and
  serial number; individual DIMMs are not listed.
- Only the L3 cache size is read (from `/proc/cpuinfo`); L1 and L2 stay `-1`.
- CPU temperature is not reported.

## Running the tests

```
pip install .[test]
pytest
```