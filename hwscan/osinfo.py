"""Operating system name, version, kernel, word size and byte order."""

from __future__ import annotations

import os
import platform
import sys
from dataclasses import dataclass
from pathlib import Path

DEFAULT_OS_RELEASE_PATH = "/etc/os-release"
DEFAULT_LD_PATH = "/lib64/ld-linux-x86-64.so.2"
UNKNOWN = "<unknown>"


@dataclass(frozen=True)
class OS:
    """Facts about the running operating system."""

    name: str = ""
    version: str = ""
    kernel: str = ""
    is_32bit: bool = False
    is_64bit: bool = False
    is_big_endian: bool = False
    is_little_endian: bool = False


def _quoted_value(line: str) -> str:
    # Everything after the first '=' with the surrounding quotes removed.
    _, _, value = line.partition("=")
    if "=" not in line:
        value = line
    return value[1:-1]


def parse_os_release(text: str) -> tuple[str, str]:
    """Return the pretty name and the version from os-release text.

    A value that does not appear is returned as an empty string; the last
    occurrence of a key wins.
    """
    name = ""
    version = ""
    for line in text.splitlines():
        if line.startswith("PRETTY_NAME"):
            name = _quoted_value(line)
        if line.startswith("VERSION="):
            version = _quoted_value(line)
    return name, version


def detect_os(
    os_release_path: str | os.PathLike[str] = DEFAULT_OS_RELEASE_PATH,
    ld_path: str | os.PathLike[str] = DEFAULT_LD_PATH,
) -> OS:
    """Describe the running system.

    The system counts as 64 bit when the 64-bit dynamic loader exists.
    """
    try:
        name, version = parse_os_release(Path(os_release_path).read_text(encoding="utf-8", errors="replace"))
    except OSError:
        name, version = "Linux", UNKNOWN
    kernel = platform.release() or UNKNOWN
    is_64bit = os.path.exists(ld_path)
    return OS(
        name=name,
        version=version,
        kernel=kernel,
        is_32bit=not is_64bit,
        is_64bit=is_64bit,
        is_big_endian=sys.byteorder == "big",
        is_little_endian=sys.byteorder == "little",
    )