"""Battery information read from the power supply class in sysfs."""

from __future__ import annotations

import math
import os
import re
from pathlib import Path

from hwscan.sysfs import exists, read_first_line

DEFAULT_POWER_SUPPLY_PATH = "/sys/class/power_supply/"
UNKNOWN = "<unknown>"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text: str) -> int | None:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


class Battery:
    """One battery, identified by the number in its ``BAT<n>`` directory."""

    def __init__(
        self,
        battery_id: int = 0,
        base_path: str | os.PathLike[str] = DEFAULT_POWER_SUPPLY_PATH,
    ) -> None:
        self.id = battery_id
        self.base_path = os.fspath(base_path)
        self._vendor = ""
        self._model = ""
        self._serial_number = ""
        self._technology = ""
        self._energy_full = 0

    def __repr__(self) -> str:
        return f"Battery(battery_id={self.id!r}, base_path={self.base_path!r})"

    def _read(self, name: str) -> str | None:
        if self.id < 0:
            return None
        return read_first_line(Path(self.base_path) / f"BAT{self.id}" / name)

    def _read_text(self, name: str) -> str:
        value = self._read(name)
        return UNKNOWN if value is None else value

    def _read_number(self, name: str) -> int:
        value = self._read(name)
        if value is None:
            return 0
        number = _leading_int(value)
        return 0 if number is None else number

    def vendor(self) -> str:
        """Return the manufacturer; a non-empty value is cached."""
        if not self._vendor:
            self._vendor = self._read_text("manufacturer")
        return self._vendor

    def model(self) -> str:
        """Return the model name; a non-empty value is cached."""
        if not self._model:
            self._model = self._read_text("model_name")
        return self._model

    def serial_number(self) -> str:
        """Return the serial number; a non-empty value is cached."""
        if not self._serial_number:
            self._serial_number = self._read_text("serial_number")
        return self._serial_number

    def technology(self) -> str:
        """Return the cell technology; a non-empty value is cached."""
        if not self._technology:
            self._technology = self._read_text("technology")
        return self._technology

    def energy_full(self) -> int:
        """Return the energy when fully charged; a non-zero value is cached."""
        if self._energy_full == 0:
            self._energy_full = self._read_number("energy_full")
        return self._energy_full

    def energy_now(self) -> int:
        """Return the energy currently stored, or 0 if unknown."""
        return self._read_number("energy_now")

    def charging(self) -> bool:
        """Return whether the battery reports the status "Charging"."""
        return self._read("status") == "Charging"

    def discharging(self) -> bool:
        """Return whether the battery is not charging."""
        return not self.charging()

    def capacity(self) -> float:
        """Return the current energy as a fraction of the full energy."""
        now = self.energy_now()
        full = self.energy_full()
        if full == 0:
            return math.nan if now == 0 else math.inf
        return now / full


def get_all_batteries(base_path: str | os.PathLike[str] = DEFAULT_POWER_SUPPLY_PATH) -> list[Battery]:
    """Return the batteries ``BAT0``, ``BAT1``, ... up to the first missing one."""
    batteries: list[Battery] = []
    battery_id = 0
    while exists(Path(base_path) / f"BAT{battery_id}"):
        batteries.append(Battery(battery_id, base_path))
        battery_id += 1
    return batteries