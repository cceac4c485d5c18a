"""Temperature source strategies, tried in order by the provider."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from errors import SourceUnavailable
from sensors.commands import CommandRunner, run_command
from sensors.parsers import (
    parse_firmware_temperature,
    parse_hwmon_value,
    parse_sensors_temperature,
)

DEFAULT_HWMON_PATHS = (
    "/sys/class/hwmon/hwmon0/temp1_input",
    "/sys/class/hwmon/hwmon1/temp1_input",
    "/sys/class/hwmon/hwmon2/temp1_input",
)

SENSORS_MIN_PLAUSIBLE = 10.0
SENSORS_MAX_PLAUSIBLE = 100.0


class TemperatureSource:
    """One way of obtaining the CPU temperature in degrees Celsius."""

    name = "temperature"

    def read(self) -> float:
        """Return a reading or raise :class:`SourceUnavailable`."""
        raise NotImplementedError

    def is_plausible(self, value: float) -> bool:
        return True


class FirmwareCommandSource(TemperatureSource):
    name = "vcgencmd"

    def __init__(
        self,
        runner: CommandRunner = run_command,
        argv: Sequence[str] = ("vcgencmd", "measure_temp"),
    ) -> None:
        self._runner = runner
        self._argv = tuple(argv)

    def read(self) -> float:
        output = self._runner(self._argv)
        if output is None:
            raise SourceUnavailable(self.name, "command unavailable")
        value = parse_firmware_temperature(output)
        if value is None:
            raise SourceUnavailable(self.name, "no temp=<value>'C in output")
        return value


class HwmonSource(TemperatureSource):
    name = "hwmon"

    def __init__(self, paths: Sequence[str | Path] = DEFAULT_HWMON_PATHS) -> None:
        self._paths = tuple(Path(p) for p in paths)

    def read(self) -> float:
        node = next((path for path in self._paths if path.exists()), None)
        if node is None:
            raise SourceUnavailable(self.name, "no hwmon node present")
        try:
            raw = node.read_text()
        except OSError as exc:
            raise SourceUnavailable(self.name, f"{node}: {exc}") from exc
        value = parse_hwmon_value(raw)
        if value is None:
            raise SourceUnavailable(self.name, f"{node}: not an integer")
        return value


class SensorsCommandSource(TemperatureSource):
    """Loosely matched lm-sensors output, bounded to reject misparsed lines."""

    name = "lm-sensors"

    def __init__(
        self,
        runner: CommandRunner = run_command,
        argv: Sequence[str] = ("sensors", "-u"),
    ) -> None:
        self._runner = runner
        self._argv = tuple(argv)

    def read(self) -> float:
        output = self._runner(self._argv)
        if output is None:
            raise SourceUnavailable(self.name, "command unavailable")
        value = parse_sensors_temperature(output)
        if value is None:
            raise SourceUnavailable(self.name, "no temp1_input or Core 0 line")
        return value

    def is_plausible(self, value: float) -> bool:
        return SENSORS_MIN_PLAUSIBLE < value < SENSORS_MAX_PLAUSIBLE


def default_temperature_sources(
    runner: CommandRunner = run_command,
    hwmon_paths: Optional[Sequence[str | Path]] = None,
) -> list[TemperatureSource]:
    return [
        FirmwareCommandSource(runner),
        HwmonSource(hwmon_paths if hwmon_paths is not None else DEFAULT_HWMON_PATHS),
        SensorsCommandSource(runner),
    ]
