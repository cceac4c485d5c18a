"""Best-effort acquisition of every reading the display needs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Sequence

from errors import SourceUnavailable
from models.readings import LinkStatus, SensorSnapshot
from sensors.commands import CommandRunner, run_command
from sensors.parsers import (
    find_wifi_interface,
    parse_df_percent,
    parse_link_up,
    parse_meminfo,
)
from sensors.sources import TemperatureSource, default_temperature_sources

logger = logging.getLogger(__name__)

FALLBACK_TEMPERATURE = 50.0
ETHERNET_INTERFACE = "eth0"
DEFAULT_MEMINFO_PATH = "/proc/meminfo"
DEFAULT_NET_CLASS_PATH = "/sys/class/net"


class SensorProvider:
    """Reads sensors without ever raising.

    Every query falls back to a defined default when its sources are
    unavailable. Nothing is cached between calls.
    """

    def __init__(
        self,
        temperature_sources: Optional[Sequence[TemperatureSource]] = None,
        runner: CommandRunner = run_command,
        meminfo_path: str | Path = DEFAULT_MEMINFO_PATH,
        net_class_path: str | Path = DEFAULT_NET_CLASS_PATH,
        root_mount: str = "/",
    ) -> None:
        self._runner = runner
        self.temperature_sources = list(
            temperature_sources
            if temperature_sources is not None
            else default_temperature_sources(runner)
        )
        self.meminfo_path = Path(meminfo_path)
        self.net_class_path = Path(net_class_path)
        self.root_mount = root_mount

    def temperature(self) -> float:
        for source in self.temperature_sources:
            try:
                value = source.read()
            except SourceUnavailable as exc:
                logger.debug(
                    "Temperature source unavailable",
                    extra={"source": exc.source, "reason": exc.reason},
                )
                continue
            if not source.is_plausible(value):
                logger.debug(
                    "Temperature reading rejected as implausible",
                    extra={"source": source.name, "value": value},
                )
                continue
            return value
        return FALLBACK_TEMPERATURE

    def memory_usage_percent(self) -> float:
        try:
            text = self.meminfo_path.read_text()
        except OSError as exc:
            logger.debug(
                "Memory info unreadable",
                extra={"path": str(self.meminfo_path), "reason": str(exc)},
            )
            return 0.0
        percent = parse_meminfo(text)
        return percent if percent is not None else 0.0

    def disk_usage_percent(self) -> int:
        output = self._runner(("df", "-P", self.root_mount))
        if output is None:
            return 0
        percent = parse_df_percent(output)
        if percent is None:
            logger.debug(
                "Disk usage output unparsable",
                extra={"source": "df", "reason": "no percentage field"},
            )
            return 0
        return percent

    def network_link_status(self) -> LinkStatus:
        ethernet = self._interface_connected(ETHERNET_INTERFACE)
        wifi_name = find_wifi_interface(self._interface_names())
        wifi = self._interface_connected(wifi_name) if wifi_name else False
        return LinkStatus(wifi=wifi, ethernet=ethernet)

    def snapshot(self) -> SensorSnapshot:
        return SensorSnapshot(
            temperature=self.temperature(),
            memory_percent=self.memory_usage_percent(),
            disk_percent=self.disk_usage_percent(),
            link=self.network_link_status(),
        )

    def _interface_names(self) -> Iterable[str]:
        try:
            return [entry.name for entry in self.net_class_path.iterdir()]
        except OSError as exc:
            logger.debug(
                "Network interfaces unlistable",
                extra={"path": str(self.net_class_path), "reason": str(exc)},
            )
            return []

    def _interface_connected(self, name: str) -> bool:
        output = self._runner(("ip", "addr", "show", name))
        if output is None:
            return False
        return parse_link_up(output)
