"""Turns the active mode and current readings into a display frame."""

from __future__ import annotations

from datetime import datetime
from typing import Dict, Tuple

from models.display import DisplayMode, Frame, Led
from models.readings import SensorSnapshot
from services.scheduler import DisplayModeScheduler

ALARM_TEMPERATURE = 70.0
DISK_WARNING_PERCENT = 80
MEMORY_WARNING_PERCENT = 80.0

_STAT_PREFIXES = {
    DisplayMode.cpu_stat: "C ",
    DisplayMode.mem_stat: "r ",
    DisplayMode.storage_stat: "S ",
}


class StatusEncoder:
    """Stateless: every frame depends only on its inputs."""

    @staticmethod
    def clock_text(hour: int, minute: int) -> Tuple[str, bool]:
        """Return the 12-hour ``HHMM`` text and whether it is PM."""

        display_hour = hour % 12 or 12
        return f"{display_hour:02d}{minute:02d}", hour >= 12

    @staticmethod
    def hazard_leds(snapshot: SensorSnapshot) -> Dict[Led, bool]:
        return {
            Led.alarm: snapshot.temperature > ALARM_TEMPERATURE,
            Led.usb: snapshot.disk_percent > DISK_WARNING_PERCENT,
            Led.pause: snapshot.memory_percent > MEMORY_WARNING_PERCENT,
            Led.wlan: snapshot.link.wifi,
            Led.lan: snapshot.link.ethernet,
        }

    def stat_text(self, mode: DisplayMode, snapshot: SensorSnapshot) -> str:
        if mode is DisplayMode.cpu_stat:
            value = int(snapshot.temperature)
        elif mode is DisplayMode.mem_stat:
            value = int(snapshot.memory_percent)
        elif mode is DisplayMode.storage_stat:
            value = snapshot.disk_percent
        else:
            raise ValueError(f"{mode.value} is not a stat mode")
        return f"{_STAT_PREFIXES[mode]}{value}"

    def encode(
        self,
        mode: DisplayMode,
        snapshot: SensorSnapshot,
        now: datetime,
        elapsed: float,
    ) -> Frame:
        leds = self.hazard_leds(snapshot)
        text, is_pm = self.clock_text(now.hour, now.minute)
        # play tracks AM/PM in every mode so no LED keeps a stale value.
        leds[Led.play] = is_pm
        if mode is DisplayMode.clock:
            leds[Led.colon] = DisplayModeScheduler.is_even_second(elapsed)
        else:
            text = self.stat_text(mode, snapshot)
            leds[Led.colon] = True
        return Frame(mode=mode, text=text, leds=leds)
