"""Pydantic models describing what gets written to the display and LEDs."""

from __future__ import annotations

from enum import Enum
from typing import Dict

from pydantic import BaseModel, Field, field_validator

DISPLAY_WIDTH = 4


class DisplayMode(str, Enum):
    """Screens the display rotates through."""

    clock = "clock"
    cpu_stat = "cpu_stat"
    mem_stat = "mem_stat"
    storage_stat = "storage_stat"


class Led(str, Enum):
    """Discrete indicator LEDs next to the digits."""

    alarm = "alarm"
    colon = "colon"
    lan = "lan"
    pause = "pause"
    play = "play"
    usb = "usb"
    wlan = "wlan"


def fit_text(text: str) -> str:
    """Truncate or right-pad ``text`` with spaces to exactly four characters."""

    clipped = "".join(ch if ch.isprintable() else " " for ch in text[:DISPLAY_WIDTH])
    return clipped.ljust(DISPLAY_WIDTH)


class Frame(BaseModel):
    """A complete display update: four characters and every LED."""

    mode: DisplayMode
    text: str = Field(..., description="Exactly four printable characters.")
    leds: Dict[Led, bool]

    @field_validator("text")
    @classmethod
    def _fit_text(cls, value: str) -> str:
        return fit_text(value)

    @field_validator("leds")
    @classmethod
    def _require_all_leds(cls, value: Dict[Led, bool]) -> Dict[Led, bool]:
        missing = sorted(led.value for led in Led if led not in value)
        if missing:
            raise ValueError(f"Frame is missing LED states: {', '.join(missing)}")
        return value
