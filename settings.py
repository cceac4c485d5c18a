from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional


_DISPLAY_PATH_ENV = "VFD_DISPLAY_PATH"
_LED_ROOT_ENV = "VFD_LED_ROOT"
_TICK_ENV = "VFD_TICK_SECONDS"
_BOOT_TEXT_ENV = "VFD_BOOT_TEXT"
_BOOT_HOLD_ENV = "VFD_BOOT_HOLD_SECONDS"
_CLOCK_SECONDS_ENV = "VFD_CLOCK_SECONDS"
_CPU_SECONDS_ENV = "VFD_CPU_SECONDS"
_MEM_SECONDS_ENV = "VFD_MEM_SECONDS"
_STORAGE_SECONDS_ENV = "VFD_STORAGE_SECONDS"
_LOG_LEVEL_ENV = "LOG_LEVEL"

DEFAULT_DISPLAY_PATH = "/sys/devices/platform/spi/spi_master/spi0/spi0.0/display_text"
DEFAULT_LED_ROOT = "/sys/class/leds"
DEFAULT_TICK_SECONDS = 0.5
MAX_TICK_SECONDS = 1.0


@dataclass(frozen=True)
class Settings:
    display_path: str
    led_root: str
    tick_seconds: float
    boot_text: str
    boot_hold_seconds: float
    clock_seconds: int
    cpu_seconds: int
    mem_seconds: int
    storage_seconds: int
    log_level: str


def _read_str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or default


def _read_positive_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        parsed = int(candidate)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _read_positive_float(name: str, default: float, maximum: Optional[float] = None) -> float:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        parsed = float(candidate)
    except ValueError:
        return default
    if parsed <= 0:
        return default
    if maximum is not None and parsed > maximum:
        return default
    return parsed


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    return candidate.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings(
        display_path=_read_str_env(_DISPLAY_PATH_ENV, DEFAULT_DISPLAY_PATH),
        led_root=_read_str_env(_LED_ROOT_ENV, DEFAULT_LED_ROOT),
        # The colon blink reads whole elapsed seconds, so a tick longer than
        # one second would skip blink phases.
        tick_seconds=_read_positive_float(_TICK_ENV, DEFAULT_TICK_SECONDS, MAX_TICK_SECONDS),
        boot_text=_read_str_env(_BOOT_TEXT_ENV, "TX3M"),
        boot_hold_seconds=_read_positive_float(_BOOT_HOLD_ENV, 1.0),
        clock_seconds=_read_positive_int(_CLOCK_SECONDS_ENV, 10),
        cpu_seconds=_read_positive_int(_CPU_SECONDS_ENV, 4),
        mem_seconds=_read_positive_int(_MEM_SECONDS_ENV, 3),
        storage_seconds=_read_positive_int(_STORAGE_SECONDS_ENV, 3),
        log_level=_read_log_level("INFO"),
    )
