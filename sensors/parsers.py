"""Text parsers for diagnostic output.

Each parser takes raw text and returns the extracted value, or ``None`` when
the text does not contain what it looks for.
"""

from __future__ import annotations

import math
import re
from typing import Dict, Iterable, Optional

_NUMBER = re.compile(r"[-+]?\d+(?:\.\d+)?")
_SENSORS_LINE = re.compile(r"temp1_input|Core 0")
_WIFI_NAME = re.compile(r"^(wlan|wlp|wifi)")

MILLIDEGREE_THRESHOLD = 1000


def _leading_number(text: str) -> Optional[float]:
    match = _NUMBER.match(text.strip())
    if match is None:
        return None
    return float(match.group(0))


def parse_firmware_temperature(text: str) -> Optional[float]:
    """Parse ``temp=48.3'C`` as printed by ``vcgencmd measure_temp``."""

    start = text.find("temp=")
    if start == -1:
        return None
    start += len("temp=")
    end = text.find("'C", start)
    if end == -1:
        return None
    try:
        value = float(text[start:end])
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def parse_hwmon_value(text: str) -> Optional[float]:
    """Parse a hwmon ``temp*_input`` value.

    Values above 1000 are millidegrees, anything else is already in degrees.
    """

    try:
        raw = int(text.strip())
    except ValueError:
        return None
    if raw > MILLIDEGREE_THRESHOLD:
        return raw / 1000.0
    return float(raw)


def parse_sensors_temperature(text: str) -> Optional[float]:
    """Parse the first ``temp1_input`` or ``Core 0`` line of ``sensors`` output."""

    for line in text.splitlines():
        if not _SENSORS_LINE.search(line):
            continue
        _, sep, rest = line.partition(":")
        if not sep:
            return None
        return _leading_number(rest)
    return None


def parse_meminfo(text: str) -> Optional[float]:
    """Return used memory as a percentage of ``MemTotal``."""

    values: Dict[str, int] = {}
    for line in text.splitlines():
        key, sep, rest = line.partition(":")
        if not sep or key not in ("MemTotal", "MemAvailable"):
            continue
        fields = rest.split()
        if not fields:
            continue
        try:
            values[key] = int(fields[0])
        except ValueError:
            continue

    total = values.get("MemTotal", 0)
    if total <= 0:
        return None
    available = values.get("MemAvailable", 0)
    return 100.0 * (total - available) / total


def parse_df_percent(text: str) -> Optional[int]:
    """Extract the use percentage from the last row of ``df`` output."""

    rows = [line for line in text.splitlines() if line.strip()]
    if len(rows) < 2:
        return None
    fields = rows[-1].split()
    if len(fields) < 5:
        return None
    try:
        return int(fields[4].rstrip("%"))
    except ValueError:
        return None


def parse_link_up(text: str) -> bool:
    """True when ``ip addr show`` reports the link up with an IPv4 address."""

    return "state UP" in text and "inet " in text


def find_wifi_interface(names: Iterable[str]) -> Optional[str]:
    """First wireless-looking interface name, in sorted order."""

    for name in sorted(names):
        if _WIFI_NAME.match(name):
            return name
    return None
