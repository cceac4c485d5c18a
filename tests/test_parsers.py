"""Parsers are fed canned diagnostic output; no commands are run."""

from __future__ import annotations

import pytest

from sensors.parsers import (
    find_wifi_interface,
    parse_df_percent,
    parse_firmware_temperature,
    parse_hwmon_value,
    parse_link_up,
    parse_meminfo,
    parse_sensors_temperature,
)

SENSORS_OUTPUT = """\
cpu_thermal-virtual-0
Adapter: Virtual device
temp1:
  temp1_input: 47.774
  temp1_crit: 110.000
"""

CORETEMP_OUTPUT = """\
coretemp-isa-0000
Adapter: ISA adapter
Package id 0:  +52.0°C  (high = +80.0°C, crit = +100.0°C)
Core 0:        +49.0°C  (high = +80.0°C, crit = +100.0°C)
"""

DF_OUTPUT = """\
Filesystem     1024-blocks    Used Available Capacity Mounted on
/dev/root         30358348 9712412  19339264      34% /
"""

IP_UP = """\
2: eth0: <BROADCAST,MULTICAST,UP,LOWER_UP> mtu 1500 qdisc mq state UP group default qlen 1000
    link/ether dc:a6:32:00:00:01 brd ff:ff:ff:ff:ff:ff
    inet 192.168.1.20/24 brd 192.168.1.255 scope global dynamic eth0
"""

IP_UP_NO_ADDRESS = """\
2: eth0: <BROADCAST,MULTICAST,UP,LOWER_UP> mtu 1500 qdisc mq state UP group default qlen 1000
    link/ether dc:a6:32:00:00:01 brd ff:ff:ff:ff:ff:ff
"""


def test_firmware_temperature() -> None:
    assert parse_firmware_temperature("temp=48.3'C\n") == 48.3


@pytest.mark.parametrize(
    "text",
    ["", "error", "temp=48.3", "temp=abc'C", "temp=nan'C", "temp=inf'C", "temp=-inf'C", "temp=1e400'C"],
)
def test_firmware_temperature_unparsable(text: str) -> None:
    assert parse_firmware_temperature(text) is None


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("45321\n", 45.321), ("1000", 1000.0), ("55", 55.0)],
)
def test_hwmon_value(raw: str, expected: float) -> None:
    assert parse_hwmon_value(raw) == expected


def test_hwmon_value_garbage() -> None:
    assert parse_hwmon_value("n/a") is None


def test_sensors_temperature_raw_mode() -> None:
    assert parse_sensors_temperature(SENSORS_OUTPUT) == 47.774


def test_sensors_temperature_core_line() -> None:
    assert parse_sensors_temperature(CORETEMP_OUTPUT) == 49.0


def test_sensors_temperature_without_match() -> None:
    assert parse_sensors_temperature("nouveau-pci-0100\nfan1: 1200 RPM\n") is None


def test_meminfo_usage() -> None:
    text = "MemTotal:           1000 kB\nMemFree:             100 kB\nMemAvailable:        250 kB\n"

    assert parse_meminfo(text) == 75.0


def test_meminfo_without_total() -> None:
    assert parse_meminfo("MemAvailable: 250 kB\n") is None
    assert parse_meminfo("MemTotal: 0 kB\nMemAvailable: 0 kB\n") is None


def test_df_percent() -> None:
    assert parse_df_percent(DF_OUTPUT) == 34


@pytest.mark.parametrize("text", ["", "Filesystem Size\n", "header\n/dev/root 1 2 3 full /\n"])
def test_df_percent_unparsable(text: str) -> None:
    assert parse_df_percent(text) is None


def test_link_up_requires_state_and_address() -> None:
    assert parse_link_up(IP_UP) is True
    assert parse_link_up(IP_UP_NO_ADDRESS) is False
    assert parse_link_up(IP_UP.replace("state UP", "state DOWN")) is False


def test_find_wifi_interface() -> None:
    assert find_wifi_interface(["lo", "wlp2s0", "eth0", "wlan0"]) == "wlan0"
    assert find_wifi_interface(["lo", "eth0", "docker0"]) is None
