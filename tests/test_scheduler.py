"""Unit tests for the display rotation schedule."""

from __future__ import annotations

import pytest

from models.display import DisplayMode
from services.scheduler import DisplayModeScheduler, schedule_from_settings


@pytest.fixture()
def scheduler() -> DisplayModeScheduler:
    return DisplayModeScheduler()


@pytest.mark.parametrize(
    ("elapsed", "expected"),
    [
        (0, DisplayMode.clock),
        (9, DisplayMode.clock),
        (10, DisplayMode.cpu_stat),
        (13, DisplayMode.cpu_stat),
        (14, DisplayMode.mem_stat),
        (16, DisplayMode.mem_stat),
        (17, DisplayMode.storage_stat),
        (19, DisplayMode.storage_stat),
    ],
)
def test_default_partition(scheduler: DisplayModeScheduler, elapsed: int, expected: DisplayMode) -> None:
    assert scheduler.mode_at(elapsed) is expected


def test_cycle_is_periodic(scheduler: DisplayModeScheduler) -> None:
    assert scheduler.cycle_length == 20
    for elapsed in range(0, 200):
        assert scheduler.mode_at(elapsed) is scheduler.mode_at(elapsed % 20)


def test_fractional_seconds_use_whole_second(scheduler: DisplayModeScheduler) -> None:
    assert scheduler.mode_at(9.99) is DisplayMode.clock
    assert scheduler.mode_at(10.01) is DisplayMode.cpu_stat
    assert scheduler.mode_at(39.5) is DisplayMode.storage_stat


def test_is_even_second() -> None:
    assert DisplayModeScheduler.is_even_second(0) is True
    assert DisplayModeScheduler.is_even_second(1) is False
    assert DisplayModeScheduler.is_even_second(2.7) is True
    assert DisplayModeScheduler.is_even_second(3.2) is False


def test_custom_schedule_keeps_order() -> None:
    scheduler = schedule_from_settings(clock=2, cpu=1, mem=1, storage=1)

    assert scheduler.cycle_length == 5
    assert [scheduler.mode_at(e) for e in range(5)] == [
        DisplayMode.clock,
        DisplayMode.clock,
        DisplayMode.cpu_stat,
        DisplayMode.mem_stat,
        DisplayMode.storage_stat,
    ]


def test_rejects_non_positive_durations() -> None:
    with pytest.raises(ValueError):
        DisplayModeScheduler(((DisplayMode.clock, 0),))
    with pytest.raises(ValueError):
        DisplayModeScheduler(())
