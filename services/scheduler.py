"""Time-sliced display rotation."""

from __future__ import annotations

import math
from typing import Sequence, Tuple

from models.display import DisplayMode

DEFAULT_SCHEDULE: Tuple[Tuple[DisplayMode, int], ...] = (
    (DisplayMode.clock, 10),
    (DisplayMode.cpu_stat, 4),
    (DisplayMode.mem_stat, 3),
    (DisplayMode.storage_stat, 3),
)


class DisplayModeScheduler:
    """Maps elapsed seconds onto the active display mode.

    The schedule is an ordered partition of one cycle. Only whole seconds
    count, so any tick period up to one second observes every slot.
    """

    def __init__(self, schedule: Sequence[Tuple[DisplayMode, int]] = DEFAULT_SCHEDULE) -> None:
        if not schedule:
            raise ValueError("Schedule must contain at least one mode.")
        if any(seconds <= 0 for _, seconds in schedule):
            raise ValueError("Schedule durations must be positive.")
        self.schedule = tuple(schedule)
        self.cycle_length = sum(seconds for _, seconds in self.schedule)

    def position(self, elapsed: float) -> int:
        return math.floor(elapsed) % self.cycle_length

    def mode_at(self, elapsed: float) -> DisplayMode:
        position = self.position(elapsed)
        boundary = 0
        for mode, seconds in self.schedule:
            boundary += seconds
            if position < boundary:
                return mode
        raise AssertionError("position outside of cycle")  # pragma: no cover

    @staticmethod
    def is_even_second(elapsed: float) -> bool:
        return math.floor(elapsed) % 2 == 0


def schedule_from_settings(clock: int, cpu: int, mem: int, storage: int) -> DisplayModeScheduler:
    return DisplayModeScheduler(
        (
            (DisplayMode.clock, clock),
            (DisplayMode.cpu_stat, cpu),
            (DisplayMode.mem_stat, mem),
            (DisplayMode.storage_stat, storage),
        )
    )
