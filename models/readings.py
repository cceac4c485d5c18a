"""Point-in-time sensor readings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class LinkStatus:
    """Whether each network link is up with an address assigned."""

    wifi: bool = False
    ethernet: bool = False


@dataclass(slots=True, frozen=True)
class SensorSnapshot:
    """All readings taken for a single tick. Never reused for the next tick."""

    temperature: float
    memory_percent: float
    disk_percent: int
    link: LinkStatus
