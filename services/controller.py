"""Polling loop that drives the display from sensor readings."""

from __future__ import annotations

import logging
import signal
import threading
import time
from datetime import datetime
from typing import Callable, Optional

from models.display import DisplayMode, Frame
from models.readings import SensorSnapshot
from outputs.sysfs import SysfsOutputSink, build_default_sink
from sensors.provider import SensorProvider
from services.encoder import StatusEncoder
from services.scheduler import DisplayModeScheduler, schedule_from_settings
from settings import get_settings

logger = logging.getLogger(__name__)


class VfdController:
    """Ties sensors, scheduling, encoding and output together.

    ``run`` takes a :class:`threading.Event` as its stop token. The token is
    checked once per tick and also cuts the sleep between ticks short.
    """

    def __init__(
        self,
        provider: SensorProvider,
        sink: SysfsOutputSink,
        scheduler: DisplayModeScheduler,
        encoder: StatusEncoder,
        tick_seconds: float = 0.5,
        boot_text: str = "TX3M",
        boot_hold_seconds: float = 1.0,
        clock: Callable[[], float] = time.monotonic,
        now: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.provider = provider
        self.sink = sink
        self.scheduler = scheduler
        self.encoder = encoder
        self.tick_seconds = tick_seconds
        self.boot_text = boot_text
        self.boot_hold_seconds = boot_hold_seconds
        self._clock = clock
        self._now = now
        self._cycle_start: Optional[float] = None
        self._last_mode: Optional[DisplayMode] = None
        self._shut_down = False

    def startup(self, stop: threading.Event) -> bool:
        """Show the boot text and report whether the display is present."""
        available = self.sink.display_available()
        logger.info(
            "Display probe",
            extra={"path": str(self.sink.display_path), "value": "present" if available else "absent"},
        )
        self.sink.write_display_text(self.boot_text)
        if available:
            stop.wait(self.boot_hold_seconds)
        self._cycle_start = self._clock()
        return available

    def elapsed(self) -> float:
        if self._cycle_start is None:
            self._cycle_start = self._clock()
        return self._clock() - self._cycle_start

    def frame_for(self, snapshot: SensorSnapshot) -> Frame:
        elapsed = self.elapsed()
        mode = self.scheduler.mode_at(elapsed)
        return self.encoder.encode(mode, snapshot, self._now(), elapsed)

    def current_frame(self) -> Frame:
        return self.frame_for(self.provider.snapshot())

    def tick(self) -> Frame:
        frame = self.current_frame()
        if frame.mode is not self._last_mode:
            logger.info("Display mode changed", extra={"mode": frame.mode.value, "text": frame.text})
            self._last_mode = frame.mode
        self.sink.apply(frame)
        return frame

    def run(self, stop: threading.Event) -> None:
        logger.info("Starting VFD controller", extra={"path": str(self.sink.display_path)})
        try:
            self.startup(stop)
            while not stop.is_set():
                self.tick()
                stop.wait(self.tick_seconds)
        finally:
            self.shutdown()

    def shutdown(self) -> None:
        """Blank the display and turn every LED off, once."""
        if self._shut_down:
            return
        self._shut_down = True
        logger.info("Exiting VFD controller")
        self.sink.clear()


def install_signal_handlers(stop: threading.Event) -> None:
    """Route SIGINT and SIGTERM onto ``stop``."""

    def _request_stop(signum: int, _frame: object) -> None:
        logger.info("Shutdown requested", extra={"reason": signal.Signals(signum).name})
        stop.set()

    signal.signal(signal.SIGINT, _request_stop)
    signal.signal(signal.SIGTERM, _request_stop)


def build_default_controller(
    display_path: Optional[str] = None,
    led_root: Optional[str] = None,
) -> VfdController:
    """Factory that wires the controller from settings."""
    settings = get_settings()
    scheduler = schedule_from_settings(
        settings.clock_seconds,
        settings.cpu_seconds,
        settings.mem_seconds,
        settings.storage_seconds,
    )
    return VfdController(
        provider=SensorProvider(),
        sink=build_default_sink(display_path, led_root),
        scheduler=scheduler,
        encoder=StatusEncoder(),
        tick_seconds=settings.tick_seconds,
        boot_text=settings.boot_text,
        boot_hold_seconds=settings.boot_hold_seconds,
    )
