from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from errors import WriteFailed
from models.display import Frame, Led, fit_text
from settings import get_settings

logger = logging.getLogger(__name__)


class SysfsOutputSink:
    """Writes the display text and LED brightness files.

    Each write opens, writes and closes its endpoint on its own. A missing or
    unwritable endpoint is reported through the return value, never raised.
    """

    def __init__(self, display_path: Path, led_root: Path) -> None:
        self.display_path = display_path
        self.led_root = led_root

    def led_path(self, led: Led) -> Path:
        return self.led_root / f":{led.value}" / "brightness"

    def display_available(self) -> bool:
        return self.display_path.exists()

    def write_display_text(self, text: str) -> bool:
        payload = fit_text(text)
        try:
            self._write(self.display_path, payload)
        except WriteFailed as exc:
            logger.debug("Display write skipped", extra={"path": exc.path, "reason": exc.reason})
            return False
        return True

    def set_led(self, led: Led, on: bool) -> bool:
        path = self.led_path(led)
        try:
            self._write(path, "1" if on else "0")
        except WriteFailed as exc:
            logger.debug(
                "LED write skipped",
                extra={"led": led.value, "path": exc.path, "reason": exc.reason},
            )
            return False
        return True

    def apply(self, frame: Frame) -> None:
        self.write_display_text(frame.text)
        for led in Led:
            self.set_led(led, frame.leds[led])

    def clear(self) -> None:
        self.write_display_text("")
        for led in Led:
            self.set_led(led, False)

    @staticmethod
    def _write(path: Path, payload: str) -> None:
        try:
            with path.open("w") as handle:
                handle.write(payload)
        except OSError as exc:
            raise WriteFailed(str(path), exc.strerror or str(exc)) from exc


@lru_cache
def build_default_sink(
    display_path: Optional[str] = None,
    led_root: Optional[str] = None,
) -> SysfsOutputSink:
    settings = get_settings()
    display = settings.display_path if display_path is None else display_path
    root = settings.led_root if led_root is None else led_root
    return SysfsOutputSink(display_path=Path(display), led_root=Path(root))
