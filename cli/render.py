from __future__ import annotations

from typing import Any, Iterable

import typer

from models.display import Frame, Led
from models.readings import SensorSnapshot


def echo_heading(text: str) -> None:
    typer.secho(text, bold=True)


def echo_key_values(pairs: Iterable[tuple[str, Any]]) -> None:
    for key, value in pairs:
        typer.echo(f"{key}: {value}")


def render_status(snapshot: SensorSnapshot, frame: Frame) -> None:
    echo_heading("Sensors")
    echo_key_values(
        [
            ("temperature", f"{snapshot.temperature:.1f}C"),
            ("memory", f"{snapshot.memory_percent:.1f}%"),
            ("disk", f"{snapshot.disk_percent}%"),
            ("wifi", "up" if snapshot.link.wifi else "down"),
            ("ethernet", "up" if snapshot.link.ethernet else "down"),
        ]
    )

    typer.echo()
    echo_heading("Display")
    echo_key_values([("mode", frame.mode.value), ("text", f"[{frame.text}]")])

    typer.echo()
    echo_heading("LEDs")
    for led in Led:
        typer.echo(f"  - {led.value}: {'on' if frame.leds[led] else 'off'}")
