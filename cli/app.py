from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Optional

import typer

from cli.render import render_status
from errors import PrivilegeError, ensure_privileged
from logging_config import configure_logging
from outputs.sysfs import SysfsOutputSink, build_default_sink
from services.controller import build_default_controller, install_signal_handlers


@dataclass
class CLIState:
    display_path: Optional[str]
    led_root: Optional[str]


app = typer.Typer(
    help="Drive the 4-digit VFD clock and status LEDs.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _get_state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        typer.secho("CLI state is uninitialized.", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return state


def _require_privilege() -> None:
    try:
        ensure_privileged()
    except PrivilegeError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


def _sink(state: CLIState) -> SysfsOutputSink:
    return build_default_sink(state.display_path, state.led_root)


@app.callback()
def main(
    ctx: typer.Context,
    display_path: Optional[str] = typer.Option(
        None,
        "--display-path",
        help="Display text endpoint (defaults to VFD_DISPLAY_PATH env or the SPI sysfs node).",
    ),
    led_root: Optional[str] = typer.Option(
        None,
        "--led-root",
        help="Directory holding the :<led>/brightness files (defaults to VFD_LED_ROOT env or /sys/class/leds).",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (defaults to LOG_LEVEL env or INFO).",
    ),
) -> None:
    """Entry point for the CLI."""
    configure_logging(log_level.upper() if log_level else None)
    ctx.obj = CLIState(display_path=display_path, led_root=led_root)


@app.command("run")
def run_command(ctx: typer.Context) -> None:
    """Cycle the clock and system stats until interrupted."""
    state = _get_state(ctx)
    _require_privilege()
    controller = build_default_controller(state.display_path, state.led_root)
    stop = threading.Event()
    install_signal_handlers(stop)
    typer.echo("Starting 4-digit VFD controller")
    typer.echo(f"Display text path: {controller.sink.display_path}")
    controller.run(stop)


@app.command("show")
def show_command(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Text to show; padded or truncated to 4 characters."),
) -> None:
    """Write a single text to the display."""
    state = _get_state(ctx)
    _require_privilege()
    if not _sink(state).write_display_text(text):
        typer.secho("Display endpoint is not writable.", fg=typer.colors.YELLOW, err=True)
        return
    typer.secho("Display updated.", fg=typer.colors.GREEN)


@app.command("clear")
def clear_command(ctx: typer.Context) -> None:
    """Blank the display and turn every LED off."""
    state = _get_state(ctx)
    _require_privilege()
    _sink(state).clear()
    typer.echo("Display cleared.")


@app.command("status")
def status_command(ctx: typer.Context) -> None:
    """Print current readings and the frame that would be written."""
    state = _get_state(ctx)
    controller = build_default_controller(state.display_path, state.led_root)
    snapshot = controller.provider.snapshot()
    frame = controller.frame_for(snapshot)
    render_status(snapshot, frame)
