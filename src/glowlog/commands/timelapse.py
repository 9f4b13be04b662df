"""Timelapse playback command."""

import click

from ..config import get_settings
from ..models.checkin import ViewMode
from ..services.playback import PlaybackController
from ..services.timeline import TimelineFrame
from .base import async_command, echo_info, ensure_initialized, load_service


def describe_frame(frame: TimelineFrame) -> str:
    """One-line description of a timelapse frame."""
    line = f"{frame.position_label}  {frame.record.date.strftime('%Y-%m-%d')}"
    if frame.missing_side:
        return line + "  (no side view for this date)"
    return line + f"  {frame.view_mode.value} photo, {len(frame.image)} bytes"


@click.command()
@click.option(
    "--mode",
    type=click.Choice([m.value for m in ViewMode]),
    default=ViewMode.FRONT.value,
    help="Photo angle to play",
)
@click.option("--interval-ms", type=int, default=None, help="Milliseconds per frame")
@click.pass_context
@async_command
async def timelapse(ctx: click.Context, mode: str, interval_ms: int | None):
    """Play check-ins oldest to newest."""
    ensure_initialized(ctx)

    service = await load_service()
    sequencer = service.timeline(ViewMode(mode))
    if len(sequencer) < 2:
        echo_info("Need at least two check-ins to compare changes.")
        return

    settings = get_settings()
    interval = interval_ms / 1000 if interval_ms is not None else settings.playback_interval

    def on_change(frame: TimelineFrame | None) -> None:
        if frame is not None:
            click.echo(describe_frame(frame))

    controller = PlaybackController(sequencer, interval=interval, on_change=on_change)
    on_change(sequencer.frame())
    try:
        await controller.run_to_end()
    finally:
        controller.close()
