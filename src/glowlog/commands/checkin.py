"""Check-in management commands."""

import base64
import mimetypes
from pathlib import Path

import click

from ..models.checkin import ViewMode
from ..services.checkins import Capture, SaveResult
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    echo_warning,
    ensure_initialized,
    format_table,
    load_service,
)


def image_to_data_uri(path: Path) -> str:
    """Encode an image file as a data URI."""
    mime_type, _ = mimetypes.guess_type(path.name)
    encoded = base64.b64encode(path.read_bytes()).decode("ascii")
    return f"data:{mime_type or 'image/jpeg'};base64,{encoded}"


def report_save(result: SaveResult) -> None:
    """Echo a storage warning for a mutation that was not persisted."""
    if result.warning:
        echo_warning(result.warning)


@click.group()
def checkin():
    """Record, list and delete photo check-ins."""
    pass


@checkin.command("add")
@click.option(
    "--front",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=True,
    help="Front-facing photo",
)
@click.option(
    "--side",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=True,
    help="Side-profile photo",
)
@click.option("--routine", "routine_id", default=None, help="Routine that preceded the check-in")
@click.pass_context
@async_command
async def add(ctx: click.Context, front: Path, side: Path, routine_id: str | None):
    """Record a check-in from a front and a side photo."""
    ensure_initialized(ctx)

    service = await load_service()
    capture = Capture(front=image_to_data_uri(front), side=image_to_data_uri(side))
    result = await service.record_capture(capture, routine_id=routine_id)

    echo_success(f"Check-in {result.record.id} recorded")
    report_save(result)

    summary = service.summary()
    echo_info(f"Current streak: {summary.count} day(s)")


@checkin.command("list")
@click.option(
    "--mode",
    type=click.Choice([m.value for m in ViewMode]),
    default=ViewMode.FRONT.value,
    help="Photo angle to report",
)
@click.pass_context
@async_command
async def list_checkins(ctx: click.Context, mode: str):
    """List check-ins, most recent first."""
    ensure_initialized(ctx)

    service = await load_service()
    frames = service.gallery(ViewMode(mode))
    if not frames:
        echo_info("No check-ins yet. Finish a routine and add one.")
        return

    rows = []
    for frame in frames:
        if frame.missing_side:
            photo = "no side view"
        elif frame.record.legacy_image:
            photo = "legacy photo"
        else:
            photo = "yes"
        rows.append(
            [
                frame.record.id,
                frame.record.date.strftime("%Y-%m-%d %H:%M"),
                frame.record.routine_id,
                photo,
            ]
        )

    click.echo(f"{len(frames)} records so far")
    click.echo()
    click.echo(format_table(["ID", "Date", "Routine", f"{mode.title()} photo"], rows))


@checkin.command("delete")
@click.argument("record_id")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
@click.pass_context
@async_command
async def delete(ctx: click.Context, record_id: str, yes: bool):
    """Delete a check-in permanently."""
    ensure_initialized(ctx)

    service = await load_service()
    if service.get(record_id) is None:
        echo_error(f"Check-in {record_id} not found.")
        ctx.exit(1)

    if not yes and not click.confirm("Delete this record?"):
        echo_info("Cancelled.")
        return

    result = await service.delete(record_id)
    echo_success(f"Check-in {record_id} deleted")
    report_save(result)
