"""Calendar and streak commands."""

from datetime import datetime

import click

from ..models.calendar import CalendarDay
from ..services.calendar import weekday_labels
from .base import async_command, echo_error, ensure_initialized, load_service


def render_grid(cells: list[CalendarDay | None]) -> str:
    """Render month cells as a 7-column text grid.

    Completed days are marked with ``*``, today with brackets.
    """
    lines = [" ".join(label.rjust(4) for label in weekday_labels())]
    row: list[str] = []
    for cell in cells:
        if cell is None:
            text = ""
        else:
            text = f"{cell.day}{'*' if cell.is_completed else ''}"
            if cell.is_today:
                text = f"[{text}]"
        row.append(text.rjust(4))
        if len(row) == 7:
            lines.append(" ".join(row))
            row = []
    if row:
        lines.append(" ".join(row))
    return "\n".join(line.rstrip() for line in lines)


@click.command()
@click.option("--month", "month_str", default=None, help="Month to show as YYYY-MM")
@click.pass_context
@async_command
async def calendar(ctx: click.Context, month_str: str | None):
    """Show the check-in calendar for a month."""
    ensure_initialized(ctx)

    year = month = None
    if month_str:
        try:
            parsed = datetime.strptime(month_str, "%Y-%m")
        except ValueError:
            echo_error(f"Invalid month {month_str!r}, expected YYYY-MM.")
            ctx.exit(1)
        year, month = parsed.year, parsed.month

    service = await load_service()
    cells = service.month_grid(year=year, month=month)
    summary = service.summary()

    first_day = next(cell for cell in cells if cell is not None)
    click.echo()
    click.echo(click.style(first_day.day_key.strftime("%B %Y"), bold=True))
    click.echo(f"{summary.get_status_display()}  |  streak: {summary.count} day(s)")
    click.echo()
    click.echo(render_grid(cells))


@click.command()
@click.pass_context
@async_command
async def streak(ctx: click.Context):
    """Show the current check-in streak."""
    ensure_initialized(ctx)

    service = await load_service()
    summary = service.summary()

    flame = click.style("*", fg="red") if summary.count > 0 else "-"
    click.echo(f"{flame} {summary.count} day streak")
    click.echo(summary.get_status_display())
    click.echo(f"Total check-ins: {summary.total_check_ins}")
