"""Shared CLI utilities."""

import asyncio
from functools import wraps

import click

from ..config import get_settings
from ..db import CheckInStore, get_db_path
from ..errors import StorageError
from ..services.checkins import CheckInService


def async_command(f):
    """Decorator to run async Click commands."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def ensure_initialized(ctx: click.Context) -> None:
    """Ensure the database is initialized."""
    db_path = get_db_path(get_settings().data_dir)
    if not db_path.exists():
        click.echo(
            click.style("Error: ", fg="red")
            + "Project not initialized. Run 'glowlog init' first."
        )
        ctx.exit(1)


async def load_service() -> CheckInService:
    """Build a check-in service over the configured store and load it.

    Exits the current command with an error if the stored collection
    cannot be read.
    """
    settings = get_settings()
    store = CheckInStore(
        get_db_path(settings.data_dir),
        max_payload_bytes=settings.max_payload_bytes,
    )
    service = CheckInService(store, tz=settings.tz)
    try:
        await service.load()
    except StorageError as e:
        echo_error(f"Could not load check-ins: {e}")
        click.get_current_context().exit(1)
    return service


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.echo(click.style("[WARN] ", fg="yellow") + message)


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = ["".join(h.ljust(widths[i] + padding) for i, h in enumerate(headers))]
    lines.append("".join("-" * w + " " * padding for w in widths))
    for row in rows:
        lines.append(
            "".join(str(cell).ljust(widths[i] + padding) for i, cell in enumerate(row))
        )

    return "\n".join(line.rstrip() for line in lines)
