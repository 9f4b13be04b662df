"""Initialize project command."""

import click

from ..config import get_settings
from ..db import get_db_path, init_db
from .base import async_command, echo_info, echo_success


@click.command()
@async_command
async def init():
    """Initialize the glowlog data directory and database."""
    data_dir = get_settings().data_dir
    db_path = get_db_path(data_dir)

    echo_info(f"Initializing glowlog in {data_dir}")
    await init_db(db_path)
    echo_success("Database initialized")

    click.echo()
    click.echo("Next steps:")
    click.echo("  glowlog checkin add --front front.jpg --side side.jpg")
    click.echo("  glowlog calendar")
