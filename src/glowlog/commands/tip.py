"""Daily tip command."""

import click

from ..services.tips import DailyTipService
from .base import async_command


@click.command()
@async_command
async def tip():
    """Print today's motivational tip.

    No tip source is wired into the CLI, so this prints the offline tip.
    """
    service = DailyTipService()
    text = await service.get_tip()
    label = "" if service.has_source else " (offline tip)"
    click.echo(f'"{text}"{label}')
