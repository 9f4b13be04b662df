"""CLI entry point for glowlog."""

import click

from .commands import calendar, checkin, init, serve, streak, timelapse, tip
from .config import get_settings
from .logging_config import configure_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="glowlog")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """glowlog: face-yoga check-ins with a streak calendar and timelapse.

    Example usage:

        # Initialize the data directory
        glowlog init

        # Record today's check-in
        glowlog checkin add --front front.jpg --side side.jpg

        # See the calendar and streak
        glowlog calendar

        # Play the before/after timelapse
        glowlog timelapse --mode side
    """
    configure_logging("DEBUG" if verbose else get_settings().log_level)


main.add_command(init)
main.add_command(checkin)
main.add_command(calendar)
main.add_command(streak)
main.add_command(timelapse)
main.add_command(tip)
main.add_command(serve)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
