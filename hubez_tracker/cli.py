"""
Command-line interface for the hub-ez tracker.
"""

import click

from hubez_tracker import __version__
from hubez_tracker.exceptions import UsageError


@click.command()
@click.version_option(version=__version__, prog_name="hubez-tracker")
@click.argument("tracking_number")
@click.option(
    "--env-file", "-e",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to a .env file with TELEGRAM_BOT_TOKEN / TELEGRAM_BOT_USER",
)
@click.option(
    "--interval", "-i",
    type=click.FloatRange(min=0),
    default=None,
    help="Seconds between polls (default: POLL_INTERVAL or 1.0)",
)
@click.option(
    "--log-level", "-l",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Log level (default: LOG_LEVEL or INFO)",
)
def cli(tracking_number, env_file, interval, log_level):
    """Watch TRACKING_NUMBER on hub-ez and push new events to Telegram."""
    tracking_number = tracking_number.strip()
    if not tracking_number:
        raise UsageError("tracking number must not be empty", click.get_current_context())
    
    from hubez_tracker.core import run_tracker
    run_tracker(
        tracking_number,
        env_file=env_file,
        interval=interval,
        log_level=log_level.upper() if log_level else None,
    )


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
