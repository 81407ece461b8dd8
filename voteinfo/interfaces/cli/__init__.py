"""voteinfo command line interface."""

import click

from voteinfo.common.logging import setup_logging
from voteinfo.infrastructure.config.settings import get_settings
from voteinfo.interfaces.cli.commands.cantonal import cantonal
from voteinfo.interfaces.cli.commands.latest_url import latest_url
from voteinfo.interfaces.cli.commands.national import national


@click.group()
@click.option("--log-level", default=None, help="Override VOTEINFO_LOG_LEVEL")
def cli(log_level: str | None):
    """Swiss voting-day results from opendata.swiss."""
    settings = get_settings()
    setup_logging(log_level or settings.LOG_LEVEL, settings.LOG_FORMAT)


cli.add_command(national)
cli.add_command(cantonal)
cli.add_command(latest_url)
