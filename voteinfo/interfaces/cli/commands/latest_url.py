"""Print the URL of the newest dataset in the catalog."""

import asyncio

import click

from voteinfo.application.usecases.fetch_voting_results_usecase import (
    DatasetKind,
    FetchVotingResultsUseCase,
)
from voteinfo.interfaces.cli.base import with_error_handling


@click.command("latest-url")
@click.argument(
    "kind", type=click.Choice([kind.value for kind in DatasetKind]), default="national"
)
@with_error_handling
def latest_url(kind: str):
    """Print the URL of the newest national or cantonal dataset."""
    url = asyncio.run(FetchVotingResultsUseCase().latest_url(DatasetKind(kind)))
    click.echo(url)
