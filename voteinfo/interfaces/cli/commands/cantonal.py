"""Show the results of cantonal issues of a voting day."""

import asyncio

import click

from voteinfo.application.usecases.fetch_voting_results_usecase import (
    FetchVotingResultsUseCase,
)
from voteinfo.domain.services.title_resolver import (
    DEFAULT_LANGUAGE_ORDER,
    get_title_with_fallback,
)
from voteinfo.domain.value_objects.issue_title import Language
from voteinfo.domain.value_objects.voting_day import CantonalData, CantonIssues
from voteinfo.interfaces.cli.base import (
    LANGUAGE_CHOICE,
    format_accepted,
    format_ratio,
    with_error_handling,
)


@click.command()
@click.option("--url", default=None, help="Dataset URL (default: newest in catalog)")
@click.option("--lang", type=LANGUAGE_CHOICE, default="de", help="Title language")
@click.option("--canton", default=None, help="Only this canton (name or number)")
@with_error_handling
def cantonal(url: str | None, lang: str, canton: str | None):
    """Show the cantonal issues of a voting day."""
    data = asyncio.run(_fetch(url))
    languages = (Language(lang), *DEFAULT_LANGUAGE_ORDER)

    click.echo(f"=== Voting day {data.voting_day} (as of {data.timestamp}) ===")
    if canton:
        selected = data.find_canton(canton)
        if selected is None:
            raise click.ClickException(f"Canton not found: {canton}")
        cantons: tuple[CantonIssues, ...] = (selected,)
    else:
        cantons = data.cantons

    for entry in cantons:
        _echo_canton(entry, languages)


async def _fetch(url: str | None) -> CantonalData:
    use_case = FetchVotingResultsUseCase()
    if url:
        return await use_case.cantonal_by_url(url)
    return await use_case.cantonal_latest()


def _echo_canton(canton: CantonIssues, languages: tuple[Language, ...]) -> None:
    click.echo(f"\n--- {canton.geo_level_name} ---")
    if canton.no_information_yet or not canton.issues:
        click.echo("    No information published yet.")
        return

    for issue in sorted(canton.issues, key=lambda i: i.display_order):
        title = get_title_with_fallback(issue.titles, languages) or (
            f"#{issue.issue_id}"
        )
        accepted = issue.issue_accepted if issue.issue_completed else None
        click.echo(f"  [{issue.display_order}] {title}: {format_accepted(accepted)}")
        line = (
            f"      yes {format_ratio(issue.outcome.yes_ratio())}"
            f"  turnout {format_ratio(issue.outcome.turnout())}"
        )
        if not issue.subdivisions.is_empty:
            line += f"  ({len(issue.subdivisions)} {issue.subdivisions.kind.value})"
        click.echo(line)
