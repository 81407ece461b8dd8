"""Show the results of a federal voting day."""

import asyncio

import click

from voteinfo.application.usecases.fetch_voting_results_usecase import (
    FetchVotingResultsUseCase,
)
from voteinfo.domain.services.title_resolver import (
    DEFAULT_LANGUAGE_ORDER,
    get_title_with_fallback,
)
from voteinfo.domain.value_objects.issue import NationalIssue
from voteinfo.domain.value_objects.issue_title import Language
from voteinfo.domain.value_objects.voting_day import NationalData
from voteinfo.interfaces.cli.base import (
    LANGUAGE_CHOICE,
    format_accepted,
    format_ratio,
    with_error_handling,
)


@click.command()
@click.option("--url", default=None, help="Dataset URL (default: newest in catalog)")
@click.option("--lang", type=LANGUAGE_CHOICE, default="de", help="Title language")
@click.option("--cantons", "show_cantons", is_flag=True, help="Show canton results")
@with_error_handling
def national(url: str | None, lang: str, show_cantons: bool):
    """Show the federal issues of a voting day."""
    data = asyncio.run(_fetch(url))
    languages = (Language(lang), *DEFAULT_LANGUAGE_ORDER)

    click.echo(f"=== Voting day {data.voting_day} (as of {data.timestamp}) ===")
    if data.country.no_information_yet:
        click.echo("No information published yet.")
    for issue in sorted(data.issues, key=lambda i: i.display_order):
        _echo_issue(issue, languages, show_cantons)


async def _fetch(url: str | None) -> NationalData:
    use_case = FetchVotingResultsUseCase()
    if url:
        return await use_case.national_by_url(url)
    return await use_case.national_latest()


def _echo_issue(
    issue: NationalIssue, languages: tuple[Language, ...], show_cantons: bool
) -> None:
    title = get_title_with_fallback(issue.titles, languages) or f"#{issue.issue_id}"
    accepted = issue.issue_accepted if issue.issue_completed else None
    status = format_accepted(accepted)
    if issue.provisional:
        status += " (provisional)"

    click.echo(f"\n[{issue.display_order}] {title}: {status}")
    outcome = issue.outcome
    click.echo(
        f"    yes {format_ratio(outcome.yes_ratio())}"
        f"  turnout {format_ratio(outcome.turnout())}"
        f"  valid {outcome.valid_votes():,}"
    )
    if issue.double_majority:
        majority = issue.cantons_majority
        click.echo(
            f"    cantons yes {majority.yes_cantons():g}"
            f" / no {majority.no_cantons():g}"
        )

    if show_cantons:
        for canton in issue.cantons:
            click.echo(
                f"    {canton.geo_level_name:<24}"
                f" yes {format_ratio(canton.outcome.yes_ratio()):>6}"
                f"  turnout {format_ratio(canton.outcome.turnout()):>6}"
            )
