"""Conversion between published JSON and the domain value tree.

Pure mapping only: the caller decides whether a document is a national or a
cantonal dataset, fetching happens in ``client``.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar, cast

from pydantic import ValidationError

from voteinfo.common.logging import get_logger
from voteinfo.domain.exceptions import ParseError
from voteinfo.domain.services.resource_selection_service import ResourceDescriptor
from voteinfo.domain.value_objects.geo_unit import (
    Canton,
    Commune,
    Constituency,
    District,
    SubdivisionKind,
    Subdivisions,
)
from voteinfo.domain.value_objects.issue import (
    CantonalIssue,
    CantonsMajority,
    NationalIssue,
)
from voteinfo.domain.value_objects.issue_title import IssueTitle
from voteinfo.domain.value_objects.outcome import Outcome
from voteinfo.domain.value_objects.voting_day import (
    CantonalData,
    CantonIssues,
    Country,
    NationalData,
)
from voteinfo.infrastructure.external.voteinfo_api.field_mapping import semantic_name
from voteinfo.infrastructure.external.voteinfo_api.schema import (
    WireCanton,
    WireCantonalData,
    WireCantonalIssue,
    WireCantonIssues,
    WireCantonsMajority,
    WireCatalog,
    WireCommune,
    WireCountry,
    WireDistrict,
    WireIssueTitle,
    WireModel,
    WireNationalData,
    WireNationalIssue,
    WireOutcome,
    WireSubdivided,
)


logger = get_logger(__name__)

_W = TypeVar("_W", bound=WireModel)


def json_path(loc: Sequence[int | str]) -> str:
    """Render a pydantic error location as a JSON path.

    ("schweiz", "vorlagen", 0, "resultat") becomes
    "$.schweiz.vorlagen[0].resultat".
    """
    path = "$"
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}"
    return path


def _to_parse_error(error: ValidationError) -> ParseError:
    first = error.errors()[0]
    loc = first.get("loc", ())
    reason = first.get("msg", "invalid value")
    # Model-level errors end on an index and name no field of their own
    if loc and isinstance(loc[-1], str):
        reason = f"{reason} ({semantic_name(loc[-1])})"
    return ParseError(json_path(loc), reason)


def _validate(model: type[_W], text: str | bytes) -> _W:
    try:
        return model.model_validate_json(text)
    except ValidationError as e:
        parse_error = _to_parse_error(e)
        logger.warning("Cannot parse %s: %s", model.__name__, parse_error)
        raise parse_error from e


# --- published → domain ---


def _outcome(wire: WireOutcome) -> Outcome:
    return Outcome(
        count_completed=wire.count_completed,
        yes_votes=wire.yes_votes,
        no_votes=wire.no_votes,
        cast_ballot_papers=wire.cast_ballot_papers,
        eligible_voters=wire.eligible_voters,
    )


def _district(wire: WireDistrict) -> District:
    return District(
        geo_level_number=wire.geo_level_number,
        geo_level_name=wire.geo_level_name,
        outcome=_outcome(wire.outcome),
    )


def _commune(wire: WireCommune, cls: type[Commune] = Commune) -> Commune:
    return cls(
        geo_level_number=wire.geo_level_number,
        geo_level_name=wire.geo_level_name,
        geo_level_parent_number=wire.geo_level_parent_number,
        outcome=_outcome(wire.outcome),
    )


def _subdivisions(wire: WireSubdivided) -> Subdivisions:
    if wire.districts:
        return Subdivisions.districts([_district(d) for d in wire.districts])
    if wire.communes:
        return Subdivisions.communes([_commune(c) for c in wire.communes])
    if wire.constituencies:
        return Subdivisions.constituencies(
            [_commune(c, Constituency) for c in wire.constituencies]
        )
    return Subdivisions.none()


def _titles(wire: Sequence[WireIssueTitle]) -> tuple[IssueTitle, ...]:
    return tuple(IssueTitle(language=t.language, text=t.text) for t in wire)


def _canton(wire: WireCanton) -> Canton:
    return Canton(
        geo_level_number=wire.geo_level_number,
        geo_level_name=wire.geo_level_name,
        outcome=_outcome(wire.outcome),
        subdivisions=_subdivisions(wire),
    )


def _national_issue(wire: WireNationalIssue) -> NationalIssue:
    majority = wire.cantons_majority
    return NationalIssue(
        issue_id=wire.issue_id,
        display_order=wire.display_order,
        titles=_titles(wire.titles),
        issue_completed=wire.issue_completed,
        provisional=wire.provisional,
        issue_accepted=wire.issue_accepted,
        issue_type_id=wire.issue_type_id,
        main_issue_id=wire.main_issue_id,
        reserve_info_text=wire.reserve_info_text,
        double_majority=wire.double_majority,
        cantons_majority=CantonsMajority(
            yes_full_cantons=majority.yes_full_cantons,
            no_full_cantons=majority.no_full_cantons,
            full_canton_count=majority.full_canton_count,
            yes_half_cantons=majority.yes_half_cantons,
            no_half_cantons=majority.no_half_cantons,
            half_canton_count=majority.half_canton_count,
        ),
        outcome=_outcome(wire.outcome),
        cantons=tuple(_canton(c) for c in wire.cantons),
    )


def _cantonal_issue(wire: WireCantonalIssue) -> CantonalIssue:
    return CantonalIssue(
        issue_id=wire.issue_id,
        display_order=wire.display_order,
        titles=_titles(wire.titles),
        issue_completed=wire.issue_completed,
        issue_accepted=wire.issue_accepted,
        issue_type_id=wire.issue_type_id,
        main_issue_id=wire.main_issue_id,
        outcome=_outcome(wire.outcome),
        subdivisions=_subdivisions(wire),
    )


def parse_national_data(text: str | bytes) -> NationalData:
    """Parse a national dataset.

    Raises:
        ParseError: invalid JSON, or a missing or mistyped field
    """
    wire = _validate(WireNationalData, text)
    country = wire.country
    data = NationalData(
        voting_day=wire.voting_day,
        timestamp=wire.timestamp,
        country=Country(
            geo_level_number=country.geo_level_number,
            geo_level_name=country.geo_level_name,
            no_information_yet=country.no_information_yet,
            issues=tuple(_national_issue(i) for i in country.issues),
        ),
    )
    logger.debug(
        "Parsed national dataset of %s with %d issues",
        data.voting_day,
        len(data.issues),
    )
    return data


def parse_cantonal_data(text: str | bytes) -> CantonalData:
    """Parse a cantonal dataset.

    Raises:
        ParseError: invalid JSON, or a missing or mistyped field
    """
    wire = _validate(WireCantonalData, text)
    data = CantonalData(
        voting_day=wire.voting_day,
        timestamp=wire.timestamp,
        cantons=tuple(
            CantonIssues(
                geo_level_number=canton.geo_level_number,
                geo_level_name=canton.geo_level_name,
                no_information_yet=canton.no_information_yet,
                issues=tuple(_cantonal_issue(i) for i in canton.issues),
            )
            for canton in wire.cantons
        ),
    )
    logger.debug(
        "Parsed cantonal dataset of %s with %d cantons",
        data.voting_day,
        len(data.cantons),
    )
    return data


def parse_catalog(text: str | bytes) -> list[ResourceDescriptor]:
    """Parse a CKAN ``package_show`` response into resource descriptors."""
    wire = _validate(WireCatalog, text)
    return [
        ResourceDescriptor(coverage=r.coverage, url=r.url)
        for r in wire.result.resources
    ]


# --- domain → published ---


def _wire_outcome(outcome: Outcome) -> WireOutcome:
    return WireOutcome(
        count_completed=outcome.count_completed,
        yes_votes=outcome.yes_votes,
        no_votes=outcome.no_votes,
        cast_ballot_papers=outcome.cast_ballot_papers,
        eligible_voters=outcome.eligible_voters,
    )


def _wire_commune(commune: Commune) -> WireCommune:
    return WireCommune(
        geo_level_number=commune.geo_level_number,
        geo_level_name=commune.geo_level_name,
        geo_level_parent_number=commune.geo_level_parent_number,
        outcome=_wire_outcome(commune.outcome),
    )


def _wire_subdivisions(subdivisions: Subdivisions) -> dict[str, Any]:
    """Keyword arguments populating the single subdivision collection."""
    if subdivisions.kind is SubdivisionKind.DISTRICTS:
        return {
            "districts": [
                WireDistrict(
                    geo_level_number=d.geo_level_number,
                    geo_level_name=d.geo_level_name,
                    outcome=_wire_outcome(d.outcome),
                )
                for d in subdivisions
            ]
        }
    if subdivisions.kind is SubdivisionKind.COMMUNES:
        communes = cast(tuple[Commune, ...], subdivisions.units)
        return {"communes": [_wire_commune(c) for c in communes]}
    if subdivisions.kind is SubdivisionKind.CONSTITUENCIES:
        constituencies = cast(tuple[Constituency, ...], subdivisions.units)
        return {"constituencies": [_wire_commune(c) for c in constituencies]}
    return {}


def _wire_titles(titles: Sequence[IssueTitle]) -> list[WireIssueTitle]:
    return [WireIssueTitle(language=t.language, text=t.text) for t in titles]


def _wire_national_issue(issue: NationalIssue) -> WireNationalIssue:
    majority = issue.cantons_majority
    return WireNationalIssue(
        issue_id=issue.issue_id,
        display_order=issue.display_order,
        titles=_wire_titles(issue.titles),
        issue_completed=issue.issue_completed,
        provisional=issue.provisional,
        issue_accepted=issue.issue_accepted,
        issue_type_id=issue.issue_type_id,
        main_issue_id=issue.main_issue_id,
        reserve_info_text=issue.reserve_info_text,
        double_majority=issue.double_majority,
        cantons_majority=WireCantonsMajority(
            yes_full_cantons=majority.yes_full_cantons,
            no_full_cantons=majority.no_full_cantons,
            full_canton_count=majority.full_canton_count,
            yes_half_cantons=majority.yes_half_cantons,
            no_half_cantons=majority.no_half_cantons,
            half_canton_count=majority.half_canton_count,
        ),
        outcome=_wire_outcome(issue.outcome),
        cantons=[
            WireCanton(
                geo_level_number=c.geo_level_number,
                geo_level_name=c.geo_level_name,
                outcome=_wire_outcome(c.outcome),
                **_wire_subdivisions(c.subdivisions),
            )
            for c in issue.cantons
        ],
    )


def _wire_cantonal_issue(issue: CantonalIssue) -> WireCantonalIssue:
    return WireCantonalIssue(
        issue_id=issue.issue_id,
        display_order=issue.display_order,
        titles=_wire_titles(issue.titles),
        issue_completed=issue.issue_completed,
        issue_accepted=issue.issue_accepted,
        issue_type_id=issue.issue_type_id,
        main_issue_id=issue.main_issue_id,
        outcome=_wire_outcome(issue.outcome),
        **_wire_subdivisions(issue.subdivisions),
    )


def _dump(wire: WireModel) -> str:
    return wire.model_dump_json(by_alias=True, exclude_none=True)


def encode_national_data(data: NationalData) -> str:
    """Encode a national dataset in the published format."""
    country = data.country
    return _dump(
        WireNationalData(
            voting_day=data.voting_day,
            timestamp=data.timestamp,
            country=WireCountry(
                geo_level_number=country.geo_level_number,
                geo_level_name=country.geo_level_name,
                no_information_yet=country.no_information_yet,
                issues=[_wire_national_issue(i) for i in country.issues],
            ),
        )
    )


def encode_cantonal_data(data: CantonalData) -> str:
    """Encode a cantonal dataset in the published format."""
    return _dump(
        WireCantonalData(
            voting_day=data.voting_day,
            timestamp=data.timestamp,
            cantons=[
                WireCantonIssues(
                    geo_level_number=canton.geo_level_number,
                    geo_level_name=canton.geo_level_name,
                    no_information_yet=canton.no_information_yet,
                    issues=[_wire_cantonal_issue(i) for i in canton.issues],
                )
                for canton in data.cantons
            ],
        )
    )
