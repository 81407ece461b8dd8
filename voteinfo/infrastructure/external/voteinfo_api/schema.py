"""Wire models of the published voting-day datasets and the catalog.

Every field is declared with its published key as alias (see
``field_mapping.FIELD_NAMES``). Models are strict: numbers published as
strings, or strings published as numbers, are rejected instead of coerced.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, model_validator

from voteinfo.domain.value_objects.issue_title import Language
from voteinfo.infrastructure.external.voteinfo_api.field_mapping import (
    SUBDIVISION_KEYS,
)


class WireModel(BaseModel):
    """Base for all wire models."""

    model_config = ConfigDict(
        strict=True,
        frozen=True,
        populate_by_name=True,
        extra="ignore",
    )


class WireOutcome(WireModel):
    count_completed: bool = Field(alias="gebietAusgezaehlt")
    yes_votes: NonNegativeInt = Field(alias="jaStimmenAbsolut")
    no_votes: NonNegativeInt = Field(alias="neinStimmenAbsolut")
    cast_ballot_papers: NonNegativeInt = Field(alias="eingelegteStimmzettel")
    eligible_voters: NonNegativeInt = Field(alias="anzahlStimmberechtigte")


class WireDistrict(WireModel):
    geo_level_number: str = Field(alias="geoLevelnummer")
    geo_level_name: str = Field(alias="geoLevelname")
    outcome: WireOutcome = Field(alias="resultat")


class WireCommune(WireModel):
    geo_level_number: str = Field(alias="geoLevelnummer")
    geo_level_name: str = Field(alias="geoLevelname")
    geo_level_parent_number: str = Field(alias="geoLevelParentnummer")
    outcome: WireOutcome = Field(alias="resultat")


class WireSubdivided(WireModel):
    """Mixin for areas reporting at most one subdivision collection."""

    districts: list[WireDistrict] | None = Field(default=None, alias="bezirke")
    communes: list[WireCommune] | None = Field(default=None, alias="gemeinden")
    constituencies: list[WireCommune] | None = Field(
        default=None, alias="zaehlkreise"
    )

    @model_validator(mode="after")
    def check_single_subdivision(self) -> WireSubdivided:
        collections = (self.districts, self.communes, self.constituencies)
        populated = [
            key
            for key, units in zip(SUBDIVISION_KEYS, collections, strict=True)
            if units
        ]
        if len(populated) > 1:
            raise ValueError(
                "at most one subdivision collection may be populated, "
                f"got {', '.join(populated)}"
            )
        return self


class WireCanton(WireSubdivided):
    geo_level_number: str = Field(alias="geoLevelnummer")
    geo_level_name: str = Field(alias="geoLevelname")
    outcome: WireOutcome = Field(alias="resultat")


class WireIssueTitle(WireModel):
    language: Language = Field(alias="langKey")
    text: str


class WireCantonsMajority(WireModel):
    yes_full_cantons: NonNegativeInt = Field(alias="jaStaendeGanz")
    no_full_cantons: NonNegativeInt = Field(alias="neinStaendeGanz")
    full_canton_count: NonNegativeInt = Field(alias="anzahlStaendeGanz")
    yes_half_cantons: NonNegativeInt = Field(alias="jaStaendeHalb")
    no_half_cantons: NonNegativeInt = Field(alias="neinStaendeHalb")
    half_canton_count: NonNegativeInt = Field(alias="anzahlStaendeHalb")


class WireNationalIssue(WireModel):
    issue_id: NonNegativeInt = Field(alias="vorlagenId")
    display_order: NonNegativeInt = Field(alias="reihenfolgeAnzeige")
    titles: list[WireIssueTitle] = Field(alias="vorlagenTitel")
    issue_completed: bool = Field(alias="vorlageBeendet")
    provisional: bool = Field(alias="provisorisch")
    issue_accepted: bool = Field(alias="vorlageAngenommen")
    issue_type_id: NonNegativeInt = Field(alias="vorlagenArtId")
    main_issue_id: NonNegativeInt = Field(alias="hauptvorlagenId")
    reserve_info_text: str | None = Field(default=None, alias="reserveInfoText")
    double_majority: bool = Field(alias="doppeltesMehr")
    cantons_majority: WireCantonsMajority = Field(alias="staende")
    outcome: WireOutcome = Field(alias="resultat")
    cantons: list[WireCanton] = Field(alias="kantone")


class WireCountry(WireModel):
    geo_level_number: NonNegativeInt = Field(alias="geoLevelnummer")
    geo_level_name: str = Field(alias="geoLevelname")
    no_information_yet: bool = Field(alias="nochKeineInformation")
    issues: list[WireNationalIssue] = Field(alias="vorlagen")


class WireNationalData(WireModel):
    voting_day: str = Field(alias="abstimmtag")
    timestamp: str
    country: WireCountry = Field(alias="schweiz")


class WireCantonalIssue(WireSubdivided):
    issue_id: NonNegativeInt = Field(alias="vorlagenId")
    display_order: NonNegativeInt = Field(alias="reihenfolgeAnzeige")
    titles: list[WireIssueTitle] = Field(alias="vorlagenTitel")
    issue_completed: bool = Field(alias="vorlageBeendet")
    issue_accepted: bool = Field(alias="vorlageAngenommen")
    issue_type_id: NonNegativeInt = Field(alias="vorlagenArtId")
    main_issue_id: NonNegativeInt | None = Field(
        default=None, alias="hauptvorlagenId"
    )
    outcome: WireOutcome = Field(alias="resultat")


class WireCantonIssues(WireModel):
    geo_level_number: NonNegativeInt = Field(alias="geoLevelnummer")
    geo_level_name: str = Field(alias="geoLevelname")
    no_information_yet: bool = Field(alias="nochKeineInformation")
    issues: list[WireCantonalIssue] = Field(alias="vorlagen")


class WireCantonalData(WireModel):
    voting_day: str = Field(alias="abstimmtag")
    timestamp: str
    cantons: list[WireCantonIssues] = Field(alias="kantone")


class WireCatalogResource(WireModel):
    coverage: str
    url: str


class WireCatalogResult(WireModel):
    resources: list[WireCatalogResource]


class WireCatalog(WireModel):
    """CKAN ``package_show`` response."""

    result: WireCatalogResult
