"""Published field names of the voting-day datasets and their meaning.

The keys are the wire format of the published JSON and must match it
character for character. The wire models in ``schema`` declare exactly these
keys as aliases.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


FIELD_NAMES: dict[str, str] = {
    "abstimmtag": "voting_day",
    "timestamp": "timestamp",
    "schweiz": "country",
    "kantone": "cantons",
    "vorlagen": "issues",
    "geoLevelnummer": "geo_level_number",
    "geoLevelname": "geo_level_name",
    "geoLevelParentnummer": "geo_level_parent_number",
    "nochKeineInformation": "no_information_yet",
    "resultat": "outcome",
    "gebietAusgezaehlt": "count_completed",
    "jaStimmenAbsolut": "yes_votes",
    "neinStimmenAbsolut": "no_votes",
    "eingelegteStimmzettel": "cast_ballot_papers",
    "anzahlStimmberechtigte": "eligible_voters",
    "bezirke": "districts",
    "gemeinden": "communes",
    "zaehlkreise": "constituencies",
    "vorlagenId": "issue_id",
    "reihenfolgeAnzeige": "display_order",
    "vorlagenTitel": "titles",
    "langKey": "language",
    "text": "text",
    "vorlageBeendet": "issue_completed",
    "vorlageAngenommen": "issue_accepted",
    "provisorisch": "provisional",
    "vorlagenArtId": "issue_type_id",
    "hauptvorlagenId": "main_issue_id",
    "reserveInfoText": "reserve_info_text",
    "doppeltesMehr": "double_majority",
    "staende": "cantons_majority",
    "jaStaendeGanz": "yes_full_cantons",
    "neinStaendeGanz": "no_full_cantons",
    "anzahlStaendeGanz": "full_canton_count",
    "jaStaendeHalb": "yes_half_cantons",
    "neinStaendeHalb": "no_half_cantons",
    "anzahlStaendeHalb": "half_canton_count",
}

SUBDIVISION_KEYS: tuple[str, ...] = ("bezirke", "gemeinden", "zaehlkreise")


def semantic_name(published: str) -> str:
    """Return the semantic name of a published key, or the key itself."""
    return FIELD_NAMES.get(published, published)


class Presence(Enum):
    """Whether a field appears in one dataset kind."""

    REQUIRED = "required"
    OPTIONAL = "optional"
    ABSENT = "absent"


@dataclass(frozen=True)
class IssueFieldCompatibility:
    """Presence of one issue-level field in national and cantonal datasets."""

    published_name: str
    national: Presence
    cantonal: Presence


# National and cantonal issues share one canonical schema; these are the
# fields whose presence differs between the two dataset kinds.
ISSUE_FIELD_COMPATIBILITY: tuple[IssueFieldCompatibility, ...] = (
    IssueFieldCompatibility("provisorisch", Presence.REQUIRED, Presence.ABSENT),
    IssueFieldCompatibility("doppeltesMehr", Presence.REQUIRED, Presence.ABSENT),
    IssueFieldCompatibility("staende", Presence.REQUIRED, Presence.ABSENT),
    IssueFieldCompatibility("reserveInfoText", Presence.OPTIONAL, Presence.ABSENT),
    IssueFieldCompatibility("hauptvorlagenId", Presence.REQUIRED, Presence.OPTIONAL),
    IssueFieldCompatibility("kantone", Presence.REQUIRED, Presence.ABSENT),
    IssueFieldCompatibility("bezirke", Presence.ABSENT, Presence.OPTIONAL),
    IssueFieldCompatibility("gemeinden", Presence.ABSENT, Presence.OPTIONAL),
    IssueFieldCompatibility("zaehlkreise", Presence.ABSENT, Presence.OPTIONAL),
)
