"""Tests for the published JSON converter."""

import json

import pytest

from tests.fixtures.voteinfo_payload_factories import (
    make_canton,
    make_cantonal_issue,
    make_cantonal_payload,
    make_catalog,
    make_commune,
    make_district,
    make_national_issue,
    make_national_payload,
    make_outcome,
)
from voteinfo.domain.exceptions import ParseError
from voteinfo.domain.value_objects.geo_unit import (
    Commune,
    Constituency,
    District,
    SubdivisionKind,
)
from voteinfo.domain.value_objects.issue_title import Language
from voteinfo.infrastructure.external.voteinfo_api.converter import (
    encode_cantonal_data,
    encode_national_data,
    json_path,
    parse_cantonal_data,
    parse_catalog,
    parse_national_data,
)


def _national(**issue_overrides: object) -> str:
    payload = make_national_payload()
    payload["schweiz"]["vorlagen"] = [make_national_issue(**issue_overrides)]
    return json.dumps(payload)


class TestJsonPath:
    def test_renders_keys_and_indices(self):
        loc = ("schweiz", "vorlagen", 0, "resultat")

        assert json_path(loc) == "$.schweiz.vorlagen[0].resultat"

    def test_empty_location_is_root(self):
        assert json_path(()) == "$"


class TestParseNationalData:
    def test_parse_complete_dataset(self):
        data = parse_national_data(json.dumps(make_national_payload()))

        assert data.voting_day == "20240922"
        assert data.timestamp == "2024-09-22T18:30:00"
        assert data.country.geo_level_number == 0
        assert data.country.geo_level_name == "Schweiz"
        assert data.country.no_information_yet is False
        assert len(data.issues) == 1

        issue = data.issues[0]
        assert issue.issue_id == 6730
        assert issue.display_order == 1
        assert issue.issue_completed is True
        assert issue.provisional is False
        assert issue.issue_accepted is True
        assert issue.issue_type_id == 1
        assert issue.main_issue_id == 6730
        assert issue.reserve_info_text is None
        assert issue.double_majority is True
        assert issue.cantons_majority.yes_full_cantons == 15
        assert issue.cantons_majority.half_canton_count == 6
        assert issue.outcome.yes_votes == 600
        assert issue.outcome.cast_ballot_papers == 1020
        assert issue.get_title(Language.DE) == "Vorlage A"
        assert issue.get_title(Language.EN) is None

    def test_parse_bytes(self):
        data = parse_national_data(json.dumps(make_national_payload()).encode())

        assert data.voting_day == "20240922"

    def test_canton_subdivisions(self):
        issue = parse_national_data(_national()).issues[0]

        zurich, bern = issue.cantons
        assert zurich.geo_level_number == "1"
        assert zurich.subdivisions.kind is SubdivisionKind.COMMUNES
        assert isinstance(zurich.subdivisions.units[0], Commune)
        assert zurich.subdivisions.units[0].geo_level_parent_number == "1"
        assert bern.geo_level_name == "Bern / Berne"
        assert bern.subdivisions.kind is SubdivisionKind.DISTRICTS
        assert isinstance(bern.subdivisions.units[0], District)

    def test_canton_without_subdivisions(self):
        canton = make_canton(gemeinden=[])

        issue = parse_national_data(_national(kantone=[canton])).issues[0]

        assert issue.cantons[0].subdivisions.is_empty

    def test_find_canton_by_name_or_number(self):
        issue = parse_national_data(_national()).issues[0]

        assert issue.find_canton("2").geo_level_name == "Bern / Berne"
        assert issue.find_canton("Zürich").geo_level_number == "1"
        assert issue.find_canton("Ticino") is None

    def test_reserve_info_text(self):
        text = _national(reserveInfoText="Resultat unter Vorbehalt")

        issue = parse_national_data(text).issues[0]

        assert issue.reserve_info_text == "Resultat unter Vorbehalt"

    def test_unknown_fields_are_ignored(self):
        payload = make_national_payload(spielwiese="ignored")
        payload["schweiz"]["vorlagen"][0]["neu"] = {"x": 1}

        data = parse_national_data(json.dumps(payload))

        assert len(data.issues) == 1

    def test_no_information_yet(self):
        payload = make_national_payload()
        payload["schweiz"]["nochKeineInformation"] = True
        payload["schweiz"]["vorlagen"] = []

        data = parse_national_data(json.dumps(payload))

        assert data.country.no_information_yet is True
        assert data.issues == ()

    def test_derived_metrics_after_parse(self):
        outcome = parse_national_data(_national()).issues[0].outcome

        assert outcome.valid_votes() == 1000
        assert outcome.invalid_votes() == 20
        assert outcome.yes_ratio() == pytest.approx(0.6)


class TestParseErrors:
    def test_invalid_json(self):
        with pytest.raises(ParseError) as exc_info:
            parse_national_data("{not json")

        assert exc_info.value.path == "$"

    def test_missing_top_level_field(self):
        payload = make_national_payload()
        del payload["abstimmtag"]

        with pytest.raises(ParseError) as exc_info:
            parse_national_data(json.dumps(payload))

        assert exc_info.value.path == "$.abstimmtag"
        assert "voting_day" in exc_info.value.reason

    def test_missing_nested_field_reports_path(self):
        outcome = make_outcome()
        del outcome["jaStimmenAbsolut"]

        with pytest.raises(ParseError) as exc_info:
            parse_national_data(_national(resultat=outcome))

        assert exc_info.value.path == (
            "$.schweiz.vorlagen[0].resultat.jaStimmenAbsolut"
        )
        assert "yes_votes" in exc_info.value.reason

    def test_number_as_string_is_rejected(self):
        outcome = make_outcome(jaStimmenAbsolut="600")

        with pytest.raises(ParseError) as exc_info:
            parse_national_data(_national(resultat=outcome))

        assert exc_info.value.path.endswith("resultat.jaStimmenAbsolut")

    def test_string_as_number_is_rejected(self):
        canton = make_canton(geoLevelnummer=1)

        with pytest.raises(ParseError) as exc_info:
            parse_national_data(_national(kantone=[canton]))

        assert exc_info.value.path == (
            "$.schweiz.vorlagen[0].kantone[0].geoLevelnummer"
        )

    def test_integer_as_boolean_is_rejected(self):
        with pytest.raises(ParseError) as exc_info:
            parse_national_data(_national(vorlageBeendet=1))

        assert exc_info.value.path == "$.schweiz.vorlagen[0].vorlageBeendet"

    def test_negative_count_is_rejected(self):
        outcome = make_outcome(neinStimmenAbsolut=-1)

        with pytest.raises(ParseError):
            parse_national_data(_national(resultat=outcome))

    def test_unknown_language_is_rejected(self):
        titles = [{"langKey": "xx", "text": "?"}]

        with pytest.raises(ParseError) as exc_info:
            parse_national_data(_national(vorlagenTitel=titles))

        assert exc_info.value.path == (
            "$.schweiz.vorlagen[0].vorlagenTitel[0].langKey"
        )

    def test_two_subdivisions_are_rejected(self):
        canton = make_canton(bezirke=[make_district()])

        with pytest.raises(ParseError) as exc_info:
            parse_national_data(_national(kantone=[canton]))

        assert exc_info.value.path == "$.schweiz.vorlagen[0].kantone[0]"
        assert "bezirke" in exc_info.value.reason
        assert "gemeinden" in exc_info.value.reason
        assert not exc_info.value.reason.endswith(")")

    def test_empty_second_subdivision_is_accepted(self):
        canton = make_canton(bezirke=[], zaehlkreise=None)

        issue = parse_national_data(_national(kantone=[canton])).issues[0]

        assert issue.cantons[0].subdivisions.kind is SubdivisionKind.COMMUNES

    def test_national_issue_requires_cantons_majority(self):
        issue = make_national_issue()
        del issue["staende"]
        payload = make_national_payload()
        payload["schweiz"]["vorlagen"] = [issue]

        with pytest.raises(ParseError) as exc_info:
            parse_national_data(json.dumps(payload))

        assert exc_info.value.path == "$.schweiz.vorlagen[0].staende"


class TestParseCantonalData:
    def test_parse_complete_dataset(self):
        data = parse_cantonal_data(json.dumps(make_cantonal_payload()))

        assert data.voting_day == "20240922"
        assert len(data.cantons) == 2

        zurich = data.cantons[0]
        assert zurich.geo_level_number == 1
        assert zurich.no_information_yet is False
        issue = zurich.issues[0]
        assert issue.issue_id == 8001
        assert issue.main_issue_id is None
        assert issue.issue_accepted is False
        assert issue.outcome.is_accepted() is False
        assert issue.get_title(Language.FR) == "Objet cantonal"

    def test_constituencies(self):
        issue = parse_cantonal_data(json.dumps(make_cantonal_payload())).cantons[0]
        subdivisions = issue.issues[0].subdivisions

        assert subdivisions.kind is SubdivisionKind.CONSTITUENCIES
        assert len(subdivisions) == 2
        assert all(isinstance(unit, Constituency) for unit in subdivisions)
        assert subdivisions.units[0].geo_level_parent_number == "261"

    def test_main_issue_id(self):
        payload = make_cantonal_payload()
        payload["kantone"][0]["vorlagen"] = [make_cantonal_issue(hauptvorlagenId=8000)]

        data = parse_cantonal_data(json.dumps(payload))

        assert data.cantons[0].issues[0].main_issue_id == 8000

    def test_canton_without_information(self):
        aargau = parse_cantonal_data(json.dumps(make_cantonal_payload())).cantons[1]

        assert aargau.no_information_yet is True
        assert aargau.issues == ()

    def test_find_canton(self):
        data = parse_cantonal_data(json.dumps(make_cantonal_payload()))

        assert data.find_canton("19").geo_level_name == "Aargau"
        assert data.find_canton("Zürich").geo_level_number == 1
        assert data.find_canton("Genève") is None

    def test_two_subdivisions_are_rejected(self):
        issue = make_cantonal_issue(gemeinden=[make_commune()])
        payload = make_cantonal_payload()
        payload["kantone"][0]["vorlagen"] = [issue]

        with pytest.raises(ParseError) as exc_info:
            parse_cantonal_data(json.dumps(payload))

        assert exc_info.value.path == "$.kantone[0].vorlagen[0]"
        assert "(issues)" not in exc_info.value.reason

    def test_national_document_is_rejected(self):
        with pytest.raises(ParseError) as exc_info:
            parse_cantonal_data(json.dumps(make_national_payload()))

        assert exc_info.value.path == "$.kantone"


class TestParseCatalog:
    def test_resources_in_published_order(self):
        catalog = make_catalog(
            [
                ("2024-06-09", "https://example.org/a.json"),
                ("2024-09-22", "https://example.org/b.json"),
            ]
        )

        resources = parse_catalog(json.dumps(catalog))

        assert [r.coverage for r in resources] == ["2024-06-09", "2024-09-22"]
        assert resources[1].url == "https://example.org/b.json"

    def test_empty_resources(self):
        assert parse_catalog(json.dumps(make_catalog([]))) == []

    def test_missing_result(self):
        with pytest.raises(ParseError) as exc_info:
            parse_catalog(json.dumps({"success": False}))

        assert exc_info.value.path == "$.result"


class TestEncode:
    def test_national_round_trip(self):
        data = parse_national_data(json.dumps(make_national_payload()))

        assert parse_national_data(encode_national_data(data)) == data

    def test_cantonal_round_trip(self):
        data = parse_cantonal_data(json.dumps(make_cantonal_payload()))

        assert parse_cantonal_data(encode_cantonal_data(data)) == data

    def test_encodes_published_keys(self):
        data = parse_national_data(json.dumps(make_national_payload()))

        encoded = json.loads(encode_national_data(data))

        issue = encoded["schweiz"]["vorlagen"][0]
        assert encoded["abstimmtag"] == "20240922"
        assert issue["staende"]["jaStaendeGanz"] == 15
        assert issue["kantone"][0]["gemeinden"][0]["geoLevelParentnummer"] == "1"
        assert "bezirke" not in issue["kantone"][0]
        assert "reserveInfoText" not in issue

    def test_encodes_constituencies_under_their_key(self):
        data = parse_cantonal_data(json.dumps(make_cantonal_payload()))

        encoded = json.loads(encode_cantonal_data(data))

        issue = encoded["kantone"][0]["vorlagen"][0]
        assert len(issue["zaehlkreise"]) == 2
        assert "gemeinden" not in issue
        assert "hauptvorlagenId" not in issue
