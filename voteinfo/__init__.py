"""Typed access to Swiss voting-day result datasets published on opendata.swiss."""

from voteinfo.domain.exceptions import (
    ArithmeticUnderflow,
    NoResourceFound,
    ParseError,
    VoteinfoError,
)
from voteinfo.domain.services.resource_selection_service import (
    ResourceDescriptor,
    select_latest_resource,
    select_latest_url,
)
from voteinfo.domain.services.title_resolver import get_title
from voteinfo.domain.value_objects.issue_title import IssueTitle, Language
from voteinfo.domain.value_objects.outcome import Outcome
from voteinfo.domain.value_objects.ratio import UndefinedRatio, is_undefined
from voteinfo.domain.value_objects.voting_day import CantonalData, NationalData
from voteinfo.infrastructure.external.voteinfo_api.converter import (
    encode_cantonal_data,
    encode_national_data,
    parse_cantonal_data,
    parse_catalog,
    parse_national_data,
)


__all__ = [
    "ArithmeticUnderflow",
    "CantonalData",
    "IssueTitle",
    "Language",
    "NationalData",
    "NoResourceFound",
    "Outcome",
    "ParseError",
    "ResourceDescriptor",
    "UndefinedRatio",
    "VoteinfoError",
    "encode_cantonal_data",
    "encode_national_data",
    "get_title",
    "is_undefined",
    "parse_cantonal_data",
    "parse_catalog",
    "parse_national_data",
    "select_latest_resource",
    "select_latest_url",
]
