"""Client and mapping for the opendata.swiss voting-day datasets."""

from .client import VoteinfoApiClient, VoteinfoApiError
from .converter import (
    encode_cantonal_data,
    encode_national_data,
    parse_cantonal_data,
    parse_catalog,
    parse_national_data,
)
from .field_mapping import FIELD_NAMES, ISSUE_FIELD_COMPATIBILITY


__all__ = [
    "FIELD_NAMES",
    "ISSUE_FIELD_COMPATIBILITY",
    "VoteinfoApiClient",
    "VoteinfoApiError",
    "encode_cantonal_data",
    "encode_national_data",
    "parse_cantonal_data",
    "parse_catalog",
    "parse_national_data",
]
