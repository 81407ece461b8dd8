"""Localized issue titles."""

from dataclasses import dataclass
from enum import Enum


class Language(Enum):
    """Languages in which issue titles are published."""

    DE = "de"
    FR = "fr"
    IT = "it"
    RM = "rm"
    EN = "en"


@dataclass(frozen=True)
class IssueTitle:
    """Title of an issue in one language; blank while not yet translated."""

    language: Language
    text: str
