"""Top-level datasets of a voting day (domain layer)."""

from __future__ import annotations

from dataclasses import dataclass, field

from voteinfo.domain.value_objects.issue import CantonalIssue, NationalIssue


@dataclass(frozen=True)
class Country:
    """All federal issues of a voting day."""

    geo_level_number: int
    geo_level_name: str
    no_information_yet: bool
    issues: tuple[NationalIssue, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class CantonIssues:
    """Issues one canton put to the vote on a voting day."""

    geo_level_number: int
    geo_level_name: str
    no_information_yet: bool
    issues: tuple[CantonalIssue, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class NationalData:
    """National dataset (eidgenössische Abstimmungsvorlagen)."""

    voting_day: str
    timestamp: str
    country: Country

    @property
    def issues(self) -> tuple[NationalIssue, ...]:
        return self.country.issues


@dataclass(frozen=True)
class CantonalData:
    """Cantonal dataset (kantonale Abstimmungsvorlagen)."""

    voting_day: str
    timestamp: str
    cantons: tuple[CantonIssues, ...] = field(default_factory=tuple)

    def find_canton(self, name_or_number: str) -> CantonIssues | None:
        """Look a canton up by its level name or level number."""
        for canton in self.cantons:
            number = str(canton.geo_level_number)
            if name_or_number in (canton.geo_level_name, number):
                return canton
        return None
