"""Issues (Vorlagen) put to the vote (domain layer).

National and cantonal datasets publish slightly different issue shapes:
only national issues carry the provisional flag, the double-majority flag
and the cantons'-majority tally, and cantonal issues may lack a parent issue.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from voteinfo.domain.services.title_resolver import get_title
from voteinfo.domain.value_objects.geo_unit import Canton, Subdivisions
from voteinfo.domain.value_objects.issue_title import IssueTitle, Language
from voteinfo.domain.value_objects.outcome import Outcome


@dataclass(frozen=True)
class CantonsMajority:
    """Ständemehr tally: full and half cantons voting yes or no."""

    yes_full_cantons: int
    no_full_cantons: int
    full_canton_count: int
    yes_half_cantons: int
    no_half_cantons: int
    half_canton_count: int

    def yes_cantons(self) -> float:
        """Cantonal votes in favour, half cantons counting one half."""
        return self.yes_full_cantons + self.yes_half_cantons / 2

    def no_cantons(self) -> float:
        return self.no_full_cantons + self.no_half_cantons / 2

    def accepted(self) -> bool:
        return self.yes_cantons() > self.no_cantons()


@dataclass(frozen=True)
class NationalIssue:
    """Issue of a federal voting day with its per-canton results."""

    issue_id: int
    display_order: int
    titles: tuple[IssueTitle, ...]
    issue_completed: bool
    provisional: bool
    issue_accepted: bool
    issue_type_id: int
    main_issue_id: int
    double_majority: bool
    cantons_majority: CantonsMajority
    outcome: Outcome
    cantons: tuple[Canton, ...] = field(default_factory=tuple)
    reserve_info_text: str | None = None

    def get_title(self, language: Language) -> str | None:
        return get_title(self.titles, language)

    def find_canton(self, name_or_number: str) -> Canton | None:
        """Look a canton up by its level name or level number."""
        for canton in self.cantons:
            if name_or_number in (canton.geo_level_name, canton.geo_level_number):
                return canton
        return None


@dataclass(frozen=True)
class CantonalIssue:
    """Issue put to the vote in a single canton."""

    issue_id: int
    display_order: int
    titles: tuple[IssueTitle, ...]
    issue_completed: bool
    issue_accepted: bool
    issue_type_id: int
    outcome: Outcome
    main_issue_id: int | None = None
    subdivisions: Subdivisions = field(default_factory=Subdivisions.none)

    def get_title(self, language: Language) -> str | None:
        return get_title(self.titles, language)
