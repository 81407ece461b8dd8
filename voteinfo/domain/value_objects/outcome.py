"""Vote tally of one geographic unit on one issue (domain layer)."""

from __future__ import annotations

from dataclasses import dataclass

from voteinfo.domain.exceptions import ArithmeticUnderflow
from voteinfo.domain.value_objects.ratio import Ratio, divide, is_undefined


@dataclass(frozen=True)
class OutcomeMetrics:
    """Snapshot of every derived metric of an outcome.

    ``invalid_votes`` and ``invalid_votes_ratio`` are None when the outcome
    reports fewer cast ballot papers than valid votes.
    """

    valid_votes: int
    invalid_votes: int | None
    yes_ratio: Ratio
    no_ratio: Ratio
    valid_votes_ratio: Ratio
    invalid_votes_ratio: Ratio | None
    turnout: Ratio


@dataclass(frozen=True)
class Outcome:
    """Result counts of one area (country, canton, district, commune...)."""

    count_completed: bool
    yes_votes: int
    no_votes: int
    cast_ballot_papers: int
    eligible_voters: int

    def valid_votes(self) -> int:
        return self.yes_votes + self.no_votes

    def invalid_votes(self) -> int:
        """Cast ballot papers that did not count as yes or no.

        Raises:
            ArithmeticUnderflow: cast ballot papers are fewer than valid votes
        """
        valid = self.valid_votes()
        if self.cast_ballot_papers < valid:
            raise ArithmeticUnderflow(self, self.cast_ballot_papers, valid)
        return self.cast_ballot_papers - valid

    def yes_ratio(self) -> Ratio:
        return divide("yes_ratio", self.yes_votes, self.valid_votes(), "valid_votes")

    def no_ratio(self) -> Ratio:
        return divide("no_ratio", self.no_votes, self.valid_votes(), "valid_votes")

    def valid_votes_ratio(self) -> Ratio:
        return divide(
            "valid_votes_ratio",
            self.valid_votes(),
            self.cast_ballot_papers,
            "cast_ballot_papers",
        )

    def invalid_votes_ratio(self) -> Ratio:
        """Share of invalid votes among cast ballot papers.

        A zero denominator is reported before the invalid votes are computed,
        so an empty outcome yields an UndefinedRatio rather than an error.
        """
        if self.cast_ballot_papers == 0:
            return divide("invalid_votes_ratio", 0, 0, "cast_ballot_papers")
        return divide(
            "invalid_votes_ratio",
            self.invalid_votes(),
            self.cast_ballot_papers,
            "cast_ballot_papers",
        )

    def turnout(self) -> Ratio:
        return divide(
            "turnout", self.valid_votes(), self.eligible_voters, "eligible_voters"
        )

    def is_accepted(self) -> bool | None:
        """Popular majority: True for more yes than no votes.

        None while no valid vote has been counted.
        """
        ratio = self.yes_ratio()
        if is_undefined(ratio):
            return None
        return ratio > 0.5

    def metrics(self) -> OutcomeMetrics:
        try:
            invalid: int | None = self.invalid_votes()
        except ArithmeticUnderflow:
            invalid = None

        invalid_ratio: Ratio | None
        if invalid is None and self.cast_ballot_papers > 0:
            invalid_ratio = None
        else:
            invalid_ratio = self.invalid_votes_ratio()

        return OutcomeMetrics(
            valid_votes=self.valid_votes(),
            invalid_votes=invalid,
            yes_ratio=self.yes_ratio(),
            no_ratio=self.no_ratio(),
            valid_votes_ratio=self.valid_votes_ratio(),
            invalid_votes_ratio=invalid_ratio,
            turnout=self.turnout(),
        )
