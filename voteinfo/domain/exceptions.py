"""Domain exceptions for voting-day result datasets."""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from voteinfo.domain.value_objects.outcome import Outcome


class VoteinfoError(Exception):
    """Base class for all errors raised by the voteinfo domain."""


class ParseError(VoteinfoError):
    """A dataset or catalog document could not be mapped onto the typed model.

    Args:
        path: JSON path of the offending field, ``$`` for the whole document
        reason: human readable description of the failure
    """

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class NoResourceFound(VoteinfoError):
    """The catalog did not list any resource to choose from."""

    def __init__(self, source: str | None = None) -> None:
        if source:
            message = f"no resources found in catalog {source}"
        else:
            message = "no resources found"
        super().__init__(message)
        self.source = source


class ArithmeticUnderflow(VoteinfoError):
    """Cast ballot papers are fewer than the valid votes of an outcome.

    The published data does not enforce ``yes + no <= cast``; a violation is
    a data-quality problem and is never clamped.
    """

    def __init__(
        self, outcome: Outcome, cast_ballot_papers: int, valid_votes: int
    ) -> None:
        super().__init__(
            f"cast ballot papers ({cast_ballot_papers}) are fewer than "
            f"valid votes ({valid_votes})"
        )
        self.outcome = outcome
        self.cast_ballot_papers = cast_ballot_papers
        self.valid_votes = valid_votes
