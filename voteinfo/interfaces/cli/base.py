"""Shared helpers for CLI commands."""

from __future__ import annotations

import functools

from collections.abc import Callable
from typing import Any, TypeVar

import click

from voteinfo.common.logging import get_logger
from voteinfo.domain.exceptions import VoteinfoError
from voteinfo.domain.value_objects.issue_title import Language
from voteinfo.domain.value_objects.ratio import Ratio, is_undefined
from voteinfo.infrastructure.external.voteinfo_api.client import VoteinfoApiError


logger = get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

LANGUAGE_CHOICE = click.Choice([language.value for language in Language])


def with_error_handling(func: F) -> F:
    """Report domain and fetch errors as a click error (exit code 1)."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (VoteinfoError, VoteinfoApiError) as e:
            logger.debug("Command failed", exc_info=True)
            raise click.ClickException(str(e)) from e

    return wrapper  # type: ignore[return-value]


def format_ratio(value: Ratio | None) -> str:
    """Format a ratio as a percentage with one decimal."""
    if value is None or is_undefined(value):
        return "n/a"
    return f"{value * 100:.1f}%"


def format_accepted(accepted: bool | None) -> str:
    if accepted is None:
        return "open"
    return "accepted" if accepted else "rejected"
