"""Ratio results that may be undefined because of a zero denominator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias, TypeGuard


@dataclass(frozen=True)
class UndefinedRatio:
    """Result of a ratio whose denominator is zero.

    Returned instead of ``nan`` so callers can tell it apart from a real
    ratio of ``0.0``.
    """

    metric: str
    denominator: str

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"undefined ({self.denominator} is 0)"


Ratio: TypeAlias = float | UndefinedRatio


def is_undefined(value: Ratio) -> TypeGuard[UndefinedRatio]:
    """Return True if the ratio could not be computed."""
    return isinstance(value, UndefinedRatio)


def divide(
    metric: str, numerator: int, denominator: int, denominator_name: str
) -> Ratio:
    """Divide two counts as floats, or report the zero denominator."""
    if denominator == 0:
        return UndefinedRatio(metric=metric, denominator=denominator_name)
    return numerator / denominator
