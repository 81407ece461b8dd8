"""Geographic units below the country level (domain layer).

A canton (or, in cantonal datasets, a cantonal issue) reports its results at
exactly one granularity: districts, communes or constituencies.
``Subdivisions`` models that as one tagged alternative so that two
granularities can never be populated at the same time.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum

from voteinfo.domain.value_objects.outcome import Outcome


@dataclass(frozen=True)
class District:
    """Bezirk."""

    geo_level_number: str
    geo_level_name: str
    outcome: Outcome


@dataclass(frozen=True)
class Commune:
    """Gemeinde, linked to its canton by ``geo_level_parent_number``."""

    geo_level_number: str
    geo_level_name: str
    geo_level_parent_number: str
    outcome: Outcome


@dataclass(frozen=True)
class Constituency(Commune):
    """Zählkreis: counting district of a larger commune."""


GeoUnit = District | Commune | Constituency


class SubdivisionKind(Enum):
    """Granularity at which an area reports its results."""

    DISTRICTS = "bezirke"
    COMMUNES = "gemeinden"
    CONSTITUENCIES = "zaehlkreise"
    NONE = "none"


_UNIT_TYPES: dict[SubdivisionKind, type] = {
    SubdivisionKind.DISTRICTS: District,
    SubdivisionKind.COMMUNES: Commune,
    SubdivisionKind.CONSTITUENCIES: Constituency,
}


@dataclass(frozen=True)
class Subdivisions:
    """The single populated subdivision collection of an area."""

    kind: SubdivisionKind = SubdivisionKind.NONE
    units: tuple[GeoUnit, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.kind is SubdivisionKind.NONE:
            if self.units:
                raise ValueError("subdivisions of kind NONE cannot carry units")
            return
        expected = _UNIT_TYPES[self.kind]
        for unit in self.units:
            # Constituency subclasses Commune, so compare exact types
            if type(unit) is not expected:
                raise ValueError(
                    f"{self.kind.name.lower()} cannot contain "
                    f"{type(unit).__name__}"
                )

    @classmethod
    def none(cls) -> Subdivisions:
        return cls()

    @classmethod
    def districts(cls, units: Sequence[District]) -> Subdivisions:
        return cls(SubdivisionKind.DISTRICTS, tuple(units))

    @classmethod
    def communes(cls, units: Sequence[Commune]) -> Subdivisions:
        return cls(SubdivisionKind.COMMUNES, tuple(units))

    @classmethod
    def constituencies(cls, units: Sequence[Constituency]) -> Subdivisions:
        return cls(SubdivisionKind.CONSTITUENCIES, tuple(units))

    @property
    def is_empty(self) -> bool:
        return self.kind is SubdivisionKind.NONE

    def __iter__(self) -> Iterator[GeoUnit]:
        return iter(self.units)

    def __len__(self) -> int:
        return len(self.units)


@dataclass(frozen=True)
class Canton:
    """Per-canton result of a national issue."""

    geo_level_number: str
    geo_level_name: str
    outcome: Outcome
    subdivisions: Subdivisions = field(default_factory=Subdivisions.none)
