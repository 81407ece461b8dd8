"""Selection of the newest dataset resource in a catalog."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from voteinfo.domain.exceptions import NoResourceFound


@dataclass(frozen=True)
class ResourceDescriptor:
    """One resource of a dataset catalog."""

    coverage: str
    url: str


def select_latest_resource(
    resources: Sequence[ResourceDescriptor], source: str | None = None
) -> ResourceDescriptor:
    """Return the resource with the greatest coverage label.

    Labels are compared as plain strings. The catalog publishes zero-padded
    ISO dates, for which string order is chronological order. Among several
    resources sharing the greatest label the first one listed wins.

    Args:
        resources: catalog resources in published order
        source: catalog URL, reported when the list is empty

    Raises:
        NoResourceFound: ``resources`` is empty
    """
    if not resources:
        raise NoResourceFound(source)
    return max(resources, key=lambda resource: resource.coverage)


def select_latest_url(
    resources: Sequence[ResourceDescriptor], source: str | None = None
) -> str:
    return select_latest_resource(resources, source).url
