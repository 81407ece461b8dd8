"""Voting-day dataset retrieval use case.

Fetches a national or cantonal dataset either from an explicit URL or by
discovering the newest resource in the opendata.swiss catalog, and maps it
onto the domain value tree. The steps run strictly one after another; the
first error is propagated and nothing is retried or cached.
"""

from __future__ import annotations

from enum import Enum

from voteinfo.common.logging import get_logger
from voteinfo.domain.services.resource_selection_service import select_latest_resource
from voteinfo.domain.value_objects.voting_day import CantonalData, NationalData
from voteinfo.infrastructure.config.settings import Settings, get_settings
from voteinfo.infrastructure.external.voteinfo_api.client import VoteinfoApiClient
from voteinfo.infrastructure.external.voteinfo_api.converter import (
    parse_cantonal_data,
    parse_catalog,
    parse_national_data,
)


logger = get_logger(__name__)


class DatasetKind(Enum):
    """Scope of a voting-day dataset."""

    NATIONAL = "national"
    CANTONAL = "cantonal"


class FetchVotingResultsUseCase:
    """Retrieve voting-day datasets by URL or via catalog discovery."""

    def __init__(
        self,
        client: VoteinfoApiClient | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._client = client or VoteinfoApiClient(
            timeout=self._settings.HTTP_TIMEOUT
        )

    def catalog_url(self, kind: DatasetKind) -> str:
        if kind is DatasetKind.NATIONAL:
            return self._settings.NATIONAL_CATALOG_URL
        return self._settings.CANTONAL_CATALOG_URL

    async def latest_url(self, kind: DatasetKind) -> str:
        """Return the URL of the newest dataset of ``kind`` in the catalog.

        Raises:
            VoteinfoApiError: the catalog could not be fetched
            ParseError: the catalog response is malformed
            NoResourceFound: the catalog lists no resources
        """
        catalog_url = self.catalog_url(kind)
        text = await self._client.fetch_text(catalog_url)
        resources = parse_catalog(text)
        latest = select_latest_resource(resources, source=catalog_url)
        logger.info(
            "Latest %s dataset covers %s: %s",
            kind.value,
            latest.coverage,
            latest.url,
        )
        return latest.url

    async def national_by_url(self, url: str) -> NationalData:
        text = await self._client.fetch_text(url)
        return parse_national_data(text)

    async def national_latest(self) -> NationalData:
        url = await self.latest_url(DatasetKind.NATIONAL)
        return await self.national_by_url(url)

    async def cantonal_by_url(self, url: str) -> CantonalData:
        text = await self._client.fetch_text(url)
        return parse_cantonal_data(text)

    async def cantonal_latest(self) -> CantonalData:
        url = await self.latest_url(DatasetKind.CANTONAL)
        return await self.cantonal_by_url(url)
