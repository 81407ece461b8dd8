"""HTTP access to opendata.swiss catalogs and voting-day datasets.

Async httpx client fetching raw text only; mapping onto the
domain model is done by ``converter``.
"""

from __future__ import annotations

import httpx

from voteinfo.common.logging import get_logger


logger = get_logger(__name__)


class VoteinfoApiError(Exception):
    """A catalog or dataset could not be fetched."""

    def __init__(
        self, message: str, status_code: int | None = None, url: str | None = None
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class VoteinfoApiClient:
    """Fetches catalog metadata and dataset documents (httpx async)."""

    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._external_client = client
        self._owns_client = client is None
        self._timeout = timeout

    def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a short-lived one."""
        if self._external_client is not None:
            return self._external_client
        return httpx.AsyncClient(timeout=self._timeout, follow_redirects=True)

    async def fetch_text(self, url: str) -> str:
        """GET ``url`` and return the response body as text."""
        client = self._get_client()

        try:
            logger.info("Fetching %s", url)
            response = await client.get(url)
            response.raise_for_status()
            return response.text
        except httpx.HTTPStatusError as e:
            raise VoteinfoApiError(
                f"HTTP {e.response.status_code} for {url}",
                status_code=e.response.status_code,
                url=url,
            ) from e
        except httpx.TimeoutException as e:
            raise VoteinfoApiError(f"Timeout fetching {url}", url=url) from e
        except httpx.HTTPError as e:
            raise VoteinfoApiError(f"HTTP error fetching {url}: {e}", url=url) from e
        finally:
            if self._owns_client:
                await client.aclose()
