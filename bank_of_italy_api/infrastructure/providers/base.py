import logging
from abc import ABC, abstractmethod
from typing import Any

import httpx

from bank_of_italy_api.domain.exceptions.currency import DeserializeFailed, RequestFailed

logger = logging.getLogger(__name__)


class BaseAPIProvider(ABC):
    """A base class for API providers, handling common HTTP logic."""

    def __init__(self, base_url: str, client: httpx.AsyncClient | None = None):
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient()

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    async def _make_request(self, endpoint: str, params: dict[str, Any] | None = None) -> Any:
        """Issue one GET and return the parsed JSON body.

        Transport failures and non-2xx statuses raise RequestFailed, a body
        that is not JSON raises DeserializeFailed. There is no retry.
        """
        url = f"{self.base_url}/{endpoint}"
        logger.info(f"GET {url} ({self.name})")
        try:
            response = await self.client.get(url, params=params, headers={"Accept": "application/json"})
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.error(f"{self.name} HTTP error {status_code} at {endpoint}")
            raise RequestFailed(f"HTTP {status_code}", url=url, status_code=status_code) from e
        except httpx.HTTPError as e:
            logger.error(f"{self.name} request to {endpoint} failed: {e.__class__.__name__}: {e}")
            raise RequestFailed(f"{e.__class__.__name__}: {e}", url=url) from e

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"{self.name} returned a non-JSON body at {endpoint}: {e}")
            raise DeserializeFailed(f"body is not valid JSON: {e}") from e

    async def close(self) -> None:
        """Close the HTTP client if this provider created it."""
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
