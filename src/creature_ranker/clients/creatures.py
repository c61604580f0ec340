from __future__ import annotations

import logging
from typing import Any, Protocol

import httpx

from creature_ranker.errors import FetchFailure, PayloadShapeFailure
from creature_ranker.http import HttpClientFactory
from creature_ranker.settings import settings

logger = logging.getLogger(__name__)


class CreatureSource(Protocol):
    """Anything that can hand over the raw creature list."""

    async def fetch_records(self) -> list[Any]: ...

    async def aclose(self) -> None: ...


class CreatureApiClient:
    """RPG API client for the creature list endpoint.

    Returns the decoded records untouched; admission and validation happen
    in `creature_ranker.classify`. No retries: a failed call fails the run.
    """

    def __init__(
        self,
        base_url: str | None = None,
        path: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._path = path or settings.creatures_path
        self._client = HttpClientFactory.client(
            base_url=base_url or settings.api_base_url, transport=transport
        )

    async def aclose(self):
        await self._client.aclose()

    async def fetch_records(self) -> list[Any]:
        logger.info("Fetching creatures from %s%s", self._client.base_url, self._path)
        try:
            r = await self._client.get(self._path)
        except httpx.HTTPError as e:
            raise FetchFailure(str(e) or e.__class__.__name__) from e

        if not r.is_success:
            raise FetchFailure(r.reason_phrase, status_code=r.status_code)

        try:
            data = r.json()
        except ValueError as e:
            raise PayloadShapeFailure("Response body is not JSON.") from e

        if not isinstance(data, list):
            raise PayloadShapeFailure()

        logger.debug("Received %d raw record(s)", len(data))
        return data
