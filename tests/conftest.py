"""
Shared pytest fixtures for the creature ranker test suite.

Provides:
    - scenario_records: the small mixed list used across ranking/pipeline tests
    - mock_client: builds a CreatureApiClient backed by an httpx.MockTransport
    - make_source: factory returning a FakeSource, an in-memory CreatureSource
"""

from typing import Any

import httpx
import pytest

from creature_ranker.clients.creatures import CreatureApiClient

BASE_URL = "https://api.test"


class FakeSource:
    """In-memory creature source. Raises `error` if given."""

    def __init__(self, records: Any = None, error: Exception | None = None, on_fetch=None):
        self.records = records if records is not None else []
        self.error = error
        self.on_fetch = on_fetch
        self.closed = False

    async def fetch_records(self):
        if self.on_fetch is not None:
            self.on_fetch()
        if self.error is not None:
            raise self.error
        return self.records

    async def aclose(self):
        self.closed = True


@pytest.fixture
def scenario_records():
    """Crab swims, Eagle flies, Wolf only walks."""
    return [
        {"name": "Crab", "challengeRating": 1, "speed": 10, "swimSpeed": 15},
        {"name": "Eagle", "challengeRating": 3, "speed": 5, "flySpeed": 40},
        {"name": "Wolf", "challengeRating": 2, "speed": 20},
    ]


@pytest.fixture
def mock_client():
    """Factory: mock_client(handler) -> CreatureApiClient using a MockTransport."""

    def _build(handler) -> CreatureApiClient:
        return CreatureApiClient(
            base_url=BASE_URL,
            path="/creatures/list",
            transport=httpx.MockTransport(handler),
        )

    return _build


@pytest.fixture
def make_source():
    """Factory: make_source(records=..., error=..., on_fetch=...) -> FakeSource."""
    return FakeSource
