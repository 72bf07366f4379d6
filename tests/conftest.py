"""Shared test fixtures for the DataMall client tests.

Provides:
  - JSON fixture loading helpers
  - Mock HTTP transport for httpx (intercepts all requests)
  - Page builders for pagination tests
  - Environment variable setup for settings resolution
"""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import patch

import httpx
import pytest
from lta_datamall import LandTransportClient

FIXTURES_DIR = Path(__file__).parent / "fixtures"

TEST_API_KEY = "test-account-key"


def load_fixture(name: str) -> dict[str, Any]:
    """Load a JSON fixture file by name."""
    return json.loads((FIXTURES_DIR / name).read_text())


class MockTransport(httpx.AsyncBaseTransport):
    """Mock HTTP transport that returns preconfigured responses.

    Usage:
        transport = MockTransport(responses=[
            httpx.Response(200, json={"value": [...]}),
            httpx.ConnectError("boom"),
        ])
        client = make_client(transport)

    Each request pops the next entry: a Response is returned, an exception
    is raised (to simulate transport failures). `on_request` is called with
    every request before it is answered. Running out of responses fails the
    test, since any status code would be classified by the client.
    """

    def __init__(
        self,
        responses: list[httpx.Response | Exception] | None = None,
        on_request: Callable[[httpx.Request], None] | None = None,
    ) -> None:
        self.responses = list(responses or [])
        self.requests: list[httpx.Request] = []
        self.on_request = on_request

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.on_request is not None:
            self.on_request(request)
        if not self.responses:
            raise AssertionError(f"Unexpected request with no mock response left: {request.url}")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        response.stream = httpx.ByteStream(response.content)
        return response


def make_client(transport: httpx.AsyncBaseTransport, api_key: str | None = TEST_API_KEY):
    """Build a LandTransportClient whose HTTP traffic goes to `transport`."""
    return LandTransportClient(
        api_key=api_key,
        http_client=httpx.AsyncClient(transport=transport),
    )


def records(count: int, start: int = 0) -> list[dict[str, Any]]:
    """`count` bus stop records with sequential codes, starting at `start`."""
    return [
        {
            "BusStopCode": f"{i:05d}",
            "RoadName": "Test Rd",
            "Description": f"Stop {i}",
            "Latitude": 1.3,
            "Longitude": 103.8,
        }
        for i in range(start, start + count)
    ]


def page(items: list[dict[str, Any]]) -> httpx.Response:
    return httpx.Response(200, json={"odata.metadata": "test", "value": items})


@pytest.fixture
def mock_env():
    """Set DataMall settings in environment variables."""
    env = {
        "LTA_ACCOUNT_KEY": "env-account-key",
        "LTA_TIMEOUT_SECONDS": "12.5",
    }
    with patch.dict("os.environ", env):
        yield env

