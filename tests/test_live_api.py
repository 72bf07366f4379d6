"""Live tests against the real DataMall API.

These hit datamall2.mytransport.sg with a real AccountKey. They catch what
the mocked tests cannot: response shape drift, key expiry and changes to
throttling behaviour.

Tiers (select with markers):
  smoke    - one small authenticated call; verifies the key and reachability
  contract - one page of each representative shape; verifies our models parse it

Each test prints the number of HTTP requests it made ("API requests:").

Usage:
  pytest tests/test_live_api.py -v -m live -s
  pytest tests/test_live_api.py -v -m "live and smoke" -s
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv
from lta_datamall import (
    Endpoint,
    LandTransportClient,
    RateLimitedError,
    TrainLine,
    call_with_backoff,
)

# ---------------------------------------------------------------------------
# Load .env for local development (CI sets LTA_ACCOUNT_KEY directly)
# ---------------------------------------------------------------------------
load_dotenv(Path(__file__).resolve().parents[1] / ".env")

pytestmark = [
    pytest.mark.live,
    pytest.mark.skipif(
        not os.environ.get("LTA_ACCOUNT_KEY"),
        reason="LTA_ACCOUNT_KEY not set, skipping live DataMall tests",
    ),
]


@pytest.fixture
async def lta():
    client = LandTransportClient.from_env()
    yield client
    print(f"  API requests: {client.request_count}")
    await client.close()


@pytest.mark.smoke
class TestSmoke:
    async def test_train_service_alerts(self, lta):
        alert = await call_with_backoff(lta.download_train_service_alerts)

        assert alert.status in (1, 2)

    async def test_bus_arrivals(self, lta):
        arrivals = await call_with_backoff(lta.get_bus_arrivals, "83139")

        assert arrivals.bus_stop_code == "83139"


@pytest.mark.contract
class TestContract:
    async def test_traffic_incidents_shape(self, lta):
        incidents = await call_with_backoff(lta.download_traffic_incidents)

        for incident in incidents[:5]:
            assert incident.type
            assert incident.record_id

    async def test_realtime_density_shape(self, lta):
        densities = await call_with_backoff(lta.download_realtime_density, TrainLine.NEL)

        assert densities
        assert all(d.station for d in densities)

    async def test_taxi_stands_pages(self, lta):
        stands = await call_with_backoff(lta.download_taxi_stands)

        assert len(stands) > 0

    async def test_passenger_volume_link(self, lta):
        try:
            url = await lta._resolve_download_link(Endpoint.PASSENGER_VOLUME_BUS)
        except RateLimitedError:
            pytest.skip("DataMall throttled the bulk dataset endpoint")

        assert url.scheme == "https"
