"""Bulk dataset endpoints: passenger volumes and traffic flow.

These don't return data inline. The first call answers with a signed,
short-lived link; the payload is fetched from that link in a second call.
DataMall throttles this pair harder than anything else, so expect
RateLimitedError under load and back off before retrying.
"""

from __future__ import annotations

from lta_datamall.client.base import BaseClient
from lta_datamall.endpoints import Endpoint
from lta_datamall.models.datasets import DatasetFile, TrafficFlow
from lta_datamall.models.envelope import Envelope


class DatasetAPI(BaseClient):
    async def download_passenger_volume_by_bus_stop(self) -> DatasetFile:
        """Monthly tap-in/tap-out volume per bus stop (ZIP of CSV)."""
        return await self._download_dataset(Endpoint.PASSENGER_VOLUME_BUS)

    async def download_passenger_volume_by_origin_destination_bus_stop(self) -> DatasetFile:
        return await self._download_dataset(Endpoint.PASSENGER_VOLUME_OD_BUS)

    async def download_passenger_volume_by_origin_destination_train_station(self) -> DatasetFile:
        return await self._download_dataset(Endpoint.PASSENGER_VOLUME_OD_TRAIN)

    async def download_passenger_volume_by_train_station(self) -> DatasetFile:
        return await self._download_dataset(Endpoint.PASSENGER_VOLUME_TRAIN)

    async def download_traffic_flow(self) -> list[TrafficFlow]:
        """Hourly traffic volume per road link, decoded from the linked JSON file."""
        envelope = await self._download_json(Endpoint.TRAFFIC_FLOW, Envelope[TrafficFlow])
        return envelope.value
