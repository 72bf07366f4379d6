"""Road and traffic endpoints."""

from __future__ import annotations

from lta_datamall.client.base import BaseClient
from lta_datamall.endpoints import Endpoint
from lta_datamall.models.road import (
    EstimatedTravelTime,
    FaultyTrafficLight,
    RoadEvent,
    TrafficAdvisory,
    TrafficImage,
    TrafficIncident,
    TrafficSpeedBand,
)


class RoadAPI(BaseClient):
    async def download_estimated_travel_times(self) -> list[EstimatedTravelTime]:
        return await self._fetch_list(Endpoint.ESTIMATED_TRAVEL_TIMES, EstimatedTravelTime)

    async def download_faulty_traffic_lights(self) -> list[FaultyTrafficLight]:
        return await self._fetch_list(Endpoint.FAULTY_TRAFFIC_LIGHTS, FaultyTrafficLight)

    async def download_road_openings(self) -> list[RoadEvent]:
        return await self._fetch_list(Endpoint.ROAD_OPENINGS, RoadEvent)

    async def download_road_works(self) -> list[RoadEvent]:
        return await self._fetch_list(Endpoint.ROAD_WORKS, RoadEvent)

    async def download_traffic_images(self) -> list[TrafficImage]:
        """Camera snapshots. Image links expire after five minutes."""
        return await self._fetch_list(Endpoint.TRAFFIC_IMAGES, TrafficImage)

    async def download_traffic_incidents(self) -> list[TrafficIncident]:
        return await self._fetch_list(Endpoint.TRAFFIC_INCIDENTS, TrafficIncident)

    async def download_traffic_speed_bands(self) -> list[TrafficSpeedBand]:
        return await self._fetch_all(Endpoint.TRAFFIC_SPEED_BANDS, TrafficSpeedBand)

    async def download_traffic_advisories(self) -> list[TrafficAdvisory]:
        """Messages currently shown on expressway VMS signs."""
        return await self._fetch_list(Endpoint.VMS, TrafficAdvisory)
