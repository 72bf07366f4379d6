"""Car park availability and bicycle parking."""

from __future__ import annotations

from lta_datamall.client.base import BaseClient
from lta_datamall.endpoints import Endpoint
from lta_datamall.models.parking import BikePark, CarPark


class ParkingAPI(BaseClient):
    async def download_car_park_availability(self) -> list[CarPark]:
        """Available lots for HDB, LTA and URA car parks, one row per lot type."""
        return await self._fetch_all(Endpoint.CAR_PARK_AVAILABILITY, CarPark)

    async def get_bike_parks(self, lat: float, long: float, radius: float = 0.5) -> list[BikePark]:
        """Bicycle parking within `radius` km of a point."""
        params = {"Lat": lat, "Long": long, "Dist": radius}
        return await self._fetch_list(Endpoint.BICYCLE_PARKING, BikePark, params)
