"""Taxi endpoints. Both are paged; availability alone is usually a few thousand rows."""

from __future__ import annotations

from lta_datamall.client.base import BaseClient
from lta_datamall.endpoints import Endpoint
from lta_datamall.models.taxi import TaxiAvailability, TaxiStand


class TaxiAPI(BaseClient):
    async def download_taxi_availability(self) -> list[TaxiAvailability]:
        """Positions of all taxis currently available for hire."""
        return await self._fetch_all(Endpoint.TAXI_AVAILABILITY, TaxiAvailability)

    async def download_taxi_stands(self) -> list[TaxiStand]:
        return await self._fetch_all(Endpoint.TAXI_STANDS, TaxiStand)
