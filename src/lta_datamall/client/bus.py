"""Bus endpoints: real-time arrivals plus the static service, route and stop lists.

Arrivals are a single bare object per stop. Services, routes and stops are
network-wide datasets of several thousand rows, paged 500 at a time.
"""

from __future__ import annotations

from lta_datamall.client.base import BaseClient
from lta_datamall.endpoints import Endpoint
from lta_datamall.errors import InvalidURLError
from lta_datamall.models.bus import BusArrivals, BusRoute, BusService, BusStop


class BusAPI(BaseClient):
    async def get_bus_arrivals(
        self,
        bus_stop_code: str,
        service_no: str | None = None,
    ) -> BusArrivals:
        """Next three arrivals of every service at a stop, or only of `service_no`."""
        bus_stop_code = bus_stop_code.strip()
        if not bus_stop_code:
            raise InvalidURLError(Endpoint.BUS_ARRIVAL.url, "bus_stop_code must be non-empty")
        params = {"BusStopCode": bus_stop_code, "ServiceNo": service_no}
        return await self._fetch(Endpoint.BUS_ARRIVAL, BusArrivals, params)

    async def download_bus_services(self) -> list[BusService]:
        return await self._fetch_all(Endpoint.BUS_SERVICES, BusService)

    async def download_bus_routes(self) -> list[BusRoute]:
        """Every stop of every service, in route order (~26k rows)."""
        return await self._fetch_all(Endpoint.BUS_ROUTES, BusRoute)

    async def download_bus_stops(self) -> list[BusStop]:
        return await self._fetch_all(Endpoint.BUS_STOPS, BusStop)
