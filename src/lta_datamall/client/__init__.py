"""LandTransportClient: every DataMall endpoint on one object.

Each domain module contributes a BaseClient subclass with its endpoint
methods; this class simply combines them.

Adding an endpoint:
  1. Add a member to lta_datamall.endpoints.Endpoint
  2. Add a one-line method to the matching domain module here
  3. That's it: auth, decoding, paging and error mapping come from BaseClient
"""

from __future__ import annotations

from lta_datamall.client.base import ACCOUNT_KEY_HEADER, BaseClient
from lta_datamall.client.bus import BusAPI
from lta_datamall.client.datasets import DatasetAPI
from lta_datamall.client.parking import ParkingAPI
from lta_datamall.client.road import RoadAPI
from lta_datamall.client.taxi import TaxiAPI
from lta_datamall.client.train import TrainAPI


class LandTransportClient(BusAPI, TrainAPI, TaxiAPI, ParkingAPI, RoadAPI, DatasetAPI):
    """Async client for the LTA DataMall API.

    Usage:
        async with LandTransportClient(api_key="...") as lta:
            arrivals = await lta.get_bus_arrivals("83139")
            stops = await lta.download_bus_stops()

    One instance can serve any number of concurrent tasks.
    """


__all__ = [
    "ACCOUNT_KEY_HEADER",
    "BaseClient",
    "BusAPI",
    "DatasetAPI",
    "LandTransportClient",
    "ParkingAPI",
    "RoadAPI",
    "TaxiAPI",
    "TrainAPI",
]
