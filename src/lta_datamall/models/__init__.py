"""Typed Pydantic models for DataMall API responses.

Records keep every field DataMall returns under snake_case names; the
PascalCase wire keys are handled by aliases on LTAModel. List endpoints are
decoded through the generic Envelope[T] wrapper and unwrapped by the client,
so callers only ever see the record types below.
"""

from lta_datamall.models.bus import (
    BusArrivals,
    BusRoute,
    BusService,
    BusStop,
    NextBus,
    ServiceArrival,
)
from lta_datamall.models.datasets import DatasetFile, TrafficFlow
from lta_datamall.models.envelope import DownloadLink, Envelope, LTAModel
from lta_datamall.models.parking import BikePark, CarPark
from lta_datamall.models.road import (
    EstimatedTravelTime,
    FaultyTrafficLight,
    RoadEvent,
    TrafficAdvisory,
    TrafficImage,
    TrafficIncident,
    TrafficSpeedBand,
)
from lta_datamall.models.taxi import TaxiAvailability, TaxiStand
from lta_datamall.models.train import (
    AffectedSegment,
    AlertMessage,
    ForecastDensity,
    ForecastInterval,
    LiftMaintenance,
    RealTimeDensity,
    StationForecast,
    TrainServiceAlert,
    TrainServiceAlertResponse,
)

__all__ = [
    "AffectedSegment",
    "AlertMessage",
    "BikePark",
    "BusArrivals",
    "BusRoute",
    "BusService",
    "BusStop",
    "CarPark",
    "DatasetFile",
    "DownloadLink",
    "Envelope",
    "EstimatedTravelTime",
    "FaultyTrafficLight",
    "ForecastDensity",
    "ForecastInterval",
    "LTAModel",
    "LiftMaintenance",
    "NextBus",
    "RealTimeDensity",
    "RoadEvent",
    "ServiceArrival",
    "StationForecast",
    "TaxiAvailability",
    "TaxiStand",
    "TrafficAdvisory",
    "TrafficFlow",
    "TrafficImage",
    "TrafficIncident",
    "TrafficSpeedBand",
    "TrainServiceAlert",
    "TrainServiceAlertResponse",
]
