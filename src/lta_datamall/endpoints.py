"""DataMall endpoint catalog.

One enum member per REST resource. Values are paths relative to BASE_URL so
the base can be overridden (e.g. for a proxy) without touching the catalog.

Adding an endpoint:
  1. Add a member here
  2. Add a model in lta_datamall.models if the shape is new
  3. Add a one-line method to the matching client module
"""

from __future__ import annotations

from enum import Enum

BASE_URL = "https://datamall2.mytransport.sg/ltaodataservice/"

# DataMall serves list endpoints in fixed pages of this many records.
PAGE_SIZE = 500

# OData offset parameter used to request the next page.
SKIP_PARAM = "$skip"


class Endpoint(str, Enum):
    BUS_ARRIVAL = "v3/BusArrival"
    BUS_SERVICES = "BusServices"
    BUS_ROUTES = "BusRoutes"
    BUS_STOPS = "BusStops"
    PASSENGER_VOLUME_BUS = "PV/Bus"
    PASSENGER_VOLUME_OD_BUS = "PV/ODBus"
    PASSENGER_VOLUME_OD_TRAIN = "PV/ODTrain"
    PASSENGER_VOLUME_TRAIN = "PV/Train"
    TRAFFIC_FLOW = "TrafficFlow"
    TAXI_AVAILABILITY = "Taxi-Availability"
    TAXI_STANDS = "TaxiStands"
    TRAIN_SERVICE_ALERTS = "TrainServiceAlerts"
    FACILITIES_MAINTENANCE = "v2/FacilitiesMaintenance"
    STATION_CROWD_DENSITY_REALTIME = "PCDRealTime"
    STATION_CROWD_DENSITY_FORECAST = "PCDForecast"
    CAR_PARK_AVAILABILITY = "CarParkAvailabilityv2"
    BICYCLE_PARKING = "BicycleParkingv2"
    ESTIMATED_TRAVEL_TIMES = "EstTravelTimes"
    FAULTY_TRAFFIC_LIGHTS = "FaultyTrafficLights"
    ROAD_OPENINGS = "RoadOpenings"
    ROAD_WORKS = "RoadWorks"
    TRAFFIC_IMAGES = "Traffic-Imagesv2"
    TRAFFIC_INCIDENTS = "TrafficIncidents"
    TRAFFIC_SPEED_BANDS = "v3/TrafficSpeedBands"
    VMS = "VMS"

    @property
    def path(self) -> str:
        return self.value

    @property
    def url(self) -> str:
        """Absolute URL against the public DataMall host."""
        return self.url_for(BASE_URL)

    def url_for(self, base_url: str) -> str:
        return base_url.rstrip("/") + "/" + self.value


class TrainLine(str, Enum):
    """Rail lines accepted by the station crowd density endpoints."""

    CCL = "CCL"
    CEL = "CEL"
    CGL = "CGL"
    DTL = "DTL"
    EWL = "EWL"
    NEL = "NEL"
    NSL = "NSL"
    BPL = "BPL"
    SLRT = "SLRT"
    PLRT = "PLRT"
    TEL = "TEL"

    @property
    def code(self) -> str:
        return self.value

    @property
    def description(self) -> str:
        return _TRAIN_LINE_NAMES[self]


_TRAIN_LINE_NAMES: dict[TrainLine, str] = {
    TrainLine.CCL: "Circle Line",
    TrainLine.CEL: "Circle Line Extension (BayFront, Marina Bay)",
    TrainLine.CGL: "Changi Extension (Expo, Changi Airport)",
    TrainLine.DTL: "Downtown Line",
    TrainLine.EWL: "East West Line",
    TrainLine.NEL: "North East Line",
    TrainLine.NSL: "North South Line",
    TrainLine.BPL: "Bukit Panjang LRT",
    TrainLine.SLRT: "Sengkang LRT",
    TrainLine.PLRT: "Punggol LRT",
    TrainLine.TEL: "Thomson-East Coast Line",
}
