"""Typed models for the bus endpoints (arrivals, services, routes, stops)."""

from __future__ import annotations

from pydantic import Field

from lta_datamall.models.envelope import LTAModel


class NextBus(LTAModel):
    """One predicted arrival. DataMall sends empty strings when no bus is due."""

    origin_code: str = ""
    destination_code: str = ""
    estimated_arrival: str = ""
    monitored: int = 0
    latitude: str = ""
    longitude: str = ""
    visit_number: str = ""
    load: str = ""
    feature: str = ""
    type: str = ""

    @property
    def is_scheduled(self) -> bool:
        return bool(self.estimated_arrival)


class ServiceArrival(LTAModel):
    """Next three arrivals of one service at a stop."""

    service_no: str
    operator: str = ""
    next_bus: NextBus = Field(default_factory=NextBus, alias="NextBus")
    next_bus2: NextBus = Field(default_factory=NextBus, alias="NextBus2")
    next_bus3: NextBus = Field(default_factory=NextBus, alias="NextBus3")

    @property
    def record_id(self) -> str:
        return self.service_no


class BusArrivals(LTAModel):
    """Bare-object response of the bus arrival endpoint."""

    bus_stop_code: str
    services: list[ServiceArrival] = []


class BusService(LTAModel):
    service_no: str
    operator: str = ""
    direction: int = 0
    category: str = ""
    origin_code: str = ""
    destination_code: str = ""
    am_peak_freq: str = Field(default="", alias="AM_Peak_Freq")
    am_offpeak_freq: str = Field(default="", alias="AM_Offpeak_Freq")
    pm_peak_freq: str = Field(default="", alias="PM_Peak_Freq")
    pm_offpeak_freq: str = Field(default="", alias="PM_Offpeak_Freq")
    loop_desc: str = ""

    @property
    def record_id(self) -> str:
        return f"{self.service_no}-{self.direction}"


class BusRoute(LTAModel):
    service_no: str
    operator: str = ""
    direction: int = 0
    stop_sequence: int = 0
    bus_stop_code: str = ""
    distance: float | None = None
    wd_first_bus: str = Field(default="", alias="WD_FirstBus")
    wd_last_bus: str = Field(default="", alias="WD_LastBus")
    sat_first_bus: str = Field(default="", alias="SAT_FirstBus")
    sat_last_bus: str = Field(default="", alias="SAT_LastBus")
    sun_first_bus: str = Field(default="", alias="SUN_FirstBus")
    sun_last_bus: str = Field(default="", alias="SUN_LastBus")

    @property
    def record_id(self) -> str:
        # Loop services revisit a stop, so the sequence number is part of the key.
        return f"{self.service_no}-{self.direction}-{self.stop_sequence}"


class BusStop(LTAModel):
    bus_stop_code: str
    road_name: str = ""
    description: str = ""
    latitude: float = 0.0
    longitude: float = 0.0

    @property
    def record_id(self) -> str:
        return self.bus_stop_code
