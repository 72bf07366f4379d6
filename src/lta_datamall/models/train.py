"""Typed models for rail endpoints: service alerts, lift maintenance, crowd density."""

from __future__ import annotations

from pydantic import BaseModel, Field

from lta_datamall.models.envelope import LTAModel


class AffectedSegment(LTAModel):
    line: str = ""
    direction: str = ""
    stations: str = ""
    free_public_bus: str = ""
    free_mrt_shuttle: str = Field(default="", alias="FreeMRTShuttle")
    mrt_shuttle_direction: str = Field(default="", alias="MRTShuttleDirection")


class AlertMessage(LTAModel):
    content: str = ""
    created_date: str = ""


class TrainServiceAlert(LTAModel):
    """Network-wide alert status. Status 1 means normal service, 2 a disruption."""

    status: int = 1
    affected_segments: list[AffectedSegment] = []
    messages: list[AlertMessage] = Field(default_factory=list, alias="Message")

    @property
    def is_disrupted(self) -> bool:
        return self.status != 1


class TrainServiceAlertResponse(BaseModel):
    """The alerts endpoint wraps a single object (not a list) in `value`."""

    value: TrainServiceAlert


class LiftMaintenance(LTAModel):
    line: str = ""
    station_code: str = ""
    station_name: str = ""
    lift_id: str = Field(default="", alias="LiftID")
    lift_desc: str = ""

    @property
    def record_id(self) -> str:
        return f"{self.station_code}_{self.lift_desc}"


class RealTimeDensity(LTAModel):
    station: str
    start_time: str = ""
    end_time: str = ""
    crowd_level: str = ""

    @property
    def record_id(self) -> str:
        return self.station


class ForecastInterval(LTAModel):
    start: str
    crowd_level: str = ""


class StationForecast(LTAModel):
    station: str
    intervals: list[ForecastInterval] = Field(default_factory=list, alias="Interval")

    @property
    def record_id(self) -> str:
        return self.station


class ForecastDensity(LTAModel):
    date: str
    stations: list[StationForecast] = []

    @property
    def record_id(self) -> str:
        return self.date
