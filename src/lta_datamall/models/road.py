"""Typed models for road and traffic endpoints."""

from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

from pydantic import Field

from lta_datamall.models.envelope import LTAModel

SINGAPORE_TZ = ZoneInfo("Asia/Singapore")

# Layouts used by the faulty traffic light feed, e.g. "2024-03-01 09:30:00.0"
# and, on some records, the same without the fraction.
_FAULT_TIMESTAMP_FORMATS = ("%Y-%m-%d %H:%M:%S.%f", "%Y-%m-%d %H:%M:%S")


def _parse_fault_timestamp(raw: str) -> datetime | None:
    """Parse a fault timestamp as Singapore time. Unrecognised layouts give None."""
    raw = raw.strip()
    for layout in _FAULT_TIMESTAMP_FORMATS:
        try:
            parsed = datetime.strptime(raw, layout)
        except ValueError:
            continue
        return parsed.replace(tzinfo=SINGAPORE_TZ)
    return None


class EstimatedTravelTime(LTAModel):
    name: str = ""
    direction: int = 0
    far_end_point: str = ""
    start_point: str = ""
    end_point: str = ""
    est_time: int = 0


class FaultyTrafficLight(LTAModel):
    alarm_id: str = Field(default="", alias="AlarmID")
    node_id: str = Field(default="", alias="NodeID")
    type: int | str = ""
    start_date: str = ""
    end_date: str = ""
    message: str = ""

    @property
    def record_id(self) -> str:
        return self.alarm_id

    @property
    def start(self) -> datetime | None:
        return _parse_fault_timestamp(self.start_date)

    @property
    def end(self) -> datetime | None:
        return _parse_fault_timestamp(self.end_date)

    @property
    def is_scheduled_maintenance(self) -> bool:
        """Unplanned faults have no end date; scheduled work always does."""
        return bool(self.end_date)


class RoadEvent(LTAModel):
    """A road opening or road works entry; both endpoints share this shape."""

    event_id: str = Field(alias="EventID")
    start_date: str = ""
    end_date: str = ""
    svc_dept: str = ""
    road_name: str = ""
    other: str = ""

    @property
    def record_id(self) -> str:
        return self.event_id


class TrafficImage(LTAModel):
    camera_id: str = Field(alias="CameraID")
    latitude: float = 0.0
    longitude: float = 0.0
    image_link: str = ""

    @property
    def record_id(self) -> str:
        return self.camera_id


class TrafficIncident(LTAModel):
    type: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    message: str = ""

    @property
    def record_id(self) -> str:
        return f"{self.latitude}_{self.longitude}"


class TrafficSpeedBand(LTAModel):
    link_id: str = Field(alias="LinkID")
    road_name: str = ""
    road_category: str = ""
    speed_band: int = 0
    minimum_speed: str = ""
    maximum_speed: str = ""
    start_lon: str = ""
    start_lat: str = ""
    end_lon: str = ""
    end_lat: str = ""

    @property
    def record_id(self) -> str:
        return self.link_id


class TrafficAdvisory(LTAModel):
    """A message shown on a Variable Message Services (VMS) sign."""

    equipment_id: str = Field(alias="EquipmentID")
    latitude: float = 0.0
    longitude: float = 0.0
    message: str = ""

    @property
    def record_id(self) -> str:
        return self.equipment_id
