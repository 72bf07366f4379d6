"""Typed models for car park availability and bicycle parking."""

from __future__ import annotations

from pydantic import Field

from lta_datamall.models.envelope import LTAModel


class CarPark(LTAModel):
    car_park_id: str = Field(alias="CarParkID")
    area: str = ""
    development: str = ""
    location: str = ""
    available_lots: int = 0
    lot_type: str = ""
    agency: str = ""

    @property
    def record_id(self) -> str:
        # One car park reports a row per lot type (C, H, Y).
        return f"{self.car_park_id}-{self.lot_type}"


class BikePark(LTAModel):
    description: str
    latitude: float = 0.0
    longitude: float = 0.0
    rack_type: str = ""
    rack_count: int = 0
    shelter_indicator: str = ""

    @property
    def record_id(self) -> str:
        return self.description

    @property
    def is_sheltered(self) -> bool:
        return self.shelter_indicator.upper() == "Y"
