"""Typed models for the taxi endpoints."""

from __future__ import annotations

from lta_datamall.models.envelope import LTAModel


class TaxiAvailability(LTAModel):
    """Position of one available taxi."""

    latitude: float
    longitude: float


class TaxiStand(LTAModel):
    taxi_code: str
    latitude: float = 0.0
    longitude: float = 0.0
    bfa: str = ""
    ownership: str = ""
    type: str = ""
    name: str = ""

    @property
    def record_id(self) -> str:
        return self.taxi_code

    @property
    def is_barrier_free(self) -> bool:
        return self.bfa.lower() == "yes"
