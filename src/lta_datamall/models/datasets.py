"""Models for bulk datasets served behind a signed download link.

The passenger volume endpoints hand back a ZIP of CSVs; those are returned
as an opaque DatasetFile. Traffic flow's second hop is JSON and is decoded
into TrafficFlow records.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from lta_datamall.models.envelope import LTAModel

_ZIP_MAGIC = b"PK\x03\x04"


class DatasetFile(BaseModel):
    """Raw payload of a bulk dataset plus the filename taken from its link."""

    filename: str
    content: bytes

    @property
    def size(self) -> int:
        return len(self.content)

    @property
    def is_zip(self) -> bool:
        return self.content.startswith(_ZIP_MAGIC)


class TrafficFlow(LTAModel):
    """Hourly average traffic volume on one road link."""

    link_id: str = Field(alias="LinkID")
    date: str = ""
    hour_of_date: int = 0
    volume: float = 0
    start_lon: str | float = ""
    start_lat: str | float = ""
    end_lon: str | float = ""
    end_lat: str | float = ""
    road_name: str = ""
    road_cat: str | int = ""

    @property
    def record_id(self) -> str:
        return f"{self.link_id}-{self.date}-{self.hour_of_date}"
