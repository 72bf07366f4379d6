"""Rail endpoints: service alerts, lift maintenance and station crowd density."""

from __future__ import annotations

from lta_datamall.client.base import BaseClient
from lta_datamall.endpoints import Endpoint, TrainLine
from lta_datamall.errors import InvalidURLError
from lta_datamall.models.train import (
    ForecastDensity,
    LiftMaintenance,
    RealTimeDensity,
    TrainServiceAlert,
    TrainServiceAlertResponse,
)


def _line_param(endpoint: Endpoint, line: TrainLine | str) -> dict[str, str]:
    try:
        return {"TrainLine": TrainLine(line).value}
    except ValueError as e:
        raise InvalidURLError(endpoint.url, f"unknown train line {line!r}") from e


class TrainAPI(BaseClient):
    async def download_train_service_alerts(self) -> TrainServiceAlert:
        response = await self._fetch(Endpoint.TRAIN_SERVICE_ALERTS, TrainServiceAlertResponse)
        return response.value

    async def download_facilities_maintenance(self) -> list[LiftMaintenance]:
        """Lifts currently under maintenance at MRT/LRT stations."""
        return await self._fetch_list(Endpoint.FACILITIES_MAINTENANCE, LiftMaintenance)

    async def download_realtime_density(self, line: TrainLine | str) -> list[RealTimeDensity]:
        """Current crowd level at each station of a line (refreshed every 10 minutes)."""
        endpoint = Endpoint.STATION_CROWD_DENSITY_REALTIME
        return await self._fetch_list(endpoint, RealTimeDensity, _line_param(endpoint, line))

    async def download_forecast_density(self, line: TrainLine | str) -> list[ForecastDensity]:
        """Forecast crowd levels in 30-minute intervals for each station of a line."""
        endpoint = Endpoint.STATION_CROWD_DENSITY_FORECAST
        return await self._fetch_list(endpoint, ForecastDensity, _line_param(endpoint, line))
