"""Async typed client for the LTA DataMall transport API.

Create a client per application:

    from lta_datamall import LandTransportClient

    async with LandTransportClient(api_key="...") as lta:
        alert = await lta.download_train_service_alerts()

or, for scripts, use the process-wide default instance:

    import lta_datamall

    lta_datamall.configure("...")
    stops = await lta_datamall.shared().download_bus_stops()

The default instance owns one httpx.AsyncClient, so use it from a single
event loop.
"""

from __future__ import annotations

import threading

from lta_datamall.client import LandTransportClient
from lta_datamall.endpoints import BASE_URL, PAGE_SIZE, Endpoint, TrainLine
from lta_datamall.errors import (
    DecodingFailedError,
    HttpError,
    InvalidURLError,
    LandTransportError,
    MissingDownloadLinkError,
    NetworkError,
    NoAPIKeyError,
    RateLimitedError,
)
from lta_datamall.retry import call_with_backoff, with_backoff
from lta_datamall.settings import ClientSettings

_shared_client: LandTransportClient | None = None
_shared_lock = threading.Lock()


def shared() -> LandTransportClient:
    """Return the process-wide default client, creating it on first use."""
    global _shared_client
    with _shared_lock:
        if _shared_client is None:
            _shared_client = LandTransportClient()
        return _shared_client


def configure(api_key: str) -> LandTransportClient:
    """Set the API key of the default client. Repeat calls replace the key."""
    client = shared()
    client.configure(api_key)
    return client


__all__ = [
    "BASE_URL",
    "PAGE_SIZE",
    "ClientSettings",
    "DecodingFailedError",
    "Endpoint",
    "HttpError",
    "InvalidURLError",
    "LandTransportClient",
    "LandTransportError",
    "MissingDownloadLinkError",
    "NetworkError",
    "NoAPIKeyError",
    "RateLimitedError",
    "TrainLine",
    "call_with_backoff",
    "configure",
    "shared",
    "with_backoff",
]
