"""Tests for concurrent use of one client: key updates and parallel calls."""

import asyncio
import threading

import httpx
from lta_datamall import LandTransportClient
from lta_datamall.client.base import ACCOUNT_KEY_HEADER

from .conftest import make_client, records

KEY_A = "a" * 32
KEY_B = "b" * 32


class RoutingTransport(httpx.AsyncBaseTransport):
    """Answers by path and yields to the event loop before each response."""

    def __init__(self, routes: dict[str, list[dict]], on_request=None) -> None:
        self.routes = routes
        self.requests: list[httpx.Request] = []
        self.on_request = on_request

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.on_request is not None:
            self.on_request(request)
        await asyncio.sleep(0)
        name = request.url.path.rsplit("/", 1)[-1]
        if name not in self.routes:
            raise AssertionError(f"Unexpected request: {request.url}")
        return httpx.Response(200, json={"value": self.routes[name]})


class TestKeyUpdates:
    def test_configure_from_threads_while_reading(self):
        client = LandTransportClient(api_key=KEY_A)
        stop = threading.Event()
        seen: list[str] = []

        def writer(key: str) -> None:
            while not stop.is_set():
                client.configure(key)

        def reader() -> None:
            for _ in range(5000):
                seen.append(client._require_api_key())

        writers = [threading.Thread(target=writer, args=(k,)) for k in (KEY_A, KEY_B)]
        readers = [threading.Thread(target=reader) for _ in range(4)]
        for t in writers + readers:
            t.start()
        for t in readers:
            t.join()
        stop.set()
        for t in writers:
            t.join()

        assert len(seen) == 20000
        assert set(seen) <= {KEY_A, KEY_B}

    async def test_requests_carry_a_whole_key_while_it_changes(self):
        def toggle(request: httpx.Request) -> None:
            client.configure(KEY_B if request.headers[ACCOUNT_KEY_HEADER] == KEY_A else KEY_A)

        transport = RoutingTransport({"RoadWorks": []}, on_request=toggle)
        client = make_client(transport, api_key=KEY_A)

        await asyncio.gather(*(client.download_road_works() for _ in range(50)))

        sent = {r.headers[ACCOUNT_KEY_HEADER] for r in transport.requests}
        assert len(transport.requests) == 50
        assert sent <= {KEY_A, KEY_B}
        await client.close()

    async def test_configure_from_worker_thread_during_calls(self):
        transport = RoutingTransport({"RoadWorks": []})
        client = make_client(transport, api_key=KEY_A)

        worker = threading.Thread(target=client.configure, args=(KEY_B,))
        calls = asyncio.gather(*(client.download_road_works() for _ in range(20)))
        worker.start()
        await calls
        worker.join()

        assert {r.headers[ACCOUNT_KEY_HEADER] for r in transport.requests} <= {KEY_A, KEY_B}
        assert client._require_api_key() == KEY_B
        await client.close()


class TestParallelCalls:
    async def test_independent_calls_do_not_interfere(self):
        transport = RoutingTransport(
            {
                "BusStops": records(3),
                "Traffic-Imagesv2": [
                    {
                        "CameraID": "1701",
                        "Latitude": 1.3,
                        "Longitude": 103.8,
                        "ImageLink": "https://images.example.com/1701.jpg",
                    }
                ],
                "TaxiStands": [{"TaxiCode": "A01"}],
            }
        )
        client = make_client(transport)

        stops, images, stands = await asyncio.gather(
            client.download_bus_stops(),
            client.download_traffic_images(),
            client.download_taxi_stands(),
        )

        assert [s.bus_stop_code for s in stops] == ["00000", "00001", "00002"]
        assert images[0].camera_id == "1701"
        assert stands[0].taxi_code == "A01"
        assert client.request_count == 3
        await client.close()
