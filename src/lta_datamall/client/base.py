"""Base client: the request pipeline shared by every DataMall endpoint.

Endpoint methods never talk to httpx directly. They call one of four
helpers, which all funnel through `_fetch` so that failures are classified
the same way everywhere:

  _fetch            - one authenticated GET, decoded into a given shape
  _fetch_list       - _fetch of an Envelope[T], unwrapped to list[T]
  _fetch_all        - _fetch_list repeated with $skip until a short page
  _download_dataset - resolve a bulk dataset's signed link, then GET it

Nothing here retries or sleeps. Rate limiting, transport failures and bad
payloads each surface as a distinct LandTransportError subclass and the
caller decides what to do (see lta_datamall.retry for an opt-in policy).

The API key is the only mutable shared state. It lives behind a lock that
is never held across an await; each call takes one snapshot of it up front
and uses that for its whole lifetime, including every page of a pagination
loop.
"""

from __future__ import annotations

import logging
import threading
from functools import lru_cache
from pathlib import Path
from typing import Any, Self, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from lta_datamall.endpoints import BASE_URL, PAGE_SIZE, SKIP_PARAM, Endpoint
from lta_datamall.errors import (
    DecodingFailedError,
    HttpError,
    InvalidURLError,
    MissingDownloadLinkError,
    NetworkError,
    NoAPIKeyError,
    RateLimitedError,
)
from lta_datamall.models.datasets import DatasetFile
from lta_datamall.models.envelope import DownloadLink, Envelope
from lta_datamall.settings import DEFAULT_TIMEOUT_SECONDS, ClientSettings

logger = logging.getLogger(__name__)

T = TypeVar("T")

ACCOUNT_KEY_HEADER = "AccountKey"

# DataMall overloads 500 to mean "too many requests".
RATE_LIMIT_STATUS = 500

QueryParams = dict[str, str | int | float | None]


# Keyed by decode shape; the set is fixed by the endpoint models, so it stays small.
@lru_cache(maxsize=None)
def _adapter(shape: Any) -> TypeAdapter[Any]:
    return TypeAdapter(shape)


class BaseClient:
    """HTTP client lifecycle, authentication, decoding, pagination and link resolution.

    Subclasses add endpoint methods as one-line calls into the helpers below.
    Pass `http_client` to supply your own transport (timeouts, proxies, a
    mock in tests); a client passed in is never closed by this object.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str = BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self._api_key: str | None = None
        self._api_key_lock = threading.Lock()
        self._client = http_client
        self._owns_client = http_client is None
        self.request_count: int = 0
        if api_key is not None:
            self.configure(api_key)

    @classmethod
    def from_settings(cls, settings: ClientSettings, **kwargs: Any) -> Self:
        return cls(
            settings.api_key,
            base_url=settings.base_url,
            timeout=settings.timeout_seconds,
            **kwargs,
        )

    @classmethod
    def from_env(cls, env_file: str | Path | None = None, **kwargs: Any) -> Self:
        """Build a client from LTA_* environment variables (and a .env file)."""
        return cls.from_settings(ClientSettings.from_env(env_file), **kwargs)

    # ------------------------------------------------------------------
    # Session configuration
    # ------------------------------------------------------------------

    def configure(self, api_key: str) -> None:
        """Set (or replace) the AccountKey sent with every request."""
        with self._api_key_lock:
            self._api_key = api_key

    @property
    def is_configured(self) -> bool:
        with self._api_key_lock:
            key = self._api_key
        return bool(key and key.strip())

    def _require_api_key(self) -> str:
        with self._api_key_lock:
            key = self._api_key
        if not key or not key.strip():
            raise NoAPIKeyError()
        return key

    # ------------------------------------------------------------------
    # Transport lifecycle
    # ------------------------------------------------------------------

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the underlying HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout, follow_redirects=True)
            self._owns_client = True
        return self._client

    async def close(self) -> None:
        """Close the HTTP client if this object created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    # ------------------------------------------------------------------
    # Request building and response validation
    # ------------------------------------------------------------------

    def _build_url(self, endpoint: Endpoint, params: QueryParams | None = None) -> httpx.URL:
        raw = endpoint.url_for(self.base_url)
        query = {k: v for k, v in (params or {}).items() if v is not None}
        try:
            url = httpx.URL(raw, params=query)
        except (httpx.InvalidURL, TypeError) as e:
            raise InvalidURLError(raw, str(e)) from e
        if url.scheme not in ("http", "https") or not url.host:
            raise InvalidURLError(raw, "expected an absolute http(s) URL")
        return url

    def _authenticated_request(self, url: httpx.URL, api_key: str) -> httpx.Request:
        headers = {ACCOUNT_KEY_HEADER: api_key, "Accept": "application/json"}
        return self._get_client().build_request("GET", url, headers=headers)

    async def _send(self, request: httpx.Request) -> httpx.Response:
        """Perform exactly one round trip. Transport failures become NetworkError."""
        self.request_count += 1
        logger.debug(f"GET {request.url}")
        try:
            return await self._get_client().send(request)
        except httpx.TransportError as e:
            raise NetworkError(e) from e

    @staticmethod
    def _check_response(response: httpx.Response) -> None:
        """Classify a completed response. Runs before any attempt to decode the body."""
        if response.is_success:
            return
        url = str(response.request.url)
        if response.status_code == RATE_LIMIT_STATUS:
            logger.warning(f"DataMall rate limited request to {url}")
            raise RateLimitedError(url)
        message = response.text[:200] or None
        raise HttpError(response.status_code, message, url=url)

    @staticmethod
    def _decode(response: httpx.Response, shape: Any) -> Any:
        try:
            return _adapter(shape).validate_json(response.content)
        except ValidationError as e:
            raise DecodingFailedError(e) from e

    # ------------------------------------------------------------------
    # Typed fetch and decode
    # ------------------------------------------------------------------

    async def _fetch(
        self,
        endpoint: Endpoint,
        shape: type[T],
        params: QueryParams | None = None,
        *,
        api_key: str | None = None,
    ) -> T:
        """Fetch one endpoint and decode the body as `shape`."""
        key = api_key or self._require_api_key()
        url = self._build_url(endpoint, params)
        response = await self._send(self._authenticated_request(url, key))
        self._check_response(response)
        return self._decode(response, shape)

    async def _fetch_list(
        self,
        endpoint: Endpoint,
        item_type: type[T],
        params: QueryParams | None = None,
    ) -> list[T]:
        """Fetch a single `{"value": [...]}` response and return its records."""
        envelope = await self._fetch(endpoint, Envelope[item_type], params)
        return envelope.value

    # ------------------------------------------------------------------
    # Pagination
    # ------------------------------------------------------------------

    async def _fetch_all(
        self,
        endpoint: Endpoint,
        item_type: type[T],
        params: QueryParams | None = None,
    ) -> list[T]:
        """Collect every record of a paginated endpoint.

        DataMall serves PAGE_SIZE records per call and signals the last page
        only by returning fewer than that (possibly none), so a dataset whose
        size is an exact multiple of PAGE_SIZE costs one extra, empty request.
        Pages are fetched one at a time; any error aborts the whole collection.
        """
        api_key = self._require_api_key()
        shape = Envelope[item_type]
        records: list[T] = []
        skip = 0
        pages = 0

        while True:
            page_params: QueryParams = {**(params or {}), SKIP_PARAM: skip}
            page = await self._fetch(endpoint, shape, page_params, api_key=api_key)
            records.extend(page.value)
            pages += 1
            if len(page.value) < PAGE_SIZE:
                break
            skip += PAGE_SIZE

        logger.info(f"{endpoint.name}: fetched {len(records)} records in {pages} pages")
        return records

    # ------------------------------------------------------------------
    # Bulk datasets (two hops: metadata link, then payload)
    # ------------------------------------------------------------------

    async def _resolve_download_link(
        self,
        endpoint: Endpoint,
        params: QueryParams | None = None,
    ) -> httpx.URL:
        """First hop: read the signed download link from the dataset's metadata."""
        envelope = await self._fetch(endpoint, Envelope[DownloadLink], params)
        link = envelope.value[0].link.strip() if envelope.value else ""
        if not link:
            raise MissingDownloadLinkError(endpoint.name)
        try:
            url = httpx.URL(link)
        except httpx.InvalidURL as e:
            raise MissingDownloadLinkError(endpoint.name, link) from e
        if url.scheme not in ("http", "https") or not url.host:
            raise MissingDownloadLinkError(endpoint.name, link)
        return url

    async def _download(self, url: httpx.URL) -> httpx.Response:
        """Second hop: plain GET of a signed link.

        The link carries its own signature, so the AccountKey header is not sent.
        """
        response = await self._send(self._get_client().build_request("GET", url))
        self._check_response(response)
        return response

    async def _download_dataset(
        self,
        endpoint: Endpoint,
        params: QueryParams | None = None,
    ) -> DatasetFile:
        """Fetch an opaque bulk payload (ZIP/CSV) and name it after the link's last path segment."""
        url = await self._resolve_download_link(endpoint, params)
        response = await self._download(url)
        filename = url.path.rsplit("/", 1)[-1]
        logger.info(f"{endpoint.name}: downloaded '{filename}' ({len(response.content)} bytes)")
        return DatasetFile(filename=filename, content=response.content)

    async def _download_json(
        self,
        endpoint: Endpoint,
        shape: type[T],
        params: QueryParams | None = None,
    ) -> T:
        """Fetch a bulk dataset whose payload is itself JSON and decode it as `shape`."""
        url = await self._resolve_download_link(endpoint, params)
        response = await self._download(url)
        return self._decode(response, shape)
