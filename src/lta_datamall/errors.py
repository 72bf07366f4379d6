"""Error taxonomy for the DataMall client.

Every failed call surfaces exactly one of these. Nothing is retried or
swallowed inside the library; the `retryable` flag tells callers which
failures are worth another attempt after a backoff (see lta_datamall.retry).

  NoAPIKeyError            - configure() was never called, or with an empty key
  InvalidURLError          - request URL could not be constructed
  RateLimitedError         - DataMall throttled us (it answers HTTP 500 for this)
  HttpError                - any other non-2xx status
  NetworkError             - transport failure: timeout, DNS, connection reset
  DecodingFailedError      - body did not match the expected shape
  MissingDownloadLinkError - bulk dataset metadata had no usable link
"""

from __future__ import annotations


class LandTransportError(Exception):
    """Base class for every error raised by the client."""

    retryable: bool = False


class NoAPIKeyError(LandTransportError):
    def __init__(self) -> None:
        super().__init__("No DataMall API key configured. Call configure(api_key) first.")


class InvalidURLError(LandTransportError):
    def __init__(self, url: str, reason: str | None = None) -> None:
        self.url = url
        detail = f": {reason}" if reason else ""
        super().__init__(f"Could not build request URL '{url}'{detail}")


class RateLimitedError(LandTransportError):
    """DataMall signals throttling with a 500 status rather than 429."""

    retryable = True

    def __init__(self, url: str, status_code: int = 500) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(f"Rate limited by DataMall (HTTP {status_code}) for {url}")


class HttpError(LandTransportError):
    def __init__(self, status_code: int, message: str | None = None, url: str = "") -> None:
        self.status_code = status_code
        self.message = message
        self.url = url
        text = f"HTTP {status_code}"
        if url:
            text += f" for {url}"
        if message:
            text += f" :: {message}"
        super().__init__(text)


class NetworkError(LandTransportError):
    retryable = True

    def __init__(self, underlying: Exception) -> None:
        self.underlying = underlying
        super().__init__(f"Network error: {underlying!r}")


class DecodingFailedError(LandTransportError):
    """The response was a 2xx but its body did not fit the target shape."""

    def __init__(self, underlying: Exception) -> None:
        self.underlying = underlying
        super().__init__(f"Failed to decode response: {underlying}")


class MissingDownloadLinkError(LandTransportError):
    def __init__(self, endpoint: str, link: str | None = None) -> None:
        self.endpoint = endpoint
        self.link = link
        if link:
            detail = f"link {link!r} is not a valid download URL"
        else:
            detail = "no download link returned"
        super().__init__(f"{endpoint}: {detail}")
